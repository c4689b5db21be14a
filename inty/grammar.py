"""Grammar-driven parser for the Inty language.

This module is an alternate front-end to `inty.lexer` + `inty.parser`.
The raw source is fed into a Lark LALR parser configured with a grammar
for the Inty language, and the resulting parse tree is transformed into
the same AST the hand-written parser produces. Lark errors are re-raised
as the package's own `LexError`/`ParseError` so callers see one error
model whichever front-end is used.

The grammar mirrors the precedence ladder of the recursive-descent
parser. The grammar has two LALR shift/reduce conflicts, which Lark
resolves by shifting. This gives the same answers as the
hand-written parser: `else` binds to the nearest `if`, and an operator
after an `if` test continues the test expression. The basic lexer keeps
`let`, `if`, `else`, `true` and `false` reserved in every position.

The `parse_source` function is the public entry point.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List

from lark import Lark, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken, VisitError

from .ast import (
    Binary, BinOp, Block, Bool, ExprStmt, Ident, If, Integer, Let,
    ListLit, Logical, LogOp, Relational, RelOp, Stmt, Unary, UnOp,
)
from .errors import ExpectedTokenError, IntyError, InvalidExpressionError, LexError, ParseError
from .lexer import tokenize
from .tokens import Token
from .values import INT_MAX


INTY_GRAMMAR = r"""
    ?start: program
    program: (statement (";" statement)* ";"?)?

    // Statements
    ?statement: if_stmt
              | let_stmt
              | block
              | expr_stmt

    if_stmt: "if" logic_or statement ("else" statement)?
    let_stmt: "let" IDENT "=" expression
    block: "{" statement (";" statement)* ";"? "}"
    expr_stmt: expression

    // Expressions with precedence
    ?expression: logic_or
    ?logic_or: logic_and (OR logic_and)*
    ?logic_and: relational (AND relational)*
    ?relational: additive (REL_OP additive)*
    ?additive: multiplicative ((PLUS | MINUS) multiplicative)*
    ?multiplicative: power ((STAR | SLASH) power)*
    ?power: primary "^" power           -> pow
          | (PLUS | MINUS | BANG) power -> unary
          | primary
    ?primary: INT                       -> integer
            | "true"                    -> true
            | "false"                   -> false
            | IDENT                     -> ident
            | "(" expression ")"
            | list_lit
    list_lit: "[" expression? ("," expression?)* "]"

    // Tokens
    OR: "||"
    AND: "&&"
    REL_OP: "==" | "!=" | ">=" | "<=" | ">" | "<"
    PLUS: "+"
    MINUS: "-"
    STAR: "*"
    SLASH: "/"
    BANG: "!"
    INT: /[0-9]+/
    IDENT: /[A-Za-z_][A-Za-z0-9_]*/

    %ignore /[ \t\r\n]+/
"""


INTY_PARSER = Lark(
    INTY_GRAMMAR,
    parser='lalr',
    lexer='basic',
    propagate_positions=True,
    maybe_placeholders=False,
)


def fold_left(items, node_type, op_type):
    """Fold `operand (OP operand)*` children into a left-associative tree."""
    left = items[0]
    i = 1
    while i < len(items):
        op = items[i]
        right = items[i + 1]
        left = node_type(op_type(str(op)), left, right)
        i += 2
    return left


class ASTTransformer(Transformer):
    """Transforms the raw parse tree into an AST."""

    def program(self, items) -> List[Stmt]:
        return list(items)

    def if_stmt(self, items):
        test = items[0]
        branch = items[1]
        else_branch = items[2] if len(items) > 2 else None
        return If(test, branch, else_branch)

    def let_stmt(self, items):
        return Let(str(items[0]), items[1])

    def block(self, items):
        return Block(tuple(items))

    def expr_stmt(self, items):
        return ExprStmt(items[0])

    # Expressions
    def logic_or(self, items):
        return fold_left(items, Logical, LogOp)

    def logic_and(self, items):
        return fold_left(items, Logical, LogOp)

    def relational(self, items):
        return fold_left(items, Relational, RelOp)

    def additive(self, items):
        return fold_left(items, Binary, BinOp)

    def multiplicative(self, items):
        return fold_left(items, Binary, BinOp)

    def pow(self, items):
        return Binary(BinOp.POW, items[0], items[1])

    def unary(self, items):
        return Unary(UnOp(str(items[0])), items[1])

    def integer(self, items):
        token = items[0]
        value = int(token.value)
        if value > INT_MAX:
            raise LexError(token.value, 'number too large to fit in a 32-bit integer', token.line, token.column)
        return Integer(value)

    def true(self, items):
        return Bool(True)

    def false(self, items):
        return Bool(False)

    def ident(self, items):
        return Ident(str(items[0]))

    def list_lit(self, items):
        return ListLit(tuple(items))


# Terminals that close a construct, or that are the only way to continue
# one, are reported as "expected X, found Y".
EXPECTED_SPELLINGS = {
    'RPAR': ')',
    'RSQB': ']',
    'RBRACE': '}',
    'EQUAL': '=',
    'IDENT': 'identifier',
}
CLOSING_TERMINALS = ('RPAR', 'RSQB', 'RBRACE')


def to_token(lark_token) -> Token:
    """Re-lex a Lark token into the package's own `Token`."""
    token = tokenize(lark_token.value)[0]
    return replace(token, line=lark_token.line, column=lark_token.column)


def end_of_input(source: str) -> ParseError:
    tokens = list(INTY_PARSER.lex(source))
    if not tokens:
        return ParseError("unexpected end of input")
    last = to_token(tokens[-1])
    return ParseError(f"unexpected end of input after '{last}'", last)


def translate_error(exc: UnexpectedInput, source: str) -> IntyError:
    """Map a Lark parse failure onto the errors the hand-written parser raises."""
    if isinstance(exc, UnexpectedCharacters):
        if exc.char in '&|':
            return LexError(exc.char, f"expected {exc.char}{exc.char}", exc.line, exc.column)
        return LexError(exc.char, None, exc.line, exc.column)
    if not isinstance(exc, UnexpectedToken) or exc.token.type == '$END':
        return end_of_input(source)

    found = to_token(exc.token)
    accepts = exc.accepts or exc.expected
    closing = [name for name in CLOSING_TERMINALS if name in accepts]
    if len(closing) == 1:
        return ExpectedTokenError(EXPECTED_SPELLINGS[closing[0]], found)
    if len(accepts) == 1 and next(iter(accepts)) in EXPECTED_SPELLINGS:
        return ExpectedTokenError(EXPECTED_SPELLINGS[next(iter(accepts))], found)
    # a finished top-level statement not followed by ';'
    if 'SEMICOLON' in accepts and '$END' in accepts:
        return InvalidExpressionError("tokens remaining after parsing", found)
    return ParseError(f"unexpected token {found}", found)


def parse_source(source: str) -> List[Stmt]:
    """Parse Inty source code into a list of statements using the Lark grammar."""
    try:
        tree = INTY_PARSER.parse(source)
    except UnexpectedInput as exc:
        raise translate_error(exc, source) from None
    try:
        return ASTTransformer().transform(tree)
    except VisitError as exc:
        if isinstance(exc.orig_exc, IntyError):
            raise exc.orig_exc from None
        raise
