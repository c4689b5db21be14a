"""Recursive-descent parser for the Inty language.

Each precedence level has its own method, lowest to highest:

    or -> and -> relational -> additive -> multiplicative -> power -> unary -> primary

The binary levels are left-associative loops, except `power` which
recurses into itself for its right operand. Unary operators parse their
operand through `power`, so `-3 ^ 2` means `-(3 ^ 2)`.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .ast import (
    ADDITIVE_TOKENS, MULTIPLICATIVE_TOKENS, RELATIONAL_TOKENS, UNARY_TOKENS,
    Binary, BinOp, Block, Bool, Expr, ExprStmt, Ident, If, Integer, Let,
    ListLit, Logical, LogOp, Relational, RelOp, Stmt, Unary, UnOp,
)
from .errors import ExpectedTokenError, InvalidExpressionError, ParseError
from .tokens import Token, TokenKind


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def match(self, *kinds: TokenKind) -> bool:
        token = self.peek()
        return token is not None and token.kind in kinds

    def current(self) -> Token:
        """Return the current token, failing if the input is exhausted."""
        token = self.peek()
        if token is None:
            raise self.end_of_input()
        return token

    def advance(self) -> Token:
        token = self.current()
        self.pos += 1
        return token

    def consume(self, kind: TokenKind) -> Token:
        token = self.current()
        if token.kind != kind:
            raise ExpectedTokenError(kind.value, token)
        self.pos += 1
        return token

    def end_of_input(self) -> ParseError:
        if not self.tokens:
            return ParseError("unexpected end of input")
        last = self.tokens[-1]
        return ParseError(f"unexpected end of input after '{last}'", last)

    # Statements

    def parse_program(self) -> List[Stmt]:
        statements: List[Stmt] = []
        if self.peek() is None:
            return statements
        while True:
            statements.append(self.parse_statement())
            if not self.match(TokenKind.SEMICOLON):
                break
            self.consume(TokenKind.SEMICOLON)
            # a single trailing semicolon ends the program
            if self.peek() is None:
                break
        if self.peek() is not None:
            raise InvalidExpressionError("tokens remaining after parsing", self.peek())
        return statements

    def parse_statement(self) -> Stmt:
        token = self.current()
        if token.kind == TokenKind.IF:
            return self.parse_if()
        if token.kind == TokenKind.LET:
            return self.parse_let()
        if token.kind == TokenKind.LEFT_BRACE:
            return self.parse_block()
        return ExprStmt(self.parse_expression())

    def parse_if(self) -> If:
        self.consume(TokenKind.IF)
        test = self.parse_or()
        branch = self.parse_statement()
        else_branch: Optional[Stmt] = None
        if self.match(TokenKind.ELSE):
            self.consume(TokenKind.ELSE)
            else_branch = self.parse_statement()
        return If(test, branch, else_branch)

    def parse_let(self) -> Let:
        self.consume(TokenKind.LET)
        ident = self.consume(TokenKind.IDENT)
        self.consume(TokenKind.EQUAL)
        expr = self.parse_expression()
        return Let(ident.value, expr)

    def parse_block(self) -> Block:
        brace = self.consume(TokenKind.LEFT_BRACE)
        if self.match(TokenKind.RIGHT_BRACE):
            raise ParseError("block must contain at least one statement", brace)
        statements: List[Stmt] = [self.parse_statement()]
        while self.match(TokenKind.SEMICOLON):
            self.consume(TokenKind.SEMICOLON)
            if self.match(TokenKind.RIGHT_BRACE):
                break
            statements.append(self.parse_statement())
        self.consume(TokenKind.RIGHT_BRACE)
        return Block(tuple(statements))

    # Expressions

    def parse_expression(self) -> Expr:
        return self.parse_or()

    def parse_or(self) -> Expr:
        node = self.parse_and()
        while self.match(TokenKind.OR):
            op_token = self.advance()
            right = self.parse_and()
            node = Logical(LogOp.from_token(op_token), node, right)
        return node

    def parse_and(self) -> Expr:
        node = self.parse_relational()
        while self.match(TokenKind.AND):
            op_token = self.advance()
            right = self.parse_relational()
            node = Logical(LogOp.from_token(op_token), node, right)
        return node

    def parse_relational(self) -> Expr:
        node = self.parse_additive()
        while self.match(*RELATIONAL_TOKENS):
            op_token = self.advance()
            right = self.parse_additive()
            node = Relational(RelOp.from_token(op_token), node, right)
        return node

    def parse_additive(self) -> Expr:
        node = self.parse_multiplicative()
        while self.match(*ADDITIVE_TOKENS):
            op_token = self.advance()
            right = self.parse_multiplicative()
            node = Binary(BinOp.from_token(op_token), node, right)
        return node

    def parse_multiplicative(self) -> Expr:
        node = self.parse_power()
        while self.match(*MULTIPLICATIVE_TOKENS):
            op_token = self.advance()
            right = self.parse_power()
            node = Binary(BinOp.from_token(op_token), node, right)
        return node

    def parse_power(self) -> Expr:
        # right-associative: 2 ^ 3 ^ 4 is 2 ^ (3 ^ 4)
        node = self.parse_unary()
        if self.match(TokenKind.CARET):
            self.advance()
            right = self.parse_power()
            return Binary(BinOp.POW, node, right)
        return node

    def parse_unary(self) -> Expr:
        if self.match(*UNARY_TOKENS):
            op_token = self.advance()
            operand = self.parse_power()
            return Unary(UnOp.from_token(op_token), operand)
        return self.parse_primary()

    def parse_primary(self) -> Expr:
        token = self.advance()
        if token.kind == TokenKind.INTEGER:
            return Integer(token.value)
        if token.kind == TokenKind.TRUE:
            return Bool(True)
        if token.kind == TokenKind.FALSE:
            return Bool(False)
        if token.kind == TokenKind.IDENT:
            return Ident(token.value)
        if token.kind == TokenKind.LEFT_PAREN:
            expr = self.parse_expression()
            self.consume(TokenKind.RIGHT_PAREN)
            return expr
        if token.kind == TokenKind.LEFT_BRACKET:
            return ListLit(self.parse_list_elements())
        raise ParseError(f"unexpected token {token}", token)

    def parse_list_elements(self) -> Tuple[Expr, ...]:
        # commas are skipped eagerly, so [,1,,2,] is [1, 2]
        elements: List[Expr] = []
        while True:
            while self.match(TokenKind.COMMA):
                self.advance()
            if self.match(TokenKind.RIGHT_BRACKET):
                self.advance()
                return tuple(elements)
            elements.append(self.parse_expression())
            if not self.match(TokenKind.COMMA):
                self.consume(TokenKind.RIGHT_BRACKET)
                return tuple(elements)


def parse(tokens: List[Token]) -> List[Stmt]:
    """Parse a token list into the program's statements, in evaluation order."""
    return Parser(tokens).parse_program()
