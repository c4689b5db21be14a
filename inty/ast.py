"""Abstract Syntax Tree (AST) definitions for the Inty language.

The AST classes defined in this module represent the syntactic structure
of parsed Inty programs. Both front-ends (the hand-written parser and the
Lark grammar) build these nodes, and the interpreter evaluates them.
Nodes are frozen dataclasses: once built they are never mutated, and two
trees compare equal when their shapes and payloads match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .tokens import Token, TokenKind


class UnOp(Enum):
    """An unary operator (e.g. -[int], +[int], ![bool])."""
    PLUS = '+'
    MINUS = '-'
    NEGATE = '!'

    @classmethod
    def from_token(cls, token: Token) -> 'UnOp':
        return cls(token.kind.value)


class BinOp(Enum):
    """A binary arithmetic operator (e.g. [int] + [int])."""
    ADD = '+'
    SUB = '-'
    MUL = '*'
    DIV = '/'
    POW = '^'

    @classmethod
    def from_token(cls, token: Token) -> 'BinOp':
        return cls(token.kind.value)


class LogOp(Enum):
    """A logical operator (e.g. [bool] && [bool])."""
    OR = '||'
    AND = '&&'

    @classmethod
    def from_token(cls, token: Token) -> 'LogOp':
        return cls(token.kind.value)


class RelOp(Enum):
    """A relational operator (e.g. [int] >= [int])."""
    EQ = '=='
    NE = '!='
    GT = '>'
    LT = '<'
    GTE = '>='
    LTE = '<='

    @classmethod
    def from_token(cls, token: Token) -> 'RelOp':
        return cls(token.kind.value)


UNARY_TOKENS = (TokenKind.PLUS, TokenKind.HYPHEN, TokenKind.BANG)
ADDITIVE_TOKENS = (TokenKind.PLUS, TokenKind.HYPHEN)
MULTIPLICATIVE_TOKENS = (TokenKind.STAR, TokenKind.SLASH)
RELATIONAL_TOKENS = (
    TokenKind.REL_EQ, TokenKind.REL_NE, TokenKind.REL_GT,
    TokenKind.REL_LT, TokenKind.REL_GTE, TokenKind.REL_LTE,
)


@dataclass(frozen=True)
class Node:
    """Base class for all AST nodes."""
    pass


@dataclass(frozen=True)
class Expr(Node):
    """Base class for nodes that evaluate to a single value."""
    pass


@dataclass(frozen=True)
class Integer(Expr):
    value: int


@dataclass(frozen=True)
class Bool(Expr):
    value: bool


@dataclass(frozen=True)
class Ident(Expr):
    name: str


@dataclass(frozen=True)
class Unary(Expr):
    operator: UnOp
    operand: Expr


@dataclass(frozen=True)
class Binary(Expr):
    operator: BinOp
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class Logical(Expr):
    operator: LogOp
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class Relational(Expr):
    operator: RelOp
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class ListLit(Expr):
    elements: Tuple[Expr, ...]


@dataclass(frozen=True)
class Stmt(Node):
    """Base class for statements; a program is a list of these."""
    pass


@dataclass(frozen=True)
class ExprStmt(Stmt):
    expr: Expr


@dataclass(frozen=True)
class Let(Stmt):
    ident: str
    expr: Expr


@dataclass(frozen=True)
class If(Stmt):
    test: Expr
    branch: Stmt
    else_branch: Optional[Stmt] = None


@dataclass(frozen=True)
class Block(Stmt):
    statements: Tuple[Stmt, ...]
