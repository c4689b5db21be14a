"""Token model for the Inty language.

Every lexical unit is a `Token` carrying a `TokenKind`. Integer literals
and identifiers carry a payload in `value`; every other kind is a bare
marker whose enum value is its exact source spelling, so `str(token)`
always reproduces what was written.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class TokenKind(Enum):
    # Values
    INTEGER = 'integer'
    IDENT = 'identifier'

    # Keywords
    IF = 'if'
    ELSE = 'else'
    LET = 'let'
    TRUE = 'true'
    FALSE = 'false'

    # Logic
    OR = '||'
    AND = '&&'

    # Relational
    REL_EQ = '=='
    REL_NE = '!='
    REL_GT = '>'
    REL_LT = '<'
    REL_GTE = '>='
    REL_LTE = '<='

    # Math
    PLUS = '+'
    HYPHEN = '-'
    STAR = '*'
    SLASH = '/'
    CARET = '^'

    # Brackets
    LEFT_PAREN = '('
    RIGHT_PAREN = ')'
    LEFT_BRACKET = '['
    RIGHT_BRACKET = ']'
    LEFT_BRACE = '{'
    RIGHT_BRACE = '}'

    # Misc
    BANG = '!'
    EQUAL = '='
    SEMICOLON = ';'
    COMMA = ','


KEYWORDS: Dict[str, TokenKind] = {
    'if': TokenKind.IF,
    'else': TokenKind.ELSE,
    'let': TokenKind.LET,
    'true': TokenKind.TRUE,
    'false': TokenKind.FALSE,
}

# Symbols spelled with one character; two-character operators are matched first.
SINGLE_CHAR_SYMBOLS: Dict[str, TokenKind] = {
    kind.value: kind for kind in TokenKind if len(kind.value) == 1
}

DOUBLE_CHAR_SYMBOLS: Dict[str, TokenKind] = {
    kind.value: kind for kind in TokenKind
    if len(kind.value) == 2 and not kind.value.isalpha()
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Any = None
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __str__(self) -> str:
        if self.kind in (TokenKind.INTEGER, TokenKind.IDENT):
            return str(self.value)
        return self.kind.value

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.kind.name})"
        return f"Token({self.kind.name}, {self.value!r})"

    @property
    def position(self) -> str:
        return f"{self.line}:{self.column}"


def map_keyword(text: str) -> Optional[TokenKind]:
    """Return the keyword kind spelled by `text`, or None for ordinary identifiers."""
    return KEYWORDS.get(text)
