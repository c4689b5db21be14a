"""Lexer for the Inty language.

`tokenize` walks the source once, left to right, with a single character
of lookahead. It never backtracks: digit runs become integer tokens,
letter-led runs become keywords or identifiers, and operators are matched
by maximal munch.
"""

from __future__ import annotations

import string
from typing import List

from .errors import LexError
from .tokens import DOUBLE_CHAR_SYMBOLS, SINGLE_CHAR_SYMBOLS, Token, TokenKind, map_keyword
from .values import INT_MAX


WHITESPACE = ' \t\r\n'
DIGITS = '0123456789'
IDENT_START = string.ascii_letters + '_'
IDENT_CHARS = IDENT_START + DIGITS


def tokenize(source: str) -> List[Token]:
    """Convert source code into a list of tokens.

    Raises `LexError` on the first character that cannot start a token,
    on a lone `&` or `|`, and on integer literals that do not fit in a
    signed 32-bit integer.
    """
    tokens: List[Token] = []
    i = 0
    line = 1
    col = 1
    length = len(source)

    def advance(n: int = 1):
        nonlocal i, col, line
        for _ in range(n):
            if i < length and source[i] == '\n':
                line += 1
                col = 1
            else:
                col += 1
            i += 1

    while i < length:
        c = source[i]
        if c in WHITESPACE:
            advance()
            continue
        # Integer literals
        if c in DIGITS:
            start_col = col
            start_i = i
            while i < length and source[i] in DIGITS:
                advance()
            text = source[start_i:i]
            value = int(text)
            if value > INT_MAX:
                raise LexError(text, 'number too large to fit in a 32-bit integer', line, start_col)
            tokens.append(Token(TokenKind.INTEGER, value, line, start_col))
            continue
        # Keywords or identifiers
        if c in IDENT_START:
            start_col = col
            start_i = i
            while i < length and source[i] in IDENT_CHARS:
                advance()
            text = source[start_i:i]
            keyword = map_keyword(text)
            if keyword is not None:
                tokens.append(Token(keyword, None, line, start_col))
            else:
                tokens.append(Token(TokenKind.IDENT, text, line, start_col))
            continue
        # Two-character operators
        pair = source[i:i + 2]
        if pair in DOUBLE_CHAR_SYMBOLS:
            tokens.append(Token(DOUBLE_CHAR_SYMBOLS[pair], None, line, col))
            advance(2)
            continue
        if c in '&|':
            raise LexError(c, f"expected {c}{c}", line, col)
        if c in SINGLE_CHAR_SYMBOLS:
            tokens.append(Token(SINGLE_CHAR_SYMBOLS[c], None, line, col))
            advance()
            continue
        raise LexError(c, None, line, col)
    return tokens
