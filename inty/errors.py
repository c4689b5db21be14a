from typing import Optional

from inty.tokens import Token


class IntyError(Exception):
    """Base class for every error raised while lexing, parsing or evaluating Inty code."""
    kind = 'Error'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LexError(IntyError):
    """Raised by the lexer for characters or literals it cannot turn into tokens."""
    kind = 'LexicalError'

    def __init__(self, character: str, message: Optional[str] = None, line: int = 0, column: int = 0):
        if message is None:
            super().__init__(f"unexpected character: {character}")
        else:
            super().__init__(f"could not parse token: {character}: {message}")
        self.character = character
        self.line = line
        self.column = column


class ParseError(IntyError):
    kind = 'SyntaxError'

    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(f"syntax error: {message}")
        self.token = token


class ExpectedTokenError(ParseError):
    def __init__(self, expected: str, found: Token):
        IntyError.__init__(self, f"expected {expected}, found {found}")
        self.token = found
        self.expected = expected


class InvalidExpressionError(ParseError):
    def __init__(self, message: str, token: Optional[Token] = None):
        IntyError.__init__(self, f"invalid expression: {message}")
        self.token = token


class UnknownIdentifierError(IntyError):
    kind = 'NameError'

    def __init__(self, ident: str):
        super().__init__(f"unknown identifier: {ident}")
        self.ident = ident


class IntyTypeError(IntyError):
    kind = 'TypeError'

    def __init__(self, message: str):
        super().__init__(f"type error: {message}")


class DivideByZeroError(IntyError):
    kind = 'DivideByZeroError'

    def __init__(self):
        super().__init__("cannot divide by zero")


class LogicError(IntyError):
    kind = 'LogicError'

    def __init__(self, message: str):
        super().__init__(f"logic error: {message}")
