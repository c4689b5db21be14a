# Inty language package
# This package provides a lexer, parser and interpreter for the Inty language.
from .environment import Environment
from .errors import (
    DivideByZeroError, ExpectedTokenError, IntyError, IntyTypeError, InvalidExpressionError,
    LexError, LogicError, ParseError, UnknownIdentifierError,
)
from .interpreter import Interpreter, evaluate, parse_source, run_program
from .lexer import tokenize
from .parser import parse
from .values import BoolVal, IntegerVal, ListVal, Value

__all__ = [
    'tokenize',
    'parse',
    'parse_source',
    'evaluate',
    'run_program',
    'Interpreter',
    'Environment',
    'Value',
    'IntegerVal',
    'BoolVal',
    'ListVal',
    'IntyError',
    'LexError',
    'ParseError',
    'ExpectedTokenError',
    'InvalidExpressionError',
    'UnknownIdentifierError',
    'IntyTypeError',
    'DivideByZeroError',
    'LogicError',
]
