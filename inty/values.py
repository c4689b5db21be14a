"""Runtime values for Inty.

This module defines the values produced by evaluating Inty expressions:
32-bit signed integers, booleans and lists of values. Values are frozen
dataclasses and compare structurally. The
`unwrap_*` accessors narrow a value to a Python primitive, raising a
type error when the value has the wrong runtime kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .errors import IntyTypeError, LogicError

INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1


def check_int32(value: int) -> int:
    """Return `value` unchanged if it fits in a signed 32-bit integer."""
    if value < INT_MIN or value > INT_MAX:
        raise LogicError('integer overflow')
    return value


class Value:
    """Base class for runtime values."""

    def type_name(self) -> str:
        return type(self).__name__.replace('Val', '')

    def unwrap_integer(self) -> int:
        raise IntyTypeError(f'{self} is not an integer')

    def unwrap_bool(self) -> bool:
        raise IntyTypeError(f'{self} cannot be used as a boolean')


@dataclass(frozen=True)
class IntegerVal(Value):
    value: int

    def __str__(self) -> str:
        return str(self.value)

    def unwrap_integer(self) -> int:
        return self.value

    def unwrap_bool(self) -> bool:
        # positive integers are truthy, zero and negatives are not
        return self.value > 0


@dataclass(frozen=True)
class BoolVal(Value):
    value: bool

    def __str__(self) -> str:
        return 'true' if self.value else 'false'

    def unwrap_bool(self) -> bool:
        return self.value


@dataclass(frozen=True)
class ListVal(Value):
    """An ordered, possibly heterogeneous, list of values."""
    items: Tuple[Value, ...]

    def __str__(self) -> str:
        return '[' + ', '.join(str(item) for item in self.items) + ']'


def to_string(value) -> str:
    """Format an optional evaluation result for display."""
    if value is None:
        return ''
    return str(value)
