from __future__ import annotations

from collections.abc import Callable

from .codec import I32_MAX, I32_MIN
from .errors import InvalidOperand, Overflow


def fits_i32(value: int) -> bool:
    return I32_MIN <= value <= I32_MAX


def require_i32(value: object) -> int:
    # bool is an int subclass but never a valid operand.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidOperand(f"operand must be an integer, got {type(value).__name__}")
    if not fits_i32(value):
        raise InvalidOperand(f"operand {value} does not fit in a signed 32-bit integer")
    return value


def _checked(symbol: str, fn: Callable[[int, int], int]) -> Callable[[int, int], int]:
    def _apply(value: int, by: int) -> int:
        result = fn(require_i32(value), require_i32(by))
        if not fits_i32(result):
            raise Overflow(f"{value} {symbol} {by} overflows a signed 32-bit integer")
        return result

    return _apply


# Python ints are unbounded, so the exact result is computed first and range-checked after.
checked_add = _checked("+", lambda a, b: a + b)
checked_sub = _checked("-", lambda a, b: a - b)
checked_mul = _checked("*", lambda a, b: a * b)
