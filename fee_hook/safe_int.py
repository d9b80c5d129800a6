"""Checked integer arithmetic for prices and fees.

This module provides SafeInt, a lightweight wrapper that keeps fee and price
arithmetic honest:
- Division by zero raises DivisionByZero
- Subtraction underflow raises Underflow
- Values outside uint24 / uint256 are caught on conversion
- Truncating and ceiling division are explicit named operations

Usage pattern:
    from fee_hook.safe_int import S

    def adjustment(delta: int, multiplier: int, reference: int) -> int:
        return (S(delta) * multiplier // reference).value

Module-level mul_div / mul_div_rounding_up mirror the pool manager's FullMath
helpers (full-precision product, then a single division).
"""

from __future__ import annotations

UINT24_MAX = 2**24 - 1
UINT256_MAX = 2**256 - 1


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class Uint24Overflow(SafeIntError):
    """Value does not fit in a uint24 fee slot."""

    pass


class Uint256Overflow(SafeIntError):
    """Value exceeds uint256 maximum."""

    pass


class SafeInt:
    """Integer with checked arithmetic operations.

    Negative values are allowed (reference prices are signed), but
    subtraction refuses to go below zero and every division checks its
    divisor.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Floor division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __abs__(self) -> SafeInt:
        return SafeInt(abs(self._value))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    # --- Named operations ---

    def ceiling_div(self, other: SafeInt | int) -> SafeInt:
        """Ceiling division for non-negative operands.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Ceiling division by zero: {self._value}")
        return SafeInt(-(-self._value // other_val))

    def trunc_div(self, other: SafeInt | int) -> SafeInt:
        """Division truncating toward zero (EVM semantics for signed values).

        Python's // floors toward -inf; for operands of different sign the
        two disagree (-7 // 2 == -4, but EVM -7 / 2 == -3).

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} / 0")
        if (self._value >= 0) == (other_val >= 0):
            return SafeInt(self._value // other_val)
        return SafeInt(-(abs(self._value) // abs(other_val)))

    def min(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(min(self._value, _extract_value(other)))

    def to_uint24(self) -> int:
        """Convert to int, validating uint24 bounds.

        Raises:
            Uint24Overflow: If value is negative or exceeds 2^24-1
        """
        if not 0 <= self._value <= UINT24_MAX:
            raise Uint24Overflow(f"Value does not fit in uint24: {self._value}")
        return self._value

    def to_uint256(self) -> int:
        """Convert to int, validating uint256 bounds.

        Raises:
            Uint256Overflow: If value is negative or exceeds 2^256-1
        """
        if self._value < 0:
            raise Uint256Overflow(f"Negative value cannot be uint256: {self._value}")
        if self._value > UINT256_MAX:
            raise Uint256Overflow(f"Value exceeds uint256 max: {self._value}")
        return self._value


def _extract_value(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


def mul_div(a: int, b: int, denominator: int) -> int:
    """floor(a * b / denominator) with a full-precision intermediate product.

    Raises:
        DivisionByZero: If denominator is zero
        Uint256Overflow: If the result does not fit in uint256
    """
    return (S(a) * b // denominator).to_uint256()


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """ceil(a * b / denominator) with a full-precision intermediate product.

    Raises:
        DivisionByZero: If denominator is zero
        Uint256Overflow: If the result does not fit in uint256
    """
    return (S(a) * b).ceiling_div(denominator).to_uint256()


# Convenience alias for concise code
S = SafeInt
