"""Safe integer wrapper for fixed-point and token-amount arithmetic.

Python integers never wrap, so the EVM word width has to be enforced
explicitly. SafeInt computes at arbitrary precision (the "widened"
intermediate) and only checks the width when a value is narrowed back:
- Division by zero raises DivisionByZero (an InvalidInput)
- Subtraction underflow raises Underflow
- Narrowing outside uint256 / int256 raises MathOverflow

Usage pattern:
    from hydra_curve.safe_int import S

    def scaled(a: int, b: int, c: int) -> int:
        return ((S(a) * S(b)) // S(c)).to_uint256()
"""

from __future__ import annotations

from hydra_curve.constants import INT256_MAX, INT256_MIN, UINT256_MAX
from hydra_curve.errors import InvalidInput, MathOverflow


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError, InvalidInput):
    """Division by zero."""

    pass


class Underflow(SafeIntError, InvalidInput):
    """Subtraction would produce negative result."""

    pass


class SafeInt:
    """Integer with checked arithmetic.

    Addition and multiplication are exact (the widened intermediate);
    subtraction refuses to go negative; division refuses a zero divisor.
    The width check happens in to_uint256() / to_int256().

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

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division, truncating toward zero for non-negative operands.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __neg__(self) -> SafeInt:
        return SafeInt(-self._value)

    def __abs__(self) -> SafeInt:
        return SafeInt(abs(self._value))

    def __lshift__(self, bits: int) -> SafeInt:
        return SafeInt(self._value << bits)

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

    def min(self, other: SafeInt | int) -> SafeInt:
        """Return minimum of self and other."""
        return SafeInt(min(self._value, _extract_value(other)))

    def abs_diff(self, other: SafeInt | int) -> SafeInt:
        """Absolute distance |self - other|, never raising Underflow."""
        return SafeInt(abs(self._value - _extract_value(other)))

    def to_uint256(self) -> int:
        """Narrow to an unsigned EVM word.

        Raises:
            MathOverflow: If value is negative or exceeds 2^256-1
        """
        if self._value < 0:
            raise MathOverflow(f"Negative value cannot be uint256: {self._value}")
        if self._value > UINT256_MAX:
            raise MathOverflow(f"Value exceeds uint256 max: {self._value}")
        return self._value

    def to_int256(self) -> int:
        """Narrow to a signed EVM word.

        Raises:
            MathOverflow: If value is outside [-2^255, 2^255-1]
        """
        if not (INT256_MIN <= self._value <= INT256_MAX):
            raise MathOverflow(f"Value outside int256 range: {self._value}")
        return self._value

    def is_uint256(self) -> bool:
        """Check if value fits in uint256 without raising."""
        return 0 <= self._value <= UINT256_MAX


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
