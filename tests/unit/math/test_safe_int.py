"""Tests for SafeInt checked arithmetic."""

import pytest

from fee_hook.safe_int import (
    UINT24_MAX,
    UINT256_MAX,
    DivisionByZero,
    S,
    SafeInt,
    SafeIntError,
    Uint24Overflow,
    Uint256Overflow,
    Underflow,
    mul_div,
    mul_div_rounding_up,
)


class TestSafeIntConstruction:
    """Tests for SafeInt construction."""

    def test_from_int(self):
        assert SafeInt(42).value == 42

    def test_from_safeint(self):
        assert SafeInt(SafeInt(42)).value == 42

    def test_from_negative(self):
        """SafeInt can hold negative values (reference prices are signed)."""
        assert SafeInt(-10).value == -10

    def test_from_invalid_type_raises(self):
        with pytest.raises(TypeError):
            SafeInt("42")  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(3.14)  # type: ignore
        with pytest.raises(TypeError):
            SafeInt(True)

    def test_alias_s(self):
        assert S is SafeInt


class TestSafeIntArithmetic:
    """Tests for SafeInt arithmetic operations."""

    def test_add(self):
        assert (S(10) + S(5)).value == 15
        assert (S(10) + 5).value == 15
        assert (5 + S(10)).value == 15

    def test_add_negative(self):
        """Adding a negative adjustment is allowed."""
        assert (S(3000) + S(-1)).value == 2999

    def test_sub_underflow_raises(self):
        with pytest.raises(Underflow) as exc_info:
            S(5) - S(10)
        assert "5 - 10" in str(exc_info.value)

    def test_mul(self):
        assert (S(6) * 7).value == 42
        assert (6 * S(7)).value == 42

    def test_mul_large(self):
        """No intermediate overflow: products are full precision."""
        assert (S(2**200) * 2**100).value == 2**300

    def test_floordiv_by_zero(self):
        with pytest.raises(DivisionByZero):
            S(10) // 0

    def test_abs(self):
        assert abs(S(-7)).value == 7

    def test_comparisons(self):
        assert S(1) < 2
        assert S(2) <= S(2)
        assert S(3) > 2
        assert S(3) >= 3
        assert S(3) == 3
        assert S(3) != 4


class TestNamedOperations:
    """Tests for ceiling and truncating division."""

    def test_ceiling_div(self):
        assert S(10).ceiling_div(3).value == 4
        assert S(9).ceiling_div(3).value == 3
        assert S(0).ceiling_div(3).value == 0

    def test_ceiling_div_by_zero(self):
        with pytest.raises(DivisionByZero):
            S(10).ceiling_div(0)

    def test_trunc_div_positive(self):
        assert S(7).trunc_div(2).value == 3

    def test_trunc_div_mixed_sign(self):
        """Truncation toward zero differs from Python's floor."""
        assert S(-7).trunc_div(2).value == -3
        assert S(7).trunc_div(-2).value == -3
        assert S(-7).trunc_div(-2).value == 3

    def test_trunc_div_by_zero(self):
        with pytest.raises(DivisionByZero):
            S(1).trunc_div(0)

    def test_min(self):
        assert S(5).min(3).value == 3
        assert S(2).min(3).value == 2


class TestConversions:
    """Tests for bounded conversions."""

    def test_to_uint24(self):
        assert S(UINT24_MAX).to_uint24() == UINT24_MAX

    def test_to_uint24_overflow(self):
        with pytest.raises(Uint24Overflow):
            S(UINT24_MAX + 1).to_uint24()
        with pytest.raises(Uint24Overflow):
            S(-1).to_uint24()

    def test_to_uint256_overflow(self):
        with pytest.raises(Uint256Overflow):
            S(UINT256_MAX + 1).to_uint256()
        with pytest.raises(Uint256Overflow):
            S(-1).to_uint256()

    def test_errors_are_arithmetic_errors(self):
        for error in (DivisionByZero, Underflow, Uint24Overflow, Uint256Overflow):
            assert issubclass(error, SafeIntError)
            assert issubclass(error, ArithmeticError)


class TestMulDiv:
    """Tests for full-precision multiply-then-divide helpers."""

    def test_mul_div_floor(self):
        assert mul_div(10, 10, 3) == 33

    def test_mul_div_rounding_up(self):
        assert mul_div_rounding_up(10, 10, 3) == 34
        assert mul_div_rounding_up(9, 10, 3) == 30

    def test_mul_div_large_intermediate(self):
        """a * b may exceed uint256 as long as the result fits."""
        assert mul_div(2**200, 2**100, 2**100) == 2**200

    def test_mul_div_by_zero(self):
        with pytest.raises(DivisionByZero):
            mul_div(1, 1, 0)
        with pytest.raises(DivisionByZero):
            mul_div_rounding_up(1, 1, 0)

    def test_mul_div_result_overflow(self):
        with pytest.raises(Uint256Overflow):
            mul_div(2**200, 2**100, 1)
