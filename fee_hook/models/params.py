"""Parameters the pool manager passes to hook callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TradeDirection(str, Enum):
    """Which way a swap moves value through the pool."""

    ZERO_FOR_ONE = "zero_for_one"  # asset0 -> asset1
    ONE_FOR_ZERO = "one_for_zero"  # asset1 -> asset0

    @classmethod
    def from_zero_for_one(cls, zero_for_one: bool) -> TradeDirection:
        return cls.ZERO_FOR_ONE if zero_for_one else cls.ONE_FOR_ZERO


@dataclass(frozen=True)
class SwapParams:
    """A swap request.

    Attributes:
        zero_for_one: True when selling currency0 for currency1
        amount_specified: Negative for exact input, positive for exact output
        sqrt_price_limit_x96: Price limit the swap may not cross
    """

    zero_for_one: bool
    amount_specified: int
    sqrt_price_limit_x96: int = 0

    @property
    def direction(self) -> TradeDirection:
        return TradeDirection.from_zero_for_one(self.zero_for_one)


@dataclass(frozen=True)
class ModifyLiquidityParams:
    """A liquidity change request (positive delta adds, negative removes)."""

    tick_lower: int
    tick_upper: int
    liquidity_delta: int
    salt: bytes = b"\x00" * 32

    @property
    def is_removal(self) -> bool:
        return self.liquidity_delta < 0
