"""Spot prices derived from a pool's sqrt price.

The pool manager stores price as sqrt(currency1 / currency0) in Q64.96 fixed
point. This module turns that into two plain 18-decimal prices:

    price0 = units of currency1 per unit of currency0, scaled by 1e18
    price1 = units of currency0 per unit of currency1, scaled by 1e18

Both final divisions round up so that a price is never under-reported (an
under-reported price would under-charge the divergence fee).
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isqrt

import structlog

from fee_hook.constants import MAX_SQRT_PRICE, MIN_SQRT_PRICE, PRICE_SCALE, Q96
from fee_hook.errors import SqrtPriceOutOfRange, ZeroPrice
from fee_hook.safe_int import mul_div, mul_div_rounding_up

logger = structlog.get_logger()


@dataclass(frozen=True)
class PoolPrices:
    """Pool spot prices in 18-decimal fixed point."""

    price0: int
    price1: int

    def for_token(self, token0: bool) -> int:
        """Price of currency0 (token0=True) or currency1 in the other currency."""
        return self.price0 if token0 else self.price1


def check_sqrt_price(sqrt_price_x96: int) -> None:
    """Raise SqrtPriceOutOfRange unless MIN_SQRT_PRICE <= value < MAX_SQRT_PRICE."""
    if not MIN_SQRT_PRICE <= sqrt_price_x96 < MAX_SQRT_PRICE:
        raise SqrtPriceOutOfRange(
            f"sqrt_price_x96 {sqrt_price_x96} outside [{MIN_SQRT_PRICE}, {MAX_SQRT_PRICE})"
        )


def derive_pool_prices(sqrt_price_x96: int) -> PoolPrices:
    """Convert a Q64.96 sqrt price into (price0, price1).

    Args:
        sqrt_price_x96: Current pool sqrt price

    Returns:
        PoolPrices with both prices scaled by 1e18

    Raises:
        SqrtPriceOutOfRange: If the snapshot is outside the pool manager's bounds
        ZeroPrice: If the squared ratio or either derived price is zero
    """
    check_sqrt_price(sqrt_price_x96)

    # Squared ratio back in Q96: sqrtP^2 / 2^96
    price_x96 = mul_div(sqrt_price_x96, sqrt_price_x96, Q96)
    if price_x96 == 0:
        raise ZeroPrice(f"Squared price ratio is zero for sqrt_price_x96={sqrt_price_x96}")

    price0 = mul_div_rounding_up(price_x96, PRICE_SCALE, Q96)
    price1 = mul_div_rounding_up(Q96, PRICE_SCALE, price_x96)
    if price0 == 0 or price1 == 0:
        raise ZeroPrice(f"Derived pool price is zero: price0={price0}, price1={price1}")

    logger.debug(
        "pool_prices_derived",
        sqrt_price_x96=sqrt_price_x96,
        price0=price0,
        price1=price1,
    )
    return PoolPrices(price0=price0, price1=price1)


def sqrt_price_from_ratio(numerator: int, denominator: int = 1) -> int:
    """Q64.96 sqrt price for a currency1/currency0 ratio (floor).

    Example: sqrt_price_from_ratio(3800) is the snapshot of a pool where one
    unit of currency0 trades for 3800 units of currency1.
    """
    if numerator <= 0 or denominator <= 0:
        raise ValueError(f"Price ratio must be positive, got {numerator}/{denominator}")
    return isqrt(numerator * Q96 * Q96 // denominator)
