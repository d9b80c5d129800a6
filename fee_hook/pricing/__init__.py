"""Pool and reference price helpers.

Usage:
    from fee_hook.pricing import derive_pool_prices, normalize_reference_price

    prices = derive_pool_prices(sqrt_price_x96)
    reference = normalize_reference_price(answer, 8, 18)
"""

from fee_hook.pricing.pool_price import (
    PoolPrices,
    check_sqrt_price,
    derive_pool_prices,
    sqrt_price_from_ratio,
)
from fee_hook.pricing.reference import normalize_reference_price, reference_price_for_pool

__all__ = [
    "PoolPrices",
    "check_sqrt_price",
    "derive_pool_prices",
    "sqrt_price_from_ratio",
    "normalize_reference_price",
    "reference_price_for_pool",
]
