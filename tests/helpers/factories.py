"""Factory functions for creating test objects.

Usage:
    from tests.helpers import make_pool_key, make_quote

    key = make_pool_key()
    quote = make_quote(3900)
"""

from fee_hook.constants import DYNAMIC_FEE_FLAG
from fee_hook.models import OracleQuote, PoolKey
from tests.helpers.constants import ETH, FEED_DECIMALS, USD


def make_pool_key(
    currency0: str = ETH,
    currency1: str = USD,
    fee: int = DYNAMIC_FEE_FLAG,
    tick_spacing: int = 60,
    hooks: str = "0x" + "00" * 19 + "80",
) -> PoolKey:
    """Create a pool key with sensible defaults (ETH/USD dynamic-fee pool)."""
    return PoolKey(
        currency0=currency0,
        currency1=currency1,
        fee=fee,
        tick_spacing=tick_spacing,
        hooks=hooks,
    )


def make_quote(
    price: int,
    decimals: int = FEED_DECIMALS,
    updated_at: int = 1_700_000_000,
) -> OracleQuote:
    """Create a feed quote for a whole-unit price (e.g. 3900 -> 3900e8)."""
    return OracleQuote(
        answer=price * 10**decimals,
        decimals=decimals,
        updated_at=updated_at,
        round_id=1,
        started_at=updated_at,
        answered_in_round=1,
    )
