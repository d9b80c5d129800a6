"""Test helpers module for shared test utilities.

- constants: Accounts, currencies and feeds
- factories: Pool key and oracle quote factory functions
"""

from tests.helpers.constants import (
    ADMIN,
    ETH,
    FEED,
    FEED_DECIMALS,
    LIQUIDITY_PROVIDER,
    STRANGER,
    TOKEN_DECIMALS,
    TRADER,
    USD,
    USDC6,
)
from tests.helpers.factories import make_pool_key, make_quote

__all__ = [
    # Constants
    "ADMIN",
    "TRADER",
    "LIQUIDITY_PROVIDER",
    "STRANGER",
    "ETH",
    "USD",
    "USDC6",
    "TOKEN_DECIMALS",
    "FEED",
    "FEED_DECIMALS",
    # Factories
    "make_pool_key",
    "make_quote",
]
