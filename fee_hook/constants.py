"""Protocol constants for the oracle fee hook.

Centralizes pool-manager bounds, fee encoding flags and fixed-point scales.
"""

from fee_hook.models.types import is_valid_address

# Null identity (also the native currency in a PoolKey)
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Binary radix of the pool's sqrt price representation (Q64.96)
Q96 = 2**96

# Decimal scale of derived pool prices (18-decimal fixed point)
PRICE_SCALE = 10**18

# TickMath bounds: sqrt price at MIN_TICK / MAX_TICK
# Valid snapshots satisfy MIN_SQRT_PRICE <= sqrt_price_x96 < MAX_SQRT_PRICE
MIN_SQRT_PRICE = 4295128739
MAX_SQRT_PRICE = 1461446703485210103287273052203988822378723970342

# LP fees are expressed in hundredths of a basis point (1_000_000 = 100%)
MAX_LP_FEE = 1_000_000

# Fee tag a pool must be created with to accept dynamic fee updates
DYNAMIC_FEE_FLAG = 0x800000

# Sensitivity multiplier bound (1_000_000 = 100%)
MAX_FEE_MULTIPLIER = 1_000_000

# Defaults for a freshly deployed hook
DEFAULT_BASE_FEE = 3000  # 0.30%
DEFAULT_FEE_MULTIPLIER = MAX_FEE_MULTIPLIER

# Decimals used for the native currency (zero address)
NATIVE_DECIMALS = 18


def _validate_address(name: str, address: str) -> str:
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Well-known mainnet feed (lowercase), validated at import time
ETH_USD_FEED = _validate_address("ETH/USD feed", "0x5f4ec3df9cbd43714fe2740f5e3616155c5b8419")
