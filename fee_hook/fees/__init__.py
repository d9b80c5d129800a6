"""Fee computation for the oracle fee hook.

This module provides the divergence-aware fee engine:
- Base fee selection (pool override or global base fee)
- Directional adjustment against a reference price
- Configurable overflow and reference-price handling

Usage:
    from fee_hook.fees import FeeEngine, FeeConfig

    engine = FeeEngine(FeeConfig(reject_on_fee_overflow=False))
    quote = engine.compute_fee(
        base_fee=3000,
        prices=prices,
        reference_price=reference,
        compare_against_token0=True,
        direction=TradeDirection.ONE_FOR_ZERO,
        multiplier=1_000_000,
    )
"""

from fee_hook.fees.config import DEFAULT_FEE_CONFIG, FeeConfig
from fee_hook.fees.engine import DEFAULT_FEE_ENGINE, FeeEngine
from fee_hook.fees.result import FeeQuote, SkipReason

__all__ = [
    # Engine
    "FeeEngine",
    "DEFAULT_FEE_ENGINE",
    # Config
    "FeeConfig",
    "DEFAULT_FEE_CONFIG",
    # Result
    "FeeQuote",
    "SkipReason",
]
