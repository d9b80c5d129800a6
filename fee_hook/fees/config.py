"""Fee engine configuration."""

from dataclasses import dataclass

from fee_hook.constants import MAX_LP_FEE


@dataclass(frozen=True)
class FeeConfig:
    """Behavior flags for the fee engine.

    Attributes:
        max_fee: Largest fee the pool manager accepts (default: 1_000_000 = 100%)
        reject_on_fee_overflow: If True, raise FeeOverflow when the adjusted
            fee exceeds max_fee. If False, saturate at max_fee.
        skip_negative_reference_price: If True, a negative reference price
            disables the adjustment like a missing one. If False, the raw
            arithmetic runs on the negative value.
        max_quote_age: If set, quotes older than this many seconds are treated
            as missing. None disables the staleness check.
    """

    max_fee: int = MAX_LP_FEE
    reject_on_fee_overflow: bool = True
    skip_negative_reference_price: bool = True
    max_quote_age: int | None = None


# Default configuration instance
DEFAULT_FEE_CONFIG = FeeConfig()
