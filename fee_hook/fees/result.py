"""Fee computation result types."""

from dataclasses import dataclass
from enum import Enum


class SkipReason(str, Enum):
    """Why the divergence adjustment did not run."""

    NO_ORACLE = "no_oracle"
    ZERO_REFERENCE_PRICE = "zero_reference_price"
    NEGATIVE_REFERENCE_PRICE = "negative_reference_price"
    NOT_TRIGGERED = "not_triggered"


@dataclass(frozen=True)
class FeeQuote:
    """Fee for one trade evaluation.

    Attributes:
        fee: Fee to apply to the in-flight trade (hundredths of a bip)
        base_fee: Fee before the divergence adjustment (override or base)
        adjustment: Amount added by the divergence adjustment
        pool_price: Pool price used for the comparison, if any
        reference_price: Normalized reference price, if any
        skip_reason: Set when no adjustment was applied

    Examples:
        quote = FeeQuote(fee=3000, base_fee=3000, skip_reason=SkipReason.NO_ORACLE)
        assert not quote.adjusted
    """

    fee: int
    base_fee: int
    adjustment: int = 0
    pool_price: int | None = None
    reference_price: int | None = None
    skip_reason: SkipReason | None = None

    @property
    def adjusted(self) -> bool:
        """True if the divergence adjustment ran."""
        return self.skip_reason is None

    @classmethod
    def static(
        cls,
        fee: int,
        reason: SkipReason,
        pool_price: int | None = None,
        reference_price: int | None = None,
    ) -> "FeeQuote":
        """A quote where the base fee passes through unchanged."""
        return cls(
            fee=fee,
            base_fee=fee,
            pool_price=pool_price,
            reference_price=reference_price,
            skip_reason=reason,
        )
