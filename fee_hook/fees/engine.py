"""Divergence-aware fee engine.

The fee starts from the pool override (or the global base fee) and is raised
when a trade takes the side an arbitrageur would take against a pool price
that has drifted from the reference price:

    fee = base + |P - M| * multiplier / M

where P is the pool price of the comparison currency and M the normalized
reference price. Trades on the other side keep the base fee.

Uses SafeInt so that a zero reference price can never reach a division and
an oversized fee is reported instead of wrapping.
"""

from __future__ import annotations

import structlog

from fee_hook.errors import FeeArithmeticError, FeeOverflow
from fee_hook.fees.config import DEFAULT_FEE_CONFIG, FeeConfig
from fee_hook.fees.result import FeeQuote, SkipReason
from fee_hook.models.params import TradeDirection
from fee_hook.pricing.pool_price import PoolPrices
from fee_hook.safe_int import S

logger = structlog.get_logger()


class FeeEngine:
    """Computes the fee for one trade.

    Attributes:
        config: Overflow and reference-price handling flags
    """

    def __init__(self, config: FeeConfig | None = None) -> None:
        self.config = config or DEFAULT_FEE_CONFIG

    @staticmethod
    def select_base_fee(base_fee: int, override_fee: int = 0) -> int:
        """Pool override when set (non-zero), global base fee otherwise."""
        return override_fee if override_fee != 0 else base_fee

    @staticmethod
    def should_adjust(
        pool_price: int,
        reference_price: int,
        compare_against_token0: bool,
        direction: TradeDirection,
    ) -> bool:
        """True when the trade exploits the gap between pool and reference.

        Comparing currency0 (P = price0):
            P > M and selling currency0 (pool overpays for it), or
            P < M and buying currency0 (pool undercharges for it).
        Comparing currency1 (P = price1) the directions swap.
        Equal prices never trigger.
        """
        zero_for_one = direction == TradeDirection.ZERO_FOR_ONE
        if compare_against_token0:
            return (pool_price > reference_price and zero_for_one) or (
                pool_price < reference_price and not zero_for_one
            )
        return (pool_price < reference_price and zero_for_one) or (
            pool_price > reference_price and not zero_for_one
        )

    def compute_fee(
        self,
        *,
        base_fee: int,
        override_fee: int = 0,
        prices: PoolPrices,
        reference_price: int | None,
        compare_against_token0: bool,
        direction: TradeDirection,
        multiplier: int,
    ) -> FeeQuote:
        """Compute the fee for a trade.

        Args:
            base_fee: Global default fee
            override_fee: Pool-specific fee, 0 when unset
            prices: Pool spot prices
            reference_price: Normalized reference price, None when the pool
                has no oracle binding
            compare_against_token0: Compare price0 (True) or price1 (False)
            direction: Trade direction
            multiplier: Sensitivity multiplier (1_000_000 = 100%)

        Returns:
            FeeQuote describing the fee and whether the adjustment ran

        Raises:
            FeeOverflow: If the fee exceeds config.max_fee and
                config.reject_on_fee_overflow is set
            FeeArithmeticError: If a negative reference price drives the fee
                below zero (only when negative prices are not skipped)
        """
        fee = self.select_base_fee(base_fee, override_fee)

        if reference_price is None:
            return FeeQuote.static(fee, SkipReason.NO_ORACLE)

        pool_price = prices.for_token(compare_against_token0)

        if reference_price == 0:
            logger.warning("fee_adjustment_skipped_zero_reference", pool_price=pool_price)
            return FeeQuote.static(
                fee, SkipReason.ZERO_REFERENCE_PRICE, pool_price, reference_price
            )

        if reference_price < 0 and self.config.skip_negative_reference_price:
            logger.warning(
                "fee_adjustment_skipped_negative_reference",
                pool_price=pool_price,
                reference_price=reference_price,
            )
            return FeeQuote.static(
                fee, SkipReason.NEGATIVE_REFERENCE_PRICE, pool_price, reference_price
            )

        if not self.should_adjust(pool_price, reference_price, compare_against_token0, direction):
            return FeeQuote.static(fee, SkipReason.NOT_TRIGGERED, pool_price, reference_price)

        delta = S(abs(pool_price - reference_price))
        adjustment = (delta * multiplier).trunc_div(reference_price)
        total = S(fee) + adjustment

        if total < 0:
            raise FeeArithmeticError(
                f"Adjusted fee is negative: {fee} + {adjustment.value} "
                f"(reference={reference_price})"
            )

        if total > self.config.max_fee:
            if self.config.reject_on_fee_overflow:
                logger.warning(
                    "fee_overflow",
                    fee=total.value,
                    max_fee=self.config.max_fee,
                    pool_price=pool_price,
                    reference_price=reference_price,
                )
                raise FeeOverflow(f"Adjusted fee {total.value} exceeds max {self.config.max_fee}")
            logger.warning("fee_saturated", fee=total.value, max_fee=self.config.max_fee)
            total = total.min(self.config.max_fee)

        logger.debug(
            "fee_adjusted",
            base_fee=fee,
            adjustment=adjustment.value,
            fee=total.value,
            pool_price=pool_price,
            reference_price=reference_price,
            direction=direction.value,
        )
        return FeeQuote(
            fee=total.to_uint24(),
            base_fee=fee,
            adjustment=total.value - fee,
            pool_price=pool_price,
            reference_price=reference_price,
        )


# Default engine instance
DEFAULT_FEE_ENGINE = FeeEngine()
