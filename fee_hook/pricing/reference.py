"""Reference price normalization.

Feeds publish prices with their own decimal precision (8 for most USD
feeds). Before comparing against a pool price the answer is rescaled to the
decimals of the pool currency being compared.

Rescaling down truncates toward zero. Unlike pool price derivation there is
no round-up bias here, and the answer is neither sign- nor staleness-checked:
a non-positive or old answer is passed through as-is.
"""

from __future__ import annotations

from fee_hook.errors import InvalidArgument
from fee_hook.models.oracle import OracleQuote
from fee_hook.safe_int import S


def normalize_reference_price(answer: int, quote_decimals: int, target_decimals: int) -> int:
    """Rescale answer from quote_decimals to target_decimals.

    Args:
        answer: Raw signed feed answer
        quote_decimals: Decimal precision of answer
        target_decimals: Decimal precision of the comparison currency

    Returns:
        The answer expressed with target_decimals

    Raises:
        InvalidArgument: If either precision is negative
    """
    if quote_decimals < 0 or target_decimals < 0:
        raise InvalidArgument(
            f"Decimals must be non-negative, got quote={quote_decimals} target={target_decimals}"
        )

    if quote_decimals > target_decimals:
        return S(answer).trunc_div(10 ** (quote_decimals - target_decimals)).value
    if quote_decimals < target_decimals:
        return answer * 10 ** (target_decimals - quote_decimals)
    return answer


def reference_price_for_pool(quote: OracleQuote, target_decimals: int) -> int:
    """Normalize an oracle quote to the comparison currency's decimals."""
    return normalize_reference_price(quote.answer, quote.decimals, target_decimals)
