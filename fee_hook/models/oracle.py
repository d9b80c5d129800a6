"""Oracle quote model (AggregatorV3 latestRoundData + decimals)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OracleQuote:
    """A price reading from a reference feed.

    Attributes:
        answer: Signed price, scaled by 10**decimals
        decimals: Decimal precision of answer
        updated_at: Unix timestamp of the last update
        round_id: Feed round that produced the answer
        started_at: Unix timestamp the round started
        answered_in_round: Round in which the answer was computed
    """

    answer: int
    decimals: int
    updated_at: int = 0
    round_id: int = 0
    started_at: int = 0
    answered_in_round: int = 0

    def age(self, now: int) -> int:
        """Seconds elapsed since the feed last updated."""
        return now - self.updated_at
