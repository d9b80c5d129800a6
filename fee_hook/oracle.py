"""Reference price feed readers."""

from __future__ import annotations

from typing import Protocol

import structlog

from fee_hook.models.oracle import OracleQuote
from fee_hook.models.types import normalize_address

logger = structlog.get_logger()


class OracleReader(Protocol):
    """Protocol for reference price feeds.

    This allows swapping between an RPC-backed reader and a static reader for
    testing.
    """

    def read_latest_quote(self, feed: str) -> OracleQuote | None:
        """Return the latest quote of a feed.

        Args:
            feed: Feed address

        Returns:
            OracleQuote, or None if the feed cannot be read
        """
        ...


class StaticOracle:
    """Oracle serving configured quotes without RPC calls.

    Configure with quotes per feed, and track calls for assertions.
    """

    def __init__(self, quotes: dict[str, OracleQuote] | None = None) -> None:
        self.quotes = {normalize_address(feed): quote for feed, quote in (quotes or {}).items()}
        self.calls: list[str] = []

    def set_quote(self, feed: str, quote: OracleQuote) -> None:
        self.quotes[normalize_address(feed)] = quote

    def read_latest_quote(self, feed: str) -> OracleQuote | None:
        feed_addr = normalize_address(feed)
        self.calls.append(feed_addr)
        return self.quotes.get(feed_addr)


# AggregatorV3Interface ABI - minimal, just the functions we need
AGGREGATOR_V3_ABI = [
    {
        "name": "decimals",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "uint8"}],
    },
    {
        "name": "latestRoundData",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [
            {"name": "roundId", "type": "uint80"},
            {"name": "answer", "type": "int256"},
            {"name": "startedAt", "type": "uint256"},
            {"name": "updatedAt", "type": "uint256"},
            {"name": "answeredInRound", "type": "uint80"},
        ],
    },
]


class Web3Oracle:
    """Reader that calls AggregatorV3 feeds via RPC.

    Feed decimals never change, so they are cached per feed.
    """

    def __init__(self, web3_provider: str) -> None:
        """Initialize reader with web3 provider.

        Args:
            web3_provider: HTTP RPC URL (e.g., "https://eth.llamarpc.com")
        """
        try:
            from web3 import Web3
        except ImportError as e:
            raise ImportError(
                "web3 package required for Web3Oracle. Install with: pip install web3"
            ) from e

        self.w3 = Web3(Web3.HTTPProvider(web3_provider))
        self._decimals: dict[str, int] = {}

    def _contract(self, feed: str):  # type: ignore[no-untyped-def]
        from web3 import Web3

        return self.w3.eth.contract(address=Web3.to_checksum_address(feed), abi=AGGREGATOR_V3_ABI)

    def read_latest_quote(self, feed: str) -> OracleQuote | None:
        """Read latestRoundData() and decimals() from a feed."""
        feed_addr = normalize_address(feed)
        try:
            contract = self._contract(feed_addr)
            if feed_addr not in self._decimals:
                self._decimals[feed_addr] = int(contract.functions.decimals().call())
            round_id, answer, started_at, updated_at, answered_in_round = (
                contract.functions.latestRoundData().call()
            )
        except Exception as e:
            logger.warning("oracle_read_failed", feed=feed_addr, error=str(e))
            return None

        return OracleQuote(
            answer=int(answer),
            decimals=self._decimals[feed_addr],
            updated_at=int(updated_at),
            round_id=int(round_id),
            started_at=int(started_at),
            answered_in_round=int(answered_in_round),
        )


__all__ = ["OracleReader", "StaticOracle", "Web3Oracle", "AGGREGATOR_V3_ABI"]
