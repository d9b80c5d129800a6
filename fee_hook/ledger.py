"""Pool manager collaborator.

The hook only needs two calls from the pool manager: read the current sqrt
price of a pool and push a new dynamic LP fee. LedgerCollaborator captures
exactly that; InMemoryLedger is a local implementation for tests and
simulations.
"""

from __future__ import annotations

from typing import Protocol

import structlog

from fee_hook.errors import InvalidFee, PoolNotInitialized
from fee_hook.models.pool import PoolKey
from fee_hook.pricing.pool_price import check_sqrt_price
from fee_hook.settings import validate_lp_fee

logger = structlog.get_logger()


class LedgerCollaborator(Protocol):
    """Protocol for the pool manager seen from the hook."""

    def read_price_snapshot(self, pool_id: str) -> int:
        """Return the pool's current sqrt_price_x96.

        Raises:
            PoolNotInitialized: If the pool does not exist
        """
        ...

    def set_dynamic_fee(self, pool_id: str, fee: int) -> None:
        """Set the LP fee applied to the pool's next trade.

        Raises:
            InvalidFee: If fee exceeds MAX_LP_FEE
        """
        ...


class InMemoryLedger:
    """In-memory pool manager for testing without a chain.

    Tracks fee updates for assertions.
    """

    def __init__(self) -> None:
        self._sqrt_prices: dict[str, int] = {}
        self._fees: dict[str, int] = {}
        self.fee_updates: list[tuple[str, int]] = []  # (pool_id, fee)

    def initialize(self, key: PoolKey, sqrt_price_x96: int) -> str:
        """Create a pool at a starting price and return its id."""
        check_sqrt_price(sqrt_price_x96)
        pool_id = key.pool_id
        self._sqrt_prices[pool_id] = sqrt_price_x96
        self._fees.setdefault(pool_id, 0)
        logger.debug("ledger_pool_initialized", pool_id=pool_id, sqrt_price_x96=sqrt_price_x96)
        return pool_id

    def set_price(self, pool_id: str, sqrt_price_x96: int) -> None:
        """Move an existing pool to a new price (stands in for trades)."""
        if pool_id not in self._sqrt_prices:
            raise PoolNotInitialized(f"Pool {pool_id} not initialized")
        self._sqrt_prices[pool_id] = sqrt_price_x96

    def read_price_snapshot(self, pool_id: str) -> int:
        try:
            return self._sqrt_prices[pool_id]
        except KeyError:
            raise PoolNotInitialized(f"Pool {pool_id} not initialized") from None

    def set_dynamic_fee(self, pool_id: str, fee: int) -> None:
        if pool_id not in self._sqrt_prices:
            raise PoolNotInitialized(f"Pool {pool_id} not initialized")
        try:
            validate_lp_fee(fee)
        except InvalidFee:
            logger.warning("ledger_fee_rejected", pool_id=pool_id, fee=fee)
            raise
        self._fees[pool_id] = fee
        self.fee_updates.append((pool_id, fee))

    def lp_fee(self, pool_id: str) -> int:
        """Current LP fee of a pool."""
        return self._fees.get(pool_id, 0)
