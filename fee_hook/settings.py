"""Admin-owned hook configuration.

HookSettings holds the global base fee, the sensitivity multiplier, per-pool
fee overrides and per-pool oracle bindings. Every setter checks the caller
against the PermissionGate admin and validates its input before writing, so a
rejected call leaves the settings untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from fee_hook.constants import (
    DEFAULT_BASE_FEE,
    DEFAULT_FEE_MULTIPLIER,
    MAX_FEE_MULTIPLIER,
    MAX_LP_FEE,
    ZERO_ADDRESS,
)
from fee_hook.errors import InvalidArgument, InvalidFee, InvalidMultiplier
from fee_hook.models.types import is_valid_address, normalize_address
from fee_hook.permissions import PermissionGate

logger = structlog.get_logger()


@dataclass(frozen=True)
class OracleBinding:
    """Reference feed for a pool.

    Attributes:
        feed: Feed address, None when the pool has no reference price
        compare_against_token0: Compare the feed with price0 (True) or price1
    """

    feed: str | None = None
    compare_against_token0: bool = True

    @property
    def is_bound(self) -> bool:
        return self.feed is not None


UNBOUND = OracleBinding()


def validate_lp_fee(fee: int) -> int:
    """Raise InvalidFee unless 0 <= fee <= MAX_LP_FEE."""
    if not isinstance(fee, int) or isinstance(fee, bool) or not 0 <= fee <= MAX_LP_FEE:
        raise InvalidFee(f"LP fee must be in [0, {MAX_LP_FEE}], got {fee}")
    return fee


class HookSettings:
    """Global and per-pool fee configuration."""

    def __init__(
        self,
        gate: PermissionGate,
        base_fee: int = DEFAULT_BASE_FEE,
        fee_multiplier: int = DEFAULT_FEE_MULTIPLIER,
    ) -> None:
        """Initialize settings.

        Args:
            gate: Permission gate whose admin may change these settings
            base_fee: Initial global base fee
            fee_multiplier: Initial sensitivity multiplier
        """
        self._gate = gate
        self._base_fee = validate_lp_fee(base_fee)
        self._fee_multiplier = self._validate_multiplier(fee_multiplier)
        self._overrides: dict[str, int] = {}
        self._bindings: dict[str, OracleBinding] = {}

    @staticmethod
    def _validate_multiplier(multiplier: int) -> int:
        if (
            not isinstance(multiplier, int)
            or isinstance(multiplier, bool)
            or not 0 <= multiplier <= MAX_FEE_MULTIPLIER
        ):
            raise InvalidMultiplier(
                f"Fee multiplier must be in [0, {MAX_FEE_MULTIPLIER}], got {multiplier}"
            )
        return multiplier

    @property
    def base_fee(self) -> int:
        return self._base_fee

    @property
    def fee_multiplier(self) -> int:
        return self._fee_multiplier

    def fee_override(self, pool_id: str) -> int:
        """Override fee for a pool, 0 when none is set."""
        return self._overrides.get(pool_id, 0)

    def oracle_binding(self, pool_id: str) -> OracleBinding:
        """Oracle binding for a pool, UNBOUND when none is set."""
        return self._bindings.get(pool_id, UNBOUND)

    # --- Admin-only setters ---

    def set_base_fee(self, caller: str, fee: int) -> None:
        self._gate.require_admin(caller)
        self._base_fee = validate_lp_fee(fee)
        logger.info("base_fee_updated", base_fee=fee)

    def set_fee_multiplier(self, caller: str, multiplier: int) -> None:
        """Set the sensitivity multiplier.

        Raises:
            Unauthorized: If caller is not the admin
            InvalidMultiplier: If multiplier > MAX_FEE_MULTIPLIER
        """
        self._gate.require_admin(caller)
        self._fee_multiplier = self._validate_multiplier(multiplier)
        logger.info("fee_multiplier_updated", fee_multiplier=multiplier)

    def set_pool_fee_override(self, caller: str, pool_id: str, fee: int) -> None:
        """Set (or clear, with 0) the fee override of a pool."""
        self._gate.require_admin(caller)
        validate_lp_fee(fee)
        if fee == 0:
            self._overrides.pop(pool_id, None)
        else:
            self._overrides[pool_id] = fee
        logger.info("pool_fee_override_updated", pool_id=pool_id, fee=fee)

    def set_pool_oracle(
        self, caller: str, pool_id: str, feed: str | None, compare_against_token0: bool
    ) -> None:
        """Bind a reference feed to a pool.

        Passing None or the zero address as feed removes the binding.

        Raises:
            Unauthorized: If caller is not the admin
            InvalidArgument: If feed is not a valid address
        """
        self._gate.require_admin(caller)
        if feed is None or normalize_address(feed) == ZERO_ADDRESS:
            self._bindings.pop(pool_id, None)
            logger.info("pool_oracle_cleared", pool_id=pool_id)
            return
        feed_addr = normalize_address(feed)
        if not is_valid_address(feed_addr):
            raise InvalidArgument(f"Invalid feed address: {feed}")
        self._bindings[pool_id] = OracleBinding(feed_addr, bool(compare_against_token0))
        logger.info(
            "pool_oracle_updated",
            pool_id=pool_id,
            feed=feed_addr,
            compare_against_token0=bool(compare_against_token0),
        )
