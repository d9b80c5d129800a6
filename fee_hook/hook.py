"""Dynamic fee hook.

DynamicFeeHook is the boundary the pool manager calls before liquidity
changes and swaps. It checks the acting account against the PermissionGate
and, for swaps, runs price derivation, reference normalization and the fee
engine, then pushes the fee back to the pool manager.

Each callback computes its full result before the single write to the ledger,
so a failure leaves fee, permission and binding state untouched.
"""

from __future__ import annotations

import time
from dataclasses import dataclass

import structlog

from fee_hook.constants import DYNAMIC_FEE_FLAG
from fee_hook.errors import NotDynamicFee
from fee_hook.fees.engine import FeeEngine
from fee_hook.fees.result import FeeQuote
from fee_hook.ledger import LedgerCollaborator
from fee_hook.models.params import ModifyLiquidityParams, SwapParams, TradeDirection
from fee_hook.models.pool import PoolKey
from fee_hook.oracle import OracleReader
from fee_hook.permissions import Capability, PermissionGate
from fee_hook.pricing.pool_price import derive_pool_prices
from fee_hook.pricing.reference import reference_price_for_pool
from fee_hook.settings import HookSettings
from fee_hook.tokens import TokenMetadata

logger = structlog.get_logger()


@dataclass(frozen=True)
class HookPermissions:
    """Pool manager callbacks this hook implements."""

    before_initialize: bool = True
    before_add_liquidity: bool = True
    before_remove_liquidity: bool = True
    before_swap: bool = True


class DynamicFeeHook:
    """Permission-gated, oracle-aware dynamic fee hook.

    Args:
        ledger: Pool manager collaborator (price snapshots, fee updates)
        oracle: Reference feed reader
        tokens: Currency decimals lookup
        gate: Permission gate (a fresh one without admin if None)
        settings: Fee settings (defaults bound to gate if None)
        engine: Fee engine (default config if None)
    """

    def __init__(
        self,
        ledger: LedgerCollaborator,
        oracle: OracleReader,
        tokens: TokenMetadata,
        gate: PermissionGate | None = None,
        settings: HookSettings | None = None,
        engine: FeeEngine | None = None,
    ) -> None:
        self.ledger = ledger
        self.oracle = oracle
        self.tokens = tokens
        self.gate = gate or PermissionGate()
        self.settings = settings or HookSettings(self.gate)
        self.engine = engine or FeeEngine()

    @staticmethod
    def permissions() -> HookPermissions:
        return HookPermissions()

    # --- Pool manager callbacks ---

    def before_initialize(self, sender: str, key: PoolKey, sqrt_price_x96: int) -> None:
        """Only pools created with the dynamic fee flag may use this hook."""
        if key.fee != DYNAMIC_FEE_FLAG:
            raise NotDynamicFee(f"Pool fee tag {key.fee:#x} is not the dynamic fee flag")
        logger.info(
            "pool_initializing",
            sender=sender,
            pool_id=key.pool_id,
            sqrt_price_x96=sqrt_price_x96,
        )

    def before_add_liquidity(
        self, sender: str, key: PoolKey, params: ModifyLiquidityParams
    ) -> None:
        self.gate.require(Capability.MANAGE_LIQUIDITY, sender)

    def before_remove_liquidity(
        self, sender: str, key: PoolKey, params: ModifyLiquidityParams
    ) -> None:
        self.gate.require(Capability.MANAGE_LIQUIDITY, sender)

    def before_swap(self, sender: str, key: PoolKey, params: SwapParams) -> FeeQuote:
        """Gate the swap, compute its fee and push the fee to the pool manager.

        Raises:
            Forbidden: If sender lacks the trade capability
            SqrtPriceOutOfRange: If the pool price snapshot is out of bounds
            FeeArithmeticError: On a degenerate price or fee overflow
        """
        self.gate.require(Capability.TRADE, sender)
        quote = self.quote_fee(key, params.direction)
        self.ledger.set_dynamic_fee(key.pool_id, quote.fee)
        logger.info(
            "swap_fee_applied",
            sender=sender,
            pool_id=key.pool_id,
            direction=params.direction.value,
            fee=quote.fee,
            adjusted=quote.adjusted,
        )
        return quote

    # --- Fee computation ---

    def _reference_price(self, key: PoolKey, now: int | None) -> tuple[int | None, bool]:
        """Normalized reference price for a pool, or None when unavailable."""
        binding = self.settings.oracle_binding(key.pool_id)
        if binding.feed is None:
            return None, binding.compare_against_token0

        quote = self.oracle.read_latest_quote(binding.feed)
        if quote is None:
            logger.warning("oracle_quote_unavailable", pool_id=key.pool_id, feed=binding.feed)
            return None, binding.compare_against_token0

        max_age = self.engine.config.max_quote_age
        if max_age is not None:
            current = int(time.time()) if now is None else now
            if quote.age(current) > max_age:
                logger.warning(
                    "stale_oracle_quote",
                    pool_id=key.pool_id,
                    feed=binding.feed,
                    updated_at=quote.updated_at,
                    max_quote_age=max_age,
                )
                return None, binding.compare_against_token0

        index = 0 if binding.compare_against_token0 else 1
        target_decimals = self.tokens.decimals(key.currency(index))
        return reference_price_for_pool(quote, target_decimals), binding.compare_against_token0

    def quote_fee(
        self, key: PoolKey, direction: TradeDirection, now: int | None = None
    ) -> FeeQuote:
        """Compute the fee a swap in direction would pay, without applying it."""
        pool_id = key.pool_id
        prices = derive_pool_prices(self.ledger.read_price_snapshot(pool_id))
        reference_price, compare_against_token0 = self._reference_price(key, now)
        return self.engine.compute_fee(
            base_fee=self.settings.base_fee,
            override_fee=self.settings.fee_override(pool_id),
            prices=prices,
            reference_price=reference_price,
            compare_against_token0=compare_against_token0,
            direction=direction,
            multiplier=self.settings.fee_multiplier,
        )

    # --- Administrative surface ---

    def set_admin(self, account: str) -> None:
        self.gate.set_admin(account)

    def update_admin(self, caller: str, new_admin: str) -> None:
        self.gate.transfer_admin(caller, new_admin)

    def set_base_fee(self, caller: str, fee: int) -> None:
        self.settings.set_base_fee(caller, fee)

    def set_fee_multiplier(self, caller: str, multiplier: int) -> None:
        self.settings.set_fee_multiplier(caller, multiplier)

    def set_pool_fee_override(self, caller: str, key: PoolKey, fee: int) -> None:
        self.settings.set_pool_fee_override(caller, key.pool_id, fee)

    def set_pool_oracle(
        self, caller: str, key: PoolKey, feed: str | None, compare_against_token0: bool
    ) -> None:
        self.settings.set_pool_oracle(caller, key.pool_id, feed, compare_against_token0)

    def grant_trade_permission(self, caller: str, account: str, allowed: bool) -> None:
        self.gate.grant_trade(caller, account, allowed)

    def grant_liquidity_permission(self, caller: str, account: str, allowed: bool) -> None:
        self.gate.grant_liquidity(caller, account, allowed)
