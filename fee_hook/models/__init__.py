"""Data models for the oracle fee hook."""

from fee_hook.models.types import (
    Address,
    Int24,
    Uint24,
    is_valid_address,
    normalize_address,
)
from fee_hook.models.oracle import OracleQuote
from fee_hook.models.params import ModifyLiquidityParams, SwapParams, TradeDirection
from fee_hook.models.pool import PoolKey, pool_id_of

__all__ = [
    # Types
    "Address",
    "Int24",
    "Uint24",
    "is_valid_address",
    "normalize_address",
    # Pool
    "PoolKey",
    "pool_id_of",
    # Params
    "ModifyLiquidityParams",
    "SwapParams",
    "TradeDirection",
    # Oracle
    "OracleQuote",
]
