"""PoolKey model and pool identity derivation."""

from __future__ import annotations

from eth_abi import encode  # type: ignore[attr-defined]
from eth_utils import keccak
from pydantic import BaseModel, Field, field_validator, model_validator

from fee_hook.models.types import Address, Int24, Uint24, normalize_address

_ZERO_ADDRESS = "0x" + "00" * 20

# ABI layout of a PoolKey struct, hashed to obtain the pool id
POOL_KEY_ABI_TYPES = ["address", "address", "uint24", "int24", "address"]


class PoolKey(BaseModel):
    """Identifies a pool: its two currencies, fee tag, tick spacing and hook.

    Currencies are stored lowercase and must be sorted (currency0 < currency1),
    matching the pool manager's ordering. The zero address stands for the
    native currency.
    """

    currency0: Address
    currency1: Address
    fee: Uint24
    tick_spacing: Int24 = Field(alias="tickSpacing")
    hooks: Address = _ZERO_ADDRESS

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("currency0", "currency1", "hooks")
    @classmethod
    def _lowercase(cls, value: str) -> str:
        return normalize_address(value)

    @model_validator(mode="after")
    def _check_order(self) -> PoolKey:
        if int(self.currency0, 16) >= int(self.currency1, 16):
            raise ValueError(
                f"Currencies out of order or equal: {self.currency0} >= {self.currency1}"
            )
        return self

    @property
    def pool_id(self) -> str:
        """keccak256(abi.encode(key)) as a 0x-prefixed hex string."""
        return pool_id_of(self)

    def currency(self, index: int) -> str:
        """Return currency0 (index 0) or currency1 (index 1)."""
        if index == 0:
            return self.currency0
        if index == 1:
            return self.currency1
        raise ValueError(f"Pool currency index must be 0 or 1, got {index}")


def pool_id_of(key: PoolKey) -> str:
    """Derive the stable pool identifier for a PoolKey."""
    encoded = encode(
        POOL_KEY_ABI_TYPES,
        [key.currency0, key.currency1, key.fee, key.tick_spacing, key.hooks],
    )
    return "0x" + keccak(encoded).hex()


__all__ = ["PoolKey", "pool_id_of", "POOL_KEY_ABI_TYPES"]
