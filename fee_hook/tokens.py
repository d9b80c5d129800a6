"""Token metadata lookup (decimals of pool currencies)."""

from __future__ import annotations

from typing import Protocol

from fee_hook.constants import NATIVE_DECIMALS, ZERO_ADDRESS
from fee_hook.errors import UnknownToken
from fee_hook.models.types import normalize_address


class TokenMetadata(Protocol):
    """Protocol for currency decimals lookup."""

    def decimals(self, token: str) -> int:
        """Return the decimals of a currency.

        Raises:
            UnknownToken: If the currency is not known
        """
        ...


class StaticTokenMetadata:
    """Decimals from a fixed table. The zero address is the native currency."""

    def __init__(self, decimals: dict[str, int] | None = None) -> None:
        self._decimals = {normalize_address(t): d for t, d in (decimals or {}).items()}
        self._decimals.setdefault(ZERO_ADDRESS, NATIVE_DECIMALS)

    def register(self, token: str, decimals: int) -> None:
        self._decimals[normalize_address(token)] = decimals

    def decimals(self, token: str) -> int:
        try:
            return self._decimals[normalize_address(token)]
        except KeyError:
            raise UnknownToken(f"No decimals known for {token}") from None
