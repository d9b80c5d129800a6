"""Shared type definitions for hook models.

These types are used across pool, oracle and API models.
"""

from typing import Annotated

from pydantic import Field

UINT24_MAX = 2**24 - 1
INT24_MIN = -(2**23)
INT24_MAX = 2**23 - 1

# Ethereum address (40 hex chars after 0x prefix)
Address = Annotated[str, Field(pattern=r"^0x[a-fA-F0-9]{40}$")]

# LP fee or fee tag packed in a uint24
Uint24 = Annotated[int, Field(ge=0, le=UINT24_MAX)]

# Tick spacing packed in an int24
Int24 = Annotated[int, Field(ge=INT24_MIN, le=INT24_MAX)]


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False
