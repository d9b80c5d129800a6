"""Access control for pool actions.

PermissionGate keeps two independent allow-lists, one per capability, and a
single admin identity that is bootstrapped once and afterwards only changed by
itself. Unknown identities are denied.
"""

from __future__ import annotations

from enum import Enum

import structlog

from fee_hook.constants import ZERO_ADDRESS
from fee_hook.errors import AdminAlreadySet, Forbidden, InvalidArgument, Unauthorized
from fee_hook.models.types import is_valid_address, normalize_address

logger = structlog.get_logger()


class Capability(str, Enum):
    """Actions gated by the allow-lists."""

    TRADE = "trade"
    MANAGE_LIQUIDITY = "manage_liquidity"


def _valid_account(account: str, role: str) -> str:
    """Normalize an account, rejecting malformed identities."""
    if not isinstance(account, str):
        raise InvalidArgument(f"Invalid {role} address: {account!r}")
    addr = normalize_address(account)
    if not is_valid_address(addr):
        raise InvalidArgument(f"Invalid {role} address: {account}")
    return addr


def _checked_account(account: str, role: str) -> str:
    """Like _valid_account, but also rejects the null identity."""
    addr = _valid_account(account, role)
    if addr == ZERO_ADDRESS:
        raise InvalidArgument(f"{role} cannot be the zero address")
    return addr


class PermissionGate:
    """Two-capability allow-list with a single-writer admin.

    Attributes:
        admin: Current admin address, or None before bootstrap
    """

    def __init__(self, admin: str | None = None) -> None:
        """Initialize the gate.

        Args:
            admin: Optional admin to install immediately (same rules as set_admin)
        """
        self._admin: str | None = None
        self._allowed: dict[Capability, dict[str, bool]] = {
            capability: {} for capability in Capability
        }
        if admin is not None:
            self.set_admin(admin)

    @property
    def admin(self) -> str | None:
        return self._admin

    def is_admin(self, account: str) -> bool:
        if self._admin is None or not isinstance(account, str):
            return False
        return normalize_address(account) == self._admin

    def require_admin(self, caller: str) -> None:
        """Raise Unauthorized unless caller is the current admin."""
        if not self.is_admin(caller):
            logger.warning("unauthorized_admin_call", caller=caller, admin=self._admin)
            raise Unauthorized(f"{caller} is not the admin")

    def set_admin(self, account: str) -> None:
        """Install the first admin.

        Raises:
            AdminAlreadySet: If an admin already exists
            InvalidArgument: If account is malformed or the zero address
        """
        if self._admin is not None:
            raise AdminAlreadySet(f"Admin already set to {self._admin}")
        self._admin = _checked_account(account, "admin")
        logger.info("admin_set", admin=self._admin)

    def transfer_admin(self, caller: str, new_admin: str) -> None:
        """Hand the admin role to another account.

        Raises:
            Unauthorized: If caller is not the current admin
            InvalidArgument: If new_admin is malformed or the zero address
        """
        self.require_admin(caller)
        new_addr = _checked_account(new_admin, "admin")
        previous, self._admin = self._admin, new_addr
        logger.info("admin_transferred", previous_admin=previous, admin=new_addr)

    def grant(self, caller: str, capability: Capability, account: str, allowed: bool) -> None:
        """Overwrite the stored permission for (capability, account).

        Raises:
            Unauthorized: If caller is not the current admin
            InvalidArgument: If account is malformed
        """
        self.require_admin(caller)
        addr = _valid_account(account, "account")
        self._allowed[Capability(capability)][addr] = bool(allowed)
        logger.info(
            "permission_granted",
            capability=Capability(capability).value,
            account=addr,
            allowed=bool(allowed),
        )

    def grant_trade(self, caller: str, account: str, allowed: bool) -> None:
        self.grant(caller, Capability.TRADE, account, allowed)

    def grant_liquidity(self, caller: str, account: str, allowed: bool) -> None:
        self.grant(caller, Capability.MANAGE_LIQUIDITY, account, allowed)

    def check(self, capability: Capability, account: str) -> bool:
        """Return whether account holds capability. Never raises."""
        if not isinstance(account, str):
            return False
        try:
            allowed = self._allowed[Capability(capability)]
        except ValueError:
            return False
        return allowed.get(normalize_address(account), False)

    def require(self, capability: Capability, account: str) -> None:
        """Raise Forbidden unless account holds capability."""
        if not self.check(capability, account):
            name = capability.value if isinstance(capability, Capability) else str(capability)
            logger.warning("permission_denied", capability=name, account=account)
            raise Forbidden(name, account)
