"""Oracle-aware dynamic fee hook with permissioned access."""

from fee_hook.hook import DynamicFeeHook, HookPermissions
from fee_hook.permissions import Capability, PermissionGate

__version__ = "0.1.0"
__all__ = ["DynamicFeeHook", "HookPermissions", "Capability", "PermissionGate", "__version__"]
