"""Hook error classes.

Every failure is terminal for the call that raised it and leaves no partial
state behind. Callers decide whether to resubmit.
"""


class HookError(Exception):
    """Base error for hook operations."""

    pass


class Unauthorized(HookError):
    """Caller is not the admin."""

    pass


class AdminAlreadySet(Unauthorized):
    """The one-time admin bootstrap has already happened."""

    pass


class InvalidArgument(HookError, ValueError):
    """Malformed configuration input."""

    pass


class InvalidFee(InvalidArgument):
    """LP fee outside [0, MAX_LP_FEE]."""

    pass


class InvalidMultiplier(InvalidArgument):
    """Fee sensitivity multiplier above 100%."""

    pass


class NotDynamicFee(InvalidArgument):
    """Pool was not created with the dynamic fee flag."""

    pass


class UnknownToken(InvalidArgument):
    """No decimals known for a pool currency."""

    pass


class OutOfRange(HookError):
    """Price snapshot outside the bounds accepted by the pool manager."""

    pass


class SqrtPriceOutOfRange(OutOfRange):
    """sqrt_price_x96 outside [MIN_SQRT_PRICE, MAX_SQRT_PRICE)."""

    pass


class FeeArithmeticError(HookError, ArithmeticError):
    """Degenerate price state or fee outside the representable range."""

    pass


class ZeroPrice(FeeArithmeticError):
    """A derived pool price evaluated to zero."""

    pass


class FeeOverflow(FeeArithmeticError):
    """Adjusted fee exceeds the maximum LP fee."""

    pass


class PoolNotInitialized(HookError):
    """The ledger has no price snapshot for the pool."""

    pass


class Forbidden(HookError):
    """Account lacks the capability required for an action."""

    def __init__(self, capability: str, account: str) -> None:
        super().__init__(f"{account} lacks {capability} permission")
        self.capability = capability
        self.account = account
