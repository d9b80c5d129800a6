"""Pytest configuration and fixtures."""

import pytest

from fee_hook.hook import DynamicFeeHook
from fee_hook.ledger import InMemoryLedger
from fee_hook.models import PoolKey
from fee_hook.oracle import StaticOracle
from fee_hook.permissions import PermissionGate
from fee_hook.pricing import sqrt_price_from_ratio
from fee_hook.tokens import StaticTokenMetadata
from tests.helpers import ADMIN, TOKEN_DECIMALS, make_pool_key

# Pool starts at 3800 USD per ETH
POOL_PRICE = 3800


@pytest.fixture
def gate() -> PermissionGate:
    """A permission gate with ADMIN installed."""
    return PermissionGate(admin=ADMIN)


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger()


@pytest.fixture
def oracle() -> StaticOracle:
    """An oracle with no feeds configured."""
    return StaticOracle()


@pytest.fixture
def tokens() -> StaticTokenMetadata:
    return StaticTokenMetadata(TOKEN_DECIMALS)


@pytest.fixture
def pool_key() -> PoolKey:
    return make_pool_key()


@pytest.fixture
def hook(
    ledger: InMemoryLedger,
    oracle: StaticOracle,
    tokens: StaticTokenMetadata,
    gate: PermissionGate,
    pool_key: PoolKey,
) -> DynamicFeeHook:
    """A hook wired to in-memory collaborators, with the ETH/USD pool at 3800."""
    hook = DynamicFeeHook(ledger=ledger, oracle=oracle, tokens=tokens, gate=gate)
    sqrt_price = sqrt_price_from_ratio(POOL_PRICE)
    hook.before_initialize(ADMIN, pool_key, sqrt_price)
    ledger.initialize(pool_key, sqrt_price)
    return hook
