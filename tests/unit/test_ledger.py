"""Tests for the in-memory pool manager."""

import pytest

from fee_hook.constants import MAX_LP_FEE, MAX_SQRT_PRICE, MIN_SQRT_PRICE, Q96
from fee_hook.errors import InvalidFee, PoolNotInitialized, SqrtPriceOutOfRange
from fee_hook.ledger import InMemoryLedger
from tests.helpers import make_pool_key


class TestInitialize:
    """Tests for pool initialization."""

    def test_returns_pool_id(self, ledger):
        key = make_pool_key()
        assert ledger.initialize(key, Q96) == key.pool_id
        assert ledger.read_price_snapshot(key.pool_id) == Q96
        assert ledger.lp_fee(key.pool_id) == 0

    @pytest.mark.parametrize("sqrt_price", [0, MIN_SQRT_PRICE - 1, MAX_SQRT_PRICE])
    def test_out_of_range_rejected(self, ledger, sqrt_price):
        with pytest.raises(SqrtPriceOutOfRange):
            ledger.initialize(make_pool_key(), sqrt_price)


class TestSnapshots:
    """Tests for price snapshots."""

    def test_unknown_pool(self, ledger):
        with pytest.raises(PoolNotInitialized):
            ledger.read_price_snapshot("0x" + "00" * 32)

    def test_set_price(self, ledger):
        pool_id = ledger.initialize(make_pool_key(), Q96)
        ledger.set_price(pool_id, 2 * Q96)
        assert ledger.read_price_snapshot(pool_id) == 2 * Q96

    def test_set_price_unknown_pool(self, ledger):
        with pytest.raises(PoolNotInitialized):
            ledger.set_price("0x" + "00" * 32, Q96)


class TestDynamicFee:
    """Tests for dynamic fee updates."""

    def test_fee_recorded(self, ledger):
        pool_id = ledger.initialize(make_pool_key(), Q96)
        ledger.set_dynamic_fee(pool_id, 3000)
        ledger.set_dynamic_fee(pool_id, 26141)
        assert ledger.lp_fee(pool_id) == 26141
        assert ledger.fee_updates == [(pool_id, 3000), (pool_id, 26141)]

    def test_fee_above_max_rejected(self, ledger):
        pool_id = ledger.initialize(make_pool_key(), Q96)
        with pytest.raises(InvalidFee):
            ledger.set_dynamic_fee(pool_id, MAX_LP_FEE + 1)
        assert ledger.fee_updates == []

    def test_unknown_pool(self):
        ledger = InMemoryLedger()
        with pytest.raises(PoolNotInitialized):
            ledger.set_dynamic_fee("0x" + "00" * 32, 3000)
