# conftest.py
from decimal import Decimal

import pytest

from core.models import Stats
from core.services import TransactionServices, WalletServices


@pytest.fixture
def make_wallet(db):
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        data = {
            "name": f"wallet-{counter['n']}",
            "address": f"addr-{counter['n']}",
            "currency": "BTC",
            "network": None,
            "discord_user_id": None,
            "is_active": True,
        }
        data.update(overrides)
        return WalletServices.create(data)

    return _make


@pytest.fixture
def make_transaction(db):
    counter = {"n": 0}

    def _make(wallet, **overrides):
        counter["n"] += 1
        data = {
            "transaction_id": f"tx-{counter['n']}",
            "wallet_id": wallet.pk,
            "amount": Decimal("1.5"),
            "currency": wallet.currency,
            "network": wallet.network,
            "confirmations": 0,
            "required_confirmations": None,
        }
        data.update(overrides)
        return TransactionServices.create(data)

    return _make


def stats_snapshot():
    s = Stats.load()
    return (s.total_transactions, s.total_volume, s.active_wallets, s.webhook_calls)


@pytest.fixture
def snapshot(db):
    """Callable returning the Stats counters as a comparable tuple"""
    return stats_snapshot
