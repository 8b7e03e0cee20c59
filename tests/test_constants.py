# test_constants.py
from types import SimpleNamespace

import pytest

from core.constants import (
    DEFAULT_CONFIRMATIONS,
    format_count_delta,
    format_growth,
    required_confirmations,
)


class TestRequiredConfirmations:
    def test_currency_defaults(self):
        assert required_confirmations("BTC", None) == 3
        assert required_confirmations("ETH", None) == 15
        assert required_confirmations("LTC", None) == 6

    def test_network_wins_over_currency(self):
        assert required_confirmations("USDT", "TRC20") == 15
        assert required_confirmations("ETH", "erc20") == 12
        assert required_confirmations("USDC", " bep20 ") == 10

    def test_unknown_pair_has_no_requirement(self):
        assert required_confirmations("DOGE", None) is None
        assert required_confirmations(None, None) is None

    def test_unknown_network_falls_back_to_currency(self):
        assert required_confirmations("BTC", "LIGHTNING") == 3

    def test_saved_settings_override_defaults(self):
        saved = SimpleNamespace(**dict(DEFAULT_CONFIRMATIONS, bitcoin_confirmations=6))
        assert required_confirmations("btc", None, saved) == 6
        assert required_confirmations("ETH", None, saved) == 15


class TestGrowthFormatting:
    @pytest.mark.parametrize("current,previous,expected", [
        (3, 2, "+50%"),
        (1, 3, "-66.7%"),
        (0, 4, "-100%"),
        (2, 2, "0%"),
        (5, 0, "+100%"),
        (0, 0, "0%"),
        (None, None, "0%"),
    ])
    def test_format_growth(self, current, previous, expected):
        assert format_growth(current, previous) == expected

    def test_format_count_delta(self):
        assert format_count_delta(0) == "0"
        assert format_count_delta(4) == "+4"
