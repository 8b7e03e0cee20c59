"""Confirmation policy and stats formatting helpers shared across the backend.


- DEFAULT_CONFIRMATIONS holds the per-chain thresholds used until bot settings are saved.
- required_confirmations picks the threshold for a currency/network pair.
- format_growth / format_count_delta render the stats growth strings.
"""

from decimal import Decimal, ROUND_HALF_UP

# Threshold field on BotSettings -> default number of confirmations
DEFAULT_CONFIRMATIONS = {
    "bitcoin_confirmations": 3,
    "ethereum_confirmations": 15,
    "litecoin_confirmations": 6,
    "erc20_confirmations": 12,
    "trc20_confirmations": 15,
    "bep20_confirmations": 10,
    "polygon_confirmations": 15,
    "solana_confirmations": 32,
}

# Token networks win over the currency: USDT on TRC20 follows Tron, not Ethereum.
NETWORK_THRESHOLDS = {
    "ERC20": "erc20_confirmations",
    "TRC20": "trc20_confirmations",
    "BEP20": "bep20_confirmations",
    "POLYGON": "polygon_confirmations",
    "SOLANA": "solana_confirmations",
    "SPL": "solana_confirmations",
}

CURRENCY_THRESHOLDS = {
    "BTC": "bitcoin_confirmations",
    "ETH": "ethereum_confirmations",
    "LTC": "litecoin_confirmations",
    "SOL": "solana_confirmations",
    "MATIC": "polygon_confirmations",
    "POL": "polygon_confirmations",
}

SECRET_MASK = "••••••••••••••••••••••••••"


def threshold_field(currency: str | None, network: str | None) -> str | None:
    """
    Name of the BotSettings threshold that applies to a currency/network pair (or None)
    """
    if network:
        field = NETWORK_THRESHOLDS.get(network.strip().upper())
        if field:
            return field
    if currency:
        return CURRENCY_THRESHOLDS.get(currency.strip().upper())
    return None


def required_confirmations(currency: str | None, network: str | None, bot_settings=None) -> int | None:
    """
    Confirmations needed before a transaction on this chain counts as final.

    Reads the saved bot settings when given, otherwise the defaults above.
    """
    field = threshold_field(currency, network)
    if field is None:
        return None
    if bot_settings is not None:
        return getattr(bot_settings, field)
    return DEFAULT_CONFIRMATIONS[field]


def _strip_zero(value: Decimal) -> Decimal:
    return value.quantize(Decimal("1")) if value == value.to_integral_value() else value


def format_growth(current, previous) -> str:
    """
    Signed percentage change between two windows, e.g. "+12.5%", "-40%", "0%"
    """
    current = Decimal(current or 0)
    previous = Decimal(previous or 0)
    if previous == 0:
        return "+100%" if current > 0 else "0%"
    change = ((current - previous) * 100 / previous).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    if change == 0:
        return "0%"
    return f"{_strip_zero(change):+}%"


def format_count_delta(count: int) -> str:
    """
    "+N" for new items in the window, "0" when nothing changed
    """
    return f"+{count}" if count > 0 else "0"
