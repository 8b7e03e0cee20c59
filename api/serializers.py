"""Model -> JSON shapes for the dashboard SPA.

The SPA speaks camelCase; models are snake_case. Decimals go out as strings so
amounts survive the round trip exactly.
"""

import re
from decimal import Decimal

from core.constants import SECRET_MASK


def to_camel(name: str) -> str:
	if name.startswith("_"):
		return name
	head, *rest = name.split("_")
	return head + "".join(part[:1].upper() + part[1:] for part in rest)


def to_snake(name: str) -> str:
	return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def payload_from_body(body: dict) -> dict:
	"""
	Incoming JSON object with keys converted to model field names
	"""
	return {to_snake(k): v for k, v in body.items()}


def _ts(value):
	return value.isoformat() if value else None


def _decimal(value) -> str:
	# DB round trips pad to the column scale; "1.50000000" and "1.5" must read the same
	return format(Decimal(value).normalize(), "f")


def _mask(value):
	return SECRET_MASK if value else None


def wallet_to_dict(w) -> dict:
	return {
		"id": w.id,
		"name": w.name,
		"address": w.address,
		"currency": w.currency,
		"network": w.network,
		"discordUserId": w.discord_user_id,
		"isActive": w.is_active,
		"createdAt": _ts(w.created_at),
	}


def transaction_to_dict(t) -> dict:
	return {
		"id": t.id,
		"transactionId": t.transaction_id,
		"amount": _decimal(t.amount),
		"currency": t.currency,
		"network": t.network,
		"confirmations": t.confirmations,
		"requiredConfirmations": t.required_confirmations,
		"status": t.status,
		"walletId": t.wallet_id,
		"createdAt": _ts(t.created_at),
		"updatedAt": _ts(t.updated_at),
	}


def stats_to_dict(s) -> dict:
	return {
		"id": s.id,
		"totalTransactions": s.total_transactions,
		"totalVolume": _decimal(s.total_volume),
		"activeWallets": s.active_wallets,
		"webhookCalls": s.webhook_calls,
		"transactionsGrowth": s.transactions_growth,
		"volumeGrowth": s.volume_growth,
		"walletsGrowth": s.wallets_growth,
		"webhooksGrowth": s.webhooks_growth,
		"updatedAt": _ts(s.updated_at),
	}


def webhook_config_to_dict(c) -> dict:
	return {
		"id": c.id,
		"url": c.url,
		"notifySuccess": c.notify_success,
		"notifyPending": c.notify_pending,
		"notifyFailed": c.notify_failed,
		"notifyWallet": c.notify_wallet,
		"createdAt": _ts(c.created_at),
		"updatedAt": _ts(c.updated_at),
	}


def bot_settings_to_dict(b) -> dict:
	"""
	Secrets (bot token, Discord client secret, GitBook key) are always masked
	"""
	return {
		"id": b.id,
		"token": _mask(b.token),
		"bitcoinConfirmations": b.bitcoin_confirmations,
		"ethereumConfirmations": b.ethereum_confirmations,
		"litecoinConfirmations": b.litecoin_confirmations,
		"erc20Confirmations": b.erc20_confirmations,
		"trc20Confirmations": b.trc20_confirmations,
		"bep20Confirmations": b.bep20_confirmations,
		"polygonConfirmations": b.polygon_confirmations,
		"solanaConfirmations": b.solana_confirmations,
		"discordClientId": b.discord_client_id,
		"discordClientSecret": _mask(b.discord_client_secret),
		"discordRedirectUri": b.discord_redirect_uri,
		"discordGuildId": b.discord_guild_id,
		"gitbookApiKey": _mask(b.gitbook_api_key),
		"gitbookSpaceId": b.gitbook_space_id,
		"createdAt": _ts(b.created_at),
		"updatedAt": _ts(b.updated_at),
	}
