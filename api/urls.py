"""Public API surface for the dashboard SPA.

- /health, /csrf: liveness and CSRF cookie bootstrap
- /stats: derived dashboard counters
- /wallets, /transactions: CRUD with the lifecycle rules in core.services
- /webhook-config, /bot-settings: singleton upserts
"""

from django.urls import path
from .views_read import health, csrf, stats
from .views_wallets import wallets, wallet_detail
from .views_transactions import transactions, transaction_detail
from .views_settings import webhook_config, bot_settings


urlpatterns = [
	path("health", health),
	path("csrf", csrf),
	path("stats", stats),
	path("wallets", wallets),
	path("wallets/<str:wallet_id>", wallet_detail),
	path("transactions", transactions),
	path("transactions/<str:txn_id>", transaction_detail),
	path("webhook-config", webhook_config),
	path("bot-settings", bot_settings),
]
