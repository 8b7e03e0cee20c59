"""Django admin registrations. Stats and webhook events are read-only here."""

from django.contrib import admin

from .models import BotSettings, Stats, Transaction, Wallet, WebhookConfig, WebhookEvent


@admin.register(Wallet)
class WalletAdmin(admin.ModelAdmin):
	list_display = ("id", "name", "address", "currency", "network", "is_active", "created_at")
	list_filter = ("currency", "is_active")
	search_fields = ("name", "address", "discord_user_id")


@admin.register(Transaction)
class TransactionAdmin(admin.ModelAdmin):
	list_display = ("id", "transaction_id", "amount", "currency", "status", "confirmations", "required_confirmations", "wallet")
	list_filter = ("status", "currency")
	search_fields = ("transaction_id",)


@admin.register(WebhookConfig)
class WebhookConfigAdmin(admin.ModelAdmin):
	list_display = ("url", "notify_success", "notify_pending", "notify_failed", "notify_wallet")


@admin.register(BotSettings)
class BotSettingsAdmin(admin.ModelAdmin):
	exclude = ("token", "discord_client_secret", "gitbook_api_key")


@admin.register(Stats)
class StatsAdmin(admin.ModelAdmin):
	list_display = ("total_transactions", "total_volume", "active_wallets", "webhook_calls", "updated_at")

	def has_add_permission(self, request):
		return False

	def has_change_permission(self, request, obj=None):
		return False


@admin.register(WebhookEvent)
class WebhookEventAdmin(admin.ModelAdmin):
	list_display = ("id", "event_type", "transaction", "status", "suppressed", "created_at")
	list_filter = ("event_type", "suppressed")
	readonly_fields = ("event_type", "transaction", "status", "target_url", "suppressed", "payload", "created_at")
