"""Database models for the dashboard backend.


Tables:
- Wallet: a receiving address the bot watches, optionally owned by a Discord user
- TransactionStatus
- Transaction: an incoming payment and its confirmation progress
- WebhookConfig: singleton, where and when the bot posts notifications
- BotSettings: singleton, bot token and per-chain confirmation thresholds
- Stats: singleton aggregate shown on the dashboard, never written by clients
- WebhookEvent: one row per notification dispatched for a transaction
"""

from django.db import models

from .constants import DEFAULT_CONFIRMATIONS


SINGLETON_PK = 1


class SingletonModel(models.Model):
	"""
	A table that holds at most one row.

	The row always lives at SINGLETON_PK, so the primary key constraint is what
	stops two concurrent first writes from creating two rows.
	"""

	class Meta:
		abstract = True

	def save(self, *args, **kwargs):
		self.pk = SINGLETON_PK
		super().save(*args, **kwargs)

	@classmethod
	def current(cls):
		return cls.objects.filter(pk=SINGLETON_PK).first()


class Wallet(models.Model):
	"""
	Address is unique (case-sensitive) across all wallets
	"""
	id = models.BigAutoField(primary_key=True)
	name = models.CharField(max_length=100)
	address = models.CharField(max_length=255, unique=True)
	currency = models.CharField(max_length=16)
	network = models.CharField(max_length=32, null=True, blank=True) # ERC20, TRC20, BEP20, ...
	discord_user_id = models.CharField(max_length=32, null=True, blank=True)
	is_active = models.BooleanField(default=True)
	created_at = models.DateTimeField(auto_now_add=True)

	class Meta:
		db_table = "wallets"

	def __str__(self):
		return f"{self.name} ({self.address})"


class TransactionStatus(models.TextChoices):
	PENDING = "pending", "Pending"
	COMPLETED = "completed", "Completed"
	FAILED = "failed", "Failed"


class Transaction(models.Model):
	"""
	An incoming payment tracked until it is completed or failed.

	transaction_id is the chain/provider identifier and is unique, so the bot can
	safely re-submit the same payment. Status only ever leaves PENDING.
	"""
	id = models.BigAutoField(primary_key=True)
	transaction_id = models.CharField(max_length=128, unique=True)
	amount = models.DecimalField(max_digits=30, decimal_places=8)
	currency = models.CharField(max_length=16)
	network = models.CharField(max_length=32, null=True, blank=True)
	confirmations = models.PositiveIntegerField(null=True, blank=True)
	required_confirmations = models.PositiveIntegerField(null=True, blank=True)
	status = models.CharField(max_length=16, choices=TransactionStatus.choices, default=TransactionStatus.PENDING)
	# History outlives the wallet: deleting a wallet clears the reference
	wallet = models.ForeignKey(Wallet, null=True, on_delete=models.SET_NULL, related_name="transactions")
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		db_table = "transactions"
		indexes = [
			models.Index(fields=["currency"], name="transactions_currency_idx"),
			models.Index(fields=["created_at"], name="transactions_created_idx"),
		]

	def __str__(self):
		return self.transaction_id

	def can_transition_to(self, status: str) -> bool:
		if status == self.status:
			return True
		return self.status == TransactionStatus.PENDING and status in (TransactionStatus.COMPLETED, TransactionStatus.FAILED)


class WebhookConfig(SingletonModel):
	"""
	notify_wallet is stored for the bot's wallet-update notifications.
	Transaction dispatch only reads the success/pending/failed toggles.
	"""
	url =models.URLField(max_length=500)
	notify_success = models.BooleanField(default=True)
	notify_pending = models.BooleanField(default=True)
	notify_failed = models.BooleanField(default=True)
	notify_wallet = models.BooleanField(default=False)
	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		db_table = "webhook_configs"

	def wants(self, status: str) -> bool:
		"""
		Whether a notification for a transaction in this status should go out
		"""
		if status == TransactionStatus.COMPLETED:
			return self.notify_success
		if status == TransactionStatus.PENDING:
			return self.notify_pending
		if status == TransactionStatus.FAILED:
			return self.notify_failed
		return False


class BotSettings(SingletonModel):
	"""
	The token is write-only from the API's point of view; responses mask it.
	"""
	token = models.CharField(max_length=255)
	bitcoin_confirmations = models.PositiveIntegerField(default=DEFAULT_CONFIRMATIONS["bitcoin_confirmations"])
	ethereum_confirmations = models.PositiveIntegerField(default=DEFAULT_CONFIRMATIONS["ethereum_confirmations"])
	litecoin_confirmations = models.PositiveIntegerField(default=DEFAULT_CONFIRMATIONS["litecoin_confirmations"])

	# Stablecoin networks
	erc20_confirmations = models.PositiveIntegerField(default=DEFAULT_CONFIRMATIONS["erc20_confirmations"])
	trc20_confirmations = models.PositiveIntegerField(default=DEFAULT_CONFIRMATIONS["trc20_confirmations"])
	bep20_confirmations = models.PositiveIntegerField(default=DEFAULT_CONFIRMATIONS["bep20_confirmations"])
	polygon_confirmations = models.PositiveIntegerField(default=DEFAULT_CONFIRMATIONS["polygon_confirmations"])
	solana_confirmations = models.PositiveIntegerField(default=DEFAULT_CONFIRMATIONS["solana_confirmations"])

	# Discord integration
	discord_client_id = models.CharField(max_length=64, null=True, blank=True)
	discord_client_secret = models.CharField(max_length=255, null=True, blank=True)
	discord_redirect_uri = models.URLField(max_length=500, null=True, blank=True)
	discord_guild_id = models.CharField(max_length=64, null=True, blank=True)

	# Documentation
	gitbook_api_key = models.CharField(max_length=255, null=True, blank=True)
	gitbook_space_id = models.CharField(max_length=64, null=True, blank=True)

	created_at = models.DateTimeField(auto_now_add=True)
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		db_table = "bot_settings"
		verbose_name_plural = "bot settings"


class Stats(SingletonModel):
	"""
	Dashboard counters. Only the service layer writes this row.
	"""
	total_transactions = models.PositiveIntegerField(default=0)
	total_volume = models.DecimalField(max_digits=30, decimal_places=8, default=0)
	active_wallets = models.PositiveIntegerField(default=0)
	webhook_calls = models.PositiveIntegerField(default=0)
	transactions_growth = models.TextField(default="0%")
	volume_growth = models.TextField(default="0%")
	wallets_growth = models.TextField(default="0")
	webhooks_growth = models.TextField(default="0%")
	updated_at = models.DateTimeField(auto_now=True)

	class Meta:
		db_table = "stats"
		verbose_name_plural = "stats"

	@classmethod
	def load(cls):
		obj, _ = cls.objects.get_or_create(pk=SINGLETON_PK)
		return obj


class WebhookEvent(models.Model):
	"""
	Audit row for each notification dispatched about a transaction.

	suppressed=True means the config was missing or the matching toggle was off,
	so nothing should be delivered for it.
	"""
	EVENT_TYPES = (("transaction.created", "Transaction created"), ("transaction.status_changed", "Transaction status changed"))

	id = models.BigAutoField(primary_key=True)
	event_type = models.CharField(max_length=32, choices=EVENT_TYPES)
	transaction = models.ForeignKey(Transaction, null=True, on_delete=models.SET_NULL, related_name="webhook_events")
	status = models.CharField(max_length=16, choices=TransactionStatus.choices)
	target_url = models.URLField(max_length=500, blank=True, default="")
	suppressed = models.BooleanField(default=False)
	payload = models.JSONField(default=dict)
	created_at = models.DateTimeField(auto_now_add=True)

	class Meta:
		db_table = "webhook_events"
		indexes = [
			models.Index(fields=["created_at"], name="webhook_events_created_idx"),
		]
