"""Business rules behind the dashboard API.

This module owns: wallet create/update/delete, the transaction lifecycle
(pending -> completed | failed), singleton upserts, and keeping the Stats row in
step with every mutation.

Each operation runs inside @db.atomic, so a call that fails validation leaves
Stats as it was. Stats itself is updated read-modify-write within the request;
two concurrent requests can overwrite each other's counters (last writer wins).
That gap is known and accepted for dashboard counters.
"""
import logging
from datetime import timedelta

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction as db
from django.db.models import Sum
from django.utils import timezone

from .models import BotSettings, Stats, Transaction, TransactionStatus, Wallet, WebhookEvent
from .constants import required_confirmations, format_growth, format_count_delta
from .errors import Conflict, NotFound
from .adapters.webhook_adapter import WebhookAdapter, CREATED, STATUS_CHANGED

logger = logging.getLogger(__name__)


def _get(model, pk, label: str):
	obj = model.objects.filter(pk=pk).first()
	if obj is None:
		raise NotFound(f"{label} not found")
	return obj


def _windows(queryset, now=None):
	"""
	Split a created_at-stamped queryset into (current window, previous window)
	"""
	now = now or timezone.now()
	size = timedelta(days=settings.STATS_GROWTH_WINDOW_DAYS)
	start = now - size
	return (
		queryset.filter(created_at__gte=start),
		queryset.filter(created_at__gte=start - size, created_at__lt=start),
	)


class StatsAggregator:
	"""
	Keeps the Stats singleton consistent. Callers load the row, apply one or more
	steps, then save once.
	"""

	@staticmethod
	def current() -> Stats:
		return Stats.load()

	@staticmethod
	def recount_active_wallets(stats: Stats) -> Stats:
		# Full scan rather than +1/-1 so a failed request can never leave drift behind
		stats.active_wallets = Wallet.objects.filter(is_active=True).count()
		return stats

	@staticmethod
	def refresh_growth(stats: Stats, now=None) -> Stats:
		txs, prev_txs = _windows(Transaction.objects.all(), now)
		stats.transactions_growth = format_growth(txs.count(), prev_txs.count())
		stats.volume_growth = format_growth(
			txs.aggregate(s=Sum("amount"))["s"],
			prev_txs.aggregate(s=Sum("amount"))["s"],
		)

		new_wallets, _ = _windows(Wallet.objects.all(), now)
		stats.wallets_growth = format_count_delta(new_wallets.count())

		events, prev_events = _windows(WebhookEvent.objects.all(), now)
		stats.webhooks_growth = format_growth(events.count(), prev_events.count())
		return stats

	@staticmethod
	def notify(stats: Stats, event_type: str, txn: Transaction) -> Stats:
		"""
		Dispatch one outbound notification and count it
		"""
		WebhookAdapter.dispatch(event_type, txn)
		stats.webhook_calls += 1
		return stats

	@staticmethod
	def wallets_changed(recount: bool) -> Stats:
		stats = StatsAggregator.current()
		if recount:
			StatsAggregator.recount_active_wallets(stats)
		StatsAggregator.refresh_growth(stats)
		stats.save()
		return stats


class WalletServices:

	@staticmethod
	@db.atomic
	def create(data: dict) -> Wallet:
		"""
		Create a wallet; the address must not be in use (case-sensitive)
		"""
		if Wallet.objects.filter(address=data["address"]).exists():
			raise Conflict("Wallet address already exists")
		try:
			with db.atomic():
				wallet = Wallet.objects.create(**data)
		except IntegrityError:
			# Another request created the same address between the check and the insert
			raise Conflict("Wallet address already exists")

		StatsAggregator.wallets_changed(recount=True)
		logger.info("Wallet %s created for %s", wallet.pk, wallet.address)
		return wallet

	@staticmethod
	@db.atomic
	def update(wallet_id: int, changes: dict) -> Wallet:
		"""
		Apply a partial update. The active-wallet count is only rescanned when
		is_active is part of the change.
		"""
		wallet = _get(Wallet, wallet_id, "Wallet")

		address = changes.get("address")
		if address and Wallet.objects.filter(address=address).exclude(pk=wallet.pk).exists():
			raise Conflict("Wallet address already exists")

		for field, value in changes.items():
			setattr(wallet, field, value)
		try:
			with db.atomic():
				wallet.save()
		except IntegrityError:
			raise Conflict("Wallet address already exists")

		StatsAggregator.wallets_changed(recount="is_active" in changes)
		logger.info("Wallet %s updated (%s)", wallet.pk, ", ".join(sorted(changes)) or "no changes")
		return wallet

	@staticmethod
	@db.atomic
	def delete(wallet_id: int) -> bool:
		"""
		Delete a wallet. Its transactions are kept with the wallet reference cleared.
		"""
		wallet = _get(Wallet, wallet_id, "Wallet")
		wallet.delete()
		StatsAggregator.wallets_changed(recount=True)
		logger.info("Wallet %s deleted", wallet_id)
		return True


class TransactionServices:

	@staticmethod
	@db.atomic
	def create(data: dict) -> Transaction:
		"""
		Record a new pending transaction.

		Counts it into total_transactions / total_volume and dispatches a
		transaction.created notification. Any client-supplied status is ignored.
		"""
		data = dict(data)
		wallet_id = data.pop("wallet_id")
		data.pop("status", None)

		if Transaction.objects.filter(transaction_id=data["transaction_id"]).exists():
			raise Conflict("Transaction ID already exists")
		wallet = _get(Wallet, wallet_id, "Wallet")

		if data.get("required_confirmations") is None:
			data["required_confirmations"] = required_confirmations(
				data.get("currency"), data.get("network"), BotSettings.current()
			)

		try:
			with db.atomic():
				txn = Transaction.objects.create(wallet=wallet, status=TransactionStatus.PENDING, **data)
		except IntegrityError:
			raise Conflict("Transaction ID already exists")

		stats = StatsAggregator.current()
		stats.total_transactions += 1
		stats.total_volume += txn.amount
		StatsAggregator.notify(stats, CREATED, txn)
		StatsAggregator.refresh_growth(stats)
		stats.save()

		logger.info("Transaction %s created: %s %s on wallet %s", txn.transaction_id, txn.amount, txn.currency, wallet.pk)
		return txn

	@staticmethod
	@db.atomic
	def update(txn_id: int, changes: dict) -> Transaction:
		"""
		Apply a partial update.

		A status change must leave PENDING (completed or failed are final) and
		dispatches exactly one notification. Confirmations may not go down while
		the transaction is pending. Status is never derived from confirmations;
		callers move it explicitly.
		"""
		txn = _get(Transaction, txn_id, "Transaction")
		changes = dict(changes)

		if "wallet_id" in changes:
			changes["wallet"] = _get(Wallet, changes.pop("wallet_id"), "Wallet")

		new_id = changes.get("transaction_id")
		if new_id and Transaction.objects.filter(transaction_id=new_id).exclude(pk=txn.pk).exists():
			raise Conflict("Transaction ID already exists")

		new_status = changes.get("status")
		status_changed = new_status is not None and new_status != txn.status
		if new_status is None:
			changes.pop("status", None)
		elif not txn.can_transition_to(new_status):
			raise ValidationError({"status": [f"Cannot move a {txn.status} transaction to {new_status}"]})

		if txn.status == TransactionStatus.PENDING and "confirmations" in changes:
			if (changes["confirmations"] or 0) < (txn.confirmations or 0):
				raise ValidationError({"confirmations": ["Confirmations cannot decrease while pending"]})

		previous = txn.status
		for field, value in changes.items():
			setattr(txn, field, value)
		try:
			with db.atomic():
				txn.save()
		except IntegrityError:
			raise Conflict("Transaction ID already exists")

		if status_changed:
			stats = StatsAggregator.current()
			StatsAggregator.notify(stats, STATUS_CHANGED, txn)
			StatsAggregator.refresh_growth(stats)
			stats.save()
			logger.info("Transaction %s moved %s -> %s", txn.transaction_id, previous, txn.status)
		return txn


class SettingsServices:
	"""
	Upserts for the singleton tables (WebhookConfig, BotSettings)
	"""

	@staticmethod
	@db.atomic
	def upsert(model, changes: dict, label: str, partial: bool = False, supplied=None):
		"""
		Returns (row, created). A partial update requires the row to exist.

		`supplied` names the keys the caller actually sent. Defaults filled in for
		the first insert are not written over an existing row.
		"""
		obj = model.current()
		if obj is None:
			if partial:
				raise NotFound(f"{label} not found")
			obj = model(**changes)
			try:
				with db.atomic():
					obj.save(force_insert=True)
				logger.info("%s created", label)
				return obj, True
			except IntegrityError:
				# A concurrent first write won; fall through and update its row
				obj = model.current()

		if supplied is not None:
			changes = {field: value for field, value in changes.items() if field in supplied}
		for field, value in changes.items():
			setattr(obj, field, value)
		obj.save()
		logger.info("%s updated (%s)", label, ", ".join(sorted(changes)) or "no changes")
		return obj, False
