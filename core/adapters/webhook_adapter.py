"""Adapter for outbound transaction notifications

The bot process owns the actual HTTP delivery to the configured webhook URL.
Here we record each dispatch as a WebhookEvent row so the bot (or an operator)
can pick it up, and so the dashboard can count webhook traffic.
"""

import logging

from core.models import Transaction, WebhookConfig, WebhookEvent

logger = logging.getLogger(__name__)

CREATED = "transaction.created"
STATUS_CHANGED = "transaction.status_changed"


def build_payload(event_type: str, txn: Transaction) -> dict:
	return {
		"event": event_type,
		"transactionId": txn.transaction_id,
		"amount": str(txn.amount),
		"currency": txn.currency,
		"network": txn.network,
		"status": txn.status,
		"confirmations": txn.confirmations,
		"requiredConfirmations": txn.required_confirmations,
		"walletId": txn.wallet_id,
	}


class WebhookAdapter:
	"""
	Single dispatch call returning the recorded event.
	"""
	@staticmethod
	def dispatch(event_type: str, txn: Transaction) -> WebhookEvent:
		"""
		Record a notification about txn in its current status.

		Suppressed when no webhook is configured or the toggle for this status is off.
		"""
		config = WebhookConfig.current()
		enabled = config is not None and config.wants(txn.status)
		event = WebhookEvent.objects.create(
			event_type=event_type,
			transaction=txn,
			status=txn.status,
			target_url=config.url if config else "",
			suppressed=not enabled,
			payload=build_payload(event_type, txn),
		)
		if enabled:
			logger.info("Webhook %s queued for %s (%s) -> %s", event_type, txn.transaction_id, txn.status, config.url)
		else:
			logger.info("Webhook %s suppressed for %s (%s)", event_type, txn.transaction_id, txn.status)
		return event
