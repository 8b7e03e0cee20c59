"""Input validation for JSON bodies, built on ModelForms.

Create forms fill omitted keys from the model defaults (so isActive defaults to
true instead of reading as an unchecked box). Partial forms drop every field the
body did not mention, so PATCH only validates what it changes. Either way
`supplied` holds the keys the body actually sent.
"""

from django import forms

from core.models import BotSettings, Transaction, Wallet, WebhookConfig


class PayloadForm(forms.ModelForm):

	def __init__(self, payload: dict, partial: bool = False, **kwargs):
		# Keys the body actually carried, before defaults are merged in
		self.supplied = {name for name in self._meta.fields if name in payload}
		if not partial:
			model_fields = self._meta.model._meta
			defaults = {
				name: model_fields.get_field(name).get_default()
				for name in self._meta.fields
				if model_fields.get_field(name).has_default()
			}
			payload = {**defaults, **payload}
		super().__init__(data=payload, **kwargs)
		if partial:
			for name in list(self.fields):
				if name not in payload:
					del self.fields[name]

	def validate_unique(self):
		# Uniqueness is reported as 409 by the service layer, not as a form error
		pass

	def changes(self) -> dict:
		return dict(self.cleaned_data)


class WalletForm(PayloadForm):
	class Meta:
		model = Wallet
		fields = ["name", "address", "currency", "network", "discord_user_id", "is_active"]


class TransactionCreateForm(PayloadForm):
	wallet_id = forms.IntegerField()

	class Meta:
		model = Transaction
		fields = ["transaction_id", "amount", "currency", "network", "confirmations", "required_confirmations"]

	def clean_amount(self):
		amount = self.cleaned_data["amount"]
		if amount is not None and amount <= 0:
			raise forms.ValidationError("Amount must be positive")
		return amount


class TransactionUpdateForm(TransactionCreateForm):
	class Meta(TransactionCreateForm.Meta):
		fields = TransactionCreateForm.Meta.fields + ["status"]


class WebhookConfigForm(PayloadForm):
	class Meta:
		model = WebhookConfig
		fields = ["url", "notify_success", "notify_pending", "notify_failed", "notify_wallet"]


class BotSettingsForm(PayloadForm):
	class Meta:
		model = BotSettings
		fields = [
			"token",
			"bitcoin_confirmations", "ethereum_confirmations", "litecoin_confirmations",
			"erc20_confirmations", "trc20_confirmations", "bep20_confirmations",
			"polygon_confirmations", "solana_confirmations",
			"discord_client_id", "discord_client_secret", "discord_redirect_uri", "discord_guild_id",
			"gitbook_api_key", "gitbook_space_id",
		]
