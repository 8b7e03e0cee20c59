"""Singleton endpoints: webhook configuration and bot settings.

GET returns 404 until the first POST. POST upserts (201 on create, 200 after).
Once the row exists, POST and PATCH both write only the fields the body carries.
"""

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from core.errors import NotFound
from core.models import BotSettings, WebhookConfig
from core.services import SettingsServices
from .forms import BotSettingsForm, WebhookConfigForm
from .http import api_endpoint, parse_json, validated
from .serializers import bot_settings_to_dict, webhook_config_to_dict


def _singleton(request, model, form_class, label, to_dict):
	if request.method == "GET":
		obj = model.current()
		if obj is None:
			raise NotFound(f"{label} not found")
		return JsonResponse(to_dict(obj))

	partial = request.method == "PATCH"
	form = form_class(parse_json(request), partial=partial)
	data = validated(form)
	obj, created = SettingsServices.upsert(model, data, label, partial=partial, supplied=form.supplied)
	return JsonResponse(to_dict(obj), status=201 if created else 200)


@require_http_methods(["GET", "POST", "PATCH"])
@api_endpoint("Invalid webhook configuration")
def webhook_config(request):
	return _singleton(request, WebhookConfig, WebhookConfigForm, "Webhook configuration", webhook_config_to_dict)


@require_http_methods(["GET", "POST", "PATCH"])
@api_endpoint("Invalid bot settings")
def bot_settings(request):
	"""
	Same contract as webhook_config; the token never leaves the server
	"""
	return _singleton(request, BotSettings, BotSettingsForm, "Bot settings", bot_settings_to_dict)
