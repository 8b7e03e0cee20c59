"""Request parsing and error-to-response mapping shared by the API views."""

import json
import logging
from functools import wraps

from django.core.exceptions import ValidationError
from django.http import JsonResponse

from core.errors import InternalError, ServiceError
from .serializers import payload_from_body, to_camel

logger = logging.getLogger(__name__)


def parse_json(request) -> dict:
	"""
	Decoded JSON object body with model field names as keys
	"""
	try:
		body = json.loads(request.body or b"{}")
	except (ValueError, UnicodeDecodeError):
		raise ValidationError("Invalid JSON")
	if not isinstance(body, dict):
		raise ValidationError("Expected a JSON object")
	return payload_from_body(body)


def parse_id(raw, label: str) -> int:
	try:
		return int(raw)
	except (TypeError, ValueError):
		raise ValidationError(f"Invalid {label} ID")


def int_param(request, name: str, default: int) -> int:
	raw = request.GET.get(name)
	if not raw:
		return default
	try:
		return int(raw)
	except ValueError:
		raise ValidationError(f"Invalid {name}")


def validated(form) -> dict:
	if not form.is_valid():
		raise ValidationError(form.errors.as_data())
	return form.changes()


def api_endpoint(invalid_message: str = "Invalid request data"):
	"""
	Map failures to JSON responses:
	ValidationError -> 400, NotFound -> 404, Conflict -> 409, anything else -> 500.
	"""
	def decorator(view):
		@wraps(view)
		def wrapper(request, *args, **kwargs):
			try:
				return view(request, *args, **kwargs)
			except ValidationError as e:
				if hasattr(e, "error_dict"):
					errors = {to_camel(field): messages for field, messages in e.message_dict.items()}
					return JsonResponse({"message": invalid_message, "errors": errors}, status=400)
				return JsonResponse({"message": " ".join(e.messages)}, status=400)
			except ServiceError as e:
				if e.status_code >= 500:
					logger.error("%s %s failed: %s", request.method, request.path, e.message)
				return JsonResponse({"message": e.message}, status=e.status_code)
			except Exception:
				# Don't leak internals; the traceback goes to the log
				logger.exception("%s %s failed", request.method, request.path)
				err = InternalError()
				return JsonResponse({"message": err.message}, status=err.status_code)
		return wrapper
	return decorator
