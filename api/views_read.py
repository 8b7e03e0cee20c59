"""Read-only endpoints: liveness, CSRF bootstrap and the dashboard stats."""

from django.http import JsonResponse
from django.middleware.csrf import get_token
from django.views.decorators.http import require_GET

from core.services import StatsAggregator
from .http import api_endpoint
from .serializers import stats_to_dict


@require_GET
def health(request):
	return JsonResponse({"ok": True})


@require_GET
def csrf(request):
	# Forces creation/rotation of the CSRF token AND sets 'csrftoken' cookie
	return JsonResponse({"csrftoken": get_token(request)})


@require_GET
@api_endpoint()
def stats(request):
	"""
	GET: Current Stats singleton (created on first read)
	"""
	return JsonResponse(stats_to_dict(StatsAggregator.current()))
