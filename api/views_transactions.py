"""Transaction endpoints.

The bot posts new payments here and patches them as confirmations come in;
the dashboard reads the paginated list.
"""

from django.conf import settings
from django.core.exceptions import ValidationError
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from core.errors import NotFound
from core.models import Transaction
from core.services import TransactionServices
from .forms import TransactionCreateForm, TransactionUpdateForm
from .http import api_endpoint, int_param, parse_id, parse_json, validated
from .serializers import transaction_to_dict


def _list(request):
	limit = int_param(request, "limit", settings.TRANSACTIONS_PAGE_SIZE)
	offset = int_param(request, "offset", 0)
	if not 0 < limit <= settings.TRANSACTIONS_MAX_PAGE_SIZE or offset < 0:
		raise ValidationError("Invalid pagination parameters")

	qs = Transaction.objects.order_by("-created_at", "-id")
	currency = request.GET.get("currency")
	if currency:
		qs = qs.filter(currency__iexact=currency)

	rows = qs[offset:offset + limit]
	return JsonResponse({
		"transactions": [transaction_to_dict(t) for t in rows],
		"pagination": {
			"total": qs.count(),
			"limit": limit,
			"offset": offset,
		},
	})


@require_http_methods(["GET", "POST"])
@api_endpoint("Invalid transaction data")
def transactions(request):
	"""
	GET: ?limit&offset&currency paginated list, newest first
	POST: Record a new pending transaction
	"""
	if request.method == "GET":
		return _list(request)

	data = validated(TransactionCreateForm(parse_json(request)))
	txn = TransactionServices.create(data)
	return JsonResponse(transaction_to_dict(txn), status=201)


@require_http_methods(["GET", "PATCH"])
@api_endpoint("Invalid transaction data")
def transaction_detail(request, txn_id):
	pk = parse_id(txn_id, "transaction")

	if request.method == "GET":
		txn = Transaction.objects.filter(pk=pk).first()
		if txn is None:
			raise NotFound("Transaction not found")
		return JsonResponse(transaction_to_dict(txn))

	data = validated(TransactionUpdateForm(parse_json(request), partial=True))
	txn = TransactionServices.update(pk, data)
	return JsonResponse(transaction_to_dict(txn))
