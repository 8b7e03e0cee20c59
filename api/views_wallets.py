"""Wallet endpoints: list/create on the collection, fetch/patch/delete on an item."""

from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from core.errors import NotFound
from core.models import Wallet
from core.services import WalletServices
from .forms import WalletForm
from .http import api_endpoint, parse_id, parse_json, validated
from .serializers import wallet_to_dict


@require_http_methods(["GET", "POST"])
@api_endpoint("Invalid wallet data")
def wallets(request):
	"""
	GET: All wallets, newest first
	POST: Create a wallet (409 when the address is taken)
	"""
	if request.method == "GET":
		rows = Wallet.objects.order_by("-created_at", "-id")
		return JsonResponse([wallet_to_dict(w) for w in rows], safe=False)

	data = validated(WalletForm(parse_json(request)))
	wallet = WalletServices.create(data)
	return JsonResponse(wallet_to_dict(wallet), status=201)


@require_http_methods(["GET", "PATCH", "DELETE"])
@api_endpoint("Invalid wallet data")
def wallet_detail(request, wallet_id):
	pk = parse_id(wallet_id, "wallet")

	if request.method == "GET":
		wallet = Wallet.objects.filter(pk=pk).first()
		if wallet is None:
			raise NotFound("Wallet not found")
		return JsonResponse(wallet_to_dict(wallet))

	if request.method == "DELETE":
		return JsonResponse({"success": WalletServices.delete(pk)})

	data = validated(WalletForm(parse_json(request), partial=True))
	wallet = WalletServices.update(pk, data)
	return JsonResponse(wallet_to_dict(wallet))
