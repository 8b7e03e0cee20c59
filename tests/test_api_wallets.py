# test_api_wallets.py
import pytest

from core.models import Wallet
from core.services import WalletServices

pytestmark = pytest.mark.django_db

SATOSHI = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"


def post_wallet(client, **body):
    data = {"name": "BTC-1", "address": SATOSHI, "currency": "BTC"}
    data.update(body)
    return client.post("/api/wallets", data, content_type="application/json")


class TestWalletApi:
    def test_create_defaults_active_and_rejects_duplicate(self, client):
        res = post_wallet(client)
        assert res.status_code == 201
        body = res.json()
        assert body["isActive"] is True
        assert body["address"] == SATOSHI
        assert body["network"] is None

        again = post_wallet(client, name="BTC-2")
        assert again.status_code == 409
        assert again.json()["message"] == "Wallet address already exists"

    def test_create_updates_stats(self, client):
        post_wallet(client)
        post_wallet(client, address="other", isActive=False)
        stats = client.get("/api/stats").json()
        assert stats["activeWallets"] == 1
        assert stats["walletsGrowth"] == "+2"

    def test_invalid_payload(self, client):
        res = client.post("/api/wallets", {"address": "x"}, content_type="application/json")
        assert res.status_code == 400
        body = res.json()
        assert body["message"] == "Invalid wallet data"
        assert "name" in body["errors"]
        assert "currency" in body["errors"]

    def test_invalid_json(self, client):
        res = client.post("/api/wallets", "{nope", content_type="application/json")
        assert res.status_code == 400
        assert res.json()["message"] == "Invalid JSON"

    def test_list_and_fetch(self, client):
        first = post_wallet(client).json()
        second = post_wallet(client, address="addr-2", discordUserId="123456789").json()

        listed = client.get("/api/wallets").json()
        assert [w["id"] for w in listed] == [second["id"], first["id"]]

        fetched = client.get(f"/api/wallets/{second['id']}").json()
        assert fetched["discordUserId"] == "123456789"

    def test_fetch_bad_or_missing_id(self, client):
        assert client.get("/api/wallets/abc").status_code == 400
        assert client.get("/api/wallets/abc").json()["message"] == "Invalid wallet ID"
        assert client.get("/api/wallets/999").status_code == 404

    def test_patch(self, client):
        wallet = post_wallet(client).json()
        res = client.patch(f"/api/wallets/{wallet['id']}", {"isActive": False}, content_type="application/json")
        assert res.status_code == 200
        body = res.json()
        assert body["isActive"] is False
        assert body["name"] == "BTC-1"
        assert client.get("/api/stats").json()["activeWallets"] == 0

    def test_patch_conflict_and_missing(self, client):
        post_wallet(client)
        other = post_wallet(client, address="addr-2").json()

        res = client.patch(f"/api/wallets/{other['id']}", {"address": SATOSHI}, content_type="application/json")
        assert res.status_code == 409

        res = client.patch("/api/wallets/999", {"name": "x"}, content_type="application/json")
        assert res.status_code == 404

    def test_patch_rejects_blank_name(self, client):
        wallet = post_wallet(client).json()
        res = client.patch(f"/api/wallets/{wallet['id']}", {"name": ""}, content_type="application/json")
        assert res.status_code == 400
        assert "name" in res.json()["errors"]

    def test_delete(self, client):
        wallet = post_wallet(client).json()
        post_wallet(client, address="addr-2")

        res = client.delete(f"/api/wallets/{wallet['id']}")
        assert res.status_code == 200
        assert res.json() == {"success": True}
        assert not Wallet.objects.filter(pk=wallet["id"]).exists()
        assert client.get("/api/stats").json()["activeWallets"] == 1

        assert client.delete(f"/api/wallets/{wallet['id']}").status_code == 404

    def test_method_not_allowed(self, client):
        assert client.put("/api/wallets", {}, content_type="application/json").status_code == 405

    def test_unexpected_failure_is_generic_500(self, client, monkeypatch):
        def boom(data):
            raise RuntimeError("database on fire")

        monkeypatch.setattr(WalletServices, "create", staticmethod(boom))
        res = post_wallet(client)
        assert res.status_code == 500
        assert res.json() == {"message": "Internal server error"}
