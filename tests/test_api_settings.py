# test_api_settings.py
import pytest

from core.constants import SECRET_MASK
from core.models import BotSettings, WebhookConfig

pytestmark = pytest.mark.django_db


def test_health(client):
    assert client.get("/api/health").json() == {"ok": True}


def test_csrf_sets_cookie(client):
    res = client.get("/api/csrf")
    assert res.json()["csrftoken"]
    assert "csrftoken" in res.cookies


def test_initial_stats(client):
    body = client.get("/api/stats").json()
    assert body["totalTransactions"] == 0
    assert body["totalVolume"] == "0"
    assert body["activeWallets"] == 0
    assert body["webhookCalls"] == 0
    assert body["transactionsGrowth"] == "0%"
    assert body["walletsGrowth"] == "0"


def test_stats_is_read_only(client):
    assert client.post("/api/stats", {}, content_type="application/json").status_code == 405


class TestWebhookConfigApi:
    url = "/api/webhook-config"

    def test_missing_until_first_write(self, client):
        assert client.get(self.url).status_code == 404
        res = client.patch(self.url, {"notifyFailed": False}, content_type="application/json")
        assert res.status_code == 404
        assert res.json()["message"] == "Webhook configuration not found"

    def test_post_upserts(self, client):
        first = client.post(self.url, {"url": "https://discord.com/api/webhooks/1"}, content_type="application/json")
        assert first.status_code == 201
        body = first.json()
        assert body["notifySuccess"] is True
        assert body["notifyWallet"] is False

        second = client.post(self.url, {"url": "https://discord.com/api/webhooks/2", "notifyPending": False}, content_type="application/json")
        assert second.status_code == 200
        assert second.json()["notifyPending"] is False
        assert WebhookConfig.objects.count() == 1
        assert client.get(self.url).json()["url"] == "https://discord.com/api/webhooks/2"

    def test_patch_keeps_other_fields(self, client):
        client.post(self.url, {"url": "https://hooks.example/x", "notifyWallet": True}, content_type="application/json")
        res = client.patch(self.url, {"notifyFailed": False}, content_type="application/json")
        assert res.status_code == 200
        body = res.json()
        assert body["notifyFailed"] is False
        assert body["notifyWallet"] is True
        assert body["url"] == "https://hooks.example/x"

    def test_rejects_bad_url(self, client):
        res = client.post(self.url, {"url": "not a url"}, content_type="application/json")
        assert res.status_code == 400
        assert res.json()["message"] == "Invalid webhook configuration"
        assert "url" in res.json()["errors"]


class TestBotSettingsApi:
    url = "/api/bot-settings"

    def test_token_is_masked_everywhere(self, client):
        created = client.post(self.url, {"token": "super-secret", "discordClientSecret": "shh"}, content_type="application/json")
        assert created.status_code == 201
        body = created.json()
        assert body["token"] == SECRET_MASK
        assert body["discordClientSecret"] == SECRET_MASK
        assert body["gitbookApiKey"] is None
        assert body["bitcoinConfirmations"] == 3
        assert body["solanaConfirmations"] == 32

        patched = client.patch(self.url, {"bitcoinConfirmations": 6}, content_type="application/json").json()
        assert patched["token"] == SECRET_MASK
        assert patched["bitcoinConfirmations"] == 6

        fetched = client.get(self.url).json()
        assert fetched["token"] == SECRET_MASK
        assert "super-secret" not in str(fetched)

        assert BotSettings.current().token == "super-secret"

    def test_token_required_on_create(self, client):
        res = client.post(self.url, {"bitcoinConfirmations": 2}, content_type="application/json")
        assert res.status_code == 400
        assert "token" in res.json()["errors"]

    def test_second_post_updates_single_row(self, client):
        client.post(self.url, {"token": "a"}, content_type="application/json")
        res = client.post(self.url, {"token": "b", "erc20Confirmations": 20}, content_type="application/json")
        assert res.status_code == 200
        assert res.json()["erc20Confirmations"] == 20
        assert BotSettings.objects.count() == 1
        assert BotSettings.current().token == "b"

    def test_repeat_post_keeps_unsent_fields(self, client):
        client.post(
            self.url,
            {"token": "a", "bitcoinConfirmations": 6, "discordClientSecret": "shh"},
            content_type="application/json",
        )
        res = client.post(self.url, {"token": "b"}, content_type="application/json")
        assert res.status_code == 200
        assert res.json()["bitcoinConfirmations"] == 6
        row = BotSettings.current()
        assert row.token == "b"
        assert row.bitcoin_confirmations == 6
        assert row.discord_client_secret == "shh"

    def test_rejects_negative_threshold(self, client):
        client.post(self.url, {"token": "a"}, content_type="application/json")
        res = client.patch(self.url, {"trc20Confirmations": -1}, content_type="application/json")
        assert res.status_code == 400
        assert "trc20Confirmations" in res.json()["errors"]

    def test_patch_before_create(self, client):
        res = client.patch(self.url, {"token": "x"}, content_type="application/json")
        assert res.status_code == 404
        assert res.json()["message"] == "Bot settings not found"
