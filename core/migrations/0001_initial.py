from django.db import migrations, models
import django.db.models.deletion


STATUS_CHOICES = [("pending", "Pending"), ("completed", "Completed"), ("failed", "Failed")]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Wallet",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=100)),
                ("address", models.CharField(max_length=255, unique=True)),
                ("currency", models.CharField(max_length=16)),
                ("network", models.CharField(blank=True, max_length=32, null=True)),
                ("discord_user_id", models.CharField(blank=True, max_length=32, null=True)),
                ("is_active", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "db_table": "wallets",
            },
        ),
        migrations.CreateModel(
            name="Transaction",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("transaction_id", models.CharField(max_length=128, unique=True)),
                ("amount", models.DecimalField(decimal_places=8, max_digits=30)),
                ("currency", models.CharField(max_length=16)),
                ("network", models.CharField(blank=True, max_length=32, null=True)),
                ("confirmations", models.PositiveIntegerField(blank=True, null=True)),
                ("required_confirmations", models.PositiveIntegerField(blank=True, null=True)),
                ("status", models.CharField(choices=STATUS_CHOICES, default="pending", max_length=16)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("wallet", models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="transactions", to="core.wallet")),
            ],
            options={
                "db_table": "transactions",
                "indexes": [
                    models.Index(fields=["currency"], name="transactions_currency_idx"),
                    models.Index(fields=["created_at"], name="transactions_created_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="WebhookConfig",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("url", models.URLField(max_length=500)),
                ("notify_success", models.BooleanField(default=True)),
                ("notify_pending", models.BooleanField(default=True)),
                ("notify_failed", models.BooleanField(default=True)),
                ("notify_wallet", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "webhook_configs",
            },
        ),
        migrations.CreateModel(
            name="BotSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("token", models.CharField(max_length=255)),
                ("bitcoin_confirmations", models.PositiveIntegerField(default=3)),
                ("ethereum_confirmations", models.PositiveIntegerField(default=15)),
                ("litecoin_confirmations", models.PositiveIntegerField(default=6)),
                ("erc20_confirmations", models.PositiveIntegerField(default=12)),
                ("trc20_confirmations", models.PositiveIntegerField(default=15)),
                ("bep20_confirmations", models.PositiveIntegerField(default=10)),
                ("polygon_confirmations", models.PositiveIntegerField(default=15)),
                ("solana_confirmations", models.PositiveIntegerField(default=32)),
                ("discord_client_id", models.CharField(blank=True, max_length=64, null=True)),
                ("discord_client_secret", models.CharField(blank=True, max_length=255, null=True)),
                ("discord_redirect_uri", models.URLField(blank=True, max_length=500, null=True)),
                ("discord_guild_id", models.CharField(blank=True, max_length=64, null=True)),
                ("gitbook_api_key", models.CharField(blank=True, max_length=255, null=True)),
                ("gitbook_space_id", models.CharField(blank=True, max_length=64, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "bot_settings",
                "verbose_name_plural": "bot settings",
            },
        ),
        migrations.CreateModel(
            name="Stats",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("total_transactions", models.PositiveIntegerField(default=0)),
                ("total_volume", models.DecimalField(decimal_places=8, default=0, max_digits=30)),
                ("active_wallets", models.PositiveIntegerField(default=0)),
                ("webhook_calls", models.PositiveIntegerField(default=0)),
                ("transactions_growth", models.TextField(default="0%")),
                ("volume_growth", models.TextField(default="0%")),
                ("wallets_growth", models.TextField(default="0")),
                ("webhooks_growth", models.TextField(default="0%")),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "stats",
                "verbose_name_plural": "stats",
            },
        ),
        migrations.CreateModel(
            name="WebhookEvent",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("event_type", models.CharField(choices=[("transaction.created", "Transaction created"), ("transaction.status_changed", "Transaction status changed")], max_length=32)),
                ("status", models.CharField(choices=STATUS_CHOICES, max_length=16)),
                ("target_url", models.URLField(blank=True, default="", max_length=500)),
                ("suppressed", models.BooleanField(default=False)),
                ("payload", models.JSONField(default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("transaction", models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="webhook_events", to="core.transaction")),
            ],
            options={
                "db_table": "webhook_events",
                "indexes": [
                    models.Index(fields=["created_at"], name="webhook_events_created_idx"),
                ],
            },
        ),
    ]
