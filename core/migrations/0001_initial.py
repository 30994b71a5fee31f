import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ApiKey",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4, editable=False, primary_key=True, serialize=False
                    ),
                ),
                ("name", models.CharField(help_text="Who or what holds this key", max_length=100)),
                ("key_prefix", models.CharField(editable=False, max_length=8)),
                ("key_hash", models.CharField(db_index=True, editable=False, max_length=64)),
                ("roles", models.JSONField(blank=True, default=list, help_text="Granted roles")),
                ("expires_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("last_used_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "db_table": "api_keys",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["key_hash"], name="api_keys_key_has_6a2b4d_idx")],
            },
        ),
    ]
