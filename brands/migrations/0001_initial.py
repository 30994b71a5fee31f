from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Brand",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                (
                    "name",
                    models.CharField(help_text="Brand display name", max_length=100, unique=True),
                ),
                (
                    "description",
                    models.TextField(
                        blank=True, help_text="Free-text description", max_length=500, null=True
                    ),
                ),
                (
                    "website",
                    models.CharField(blank=True, help_text="Website URL", max_length=255, null=True),
                ),
                (
                    "logo_url",
                    models.CharField(
                        blank=True, help_text="Logo URL or asset reference", max_length=255, null=True
                    ),
                ),
                ("created_at", models.DateTimeField(editable=False)),
                ("updated_at", models.DateTimeField()),
            ],
            options={
                "db_table": "brands",
                "ordering": ["name"],
                "indexes": [models.Index(fields=["created_at"], name="brands_created_3c1f0e_idx")],
            },
        ),
    ]
