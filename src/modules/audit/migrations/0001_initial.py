from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AuditLog",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("table_name", models.CharField(max_length=128)),
                (
                    "action",
                    models.CharField(
                        choices=[
                            ("INSERT", "Insert"),
                            ("UPDATE", "Update"),
                            ("DELETE", "Delete"),
                        ],
                        max_length=10,
                    ),
                ),
                ("record_id", models.BigIntegerField()),
                ("old_values", models.TextField(blank=True, null=True)),
                ("new_values", models.TextField(blank=True, null=True)),
                (
                    "changed_by",
                    models.CharField(blank=True, max_length=128, null=True),
                ),
                (
                    "changed_at",
                    models.DateTimeField(auto_now_add=True, db_index=True),
                ),
            ],
            options={
                "db_table": "audit_log",
                "ordering": ["-changed_at", "-id"],
                "indexes": [
                    models.Index(
                        fields=["table_name", "record_id"],
                        name="audit_log_record_idx",
                    )
                ],
            },
        ),
    ]
