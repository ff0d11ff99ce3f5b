"""AuditLog model: append-only trail of changes to audited tables."""

from __future__ import annotations

from django.db import models


class AuditAction(models.TextChoices):
    INSERT = "INSERT", "Insert"
    UPDATE = "UPDATE", "Update"
    DELETE = "DELETE", "Delete"


class AuditLog(models.Model):
    """One historical change to a row of an audited table.

    Rows are written by the store's signal receivers, never by the API
    layer, and are **immutable** once created: ``save()`` refuses to
    update an existing row and ``delete()`` is not supported.

    ``record_id`` is deliberately a plain integer rather than a foreign
    key so the trail outlives (and is independent of) the audited row.
    ``changed_by`` is nullable: ``None`` means no actor was supplied.
    """

    id = models.BigAutoField(primary_key=True)
    table_name = models.CharField(max_length=128)
    action = models.CharField(max_length=10, choices=AuditAction.choices)
    record_id = models.BigIntegerField()
    old_values = models.TextField(null=True, blank=True)  # noqa: DJ01
    new_values = models.TextField(null=True, blank=True)  # noqa: DJ01
    changed_by = models.CharField(max_length=128, null=True, blank=True)  # noqa: DJ01
    changed_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "audit_log"
        ordering = ["-changed_at", "-id"]
        indexes = [
            models.Index(
                fields=["table_name", "record_id"],
                name="audit_log_record_idx",
            ),
        ]

    def save(self, *args, **kwargs) -> None:
        if not self._state.adding:
            raise RuntimeError("AuditLog rows are immutable.")
        super().save(*args, **kwargs)

    def delete(self, using=None, keep_parents=False):
        raise RuntimeError("AuditLog rows are immutable.")

    def __str__(self) -> str:
        return f"{self.table_name}#{self.record_id} {self.action} @ {self.changed_at}"
