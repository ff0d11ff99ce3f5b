"""Signals for automatic Product audit tracking.

Every persisted change to a ``Product`` produces exactly one ``AuditLog``
row.  The actor travels on the instance as the transient ``_changed_by``
attribute, set by the repository before saving.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Optional, Protocol, cast

import structlog
from django.core.serializers.json import DjangoJSONEncoder
from django.db.models.signals import post_save, pre_save
from django.dispatch import receiver

from modules.audit.models import AuditAction, AuditLog
from modules.products.models import Product

logger = structlog.get_logger(__name__)


class _AuditAware(Protocol):
    _changed_by: str | None
    _previous_snapshot: Dict[str, Any] | None
    _previous_deleted_at: datetime | None


@receiver(pre_save, sender=Product)
def _capture_previous_state(sender, instance: Product, **kwargs) -> None:
    audit_instance = cast(_AuditAware, instance)
    previous = sender.objects.filter(pk=instance.pk).first() if instance.pk else None
    if previous is None:
        audit_instance._previous_snapshot = None
        audit_instance._previous_deleted_at = None
        return
    audit_instance._previous_snapshot = previous.snapshot()
    audit_instance._previous_deleted_at = previous.deleted_at


@receiver(post_save, sender=Product)
def _record_audit_log(sender, instance: Product, created: bool, **kwargs) -> None:
    audit_instance = cast(_AuditAware, instance)
    previous: Optional[Dict[str, Any]] = getattr(
        audit_instance, "_previous_snapshot", None
    )
    previous_deleted_at = getattr(audit_instance, "_previous_deleted_at", None)

    if created:
        action, old_values, new_values = AuditAction.INSERT, None, instance.snapshot()
    elif previous_deleted_at is None and instance.deleted_at is not None:
        action, old_values, new_values = AuditAction.DELETE, previous, None
    else:
        action, old_values, new_values = AuditAction.UPDATE, previous, instance.snapshot()

    entry = AuditLog.objects.create(
        table_name=sender._meta.db_table,
        action=action,
        record_id=instance.pk,
        old_values=_dump(old_values),
        new_values=_dump(new_values),
        changed_by=getattr(audit_instance, "_changed_by", None),
    )
    logger.info(
        "audit.recorded",
        audit_id=entry.id,
        table=entry.table_name,
        action=entry.action,
        record_id=entry.record_id,
        changed_by=entry.changed_by,
    )

    _clear_transient_audit_attrs(instance)


def _dump(snapshot: Optional[Dict[str, Any]]) -> Optional[str]:
    if snapshot is None:
        return None
    return json.dumps(snapshot, cls=DjangoJSONEncoder)


def _clear_transient_audit_attrs(instance: Product) -> None:
    for attr in ("_changed_by", "_previous_snapshot", "_previous_deleted_at"):
        if hasattr(instance, attr):
            delattr(instance, attr)
