"""Django ORM implementation of the AuditLog repository."""

from __future__ import annotations

from typing import List

from modules.audit.models import AuditLog
from modules.audit.repositories.interfaces import IAuditLogRepository


class AuditLogDjangoRepository(IAuditLogRepository):
    """Concrete AuditLog repository backed by Django ORM."""

    def list_all(self) -> List[AuditLog]:
        return list(AuditLog.objects.order_by("-changed_at", "-id"))
