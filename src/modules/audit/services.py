"""Audit service layer: read access to the change history."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

if TYPE_CHECKING:
    from modules.audit.models import AuditLog
    from modules.audit.repositories.interfaces import IAuditLogRepository

logger = structlog.get_logger(__name__)


class AuditService:
    """Application service for audit trail queries.

    Receives an ``IAuditLogRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IAuditLogRepository) -> None:
        self._repo = repository

    def list_logs(self) -> List[AuditLog]:
        """Return the full audit trail, most recent change first."""
        logs = self._repo.list_all()
        logger.info("audit.listed", count=len(logs))
        return logs
