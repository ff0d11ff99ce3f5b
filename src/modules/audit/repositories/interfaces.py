"""AuditLog repository interface.

The audit table is append-only and written by the store itself; the
application only ever scans it.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.audit.models import AuditLog


class IAuditLogRepository(IRepository["AuditLog"]):
    """Repository contract for the audit trail."""

    @abstractmethod
    def list_all(self) -> List[AuditLog]:
        """Return every audit row, most recent ``changed_at`` first."""
