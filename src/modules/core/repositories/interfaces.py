"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the
    repository (e.g. ``Product``, ``AuditLog``).  Only the read
    surface every store exposes lives here; mutating operations are
    declared per aggregate because their request objects differ.
    """

    @abstractmethod
    def list_all(self) -> List[T]:
        """Return every entity, in the order defined by the store."""
