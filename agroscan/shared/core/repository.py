# 📄 File: agroscan/shared/core/repository.py
# 🧭 Purpose (Layman Explanation):
# Describes, in one place, the basic things every kind of stored record can do:
# be found, listed, searched, added, changed, removed and finally saved.
# 🧪 Purpose (Technical Summary):
# Generic repository contract parametrized by entity type. Writes are staged and
# only persisted by an explicit commit(), which is the single point where
# persistence failures surface.
# 🔗 Dependencies:
# abc, typing
# 🔄 Connected Modules / Calls From:
# Entity repository contracts (users, inspections, images, analyses),
# agroscan.shared.infrastructure.database.repository (SQLAlchemy implementation)

from abc import ABC, abstractmethod
from typing import Any, Generic, List, Optional, TypeVar

ModelT = TypeVar("ModelT")


class GenericRepository(ABC, Generic[ModelT]):
    """
    Repository interface shared by every entity type.

    Implementation Notes:
    - Reads execute immediately against the store
    - add/update/remove only stage a change on the unit of work
    - commit persists everything staged and returns the affected row count
    """

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[ModelT]:
        """
        Get entity by primary key.

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_all(self) -> List[ModelT]:
        """Get every entity of this type."""
        pass

    @abstractmethod
    async def find(self, *criteria: Any) -> List[ModelT]:
        """
        Get all entities matching the given criteria.

        Args:
            criteria: Column expressions, combined with AND
        """
        pass

    @abstractmethod
    async def first_or_default(self, *criteria: Any) -> Optional[ModelT]:
        """Get the first entity matching the criteria, or None."""
        pass

    @abstractmethod
    async def add(self, entity: ModelT) -> ModelT:
        """Stage a new entity for insertion."""
        pass

    @abstractmethod
    async def update(self, entity: ModelT) -> ModelT:
        """Stage changes made to an entity."""
        pass

    @abstractmethod
    async def remove(self, entity: ModelT) -> None:
        """Stage an entity for deletion."""
        pass

    @abstractmethod
    async def commit(self) -> int:
        """
        Persist all staged changes.

        Returns:
            Number of rows inserted, updated or deleted

        Raises:
            DuplicateResourceError: If a unique constraint is violated
            ConflictError: If another integrity constraint is violated
            DatabaseError: If the store cannot complete the write
        """
        pass
