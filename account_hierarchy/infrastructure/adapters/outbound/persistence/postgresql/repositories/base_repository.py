"""
Base repository class for common database operations.

Every statement, and every commit or rollback issued by the unit of work, goes
through ``run_guarded``. It applies the per-call deadline and translates driver
and SQLAlchemy failures into the application's store errors. Callers never see
a raw SQLAlchemy exception, and a broken store is never mistaken for
"not found".
"""

import asyncio
from typing import Any, Awaitable, Generic, Optional, Type, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from account_hierarchy.application.exceptions import (
    AlreadyExistsError,
    StoreTimeoutError,
    StoreUnavailableError,
)
from account_hierarchy.infrastructure.adapters.outbound.persistence.postgresql.models.base import (
    Base,
)

# Type variables for generic repository
TModel = TypeVar("TModel", bound=Base)  # SQLAlchemy model type
TEntity = TypeVar("TEntity")  # Domain entity type
T = TypeVar("T")


async def run_guarded(
    operation: str,
    awaitable: Awaitable[T],
    timeout: Optional[float] = None,
    resource_type: str = "Resource",
) -> T:
    """
    Await a session call under a deadline and translate its failures.

    Args:
        operation: Name used in error details and logs (e.g. "account.add")
        awaitable: Session coroutine to await
        timeout: Deadline in seconds (None = no deadline)
        resource_type: Reported when a uniqueness constraint is violated

    Returns:
        Whatever the awaitable returns

    Raises:
        StoreTimeoutError: If the deadline expires
        AlreadyExistsError: If a uniqueness constraint is violated
        StoreUnavailableError: For any other database or connection failure
    """
    try:
        if timeout is None:
            return await awaitable
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise StoreTimeoutError(
            message=f"{operation} exceeded {timeout}s",
            operation=operation,
            timeout_seconds=timeout,
        ) from e
    except IntegrityError as e:
        raise AlreadyExistsError(
            message=f"{resource_type} already exists",
            resource_type=resource_type,
        ) from e
    except (SQLAlchemyError, OSError) as e:
        raise StoreUnavailableError(
            message=f"{operation} failed: {e.__class__.__name__}",
            operation=operation,
        ) from e


class BaseRepository(Generic[TModel, TEntity]):
    """
    Base repository providing guarded statement execution.

    Type Parameters:
        TModel: SQLAlchemy model type (e.g., AccountModel)
        TEntity: Domain entity type (e.g., Account)

    Attributes:
        session: SQLAlchemy AsyncSession for database operations
        model_class: SQLAlchemy model class
        mapper: Mapper class for entity ↔ model conversion
        operation_timeout: Deadline in seconds for each call (None = no deadline)
    """

    resource_type: str = "Resource"

    def __init__(
        self,
        session: AsyncSession,
        model_class: Type[TModel],
        mapper_class,  # Type is Any to avoid circular imports
        operation_timeout: Optional[float] = None,
    ):
        """
        Initialize base repository.

        Args:
            session: SQLAlchemy async session
            model_class: SQLAlchemy model class
            mapper_class: Mapper class with to_entity() and to_model() methods
            operation_timeout: Deadline in seconds applied to every statement
        """
        self.session = session
        self.model_class = model_class
        self.mapper = mapper_class
        self.operation_timeout = operation_timeout

    async def _guard(self, operation: str, awaitable: Awaitable[T]) -> T:
        return await run_guarded(
            operation, awaitable, self.operation_timeout, self.resource_type
        )

    async def _execute(self, operation: str, statement: Any):
        return await self._guard(operation, self.session.execute(statement))

    async def _insert(self, operation: str, entity: TEntity) -> TEntity:
        """
        Insert a new entity and flush it so constraint violations surface here.

        Args:
            operation: Operation name for error reporting
            entity: Domain entity to persist

        Returns:
            Entity rebuilt from the flushed model
        """
        model = self.mapper.to_model(entity)
        self.session.add(model)
        await self._guard(operation, self.session.flush())
        return self.mapper.to_entity(model)
