# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared plumbing for the domain services."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from lms_admin.domains.errors import EntityNotFoundError
from lms_admin.infrastructure.database.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class BaseService:
    """Base class for services that wrap one async session.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        """Initialize the service.

        Args:
            db: Async database session.
        """
        self.db = db

    async def _get_by_id(self, model: type[ModelT], entity_id: int) -> ModelT | None:
        result = await self.db.execute(select(model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def _require(
        self,
        model: type[ModelT],
        entity_id: int,
        entity: str,
        *,
        is_target: bool = False,
    ) -> ModelT:
        """Load a row by primary key or fail.

        Args:
            model: ORM class to query.
            entity_id: Primary key value.
            entity: Entity name used in the error message.
            is_target: True when the row is the one being modified.

        Returns:
            The loaded row.

        Raises:
            EntityNotFoundError: If no row has that id.
        """
        row = await self._get_by_id(model, entity_id)
        if row is None:
            logger.warning("%s not found: id=%s", entity, entity_id)
            raise EntityNotFoundError(entity, entity_id, is_target=is_target)
        return row

    async def _save(self, row: ModelT, entity: str) -> ModelT:
        """Add, commit and refresh a row.

        Args:
            row: New or modified ORM instance.
            entity: Entity name for logging.

        Returns:
            The refreshed row.

        Raises:
            IntegrityError: If a unique or foreign key constraint rejects
                the write. The session is rolled back first.
        """
        self.db.add(row)
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            logger.error("%s write rejected by constraint: %s", entity, e.orig)
            raise
        await self.db.refresh(row)
        return row

    async def _list(self, statement: Select[Any]) -> list[Any]:
        result = await self.db.execute(statement)
        return list(result.scalars().all())
