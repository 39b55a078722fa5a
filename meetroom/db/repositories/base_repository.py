"""
Base repository - generic CRUD plus "safe" queries with an explicit, policy-selected projection.
Challenge: Every safe query selects only the columns the policy allows, on the root entity and on every include.
Design: Implemented once, instantiated per entity; options are rewritten, never mutated.
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.ext.asyncio import AsyncSession

from meetroom.config import get_settings
from meetroom.db.attributes import SafeAttributes
from meetroom.db.base import Base
from meetroom.db.options import FindOptions, FindOrCreateOptions, apply_attribute_policy
from meetroom.db.query import build_select, primary_key_criteria

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


def page_limit(limit: int | None) -> int:
    """Page size from settings when not given, never above max_page_size."""
    settings = get_settings()
    if limit is None:
        limit = settings.default_page_size
    return min(limit, settings.max_page_size)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define model-specific methods."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def get_by_id(self, id: Any) -> ModelType | None:
        """Fetch single entity by primary key (tuple for composite keys)."""
        return await self.session.get(self.model, id)

    async def get_many(
        self,
        *,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[ModelType]:
        """Paginated list. Avoids loading full table (performance)."""
        result = await self.session.execute(
            select(self.model).offset(skip).limit(page_limit(limit)).order_by(*self.model.__mapper__.primary_key)
        )
        return list(result.scalars().all())

    async def add(self, entity: ModelType) -> ModelType:
        """Persist new entity. Caller commits session."""
        self.session.add(entity)
        await self.session.flush()  # Get ID without committing
        await self.session.refresh(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        """Remove entity from DB."""
        await self.session.delete(entity)

    # --- Safe queries ---

    def prepare_options(self, policy: SafeAttributes, options: FindOptions | None) -> FindOptions | None:
        prepared = apply_attribute_policy(self.model, policy, options)
        if prepared is None:
            logger.debug("%s: no options given, selecting all columns", self.model.__name__)
        else:
            logger.debug("%s: %s projection %s", self.model.__name__, policy.value, prepared.attributes)
        return prepared

    async def find_all_safe(
        self,
        policy: SafeAttributes = SafeAttributes.WITH_INDEXES,
        options: FindOptions | None = None,
    ) -> list[ModelType]:
        """Search for multiple instances.

        WITH_INDEXES returns all attributes; WITHOUT_INDEXES returns all
        attributes except primary and foreign keys. Includes are projected the
        same way::

            await repo.find_all_safe(
                SafeAttributes.WITHOUT_INDEXES,
                FindOptions(where={"status": MeetingStatus.SCHEDULED}, include=Participant),
            )
        """
        stmt = build_select(self.model, self.prepare_options(policy, options))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def find_one_safe(
        self,
        policy: SafeAttributes = SafeAttributes.WITH_INDEXES,
        options: FindOptions | None = None,
    ) -> ModelType | None:
        """First instance matching the options, or None."""
        stmt = build_select(self.model, self.prepare_options(policy, options)).limit(1)
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def find_by_pk_safe(
        self,
        policy: SafeAttributes = SafeAttributes.WITH_INDEXES,
        identifier: Any = None,
        options: FindOptions | None = None,
    ) -> ModelType | None:
        """Single instance by primary key. A tuple or mapping identifies composite keys."""
        prepared = self.prepare_options(policy, options)
        if identifier is None:
            return None
        stmt = build_select(self.model, prepared).where(*primary_key_criteria(self.model, identifier))
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def find_or_create_safe(
        self,
        policy: SafeAttributes = SafeAttributes.WITH_INDEXES,
        options: FindOrCreateOptions | None = None,
    ) -> tuple[ModelType, bool]:
        """Find by ``options.where`` or create from where + defaults. Returns (entity, created)."""
        if options is None or not isinstance(options.where, Mapping):
            raise InvalidRequestError("find_or_create_safe requires options with a mapping 'where'")
        found = await self.find_one_safe(policy, options)
        if found is not None:
            return found, False
        values = {**options.where, **getattr(options, "defaults", {})}
        created = await self.create_safe(values, policy, options)
        return created, True

    async def create_safe(
        self,
        values: Mapping[str, Any],
        policy: SafeAttributes = SafeAttributes.WITH_INDEXES,
        options: FindOptions | None = None,
    ) -> ModelType:
        """Insert a row and reload only the policy-selected attributes (plus requested includes)."""
        entity = self.model(**values)
        self.session.add(entity)
        await self.session.flush()
        prepared = self.prepare_options(policy, options)
        if prepared is None:
            await self.session.refresh(entity)
        else:
            names = list(prepared.attributes or [])
            names.extend(include.target.key for include in prepared.include or [])
            await self.session.refresh(entity, attribute_names=names)
        return entity
