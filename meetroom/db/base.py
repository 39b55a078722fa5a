"""
SQLAlchemy declarative base and metadata.
Challenge: Single place for table definitions, migrations, and per-entity schema descriptors.
"""

from typing import Any, ClassVar
from uuid import uuid4

from sqlalchemy import inspect
from sqlalchemy.orm import DeclarativeBase

from meetroom.db.attributes import EntitySchema, SafeAttributes


class Base(DeclarativeBase):
    """Base class for all ORM models. Enables Alembic migrations.

    Every mapped subclass gets an ``__schema__`` descriptor as soon as the
    class statement finishes, so projection helpers never look at ORM
    internals at query time.
    """

    __schema__: ClassVar[EntitySchema]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        mapper = cls.__dict__.get("__mapper__")
        if mapper is not None:
            cls.__schema__ = EntitySchema.from_mapper(mapper)

    @classmethod
    def get_attributes(cls) -> list[str]:
        """All columns of the model, e.g. ['id', 'uuid', 'email', 'password']."""
        return cls.__schema__.attributes()

    @classmethod
    def get_indexes(cls) -> list[str]:
        """Only primary and foreign key columns, e.g. ['id', 'role_id']."""
        return cls.__schema__.indexes()

    @classmethod
    def get_non_indexes(cls) -> list[str]:
        """All columns except primary and foreign keys."""
        return cls.__schema__.non_indexes()

    @classmethod
    def filter_attributes(cls, policy: SafeAttributes = SafeAttributes.WITHOUT_INDEXES) -> list[str]:
        return cls.__schema__.filter(policy)

    def to_dict(self, policy: SafeAttributes = SafeAttributes.WITH_INDEXES) -> dict[str, Any]:
        """Serialize loaded attributes allowed by the policy, including loaded relationships.

        Unloaded attributes are skipped rather than fetched, so this is safe to
        call on projected rows inside an async session.
        """
        return self._to_dict(policy, frozenset())

    def _to_dict(self, policy: SafeAttributes, path: frozenset[int]) -> dict[str, Any]:
        path = path | {id(self)}
        state = inspect(self)
        loaded = state.dict
        data = {key: loaded[key] for key in self.filter_attributes(policy) if key in loaded}
        for rel in state.mapper.relationships:
            if rel.key not in loaded:
                continue
            value = loaded[rel.key]
            if value is None:
                data[rel.key] = None
            elif rel.uselist:
                data[rel.key] = [child._to_dict(policy, path) for child in value if id(child) not in path]
            elif id(value) not in path:
                data[rel.key] = value._to_dict(policy, path)
        return data


def new_uuid() -> str:
    """Default for public identifier columns."""
    return str(uuid4())
