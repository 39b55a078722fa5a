"""
Attribute-filtering policy and per-entity schema descriptors.
Challenge: Decide which columns a query projects without introspecting models at call time.
Design: EntitySchema is built once when a model class is mapped and is read-only afterwards.
"""

import enum
from dataclasses import dataclass

from sqlalchemy.orm import Mapper


class SafeAttributes(str, enum.Enum):
    """Projection policy for safe queries.

    WITH_INDEXES returns every declared column. WITHOUT_INDEXES drops primary
    and foreign keys, leaving public identifiers and data columns.
    """

    WITH_INDEXES = "with_indexes"
    WITHOUT_INDEXES = "without_indexes"


@dataclass(frozen=True)
class ColumnSchema:
    key: str
    name: str
    sql_type: str
    nullable: bool
    primary_key: bool
    references: tuple[str, ...] = ()
    unique: bool = False
    indexed: bool = False
    has_default: bool = False

    @property
    def is_index(self) -> bool:
        """Primary key or foreign key."""
        return self.primary_key or bool(self.references)


@dataclass(frozen=True)
class EntitySchema:
    """Column layout of one mapped entity, in declaration order."""

    model_name: str
    table_name: str
    columns: tuple[ColumnSchema, ...]

    @classmethod
    def from_mapper(cls, mapper: Mapper) -> "EntitySchema":
        table = mapper.local_table
        columns = []
        for column in table.columns:
            prop = mapper.get_property_by_column(column)
            columns.append(
                ColumnSchema(
                    key=prop.key,
                    name=column.name,
                    sql_type=str(column.type),
                    nullable=bool(column.nullable),
                    primary_key=bool(column.primary_key),
                    references=tuple(fk.target_fullname for fk in column.foreign_keys),
                    unique=bool(column.unique),
                    indexed=bool(column.index),
                    has_default=column.default is not None or column.server_default is not None,
                )
            )
        return cls(model_name=mapper.class_.__name__, table_name=table.name, columns=tuple(columns))

    def attributes(self) -> list[str]:
        """All attribute keys, e.g. ['id', 'uuid', 'email', 'password']."""
        return [c.key for c in self.columns]

    def indexes(self) -> list[str]:
        """Only primary and foreign key attributes, e.g. ['id', 'role_id']."""
        return [c.key for c in self.columns if c.is_index]

    def non_indexes(self) -> list[str]:
        """All attributes except primary and foreign keys."""
        return [c.key for c in self.columns if not c.is_index]

    def filter(self, policy: SafeAttributes) -> list[str]:
        if policy == SafeAttributes.WITH_INDEXES:
            return self.attributes()
        return self.non_indexes()

    def column(self, key: str) -> ColumnSchema:
        for c in self.columns:
            if c.key == key:
                return c
        raise KeyError(f"{self.model_name} has no attribute {key!r}")
