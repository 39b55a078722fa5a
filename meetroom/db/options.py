"""
Query options and the attribute-policy rewrite applied before every safe query.
Challenge: Force an explicit projection on the root entity and on every nested include.
Design: Pure functions over dataclasses; the caller's options object is never mutated.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Union

from sqlalchemy import inspect
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm import QueryableAttribute, RelationshipProperty
from sqlalchemy.sql import ColumnElement

from meetroom.db.attributes import SafeAttributes
from meetroom.db.base import Base

# Mapping -> equality filters (list/tuple/set values become IN, None becomes IS NULL),
# otherwise one or more SQLAlchemy boolean expressions passed straight to .where()
WhereClause = Union[Mapping[str, Any], Sequence[ColumnElement[bool]], ColumnElement[bool], None]

# A related model class, or the relationship attribute itself (e.g. Meeting.participants)
IncludeTarget = Union[type[Base], QueryableAttribute]


@dataclass
class Include:
    """Relation expansion. After the policy rewrite ``target`` is always a relationship attribute."""

    target: IncludeTarget
    attributes: list[str] | None = None
    where: WhereClause = None
    include: Any = None

    @property
    def model(self) -> type[Base]:
        if isinstance(self.target, QueryableAttribute):
            return self.target.property.mapper.class_
        return self.target


IncludeSpec = Union[IncludeTarget, Include, Sequence[Union[IncludeTarget, Include]], None]


@dataclass
class FindOptions:
    where: WhereClause = None
    attributes: list[str] | None = None
    include: IncludeSpec = None
    order_by: Sequence[Any] = ()
    limit: int | None = None
    offset: int | None = None


@dataclass
class FindOrCreateOptions(FindOptions):
    # Extra column values used only when the row has to be created
    defaults: dict[str, Any] = field(default_factory=dict)


def apply_attribute_policy(
    model: type[Base],
    policy: SafeAttributes = SafeAttributes.WITH_INDEXES,
    options: FindOptions | None = None,
) -> FindOptions | None:
    """Return a copy of ``options`` with policy-selected ``attributes`` at every include level.

    ``None`` is returned unchanged: without options no projection is injected
    and the query falls back to selecting every column.
    """
    if options is None:
        return None
    return replace(
        options,
        attributes=model.filter_attributes(policy),
        include=_apply_to_includes(model, policy, options.include),
    )


def _apply_to_includes(parent: type[Base], policy: SafeAttributes, include: IncludeSpec) -> list[Include] | None:
    if include is None:
        return None
    entries = list(include) if isinstance(include, (list, tuple)) else [include]
    rewritten = []
    for entry in entries:
        if not isinstance(entry, Include):
            entry = Include(target=entry)
        relation = resolve_relationship(parent, entry.target)
        child = relation.property.mapper.class_
        rewritten.append(
            replace(
                entry,
                target=relation,
                attributes=child.filter_attributes(policy),
                include=_apply_to_includes(child, policy, entry.include),
            )
        )
    return rewritten


def resolve_relationship(parent: type[Base], target: IncludeTarget) -> QueryableAttribute:
    """Find the relationship attribute on ``parent`` that an include refers to."""
    if isinstance(target, QueryableAttribute):
        if not isinstance(target.property, RelationshipProperty):
            raise InvalidRequestError(f"{target} is not a relationship")
        if not issubclass(parent, target.class_):
            raise InvalidRequestError(f"{target} is not a relationship of {parent.__name__}")
        return target

    if not (isinstance(target, type) and issubclass(target, Base)):
        raise InvalidRequestError(f"Cannot include {target!r}: expected a model class or relationship")

    matches = [rel for rel in inspect(parent).relationships if rel.mapper.class_ is target]
    if not matches:
        raise InvalidRequestError(f"{target.__name__} is not associated to {parent.__name__}")
    if len(matches) > 1:
        names = ", ".join(rel.key for rel in matches)
        raise InvalidRequestError(
            f"{target.__name__} is associated to {parent.__name__} more than once ({names}); "
            "include the relationship attribute instead"
        )
    return getattr(parent, matches[0].key)
