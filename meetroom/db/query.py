"""
Statement building - turns rewritten FindOptions into a SQLAlchemy Select.
Challenge: Keep the projection explicit (load_only) and avoid N+1 for includes (selectinload).
"""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.exc import InvalidRequestError
from sqlalchemy.orm import load_only, selectinload
from sqlalchemy.sql import ColumnElement

from meetroom.db.base import Base
from meetroom.db.options import FindOptions, Include, WhereClause


def _mapped_attribute(model: type[Base], key: str) -> Any:
    if key not in model.__mapper__.all_orm_descriptors:
        raise InvalidRequestError(f"Entity namespace for '{model.__name__}' has no property '{key}'")
    return getattr(model, key)


def where_criteria(model: type[Base], where: WhereClause) -> list[ColumnElement[bool]]:
    """Normalize a where clause into a list of boolean expressions."""
    if where is None:
        return []
    if isinstance(where, Mapping):
        criteria = []
        for key, value in where.items():
            attr = _mapped_attribute(model, key)
            if value is None:
                criteria.append(attr.is_(None))
            elif isinstance(value, (list, tuple, set, frozenset)):
                criteria.append(attr.in_(list(value)))
            else:
                criteria.append(attr == value)
        return criteria
    if isinstance(where, ColumnElement):
        return [where]
    return list(where)


def primary_key_criteria(model: type[Base], identifier: Any) -> list[ColumnElement[bool]]:
    """Criteria matching one row by primary key. Composite keys take a tuple or a mapping."""
    mapper = model.__mapper__
    keys = [mapper.get_property_by_column(column).key for column in mapper.primary_key]
    if isinstance(identifier, Mapping):
        values = [identifier[key] for key in keys]
    elif isinstance(identifier, (list, tuple)):
        values = list(identifier)
    else:
        values = [identifier]
    if len(values) != len(keys):
        raise InvalidRequestError(
            f"Incorrect number of values in identifier for {model.__name__}: "
            f"expected {len(keys)}, got {len(values)}"
        )
    return [getattr(model, key) == value for key, value in zip(keys, values)]


def _projection(model: type[Base], attributes: list[str], includes: list[Include] | None) -> list[Any]:
    keys = list(attributes)
    # Join columns must be loaded for includes to resolve; to_dict() still hides them
    mapper = model.__mapper__
    for include in includes or []:
        for column in include.target.property.local_columns:
            key = mapper.get_property_by_column(column).key
            if key not in keys:
                keys.append(key)
    if not keys:
        keys = [mapper.get_property_by_column(column).key for column in mapper.primary_key]
    return [getattr(model, key) for key in keys]


def _include_loader(include: Include):
    relation = include.target
    criteria = where_criteria(include.model, include.where)
    if criteria:
        relation = relation.and_(*criteria)
    loader = selectinload(relation)
    nested = []
    if include.attributes is not None:
        nested.append(load_only(*_projection(include.model, include.attributes, include.include)))
    nested.extend(_include_loader(child) for child in include.include or [])
    if nested:
        loader = loader.options(*nested)
    return loader


def build_select(model: type[Base], options: FindOptions | None) -> Select:
    """Select for ``model`` shaped by options already passed through apply_attribute_policy."""
    stmt = select(model)
    if options is None:
        return stmt

    loaders = []
    if options.attributes is not None:
        loaders.append(load_only(*_projection(model, options.attributes, options.include)))
    loaders.extend(_include_loader(include) for include in options.include or [])
    if loaders:
        stmt = stmt.options(*loaders)

    criteria = where_criteria(model, options.where)
    if criteria:
        stmt = stmt.where(*criteria)
    if options.order_by:
        stmt = stmt.order_by(*options.order_by)
    if options.offset is not None:
        stmt = stmt.offset(options.offset)
    if options.limit is not None:
        stmt = stmt.limit(options.limit)
    return stmt
