# backend/supplychain/services/record_service.py
from __future__ import annotations
import logging
from typing import Any, Dict, List, Mapping, Type, Union

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.db import Base
from ..models import MODELS_BY_TABLE
from ..domain.errors import ConstraintViolation, RecordNotFound, UnknownEntity

logger = logging.getLogger(__name__)

Entity = Union[str, Type[Base]]


def resolve_model(entity: Entity) -> Type[Base]:
    """Table name ("order_details") or model class -> model class."""
    if isinstance(entity, str):
        model = MODELS_BY_TABLE.get(entity)
        if model is None:
            raise UnknownEntity(entity)
        return model
    if getattr(entity, "__tablename__", None) not in MODELS_BY_TABLE:
        raise UnknownEntity(getattr(entity, "__name__", str(entity)))
    return entity


def as_dict(row: Base) -> Dict[str, Any]:
    return {c.name: getattr(row, c.name) for c in row.__table__.columns}


def create_record(db: Session, entity: Entity, values: Mapping[str, Any]) -> Base:
    """
    Single INSERT, committed on success.
    - keys that are absent get the column default; an explicit None is sent as NULL
    - any constraint failure -> rollback + ConstraintViolation, no row left behind
    """
    model = resolve_model(entity)
    unknown = set(values) - {c.name for c in model.__table__.columns}
    if unknown:
        raise ValueError(f"{model.__tablename__}: unknown columns {sorted(unknown)}")

    values = {k: v for k, v in values.items() if not (k == "id" and v is None)}
    # Core insert: the ORM would omit None for server-defaulted columns
    stmt = insert(model.__table__)
    if values:
        stmt = stmt.values(**values)
    try:
        result = db.execute(stmt)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        violation = ConstraintViolation.from_integrity_error(e, model.__tablename__)
        logger.warning("insert rejected: %s", violation)
        raise violation from e
    return get_record(db, model, result.inserted_primary_key[0])


def get_record(db: Session, entity: Entity, record_id: int) -> Base:
    model = resolve_model(entity)
    row = db.get(model, record_id)
    if row is None:
        raise RecordNotFound(model.__tablename__, record_id)
    return row


def list_records(db: Session, entity: Entity, *, skip: int = 0, limit: int = 100) -> List[Base]:
    model = resolve_model(entity)
    stmt = (
        select(model)
        .order_by(model.id.asc())
        .offset(max(0, skip))
        .limit(min(max(1, limit), 500))
    )
    return list(db.execute(stmt).scalars())


def count_records(db: Session, entity: Entity) -> int:
    model = resolve_model(entity)
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def delete_record(db: Session, entity: Entity, record_id: int) -> int:
    """
    Single DELETE statement; the engine applies ON DELETE CASCADE or rejects
    the delete when a non-cascading foreign key still references the row.

    Returns:
        Number of rows deleted from the target table (always 1)
    """
    model = resolve_model(entity)
    table = model.__tablename__
    try:
        result = db.execute(delete(model).where(model.id == record_id))
        deleted = result.rowcount
        if deleted == 0:
            db.rollback()
            raise RecordNotFound(table, record_id)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        violation = ConstraintViolation.from_integrity_error(e, table)
        logger.warning("delete rejected: %s", violation)
        raise violation from e

    # drop stale ORM copies of cascaded children
    db.expire_all()
    logger.info("deleted %s #%s", table, record_id)
    return deleted
