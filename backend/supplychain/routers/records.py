# backend/supplychain/routers/records.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session

from ..core.db import get_db
from ..core.api import ok, list_meta
from ..domain.errors import UnknownEntity
from ..schemas.seed import CREATE_SCHEMAS
from ..services.record_service import (
    as_dict,
    create_record,
    delete_record,
    get_record,
    list_records,
)

router = APIRouter(prefix="/records", tags=["records"])

def _schema_for(entity: str):
    schema = CREATE_SCHEMAS.get(entity)
    if schema is None:
        raise UnknownEntity(entity)
    return schema

@router.get("")
def list_entities():
    names = list(CREATE_SCHEMAS)
    return ok(names, meta=list_meta(names))

@router.post("/{entity}", status_code=201)
def create_entity_record(entity: str, payload: Dict[str, Any] = Body(...), db: Session = Depends(get_db)):
    # shape only; a pydantic ValidationError becomes a 422 in main
    values = _schema_for(entity).model_validate(payload).model_dump(exclude_unset=True)
    row = create_record(db, entity, values)
    return ok(as_dict(row), status_code=201)

@router.get("/{entity}")
def list_entity_records(
    entity: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
):
    items = [as_dict(r) for r in list_records(db, entity, skip=skip, limit=limit)]
    return ok(items, meta=list_meta(items, {"skip": skip, "limit": limit}))

@router.get("/{entity}/{record_id}")
def get_entity_record(entity: str, record_id: int, db: Session = Depends(get_db)):
    return ok(as_dict(get_record(db, entity, record_id)))

@router.delete("/{entity}/{record_id}")
def delete_entity_record(entity: str, record_id: int, db: Session = Depends(get_db)):
    deleted = delete_record(db, entity, record_id)
    return ok({"entity": entity, "id": record_id, "deleted": deleted})
