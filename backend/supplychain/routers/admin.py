# backend/supplychain/routers/admin.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..core.db import get_db
from ..core.api import ok, list_meta
from ..schemas.seed import SeedData
from ..services.schema_service import create_schema, drop_schema
from ..services.seed_service import seed, seed_demo

router = APIRouter(prefix="/admin", tags=["admin"])

@router.post("/schema", status_code=201)
def admin_create_schema(db: Session = Depends(get_db)):
    tables = create_schema(db.get_bind())
    return ok(tables, meta=list_meta(tables), status_code=201)

@router.delete("/schema")
def admin_drop_schema(db: Session = Depends(get_db)):
    drop_schema(db.get_bind())
    return ok(True)

@router.post("/seed", status_code=201)
def admin_seed(payload: SeedData, db: Session = Depends(get_db)):
    counts = seed(db, payload)
    return ok(counts, meta={"total": sum(counts.values())}, status_code=201)

@router.post("/seed/demo", status_code=201)
def admin_seed_demo(db: Session = Depends(get_db)):
    counts = seed_demo(db)
    return ok(counts, meta={"total": sum(counts.values())}, status_code=201)
