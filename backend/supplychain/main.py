# backend/supplychain/main.py
import os, json
import logging

from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.orm import Session
from sqlalchemy import text

from supplychain.core.db import get_db
from supplychain.core.logging_config import setup_logging
from supplychain.core.api import ok, fail, UTF8JSONResponse
from supplychain.domain.errors import (
    ConstraintViolation,
    RecordNotFound,
    UnknownEntity,
    UnknownQuery,
)

# --- Routers ---
from supplychain.routers.admin import router as admin_router
from supplychain.routers.records import router as records_router
from supplychain.routers.reports import router as reports_router

# --- CORS ---
from fastapi.middleware.cors import CORSMiddleware

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Supply Chain Schema", default_response_class=UTF8JSONResponse)


# -----------------------------
# Error envelope
# -----------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_to_envelope(request: Request, exc: StarletteHTTPException):
    return fail(str(exc.detail) if exc.detail else exc.__class__.__name__, status_code=exc.status_code)

@app.exception_handler(RequestValidationError)
async def validation_exception_to_envelope(request: Request, exc: RequestValidationError):
    return fail("Validation error", status_code=422, meta={"errors": jsonable_encoder(exc.errors())})

@app.exception_handler(ValidationError)
async def body_validation_to_envelope(request: Request, exc: ValidationError):
    return fail("Validation error", status_code=422, meta={"errors": json.loads(exc.json())})

@app.exception_handler(ConstraintViolation)
async def constraint_violation_to_envelope(request: Request, exc: ConstraintViolation):
    return fail(exc.message, status_code=409, meta={"kind": exc.kind, "table": exc.table})

@app.exception_handler(RecordNotFound)
@app.exception_handler(UnknownEntity)
@app.exception_handler(UnknownQuery)
async def not_found_to_envelope(request: Request, exc: Exception):
    return fail(str(exc), status_code=404)

@app.exception_handler(ValueError)
async def value_error_to_envelope(request: Request, exc: ValueError):
    return fail(str(exc), status_code=422)


# -----------------------------
# CORS (.env)
# -----------------------------
def _parse_origins(env_val: str | None):
    if not env_val or env_val.strip() == "*":
        return ["*"]
    try:
        parsed = json.loads(env_val)
        if isinstance(parsed, list):
            return [str(x) for x in parsed]
    except ValueError:
        pass
    return [s.strip() for s in env_val.split(",") if s.strip()]

ALLOWED_ORIGINS = _parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
logger.info("CORS allow_origins = %s", ALLOWED_ORIGINS)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---- Health ----
@app.get("/health")
def health():
    return ok({"service": "supply-chain-schema"})

@app.get("/db-ping")
def db_ping(db: Session = Depends(get_db)):
    val = db.execute(text("SELECT 1")).scalar()
    return ok({"db": "ok", "select1": val, "dialect": db.get_bind().dialect.name})


# =========================
# Router registration
# =========================
app.include_router(admin_router)
app.include_router(records_router)
app.include_router(reports_router)

logger.info("routes registered: /admin, /records, /reports")
