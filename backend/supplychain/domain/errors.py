# backend/supplychain/domain/errors.py
from __future__ import annotations
from typing import Optional

from sqlalchemy.exc import IntegrityError

NOT_NULL = "not_null"
CHECK = "check"
FOREIGN_KEY = "foreign_key"
UNIQUE = "unique"
INTEGRITY = "integrity"

# SQLSTATE class 23 codes (PostgreSQL and friends)
_SQLSTATE_KINDS = {
    "23502": NOT_NULL,
    "23514": CHECK,
    "23503": FOREIGN_KEY,
    "23505": UNIQUE,
}

# message fragments per engine: sqlite, postgres
_MESSAGE_KINDS = (
    ("not null constraint", NOT_NULL),
    ("violates not-null", NOT_NULL),
    ("check constraint", CHECK),
    ("foreign key constraint", FOREIGN_KEY),
    ("unique constraint", UNIQUE),
    ("duplicate key", UNIQUE),
)


class SupplyChainError(Exception):
    """Base class for errors raised by the data-access layer."""


class ConstraintViolation(SupplyChainError):
    """The engine rejected a statement; nothing from it was applied."""

    def __init__(self, kind: str, table: Optional[str], message: str):
        self.kind = kind
        self.table = table
        self.message = message
        super().__init__(f"{kind} violation on {table or '?'}: {message}")

    @classmethod
    def from_integrity_error(cls, exc: IntegrityError, table: Optional[str] = None) -> "ConstraintViolation":
        return cls(classify_integrity_error(exc), table, str(exc.orig))


class RecordNotFound(SupplyChainError):
    def __init__(self, table: str, record_id):
        self.table = table
        self.record_id = record_id
        super().__init__(f"{table} #{record_id} not found")


class UnknownEntity(SupplyChainError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown entity: {name}")


class UnknownQuery(SupplyChainError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown query: {name}")


def classify_integrity_error(exc: IntegrityError) -> str:
    orig = getattr(exc, "orig", None)
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code in _SQLSTATE_KINDS:
        return _SQLSTATE_KINDS[code]

    msg = str(orig if orig is not None else exc).lower()
    for needle, kind in _MESSAGE_KINDS:
        if needle in msg:
            return kind
    return INTEGRITY
