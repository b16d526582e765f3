# backend/supplychain/services/schema_service.py
"""
Schema lifecycle: create / drop the ten supply-chain tables.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from ..core.db import Base, engine as default_engine
from ..models import MODELS  # noqa: F401  (populates Base.metadata)

logger = logging.getLogger(__name__)


def table_names() -> List[str]:
    """Declared tables, parents before children."""
    return [t.name for t in Base.metadata.sorted_tables]


def create_schema(engine: Optional[Engine] = None) -> List[str]:
    """
    CREATE TABLE for every declared table that does not exist yet.

    Returns:
        Names of the tables present after the call
    """
    bind = engine or default_engine
    Base.metadata.create_all(bind=bind, checkfirst=True)
    present = existing_tables(bind)
    logger.info("Schema ready on %s (%d tables)", bind.url.get_backend_name(), len(present))
    return present


def drop_schema(engine: Optional[Engine] = None) -> None:
    bind = engine or default_engine
    Base.metadata.drop_all(bind=bind, checkfirst=True)
    logger.info("Schema dropped on %s", bind.url.get_backend_name())


def existing_tables(engine: Optional[Engine] = None) -> List[str]:
    bind = engine or default_engine
    present = set(inspect(bind).get_table_names())
    return [name for name in table_names() if name in present]
