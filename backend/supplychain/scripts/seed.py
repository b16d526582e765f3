# backend/supplychain/scripts/seed.py
"""
Create the schema and load the demo data.

    python -m supplychain.scripts.seed [--drop]
"""
import argparse
import logging
from contextlib import contextmanager

from supplychain.core.db import SessionLocal, engine
from supplychain.core.logging_config import setup_logging
from supplychain.services.schema_service import create_schema, drop_schema
from supplychain.services.seed_service import seed_demo

logger = logging.getLogger("supplychain.seed")

# ---------- helpers ----------

@contextmanager
def session_scope():
    """One-off session, always closed."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def run(drop: bool = False):
    if drop:
        logger.info(">> Dropping schema")
        drop_schema(engine)

    logger.info(">> Creating schema")
    create_schema(engine)

    with session_scope() as db:
        logger.info(">> Seeding demo data")
        counts = seed_demo(db)

    logger.info("Seed done: %d rows", sum(counts.values()))
    return counts

def main(argv=None):
    parser = argparse.ArgumentParser(description="Create the supply-chain schema and load demo rows.")
    parser.add_argument("--drop", action="store_true", help="drop existing tables first")
    args = parser.parse_args(argv)
    setup_logging()
    run(drop=args.drop)

if __name__ == "__main__":
    main()
