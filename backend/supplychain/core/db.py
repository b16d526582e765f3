# backend/supplychain/core/db.py
import os
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.engine import make_url
from sqlalchemy.pool import StaticPool
from dotenv import dotenv_values, find_dotenv

# Project root and .env path
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
DEFAULT_DOTENV = os.path.join(BASE_DIR, ".env")

def _norm_key(k: str) -> str:
    return k.replace("\ufeff", "").strip() if isinstance(k, str) else k

# Load .env without overriding what the process environment already has
dotenv_path = DEFAULT_DOTENV if os.path.exists(DEFAULT_DOTENV) else find_dotenv(filename=".env", usecwd=True)
if dotenv_path:
    cfg = dotenv_values(dotenv_path, encoding="utf-8-sig")
    for k, v in cfg.items():
        nk = _norm_key(k)
        if v is not None and (nk not in os.environ or not os.environ[nk].strip()):
            os.environ[nk] = v

DSN = os.environ.get("DATABASE_URL") or os.environ.get("SUPPLYCHAIN_DSN")
if not DSN or not DSN.strip():
    raise RuntimeError(f"DATABASE_URL / SUPPLYCHAIN_DSN is not set. .env: {dotenv_path or '(not found)'}")

url = make_url(DSN)
engine_kwargs = dict(
    pool_pre_ping=True,
    echo=os.environ.get("SQL_ECHO", "").lower() in ("1", "true", "yes"),
)

backend = url.get_backend_name()  # e.g. 'sqlite', 'postgresql'
if backend.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
    # in-memory database: every session must share the one connection
    if url.database in (None, "", ":memory:"):
        engine_kwargs["poolclass"] = StaticPool
elif backend.startswith("postgresql"):
    engine_kwargs.update(pool_size=5, max_overflow=10)

engine = create_engine(DSN, **engine_kwargs)

if backend.startswith("sqlite"):
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        # SQLite ignores FK clauses (and ON DELETE CASCADE) unless asked per connection
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
