import logging
import os

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base

from taskboard.config import settings

logger = logging.getLogger(__name__)

# Default to a local SQLite database if no DATABASE_URL is provided or usable
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(BASE_DIR, ".."))
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, "taskboard.db")


def _build_engine():
    """Create the SQLAlchemy engine, preferring the configured DATABASE_URL."""
    database_url = settings.DATABASE_URL

    if database_url:
        try:
            engine = create_engine(database_url)
            # Ensure the target database is reachable; otherwise fall back to SQLite
            with engine.connect():
                pass
            return engine
        except ModuleNotFoundError as exc:
            # The SQL driver (e.g. psycopg2) is not installed
            logger.warning("Database driver unavailable (%s), falling back to SQLite", exc)
        except SQLAlchemyError as exc:
            logger.warning("Database at DATABASE_URL unreachable (%s), falling back to SQLite", exc)

    sqlite_url = f"sqlite:///{DEFAULT_DB_PATH}"
    return create_engine(sqlite_url, connect_args={"check_same_thread": False})


engine = _build_engine()

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


# Integer primary keys are signed 64-bit on every supported backend
MAX_ID = 2**63 - 1


def fits_id_column(value: int) -> bool:
    """Return False for ids no row can have; the driver would overflow on them."""
    return -MAX_ID - 1 <= value <= MAX_ID


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
