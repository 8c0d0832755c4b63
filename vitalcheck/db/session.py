from typing import Generator

from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from vitalcheck.core.config import settings


def _case_sensitive_like(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


def build_engine(uri: str, **kwargs):
    if uri.startswith("sqlite"):
        # Local development and tests. LIKE matches case like PostgreSQL;
        # ILIKE still compiles to lower() LIKE lower() here.
        sqlite_engine = create_engine(uri, connect_args={"check_same_thread": False}, echo=False, **kwargs)
        event.listen(sqlite_engine, "connect", _case_sensitive_like)
        return sqlite_engine
    # PostgreSQL configuration with connection pooling
    return create_engine(
        uri,
        pool_size=10,
        max_overflow=20,
        pool_recycle=300,      # Recycle connections every 5 minutes
        pool_pre_ping=True,    # Validate connections before use
        pool_timeout=30,
        echo=False
    )


engine = build_engine(settings.SQLALCHEMY_DATABASE_URI)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
