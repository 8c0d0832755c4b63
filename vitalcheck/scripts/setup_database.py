#!/usr/bin/env python3
"""
Database setup script
=====================

Creates the service tables directly from the ORM models. Deployments that
track schema history should run `alembic upgrade head` instead.

Usage:
    python -m vitalcheck.scripts.setup_database [--check-only]
"""

import sys
import logging
import argparse
from typing import List, Optional, Sequence

from sqlalchemy import inspect, text
from sqlalchemy.exc import SQLAlchemyError

from vitalcheck.db.session import engine
from vitalcheck.db.base import Base

# Registers every model with Base.metadata
from vitalcheck import models  # noqa: F401

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def test_connection() -> bool:
    """Test database connection"""
    logger.info("Testing database connection...")
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False


def missing_tables() -> List[str]:
    existing_tables = inspect(engine).get_table_names()
    return [name for name in Base.metadata.tables if name not in existing_tables]


def create_tables() -> bool:
    """Create any missing tables"""
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("All tables are in place")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Failed to create tables: {e}")
        return False


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Set up the database tables")
    parser.add_argument("--check-only", action="store_true", help="Only report missing tables")
    args = parser.parse_args(argv)

    if not test_connection():
        return 1

    missing = missing_tables()
    if args.check_only:
        if missing:
            logger.warning(f"Missing database tables: {missing}")
            return 1
        logger.info("All required database tables exist")
        return 0

    return 0 if create_tables() else 1


if __name__ == "__main__":
    sys.exit(main())
