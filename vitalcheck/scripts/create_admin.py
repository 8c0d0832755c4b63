#!/usr/bin/env python3
"""
Create an administrator account from the command line.

Usage:
    python -m vitalcheck.scripts.create_admin --name "Jane Admin" --email admin@example.com
    (the password is prompted for when --password is omitted)
"""

import sys
import getpass
import argparse
import logging
from typing import Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from vitalcheck import crud
from vitalcheck.core.security import get_password_hash
from vitalcheck.db.session import SessionLocal
from vitalcheck.scripts.setup_database import create_tables

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def create_admin_user(name: str, email: str, password: str) -> bool:
    """Insert an administrator; refuses an email that is already registered."""
    db = SessionLocal()
    try:
        if crud.admin.get_by_email(db, email=email):
            logger.error(f"Admin with email {email} already exists")
            return False

        admin = crud.admin.create(
            db, name=name, email=email, hashed_password=get_password_hash(password)
        )
        logger.info(f"Admin created: id={admin.id} email={admin.email} name={admin.name}")
        return True
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error creating admin user: {e}")
        return False
    finally:
        db.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Create an administrator account")
    parser.add_argument("--name", required=True)
    parser.add_argument("--email", required=True)
    parser.add_argument("--password", help="Prompted for when omitted")
    args = parser.parse_args(argv)

    password = args.password
    if not password:
        password = getpass.getpass("Password: ")
        if password != getpass.getpass("Confirm Password: "):
            logger.error("Passwords do not match")
            return 1
    if not password:
        logger.error("Password is required")
        return 1

    if not create_tables():
        return 1
    return 0 if create_admin_user(args.name.strip(), args.email.strip(), password) else 1


if __name__ == "__main__":
    sys.exit(main())
