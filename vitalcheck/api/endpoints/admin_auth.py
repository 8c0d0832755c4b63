import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vitalcheck import crud, models, schemas
from vitalcheck.core import security
from vitalcheck.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


def _auth_response(admin: models.Admin) -> schemas.AuthResponse:
    token = security.create_access_token(admin.id)
    return schemas.AuthResponse(token=token, admin=schemas.AdminPublic.model_validate(admin))


@router.post("/login", response_model=schemas.AuthResponse)
def admin_login(
    *,
    db: Session = Depends(get_db),
    credentials: schemas.AdminLogin,
) -> Any:
    """
    Authenticate an administrator with email and password.
    Unknown email and wrong password produce the same error.
    """
    try:
        admin = crud.admin.get_by_email(db, email=credentials.email)
    except SQLAlchemyError as e:
        logger.error(f"Login error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    if not admin or not security.verify_password(credentials.password, admin.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials"
        )

    logger.info(f"Admin {admin.id} logged in")
    return _auth_response(admin)


@router.post("/register", response_model=schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
def admin_register(
    *,
    db: Session = Depends(get_db),
    admin_in: schemas.AdminRegister,
) -> Any:
    """Create an administrator account and return a token for it."""
    try:
        if crud.admin.get_by_email(db, email=admin_in.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Admin already exists"
            )
        admin = crud.admin.create(
            db,
            name=admin_in.name,
            email=admin_in.email,
            hashed_password=security.get_password_hash(admin_in.password),
        )
    except SQLAlchemyError as e:
        db.rollback()
        # A concurrent registration may win the unique-email race
        if crud.admin.get_by_email(db, email=admin_in.email):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Admin already exists"
            )
        logger.error(f"Registration error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )

    logger.info(f"Admin {admin.id} registered")
    return _auth_response(admin)
