import logging
from typing import Optional, Tuple

from fastapi import Depends, HTTPException, status, Header
from jose import JWTError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from vitalcheck import crud, models, schemas
from vitalcheck.core import security
from vitalcheck.db.session import get_db

logger = logging.getLogger(__name__)


def split_authorization(authorization: Optional[str]) -> Tuple[str, Optional[str]]:
    """Split an Authorization header into (scheme, credential); credential is None when absent."""
    if not authorization or not authorization.strip():
        return "", None
    parts = authorization.strip().split(None, 1)
    if len(parts) != 2:
        return parts[0], None
    return parts[0], parts[1].strip() or None


def get_current_admin(
    db: Session = Depends(get_db),
    authorization: Optional[str] = Header(None),
) -> models.Admin:
    """
    Resolve the administrator behind the bearer token.

    The returned Admin is the request-scoped admin context handed to
    protected handlers; nothing is stored on shared state.
    """
    scheme, token = split_authorization(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
        )
    if scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
    try:
        payload = security.decode_access_token(token)
        token_data = schemas.TokenPayload(**payload)
    except (JWTError, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
    if token_data.adminId is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
    admin = crud.admin.get(db, admin_id=token_data.adminId)
    if not admin:
        logger.warning(f"Token references unknown admin id {token_data.adminId}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
    return admin
