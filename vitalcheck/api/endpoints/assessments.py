import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vitalcheck import crud, schemas
from vitalcheck.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=schemas.AssessmentCreated, status_code=status.HTTP_201_CREATED)
def submit_assessment(
    *,
    db: Session = Depends(get_db),
    assessment_in: schemas.AssessmentCreate,
) -> Any:
    """
    Public: store one health assessment as submitted.

    Risk levels and scores are computed by the form and persisted verbatim.
    """
    try:
        assessment = crud.assessment.create(db, obj_in=assessment_in)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Assessment creation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save assessment"
        )
    return schemas.AssessmentCreated(assessment=schemas.Assessment.model_validate(assessment))
