import logging
import math
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vitalcheck import crud, models, schemas
from vitalcheck.api import deps
from vitalcheck.core.config import settings
from vitalcheck.core.timezone import format_local_date, format_local_time
from vitalcheck.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


def to_export_row(a: models.HealthAssessment) -> Dict[str, Any]:
    """Flatten an assessment into display-labelled columns."""
    return {
        "Date": format_local_date(a.created_at),
        "Time": format_local_time(a.created_at),
        "Patient Name": a.patient_name,
        "Age": a.age,
        "Systolic BP": a.systolic,
        "Diastolic BP": a.diastolic,
        "Blood Sugar": a.blood_sugar,
        "Fasting": "Yes" if a.is_fasting else "No",
        "Temperature": a.temperature,
        "BP Risk": a.bp_risk_level,
        "Sugar Risk": a.sugar_risk_level,
        "Temp Risk": a.temp_risk_level,
        "Overall Risk": a.overall_risk,
        "Total Score": a.total_score,
    }


@router.get("/assessments", response_model=schemas.AssessmentPage)
def list_assessments(
    *,
    db: Session = Depends(get_db),
    _: models.Admin = Depends(deps.get_current_admin),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    search: Optional[str] = Query(None),
) -> Any:
    """Admin-only: newest-first page of assessments, optionally filtered by patient name."""
    limit = min(limit, settings.MAX_PAGE_SIZE)
    skip = (page - 1) * limit
    try:
        items, total = crud.assessment.search(db, search=search, skip=skip, limit=limit)
    except SQLAlchemyError as e:
        logger.error(f"Fetch assessments error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch assessments"
        )

    return schemas.AssessmentPage(
        assessments=[schemas.Assessment.model_validate(a) for a in items],
        pagination=schemas.Pagination(
            page=page,
            limit=limit,
            total=total,
            pages=math.ceil(total / limit),
        ),
    )


@router.get("/assessments/export", response_model=List[Dict[str, Any]])
def export_assessments(
    *,
    db: Session = Depends(get_db),
    _: models.Admin = Depends(deps.get_current_admin),
) -> Any:
    """Admin-only: every assessment, newest first, keyed by display labels."""
    try:
        assessments = crud.assessment.list_all(db)
    except SQLAlchemyError as e:
        logger.error(f"Export error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to export data"
        )
    return [to_export_row(a) for a in assessments]


@router.delete("/assessments/{assessment_id}", response_model=schemas.ActionResult)
def delete_assessment(
    *,
    db: Session = Depends(get_db),
    current_admin: models.Admin = Depends(deps.get_current_admin),
    assessment_id: int,
) -> Any:
    """Admin-only: delete one assessment; 404 when the id does not exist."""
    try:
        deleted = crud.assessment.remove(db, assessment_id=assessment_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Delete assessment error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete assessment"
        )
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assessment not found"
        )

    logger.info(f"Admin {current_admin.id} deleted assessment {assessment_id}")
    return schemas.ActionResult(message="Assessment deleted successfully")


@router.delete("/assessments", response_model=schemas.ActionResult)
def delete_all_assessments(
    *,
    db: Session = Depends(get_db),
    current_admin: models.Admin = Depends(deps.get_current_admin),
) -> Any:
    """Admin-only: remove every stored assessment."""
    try:
        deleted = crud.assessment.remove_all(db)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Delete all assessments error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete all assessments"
        )

    logger.info(f"Admin {current_admin.id} deleted all {deleted} assessment(s)")
    return schemas.ActionResult(message="All assessments deleted successfully")
