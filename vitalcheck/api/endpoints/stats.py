import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vitalcheck import crud, models, schemas
from vitalcheck.api import deps
from vitalcheck.core.config import settings
from vitalcheck.db.session import get_db

logger = logging.getLogger(__name__)

router = APIRouter()

# Substring matched against overallRisk; labels outside these buckets are counted only in the total
RISK_BUCKETS = {
    "high": "High Risk",
    "mid": "Mid Risk",
    "low": "Low Risk",
}


@router.get("/stats", response_model=schemas.AssessmentStats)
def get_stats(
    *,
    db: Session = Depends(get_db),
    _: models.Admin = Depends(deps.get_current_admin),
) -> Any:
    """Admin-only: dashboard totals, risk distribution and latest submissions."""
    try:
        total = crud.assessment.count(db)
        distribution = {
            bucket: crud.assessment.count_by_risk(db, label)
            for bucket, label in RISK_BUCKETS.items()
        }
        recent = crud.assessment.recent(db, limit=settings.RECENT_ASSESSMENTS_LIMIT)
    except SQLAlchemyError as e:
        logger.error(f"Stats error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch statistics"
        )

    return schemas.AssessmentStats(
        total_assessments=total,
        risk_distribution=schemas.RiskDistribution(**distribution),
        recent_assessments=[schemas.RecentAssessment.model_validate(a) for a in recent],
    )
