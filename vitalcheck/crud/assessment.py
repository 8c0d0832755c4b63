from typing import List, Optional, Tuple
from sqlalchemy.orm import Query, Session
from vitalcheck.models import HealthAssessment
from vitalcheck.schemas.assessment import AssessmentCreate


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class CRUDAssessment:
    def _newest_first(self, query: Query) -> Query:
        # id breaks ties between rows stamped in the same instant
        return query.order_by(HealthAssessment.created_at.desc(), HealthAssessment.id.desc())

    def _matching(self, db: Session, search: Optional[str]) -> Query:
        query = db.query(HealthAssessment)
        if search:
            query = query.filter(
                HealthAssessment.patient_name.ilike(f"%{_escape_like(search)}%", escape="\\")
            )
        return query

    def get(self, db: Session, assessment_id: int) -> Optional[HealthAssessment]:
        return db.query(HealthAssessment).filter(HealthAssessment.id == assessment_id).first()

    def create(self, db: Session, *, obj_in: AssessmentCreate) -> HealthAssessment:
        db_obj = HealthAssessment(**obj_in.flatten())
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def search(
        self, db: Session, *, search: Optional[str] = None, skip: int = 0, limit: int = 10
    ) -> Tuple[List[HealthAssessment], int]:
        """Page of assessments whose patient name contains `search` (case-insensitive), plus the total match count."""
        query = self._matching(db, search)
        items = self._newest_first(query).offset(skip).limit(limit).all()
        total = query.count()
        return items, total

    def list_all(self, db: Session) -> List[HealthAssessment]:
        return self._newest_first(db.query(HealthAssessment)).all()

    def recent(self, db: Session, *, limit: int = 5) -> List[HealthAssessment]:
        return self._newest_first(db.query(HealthAssessment)).limit(limit).all()

    def count(self, db: Session) -> int:
        return db.query(HealthAssessment).count()

    def count_by_risk(self, db: Session, label: str) -> int:
        """Count assessments whose overall risk label contains `label`. Case-sensitive (LIKE)."""
        return (
            db.query(HealthAssessment)
            .filter(HealthAssessment.overall_risk.contains(label, autoescape=True))
            .count()
        )

    def remove(self, db: Session, *, assessment_id: int) -> bool:
        deleted = (
            db.query(HealthAssessment)
            .filter(HealthAssessment.id == assessment_id)
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted > 0

    def remove_all(self, db: Session) -> int:
        deleted = db.query(HealthAssessment).delete(synchronize_session=False)
        db.commit()
        return deleted


assessment = CRUDAssessment()
