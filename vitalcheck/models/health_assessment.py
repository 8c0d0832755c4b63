from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, Index
from vitalcheck.db.base import Base
from vitalcheck.core.timezone import utcnow


class HealthAssessment(Base):
    __tablename__ = "health_assessments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    patient_name = Column(String, nullable=False, index=True)
    age = Column(Integer, nullable=False)
    systolic = Column(Integer, nullable=False)
    diastolic = Column(Integer, nullable=False)
    blood_sugar = Column(Float, nullable=False)
    temperature = Column(Float, nullable=False)
    is_fasting = Column(Boolean, nullable=False, default=False)

    # Risk sub-results, computed by the submitting client
    bp_risk_level = Column(String, nullable=False)
    bp_risk_score = Column(Float, nullable=False)
    sugar_risk_level = Column(String, nullable=False)
    sugar_risk_score = Column(Float, nullable=False)
    temp_risk_level = Column(String, nullable=False)
    temp_risk_score = Column(Float, nullable=False)

    total_score = Column(Float, nullable=False)
    overall_risk = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    __table_args__ = (
        Index("ix_health_assessments_created_at", "created_at"),
    )
