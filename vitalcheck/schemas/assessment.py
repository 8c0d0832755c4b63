from datetime import datetime
from typing import List
from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from vitalcheck.core.timezone import as_utc


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @field_serializer("created_at", check_fields=False)
    def _created_at_utc(self, value: datetime) -> datetime:
        return as_utc(value)


class RiskResult(BaseModel):
    risk: str
    score: float


class AssessmentCreate(CamelModel):
    patient_name: str
    age: int
    systolic: int
    diastolic: int
    blood_sugar: float
    temperature: float
    is_fasting: bool = False
    bp_risk: RiskResult
    sugar_risk: RiskResult
    temp_risk: RiskResult
    total_score: float
    overall_risk: str

    def flatten(self) -> dict:
        """Column values for storage; each risk object becomes a level/score pair."""
        data = self.model_dump(exclude={"bp_risk", "sugar_risk", "temp_risk"})
        for prefix, result in (("bp", self.bp_risk), ("sugar", self.sugar_risk), ("temp", self.temp_risk)):
            data[f"{prefix}_risk_level"] = result.risk
            data[f"{prefix}_risk_score"] = result.score
        return data


class Assessment(CamelModel):
    id: int
    patient_name: str
    age: int
    systolic: int
    diastolic: int
    blood_sugar: float
    temperature: float
    is_fasting: bool
    bp_risk_level: str
    bp_risk_score: float
    sugar_risk_level: str
    sugar_risk_score: float
    temp_risk_level: str
    temp_risk_score: float
    total_score: float
    overall_risk: str
    created_at: datetime


class AssessmentCreated(BaseModel):
    success: bool = True
    assessment: Assessment


class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int


class AssessmentPage(BaseModel):
    assessments: List[Assessment]
    pagination: Pagination


class RecentAssessment(CamelModel):
    id: int
    patient_name: str
    overall_risk: str
    created_at: datetime


class RiskDistribution(BaseModel):
    high: int
    mid: int
    low: int


class AssessmentStats(CamelModel):
    total_assessments: int
    risk_distribution: RiskDistribution
    recent_assessments: List[RecentAssessment]


class ActionResult(BaseModel):
    success: bool = True
    message: str
