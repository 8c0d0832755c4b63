from .admin import AdminLogin, AdminRegister, AdminPublic, AuthResponse, TokenPayload
from .assessment import (
    RiskResult,
    AssessmentCreate,
    Assessment,
    AssessmentCreated,
    Pagination,
    AssessmentPage,
    RecentAssessment,
    RiskDistribution,
    AssessmentStats,
    ActionResult,
)
