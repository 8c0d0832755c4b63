from .admin import Admin
from .health_assessment import HealthAssessment

__all__ = ["Admin", "HealthAssessment"]
