from fastapi import APIRouter

from vitalcheck.api.endpoints import admin_auth
from vitalcheck.api.endpoints import admin_assessments
from vitalcheck.api.endpoints import assessments
from vitalcheck.api.endpoints import stats

api_router = APIRouter()

api_router.include_router(admin_auth.router, prefix="/admin", tags=["admin-auth"])
api_router.include_router(admin_assessments.router, prefix="/admin", tags=["admin-assessments"])
api_router.include_router(stats.router, prefix="/admin", tags=["admin-stats"])
api_router.include_router(assessments.router, prefix="/assessments", tags=["assessments"])
