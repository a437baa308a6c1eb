# /studyhub/routers/dashboard_router.py

# --- Core FastAPI Imports ---
from fastapi import APIRouter, Depends

# --- Service and Model Imports ---
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service
from ..models.analytics_model import DashboardSummary
from .dependencies import get_current_user_id

router = APIRouter()

# --- Endpoint Definition ---
@router.get(
    "/summary",
    response_model=DashboardSummary,
    summary="Get Dashboard Summary",
    description="Retrieves the quick GPA, overall degree progress and workload counts for the Home Page."
)
def get_dashboard_summary(
    db: DatabaseService = Depends(get_db_service),
    user_id: str = Depends(get_current_user_id),
):
    # The thin router only delegates; the service owns the calculation.
    return dashboard_service.get_summary_data(user_id=user_id, db=db)
