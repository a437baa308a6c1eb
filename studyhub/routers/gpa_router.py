# /studyhub/routers/gpa_router.py

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from ..models.analytics_model import GpaSummary
from ..services import gpa_service, database_service
from .dependencies import get_current_user_id

router = APIRouter()


@router.get("", response_model=GpaSummary, summary="Get Semester and Cumulative GPA")
def get_gpa_summary(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return gpa_service.get_gpa_summary(user_id=user_id, db=db)

@router.get("/export", summary="Export Current Grades as CSV", response_class=StreamingResponse)
def export_transcript_csv(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    csv_string = gpa_service.export_transcript_as_csv(user_id=user_id, db=db)
    return StreamingResponse(iter([csv_string]), media_type="text/csv", headers={"Content-Disposition": "attachment; filename=current_grades.csv"})
