# /studyhub/routers/applications_router.py

from fastapi import APIRouter, Depends, HTTPException, Query, status, Response
from typing import List, Optional

from ..models import planner_model
from ..services import career_service, database_service
from .dependencies import get_current_user_id

router = APIRouter()

# --- APPLICATION COLLECTION ENDPOINTS (/api/applications) ---

@router.get("", response_model=List[planner_model.ApplicationRecord], summary="List Applications")
def list_applications(
    app_type: Optional[planner_model.ApplicationType] = Query(default=None, alias="type"),
    app_status: Optional[planner_model.ApplicationStatus] = Query(default=None, alias="status"),
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    user_id: str = Depends(get_current_user_id),
):
    return career_service.list_applications(user_id=user_id, db=db, app_type=app_type, status=app_status)

@router.post("", response_model=planner_model.ApplicationRecord, status_code=status.HTTP_201_CREATED, summary="Record an Application")
def create_application(application_create: planner_model.ApplicationCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return career_service.create_application(application_data=application_create, db=db, user_id=user_id)

@router.get("/stats", response_model=planner_model.CareerStats, summary="Get Interview, Offer and Pending Counts")
def get_stats(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return career_service.get_stats(user_id=user_id, db=db)

# --- INDIVIDUAL APPLICATION ENDPOINTS (/api/applications/{application_id}) ---

@router.put("/{application_id}", response_model=planner_model.ApplicationRecord, summary="Update an Application")
def update_application(application_id: str, application_update: planner_model.ApplicationUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        updated = career_service.update_application(application_id=application_id, application_update=application_update, db=db, user_id=user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Application with ID {application_id} not found")
    return updated

@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Application")
def delete_application(application_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    if not career_service.delete_application(application_id=application_id, db=db, user_id=user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Application with ID {application_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
