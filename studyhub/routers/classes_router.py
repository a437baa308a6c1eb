# /studyhub/routers/classes_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List, Optional

from ..models import class_model
from ..models.analytics_model import ClassGradeSummary, ProjectionRequest
from ..services import class_service, grade_service, database_service
from .dependencies import get_current_user_id

router = APIRouter()

# --- CLASS COLLECTION ENDPOINTS (/api/classes) ---

@router.get("", response_model=List[class_model.ClassRecord], summary="Get All Classes")
def get_all_classes(active: Optional[bool] = None, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return class_service.list_classes(user_id=user_id, db=db, active=active)

@router.post("", response_model=class_model.ClassRecord, status_code=status.HTTP_201_CREATED, summary="Create a New Class")
def create_new_class(class_create: class_model.ClassCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return class_service.create_class(class_data=class_create, db=db, user_id=user_id)

# --- INDIVIDUAL CLASS RESOURCE ENDPOINTS (/api/classes/{class_id}) ---

@router.get("/{class_id}", response_model=class_model.ClassRecord, summary="Get a Single Class")
def get_class_by_id(class_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    cls = class_service.get_class(class_id=class_id, user_id=user_id, db=db)
    if cls is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return cls

@router.put("/{class_id}", response_model=class_model.ClassRecord, summary="Update a Class")
def update_class_details(class_id: str, class_update: class_model.ClassUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        updated_class = class_service.update_class(class_id=class_id, class_update=class_update, db=db, user_id=user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated_class is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return updated_class

@router.post("/{class_id}/toggle-active", response_model=class_model.ClassRecord, summary="Archive or Restore a Class")
def toggle_class_active(class_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    updated_class = class_service.toggle_active(class_id=class_id, db=db, user_id=user_id)
    if updated_class is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return updated_class

@router.delete("/{class_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Class")
def delete_class(class_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    was_deleted = class_service.delete_class_by_id(class_id=class_id, db=db, user_id=user_id)
    if not was_deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

# --- GRADE SUB-RESOURCE ENDPOINTS ---

@router.get("/{class_id}/grade", response_model=ClassGradeSummary, summary="Get a Class's Current Grade")
def get_class_grade(class_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    summary = grade_service.get_class_grade(class_id=class_id, db=db, user_id=user_id)
    if summary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return summary

@router.post("/{class_id}/grade/projection", response_model=ClassGradeSummary, summary="Project a Class Grade from Anticipated Scores")
def project_class_grade(class_id: str, projection: ProjectionRequest, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    summary = grade_service.get_class_grade(class_id=class_id, db=db, user_id=user_id, anticipated=projection.anticipated)
    if summary is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Class with ID {class_id} not found")
    return summary
