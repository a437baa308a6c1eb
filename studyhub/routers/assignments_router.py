# /studyhub/routers/assignments_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List, Optional

from ..models import assignment_model
from ..services import assignment_service, database_service
from .dependencies import get_current_user_id

router = APIRouter()

# --- ASSIGNMENT COLLECTION ENDPOINTS (/api/assignments) ---

@router.get("", response_model=List[assignment_model.AssignmentRecord], summary="List Assignments")
def list_assignments(
    class_id: Optional[str] = None,
    is_completed: Optional[bool] = None,
    is_graded: Optional[bool] = None,
    db: database_service.DatabaseService = Depends(database_service.get_db_service),
    user_id: str = Depends(get_current_user_id),
):
    return assignment_service.list_assignments(user_id=user_id, db=db, class_id=class_id, is_completed=is_completed, is_graded=is_graded)

@router.post("", response_model=List[assignment_model.AssignmentRecord], status_code=status.HTTP_201_CREATED, summary="Create an Assignment (or a Weekly Series)")
def create_assignment(assignment_create: assignment_model.AssignmentCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        return assignment_service.create_assignments(assignment_data=assignment_create, db=db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

@router.post("/quick-grade", response_model=assignment_model.AssignmentRecord, status_code=status.HTTP_201_CREATED, summary="Quick Add a Grade")
def quick_add_grade(grade_create: assignment_model.QuickGradeCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        return assignment_service.quick_add_grade(grade_data=grade_create, db=db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

# --- INDIVIDUAL ASSIGNMENT ENDPOINTS (/api/assignments/{assignment_id}) ---

@router.put("/{assignment_id}", response_model=assignment_model.AssignmentRecord, summary="Update an Assignment")
def update_assignment(assignment_id: str, assignment_update: assignment_model.AssignmentUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        updated = assignment_service.update_assignment(assignment_id=assignment_id, assignment_update=assignment_update, db=db, user_id=user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return updated

@router.post("/{assignment_id}/toggle-complete", response_model=assignment_model.AssignmentRecord, summary="Toggle Completion")
def toggle_complete(assignment_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    updated = assignment_service.toggle_complete(assignment_id=assignment_id, db=db, user_id=user_id)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return updated

@router.put("/{assignment_id}/grade", response_model=assignment_model.AssignmentRecord, summary="Record Earned Points")
def record_grade(assignment_id: str, grade: assignment_model.GradeEntry, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    updated = assignment_service.record_grade(assignment_id=assignment_id, grade=grade, db=db, user_id=user_id)
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return updated

@router.delete("/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete an Assignment")
def delete_assignment(assignment_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    if not assignment_service.delete_assignment(assignment_id=assignment_id, db=db, user_id=user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Assignment with ID {assignment_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
