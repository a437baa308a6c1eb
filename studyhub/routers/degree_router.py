# /studyhub/routers/degree_router.py

from fastapi import APIRouter, Depends, HTTPException, status, Response
from typing import List

from ..models import degree_model
from ..models.analytics_model import CoreCategoryProgress, DegreeProgress, MinorProgress
from ..services import degree_service, database_service
from .dependencies import get_current_user_id

router = APIRouter()

# --- PROGRESS VIEWS (/api/degree/...) ---

@router.get("/progress", response_model=DegreeProgress, summary="Get Degree Credit Progress")
def get_degree_progress(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return degree_service.get_degree_progress(user_id=user_id, db=db)

@router.get("/minor", response_model=MinorProgress, summary="Get Minor Progress")
def get_minor_progress(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return degree_service.get_minor_progress(user_id=user_id, db=db)

@router.get("/core-categories", response_model=List[CoreCategoryProgress], summary="Get Progress per Core Area")
def get_core_categories(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return degree_service.get_core_category_progress(user_id=user_id, db=db)

# --- SEMESTER PLAN (/api/degree/semesters) ---

@router.get("/semesters", response_model=List[degree_model.SemesterRecord], summary="List Planned Semesters")
def list_semesters(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return degree_service.list_semesters(user_id=user_id, db=db)

@router.post("/semesters", response_model=degree_model.SemesterRecord, status_code=status.HTTP_201_CREATED, summary="Add a Semester to the Plan")
def create_semester(semester_create: degree_model.SemesterCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return degree_service.create_semester(semester_data=semester_create, db=db, user_id=user_id)

@router.delete("/semesters/{semester_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Semester")
def delete_semester(semester_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    if not degree_service.delete_semester(semester_id=semester_id, db=db, user_id=user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Semester with ID {semester_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/semesters/{semester_id}/courses", response_model=degree_model.SemesterRecord, status_code=status.HTTP_201_CREATED, summary="Add a Course to a Semester")
def add_semester_course(semester_id: str, course_create: degree_model.CourseEntryCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        return degree_service.add_course_to_semester(semester_id=semester_id, course_data=course_create, db=db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.put("/semesters/{semester_id}/courses/{course_id}", response_model=degree_model.SemesterRecord, summary="Update a Planned Course")
def update_semester_course(semester_id: str, course_id: str, course_update: degree_model.CourseEntryUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        return degree_service.update_semester_course(semester_id=semester_id, course_id=course_id, course_update=course_update, db=db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.delete("/semesters/{semester_id}/courses/{course_id}", response_model=degree_model.SemesterRecord, summary="Remove a Planned Course")
def delete_semester_course(semester_id: str, course_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        return degree_service.delete_semester_course(semester_id=semester_id, course_id=course_id, db=db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

# --- SETTINGS (/api/degree/settings) ---

@router.get("/settings", response_model=degree_model.DegreeSettingsModel, summary="Get Degree Settings")
def get_settings(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return degree_service.get_settings(user_id=user_id, db=db)

@router.put("/settings", response_model=degree_model.DegreeSettingsModel, summary="Replace Degree Settings")
def update_settings(settings: degree_model.DegreeSettingsModel, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return degree_service.update_settings(settings=settings, db=db, user_id=user_id)

# --- MANUAL REQUIREMENT LISTS (/api/degree/requirements/{track}) ---

@router.get("/requirements/{track}", response_model=List[degree_model.RequirementRecord], summary="List Requirement Courses for a Track")
def list_requirements(track: degree_model.RequirementTrack, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return degree_service.list_requirements(track=track, user_id=user_id, db=db)

@router.post("/requirements/{track}", response_model=degree_model.RequirementRecord, status_code=status.HTTP_201_CREATED, summary="Add a Requirement Course")
def create_requirement(track: degree_model.RequirementTrack, requirement_create: degree_model.RequirementCreate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return degree_service.create_requirement(track=track, requirement_data=requirement_create, db=db, user_id=user_id)

@router.put("/requirements/{track}/{requirement_id}", response_model=degree_model.RequirementRecord, summary="Update a Requirement Course")
def update_requirement(track: degree_model.RequirementTrack, requirement_id: str, requirement_update: degree_model.RequirementUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        updated = degree_service.update_requirement(track=track, requirement_id=requirement_id, requirement_update=requirement_update, db=db, user_id=user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Requirement with ID {requirement_id} not found")
    return updated

@router.delete("/requirements/{track}/{requirement_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a Requirement Course")
def delete_requirement(track: degree_model.RequirementTrack, requirement_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    if not degree_service.delete_requirement(track=track, requirement_id=requirement_id, db=db, user_id=user_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Requirement with ID {requirement_id} not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
