# /studyhub/routers/grades_router.py

from fastapi import APIRouter, Depends, HTTPException, status
from typing import Dict, List

from ..models.analytics_model import ClassGradeSummary, WeightUpdate
from ..services import grade_service, database_service
from .dependencies import get_current_user_id

router = APIRouter()

# --- CATEGORY WEIGHTS (/api/grades/weights) ---

@router.get("/weights", response_model=Dict[str, float], summary="Get All Category Weights")
def get_weights(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return grade_service.get_weights(user_id=user_id, db=db)

@router.get("/weights/{class_id}", response_model=Dict[str, float], summary="Get the Category Weights of One Class")
def get_class_weights(class_id: str, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        return grade_service.get_class_weights(class_id=class_id, db=db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.put("/weights/{class_id}/{category}", response_model=Dict[str, float], summary="Set One Category Weight")
def set_weight(class_id: str, category: str, weight_update: WeightUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        return grade_service.set_weight(class_id=class_id, category=category, weight=weight_update.weight, db=db, user_id=user_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

# --- GRADE TRACKER (/api/grades/tracker) ---

@router.get("/tracker", response_model=List[ClassGradeSummary], summary="Get Current and Projected Grades for Active Classes")
def get_tracker(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return grade_service.get_tracker(user_id=user_id, db=db)
