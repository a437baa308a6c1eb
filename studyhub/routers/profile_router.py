# /studyhub/routers/profile_router.py

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.profile_model import ProfileUpdate, UserProfileModel
from ..services import profile_service, database_service
from .dependencies import get_current_user_id

router = APIRouter()


@router.get("", response_model=UserProfileModel, summary="Get the Academic Profile")
def get_profile(db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    return profile_service.get_profile(user_id=user_id, db=db)

@router.put("", response_model=UserProfileModel, summary="Update the Academic Profile")
def update_profile(profile_update: ProfileUpdate, db: database_service.DatabaseService = Depends(database_service.get_db_service), user_id: str = Depends(get_current_user_id)):
    try:
        return profile_service.update_profile(profile_update=profile_update, db=db, user_id=user_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
