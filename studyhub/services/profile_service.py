# /studyhub/services/profile_service.py

from ..models.profile_model import ProfileUpdate, UserProfileModel
from .database_service import DatabaseService
from .snapshot_service import load_profile


def get_profile(user_id: str, db: DatabaseService) -> UserProfileModel:
    """Returns the saved profile, or one made of the documented defaults."""
    return load_profile(db, user_id) or UserProfileModel()


def update_profile(profile_update: ProfileUpdate, db: DatabaseService, user_id: str) -> UserProfileModel:
    """Merges the provided fields into the stored profile."""
    update_data = profile_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    return UserProfileModel.model_validate(db.upsert_profile(user_id, update_data))
