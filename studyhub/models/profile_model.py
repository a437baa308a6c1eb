# /studyhub/models/profile_model.py

from pydantic import BaseModel, Field, ConfigDict
from typing import Optional


class UserProfileModel(BaseModel):
    """
    The student's profile. Defaults here are the documented fallbacks used
    whenever the profile has not been saved or has not loaded yet.
    """
    model_config = ConfigDict(from_attributes=True)

    full_name: Optional[str] = None
    degree_credit_requirement: Optional[float] = Field(default=120, ge=0)
    current_gpa: Optional[float] = Field(
        default=None,
        ge=0,
        le=4.0,
        description="Declared cumulative GPA from before the student started tracking in the app."
    )
    completed_credit_hours: Optional[float] = Field(
        default=0,
        ge=0,
        description="Prior or transferred credit hours not tracked as individual courses."
    )


class ProfileUpdate(BaseModel):
    """Partial profile update. An explicit null clears `current_gpa`."""
    full_name: Optional[str] = None
    degree_credit_requirement: Optional[float] = Field(default=None, ge=0)
    current_gpa: Optional[float] = Field(default=None, ge=0, le=4.0)
    completed_credit_hours: Optional[float] = Field(default=None, ge=0)
