# /studyhub/models/degree_model.py

"""
Data contracts for degree planning: planned semesters with their embedded
courses, the manual core/major/minor requirement lists, and degree settings.
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from enum import Enum
import uuid

from .class_model import CourseCategory


# --- Core Enumerations ---

class CourseStatus(str, Enum):
    NOT_STARTED = "Not Started"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    TRANSFERRED = "Transferred"


class RequirementTrack(str, Enum):
    CORE = "core"
    MAJOR = "major"
    MINOR = "minor"


# --- Semester Plan Models ---

class CourseEntryCreate(BaseModel):
    course_code: str = Field(..., min_length=1)
    course_name: str = Field(default="")
    credit_hours: float = Field(default=3, ge=0)
    category: CourseCategory = Field(default=CourseCategory.MAJOR)
    core_category: Optional[str] = None
    status: CourseStatus = Field(default=CourseStatus.NOT_STARTED)


class CourseEntryUpdate(BaseModel):
    course_code: Optional[str] = Field(default=None, min_length=1)
    course_name: Optional[str] = None
    credit_hours: Optional[float] = Field(default=None, ge=0)
    category: Optional[CourseCategory] = None
    core_category: Optional[str] = None
    status: Optional[CourseStatus] = None

    @field_validator("course_code", "course_name", "credit_hours")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("This field may be omitted but not set to null.")
        return value


class CourseEntry(BaseModel):
    """
    A course embedded in a semester plan. Its id is only unique within the
    owning semester.
    """
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(default_factory=lambda: f"crs_{uuid.uuid4().hex[:8]}")
    course_code: str = ""
    course_name: str = ""
    credit_hours: float = 0
    category: Optional[str] = None
    core_category: Optional[str] = None
    status: Optional[str] = None
    is_transfer: Optional[bool] = None


class SemesterCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Display name, e.g. 'Fall 2026'.")


class SemesterRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    name: str = ""
    order: int = 0
    courses: List[CourseEntry] = Field(default_factory=list)


# --- Manual Requirement Models ---

class RequirementCreate(BaseModel):
    course_code: str = Field(..., min_length=1)
    course_name: str = Field(default="")
    credit_hours: float = Field(default=3, ge=0)
    category: Optional[str] = Field(default=None, description="Core area name for core entries.")
    status: Optional[CourseStatus] = None
    is_completed: Optional[bool] = None
    is_transfer: Optional[bool] = None


class RequirementUpdate(BaseModel):
    course_code: Optional[str] = Field(default=None, min_length=1)
    course_name: Optional[str] = None
    credit_hours: Optional[float] = Field(default=None, ge=0)
    category: Optional[str] = None
    status: Optional[CourseStatus] = None
    is_completed: Optional[bool] = None
    is_transfer: Optional[bool] = None

    @field_validator("course_code", "credit_hours")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("This field may be omitted but not set to null.")
        return value


class RequirementRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    track: RequirementTrack
    course_code: str = ""
    course_name: Optional[str] = None
    credit_hours: float = 0
    category: Optional[str] = None
    status: Optional[str] = None
    is_completed: Optional[bool] = None
    is_transfer: Optional[bool] = None


# --- Degree Settings ---

class CoreCategory(BaseModel):
    id: str = Field(..., description="Core area code, e.g. '010'.")
    name: str
    credits: float = Field(default=0, ge=0)


DEFAULT_CORE_CATEGORIES: List[CoreCategory] = [
    CoreCategory(id="010", name="Communication", credits=6),
    CoreCategory(id="020", name="Mathematics", credits=3),
    CoreCategory(id="030", name="Life & Physical Sciences", credits=6),
    CoreCategory(id="040", name="Language, Philosophy & Culture", credits=3),
    CoreCategory(id="050", name="Creative Arts", credits=3),
    CoreCategory(id="060", name="American History", credits=6),
    CoreCategory(id="070", name="Government/Political Science", credits=6),
    CoreCategory(id="080", name="Social & Behavioral Sciences", credits=3),
    CoreCategory(id="090", name="Component Area Option", credits=6),
]


class DegreeSettingsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    minor_credits_required: Optional[float] = Field(default=18, ge=0)
    core_categories: List[CoreCategory] = Field(
        default_factory=lambda: [c.model_copy() for c in DEFAULT_CORE_CATEGORIES]
    )
