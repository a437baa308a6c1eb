# /studyhub/models/class_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from enum import Enum


class CourseCategory(str, Enum):
    CORE = "Core"
    MAJOR = "Major"
    MINOR = "Minor"
    ELECTIVE = "Elective"


# --- Model Definitions ---

class ClassBase(BaseModel):
    """
    Fields common to creating and reading a class.
    """
    course_code: str = Field(..., min_length=1, description="Course code, e.g. 'MATH 2413'.")
    course_name: str = Field(default="", description="Human-readable course title.")
    professor: Optional[str] = Field(default=None)
    credit_hours: float = Field(default=3, ge=0)
    category: CourseCategory = Field(default=CourseCategory.MAJOR)
    core_category: Optional[str] = Field(
        default=None,
        description="Core area name. Only meaningful when category is Core."
    )
    color: Optional[str] = Field(default=None)
    semester: Optional[str] = Field(default=None)
    days: List[str] = Field(default_factory=list, description="Weekday names the class meets on.")
    start_time: Optional[str] = Field(default=None, description="Start time as HH:MM.")
    end_time: Optional[str] = Field(default=None, description="End time as HH:MM.")
    is_active: bool = Field(default=True)


class ClassCreate(ClassBase):
    """The model used for creating a new class."""
    pass


class ClassUpdate(BaseModel):
    """
    The model for updating a class. All fields are optional to allow partial
    updates; marking a class completed or recording its final grade also
    happens through this model.
    """
    model_config = ConfigDict(from_attributes=True)

    course_code: Optional[str] = Field(default=None, min_length=1)
    course_name: Optional[str] = None
    professor: Optional[str] = None
    credit_hours: Optional[float] = Field(default=None, ge=0)
    category: Optional[CourseCategory] = None
    core_category: Optional[str] = None
    color: Optional[str] = None
    semester: Optional[str] = None
    days: Optional[List[str]] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    is_active: Optional[bool] = None
    is_completed: Optional[bool] = None
    is_transfer: Optional[bool] = None
    status: Optional[str] = None
    final_gpa: Optional[float] = Field(default=None, ge=0, le=4.0)
    grade: Optional[float] = Field(default=None, ge=0)

    @field_validator("course_code", "course_name", "credit_hours", "category", "is_active")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("This field may be omitted but not set to null.")
        return value


class ClassRecord(BaseModel):
    """
    The full representation of a class as stored and returned by the API.

    Every field except `id` has a default so that partially filled documents
    still load; missing numbers read as 0 and missing text as "".
    """
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    course_code: str = ""
    course_name: str = ""
    professor: Optional[str] = None
    credit_hours: float = 0
    category: str = CourseCategory.MAJOR.value
    core_category: Optional[str] = None
    is_active: bool = True
    is_completed: Optional[bool] = None
    is_transfer: Optional[bool] = None
    status: Optional[str] = None
    final_gpa: Optional[float] = None
    grade: Optional[float] = None
    color: Optional[str] = None
    semester: Optional[str] = None
    days: Optional[List[str]] = Field(default_factory=list)
    start_time: Optional[str] = None
    end_time: Optional[str] = None
