# /studyhub/models/planner_model.py

"""
Data contracts for the personal planner records: to-do items, lecture notes
and career applications.
"""

from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List
from enum import Enum


# --- To-Do Items ---

class TodoPriority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class TodoCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    due_date: Optional[str] = Field(default=None, description="ISO date or datetime.")
    priority: TodoPriority = Field(default=TodoPriority.MEDIUM)
    category: str = Field(default="Personal", examples=["Personal", "Academic", "Work", "Other"])
    is_completed: bool = False


class TodoUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[str] = None
    priority: Optional[TodoPriority] = None
    category: Optional[str] = None
    is_completed: Optional[bool] = None

    @field_validator("title", "priority", "category", "is_completed")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("This field may be omitted but not set to null.")
        return value


class TodoRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    title: str = ""
    description: Optional[str] = None
    due_date: Optional[str] = None
    priority: str = TodoPriority.MEDIUM.value
    category: str = "Personal"
    is_completed: bool = False


# --- Lecture Notes ---

class NoteCreate(BaseModel):
    """A note may be filed under one of the owner's classes or stand alone."""
    class_id: Optional[str] = None
    title: str = Field(..., min_length=1)
    content: str = Field(default="")
    lecture_date: Optional[str] = Field(default=None, description="ISO date of the lecture.")
    tags: List[str] = Field(default_factory=list)


class NoteUpdate(BaseModel):
    class_id: Optional[str] = None
    title: Optional[str] = Field(default=None, min_length=1)
    content: Optional[str] = None
    lecture_date: Optional[str] = None
    tags: Optional[List[str]] = None

    @field_validator("title", "content", "tags")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("This field may be omitted but not set to null.")
        return value


class NoteRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    class_id: Optional[str] = None
    title: str = ""
    content: str = ""
    lecture_date: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


# --- Career Applications ---

class ApplicationType(str, Enum):
    INTERNSHIP = "Internship"
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    HACKATHON = "Hackathon"
    CLUB = "Club"
    RESEARCH = "Research"
    OTHER = "Other"


class ApplicationStatus(str, Enum):
    APPLIED = "Applied"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"
    ACCEPTED = "Accepted"
    DECLINED = "Declined"
    WITHDRAWN = "Withdrawn"


class ApplicationCreate(BaseModel):
    type: ApplicationType = Field(default=ApplicationType.INTERNSHIP)
    company_organization: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    status: ApplicationStatus = Field(default=ApplicationStatus.APPLIED)
    applied_date: Optional[str] = None
    deadline: Optional[str] = None
    interview_date: Optional[str] = None
    interview_time: Optional[str] = Field(default=None, description="Time as HH:MM.")
    notes: Optional[str] = None
    url: Optional[str] = None


class ApplicationUpdate(BaseModel):
    type: Optional[ApplicationType] = None
    company_organization: Optional[str] = Field(default=None, min_length=1)
    position: Optional[str] = Field(default=None, min_length=1)
    status: Optional[ApplicationStatus] = None
    applied_date: Optional[str] = None
    deadline: Optional[str] = None
    interview_date: Optional[str] = None
    interview_time: Optional[str] = None
    notes: Optional[str] = None
    url: Optional[str] = None

    @field_validator("type", "company_organization", "position", "status")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("This field may be omitted but not set to null.")
        return value


class ApplicationRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    type: str = ApplicationType.INTERNSHIP.value
    company_organization: str = ""
    position: str = ""
    status: str = ApplicationStatus.APPLIED.value
    applied_date: Optional[str] = None
    deadline: Optional[str] = None
    interview_date: Optional[str] = None
    interview_time: Optional[str] = None
    notes: Optional[str] = None
    url: Optional[str] = None


class CareerStats(BaseModel):
    """Headline counts for the career page. Accepted offers count as offers."""
    total: int = Field(..., examples=[14])
    interviews: int = Field(..., examples=[3])
    offers: int = Field(..., examples=[1])
    pending: int = Field(..., examples=[8])
