# /studyhub/models/assignment_model.py

from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from typing import Optional


class AssignmentCreate(BaseModel):
    """
    The submitted assignment form. A recurring form is expanded into one
    independent assignment per week up to `recurrence_end_date`.
    """
    class_id: str = Field(..., description="The class this assignment belongs to.")
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: str = Field(default="Homework", description="Grading bucket, e.g. 'Homework' or 'Exam'.")
    due_date: Optional[str] = Field(default=None, description="ISO date or datetime.")
    total_points: float = Field(default=100, gt=0)
    is_completed: bool = False
    is_graded: bool = False
    is_recurring: bool = False
    recurrence_end_date: Optional[str] = Field(default=None, description="Last allowed due date for a recurring series.")

    @model_validator(mode="after")
    def recurring_needs_end_date(self):
        if self.is_recurring and not self.recurrence_end_date:
            raise ValueError("A recurring assignment needs a recurrence_end_date.")
        return self


class AssignmentUpdate(BaseModel):
    """All fields optional for partial updates."""
    model_config = ConfigDict(from_attributes=True)

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    due_date: Optional[str] = None
    total_points: Optional[float] = Field(default=None, gt=0)
    earned_points: Optional[float] = Field(default=None, ge=0)
    is_completed: Optional[bool] = None
    is_graded: Optional[bool] = None

    @field_validator("title", "total_points", "is_completed", "is_graded")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("This field may be omitted but not set to null.")
        return value


class GradeEntry(BaseModel):
    """Points earned on an existing assignment. Recording it marks the assignment graded."""
    earned_points: float = Field(..., ge=0)


class QuickGradeCreate(BaseModel):
    """A grade entered directly, creating an already completed and graded assignment."""
    class_id: str
    title: str = Field(..., min_length=1)
    category: str = Field(default="Assignment")
    total_points: float = Field(..., gt=0)
    earned_points: float = Field(..., ge=0)


class AssignmentRecord(BaseModel):
    """The stored form of an assignment. Missing numbers read as 0."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    class_id: str
    title: str = ""
    description: Optional[str] = None
    category: Optional[str] = None
    total_points: float = 0
    earned_points: Optional[float] = None
    is_completed: bool = False
    is_graded: bool = False
    due_date: Optional[str] = None
    is_recurring: bool = False
    recurrence_end_date: Optional[str] = None
