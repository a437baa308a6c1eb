# /studyhub/models/analytics_model.py

"""
Data contracts for everything the aggregation engine derives: per-class
grades, GPA summaries, and degree progress views.
"""

from pydantic import BaseModel, Field
from typing import Optional, Dict, List
from enum import Enum


class GradeMode(str, Enum):
    WEIGHTED = "weighted"
    POINTS = "points"


class GradeMark(BaseModel):
    letter: str
    gpa_points: float


class CategoryScore(BaseModel):
    earned: float
    total: float
    percentage: float
    weight: float = 0


class ClassGrade(BaseModel):
    """The computed grade of one class."""
    percentage: float = Field(..., description="Final percentage, 0-100 (may exceed 100 with extra credit).")
    per_category: Dict[str, CategoryScore] = Field(default_factory=dict)
    letter_grade: str
    gpa_points: float
    mode: GradeMode
    assignment_count: int = 0


class ClassGradeSummary(BaseModel):
    """A class together with its current and projected grade, as shown in the grade tracker."""
    class_id: str
    course_code: str
    course_name: str
    credit_hours: float
    current: Optional[ClassGrade] = None
    projected: Optional[ClassGrade] = None


class GpaSummary(BaseModel):
    semester_gpa: float
    cumulative_gpa: float
    total_credits: float
    classes: List[ClassGradeSummary] = Field(default_factory=list)


class DashboardGpa(BaseModel):
    gpa: float
    has_data: bool


class DegreeProgress(BaseModel):
    """Degree-planner progress. Per-source de-duplication, profile credits as fallback."""
    completed_credits: float
    transferred_credits: float
    combined_completed: float
    in_progress_credits: float
    remaining: float
    total_required: float
    percentage: float


class GlobalDegreeProgress(BaseModel):
    """Dashboard progress. Course-code de-duplication, profile credits always added."""
    total_completed: float
    total_required: float
    percentage: float


class MinorProgress(BaseModel):
    completed: float
    in_progress: float
    required: float
    percentage: float


class CoreCategoryProgress(BaseModel):
    id: str
    name: str
    required_credits: float
    completed_credits: float
    is_complete: bool
    course_codes: List[str] = Field(default_factory=list)


class DashboardSummary(BaseModel):
    """Headline figures for the Home Page cards."""
    gpa: DashboardGpa
    degree_progress: GlobalDegreeProgress
    active_class_count: int = Field(..., examples=[5])
    pending_assignment_count: int = Field(..., examples=[12])
    pending_todo_count: int = Field(..., examples=[4])
    note_count: int = Field(..., examples=[23])
    application_count: int = Field(..., examples=[7])


class WeightUpdate(BaseModel):
    weight: float = Field(..., description="Category weight in percent. Not validated to sum to 100.")


class ProjectionRequest(BaseModel):
    anticipated: Dict[str, float] = Field(
        default_factory=dict,
        description="Hypothetical percentage scores keyed by pending assignment id."
    )
