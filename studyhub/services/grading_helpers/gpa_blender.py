# /studyhub/services/grading_helpers/gpa_blender.py

"""
Semester and cumulative GPA.

The semester GPA only looks at the classes being taken now. The cumulative GPA
blends three sources: finished class records with a stored grade, the live
grades of current classes, and the prior baseline the student declared on
their profile (`current_gpa` over `completed_credit_hours`).
"""

from typing import Mapping, Optional, Sequence

from ...models.analytics_model import DashboardGpa
from ...models.assignment_model import AssignmentRecord
from ...models.class_model import ClassRecord
from ...models.profile_model import UserProfileModel
from .class_grade import calculate_class_grade
from .grade_scale import DASHBOARD_SCALE, STANDARD_SCALE, gpa_points_for


def _credits(record) -> float:
    return float(record.credit_hours or 0)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def stored_gpa_points(course: ClassRecord) -> Optional[float]:
    """GPA points of a finished course: `final_gpa` if stored, else its percentage `grade`."""
    if _is_number(course.final_gpa):
        return float(course.final_gpa)
    if _is_number(course.grade):
        return gpa_points_for(course.grade, STANDARD_SCALE)
    return None


def calculate_semester_gpa(
    classes: Sequence[ClassRecord],
    assignments: Sequence[AssignmentRecord],
    weights: Mapping[str, float],
) -> float:
    """
    Credit-weighted GPA of the active, non-transfer classes that have grade
    data. Returns 0.0 when no class qualifies.
    """
    total_points = 0.0
    total_credits = 0.0
    for cls in classes:
        if not cls.is_active or cls.is_transfer or not cls.credit_hours:
            continue
        grade = calculate_class_grade(cls.id, assignments, weights)
        if grade is None:
            continue
        total_points += grade.gpa_points * _credits(cls)
        total_credits += _credits(cls)
    return total_points / total_credits if total_credits > 0 else 0.0


def calculate_cumulative_gpa(
    completed_courses: Sequence[ClassRecord],
    active_classes: Sequence[ClassRecord],
    assignments: Sequence[AssignmentRecord],
    weights: Mapping[str, float],
    profile: Optional[UserProfileModel],
) -> float:
    """
    Cumulative GPA across completed courses, current classes and the declared
    prior baseline.

    Precedence:
      1. A declared prior GPA with no calculated credits is returned as-is.
      2. A declared prior GPA with prior credits is blended by credit weight.
      3. Otherwise the calculated courses alone, then the prior GPA, then 0.0.
    """
    calculated_points = 0.0
    calculated_credits = 0.0

    completed_ids = set()
    for course in completed_courses:
        completed_ids.add(course.id)
        if course.is_transfer:
            continue
        points = stored_gpa_points(course)
        if points is not None:
            calculated_points += points * _credits(course)
            calculated_credits += _credits(course)

    for cls in active_classes:
        # A class flagged completed but still active is already counted above.
        if cls.is_transfer or cls.id in completed_ids:
            continue
        grade = calculate_class_grade(cls.id, assignments, weights)
        if grade is not None:
            calculated_points += grade.gpa_points * _credits(cls)
            calculated_credits += _credits(cls)

    prior_gpa = profile.current_gpa if profile is not None else None
    prior_credits = float((profile.completed_credit_hours if profile is not None else 0) or 0)

    if prior_gpa is not None and calculated_credits == 0:
        return float(prior_gpa)

    if prior_gpa is not None and prior_credits > 0:
        total_points = prior_gpa * prior_credits + calculated_points
        total_credits = prior_credits + calculated_credits
        return total_points / total_credits if total_credits > 0 else float(prior_gpa)

    if calculated_credits > 0:
        return calculated_points / calculated_credits
    return float(prior_gpa) if prior_gpa is not None else 0.0


def calculate_total_credits(
    completed_courses: Sequence[ClassRecord],
    active_classes: Sequence[ClassRecord],
) -> float:
    return sum(_credits(c) for c in completed_courses) + sum(_credits(c) for c in active_classes)


def calculate_dashboard_gpa(
    classes: Sequence[ClassRecord],
    assignments: Sequence[AssignmentRecord],
    profile: Optional[UserProfileModel],
) -> DashboardGpa:
    """
    The quick GPA shown on the Home Page card.

    Unlike the GPA views it ignores category weights (raw points only), grades
    with DASHBOARD_SCALE, and treats an undeclared prior GPA as 0.
    """
    prior_gpa = float((profile.current_gpa if profile is not None else 0) or 0)
    prior_credits = float((profile.completed_credit_hours if profile is not None else 0) or 0)

    current_points = 0.0
    current_credits = 0.0
    for cls in classes:
        if not cls.credit_hours:
            continue
        graded = [a for a in assignments if a.class_id == cls.id and a.is_graded]
        if not graded:
            continue
        total = sum(a.total_points or 0 for a in graded)
        earned = sum(a.earned_points or 0 for a in graded)
        if total > 0:
            points = gpa_points_for((earned / total) * 100, DASHBOARD_SCALE)
            current_points += points * _credits(cls)
            current_credits += _credits(cls)

    total_points = prior_gpa * prior_credits + current_points
    total_credits = prior_credits + current_credits

    if total_credits == 0:
        return DashboardGpa(gpa=round(prior_gpa, 2) if prior_gpa > 0 else 0.0, has_data=prior_gpa > 0)
    return DashboardGpa(gpa=round(total_points / total_credits, 2), has_data=True)
