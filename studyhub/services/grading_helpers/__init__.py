"""Pure aggregation functions over an owner's academic records."""

from .grade_scale import STANDARD_SCALE, DASHBOARD_SCALE, letter_for, gpa_points_for
from .class_grade import calculate_class_grade
from .gpa_blender import (
    calculate_semester_gpa,
    calculate_cumulative_gpa,
    calculate_total_credits,
    calculate_dashboard_gpa,
)
from .degree_progress import scoped_progress, global_progress, minor_progress, core_category_progress
from .category_weights import weight_key, get_weight, set_weight, class_weight_total
from .recurrence import expand_recurring_assignment

__all__ = [
    "STANDARD_SCALE",
    "DASHBOARD_SCALE",
    "letter_for",
    "gpa_points_for",
    "calculate_class_grade",
    "calculate_semester_gpa",
    "calculate_cumulative_gpa",
    "calculate_total_credits",
    "calculate_dashboard_gpa",
    "scoped_progress",
    "global_progress",
    "minor_progress",
    "core_category_progress",
    "weight_key",
    "get_weight",
    "set_weight",
    "class_weight_total",
    "expand_recurring_assignment",
]
