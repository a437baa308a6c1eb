# /studyhub/services/gpa_service.py

"""
GPA views: semester GPA, cumulative GPA and the transcript export.
"""

import logging

import pandas as pd

from ..models.analytics_model import ClassGradeSummary, GpaSummary
from .database_service import DatabaseService
from .grading_helpers.class_grade import calculate_class_grade
from .grading_helpers.gpa_blender import (
    calculate_cumulative_gpa,
    calculate_semester_gpa,
    calculate_total_credits,
)
from .snapshot_service import AcademicSnapshot, load_snapshot

logger = logging.getLogger(__name__)

TRANSCRIPT_COLUMNS = ['Course Code', 'Course Name', 'Credit Hours', 'Percentage', 'Letter Grade', 'Grade Points']


def summarize_gpa(snapshot: AcademicSnapshot) -> GpaSummary:
    classes = [
        ClassGradeSummary(
            class_id=cls.id,
            course_code=cls.course_code,
            course_name=cls.course_name,
            credit_hours=cls.credit_hours,
            current=calculate_class_grade(cls.id, snapshot.assignments, snapshot.weights),
        )
        for cls in snapshot.active_classes
    ]
    return GpaSummary(
        semester_gpa=calculate_semester_gpa(snapshot.active_classes, snapshot.assignments, snapshot.weights),
        cumulative_gpa=calculate_cumulative_gpa(
            snapshot.completed_courses,
            snapshot.active_classes,
            snapshot.assignments,
            snapshot.weights,
            snapshot.profile,
        ),
        total_credits=calculate_total_credits(snapshot.completed_courses, snapshot.active_classes),
        classes=classes,
    )


def get_gpa_summary(user_id: str, db: DatabaseService) -> GpaSummary:
    return summarize_gpa(load_snapshot(db, user_id))


def export_transcript_as_csv(user_id: str, db: DatabaseService) -> str:
    """
    Builds a CSV of the active classes with their computed grades. Classes
    without grade data are listed with empty grade columns.
    """
    summary = get_gpa_summary(user_id, db)
    export_data = [
        {
            'Course Code': c.course_code,
            'Course Name': c.course_name,
            'Credit Hours': c.credit_hours,
            'Percentage': round(c.current.percentage, 2) if c.current else None,
            'Letter Grade': c.current.letter_grade if c.current else "N/A",
            'Grade Points': c.current.gpa_points if c.current else None,
        }
        for c in summary.classes
    ]
    df = pd.DataFrame(export_data, columns=TRANSCRIPT_COLUMNS) if export_data else pd.DataFrame(columns=TRANSCRIPT_COLUMNS)
    logger.info("Exported transcript with %d classes for user %s", len(df), user_id)
    return df.to_csv(index=False)
