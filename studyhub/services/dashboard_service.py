# /studyhub/services/dashboard_service.py

import logging

# Import the Pydantic model to ensure our output matches the data contract.
from ..models.analytics_model import DashboardSummary
from .database_service import DatabaseService
from .grading_helpers.degree_progress import global_progress
from .grading_helpers.gpa_blender import calculate_dashboard_gpa
from .snapshot_service import load_snapshot

logger = logging.getLogger(__name__)


def get_summary_data(user_id: str, db: DatabaseService) -> DashboardSummary:
    """
    Calculates the Home Page summary: the quick GPA, the dashboard variant of
    degree progress, and the workload counts: active classes, pending
    assignments, open to-do items, notes and applications.

    The degree figure here uses `global_progress`, which is not the same formula
    as the degree planner's `scoped_progress`; the two can disagree.
    """
    try:
        s = load_snapshot(db, user_id)
        return DashboardSummary(
            gpa=calculate_dashboard_gpa(s.active_classes, s.graded_assignments, s.profile),
            degree_progress=global_progress(s.core, s.major, s.minor, s.semesters, s.profile),
            active_class_count=len(s.active_classes),
            pending_assignment_count=len(s.pending_assignments),
            pending_todo_count=len(db.get_todos(user_id, is_completed=False)),
            note_count=len(db.get_notes(user_id)),
            application_count=len(db.get_applications(user_id)),
        )
    except Exception:
        logger.exception("Failed to calculate dashboard summary for user %s", user_id)
        # Re-raise so the router layer turns it into a 500.
        raise
