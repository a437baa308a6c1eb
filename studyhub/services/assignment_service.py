# /studyhub/services/assignment_service.py

"""
Business logic for assignments: creation (including recurring series),
completion, grading and removal. All operations are scoped to the owner.
"""

import logging
import uuid
from typing import List, Optional

from ..models import assignment_model
from .database_service import DatabaseService
from .grading_helpers.recurrence import expand_recurring_assignment

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return f"asg_{uuid.uuid4().hex[:12]}"


def _to_record(db_assignment) -> Optional[assignment_model.AssignmentRecord]:
    if db_assignment is None:
        return None
    return assignment_model.AssignmentRecord.model_validate(db_assignment)


def _require_class(class_id: str, db: DatabaseService, user_id: str) -> None:
    if db.get_class_by_id(class_id, user_id) is None:
        raise LookupError(f"Class with ID {class_id} not found")


def list_assignments(
    user_id: str,
    db: DatabaseService,
    class_id: Optional[str] = None,
    is_completed: Optional[bool] = None,
    is_graded: Optional[bool] = None,
) -> List[assignment_model.AssignmentRecord]:
    rows = db.get_assignments(user_id, class_id=class_id, is_completed=is_completed, is_graded=is_graded)
    return [_to_record(a) for a in rows]


def create_assignments(
    assignment_data: assignment_model.AssignmentCreate,
    db: DatabaseService,
    user_id: str,
) -> List[assignment_model.AssignmentRecord]:
    """
    Creates the assignment described by the submitted form. A recurring form
    becomes one independent assignment per week; the list of everything
    created is returned.
    """
    _require_class(assignment_data.class_id, db, user_id)
    records = [
        {"id": _new_id(), "user_id": user_id, **record}
        for record in expand_recurring_assignment(assignment_data)
    ]
    created = db.add_assignments(records)
    if assignment_data.is_recurring:
        logger.info("Expanded recurring assignment '%s' into %d assignments", assignment_data.title, len(created))
    return [_to_record(a) for a in created]


def quick_add_grade(
    grade_data: assignment_model.QuickGradeCreate,
    db: DatabaseService,
    user_id: str,
) -> assignment_model.AssignmentRecord:
    """Records a grade for work that was never tracked as an assignment."""
    _require_class(grade_data.class_id, db, user_id)
    record = {
        "id": _new_id(),
        "user_id": user_id,
        **grade_data.model_dump(),
        "is_completed": True,
        "is_graded": True,
    }
    return _to_record(db.add_assignments([record])[0])


def update_assignment(
    assignment_id: str,
    assignment_update: assignment_model.AssignmentUpdate,
    db: DatabaseService,
    user_id: str,
) -> Optional[assignment_model.AssignmentRecord]:
    update_data = assignment_update.model_dump(exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    return _to_record(db.update_assignment(assignment_id, user_id, update_data))


def toggle_complete(assignment_id: str, db: DatabaseService, user_id: str) -> Optional[assignment_model.AssignmentRecord]:
    existing = db.get_assignment_by_id(assignment_id, user_id)
    if existing is None:
        return None
    return _to_record(db.update_assignment(assignment_id, user_id, {"is_completed": not existing.is_completed}))


def record_grade(
    assignment_id: str,
    grade: assignment_model.GradeEntry,
    db: DatabaseService,
    user_id: str,
) -> Optional[assignment_model.AssignmentRecord]:
    """Sets the earned points and marks the assignment graded. Graded work is
    always completed work, so the completion flag is set too."""
    update = {"earned_points": grade.earned_points, "is_completed": True, "is_graded": True}
    return _to_record(db.update_assignment(assignment_id, user_id, update))


def delete_assignment(assignment_id: str, db: DatabaseService, user_id: str) -> bool:
    return db.delete_assignment(assignment_id, user_id)
