# /studyhub/services/grade_service.py

"""
Grade tracker logic: category weights and per-class current/projected grades.

The grade tracker shows letters from DASHBOARD_SCALE (no separate A+ tier);
the GPA views in `gpa_service` use STANDARD_SCALE.
"""

import logging
from typing import Dict, List, Mapping, Optional

from ..models.analytics_model import ClassGradeSummary
from ..models.class_model import ClassRecord
from .database_service import DatabaseService
from .grading_helpers import category_weights
from .grading_helpers.class_grade import MAX_WEIGHT_TOTAL, calculate_class_grade
from .grading_helpers.grade_scale import DASHBOARD_SCALE
from .snapshot_service import AcademicSnapshot, load_snapshot

logger = logging.getLogger(__name__)


# --- Category Weights ---

def get_weights(user_id: str, db: DatabaseService) -> Dict[str, float]:
    return db.get_category_weights(user_id)


def get_class_weights(class_id: str, db: DatabaseService, user_id: str) -> Dict[str, float]:
    """The category weights of one class, keyed by bare category name."""
    if db.get_class_by_id(class_id, user_id) is None:
        raise LookupError(f"Class with ID {class_id} not found")
    return category_weights.weights_for_class(db.get_category_weights(user_id), class_id)


def set_weight(class_id: str, category: str, weight: float, db: DatabaseService, user_id: str) -> Dict[str, float]:
    """
    Sets one class/category weight and persists the whole map. The total of a
    class's weights is not validated here.
    """
    if db.get_class_by_id(class_id, user_id) is None:
        raise LookupError(f"Class with ID {class_id} not found")
    current = db.get_category_weights(user_id)
    updated = category_weights.set_weight(current, class_id, category, weight)
    total = category_weights.class_weight_total(updated, class_id, category_weights.weights_for_class(updated, class_id))
    if total > MAX_WEIGHT_TOTAL:
        logger.warning("Weights for class %s total %s; its grade falls back to the unweighted average", class_id, total)
    return db.save_category_weights(user_id, updated)


# --- Grade Summaries ---

def summarize_class(
    cls: ClassRecord,
    snapshot: AcademicSnapshot,
    anticipated: Optional[Mapping[str, float]] = None,
) -> ClassGradeSummary:
    current = calculate_class_grade(cls.id, snapshot.assignments, snapshot.weights, scale=DASHBOARD_SCALE)
    projected = calculate_class_grade(
        cls.id, snapshot.assignments, snapshot.weights, anticipated=anticipated or {}, scale=DASHBOARD_SCALE
    )
    return ClassGradeSummary(
        class_id=cls.id,
        course_code=cls.course_code,
        course_name=cls.course_name,
        credit_hours=cls.credit_hours,
        current=current,
        projected=projected,
    )


def get_class_grade(
    class_id: str,
    db: DatabaseService,
    user_id: str,
    anticipated: Optional[Mapping[str, float]] = None,
) -> Optional[ClassGradeSummary]:
    cls = db.get_class_by_id(class_id, user_id)
    if cls is None:
        return None
    snapshot = load_snapshot(db, user_id)
    return summarize_class(ClassRecord.model_validate(cls), snapshot, anticipated)


def get_tracker(user_id: str, db: DatabaseService) -> List[ClassGradeSummary]:
    """Grade summaries for every active class that has at least one assignment."""
    snapshot = load_snapshot(db, user_id)
    with_work = {a.class_id for a in snapshot.assignments}
    return [summarize_class(cls, snapshot) for cls in snapshot.active_classes if cls.id in with_work]
