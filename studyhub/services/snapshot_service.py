# /studyhub/services/snapshot_service.py

"""
Loads the read-only snapshot the aggregation engine works on.

Each collection is fetched with the same equality filters the dashboard views
subscribe with (owner, and where relevant `is_active` / `is_completed`) and
converted to pydantic records. The engine only ever sees this snapshot.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..models.assignment_model import AssignmentRecord
from ..models.class_model import ClassRecord
from ..models.degree_model import (
    DegreeSettingsModel,
    RequirementRecord,
    RequirementTrack,
    SemesterRecord,
)
from ..models.profile_model import UserProfileModel
from .database_service import DatabaseService


@dataclass
class AcademicSnapshot:
    active_classes: List[ClassRecord] = field(default_factory=list)
    completed_courses: List[ClassRecord] = field(default_factory=list)
    assignments: List[AssignmentRecord] = field(default_factory=list)
    weights: Dict[str, float] = field(default_factory=dict)
    semesters: List[SemesterRecord] = field(default_factory=list)
    core: List[RequirementRecord] = field(default_factory=list)
    major: List[RequirementRecord] = field(default_factory=list)
    minor: List[RequirementRecord] = field(default_factory=list)
    # None until the owner saves one; the engine then uses documented defaults.
    profile: Optional[UserProfileModel] = None
    settings: Optional[DegreeSettingsModel] = None

    @property
    def graded_assignments(self) -> List[AssignmentRecord]:
        return [a for a in self.assignments if a.is_graded]

    @property
    def pending_assignments(self) -> List[AssignmentRecord]:
        return [a for a in self.assignments if not a.is_completed]


def load_profile(db: DatabaseService, user_id: str) -> Optional[UserProfileModel]:
    row = db.get_profile(user_id)
    return UserProfileModel.model_validate(row) if row is not None else None


def load_settings(db: DatabaseService, user_id: str) -> Optional[DegreeSettingsModel]:
    row = db.get_degree_settings(user_id)
    if row is None:
        return None
    data = {"minor_credits_required": row.minor_credits_required}
    if row.core_categories:
        data["core_categories"] = row.core_categories
    return DegreeSettingsModel.model_validate(data)


def load_snapshot(db: DatabaseService, user_id: str) -> AcademicSnapshot:
    return AcademicSnapshot(
        active_classes=[ClassRecord.model_validate(c) for c in db.get_classes(user_id, is_active=True)],
        completed_courses=[ClassRecord.model_validate(c) for c in db.get_classes(user_id, is_completed=True)],
        assignments=[AssignmentRecord.model_validate(a) for a in db.get_assignments(user_id)],
        weights=db.get_category_weights(user_id),
        semesters=[SemesterRecord.model_validate(s) for s in db.get_semesters(user_id)],
        core=[RequirementRecord.model_validate(r) for r in db.get_requirements(user_id, RequirementTrack.CORE.value)],
        major=[RequirementRecord.model_validate(r) for r in db.get_requirements(user_id, RequirementTrack.MAJOR.value)],
        minor=[RequirementRecord.model_validate(r) for r in db.get_requirements(user_id, RequirementTrack.MINOR.value)],
        profile=load_profile(db, user_id),
        settings=load_settings(db, user_id),
    )
