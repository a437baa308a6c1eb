# /studyhub/services/degree_service.py

"""
Degree planner logic: planned semesters and their embedded courses, the
manual core/major/minor requirement lists, degree settings, and the progress
views computed from all of them.
"""

import logging
import uuid
from typing import List, Optional

from ..models import degree_model
from ..models.analytics_model import CoreCategoryProgress, DegreeProgress, MinorProgress
from .database_service import DatabaseService
from .grading_helpers.degree_progress import core_category_progress, minor_progress, scoped_progress
from .snapshot_service import load_settings, load_snapshot

logger = logging.getLogger(__name__)


# --- Progress Views ---

def get_degree_progress(user_id: str, db: DatabaseService) -> DegreeProgress:
    s = load_snapshot(db, user_id)
    return scoped_progress(s.core, s.major, s.minor, s.semesters, s.active_classes, s.profile)


def get_minor_progress(user_id: str, db: DatabaseService) -> MinorProgress:
    s = load_snapshot(db, user_id)
    return minor_progress(s.minor, s.active_classes, s.settings)


def get_core_category_progress(user_id: str, db: DatabaseService) -> List[CoreCategoryProgress]:
    s = load_snapshot(db, user_id)
    return core_category_progress(s.core, s.semesters, s.active_classes, s.settings)


# --- Semesters ---

def _to_semester(db_semester) -> Optional[degree_model.SemesterRecord]:
    return degree_model.SemesterRecord.model_validate(db_semester) if db_semester is not None else None


def list_semesters(user_id: str, db: DatabaseService) -> List[degree_model.SemesterRecord]:
    return [_to_semester(s) for s in db.get_semesters(user_id)]


def create_semester(semester_data: degree_model.SemesterCreate, db: DatabaseService, user_id: str) -> degree_model.SemesterRecord:
    """New semesters go to the end of the plan with an empty course list."""
    existing = db.get_semesters(user_id)
    record = {
        "id": f"sem_{uuid.uuid4().hex[:12]}",
        "user_id": user_id,
        "name": semester_data.name,
        "order": len(existing) + 1,
        "courses": [],
    }
    return _to_semester(db.add_semester(record))


def delete_semester(semester_id: str, db: DatabaseService, user_id: str) -> bool:
    return db.delete_semester(semester_id, user_id)


def _load_semester(semester_id: str, db: DatabaseService, user_id: str) -> degree_model.SemesterRecord:
    semester = _to_semester(db.get_semester_by_id(semester_id, user_id))
    if semester is None:
        raise LookupError(f"Semester with ID {semester_id} not found")
    return semester


def _save_courses(semester_id: str, courses: List[degree_model.CourseEntry], db: DatabaseService, user_id: str) -> degree_model.SemesterRecord:
    payload = [c.model_dump(mode="json") for c in courses]
    return _to_semester(db.replace_semester_courses(semester_id, user_id, payload))


def add_course_to_semester(
    semester_id: str,
    course_data: degree_model.CourseEntryCreate,
    db: DatabaseService,
    user_id: str,
) -> degree_model.SemesterRecord:
    """Adds a course to one semester only; requirement lists are not touched."""
    semester = _load_semester(semester_id, db, user_id)
    new_course = degree_model.CourseEntry(**course_data.model_dump(mode="json"))
    return _save_courses(semester_id, semester.courses + [new_course], db, user_id)


def update_semester_course(
    semester_id: str,
    course_id: str,
    course_update: degree_model.CourseEntryUpdate,
    db: DatabaseService,
    user_id: str,
) -> degree_model.SemesterRecord:
    semester = _load_semester(semester_id, db, user_id)
    changes = course_update.model_dump(mode="json", exclude_unset=True)
    if not changes:
        raise ValueError("No update data provided.")
    if not any(c.id == course_id for c in semester.courses):
        raise LookupError(f"Course with ID {course_id} not found in semester {semester_id}")
    # Rebuilt through validation so a bad value never reaches the JSON column.
    courses = [
        degree_model.CourseEntry.model_validate({**c.model_dump(), **changes}) if c.id == course_id else c
        for c in semester.courses
    ]
    return _save_courses(semester_id, courses, db, user_id)


def delete_semester_course(semester_id: str, course_id: str, db: DatabaseService, user_id: str) -> degree_model.SemesterRecord:
    semester = _load_semester(semester_id, db, user_id)
    courses = [c for c in semester.courses if c.id != course_id]
    if len(courses) == len(semester.courses):
        raise LookupError(f"Course with ID {course_id} not found in semester {semester_id}")
    return _save_courses(semester_id, courses, db, user_id)


# --- Manual Requirements ---

def _to_requirement(row) -> Optional[degree_model.RequirementRecord]:
    return degree_model.RequirementRecord.model_validate(row) if row is not None else None


def list_requirements(track: degree_model.RequirementTrack, user_id: str, db: DatabaseService) -> List[degree_model.RequirementRecord]:
    return [_to_requirement(r) for r in db.get_requirements(user_id, track.value)]


def create_requirement(
    track: degree_model.RequirementTrack,
    requirement_data: degree_model.RequirementCreate,
    db: DatabaseService,
    user_id: str,
) -> degree_model.RequirementRecord:
    record = {
        "id": f"req_{uuid.uuid4().hex[:12]}",
        "user_id": user_id,
        "track": track.value,
        **requirement_data.model_dump(mode="json"),
    }
    return _to_requirement(db.add_requirement(record))


def update_requirement(
    track: degree_model.RequirementTrack,
    requirement_id: str,
    requirement_update: degree_model.RequirementUpdate,
    db: DatabaseService,
    user_id: str,
) -> Optional[degree_model.RequirementRecord]:
    update_data = requirement_update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    return _to_requirement(db.update_requirement(requirement_id, user_id, track.value, update_data))


def delete_requirement(track: degree_model.RequirementTrack, requirement_id: str, db: DatabaseService, user_id: str) -> bool:
    return db.delete_requirement(requirement_id, user_id, track.value)


# --- Settings ---

def get_settings(user_id: str, db: DatabaseService) -> degree_model.DegreeSettingsModel:
    return load_settings(db, user_id) or degree_model.DegreeSettingsModel()


def update_settings(settings: degree_model.DegreeSettingsModel, db: DatabaseService, user_id: str) -> degree_model.DegreeSettingsModel:
    db.upsert_degree_settings(user_id, settings.model_dump(mode="json"))
    logger.info("Saved degree settings for user %s", user_id)
    return get_settings(user_id, db)
