# /studyhub/services/grading_helpers/degree_progress.py

"""
Degree credit progress across every place a course can be recorded.

A course can show up in the manual core/major/minor lists, in a planned
semester, and as a current class. None of these share a key, so credits are
de-duplicated on the course code.

Two variants exist and they deliberately stay separate because they disagree:

- `scoped_progress` (degree planner) de-duplicates per source, keying on
  `"{course_code}-{source}"`, so the same code in two different sources is
  counted twice. Profile `completed_credit_hours` is used only when no course
  is marked transferred.
- `global_progress` (dashboard card) de-duplicates on the bare course code
  across core, major, minor and semester entries, and always adds the
  profile's `completed_credit_hours`.

Course codes are compared as exact, case-sensitive strings.
"""

from typing import Callable, Dict, Iterable, List, Optional, Sequence

from ...config import DEFAULT_DEGREE_CREDIT_REQUIREMENT, DEFAULT_MINOR_CREDITS_REQUIRED
from ...models.analytics_model import (
    CoreCategoryProgress,
    DegreeProgress,
    GlobalDegreeProgress,
    MinorProgress,
)
from ...models.class_model import ClassRecord, CourseCategory
from ...models.degree_model import (
    CourseStatus,
    DegreeSettingsModel,
    RequirementRecord,
    SemesterRecord,
)
from ...models.profile_model import UserProfileModel
from .record_status import (
    normalize_core_requirement,
    normalize_current_class,
    normalize_plan_course,
    normalize_track_requirement,
    dashboard_counts_plan_course,
    dashboard_counts_requirement,
)

DONE_STATES = (CourseStatus.COMPLETED, CourseStatus.TRANSFERRED)
PLANNED_STATES = (CourseStatus.NOT_STARTED, CourseStatus.IN_PROGRESS)


# --- Small helpers ---

def _credits(record) -> float:
    try:
        return float(record.credit_hours or 0)
    except (TypeError, ValueError):
        return 0.0


def _code(record) -> str:
    return record.course_code or ""


def _add_once(bucket: Dict[str, float], key: str, credits: float) -> None:
    if key not in bucket:
        bucket[key] = credits


def _clamped_percentage(done: float, required: float) -> float:
    if required <= 0:
        return 0.0
    return min(done / required * 100, 100.0)


def required_credits(profile: Optional[UserProfileModel]) -> float:
    """The degree requirement, falling back to 120 when missing or zero."""
    value = profile.degree_credit_requirement if profile is not None else None
    return float(value or DEFAULT_DEGREE_CREDIT_REQUIREMENT)


def profile_credit_hours(profile: Optional[UserProfileModel]) -> float:
    if profile is None:
        return 0.0
    return float(profile.completed_credit_hours or 0)


def plan_courses(semesters: Sequence[SemesterRecord]) -> Iterable:
    for semester in semesters:
        for course in semester.courses or []:
            yield course


# --- Degree planner variant ---

def scoped_progress(
    core: Sequence[RequirementRecord],
    major: Sequence[RequirementRecord],
    minor: Sequence[RequirementRecord],
    semesters: Sequence[SemesterRecord],
    current_classes: Sequence[ClassRecord],
    profile: Optional[UserProfileModel],
) -> DegreeProgress:
    """
    Degree progress as the degree planner shows it.

    Each source keeps its own keys, so a course listed both as a manual core
    entry and in a semester plan counts once per source. Within a source the
    first entry for a code wins.
    """
    total_required = required_credits(profile)
    completed: Dict[str, float] = {}
    transferred: Dict[str, float] = {}

    sources: List[tuple] = [
        ("core", core, normalize_core_requirement),
        ("major", major, normalize_track_requirement),
        ("minor", minor, normalize_track_requirement),
        ("semester", list(plan_courses(semesters)), normalize_plan_course),
        ("current", current_classes, normalize_current_class),
    ]
    for tag, records, normalize in sources:
        for record in records:
            key = f"{_code(record)}-{tag}"
            state = normalize(record)
            if state is CourseStatus.TRANSFERRED:
                _add_once(transferred, key, _credits(record))
            elif state is CourseStatus.COMPLETED:
                _add_once(completed, key, _credits(record))

    completed_from_courses = sum(completed.values())
    transferred_from_courses = sum(transferred.values())
    # The two are alternatives, never summed.
    transferred_credits = transferred_from_courses if transferred_from_courses > 0 else profile_credit_hours(profile)

    in_progress: Dict[str, float] = {}
    for cls in current_classes:
        _add_once(in_progress, f"{_code(cls)}-current", _credits(cls))
    for course in plan_courses(semesters):
        if normalize_plan_course(course) in PLANNED_STATES:
            _add_once(in_progress, f"{_code(course)}-semester-progress", _credits(course))
    in_progress_credits = sum(in_progress.values())

    combined_completed = transferred_credits + completed_from_courses
    return DegreeProgress(
        completed_credits=completed_from_courses,
        transferred_credits=transferred_credits,
        combined_completed=combined_completed,
        in_progress_credits=in_progress_credits,
        remaining=max(0.0, total_required - combined_completed - in_progress_credits),
        total_required=total_required,
        percentage=_clamped_percentage(combined_completed, total_required),
    )


# --- Dashboard variant ---

def global_progress(
    core: Sequence[RequirementRecord],
    major: Sequence[RequirementRecord],
    minor: Sequence[RequirementRecord],
    semesters: Sequence[SemesterRecord],
    profile: Optional[UserProfileModel],
) -> GlobalDegreeProgress:
    """
    Degree progress as the dashboard card shows it.

    Finished courses are keyed by bare course code across all manual lists and
    semester plans; a later entry for a code replaces the earlier one. The
    profile's credit hours are always added on top.

    "Finished" follows the dashboard's own reading: a manual entry counts when
    `is_completed` is true or its status is Completed or Transferred, a plan
    course only on its status. `is_transfer` alone never counts here.
    """
    total_required = required_credits(profile)
    finished: Dict[str, float] = {}

    sources: List[tuple] = [
        (core, dashboard_counts_requirement),
        (major, dashboard_counts_requirement),
        (minor, dashboard_counts_requirement),
        (list(plan_courses(semesters)), dashboard_counts_plan_course),
    ]
    for records, is_finished in sources:
        for record in records:
            if is_finished(record):
                finished[_code(record)] = _credits(record)

    total_completed = sum(finished.values()) + profile_credit_hours(profile)
    return GlobalDegreeProgress(
        total_completed=total_completed,
        total_required=total_required,
        percentage=_clamped_percentage(total_completed, total_required),
    )


# --- Minor and core-area progress ---

def minor_progress(
    minor: Sequence[RequirementRecord],
    current_classes: Sequence[ClassRecord],
    settings: Optional[DegreeSettingsModel],
) -> MinorProgress:
    required = float((settings.minor_credits_required if settings is not None else None) or DEFAULT_MINOR_CREDITS_REQUIRED)
    # Minor entries count on their completion flag alone.
    completed = sum(_credits(r) for r in minor if r.is_completed)
    in_progress = sum(_credits(c) for c in current_classes if c.category == CourseCategory.MINOR.value)
    return MinorProgress(
        completed=completed,
        in_progress=in_progress,
        required=required,
        percentage=_clamped_percentage(completed, required),
    )


def _matching(records: Iterable, predicate: Callable) -> List:
    return [r for r in records if predicate(r)]


def core_category_progress(
    core: Sequence[RequirementRecord],
    semesters: Sequence[SemesterRecord],
    current_classes: Sequence[ClassRecord],
    settings: Optional[DegreeSettingsModel],
) -> List[CoreCategoryProgress]:
    """
    Credits gathered per core area. Current classes tagged for an area count
    in full; manual entries and plan courses count once finished.
    """
    settings = settings or DegreeSettingsModel()
    courses = list(plan_courses(semesters))
    report = []
    for area in settings.core_categories:
        from_classes = _matching(
            current_classes,
            lambda c: c.category == CourseCategory.CORE.value and c.core_category == area.name,
        )
        from_manual = _matching(
            core,
            lambda r: r.category == area.name and normalize_core_requirement(r) in DONE_STATES,
        )
        from_plan = _matching(
            courses,
            lambda c: c.category == CourseCategory.CORE.value
            and c.core_category == area.name
            and normalize_plan_course(c) in DONE_STATES,
        )
        counted = from_classes + from_manual + from_plan
        completed = sum(_credits(c) for c in counted)
        report.append(CoreCategoryProgress(
            id=area.id,
            name=area.name,
            required_credits=area.credits,
            completed_credits=completed,
            is_complete=completed >= area.credits,
            course_codes=[_code(c) for c in counted],
        ))
    return report
