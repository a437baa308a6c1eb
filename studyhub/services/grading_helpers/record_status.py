# /studyhub/services/grading_helpers/record_status.py

"""
Boundary adapters that turn each source collection's completion convention
into one `CourseStatus`.

The sources disagree on how "done" is recorded:
- core requirements and semester-plan courses use the `status` string,
- major and minor requirements use the `is_completed`/`is_transfer` flags,
- current classes may carry either.

Every aggregation in `degree_progress` works on the normalized status only.
"""

from typing import Any, Optional

from ...models.degree_model import CourseStatus

_STATUS_BY_VALUE = {status.value: status for status in CourseStatus}


def parse_status(raw: Optional[str]) -> CourseStatus:
    """Maps a raw status string to `CourseStatus`; missing or unknown values are NOT_STARTED."""
    if isinstance(raw, CourseStatus):
        return raw
    return _STATUS_BY_VALUE.get(raw or "", CourseStatus.NOT_STARTED)


def _is_status(record: Any, status: CourseStatus) -> bool:
    return parse_status(getattr(record, "status", None)) is status


def normalize_core_requirement(record: Any) -> CourseStatus:
    if _is_status(record, CourseStatus.TRANSFERRED) or getattr(record, "is_transfer", None):
        return CourseStatus.TRANSFERRED
    if _is_status(record, CourseStatus.COMPLETED):
        return CourseStatus.COMPLETED
    if _is_status(record, CourseStatus.IN_PROGRESS):
        return CourseStatus.IN_PROGRESS
    return CourseStatus.NOT_STARTED


def normalize_track_requirement(record: Any) -> CourseStatus:
    """Major and minor entries: the boolean flag pair decides."""
    if getattr(record, "is_transfer", None) or _is_status(record, CourseStatus.TRANSFERRED):
        return CourseStatus.TRANSFERRED
    if getattr(record, "is_completed", None):
        return CourseStatus.COMPLETED
    if _is_status(record, CourseStatus.IN_PROGRESS):
        return CourseStatus.IN_PROGRESS
    return CourseStatus.NOT_STARTED


def normalize_plan_course(course: Any) -> CourseStatus:
    if _is_status(course, CourseStatus.TRANSFERRED) or getattr(course, "is_transfer", None):
        return CourseStatus.TRANSFERRED
    return parse_status(getattr(course, "status", None))


def normalize_current_class(record: Any) -> CourseStatus:
    # An active class that is neither transferred nor completed is in progress.
    if getattr(record, "is_transfer", None) or _is_status(record, CourseStatus.TRANSFERRED):
        return CourseStatus.TRANSFERRED
    if getattr(record, "is_completed", None) or _is_status(record, CourseStatus.COMPLETED):
        return CourseStatus.COMPLETED
    return CourseStatus.IN_PROGRESS


# --- Dashboard card convention ---
# The dashboard reads "finished" more loosely for the manual lists and more
# strictly for plan courses, and ignores `is_transfer` everywhere.

def dashboard_counts_requirement(record: Any) -> bool:
    """Core, major and minor entries: the completion flag or a finished status."""
    if getattr(record, "is_completed", None) is True:
        return True
    return _is_status(record, CourseStatus.COMPLETED) or _is_status(record, CourseStatus.TRANSFERRED)


def dashboard_counts_plan_course(course: Any) -> bool:
    return _is_status(course, CourseStatus.COMPLETED) or _is_status(course, CourseStatus.TRANSFERRED)
