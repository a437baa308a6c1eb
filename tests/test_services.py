# /tests/test_services.py

import logging

import pydantic
import pytest

from studyhub.models.assignment_model import AssignmentCreate, AssignmentUpdate, GradeEntry, QuickGradeCreate
from studyhub.models.class_model import ClassCreate, ClassUpdate
from studyhub.models.degree_model import (
    CoreCategory,
    CourseEntryCreate,
    CourseEntryUpdate,
    CourseStatus,
    DegreeSettingsModel,
    RequirementCreate,
    RequirementTrack,
    RequirementUpdate,
    SemesterCreate,
)
from studyhub.models.profile_model import ProfileUpdate
from studyhub.services import (
    assignment_service,
    class_service,
    dashboard_service,
    degree_service,
    gpa_service,
    grade_service,
    profile_service,
)

USER = "user_v1_demo"

# --- Test Data Fixtures ---

@pytest.fixture
def a_class(db_service):
    """An active 3-credit major class owned by USER."""
    return class_service.create_class(ClassCreate(course_code="COSC 1436", course_name="Programming I"), db_service, USER)


def quick_grade(db_service, class_id, earned, total, category="Exam"):
    return assignment_service.quick_add_grade(
        QuickGradeCreate(class_id=class_id, title=f"{category} {earned}", category=category, total_points=total, earned_points=earned),
        db_service, USER,
    )

# --- Classes ---

def test_create_class_stamps_id_and_owner(db_service, a_class):
    assert a_class.id.startswith("cls_")
    assert a_class.user_id == USER
    assert a_class.category == "Major"
    assert class_service.get_class(a_class.id, "someone_else", db_service) is None


def test_update_class_requires_data(db_service, a_class):
    with pytest.raises(ValueError):
        class_service.update_class(a_class.id, ClassUpdate(), db_service, USER)

    updated = class_service.update_class(a_class.id, ClassUpdate(credit_hours=4), db_service, USER)
    assert updated.credit_hours == 4


def test_class_update_rejects_null_for_required_fields(db_service, a_class):
    for field in ("course_code", "credit_hours", "category", "is_active"):
        with pytest.raises(pydantic.ValidationError):
            ClassUpdate.model_validate({field: None})

    # Nullable fields may still be cleared.
    cleared = class_service.update_class(a_class.id, ClassUpdate.model_validate({"professor": None}), db_service, USER)
    assert cleared.professor is None
    assert class_service.get_class(a_class.id, USER, db_service).credit_hours == 3


def test_toggle_active_archives_and_restores(db_service, a_class):
    archived = class_service.toggle_active(a_class.id, db_service, USER)
    assert archived.is_active is False
    assert class_service.list_classes(USER, db_service, active=True) == []

    restored = class_service.toggle_active(a_class.id, db_service, USER)
    assert restored.is_active is True
    assert class_service.toggle_active("cls_missing", db_service, USER) is None

# --- Assignments ---

def test_recurring_assignment_is_stored_as_independent_records(db_service, a_class):
    """
    GIVEN a weekly recurring form for four weeks
    WHEN it is submitted
    THEN four separate, non-recurring assignments are stored.
    """
    form = AssignmentCreate(
        class_id=a_class.id, title="Lab", category="Lab", due_date="2025-09-01",
        is_recurring=True, recurrence_end_date="2025-09-22",
    )
    created = assignment_service.create_assignments(form, db_service, USER)

    assert len(created) == 4
    assert len({a.id for a in created}) == 4
    stored = assignment_service.list_assignments(USER, db_service, class_id=a_class.id)
    assert sorted(a.title for a in stored) == ["Lab #1", "Lab #2", "Lab #3", "Lab #4"]
    assert not any(a.is_recurring for a in stored)


def test_assignments_need_an_existing_class(db_service):
    with pytest.raises(LookupError):
        assignment_service.create_assignments(AssignmentCreate(class_id="cls_missing", title="HW 1"), db_service, USER)


def test_quick_grade_creates_completed_graded_work(db_service, a_class):
    created = quick_grade(db_service, a_class.id, 18, 20)
    assert created.is_completed is True
    assert created.is_graded is True
    assert created.earned_points == 18


def test_record_grade_marks_assignment_graded(db_service, a_class):
    pending = assignment_service.create_assignments(AssignmentCreate(class_id=a_class.id, title="HW 1"), db_service, USER)[0]
    assert pending.is_graded is False

    graded = assignment_service.record_grade(pending.id, GradeEntry(earned_points=95), db_service, USER)
    assert graded.is_graded is True
    assert graded.is_completed is True
    assert graded.earned_points == 95
    assert assignment_service.record_grade("asg_missing", GradeEntry(earned_points=1), db_service, USER) is None


def test_graded_assignment_is_no_longer_pending(db_service, a_class):
    pending = assignment_service.create_assignments(AssignmentCreate(class_id=a_class.id, title="HW 1"), db_service, USER)[0]
    assert dashboard_service.get_summary_data(USER, db_service).pending_assignment_count == 1

    assignment_service.record_grade(pending.id, GradeEntry(earned_points=40), db_service, USER)
    assert dashboard_service.get_summary_data(USER, db_service).pending_assignment_count == 0
    assert assignment_service.list_assignments(USER, db_service, is_completed=False) == []


def test_assignment_update_rejects_null_for_required_fields():
    with pytest.raises(pydantic.ValidationError):
        AssignmentUpdate.model_validate({"total_points": None})
    with pytest.raises(pydantic.ValidationError):
        AssignmentUpdate.model_validate({"is_completed": None})
    assert AssignmentUpdate.model_validate({"due_date": None}).model_dump(exclude_unset=True) == {"due_date": None}


def test_toggle_complete_flips_the_flag(db_service, a_class):
    pending = assignment_service.create_assignments(AssignmentCreate(class_id=a_class.id, title="HW 1"), db_service, USER)[0]
    assert assignment_service.toggle_complete(pending.id, db_service, USER).is_completed is True
    assert assignment_service.toggle_complete(pending.id, db_service, USER).is_completed is False

# --- Grades & Weights ---

def test_weighted_class_grade_through_the_store(db_service, a_class):
    quick_grade(db_service, a_class.id, 45, 50, "Exam")
    quick_grade(db_service, a_class.id, 8, 10, "HW")
    grade_service.set_weight(a_class.id, "Exam", 70, db_service, USER)
    weights = grade_service.set_weight(a_class.id, "HW", 30, db_service, USER)

    assert weights == {f"{a_class.id}_Exam": 70.0, f"{a_class.id}_HW": 30.0}
    summary = grade_service.get_class_grade(a_class.id, db_service, USER)
    assert summary.current.percentage == pytest.approx(87.0)
    assert summary.current.letter_grade == "B+"


def test_set_weight_for_unknown_class(db_service):
    with pytest.raises(LookupError):
        grade_service.set_weight("cls_missing", "Exam", 50, db_service, USER)
    with pytest.raises(LookupError):
        grade_service.get_class_weights("cls_missing", db_service, USER)


def test_class_weights_are_keyed_by_category(db_service, a_class):
    other = class_service.create_class(ClassCreate(course_code="HIST 1301"), db_service, USER)
    grade_service.set_weight(a_class.id, "Exam", 60, db_service, USER)
    grade_service.set_weight(other.id, "Exam", 100, db_service, USER)

    assert grade_service.get_class_weights(a_class.id, db_service, USER) == {"Exam": 60.0}
    assert grade_service.get_class_weights(other.id, db_service, USER) == {"Exam": 100.0}


def test_overweight_scheme_is_logged(db_service, a_class, caplog):
    grade_service.set_weight(a_class.id, "Exam", 80, db_service, USER)
    grade_service.set_weight(a_class.id, "HW", 40, db_service, USER)
    assert "falls back to the unweighted average" in caplog.text


def test_tracker_lists_only_classes_with_work(db_service, a_class):
    class_service.create_class(ClassCreate(course_code="HIST 1301"), db_service, USER)
    quick_grade(db_service, a_class.id, 98, 100)

    tracker = grade_service.get_tracker(USER, db_service)
    assert [row.class_id for row in tracker] == [a_class.id]
    # The tracker grades without a separate A+ tier.
    assert tracker[0].current.letter_grade == "A"

# --- GPA ---

def test_gpa_summary_blends_profile_baseline(db_service, a_class):
    profile_service.update_profile(ProfileUpdate(current_gpa=3.5, completed_credit_hours=30), db_service, USER)
    quick_grade(db_service, a_class.id, 100, 100)

    summary = gpa_service.get_gpa_summary(USER, db_service)
    assert summary.semester_gpa == pytest.approx(4.0)
    assert summary.cumulative_gpa == pytest.approx((3.5 * 30 + 4.0 * 3) / 33)
    assert summary.total_credits == 3
    assert summary.classes[0].current.letter_grade == "A+"


def test_transcript_export_has_a_row_per_active_class(db_service, a_class):
    class_service.create_class(ClassCreate(course_code="HIST 1301", course_name="US History"), db_service, USER)
    quick_grade(db_service, a_class.id, 90, 100)

    lines = gpa_service.export_transcript_as_csv(USER, db_service).strip().splitlines()
    assert lines[0] == "Course Code,Course Name,Credit Hours,Percentage,Letter Grade,Grade Points"
    assert len(lines) == 3
    assert any(line.startswith("HIST 1301,US History") and "N/A" in line for line in lines[1:])


def test_transcript_export_with_no_classes_is_header_only(db_service):
    csv_string = gpa_service.export_transcript_as_csv(USER, db_service)
    assert csv_string.strip() == "Course Code,Course Name,Credit Hours,Percentage,Letter Grade,Grade Points"


def test_transcript_export_is_logged(db_service, a_class, caplog):
    caplog.set_level(logging.INFO, logger="studyhub.services.gpa_service")
    gpa_service.export_transcript_as_csv(USER, db_service)
    assert "Exported transcript with 1 classes" in caplog.text

# --- Degree Planner ---

def test_semester_plan_course_lifecycle(db_service):
    first = degree_service.create_semester(SemesterCreate(name="Fall 2025"), db_service, USER)
    second = degree_service.create_semester(SemesterCreate(name="Spring 2026"), db_service, USER)
    assert (first.order, second.order) == (1, 2)

    plan = degree_service.add_course_to_semester(
        first.id, CourseEntryCreate(course_code="COSC 1436", credit_hours=4), db_service, USER
    )
    course_id = plan.courses[0].id
    assert plan.courses[0].status == "Not Started"

    plan = degree_service.update_semester_course(
        first.id, course_id, CourseEntryUpdate(status=CourseStatus.COMPLETED), db_service, USER
    )
    assert plan.courses[0].status == "Completed"
    assert degree_service.get_degree_progress(USER, db_service).completed_credits == 4

    plan = degree_service.delete_semester_course(first.id, course_id, db_service, USER)
    assert plan.courses == []
    with pytest.raises(LookupError):
        degree_service.delete_semester_course(first.id, course_id, db_service, USER)


def test_semester_course_update_errors(db_service):
    semester = degree_service.create_semester(SemesterCreate(name="Fall 2025"), db_service, USER)
    with pytest.raises(LookupError):
        degree_service.add_course_to_semester("sem_missing", CourseEntryCreate(course_code="X"), db_service, USER)
    with pytest.raises(LookupError):
        degree_service.update_semester_course(semester.id, "crs_missing", CourseEntryUpdate(status=CourseStatus.COMPLETED), db_service, USER)
    with pytest.raises(ValueError):
        degree_service.update_semester_course(semester.id, "crs_missing", CourseEntryUpdate(), db_service, USER)


def test_null_course_fields_never_reach_the_plan(db_service):
    """
    GIVEN a planned course
    WHEN an update tries to null its credit hours or code
    THEN the update is rejected before anything is written and progress still loads.
    """
    semester = degree_service.create_semester(SemesterCreate(name="Fall 2025"), db_service, USER)
    plan = degree_service.add_course_to_semester(
        semester.id, CourseEntryCreate(course_code="COSC 1436", status=CourseStatus.COMPLETED), db_service, USER
    )
    course_id = plan.courses[0].id

    with pytest.raises(pydantic.ValidationError):
        CourseEntryUpdate.model_validate({"credit_hours": None})
    with pytest.raises(pydantic.ValidationError):
        CourseEntryUpdate.model_validate({"course_code": None})
    # An unvalidated update is still checked when the course is rebuilt.
    with pytest.raises(ValueError):
        degree_service.update_semester_course(
            semester.id, course_id, CourseEntryUpdate.model_construct(credit_hours=None), db_service, USER
        )

    assert degree_service.list_semesters(USER, db_service)[0].courses[0].credit_hours == 3
    assert degree_service.get_degree_progress(USER, db_service).completed_credits == 3
    assert dashboard_service.get_summary_data(USER, db_service).degree_progress.total_completed == 3


def test_requirement_update_rejects_null_for_required_fields(db_service):
    created = degree_service.create_requirement(
        RequirementTrack.CORE, RequirementCreate(course_code="ENGL 1301"), db_service, USER
    )
    for field in ("course_code", "credit_hours"):
        with pytest.raises(pydantic.ValidationError):
            RequirementUpdate.model_validate({field: None})

    cleared = degree_service.update_requirement(
        RequirementTrack.CORE, created.id, RequirementUpdate.model_validate({"course_name": None}), db_service, USER
    )
    assert cleared.course_name is None
    assert cleared.credit_hours == 3


def test_degree_progress_counts_core_and_plan_separately(db_service):
    degree_service.create_requirement(
        RequirementTrack.CORE, RequirementCreate(course_code="ENGL 1301", status=CourseStatus.COMPLETED), db_service, USER
    )
    semester = degree_service.create_semester(SemesterCreate(name="Fall 2025"), db_service, USER)
    degree_service.add_course_to_semester(
        semester.id, CourseEntryCreate(course_code="ENGL 1301", status=CourseStatus.COMPLETED), db_service, USER
    )

    assert degree_service.get_degree_progress(USER, db_service).completed_credits == 6
    assert dashboard_service.get_summary_data(USER, db_service).degree_progress.total_completed == 3


def test_requirement_crud_by_track(db_service):
    created = degree_service.create_requirement(
        RequirementTrack.MAJOR, RequirementCreate(course_code="COSC 1437"), db_service, USER
    )
    assert created.track is RequirementTrack.MAJOR

    updated = degree_service.update_requirement(
        RequirementTrack.MAJOR, created.id, RequirementUpdate(is_completed=True), db_service, USER
    )
    assert updated.is_completed is True
    assert degree_service.list_requirements(RequirementTrack.CORE, USER, db_service) == []
    assert degree_service.delete_requirement(RequirementTrack.MAJOR, created.id, db_service, USER) is True


def test_settings_and_minor_progress(db_service):
    assert degree_service.get_settings(USER, db_service).minor_credits_required == 18

    degree_service.update_settings(
        DegreeSettingsModel(minor_credits_required=24, core_categories=[CoreCategory(id="010", name="Communication", credits=6)]),
        db_service, USER,
    )
    degree_service.create_requirement(
        RequirementTrack.MINOR, RequirementCreate(course_code="SPAN 1411", is_completed=True), db_service, USER
    )

    settings = degree_service.get_settings(USER, db_service)
    assert settings.minor_credits_required == 24
    assert [c.name for c in settings.core_categories] == ["Communication"]
    assert degree_service.get_minor_progress(USER, db_service).percentage == pytest.approx(12.5)
    assert len(degree_service.get_core_category_progress(USER, db_service)) == 1

# --- Profile & Dashboard ---

def test_profile_defaults_and_update(db_service):
    profile = profile_service.get_profile(USER, db_service)
    assert profile.degree_credit_requirement == 120
    assert profile.current_gpa is None

    with pytest.raises(ValueError):
        profile_service.update_profile(ProfileUpdate(), db_service, USER)

    updated = profile_service.update_profile(ProfileUpdate(current_gpa=3.2), db_service, USER)
    assert updated.current_gpa == 3.2
    assert updated.degree_credit_requirement == 120


def test_dashboard_summary(db_service, a_class):
    """
    GIVEN a declared 3.5 GPA over 30 credits, a class at 100% and one pending assignment
    WHEN the dashboard summary is requested
    THEN it reports the rounded blended GPA, overall progress and workload counts.
    """
    profile_service.update_profile(ProfileUpdate(current_gpa=3.5, completed_credit_hours=30), db_service, USER)
    quick_grade(db_service, a_class.id, 100, 100)
    assignment_service.create_assignments(AssignmentCreate(class_id=a_class.id, title="HW 2"), db_service, USER)

    summary = dashboard_service.get_summary_data(USER, db_service)
    assert summary.gpa.gpa == 3.55
    assert summary.gpa.has_data is True
    assert summary.degree_progress.total_completed == 30
    assert summary.degree_progress.percentage == pytest.approx(25.0)
    assert summary.active_class_count == 1
    assert summary.pending_assignment_count == 1


def test_dashboard_failure_is_logged_and_reraised(db_service, mocker, caplog):
    mocker.patch.object(dashboard_service, "load_snapshot", side_effect=RuntimeError("store offline"))

    with pytest.raises(RuntimeError):
        dashboard_service.get_summary_data(USER, db_service)
    assert "Failed to calculate dashboard summary" in caplog.text
