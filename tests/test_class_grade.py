# /tests/test_class_grade.py

import pytest

from studyhub.models.analytics_model import GradeMode
from studyhub.models.assignment_model import AssignmentRecord
from studyhub.services.grading_helpers.class_grade import calculate_class_grade
from studyhub.services.grading_helpers.grade_scale import DASHBOARD_SCALE

# --- Test Data Helpers ---

def graded(assignment_id, earned, total, category=None, class_id="cls_1"):
    return AssignmentRecord(
        id=assignment_id, class_id=class_id, category=category,
        total_points=total, earned_points=earned, is_completed=True, is_graded=True,
    )


def pending(assignment_id, total, category=None, class_id="cls_1", is_completed=False):
    return AssignmentRecord(
        id=assignment_id, class_id=class_id, category=category,
        total_points=total, is_completed=is_completed, is_graded=False,
    )


@pytest.fixture
def exam_and_homework():
    return [graded("a1", 45, 50, "Exam"), graded("a2", 8, 10, "HW")]

# --- Unit Tests ---

def test_unweighted_points_when_no_weights_configured():
    """
    GIVEN two graded assignments (10/10 and 15/20) and no weights
    WHEN the class grade is calculated
    THEN every point counts equally: 25/30 = 83.33%, a B.
    """
    grade = calculate_class_grade("cls_1", [graded("a1", 10, 10), graded("a2", 15, 20)], {})

    assert grade.mode is GradeMode.POINTS
    assert grade.percentage == pytest.approx(83.333, abs=1e-3)
    assert grade.letter_grade == "B"
    assert grade.gpa_points == 3.0


def test_weighted_average_by_category(exam_and_homework):
    """
    GIVEN Exam (45/50) weighted 70 and HW (8/10) weighted 30
    WHEN the class grade is calculated
    THEN the weighted average is 87.0, a B+.
    """
    weights = {"cls_1_Exam": 70, "cls_1_HW": 30}
    grade = calculate_class_grade("cls_1", exam_and_homework, weights)

    assert grade.mode is GradeMode.WEIGHTED
    assert grade.percentage == pytest.approx(87.0)
    assert grade.letter_grade == "B+"
    assert grade.per_category["Exam"].percentage == pytest.approx(90.0)
    assert grade.per_category["HW"].weight == 30


def test_zero_weight_category_is_left_out_of_both_sides():
    weights = {"cls_1_Exam": 100, "cls_1_HW": 0}
    grade = calculate_class_grade("cls_1", [graded("a1", 40, 50, "Exam"), graded("a2", 10, 10, "HW")], weights)

    assert grade.mode is GradeMode.WEIGHTED
    assert grade.percentage == pytest.approx(80.0)
    assert grade.letter_grade == "B-"


def test_weights_over_100_fall_back_to_points(exam_and_homework):
    weights = {"cls_1_Exam": 80, "cls_1_HW": 40}
    grade = calculate_class_grade("cls_1", exam_and_homework, weights)

    assert grade.mode is GradeMode.POINTS
    assert grade.percentage == pytest.approx(53 / 60 * 100)


def test_uncategorized_work_goes_to_other():
    grade = calculate_class_grade("cls_1", [graded("a1", 9, 10)], {"cls_1_Other": 100})
    assert list(grade.per_category) == ["Other"]
    assert grade.mode is GradeMode.WEIGHTED


def test_no_graded_work_returns_none():
    assert calculate_class_grade("cls_1", [], {}) is None
    assert calculate_class_grade("cls_1", [pending("p1", 10)], {}) is None
    # Projection mode with nothing anticipated is still empty.
    assert calculate_class_grade("cls_1", [pending("p1", 10)], {}, anticipated={}) is None


def test_zero_point_assignments_return_none():
    assert calculate_class_grade("cls_1", [graded("a1", 0, 0)], {}) is None


def test_other_classes_are_ignored():
    assignments = [graded("a1", 10, 10, class_id="cls_1"), graded("a2", 0, 10, class_id="cls_2")]
    grade = calculate_class_grade("cls_1", assignments, {})
    assert grade.percentage == pytest.approx(100.0)
    assert grade.assignment_count == 1


def test_projection_adds_anticipated_pending_work():
    """
    GIVEN a graded exam (40/50) and a pending 10-point homework
    WHEN a 100% score is anticipated for the homework
    THEN it joins the calculation as 10/10, giving 50/60.
    """
    assignments = [graded("a1", 40, 50, "Exam"), pending("p1", 10, "HW")]
    grade = calculate_class_grade("cls_1", assignments, {}, anticipated={"p1": 100})

    assert grade.percentage == pytest.approx(50 / 60 * 100)
    assert grade.assignment_count == 2


def test_projection_skips_zero_and_completed_pending_work():
    assignments = [
        graded("a1", 40, 50, "Exam"),
        pending("p1", 10, "HW"),
        pending("p2", 10, "HW", is_completed=True),
    ]
    grade = calculate_class_grade("cls_1", assignments, {}, anticipated={"p1": 0, "p2": 100})

    assert grade.percentage == pytest.approx(80.0)
    assert grade.assignment_count == 1


def test_scale_choice_changes_the_letter_only():
    assignments = [graded("a1", 98, 100)]
    standard = calculate_class_grade("cls_1", assignments, {})
    dashboard = calculate_class_grade("cls_1", assignments, {}, scale=DASHBOARD_SCALE)

    assert standard.letter_grade == "A+"
    assert dashboard.letter_grade == "A"
    assert standard.gpa_points == dashboard.gpa_points == 4.0
