# /tests/test_recurrence.py

import pytest
from pydantic import ValidationError

from studyhub.models.assignment_model import AssignmentCreate
from studyhub.services.grading_helpers.recurrence import expand_recurring_assignment


def make_form(**overrides):
    data = {"class_id": "cls_1", "title": "Quiz", "category": "Quiz", "total_points": 20}
    data.update(overrides)
    return AssignmentCreate(**data)


def test_weekly_series_up_to_inclusive_end_date():
    """
    GIVEN a recurring form due 2025-09-01 ending 2025-09-22
    WHEN it is expanded
    THEN four independent weekly assignments titled #1..#4 are produced.
    """
    records = expand_recurring_assignment(
        make_form(due_date="2025-09-01", is_recurring=True, recurrence_end_date="2025-09-22")
    )

    assert [r["title"] for r in records] == ["Quiz #1", "Quiz #2", "Quiz #3", "Quiz #4"]
    assert [r["due_date"] for r in records] == ["2025-09-01", "2025-09-08", "2025-09-15", "2025-09-22"]
    assert all(r["is_recurring"] is False for r in records)
    assert all(r["recurrence_end_date"] is None for r in records)
    assert all(r["class_id"] == "cls_1" and r["total_points"] == 20 for r in records)


def test_datetime_due_dates_keep_their_time():
    records = expand_recurring_assignment(
        make_form(due_date="2025-09-01T23:59:00", is_recurring=True, recurrence_end_date="2025-09-15")
    )
    assert [r["due_date"] for r in records] == [
        "2025-09-01T23:59:00", "2025-09-08T23:59:00", "2025-09-15T23:59:00",
    ]


def test_non_recurring_form_yields_itself():
    records = expand_recurring_assignment(make_form(due_date="2025-09-01"))
    assert len(records) == 1
    assert records[0]["title"] == "Quiz"
    assert records[0]["is_recurring"] is False


def test_recurring_form_needs_an_end_date():
    with pytest.raises(ValidationError):
        make_form(due_date="2025-09-01", is_recurring=True)


def test_end_before_first_due_date_is_rejected():
    with pytest.raises(ValueError):
        expand_recurring_assignment(
            make_form(due_date="2025-09-08", is_recurring=True, recurrence_end_date="2025-09-01")
        )


def test_unparseable_dates_are_rejected():
    with pytest.raises(ValueError):
        expand_recurring_assignment(
            make_form(due_date="next monday", is_recurring=True, recurrence_end_date="2025-09-01")
        )


def test_overlong_series_is_rejected():
    with pytest.raises(ValueError):
        expand_recurring_assignment(
            make_form(due_date="2025-01-06", is_recurring=True, recurrence_end_date="2030-01-01")
        )
