# /tests/test_database_service.py

import pytest

from studyhub.services.database_service import DatabaseService


def add_class(db_service, class_id, user_id="user_a", **extra):
    record = {"id": class_id, "user_id": user_id, "course_code": class_id.upper(), "course_name": "Test Class"}
    record.update(extra)
    return db_service.add_class(record)


def add_assignment(db_service, assignment_id, class_id, user_id="user_a", **extra):
    record = {"id": assignment_id, "user_id": user_id, "class_id": class_id, "title": assignment_id}
    record.update(extra)
    return db_service.add_assignments([record])[0]


def test_service_requires_a_session():
    with pytest.raises(ValueError):
        DatabaseService(db_session=None)


def test_add_and_get_class(db_service):
    """
    Tests that a class can be added and then retrieved by its owner.
    """
    add_class(db_service, "cls_test_123", credit_hours=4)
    retrieved_class = db_service.get_class_by_id("cls_test_123", "user_a")
    assert retrieved_class is not None
    assert retrieved_class.credit_hours == 4
    assert retrieved_class.is_active is True


def test_classes_are_scoped_to_their_owner(db_service):
    add_class(db_service, "cls_a", user_id="user_a")
    add_class(db_service, "cls_b", user_id="user_b")

    assert db_service.get_class_by_id("cls_a", "user_b") is None
    assert [c.id for c in db_service.get_classes("user_b")] == ["cls_b"]
    assert db_service.delete_class("cls_a", "user_b") is False


def test_get_classes_equality_filters(db_service):
    add_class(db_service, "cls_1")
    add_class(db_service, "cls_2", is_active=False, is_completed=True)

    assert [c.id for c in db_service.get_classes("user_a", is_active=True)] == ["cls_1"]
    assert [c.id for c in db_service.get_classes("user_a", is_completed=True)] == ["cls_2"]
    assert len(db_service.get_classes("user_a")) == 2


def test_update_class_merges_fields(db_service):
    add_class(db_service, "cls_1")
    updated = db_service.update_class("cls_1", "user_a", {"final_gpa": 3.7, "is_completed": True})

    assert updated.final_gpa == 3.7
    assert updated.course_name == "Test Class"
    assert db_service.update_class("cls_missing", "user_a", {"final_gpa": 1.0}) is None


def test_deleting_a_class_removes_its_assignments(db_service):
    add_class(db_service, "cls_1")
    add_assignment(db_service, "asg_1", "cls_1")

    assert db_service.delete_class("cls_1", "user_a") is True
    assert db_service.get_assignments("user_a") == []


def test_assignment_filters(db_service):
    add_class(db_service, "cls_1")
    add_class(db_service, "cls_2")
    add_assignment(db_service, "asg_1", "cls_1", is_completed=True, is_graded=True, earned_points=90)
    add_assignment(db_service, "asg_2", "cls_1")
    add_assignment(db_service, "asg_3", "cls_2")

    assert [a.id for a in db_service.get_assignments("user_a", is_graded=True)] == ["asg_1"]
    assert {a.id for a in db_service.get_assignments("user_a", class_id="cls_1")} == {"asg_1", "asg_2"}
    assert {a.id for a in db_service.get_assignments("user_a", is_completed=False)} == {"asg_2", "asg_3"}


def test_add_assignments_creates_a_batch(db_service):
    add_class(db_service, "cls_1")
    records = [{"id": f"asg_{n}", "user_id": "user_a", "class_id": "cls_1", "title": f"Quiz #{n}"} for n in range(1, 4)]
    created = db_service.add_assignments(records)

    assert [a.title for a in created] == ["Quiz #1", "Quiz #2", "Quiz #3"]
    assert all(a.total_points == 100 for a in created)


def test_semester_courses_are_replaced_as_a_whole(db_service):
    db_service.add_semester({"id": "sem_1", "user_id": "user_a", "name": "Fall 2025", "order": 1, "courses": []})
    db_service.replace_semester_courses("sem_1", "user_a", [{"id": "crs_1", "course_code": "COSC 1436"}])
    db_service.replace_semester_courses("sem_1", "user_a", [{"id": "crs_2", "course_code": "COSC 1437"}])

    semester = db_service.get_semester_by_id("sem_1", "user_a")
    assert semester.courses == [{"id": "crs_2", "course_code": "COSC 1437"}]


def test_requirements_are_scoped_by_track(db_service):
    db_service.add_requirement({"id": "req_1", "user_id": "user_a", "track": "core", "course_code": "ENGL 1301"})
    db_service.add_requirement({"id": "req_2", "user_id": "user_a", "track": "major", "course_code": "COSC 1436"})

    assert [r.id for r in db_service.get_requirements("user_a", "core")] == ["req_1"]
    assert db_service.update_requirement("req_1", "user_a", "major", {"status": "Completed"}) is None
    assert db_service.delete_requirement("req_2", "user_a", "major") is True
    assert db_service.get_requirements("user_a", "major") == []


def test_profile_upsert_merges_and_keeps_defaults(db_service):
    assert db_service.get_profile("user_a") is None

    db_service.upsert_profile("user_a", {"current_gpa": 3.4})
    profile = db_service.upsert_profile("user_a", {"completed_credit_hours": 24})

    assert profile.current_gpa == 3.4
    assert profile.completed_credit_hours == 24
    assert profile.degree_credit_requirement == 120


def test_category_weights_round_trip_as_a_whole_map(db_service):
    assert db_service.get_category_weights("user_a") == {}

    db_service.save_category_weights("user_a", {"cls_1_Exam": 70.0})
    db_service.save_category_weights("user_a", {"cls_1_HW": 30.0})

    assert db_service.get_category_weights("user_a") == {"cls_1_HW": 30.0}
    assert db_service.get_category_weights("user_b") == {}
