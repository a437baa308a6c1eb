# /tests/test_category_weights.py

from studyhub.services.grading_helpers import category_weights


def test_category_of_falls_back_to_other():
    assert category_weights.category_of(None) == "Other"
    assert category_weights.category_of("   ") == "Other"
    assert category_weights.category_of("Exam") == "Exam"


def test_get_weight_missing_or_bad_values_read_as_zero():
    weights = {"cls_1_Exam": 70, "cls_1_Quiz": "not-a-number"}
    assert category_weights.get_weight(weights, "cls_1", "Exam") == 70.0
    assert category_weights.get_weight(weights, "cls_1", "HW") == 0.0
    assert category_weights.get_weight(weights, "cls_1", "Quiz") == 0.0
    assert category_weights.get_weight(None, "cls_1", "Exam") == 0.0


def test_set_weight_returns_new_full_map():
    """
    GIVEN an existing weight map
    WHEN one weight is set
    THEN a new map with every other entry preserved is returned and the
         original is left untouched.
    """
    original = {"cls_1_Exam": 70.0, "cls_2_HW": 50.0}
    updated = category_weights.set_weight(original, "cls_1", "HW", 30)

    assert updated == {"cls_1_Exam": 70.0, "cls_2_HW": 50.0, "cls_1_HW": 30.0}
    assert "cls_1_HW" not in original


def test_set_weight_does_not_validate_total():
    weights = category_weights.set_weight({"cls_1_Exam": 90.0}, "cls_1", "HW", 60)
    assert category_weights.class_weight_total(weights, "cls_1", ["Exam", "HW"]) == 150.0


def test_weights_for_class_only_matches_that_class():
    weights = {"cls_1_Exam": 70.0, "cls_1_HW": 30.0, "cls_10_Exam": 100.0}
    assert category_weights.weights_for_class(weights, "cls_1") == {"Exam": 70.0, "HW": 30.0}
