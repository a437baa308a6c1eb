# /tests/test_grade_scale.py

import pytest

from studyhub.services.grading_helpers.grade_scale import (
    DASHBOARD_SCALE,
    STANDARD_SCALE,
    gpa_points_for,
    letter_for,
)


@pytest.mark.parametrize("percentage, letter, points", [
    (100, "A+", 4.0),
    (97, "A+", 4.0),
    (96.99, "A", 4.0),
    (93, "A", 4.0),
    (92.99, "A-", 3.67),
    (90, "A-", 3.67),
    (87, "B+", 3.33),
    (83.33, "B", 3.0),
    (80, "B-", 2.67),
    (77, "C+", 2.33),
    (73, "C", 2.0),
    (70, "C-", 1.67),
    (67, "D+", 1.33),
    (63, "D", 1.0),
    (60, "D-", 0.67),
    (59.99, "F", 0.0),
    (0, "F", 0.0),
])
def test_standard_scale_breakpoints(percentage, letter, points):
    mark = letter_for(percentage, STANDARD_SCALE)
    assert mark.letter == letter
    assert mark.gpa_points == points


def test_dashboard_scale_folds_a_plus_into_a():
    """
    GIVEN a percentage in the A+ band
    WHEN it is graded with each table
    THEN only the standard table reports A+, and both give 4.0 points.
    """
    assert letter_for(98, STANDARD_SCALE).letter == "A+"
    assert letter_for(98, DASHBOARD_SCALE).letter == "A"
    assert gpa_points_for(98, DASHBOARD_SCALE) == gpa_points_for(98, STANDARD_SCALE) == 4.0


def test_dashboard_scale_matches_standard_below_a_plus():
    assert "A+" not in [letter for _, letter, _ in DASHBOARD_SCALE]
    assert DASHBOARD_SCALE == STANDARD_SCALE[1:]


def test_extra_credit_above_100_still_maps_to_top_tier():
    assert letter_for(112.5).letter == "A+"
