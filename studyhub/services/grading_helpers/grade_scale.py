# /studyhub/services/grading_helpers/grade_scale.py

"""
Percentage-to-letter breakpoint tables on the 4.0 scale.

Two tables exist and are used by different views: the GPA views grade with
`STANDARD_SCALE`, which has A+ as its own tier, while the grade tracker and the
dashboard GPA card use `DASHBOARD_SCALE`, which folds A+ into A. They are kept
separate on purpose; do not merge them.
"""

from typing import List, Tuple

from ...models.analytics_model import GradeMark

# (minimum percentage, letter, grade points), highest tier first.
GradeScale = List[Tuple[float, str, float]]

STANDARD_SCALE: GradeScale = [
    (97, "A+", 4.0),
    (93, "A", 4.0),
    (90, "A-", 3.67),
    (87, "B+", 3.33),
    (83, "B", 3.0),
    (80, "B-", 2.67),
    (77, "C+", 2.33),
    (73, "C", 2.0),
    (70, "C-", 1.67),
    (67, "D+", 1.33),
    (63, "D", 1.0),
    (60, "D-", 0.67),
]

DASHBOARD_SCALE: GradeScale = [tier for tier in STANDARD_SCALE if tier[1] != "A+"]

FAILING_MARK = ("F", 0.0)


def letter_for(percentage: float, scale: GradeScale = STANDARD_SCALE) -> GradeMark:
    for minimum, letter, points in scale:
        if percentage >= minimum:
            return GradeMark(letter=letter, gpa_points=points)
    return GradeMark(letter=FAILING_MARK[0], gpa_points=FAILING_MARK[1])


def gpa_points_for(percentage: float, scale: GradeScale = STANDARD_SCALE) -> float:
    return letter_for(percentage, scale).gpa_points
