# /studyhub/services/grading_helpers/class_grade.py

"""
Per-class grade calculation.

A class's grade is built from its graded assignments, grouped into categories.
When the class has a usable weight scheme (category weights totalling more
than 0 and at most 100) the category percentages are averaged by weight;
otherwise every point counts the same. In projection mode, pending assignments
with a hypothetical score join the calculation as if they were graded.
"""

from collections import OrderedDict
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ...models.analytics_model import CategoryScore, ClassGrade, GradeMode
from ...models.assignment_model import AssignmentRecord
from .category_weights import category_of, get_weight
from .grade_scale import GradeScale, STANDARD_SCALE, letter_for

MAX_WEIGHT_TOTAL = 100.0


def _contributions(
    class_id: str,
    assignments: Sequence[AssignmentRecord],
    anticipated: Optional[Mapping[str, float]],
) -> List[Tuple[str, float, float]]:
    """(category, total points, earned points) for every assignment that counts."""
    rows = []
    for a in assignments:
        if a.class_id != class_id or not a.is_graded:
            continue
        rows.append((category_of(a.category), a.total_points or 0, a.earned_points or 0))

    if anticipated is not None:
        for a in assignments:
            if a.class_id != class_id or a.is_completed or a.is_graded:
                continue
            expected = anticipated.get(a.id) or 0
            if expected > 0:
                total = a.total_points or 0
                rows.append((category_of(a.category), total, (expected / 100) * total))
    return rows


def calculate_class_grade(
    class_id: str,
    assignments: Sequence[AssignmentRecord],
    weights: Mapping[str, float],
    anticipated: Optional[Mapping[str, float]] = None,
    scale: GradeScale = STANDARD_SCALE,
) -> Optional[ClassGrade]:
    """
    Computes the grade of one class.

    Args:
        class_id: The class to grade.
        assignments: Any assignments; only this class's graded ones (plus, when
            projecting, its pending ones with an anticipated score above 0) are used.
        weights: The owner's flat `{class_id}_{category}` weight map.
        anticipated: Hypothetical percentage scores keyed by pending assignment
            id. Passing a mapping (even an empty one) turns on projection mode.
        scale: The breakpoint table for the letter grade.

    Returns:
        A ClassGrade, or None when nothing contributes or the contributing
        assignments are worth zero points in total.
    """
    rows = _contributions(class_id, assignments, anticipated)
    if not rows:
        return None

    sums: Dict[str, List[float]] = OrderedDict()
    for category, total, earned in rows:
        bucket = sums.setdefault(category, [0.0, 0.0])
        bucket[0] += total
        bucket[1] += earned

    per_category: Dict[str, CategoryScore] = OrderedDict()
    for category, (total, earned) in sums.items():
        # A category with no points has no percentage and drops out.
        if total > 0:
            per_category[category] = CategoryScore(
                earned=earned,
                total=total,
                percentage=(earned / total) * 100,
                weight=get_weight(weights, class_id, category),
            )

    total_weight = sum(score.weight for score in per_category.values())
    percentage = None
    mode = GradeMode.POINTS

    if 0 < total_weight <= MAX_WEIGHT_TOTAL:
        used = [score for score in per_category.values() if score.weight > 0]
        used_weight = sum(score.weight for score in used)
        if used_weight > 0:
            percentage = sum(score.percentage * score.weight for score in used) / used_weight
            mode = GradeMode.WEIGHTED
    else:
        total_points = sum(total for _, total, _ in rows)
        earned_points = sum(earned for _, _, earned in rows)
        if total_points > 0:
            percentage = (earned_points / total_points) * 100

    if percentage is None:
        return None

    mark = letter_for(percentage, scale)
    return ClassGrade(
        percentage=percentage,
        per_category=per_category,
        letter_grade=mark.letter,
        gpa_points=mark.gpa_points,
        mode=mode,
        assignment_count=len(rows),
    )
