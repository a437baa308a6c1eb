# /studyhub/services/grading_helpers/category_weights.py

"""
Operations on the flat category-weight map.

Weights for every class live in one mapping per owner, keyed by
`"{class_id}_{category}"`. Nothing here checks that a class's weights add up
to 100; the class-grade calculator decides from the total whether a weight
scheme is usable.
"""

from typing import Dict, Iterable, Mapping

DEFAULT_CATEGORY = "Other"


def category_of(raw_category) -> str:
    """An unset or blank category falls into the 'Other' bucket."""
    if raw_category is None:
        return DEFAULT_CATEGORY
    label = str(raw_category)
    return label if label.strip() else DEFAULT_CATEGORY


def weight_key(class_id: str, category: str) -> str:
    return f"{class_id}_{category}"


def get_weight(weights: Mapping[str, float], class_id: str, category: str) -> float:
    value = (weights or {}).get(weight_key(class_id, category))
    try:
        return float(value) if value is not None else 0.0
    except (TypeError, ValueError):
        return 0.0


def set_weight(weights: Mapping[str, float], class_id: str, category: str, value: float) -> Dict[str, float]:
    """Returns a new full map with one weight replaced; the caller persists the whole map."""
    updated = dict(weights or {})
    updated[weight_key(class_id, category)] = float(value)
    return updated


def weights_for_class(weights: Mapping[str, float], class_id: str) -> Dict[str, float]:
    """The category -> weight entries that belong to one class."""
    prefix = f"{class_id}_"
    return {
        key[len(prefix):]: get_weight(weights, class_id, key[len(prefix):])
        for key in (weights or {})
        if key.startswith(prefix)
    }


def class_weight_total(weights: Mapping[str, float], class_id: str, categories: Iterable[str]) -> float:
    return sum(get_weight(weights, class_id, category) for category in categories)
