# /studyhub/services/grading_helpers/recurrence.py

"""
Expansion of a recurring assignment form into independent weekly assignments.
"""

from datetime import date, datetime, timedelta
from typing import Dict, List, Union

from ...models.assignment_model import AssignmentCreate

RECURRENCE_INTERVAL = timedelta(weeks=1)
# Two academic years of weekly work.
MAX_OCCURRENCES = 104


def parse_due(value: str) -> Union[date, datetime]:
    """Parses an ISO date or datetime; a trailing 'Z' is read as UTC."""
    text = value.strip()
    if "T" in text or " " in text:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    return date.fromisoformat(text)


def _as_date(value: Union[date, datetime]) -> date:
    return value.date() if isinstance(value, datetime) else value


def expand_recurring_assignment(form: AssignmentCreate) -> List[Dict]:
    """
    Turns one submitted form into the assignment records to create.

    A non-recurring form yields itself. A recurring form yields one record per
    week starting at `due_date` while the due date falls on or before
    `recurrence_end_date`. Records are titled "<title> #1", "<title> #2", ...
    and each is a plain, non-recurring assignment.

    Raises:
        ValueError: If the dates cannot be parsed, the series would be empty,
            or it is too long.
    """
    record = form.model_dump()
    if not form.is_recurring or not form.due_date or not form.recurrence_end_date:
        record["is_recurring"] = False
        record["recurrence_end_date"] = None
        return [record]

    try:
        first_due = parse_due(form.due_date)
        end = _as_date(parse_due(form.recurrence_end_date))
    except ValueError as e:
        raise ValueError(f"Invalid recurrence dates: {e}")

    occurrences = []
    due = first_due
    while _as_date(due) <= end:
        occurrences.append(due)
        if len(occurrences) > MAX_OCCURRENCES:
            raise ValueError(f"A recurring assignment may not exceed {MAX_OCCURRENCES} occurrences.")
        due = due + RECURRENCE_INTERVAL

    if not occurrences:
        raise ValueError("recurrence_end_date is before the first due date.")

    return [
        {
            **record,
            "title": f"{form.title} #{number}",
            "due_date": due.isoformat(),
            "is_recurring": False,
            "recurrence_end_date": None,
        }
        for number, due in enumerate(occurrences, start=1)
    ]
