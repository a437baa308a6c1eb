# /studyhub/services/note_service.py

"""
Business logic for lecture notes. A note filed under a class must point at one
of the owner's classes at the time it is written; afterwards the class may be
deleted and the note keeps its `class_id`.
"""

import logging
import uuid
from typing import List, Optional

from ..models import planner_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def _to_record(db_note) -> Optional[planner_model.NoteRecord]:
    return planner_model.NoteRecord.model_validate(db_note) if db_note is not None else None


def _require_class(class_id: Optional[str], db: DatabaseService, user_id: str) -> None:
    if class_id and db.get_class_by_id(class_id, user_id) is None:
        raise LookupError(f"Class with ID {class_id} not found")


def _matches(note: planner_model.NoteRecord, search: str) -> bool:
    """Case-insensitive substring match on title, content or any tag."""
    needle = search.lower()
    return (
        needle in (note.title or "").lower()
        or needle in (note.content or "").lower()
        or any(needle in tag.lower() for tag in note.tags)
    )


def list_notes(
    user_id: str,
    db: DatabaseService,
    class_id: Optional[str] = None,
    search: Optional[str] = None,
) -> List[planner_model.NoteRecord]:
    notes = [_to_record(n) for n in db.get_notes(user_id, class_id=class_id)]
    if search:
        notes = [n for n in notes if _matches(n, search)]
    return notes


def get_note(note_id: str, user_id: str, db: DatabaseService) -> Optional[planner_model.NoteRecord]:
    return _to_record(db.get_note_by_id(note_id, user_id))


def create_note(note_data: planner_model.NoteCreate, db: DatabaseService, user_id: str) -> planner_model.NoteRecord:
    _require_class(note_data.class_id, db, user_id)
    record = {
        "id": f"note_{uuid.uuid4().hex[:12]}",
        "user_id": user_id,
        **note_data.model_dump(mode="json"),
    }
    new_note = db.add_note(record)
    logger.info("Created note %s for user %s", new_note.id, user_id)
    return _to_record(new_note)


def update_note(
    note_id: str,
    note_update: planner_model.NoteUpdate,
    db: DatabaseService,
    user_id: str,
) -> Optional[planner_model.NoteRecord]:
    update_data = note_update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    _require_class(update_data.get("class_id"), db, user_id)
    return _to_record(db.update_note(note_id, user_id, update_data))


def delete_note(note_id: str, db: DatabaseService, user_id: str) -> bool:
    return db.delete_note(note_id, user_id)
