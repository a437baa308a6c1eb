# /studyhub/services/class_service.py

"""
This service module is the business logic layer for classes.

Every function is "user-aware": it takes the owner's `user_id` and passes it
down so that all reads and writes are scoped to that owner. Records leave this
module as pydantic `ClassRecord`s, never as ORM objects.
"""

import logging
import uuid
from typing import List, Optional

from ..models import class_model
from .database_service import DatabaseService

logger = logging.getLogger(__name__)


def _to_record(db_class) -> Optional[class_model.ClassRecord]:
    return class_model.ClassRecord.model_validate(db_class) if db_class is not None else None


def list_classes(user_id: str, db: DatabaseService, active: Optional[bool] = None) -> List[class_model.ClassRecord]:
    return [_to_record(c) for c in db.get_classes(user_id, is_active=active)]


def get_class(class_id: str, user_id: str, db: DatabaseService) -> Optional[class_model.ClassRecord]:
    return _to_record(db.get_class_by_id(class_id, user_id))


def create_class(class_data: class_model.ClassCreate, db: DatabaseService, user_id: str) -> class_model.ClassRecord:
    """Stamps a new id and the owner's user_id onto the class before saving it."""
    class_record = {
        "id": f"cls_{uuid.uuid4().hex[:12]}",
        "user_id": user_id,
        **class_data.model_dump(mode="json"),
    }
    new_class = db.add_class(class_record)
    logger.info("Created class %s (%s) for user %s", new_class.id, new_class.course_code, user_id)
    return _to_record(new_class)


def update_class(
    class_id: str,
    class_update: class_model.ClassUpdate,
    db: DatabaseService,
    user_id: str,
) -> Optional[class_model.ClassRecord]:
    update_data = class_update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    return _to_record(db.update_class(class_id, user_id, update_data))


def toggle_active(class_id: str, db: DatabaseService, user_id: str) -> Optional[class_model.ClassRecord]:
    """Archives an active class or restores an archived one."""
    existing = db.get_class_by_id(class_id, user_id)
    if existing is None:
        return None
    return _to_record(db.update_class(class_id, user_id, {"is_active": not existing.is_active}))


def delete_class_by_id(class_id: str, db: DatabaseService, user_id: str) -> bool:
    return db.delete_class(class_id, user_id)
