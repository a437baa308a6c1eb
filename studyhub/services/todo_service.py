# /studyhub/services/todo_service.py

"""Business logic for the owner's to-do list."""

import uuid
from typing import List, Optional

from ..models import planner_model
from .database_service import DatabaseService


def _to_record(db_todo) -> Optional[planner_model.TodoRecord]:
    return planner_model.TodoRecord.model_validate(db_todo) if db_todo is not None else None


def list_todos(
    user_id: str,
    db: DatabaseService,
    is_completed: Optional[bool] = None,
    priority: Optional[planner_model.TodoPriority] = None,
    category: Optional[str] = None,
) -> List[planner_model.TodoRecord]:
    rows = db.get_todos(
        user_id,
        is_completed=is_completed,
        priority=priority.value if priority is not None else None,
        category=category,
    )
    return [_to_record(t) for t in rows]


def create_todo(todo_data: planner_model.TodoCreate, db: DatabaseService, user_id: str) -> planner_model.TodoRecord:
    record = {
        "id": f"todo_{uuid.uuid4().hex[:12]}",
        "user_id": user_id,
        **todo_data.model_dump(mode="json"),
    }
    return _to_record(db.add_todo(record))


def update_todo(
    todo_id: str,
    todo_update: planner_model.TodoUpdate,
    db: DatabaseService,
    user_id: str,
) -> Optional[planner_model.TodoRecord]:
    update_data = todo_update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    return _to_record(db.update_todo(todo_id, user_id, update_data))


def toggle_complete(todo_id: str, db: DatabaseService, user_id: str) -> Optional[planner_model.TodoRecord]:
    existing = db.get_todo_by_id(todo_id, user_id)
    if existing is None:
        return None
    return _to_record(db.update_todo(todo_id, user_id, {"is_completed": not existing.is_completed}))


def delete_todo(todo_id: str, db: DatabaseService, user_id: str) -> bool:
    return db.delete_todo(todo_id, user_id)
