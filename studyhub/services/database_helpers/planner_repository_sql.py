# /studyhub/services/database_helpers/planner_repository_sql.py

"""
This module contains the raw SQLAlchemy queries for the planner tables: to-do
items, lecture notes and career applications. As everywhere else, each method
that touches owned data filters on `user_id`.
"""

from typing import List, Dict, Optional
from sqlalchemy.orm import Session

from studyhub.db.models.planner_models import Todo, Note, Application


class PlannerRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Shared helpers ---

    def _get_owned(self, model, record_id: str, user_id: str):
        return self.db.query(model).filter(model.id == record_id, model.user_id == user_id).first()

    def _add(self, model, record: Dict):
        row = model(**record)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def _update(self, model, record_id: str, user_id: str, data: Dict):
        row = self._get_owned(model, record_id, user_id)
        if row:
            for key, value in data.items():
                setattr(row, key, value)
            self.db.commit()
            self.db.refresh(row)
        return row

    def _delete(self, model, record_id: str, user_id: str) -> bool:
        row = self._get_owned(model, record_id, user_id)
        if row:
            self.db.delete(row)
            self.db.commit()
            return True
        return False

    # --- To-Do Methods ---

    def get_todos(
        self,
        user_id: str,
        is_completed: Optional[bool] = None,
        priority: Optional[str] = None,
        category: Optional[str] = None,
    ) -> List[Todo]:
        """Newest first, optionally narrowed by the equality filters."""
        query = self.db.query(Todo).filter(Todo.user_id == user_id)
        if is_completed is not None:
            query = query.filter(Todo.is_completed == is_completed)
        if priority is not None:
            query = query.filter(Todo.priority == priority)
        if category is not None:
            query = query.filter(Todo.category == category)
        return query.order_by(Todo.created_at.desc(), Todo.id).all()

    def get_todo_by_id(self, todo_id: str, user_id: str) -> Optional[Todo]:
        return self._get_owned(Todo, todo_id, user_id)

    def add_todo(self, record: Dict) -> Todo:
        return self._add(Todo, record)

    def update_todo(self, todo_id: str, user_id: str, data: Dict) -> Optional[Todo]:
        return self._update(Todo, todo_id, user_id, data)

    def delete_todo(self, todo_id: str, user_id: str) -> bool:
        return self._delete(Todo, todo_id, user_id)

    # --- Note Methods ---

    def get_notes(self, user_id: str, class_id: Optional[str] = None) -> List[Note]:
        query = self.db.query(Note).filter(Note.user_id == user_id)
        if class_id is not None:
            query = query.filter(Note.class_id == class_id)
        return query.order_by(Note.created_at.desc(), Note.id).all()

    def get_note_by_id(self, note_id: str, user_id: str) -> Optional[Note]:
        return self._get_owned(Note, note_id, user_id)

    def add_note(self, record: Dict) -> Note:
        return self._add(Note, record)

    def update_note(self, note_id: str, user_id: str, data: Dict) -> Optional[Note]:
        return self._update(Note, note_id, user_id, data)

    def delete_note(self, note_id: str, user_id: str) -> bool:
        return self._delete(Note, note_id, user_id)

    # --- Application Methods ---

    def get_applications(
        self,
        user_id: str,
        app_type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> List[Application]:
        query = self.db.query(Application).filter(Application.user_id == user_id)
        if app_type is not None:
            query = query.filter(Application.type == app_type)
        if status is not None:
            query = query.filter(Application.status == status)
        return query.order_by(Application.created_at, Application.id).all()

    def get_application_by_id(self, application_id: str, user_id: str) -> Optional[Application]:
        return self._get_owned(Application, application_id, user_id)

    def add_application(self, record: Dict) -> Application:
        return self._add(Application, record)

    def update_application(self, application_id: str, user_id: str, data: Dict) -> Optional[Application]:
        return self._update(Application, application_id, user_id, data)

    def delete_application(self, application_id: str, user_id: str) -> bool:
        return self._delete(Application, application_id, user_id)
