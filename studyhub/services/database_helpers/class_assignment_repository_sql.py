# /studyhub/services/database_helpers/class_assignment_repository_sql.py

"""
This module contains the raw SQLAlchemy queries for the Class and Assignment
tables. It is the final point of enforcement for data isolation: every method
that touches owned data takes a `user_id` and filters on it.
"""

from typing import List, Dict, Optional
from sqlalchemy.orm import Session

from studyhub.db.models.class_assignment_models import Class, Assignment


class ClassAssignmentRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Class Methods ---

    def get_classes(
        self,
        user_id: str,
        is_active: Optional[bool] = None,
        is_completed: Optional[bool] = None,
    ) -> List[Class]:
        """
        Retrieves the classes owned by a user, optionally narrowed by the
        `is_active` / `is_completed` equality filters.
        """
        query = self.db.query(Class).filter(Class.user_id == user_id)
        if is_active is not None:
            query = query.filter(Class.is_active == is_active)
        if is_completed is not None:
            query = query.filter(Class.is_completed == is_completed)
        return query.order_by(Class.created_at, Class.id).all()

    def get_class_by_id(self, class_id: str, user_id: str) -> Optional[Class]:
        return self.db.query(Class).filter(Class.id == class_id, Class.user_id == user_id).first()

    def add_class(self, record: Dict) -> Class:
        """Creates a new Class. The `record` must already carry its `user_id`."""
        new_class = Class(**record)
        self.db.add(new_class)
        self.db.commit()
        self.db.refresh(new_class)
        return new_class

    def update_class(self, class_id: str, user_id: str, data: Dict) -> Optional[Class]:
        db_class = self.get_class_by_id(class_id=class_id, user_id=user_id)
        if db_class:
            for key, value in data.items():
                setattr(db_class, key, value)
            self.db.commit()
            self.db.refresh(db_class)
        return db_class

    def delete_class(self, class_id: str, user_id: str) -> bool:
        db_class = self.get_class_by_id(class_id=class_id, user_id=user_id)
        if db_class:
            # The cascade on the relationship removes the class's assignments.
            self.db.delete(db_class)
            self.db.commit()
            return True
        return False

    # --- Assignment Methods ---

    def get_assignments(
        self,
        user_id: str,
        class_id: Optional[str] = None,
        is_completed: Optional[bool] = None,
        is_graded: Optional[bool] = None,
    ) -> List[Assignment]:
        query = self.db.query(Assignment).filter(Assignment.user_id == user_id)
        if class_id is not None:
            query = query.filter(Assignment.class_id == class_id)
        if is_completed is not None:
            query = query.filter(Assignment.is_completed == is_completed)
        if is_graded is not None:
            query = query.filter(Assignment.is_graded == is_graded)
        return query.order_by(Assignment.due_date, Assignment.id).all()

    def get_assignment_by_id(self, assignment_id: str, user_id: str) -> Optional[Assignment]:
        return (
            self.db.query(Assignment)
            .filter(Assignment.id == assignment_id, Assignment.user_id == user_id)
            .first()
        )

    def add_assignments(self, records: List[Dict]) -> List[Assignment]:
        """Creates several assignments in one commit (used for recurring series)."""
        new_assignments = [Assignment(**record) for record in records]
        self.db.add_all(new_assignments)
        self.db.commit()
        for assignment in new_assignments:
            self.db.refresh(assignment)
        return new_assignments

    def update_assignment(self, assignment_id: str, user_id: str, data: Dict) -> Optional[Assignment]:
        db_assignment = self.get_assignment_by_id(assignment_id=assignment_id, user_id=user_id)
        if db_assignment:
            for key, value in data.items():
                setattr(db_assignment, key, value)
            self.db.commit()
            self.db.refresh(db_assignment)
        return db_assignment

    def delete_assignment(self, assignment_id: str, user_id: str) -> bool:
        db_assignment = self.get_assignment_by_id(assignment_id=assignment_id, user_id=user_id)
        if db_assignment:
            self.db.delete(db_assignment)
            self.db.commit()
            return True
        return False
