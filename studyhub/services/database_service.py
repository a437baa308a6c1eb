# /studyhub/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from studyhub.db.database import get_db

# --- Repository Imports ---
from .database_helpers.class_assignment_repository_sql import ClassAssignmentRepositorySQL
from .database_helpers.degree_repository_sql import DegreeRepositorySQL
from .database_helpers.profile_repository_sql import ProfileRepositorySQL
from .database_helpers.planner_repository_sql import PlannerRepositorySQL


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Facade over the SQL repositories. Every method takes the owner's
        `user_id`; nothing here reads across owners.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.class_assignment_repo = ClassAssignmentRepositorySQL(db_session)
        self.degree_repo = DegreeRepositorySQL(db_session)
        self.profile_repo = ProfileRepositorySQL(db_session)
        self.planner_repo = PlannerRepositorySQL(db_session)

    # --- CLASS METHODS (DELEGATED) ---
    def get_classes(self, user_id: str, is_active: Optional[bool] = None, is_completed: Optional[bool] = None): return self.class_assignment_repo.get_classes(user_id, is_active=is_active, is_completed=is_completed)
    def get_class_by_id(self, class_id: str, user_id: str): return self.class_assignment_repo.get_class_by_id(class_id, user_id)
    def add_class(self, class_record: Dict): return self.class_assignment_repo.add_class(class_record)
    def update_class(self, class_id: str, user_id: str, class_update_data: Dict): return self.class_assignment_repo.update_class(class_id, user_id, class_update_data)
    def delete_class(self, class_id: str, user_id: str) -> bool: return self.class_assignment_repo.delete_class(class_id, user_id)

    # --- ASSIGNMENT METHODS (DELEGATED) ---
    def get_assignments(self, user_id: str, class_id: Optional[str] = None, is_completed: Optional[bool] = None, is_graded: Optional[bool] = None): return self.class_assignment_repo.get_assignments(user_id, class_id=class_id, is_completed=is_completed, is_graded=is_graded)
    def get_assignment_by_id(self, assignment_id: str, user_id: str): return self.class_assignment_repo.get_assignment_by_id(assignment_id, user_id)
    def add_assignments(self, assignment_records: List[Dict]): return self.class_assignment_repo.add_assignments(assignment_records)
    def update_assignment(self, assignment_id: str, user_id: str, assignment_update_data: Dict): return self.class_assignment_repo.update_assignment(assignment_id, user_id, assignment_update_data)
    def delete_assignment(self, assignment_id: str, user_id: str) -> bool: return self.class_assignment_repo.delete_assignment(assignment_id, user_id)

    # --- DEGREE PLAN METHODS (DELEGATED) ---
    def get_semesters(self, user_id: str): return self.degree_repo.get_semesters(user_id)
    def get_semester_by_id(self, semester_id: str, user_id: str): return self.degree_repo.get_semester_by_id(semester_id, user_id)
    def add_semester(self, semester_record: Dict): return self.degree_repo.add_semester(semester_record)
    def replace_semester_courses(self, semester_id: str, user_id: str, courses: List[Dict]): return self.degree_repo.replace_semester_courses(semester_id, user_id, courses)
    def delete_semester(self, semester_id: str, user_id: str) -> bool: return self.degree_repo.delete_semester(semester_id, user_id)
    def get_requirements(self, user_id: str, track: str): return self.degree_repo.get_requirements(user_id, track)
    def add_requirement(self, requirement_record: Dict): return self.degree_repo.add_requirement(requirement_record)
    def update_requirement(self, requirement_id: str, user_id: str, track: str, data: Dict): return self.degree_repo.update_requirement(requirement_id, user_id, track, data)
    def delete_requirement(self, requirement_id: str, user_id: str, track: str) -> bool: return self.degree_repo.delete_requirement(requirement_id, user_id, track)

    # --- PROFILE, SETTINGS & WEIGHTS (DELEGATED) ---
    def get_profile(self, user_id: str): return self.profile_repo.get_profile(user_id)
    def upsert_profile(self, user_id: str, data: Dict): return self.profile_repo.upsert_profile(user_id, data)
    def get_degree_settings(self, user_id: str): return self.profile_repo.get_degree_settings(user_id)
    def upsert_degree_settings(self, user_id: str, data: Dict): return self.profile_repo.upsert_degree_settings(user_id, data)
    def get_category_weights(self, user_id: str) -> Dict[str, float]: return self.profile_repo.get_category_weights(user_id)
    def save_category_weights(self, user_id: str, weights: Dict[str, float]) -> Dict[str, float]: return self.profile_repo.save_category_weights(user_id, weights)

    # --- TODO, NOTE & APPLICATION METHODS (DELEGATED) ---
    def get_todos(self, user_id: str, is_completed: Optional[bool] = None, priority: Optional[str] = None, category: Optional[str] = None): return self.planner_repo.get_todos(user_id, is_completed=is_completed, priority=priority, category=category)
    def get_todo_by_id(self, todo_id: str, user_id: str): return self.planner_repo.get_todo_by_id(todo_id, user_id)
    def add_todo(self, todo_record: Dict): return self.planner_repo.add_todo(todo_record)
    def update_todo(self, todo_id: str, user_id: str, data: Dict): return self.planner_repo.update_todo(todo_id, user_id, data)
    def delete_todo(self, todo_id: str, user_id: str) -> bool: return self.planner_repo.delete_todo(todo_id, user_id)
    def get_notes(self, user_id: str, class_id: Optional[str] = None): return self.planner_repo.get_notes(user_id, class_id=class_id)
    def get_note_by_id(self, note_id: str, user_id: str): return self.planner_repo.get_note_by_id(note_id, user_id)
    def add_note(self, note_record: Dict): return self.planner_repo.add_note(note_record)
    def update_note(self, note_id: str, user_id: str, data: Dict): return self.planner_repo.update_note(note_id, user_id, data)
    def delete_note(self, note_id: str, user_id: str) -> bool: return self.planner_repo.delete_note(note_id, user_id)
    def get_applications(self, user_id: str, app_type: Optional[str] = None, status: Optional[str] = None): return self.planner_repo.get_applications(user_id, app_type=app_type, status=status)
    def get_application_by_id(self, application_id: str, user_id: str): return self.planner_repo.get_application_by_id(application_id, user_id)
    def add_application(self, application_record: Dict): return self.planner_repo.add_application(application_record)
    def update_application(self, application_id: str, user_id: str, data: Dict): return self.planner_repo.update_application(application_id, user_id, data)
    def delete_application(self, application_id: str, user_id: str) -> bool: return self.planner_repo.delete_application(application_id, user_id)


# --- DEPENDENCY PROVIDER ---
def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
