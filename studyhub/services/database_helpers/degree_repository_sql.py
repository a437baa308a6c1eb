# /studyhub/services/database_helpers/degree_repository_sql.py

"""
Raw SQLAlchemy queries for planned semesters and the manual requirement lists.
"""

from typing import List, Dict, Optional
from sqlalchemy.orm import Session

from studyhub.db.models.degree_models import Semester, RequirementCourse


class DegreeRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    # --- Semester Methods ---

    def get_semesters(self, user_id: str) -> List[Semester]:
        return (
            self.db.query(Semester)
            .filter(Semester.user_id == user_id)
            .order_by(Semester.order, Semester.id)
            .all()
        )

    def get_semester_by_id(self, semester_id: str, user_id: str) -> Optional[Semester]:
        return self.db.query(Semester).filter(Semester.id == semester_id, Semester.user_id == user_id).first()

    def add_semester(self, record: Dict) -> Semester:
        new_semester = Semester(**record)
        self.db.add(new_semester)
        self.db.commit()
        self.db.refresh(new_semester)
        return new_semester

    def replace_semester_courses(self, semester_id: str, user_id: str, courses: List[Dict]) -> Optional[Semester]:
        """
        Overwrites the embedded course list. Courses are never patched in place;
        a new list is assigned so the JSON column is flagged dirty.
        """
        db_semester = self.get_semester_by_id(semester_id=semester_id, user_id=user_id)
        if db_semester:
            db_semester.courses = list(courses)
            self.db.commit()
            self.db.refresh(db_semester)
        return db_semester

    def delete_semester(self, semester_id: str, user_id: str) -> bool:
        db_semester = self.get_semester_by_id(semester_id=semester_id, user_id=user_id)
        if db_semester:
            self.db.delete(db_semester)
            self.db.commit()
            return True
        return False

    # --- Requirement Methods ---

    def get_requirements(self, user_id: str, track: str) -> List[RequirementCourse]:
        return (
            self.db.query(RequirementCourse)
            .filter(RequirementCourse.user_id == user_id, RequirementCourse.track == track)
            .order_by(RequirementCourse.course_code, RequirementCourse.id)
            .all()
        )

    def get_requirement_by_id(self, requirement_id: str, user_id: str, track: str) -> Optional[RequirementCourse]:
        return (
            self.db.query(RequirementCourse)
            .filter(
                RequirementCourse.id == requirement_id,
                RequirementCourse.user_id == user_id,
                RequirementCourse.track == track,
            )
            .first()
        )

    def add_requirement(self, record: Dict) -> RequirementCourse:
        new_requirement = RequirementCourse(**record)
        self.db.add(new_requirement)
        self.db.commit()
        self.db.refresh(new_requirement)
        return new_requirement

    def update_requirement(self, requirement_id: str, user_id: str, track: str, data: Dict) -> Optional[RequirementCourse]:
        db_requirement = self.get_requirement_by_id(requirement_id, user_id, track)
        if db_requirement:
            for key, value in data.items():
                setattr(db_requirement, key, value)
            self.db.commit()
            self.db.refresh(db_requirement)
        return db_requirement

    def delete_requirement(self, requirement_id: str, user_id: str, track: str) -> bool:
        db_requirement = self.get_requirement_by_id(requirement_id, user_id, track)
        if db_requirement:
            self.db.delete(db_requirement)
            self.db.commit()
            return True
        return False
