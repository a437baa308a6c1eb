# /studyhub/db/models/class_assignment_models.py

"""
This module defines the SQLAlchemy ORM models for the `Class` and `Assignment`
entities: the courses a student is taking and the graded or pending work
attached to them.
"""

from sqlalchemy import Column, String, Float, Boolean, JSON, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base


class Class(Base):
    """
    SQLAlchemy model representing a class (course) owned by a student.

    Classes are archived by flipping `is_active` rather than deleted, so an
    inactive class keeps its assignments and stored final grade.
    """
    __tablename__ = "classes"

    id = Column(String, primary_key=True, index=True)
    # The owner. Authentication lives outside this service, so this is a plain
    # string id rather than a foreign key to a users table.
    user_id = Column(String, nullable=False, index=True)

    course_code = Column(String, nullable=False, default="")
    course_name = Column(String, nullable=False, default="")
    professor = Column(String, nullable=True)
    credit_hours = Column(Float, nullable=False, default=3)
    category = Column(String, nullable=False, default="Major")
    core_category = Column(String, nullable=True)

    is_active = Column(Boolean, nullable=False, default=True, index=True)
    is_completed = Column(Boolean, nullable=True, index=True)
    is_transfer = Column(Boolean, nullable=True)
    status = Column(String, nullable=True)

    # Stored outcome of a finished class. Either may be set.
    final_gpa = Column(Float, nullable=True)
    grade = Column(Float, nullable=True)

    color = Column(String, nullable=True)
    semester = Column(String, nullable=True)
    days = Column(JSON, nullable=True)
    start_time = Column(String, nullable=True)
    end_time = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Deleting a class removes its assignments.
    assignments = relationship("Assignment", back_populates="class_", cascade="all, delete-orphan")


class Assignment(Base):
    """
    SQLAlchemy model representing one assignment for a class.

    An assignment is created pending, marked completed, and optionally graded
    (which sets `earned_points`).
    """
    __tablename__ = "assignments"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    class_id = Column(String, ForeignKey("classes.id"), nullable=False, index=True)

    title = Column(String, nullable=False, default="")
    description = Column(String, nullable=True)
    category = Column(String, nullable=True)
    total_points = Column(Float, nullable=False, default=100)
    earned_points = Column(Float, nullable=True)

    is_completed = Column(Boolean, nullable=False, default=False, index=True)
    is_graded = Column(Boolean, nullable=False, default=False, index=True)
    due_date = Column(String, nullable=True)
    is_recurring = Column(Boolean, nullable=False, default=False)
    recurrence_end_date = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    class_ = relationship("Class", back_populates="assignments")
