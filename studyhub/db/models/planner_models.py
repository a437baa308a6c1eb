# /studyhub/db/models/planner_models.py

"""
This module defines the SQLAlchemy ORM models for the student's personal
planner records: to-do items, lecture notes and job/internship applications.
None of them feed the grade or degree calculations; the dashboard only counts
them.
"""

from sqlalchemy import Column, String, Boolean, JSON, DateTime, Text
from sqlalchemy.sql import func

from ..database import Base


class Todo(Base):
    """A to-do item. Open items are the ones with `is_completed` False."""
    __tablename__ = "todos"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(String, nullable=True)
    priority = Column(String, nullable=False, default="Medium")
    category = Column(String, nullable=False, default="Personal")
    is_completed = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Note(Base):
    """
    A lecture note. `class_id` is optional and deliberately not a foreign key:
    notes outlive the class they were taken in.
    """
    __tablename__ = "notes"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    class_id = Column(String, nullable=True, index=True)

    title = Column(String, nullable=False)
    content = Column(Text, nullable=False, default="")
    lecture_date = Column(String, nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), server_default=func.now())


class Application(Base):
    """A job, internship or similar application and where it stands."""
    __tablename__ = "applications"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)

    type = Column(String, nullable=False, default="Internship")
    company_organization = Column(String, nullable=False)
    position = Column(String, nullable=False)
    status = Column(String, nullable=False, default="Applied", index=True)
    applied_date = Column(String, nullable=True)
    deadline = Column(String, nullable=True)
    interview_date = Column(String, nullable=True)
    interview_time = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
