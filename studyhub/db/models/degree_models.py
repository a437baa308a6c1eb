# /studyhub/db/models/degree_models.py

"""
This module defines the SQLAlchemy ORM models for degree planning: planned
semesters (with their embedded course lists) and the manual core/major/minor
requirement entries.
"""

from sqlalchemy import Column, String, Float, Integer, Boolean, JSON

from ..database import Base


class Semester(Base):
    """
    A planned semester. Its courses are an embedded JSON list owned by the
    semester; they have no identity outside it and are rewritten as a whole.
    """
    __tablename__ = "semesters"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    order = Column(Integer, nullable=False, default=0)
    courses = Column(JSON, nullable=False, default=list)


class RequirementCourse(Base):
    """
    A manually entered requirement course.

    The three requirement lists (core, major, minor) share this table and are
    told apart by `track`. Core entries use the `status` string while major and
    minor entries use the `is_completed`/`is_transfer` flags.
    """
    __tablename__ = "requirement_courses"

    id = Column(String, primary_key=True, index=True)
    user_id = Column(String, nullable=False, index=True)
    track = Column(String, nullable=False, index=True)

    course_code = Column(String, nullable=False, default="")
    course_name = Column(String, nullable=True)
    credit_hours = Column(Float, nullable=False, default=3)
    # For core entries: the name of the core area the course satisfies.
    category = Column(String, nullable=True)
    status = Column(String, nullable=True)
    is_completed = Column(Boolean, nullable=True)
    is_transfer = Column(Boolean, nullable=True)
