# /studyhub/db/models/profile_models.py

"""
Per-owner singleton documents: the student profile, degree settings, and the
flat category-weight map. Each is keyed directly by the owner id.
"""

from sqlalchemy import Column, String, Float, JSON

from ..database import Base


class UserProfile(Base):
    __tablename__ = "user_profiles"

    user_id = Column(String, primary_key=True, index=True)
    full_name = Column(String, nullable=True)
    degree_credit_requirement = Column(Float, nullable=True, default=120)
    # The student's declared prior cumulative GPA. NULL means "not declared".
    current_gpa = Column(Float, nullable=True)
    completed_credit_hours = Column(Float, nullable=True, default=0)


class DegreeSettings(Base):
    __tablename__ = "degree_settings"

    user_id = Column(String, primary_key=True, index=True)
    minor_credits_required = Column(Float, nullable=True, default=18)
    core_categories = Column(JSON, nullable=True)


class CategoryWeightSet(Base):
    """The whole `{class_id}_{category}` -> weight map for one owner."""
    __tablename__ = "category_weights"

    user_id = Column(String, primary_key=True, index=True)
    weights = Column(JSON, nullable=False, default=dict)
