# /studyhub/db/base.py

# Central registry for all SQLAlchemy models.
# Importing them here makes sure `Base.metadata` knows every table when the
# app creates its schema on startup or Alembic scans for changes.

from .database import Base

from .models.class_assignment_models import Class, Assignment
from .models.degree_models import Semester, RequirementCourse
from .models.profile_models import UserProfile, DegreeSettings, CategoryWeightSet
from .models.planner_models import Todo, Note, Application
