# /studyhub/services/database_helpers/profile_repository_sql.py

"""
Raw SQLAlchemy queries for the per-owner singleton documents: profile, degree
settings and the category-weight map. Writes are upserts, last write wins.
"""

from typing import Dict, Optional
from sqlalchemy.orm import Session

from studyhub.db.models.profile_models import UserProfile, DegreeSettings, CategoryWeightSet


class ProfileRepositorySQL:
    def __init__(self, db_session: Session):
        self.db = db_session

    def _upsert(self, model, user_id: str, data: Dict):
        row = self.db.query(model).filter(model.user_id == user_id).first()
        if row is None:
            row = model(user_id=user_id)
            self.db.add(row)
        for key, value in data.items():
            setattr(row, key, value)
        self.db.commit()
        self.db.refresh(row)
        return row

    # --- Profile ---

    def get_profile(self, user_id: str) -> Optional[UserProfile]:
        return self.db.query(UserProfile).filter(UserProfile.user_id == user_id).first()

    def upsert_profile(self, user_id: str, data: Dict) -> UserProfile:
        return self._upsert(UserProfile, user_id, data)

    # --- Degree Settings ---

    def get_degree_settings(self, user_id: str) -> Optional[DegreeSettings]:
        return self.db.query(DegreeSettings).filter(DegreeSettings.user_id == user_id).first()

    def upsert_degree_settings(self, user_id: str, data: Dict) -> DegreeSettings:
        return self._upsert(DegreeSettings, user_id, data)

    # --- Category Weights ---

    def get_category_weights(self, user_id: str) -> Dict[str, float]:
        row = self.db.query(CategoryWeightSet).filter(CategoryWeightSet.user_id == user_id).first()
        return dict(row.weights or {}) if row else {}

    def save_category_weights(self, user_id: str, weights: Dict[str, float]) -> Dict[str, float]:
        """Persists the whole map, replacing whatever was stored."""
        row = self._upsert(CategoryWeightSet, user_id, {"weights": dict(weights)})
        return dict(row.weights or {})
