# /studyhub/services/career_service.py

"""
Business logic for job, internship and other applications, plus the headline
counts shown on the career page.
"""

import logging
import uuid
from typing import List, Optional

from ..models import planner_model
from ..models.planner_model import ApplicationStatus
from .database_service import DatabaseService

logger = logging.getLogger(__name__)

OFFER_STATES = (ApplicationStatus.OFFER.value, ApplicationStatus.ACCEPTED.value)


def _to_record(db_application) -> Optional[planner_model.ApplicationRecord]:
    if db_application is None:
        return None
    return planner_model.ApplicationRecord.model_validate(db_application)


def list_applications(
    user_id: str,
    db: DatabaseService,
    app_type: Optional[planner_model.ApplicationType] = None,
    status: Optional[ApplicationStatus] = None,
) -> List[planner_model.ApplicationRecord]:
    """Most recently applied first; applications without an applied date go last."""
    rows = db.get_applications(
        user_id,
        app_type=app_type.value if app_type is not None else None,
        status=status.value if status is not None else None,
    )
    records = [_to_record(a) for a in rows]
    return sorted(records, key=lambda a: a.applied_date or "", reverse=True)


def create_application(
    application_data: planner_model.ApplicationCreate,
    db: DatabaseService,
    user_id: str,
) -> planner_model.ApplicationRecord:
    record = {
        "id": f"app_{uuid.uuid4().hex[:12]}",
        "user_id": user_id,
        **application_data.model_dump(mode="json"),
    }
    new_application = db.add_application(record)
    if new_application.status in OFFER_STATES:
        logger.info("Application %s for user %s recorded with an offer", new_application.id, user_id)
    return _to_record(new_application)


def update_application(
    application_id: str,
    application_update: planner_model.ApplicationUpdate,
    db: DatabaseService,
    user_id: str,
) -> Optional[planner_model.ApplicationRecord]:
    update_data = application_update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise ValueError("No update data provided.")
    return _to_record(db.update_application(application_id, user_id, update_data))


def delete_application(application_id: str, db: DatabaseService, user_id: str) -> bool:
    return db.delete_application(application_id, user_id)


def get_stats(user_id: str, db: DatabaseService) -> planner_model.CareerStats:
    statuses = [a.status for a in db.get_applications(user_id)]
    return planner_model.CareerStats(
        total=len(statuses),
        interviews=statuses.count(ApplicationStatus.INTERVIEW.value),
        offers=sum(1 for s in statuses if s in OFFER_STATES),
        pending=statuses.count(ApplicationStatus.APPLIED.value),
    )
