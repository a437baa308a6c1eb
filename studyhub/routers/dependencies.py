# /studyhub/routers/dependencies.py

from typing import Optional
from fastapi import Header

from ..config import DEFAULT_USER_ID


def get_current_user_id(x_user_id: Optional[str] = Header(default=None)) -> str:
    """
    Resolves the owner of the request. Authentication happens upstream and
    forwards the owner in the `X-User-Id` header; local development falls back
    to the demo owner.
    """
    return x_user_id or DEFAULT_USER_ID
