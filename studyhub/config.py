# /studyhub/config.py

"""
Environment-driven settings for the StudyHub backend.

Values are read once at import time. A `.env` file in the working directory is
loaded first so local development does not need exported variables.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# The database URL. SQLite is the default for local development.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./studyhub.db")

# Authentication is handled upstream; requests without an owner header fall
# back to this demo owner.
DEFAULT_USER_ID = os.getenv("DEFAULT_USER_ID", "user_v1_demo")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Profile defaults used whenever the profile document is missing or partial.
DEFAULT_DEGREE_CREDIT_REQUIREMENT = 120
DEFAULT_MINOR_CREDITS_REQUIRED = 18
