# /studyhub/main.py

# --- Core FastAPI Imports ---
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from .config import LOG_LEVEL

# --- Application-specific Router Imports ---
from .routers import (
    classes_router,
    assignments_router,
    grades_router,
    gpa_router,
    degree_router,
    profile_router,
    dashboard_router,
    todos_router,
    notes_router,
    applications_router,
)

# --- Database Imports for Startup Logic ---
from .db.base import Base
from .db.database import engine

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)

# --- Application Lifecycle Management ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # Runs once on startup. Alembic owns schema changes in deployed databases;
    # this only creates tables that are missing.
    Base.metadata.create_all(bind=engine)
    logger.info("StudyHub backend started")
    yield

# --- FastAPI Application Instance Creation ---
app = FastAPI(
    title="StudyHub Backend API",
    description="Grades, GPA and degree progress for the personal student dashboard.",
    version="1.0.0",
    lifespan=lifespan
)

# --- Middleware Configuration ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- API Router Inclusion ---
app.include_router(dashboard_router.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(classes_router.router, prefix="/api/classes", tags=["Classes"])
app.include_router(assignments_router.router, prefix="/api/assignments", tags=["Assignments"])
app.include_router(grades_router.router, prefix="/api/grades", tags=["Grades"])
app.include_router(gpa_router.router, prefix="/api/gpa", tags=["GPA"])
app.include_router(degree_router.router, prefix="/api/degree", tags=["Degree Planner"])
app.include_router(profile_router.router, prefix="/api/profile", tags=["Profile"])
app.include_router(todos_router.router, prefix="/api/todos", tags=["To-Do List"])
app.include_router(notes_router.router, prefix="/api/notes", tags=["Notes"])
app.include_router(applications_router.router, prefix="/api/applications", tags=["Career"])

# --- Root / Health Check Endpoint ---
@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the API is online."""
    return {"status": "StudyHub Backend is running!", "version": app.version}
