"""Eventboard API application."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eventboard.config import settings
from eventboard.database import Base, engine
from eventboard.models import attendee, event, user  # noqa: F401  (register tables)
from eventboard.routers import attendees, events, users

app = FastAPI(
    title="Eventboard",
    description="Event listings with attendee counts, per-user listings and attendee responses",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS.split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users.router, prefix="/api/users", tags=["Users"])
app.include_router(events.router, prefix="/api/events", tags=["Events"])
app.include_router(attendees.router, prefix="/api/events", tags=["Attendees"])


@app.on_event("startup")
def create_sqlite_tables():
    """SQLite has no migration step in development; PostgreSQL goes through Alembic."""
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


@app.get("/api/health")
def health_check():
    return {"status": "ok"}
