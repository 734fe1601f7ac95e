"""User API routes, including per-user event listings."""
import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from eventboard.database import get_db
from eventboard.models.user import User
from eventboard.schemas.event import EventOut
from eventboard.schemas.pagination import Paginated
from eventboard.schemas.user import UserCreate, UserOut
from eventboard.services import event_service

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db)):
    """Create a new user."""
    existing = (
        db.query(User)
        .filter((User.username == payload.username) | (User.email == payload.email))
        .first()
    )
    if existing:
        raise HTTPException(status_code=409, detail="Username or email is already taken")
    user = User(**payload.model_dump())
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created user %s (%s)", user.id, user.username)
    return user


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db)):
    """Fetch a single user by ID."""
    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.get("/{user_id}/events/organized", response_model=Paginated[EventOut])
def list_organized_events(user_id: int, page: int = Query(1), db: Session = Depends(get_db)):
    """Events organized by the user, newest first."""
    result = event_service.list_organized_by(db, user_id, page)
    return Paginated[EventOut].model_validate(result, from_attributes=True)


@router.get("/{user_id}/events/attended", response_model=Paginated[EventOut])
def list_attended_events(user_id: int, page: int = Query(1), db: Session = Depends(get_db)):
    """Events the user has responded to, newest first."""
    result = event_service.list_attended_by(db, user_id, page)
    return Paginated[EventOut].model_validate(result, from_attributes=True)
