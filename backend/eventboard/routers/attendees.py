"""Attendee / response API routes, nested under an event."""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from eventboard.database import get_db
from eventboard.models.user import User
from eventboard.schemas.attendee import AttendeeAnswerIn, AttendeeOut
from eventboard.services import attendee_service, event_service

router = APIRouter()


@router.get("/{event_id}/attendees", response_model=list[AttendeeOut])
def list_attendees(event_id: int, db: Session = Depends(get_db)):
    """All responses recorded for an event."""
    return attendee_service.find_by_event(db, event_id)


@router.get("/{event_id}/attendees/{user_id}", response_model=AttendeeOut)
def get_attendance(event_id: int, user_id: int, db: Session = Depends(get_db)):
    """A single user's response to an event."""
    attendee = attendee_service.find_one(db, event_id, user_id)
    if not attendee:
        raise HTTPException(status_code=404, detail="Attendance not found")
    return attendee


@router.put("/{event_id}/attendees/{user_id}", response_model=AttendeeOut)
def set_attendance(
    event_id: int,
    user_id: int,
    payload: AttendeeAnswerIn,
    db: Session = Depends(get_db),
):
    """Set or replace a user's answer for an event."""
    if not event_service.find_event(db, event_id):
        raise HTTPException(status_code=404, detail="Event not found")
    if db.get(User, user_id) is None:
        raise HTTPException(status_code=404, detail="User not found")
    return attendee_service.create_or_update(db, event_id, user_id, payload.answer)
