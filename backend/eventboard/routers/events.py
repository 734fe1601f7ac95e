"""Event API routes — delegates to event_service for listings and invariants."""
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from eventboard.database import get_db
from eventboard.schemas.event import EventCreate, EventOut, EventUpdate, EventWithCountsOut, ListEvents
from eventboard.schemas.pagination import Paginated
from eventboard.services import event_service
from eventboard.services.time_window import WhenFilter

router = APIRouter()


@router.get("/", response_model=Paginated[EventWithCountsOut])
def list_events(
    when: Optional[WhenFilter] = Query(None),
    page: int = Query(1),
    db: Session = Depends(get_db),
):
    """List events, newest first, three per page, with attendee counts."""
    result = event_service.list_events(db, ListEvents(when=when, page=page))
    return Paginated[EventWithCountsOut].model_validate(result, from_attributes=True)


@router.get("/{event_id}", response_model=EventWithCountsOut)
def get_event(event_id: int, db: Session = Depends(get_db)):
    """Fetch a single event with attendee counts."""
    event = event_service.get_event_with_counts(db, event_id)
    if not event:
        raise HTTPException(status_code=404, detail="Event not found")
    return event


@router.post("/", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreate,
    actor_user_id: int = Query(..., description="ID of the authenticated user"),
    db: Session = Depends(get_db),
):
    """Create a new event organized by the acting user."""
    return event_service.create_event(
        db=db,
        organizer_id=actor_user_id,
        name=payload.name,
        description=payload.description,
        address=payload.address,
        when=payload.when,
    )


@router.patch("/{event_id}", response_model=EventOut)
def update_event(
    event_id: int,
    payload: EventUpdate,
    actor_user_id: int = Query(..., description="ID of the user performing the update"),
    db: Session = Depends(get_db),
):
    """Update an event (organizer only)."""
    return event_service.update_event(
        db=db,
        event_id=event_id,
        actor_user_id=actor_user_id,
        updates=payload.model_dump(exclude_unset=True),
    )


@router.delete("/{event_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_event(
    event_id: int,
    actor_user_id: int = Query(..., description="ID of the user performing the delete"),
    db: Session = Depends(get_db),
):
    """Delete an event and its attendee responses (organizer only)."""
    event_service.delete_event(db, event_id, actor_user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
