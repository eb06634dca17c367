import logging
from datetime import datetime
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlmodel import Session, select

from checklist.app.core.config import Settings
from checklist.app.core.dependencies import get_settings
from checklist.app.db.session import get_session
from checklist.app.db.models import Artist, Guest
from checklist.app.schemas.records import AdvancementResponse, Bucket, GuestCreate, GuestUpdate
from checklist.app.services.advancement import (
    advancement_subject, build_advancement_details, compose_mailto_link
)
from checklist.app.services.grouping import (
    DEFAULT_ROOM, display_month_room, group_by_month, grouped_view, records_in_room
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/guests",
    tags=["guests"],
    responses={404: {"description": "Not found"}},
)

def get_guest_or_404(session: Session, guest_id: int) -> Guest:
    guest = session.get(Guest, guest_id)
    if not guest:
        raise HTTPException(status_code=404, detail="Guest not found")
    return guest

@router.get("/", response_model=List[Guest])
def list_guests(session: Session = Depends(get_session)):
    return session.exec(select(Guest).order_by(Guest.id)).all()

@router.get("/grouped", response_model=List[Bucket])
def list_guests_grouped(session: Session = Depends(get_session)):
    guests = session.exec(select(Guest).order_by(Guest.id)).all()
    return grouped_view([g.model_dump() for g in guests], "guests")

@router.get("/by-month", response_model=Dict[str, List[Dict[str, Any]]])
def list_guests_by_month(session: Session = Depends(get_session)):
    """Door list: one name-sorted list per month, rooms merged."""
    guests = session.exec(select(Guest).order_by(Guest.id)).all()
    return group_by_month([g.model_dump() for g in guests])

@router.get("/advancement", response_model=AdvancementResponse)
def get_advancement_details(
    month: str,
    room: str = Query(DEFAULT_ROOM),
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    """
    Advancement summary for one night (artists, guest list, set times),
    plus a mailto link addressed to the venue's advancement contact.
    """
    artists = session.exec(select(Artist).order_by(Artist.id)).all()
    guests = session.exec(select(Guest).order_by(Guest.id)).all()

    content = build_advancement_details(
        month,
        room,
        records_in_room([a.model_dump() for a in artists], month, room),
        records_in_room([g.model_dump() for g in guests], month, room),
        closing_time=settings.CLOSING_TIME,
    )
    return AdvancementResponse(
        month=month,
        room=room,
        title=display_month_room(month, room),
        content=content,
        mailto=compose_mailto_link(settings.ADVANCEMENT_RECIPIENT, advancement_subject(month, room), content),
    )

@router.get("/{guest_id}", response_model=Guest)
def get_guest(guest_id: int, session: Session = Depends(get_session)):
    return get_guest_or_404(session, guest_id)

@router.post("/", response_model=Guest, status_code=status.HTTP_201_CREATED)
def create_guest(request: GuestCreate, session: Session = Depends(get_session)):
    guest = Guest(**request.model_dump())
    session.add(guest)
    session.commit()
    session.refresh(guest)
    logger.info("Added guest %s to %s", guest.id, guest.month)
    return guest

@router.put("/{guest_id}", response_model=Guest)
def update_guest(guest_id: int, request: GuestUpdate, session: Session = Depends(get_session)):
    guest = get_guest_or_404(session, guest_id)

    changes = request.model_dump(exclude_unset=True)
    if "name" in changes and not changes["name"]:
        raise HTTPException(status_code=422, detail="Guest name cannot be empty.")

    for key, value in changes.items():
        setattr(guest, key, value)
    guest.updated_at = datetime.now()

    session.add(guest)
    session.commit()
    session.refresh(guest)
    logger.info("Updated guest %s: %s", guest.id, ", ".join(sorted(changes)) or "no changes")
    return guest

@router.delete("/{guest_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_guest(guest_id: int, session: Session = Depends(get_session)):
    guest = get_guest_or_404(session, guest_id)
    session.delete(guest)
    session.commit()
    logger.info("Deleted guest %s", guest_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
