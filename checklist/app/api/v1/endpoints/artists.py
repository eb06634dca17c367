import logging
from datetime import datetime
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlmodel import Session, select

from checklist.app.core.config import Settings
from checklist.app.core.dependencies import get_settings
from checklist.app.db.session import get_session
from checklist.app.db.models import Artist
from checklist.app.schemas.records import (
    ArtistCreate, ArtistUpdate, Bucket, ComposeResponse, SetTimesResponse
)
from checklist.app.services.advancement import compose_sms_uri, social_media_table_html
from checklist.app.services.grouping import DEFAULT_ROOM, display_month_room, grouped_view, records_in_room
from checklist.app.services.set_times import (
    calculate_set_times, format_set_times_text, format_slot, no_set_times_message
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/artists",
    tags=["artists"],
    responses={404: {"description": "Not found"}},
)

def get_artist_or_404(session: Session, artist_id: int) -> Artist:
    artist = session.get(Artist, artist_id)
    if not artist:
        raise HTTPException(status_code=404, detail="Artist not found")
    return artist

def artists_for_bucket(session: Session, month: str, room: str) -> List[dict]:
    artists = session.exec(select(Artist).order_by(Artist.id)).all()
    return records_in_room([a.model_dump() for a in artists], month, room)

# --- Listing & derived views ---

@router.get("/", response_model=List[Artist])
def list_artists(session: Session = Depends(get_session)):
    return session.exec(select(Artist).order_by(Artist.id)).all()

@router.get("/grouped", response_model=List[Bucket])
def list_artists_grouped(session: Session = Depends(get_session)):
    """Artists by month and room; scheduled sets first by start time, then by name."""
    artists = session.exec(select(Artist).order_by(Artist.id)).all()
    return grouped_view([a.model_dump() for a in artists], "artists")

@router.get("/set-times", response_model=SetTimesResponse)
def get_set_times(
    month: str,
    room: str = Query(DEFAULT_ROOM),
    session: Session = Depends(get_session),
    settings: Settings = Depends(get_settings),
):
    artists = artists_for_bucket(session, month, room)
    slots = calculate_set_times(artists, settings.CLOSING_TIME)
    lines = [format_slot(slot) for slot in reversed(slots)]

    return SetTimesResponse(
        month=month,
        room=room,
        heading=display_month_room(month, room),
        slots=slots,
        lines=lines,
        text=format_set_times_text(month, room, artists, settings.CLOSING_TIME),
        message=None if slots else no_set_times_message(month, room),
    )

@router.get("/sms", response_model=ComposeResponse)
def compose_group_text(month: str, room: str = Query(DEFAULT_ROOM), session: Session = Depends(get_session)):
    artists = artists_for_bucket(session, month, room)
    heading = display_month_room(month, room)
    if not artists:
        return ComposeResponse(message=f"No artists found for {heading}.")

    uri = compose_sms_uri(artists)
    if not uri:
        return ComposeResponse(message=f"No valid phone numbers found for the artists in {heading}.")
    return ComposeResponse(uri=uri)

@router.get("/social-table", response_model=ComposeResponse)
def get_social_media_table(month: str, room: str = Query(DEFAULT_ROOM), session: Session = Depends(get_session)):
    artists = artists_for_bucket(session, month, room)
    heading = display_month_room(month, room)
    if not artists:
        return ComposeResponse(message=f"No artists found for {heading} to copy.")

    table = social_media_table_html(artists)
    if not table:
        return ComposeResponse(message=f"No artists with social media links found for {heading}.")
    return ComposeResponse(content=table)

@router.get("/{artist_id}", response_model=Artist)
def get_artist(artist_id: int, session: Session = Depends(get_session)):
    return get_artist_or_404(session, artist_id)

# --- Mutations ---

@router.post("/", response_model=Artist, status_code=status.HTTP_201_CREATED)
def create_artist(request: ArtistCreate, session: Session = Depends(get_session)):
    data = request.model_dump()
    data["name"] = data["name"] or ""

    artist = Artist(**data)
    session.add(artist)
    session.commit()
    session.refresh(artist)
    logger.info("Created artist %s for %s", artist.id, artist.month)
    return artist

@router.put("/{artist_id}", response_model=Artist)
def update_artist(artist_id: int, request: ArtistUpdate, session: Session = Depends(get_session)):
    artist = get_artist_or_404(session, artist_id)

    changes = request.model_dump(exclude_unset=True)
    if "name" in changes:
        changes["name"] = changes["name"] or ""

    name = changes.get("name", artist.name)
    stage_name = changes.get("stage_name", artist.stage_name)
    if not name and not stage_name:
        raise HTTPException(status_code=422, detail="Either Name or Stage Name must be set.")

    for key, value in changes.items():
        setattr(artist, key, value)
    artist.updated_at = datetime.now()

    session.add(artist)
    session.commit()
    session.refresh(artist)
    logger.info("Updated artist %s: %s", artist.id, ", ".join(sorted(changes)) or "no changes")
    return artist

@router.delete("/{artist_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_artist(artist_id: int, session: Session = Depends(get_session)):
    artist = get_artist_or_404(session, artist_id)
    session.delete(artist)
    session.commit()
    logger.info("Deleted artist %s", artist_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
