from typing import Optional
from datetime import datetime
from sqlmodel import Field, SQLModel

# --- Checklist Records ---
# All three record types share month/room bucketing fields.
# room is "main" or "lounge"; None is treated as "lounge" everywhere.

class Task(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    task: str
    due_date: Optional[str] = None  # YYYY-MM-DD
    due_time: Optional[str] = None  # HH:MM
    complete: bool = False
    month: Optional[str] = Field(default=None, index=True)
    room: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

class Artist(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = ""  # Legal name
    stage_name: Optional[str] = None
    phone: Optional[str] = None
    social_media: Optional[str] = None
    month: Optional[str] = Field(default=None, index=True)
    room: Optional[str] = None
    start_time: Optional[str] = None  # HH:MM, 24+ hour encoding (e.g. "25:00" = 1 AM)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

class Guest(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    guest_of: Optional[str] = None  # Artist or staff member the guest is on the list for
    contact: Optional[str] = None
    month: Optional[str] = Field(default=None, index=True)
    room: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
