from typing import Any, Dict, List, Optional
from pydantic import BaseModel, field_validator, model_validator

from checklist.app.utils.time_format import MAX_NIGHT_HOUR, MONTH_ORDER, is_time_of_day, normalize_time_of_day

ROOM_CHOICES = ("main", "lounge")


def _clean(value: Optional[str]) -> Optional[str]:
    # Blank optional strings are stored as null
    if value is None:
        return None
    value = value.strip()
    return value or None


def _check_month(value: Optional[str]) -> Optional[str]:
    value = _clean(value)
    if value is not None and value not in MONTH_ORDER:
        raise ValueError(f"month must be one of {', '.join(MONTH_ORDER)}")
    return value


def _check_room(value: Optional[str]) -> Optional[str]:
    value = _clean(value)
    if value is not None and value not in ROOM_CHOICES:
        raise ValueError("room must be 'main' or 'lounge'")
    return value


def _check_time(value: Optional[str], max_hour: int) -> Optional[str]:
    value = _clean(value)
    if value is not None and not is_time_of_day(value, max_hour=max_hour):
        latest = "27:00" if max_hour == MAX_NIGHT_HOUR else f"{max_hour}:59"
        raise ValueError(f"time must be HH:MM between 00:00 and {latest}")
    return normalize_time_of_day(value) if value is not None else None


# --- Tasks ---

class TaskCreate(BaseModel):
    task: str
    due_date: Optional[str] = None  # YYYY-MM-DD
    due_time: Optional[str] = None
    month: Optional[str] = None  # Inferred from due_date when omitted
    room: Optional[str] = None

    @field_validator("task")
    @classmethod
    def task_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("task cannot be empty")
        return v.strip()

    @field_validator("due_date")
    @classmethod
    def clean_due_date(cls, v):
        return _clean(v)

    @field_validator("due_time")
    @classmethod
    def check_due_time(cls, v):
        return _check_time(v, max_hour=23)

    @field_validator("month")
    @classmethod
    def check_month(cls, v):
        return _check_month(v)

    @field_validator("room")
    @classmethod
    def check_room(cls, v):
        return _check_room(v)


class TaskUpdate(TaskCreate):
    task: Optional[str] = None
    complete: Optional[bool] = None

    @field_validator("task")
    @classmethod
    def task_not_blank(cls, v):
        if v is not None and not v.strip():
            raise ValueError("task cannot be empty")
        return v.strip() if v is not None else v


# --- Artists ---

class ArtistBase(BaseModel):
    name: Optional[str] = None
    stage_name: Optional[str] = None
    phone: Optional[str] = None
    social_media: Optional[str] = None
    month: Optional[str] = None
    room: Optional[str] = None
    start_time: Optional[str] = None  # 24+ hour encoding, latest "27:00"

    @field_validator("stage_name", "phone", "social_media")
    @classmethod
    def clean_text(cls, v):
        return _clean(v)

    @field_validator("name")
    @classmethod
    def clean_name(cls, v):
        return v.strip() if v is not None else v

    @field_validator("month")
    @classmethod
    def check_month(cls, v):
        return _check_month(v)

    @field_validator("room")
    @classmethod
    def check_room(cls, v):
        return _check_room(v)

    @field_validator("start_time")
    @classmethod
    def check_start_time(cls, v):
        return _check_time(v, max_hour=27)


class ArtistCreate(ArtistBase):
    @model_validator(mode="after")
    def check_required(self):
        if not self.name and not self.stage_name:
            raise ValueError("Either Name or Stage Name must be set.")
        if not self.month:
            raise ValueError("Please select a month for the artist.")
        return self


class ArtistUpdate(ArtistBase):
    pass


# --- Guests ---

class GuestBase(BaseModel):
    name: Optional[str] = None
    guest_of: Optional[str] = None
    contact: Optional[str] = None
    month: Optional[str] = None
    room: Optional[str] = None

    @field_validator("guest_of", "contact")
    @classmethod
    def clean_text(cls, v):
        return _clean(v)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        if v is not None and not v.strip():
            raise ValueError("Guest name cannot be empty.")
        return v.strip() if v is not None else v

    @field_validator("month")
    @classmethod
    def check_month(cls, v):
        return _check_month(v)

    @field_validator("room")
    @classmethod
    def check_room(cls, v):
        return _check_room(v)


class GuestCreate(GuestBase):
    @model_validator(mode="after")
    def check_required(self):
        if not self.name:
            raise ValueError("Guest name is required.")
        if not self.month:
            raise ValueError("Month is required.")
        return self


class GuestUpdate(GuestBase):
    pass


# --- Derived views ---

class TimeOption(BaseModel):
    value: str
    display_value: str


class SetTimeSlot(BaseModel):
    start_time: str
    end_time: str
    name: str


class SetTimesResponse(BaseModel):
    month: str
    room: str
    heading: str
    slots: List[SetTimeSlot]  # Chronological
    lines: List[str]  # Latest set first
    text: Optional[str] = None
    message: Optional[str] = None  # Set when there is nothing to show


class Bucket(BaseModel):
    month: str
    room: str
    heading: str
    items: List[Dict[str, Any]]


class AdvancementResponse(BaseModel):
    month: str
    room: str
    title: str
    content: str
    mailto: str


class ComposeResponse(BaseModel):
    uri: Optional[str] = None
    content: Optional[str] = None
    message: Optional[str] = None
