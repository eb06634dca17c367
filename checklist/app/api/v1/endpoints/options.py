from typing import List

from fastapi import APIRouter

from checklist.app.schemas.records import TimeOption
from checklist.app.utils.time_format import future_months, generate_time_options

router = APIRouter(prefix="/options", tags=["options"])

@router.get("/times", response_model=List[TimeOption])
def get_time_options():
    """Start time choices, 8:00 PM to 3:00 AM in 5 minute steps."""
    return generate_time_options()

@router.get("/months", response_model=List[str])
def get_future_months():
    return future_months()
