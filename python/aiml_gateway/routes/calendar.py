from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..dependencies import get_content_store
from ..errors import NotFoundError
from ..services.content_store import ContentStore

router = APIRouter(prefix="/api/calendar", tags=["calendar"])

CALENDAR_NOT_FOUND = "Academic calendar not found"


def _found(value, message: str = CALENDAR_NOT_FOUND):
    if value is None:
        raise NotFoundError(message)
    return value


@router.get("")
async def get_calendar(year: Optional[str] = None, content: ContentStore = Depends(get_content_store)):
    """Exact academic year when `year` is given, otherwise the most recent calendar"""
    message = "Academic calendar not found for the specified year" if year else CALENDAR_NOT_FOUND
    return {"success": True, "data": _found(content.calendar(year), message)}


@router.get("/events/{event_type}")
async def events_by_type(event_type: str, year: Optional[str] = None, content: ContentStore = Depends(get_content_store)):
    events = _found(content.events_by_type(event_type, year))
    return {"success": True, "count": len(events), "data": {"events": events}}


@router.get("/upcoming")
async def upcoming_events(
    limit: int = Query(10, ge=1, le=100),
    year: Optional[str] = None,
    content: ContentStore = Depends(get_content_store),
):
    events = _found(content.upcoming_events(date.today(), limit=limit, year=year))
    return {"success": True, "count": len(events), "data": events}


@router.get("/exams")
async def exam_schedule(
    semester: Optional[str] = None,
    year: Optional[str] = None,
    content: ContentStore = Depends(get_content_store),
):
    schedule = _found(content.exam_schedule(semester=semester, year=year))
    return {"success": True, "count": len(schedule), "data": schedule}


@router.get("/semesters")
async def semesters(year: Optional[str] = None, content: ContentStore = Depends(get_content_store)):
    items = _found(content.semesters(year))
    return {"success": True, "count": len(items), "data": items}


@router.get("/current-semester")
async def current_semester(content: ContentStore = Depends(get_content_store)):
    if content.calendar() is None:
        raise NotFoundError(CALENDAR_NOT_FOUND)
    # null data between semesters is not an error
    return {"success": True, "data": content.current_semester(date.today())}
