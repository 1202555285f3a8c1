from typing import Optional

from fastapi import APIRouter, Depends

from ..dependencies import get_content_store
from ..errors import NotFoundError
from ..services.content_store import ContentStore

router = APIRouter(prefix="/api/courses", tags=["courses"])


@router.get("")
async def list_courses(
    search: Optional[str] = None,
    semester: Optional[str] = None,
    instructor: Optional[str] = None,
    credits: Optional[int] = None,
    content: ContentStore = Depends(get_content_store),
):
    courses = content.find_courses(search=search, semester=semester, instructor=instructor, credits=credits)
    return {"success": True, "count": len(courses), "data": courses}


@router.get("/stats/overview")
async def course_stats(content: ContentStore = Depends(get_content_store)):
    return {"success": True, "data": content.course_stats()}


@router.get("/semester/{semester}")
async def courses_by_semester(semester: str, content: ContentStore = Depends(get_content_store)):
    courses = content.find_courses(semester=semester)
    return {"success": True, "count": len(courses), "data": courses}


@router.get("/instructor/{instructor}")
async def courses_by_instructor(instructor: str, content: ContentStore = Depends(get_content_store)):
    courses = content.find_courses(instructor=instructor)
    return {"success": True, "count": len(courses), "data": courses}


@router.get("/{course_id}/prerequisites")
async def course_prerequisites(course_id: str, content: ContentStore = Depends(get_content_store)):
    view = content.course_prerequisites(course_id)
    if view is None:
        raise NotFoundError("Course not found")
    return {"success": True, "data": view}


@router.get("/{course_id}")
async def get_course(course_id: str, content: ContentStore = Depends(get_content_store)):
    course = content.get_course(course_id)
    if course is None:
        raise NotFoundError("Course not found")
    return {"success": True, "data": course}
