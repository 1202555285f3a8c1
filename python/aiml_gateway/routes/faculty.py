from typing import Optional

from fastapi import APIRouter, Depends

from ..dependencies import get_content_store
from ..errors import NotFoundError
from ..services.content_store import ContentStore

router = APIRouter(prefix="/api/faculty", tags=["faculty"])


@router.get("")
async def list_faculty(
    search: Optional[str] = None,
    designation: Optional[str] = None,
    specialization: Optional[str] = None,
    content: ContentStore = Depends(get_content_store),
):
    faculty = content.find_faculty(search=search, designation=designation, specialization=specialization)
    return {"success": True, "count": len(faculty), "data": faculty}


@router.get("/stats/overview")
async def faculty_stats(content: ContentStore = Depends(get_content_store)):
    return {"success": True, "data": content.faculty_stats()}


@router.get("/designation/{designation}")
async def faculty_by_designation(designation: str, content: ContentStore = Depends(get_content_store)):
    faculty = content.find_faculty(designation=designation)
    return {"success": True, "count": len(faculty), "data": faculty}


@router.get("/specialization/{specialization}")
async def faculty_by_specialization(specialization: str, content: ContentStore = Depends(get_content_store)):
    faculty = content.find_faculty(specialization=specialization)
    return {"success": True, "count": len(faculty), "data": faculty}


@router.get("/{faculty_id}")
async def get_faculty(faculty_id: str, content: ContentStore = Depends(get_content_store)):
    faculty = content.get_faculty(faculty_id)
    if faculty is None:
        raise NotFoundError("Faculty member not found")
    return {"success": True, "data": faculty}
