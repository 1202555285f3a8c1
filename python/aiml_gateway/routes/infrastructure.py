from typing import Optional

from fastapi import APIRouter, Depends

from ..dependencies import get_content_store
from ..errors import NotFoundError
from ..services.content_store import ContentStore

router = APIRouter(prefix="/api/infrastructure", tags=["infrastructure"])

INFRA_NOT_FOUND = "Infrastructure details not found"


def _infra(content: ContentStore, department: Optional[str] = None):
    infra = content.infrastructure_for(department)
    if infra is None:
        if department:
            raise NotFoundError("Infrastructure details not found for the specified department")
        raise NotFoundError(INFRA_NOT_FOUND)
    return infra


@router.get("")
async def get_infrastructure(department: Optional[str] = None, content: ContentStore = Depends(get_content_store)):
    return {"success": True, "data": _infra(content, department)}


@router.get("/labs")
async def list_labs(
    search: Optional[str] = None,
    capacity: Optional[int] = None,
    content: ContentStore = Depends(get_content_store),
):
    labs = content.labs(search=search, min_capacity=capacity)
    if labs is None:
        raise NotFoundError(INFRA_NOT_FOUND)
    return {"success": True, "count": len(labs), "data": labs}


@router.get("/labs/{lab_name}")
async def get_lab(lab_name: str, content: ContentStore = Depends(get_content_store)):
    _infra(content)
    lab = content.lab(lab_name)
    if lab is None:
        raise NotFoundError("Lab not found")
    return {"success": True, "data": lab}


@router.get("/research")
async def research_facilities(search: Optional[str] = None, content: ContentStore = Depends(get_content_store)):
    facilities = content.research_facilities(search)
    if facilities is None:
        raise NotFoundError(INFRA_NOT_FOUND)
    return {"success": True, "count": len(facilities), "data": facilities}


@router.get("/library")
async def library(content: ContentStore = Depends(get_content_store)):
    return {"success": True, "data": _infra(content).library}


@router.get("/computer-labs")
async def computer_labs(content: ContentStore = Depends(get_content_store)):
    return {"success": True, "data": _infra(content).computerLabs}


@router.get("/stats")
async def infrastructure_stats(content: ContentStore = Depends(get_content_store)):
    stats = content.infrastructure_stats()
    if stats is None:
        raise NotFoundError(INFRA_NOT_FOUND)
    return {"success": True, "data": stats}
