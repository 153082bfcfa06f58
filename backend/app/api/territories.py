"""Territory directory lookups used to drive cascading zone/thana/area selects."""

from fastapi import APIRouter, Depends

from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.services import territory

router = APIRouter(prefix="/territories", tags=["territories"])


@router.get("/zones", response_model=list[str])
async def list_zones(current_user: User = Depends(get_current_user)):
    return territory.zones()


@router.get("/thanas", response_model=list[str])
async def list_thanas(zone: str, current_user: User = Depends(get_current_user)):
    return territory.thanas_of(zone)


@router.get("/areas", response_model=list[str])
async def list_areas(zone: str, thana: str, current_user: User = Depends(get_current_user)):
    return territory.areas_of(zone, thana)
