from fastapi import APIRouter, Depends

from routers.deps import get_directory
from services.visa_directory import VisaDirectory

router = APIRouter(prefix="/regions", tags=["regions"])


@router.get("", response_model=list[str])
async def list_regions(directory: VisaDirectory = Depends(get_directory)):
    return directory.list_regions()
