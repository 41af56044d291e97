from fastapi import APIRouter, Depends

from models.country import CountrySummary
from routers.deps import get_directory
from services.visa_directory import VisaDirectory

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=list[CountrySummary])
async def list_countries(directory: VisaDirectory = Depends(get_directory)):
    return directory.list_countries()
