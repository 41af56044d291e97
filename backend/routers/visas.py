from fastapi import APIRouter, Depends

from models.visa import CountryVisaRecord, VisaLookup
from routers.deps import get_directory
from services.visa_directory import VisaDirectory

router = APIRouter(tags=["visas"])


@router.get("/visas", response_model=list[CountryVisaRecord])
async def list_visas(
    region: str | None = None,
    directory: VisaDirectory = Depends(get_directory),
):
    return directory.filter_by_region(region)


@router.get("/visa", response_model=VisaLookup)
async def get_visa(
    country: str | None = None,
    directory: VisaDirectory = Depends(get_directory),
):
    # Missing "country" is reported as invalid_query rather than FastAPI's 422
    return directory.find_by_country(country)


@router.get("/visa/{country}", response_model=VisaLookup)
async def get_visa_by_path(
    country: str,
    directory: VisaDirectory = Depends(get_directory),
):
    return directory.find_by_country(country)
