import time

from fastapi import APIRouter, Depends

from routers.deps import get_directory
from services.visa_directory import VisaDirectory

router = APIRouter()

_start_time = time.time()

VERSION = "0.1.0"


@router.get("/health")
async def health_check(directory: VisaDirectory = Depends(get_directory)):
    return {
        "status": "ok" if directory.available else "degraded",
        "data_loaded": directory.available,
        "record_count": directory.record_count,
        "region_count": directory.region_count,
        "uptime_seconds": round(time.time() - _start_time),
        "version": VERSION,
    }
