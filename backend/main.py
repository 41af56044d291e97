import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Settings, settings as default_settings
from routers import countries, health, regions, visas
from routers.health import VERSION
from services.loader import build_directory
from services.visa_directory import VisaDirectoryError

logger = logging.getLogger(__name__)


async def _directory_error_handler(request: Request, exc: VisaDirectoryError):
    # Load failures were already logged by build_directory
    if exc.status_code < 500:
        logger.debug("%s %s -> %d %s", request.method, request.url.path,
                     exc.status_code, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "detail": str(exc)},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Visa Directory", version=VERSION)

    # Loaded once; handlers only ever read it
    app.state.directory = build_directory(settings)

    app.add_exception_handler(VisaDirectoryError, _directory_error_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    for module in (health, countries, regions, visas):
        # With a prefix, only the prefixed routes go into the OpenAPI schema
        app.include_router(module.router, include_in_schema=not settings.api_prefix)
        if settings.api_prefix:
            app.include_router(module.router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        return {
            "name": "Visa Directory API",
            "version": VERSION,
            "endpoints": ["/health", "/countries", "/regions", "/visas", "/visa"],
        }

    return app


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:create_app",
        factory=True,
        host=default_settings.host,
        port=default_settings.port,
    )
