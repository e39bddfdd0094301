# -*- coding: utf-8 -*-

# stdlib imports
from contextlib import asynccontextmanager

# third party imports
from fastapi import FastAPI
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

# app imports
from netcfg_core.__version__ import __license__, __license_url__, __version__
from netcfg_core.api.api_v1.api import api_router
from netcfg_core.core.config import endpoints, settings
from netcfg_core.core.logging import configure_logging, get_logger


def list_endpoints(app: FastAPI) -> list[dict]:
    """
    Lists the documented endpoints with their full paths, from the OpenAPI
    schema so nested routers are included
    """
    listed = []
    for path, operations in app.openapi()["paths"].items():
        descriptions = [op.get("description", "") for op in operations.values()]
        listed.append(
            {
                "path": path,
                "methods": "".join(method.upper() for method in operations),
                "description": next(filter(None, descriptions), "")
                .strip()
                .split("\n")[0],
            }
        )
    return listed


def create_app(debug: bool = False):
    configure_logging(debug_mode=debug, log_dir=settings.LOG_DIR)
    log = get_logger(__name__)

    if debug:
        log.debug("Starting application in DEBUG mode")

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        log.info(f"Starting {settings.PROJECT_NAME} {__version__}")
        yield
        log.info("Application shutting down")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=__version__,
        license_info={"name": __license__, "url": __license_url__},
        docs_url="/docs",
        redoc_url=None,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        openapi_tags=settings.TAGS_METADATA,
        debug=debug,
        lifespan=lifespan,
    )

    # setup slowapi
    limiter = Limiter(key_func=get_remote_address, default_limits=[settings.RATE_LIMIT])
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # setup router
    app.include_router(api_router, prefix=settings.API_V1_STR)
    endpoints[:] = list_endpoints(app)

    @app.get("/", include_in_schema=False)
    async def index():
        return {
            "name": settings.PROJECT_NAME,
            "version": __version__,
            "endpoints": endpoints,
        }

    return app
