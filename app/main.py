from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api_routers.v1 import api_router
from app.features.health.routes.health import router as health_router
from app.platform.config import settings
from app.platform.db.session import init_models
from app.platform.exceptions import add_exception_handlers
from app.platform.logger import get_logger

logger = get_logger(__name__)

APP_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES_ON_STARTUP:
        logger.info("Creating database tables")
        await init_models()
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Waitlist signups for the product landing page",
        version=APP_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    # Root endpoint for basic info
    @app.get("/", tags=["Info"])
    def root():
        return {
            "app_name": f"{settings.APP_NAME} API",
            "description": "Waitlist signups for the product landing page.",
            "version": APP_VERSION,
            "docs_url": "/docs",
            "api_base": settings.API_PREFIX,
        }

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    add_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    return app


app = create_app()
