import logging
import os
import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from school_admin.config.settings import Settings, settings as default_settings
from school_admin.mock_backend.router import build_collection_router, dashboard_router
from school_admin.mock_backend.store import MockStore

logger = logging.getLogger(__name__)


def create_app(store: MockStore = None, seed: bool = True) -> FastAPI:
    """Create the mock school backend used for local development and tests."""
    store = store or MockStore()
    if seed:
        store.seed()

    app = FastAPI(
        title="School Admin Mock Backend",
        description="In-memory stand-in for the school management API",
        version="1.0.0",
    )
    app.state.store = store

    # For development/testing, allow all origins unless restricted
    allowed_origins = os.getenv("MOCK_ALLOWED_ORIGINS", "*").split(",")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/health", tags=["health"])
    def health_check():
        """Health check endpoint to verify the mock backend is running"""
        logger.info(f"Health check called - Environment: {default_settings.APP_ENV}")
        return {"status": "healthy", "environment": default_settings.APP_ENV, "timestamp": time.time()}

    for resource, collection in store.collections.items():
        app.include_router(build_collection_router(resource, collection))
    app.include_router(dashboard_router)

    logger.info(f"Mock backend created with resources: {', '.join(store.collections)}")
    return app


def serve(settings: Settings = None) -> None:
    import uvicorn

    settings = settings or default_settings
    print(f"Starting mock backend on http://{settings.MOCK_BACKEND_HOST}:{settings.MOCK_BACKEND_PORT} ...")
    uvicorn.run(
        create_app(),
        host=settings.MOCK_BACKEND_HOST,
        port=settings.MOCK_BACKEND_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == '__main__':
    serve()
