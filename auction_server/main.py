import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import schemas
from .api.endpoints import admin, participants
from .core.config import Settings, load_settings
from .core.log import configure_logging
from .database import ParticipantStore

logger = logging.getLogger(__name__)


# --- Lifecycle Events ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting...")
    await app.state.store.connect()
    yield
    logger.info("Application shutting down...")
    await app.state.store.close()


def create_app(
    settings: Optional[Settings] = None, store: Optional[ParticipantStore] = None
) -> FastAPI:
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Auction Experiment Backend", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store or ParticipantStore(
        settings.database_url, echo=settings.database_echo
    )

    # --- CORS Middleware ---
    logger.info("CORS: allowed origins: %s", settings.allowed_origins)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(participants.router, tags=["participants"])
    app.include_router(admin.router, tags=["admin"])

    @app.get("/health", response_model=schemas.HealthResponse)
    async def health():
        return schemas.HealthResponse(status="ok")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = app.state.settings
    uvicorn.run(
        "auction_server.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload_app,
    )
