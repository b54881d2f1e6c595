"""
Forum backend — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_exception_handlers, register_middleware
from api.routes import router as questions_router
from auth.jwt import TokenService
from auth.routes import router as auth_router
from config.settings import Settings, config
from database.session import build_engine, build_session_factory, init_models

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("sqlalchemy.engine", "aiosqlite", "asyncio"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or config

    app = FastAPI(
        title="Forum Backend",
        version="1.0.0",
        description="Questions, replies and token-based auth.",
    )

    # Process-wide state: one engine, one session factory, one token service.
    app.state.settings = settings
    app.state.engine = build_engine(settings)
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.token_service = TokenService(settings.jwt_secret, settings.jwt_expiry_seconds)

    register_middleware(app)
    register_exception_handlers(app)

    # CORS is added last so it wraps every response, including the 500 fallback.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routes
    app.include_router(auth_router)
    app.include_router(questions_router)

    @app.on_event("startup")
    async def on_startup():
        if settings.uses_default_secret:
            logger.warning("JWT_SECRET not set — using the built-in development secret.")
        logger.info("Creating database tables…")
        await init_models(app.state.engine)
        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await app.state.engine.dispose()

    return app


configure_logging(config)
app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        log_level="debug" if config.debug else "info",
    )
