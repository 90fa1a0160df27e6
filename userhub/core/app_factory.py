from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.asyncio import ConnectionPool

from .config import Settings
from .container import ApplicationContainer
from .logging import configure_logging
from ..application.services.user_service import UsersService, new_service
from ..domain.errors import ServiceInitError
from ..presentation.api.routers import users as users_router

logger = logging.getLogger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    users_service: Optional[UsersService] = None,
) -> FastAPI:
    settings = settings or Settings()

    app = FastAPI(title="User Service", lifespan=_create_lifespan(settings, users_service))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(users_router.router)

    @app.get("/health")
    async def health() -> Dict[str, Any]:
        return {"ok": True}

    return app


def _create_lifespan(settings: Settings, users_service: Optional[UsersService]):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        configure_logging(settings.log_level)
        redis_pool: Optional[ConnectionPool] = None
        service = users_service
        if service is None:
            redis_pool = ConnectionPool.from_url(
                settings.redis_url,
                max_connections=settings.redis_max_connections,
            )
            try:
                service = new_service(
                    logging.getLogger("userhub.users"),
                    settings.database_path,
                    redis_pool,
                    cache_ttl_seconds=settings.cache_ttl_seconds,
                )
            except ServiceInitError:
                await redis_pool.disconnect()
                raise
            logger.info(
                "User service ready (database=%s, cache=%s)",
                settings.database_path,
                settings.redis_url,
            )

        app.state.container = ApplicationContainer(  # type: ignore[attr-defined]
            settings=settings,
            users_service=service,
        )

        try:
            yield
        finally:
            if redis_pool is not None:
                await redis_pool.disconnect()

    return lifespan
