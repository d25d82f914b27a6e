"""FastAPI application entry point.

Run with: uvicorn src.main:app --loop uvloop --port 3000
      or: python -m src.main
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text
from starlette.exceptions import HTTPException as StarletteHTTPException

from config.settings import settings
from src.uc_cache.domain.cache import CacheProtocol
from src.uc_cache.infrastructure.memory_cache import InMemoryCache
from src.uc_cache.infrastructure.redis_cache import RedisCache
from src.uc_common.database import create_engine, create_session_factory
from src.uc_common.errors import AppError, CacheError
from src.uc_common.redis_client import close_redis, create_redis
from src.uc_common.response import error_response
from src.uc_gateway.middleware.request_log import RequestLogMiddleware
from src.uc_user.api.router import router as users_router
from src.uc_user.application.cached_repository import CachedUserRepository
from src.uc_user.infrastructure.persistence import UserStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: open store + cache, wire the repository. Shutdown: close both."""
    engine = create_engine(settings)
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))

    redis_client = None
    cache: CacheProtocol
    if settings.CACHE_BACKEND == "memory":
        cache = InMemoryCache()
    else:
        redis_client = create_redis(settings)
        cache = RedisCache(redis_client)
        try:
            await cache.ping()
        except CacheError as exc:
            # every read misses until Redis comes back
            logger.warning("Redis unavailable at startup, serving from store: %s", exc)

    app.state.user_repository = CachedUserRepository(
        store=UserStore(create_session_factory(engine)),
        cache=cache,
        ttl_seconds=settings.CACHE_TTL_SECONDS,
    )
    logger.info(
        "Started %s (cache=%s, ttl=%ss)",
        settings.APP_NAME,
        settings.CACHE_BACKEND,
        settings.CACHE_TTL_SECONDS,
    )
    yield
    await engine.dispose()
    if redis_client is not None:
        await close_redis(redis_client)


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


_INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error_json(http_status: int, message: str) -> JSONResponse:
    body = error_response(http_status, message)
    return JSONResponse(status_code=http_status, content=body.model_dump(by_alias=True))


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc
        )
        # detail stays in the log; it may carry SQL text and bound values
        return _error_json(exc.http_status, _INTERNAL_ERROR_MESSAGE)
    return _error_json(exc.http_status, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return _error_json(400, problems or "Invalid request")


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_json(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "%s %s raised unexpectedly", request.method, request.url.path, exc_info=exc
    )
    return _error_json(500, _INTERNAL_ERROR_MESSAGE)


app.include_router(users_router, prefix="/api")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, loop="uvloop")
