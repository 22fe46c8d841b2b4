from typing import Optional
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core.config import settings
from core.logging import bind_request_context, clear_request_context, get_module_logger
from api.router import api_router
from api.dependencies.rate_limits import setup_rate_limiter
from modules.member_groups.service import MemberGroupContext
from server.lifespan import lifespan

logger = get_module_logger()


def create_app(context: Optional[MemberGroupContext] = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        context: Pre-built member group collaborators. When omitted they are
            created on startup by ``server.lifespan``.
    """
    app = FastAPI(
        title="Member Groups API",
        version=settings.GIT_SHA,
        lifespan=lifespan,
    )
    if context is not None:
        app.state.member_groups = context

    setup_rate_limiter(app)

    allow_origins = ["*"] if settings.is_production else settings.server.CORS_ALLOW_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_request_logging_context(request: Request, call_next):
        request_id = request.headers.get("x-request-id") or uuid4().hex
        bind_request_context(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )
        try:
            response = await call_next(request)
        finally:
            clear_request_context()
        response.headers["x-request-id"] = request_id
        return response

    app.include_router(api_router)
    return app


handler = create_app()
