from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from core.logging import get_module_logger
from modules.member_groups.dependencies import build_context, build_locale_resolver

logger = get_module_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire the member group collaborators onto ``app.state``.

    A context that is already present (e.g. set by tests) is left alone.
    """
    if getattr(app.state, "member_groups", None) is None:
        try:
            app.state.member_groups = build_context()
        except Exception as e:
            # Fail fast: the API is useless without its stores
            logger.error("member_groups_startup_failed", error=str(e))
            raise
    if getattr(app.state, "locale_resolver", None) is None:
        app.state.locale_resolver = build_locale_resolver()

    logger.info(
        "application_startup",
        locales=[
            locale.value
            for locale in app.state.member_groups.translator.get_available_locales()
        ],
    )
    yield
    logger.info("application_shutdown")
