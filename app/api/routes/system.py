from fastapi import APIRouter, Request
from core.config import settings
from api.dependencies.rate_limits import get_limiter

router = APIRouter(tags=["System"])
limiter = get_limiter()


# Load balancer health checks hit these often, so the limit is generous
@router.get("/version")
@limiter.limit(settings.server.SYSTEM_RATE_LIMIT)
def get_version(request: Request):  # pylint: disable=unused-argument
    """Get the version of the application."""
    return {"version": settings.GIT_SHA}


@router.get("/health")
@limiter.limit(settings.server.SYSTEM_RATE_LIMIT)
def get_health(request: Request):
    """Healthcheck endpoint.

    Reports ``starting`` until the member group stores are wired up.
    """
    ready = getattr(request.app.state, "member_groups", None) is not None
    return {"status": "ok" if ready else "starting"}
