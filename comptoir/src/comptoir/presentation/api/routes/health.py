"""
Health check API routes.

Kubernetes-compatible liveness and readiness probes.
"""

from fastapi import APIRouter, Response, status

from comptoir import __version__
from comptoir.config.settings import get_settings
from comptoir.di.container import get_container

router = APIRouter(prefix="/health", tags=["Health"])


async def _component_status() -> dict:
    """Check database and, when enabled, Redis."""
    container = get_container()
    settings = get_settings()

    components = {
        "database": "healthy" if await container.database.health_check() else "unhealthy"
    }
    if settings.REDIS_ENABLED:
        redis_ok = await container.cache_client.ping()
        components["cache"] = "healthy" if redis_ok else "unhealthy"

    return components


@router.get("", status_code=status.HTTP_200_OK)
async def health(response: Response):
    """
    Overall service health.

    Returns 503 when any component is unhealthy.
    """
    components = await _component_status()
    healthy = all(state == "healthy" for state in components.values())

    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if healthy else "degraded",
        "version": __version__,
        "components": components,
    }


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """
    Liveness probe endpoint.

    The process is alive if it can answer at all.
    """
    return {"status": "healthy"}


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(response: Response):
    """
    Readiness probe endpoint.

    Ready once the database answers.
    """
    components = await _component_status()
    ready = components["database"] == "healthy"

    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {"status": "ready" if ready else "not_ready", "components": components}
