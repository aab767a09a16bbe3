"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, status

from mongobrowser.dependencies.registry import Registry

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with session count",
)
async def readiness_check(registry: Registry):
    """
    Readiness check reporting the number of open sessions.
    """
    return {
        "status": "healthy",
        "active_sessions": len(registry),
    }
