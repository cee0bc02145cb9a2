"""Health check endpoints."""

from fastapi import APIRouter

router = APIRouter(tags=["health"])

SERVICE_NAME = "meeting-equity"


@router.get("/health")
async def health() -> dict[str, str]:
    """Return service health; the engine has no dependencies to probe."""
    return {"status": "ok", "service": SERVICE_NAME}
