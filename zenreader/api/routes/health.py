"""Health check API route."""

from fastapi import APIRouter, Request

from zenreader import __version__

router = APIRouter()


@router.get("/health")
async def health_check(request: Request) -> dict:
    """Health check endpoint."""
    engine = getattr(request.app.state, "engine", None)

    return {
        "status": "ok" if engine is not None else "degraded",
        "engine": "running" if engine is not None else "unavailable",
        "version": __version__,
    }
