"""Liveness endpoint."""

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(request: Request):
    """Report liveness and which credentials are missing."""
    config = request.app.state.settings
    missing = config.missing_credentials()
    return {
        "status": "ok",
        "base_url": config.base_url,
        "configured": not missing,
        "missing_credentials": missing,
    }
