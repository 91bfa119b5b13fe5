"""Liveness endpoint for the stub API."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live", summary="Liveness probe")
async def live(request: Request) -> dict[str, Any]:
    """Indicates the stub process is running and how many products it holds."""
    return {
        "status": "ok",
        "service": "product-board-stub-api",
        "products": len(request.app.state.store),
    }
