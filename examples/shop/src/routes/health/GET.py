"""Health check endpoint."""

from __future__ import annotations


async def get(request: object) -> str:
    """Return a simple health check response."""
    return '{"status": "ok", "runtime": "burrow"}'
