"""Health check routes."""

from __future__ import annotations

from flask import Blueprint

from fortune_cookie.surfaces import get_registry, get_selector
from fortune_cookie.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint."""

    return ok(
        {
            "status": "ok",
            "fortunes": len(get_selector().catalog),
            "surfaces": len(get_registry()),
        }
    )
