"""Fortune selector + reveal session wiring.

Uses a session-per-visitor pattern: each browser gets an id in the signed
Flask session cookie, mapped to an in-memory reveal session.
"""

from __future__ import annotations

import atexit
import logging
import uuid

from flask import Flask, current_app, g, session

from fortune_cookie.catalog import DEFAULT_FORTUNES, FortuneCatalog
from fortune_cookie.services.fortune_service import FortuneSelector, SystemRandomSource
from fortune_cookie.services.reveal_service import (
    RevealSession,
    RevealSnapshot,
    RevealState,
    SurfaceRegistry,
    TimerScheduler,
)


logger = logging.getLogger(__name__)

_SESSION_KEY = "surface_id"


def init_surfaces(app: Flask) -> None:
    """Build the fortune selector and the reveal session registry.

    Raises:
        ConfigurationError: if the fortune catalog is empty.
    """

    catalog = FortuneCatalog(app.config.get("FORTUNE_CATALOG", DEFAULT_FORTUNES))

    random_source = app.config.get("FORTUNE_RANDOM_SOURCE") or SystemRandomSource(
        app.config.get("RANDOM_SEED")
    )
    selector = FortuneSelector(catalog, random_source=random_source)

    scheduler = app.config.get("REVEAL_SCHEDULER") or TimerScheduler()
    delay = int(app.config.get("REVEAL_DELAY_MS", 200)) / 1000.0

    registry = SurfaceRegistry(
        factory=lambda: RevealSession(selector, scheduler, delay=delay),
        max_sessions=int(app.config.get("MAX_SURFACES", 1000)),
    )

    app.extensions["fortune_selector"] = selector
    app.extensions["surface_registry"] = registry
    # Cancel pending reveal timers on interpreter shutdown.
    atexit.register(registry.close_all)

    logger.info("Loaded fortune catalog with %d entries", len(catalog))

    @app.before_request
    def _bind_surface_id() -> None:
        surface_id = session.get(_SESSION_KEY)
        if not surface_id:
            surface_id = uuid.uuid4().hex
            session[_SESSION_KEY] = surface_id
        g.surface_id = surface_id  # type: ignore[attr-defined]


def get_selector() -> FortuneSelector:
    return current_app.extensions["fortune_selector"]


def get_registry() -> SurfaceRegistry:
    return current_app.extensions["surface_registry"]


def get_surface_id() -> str:
    surface_id: str | None = getattr(g, "surface_id", None)
    if surface_id is None:
        raise RuntimeError("Surface id not initialized")
    return surface_id


def get_surface() -> RevealSession:
    """Get (or create) the current visitor's reveal session."""

    return get_registry().get(get_surface_id())


def get_snapshot() -> RevealSnapshot:
    """Read the current visitor's surface without allocating a session.

    Visitors who never triggered a reveal are rendered idle.
    """

    surface = get_registry().peek(get_surface_id())
    if surface is None:
        return RevealSnapshot(state=RevealState.IDLE)
    return surface.snapshot()
