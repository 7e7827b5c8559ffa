"""Fortune routes (controllers). No business logic here."""

from __future__ import annotations

import logging

from flask import Blueprint, request

from fortune_cookie.schemas.fortune import DrawQuerySchema, FortuneDrawSchema, SurfaceViewSchema
from fortune_cookie.services.surface import render_surface
from fortune_cookie.surfaces import get_registry, get_selector, get_snapshot, get_surface, get_surface_id
from fortune_cookie.utils.responses import ok


logger = logging.getLogger(__name__)

fortune_bp = Blueprint("fortune", __name__)

_query_schema = DrawQuerySchema()
_draws_schema = FortuneDrawSchema(many=True)
_view_schema = SurfaceViewSchema()


@fortune_bp.get("/fortune")
def get_fortune():
    """Current surface for this visitor."""

    return ok(_view_schema.dump(render_surface(get_snapshot())))


@fortune_bp.post("/fortune/reveal")
def reveal_fortune():
    """Trigger a reveal.

    202 when accepted; 200 with the unchanged surface while a reveal is
    already pending (the trigger is disabled).
    """

    surface = get_surface()
    accepted = surface.trigger()
    if not accepted:
        logger.debug("Reveal ignored for %s: already revealing", get_surface_id())

    view = _view_schema.dump(render_surface(surface.snapshot()))
    return ok(view, status_code=202 if accepted else 200)


@fortune_bp.delete("/fortune")
def reset_fortune():
    """Tear down this visitor's surface, cancelling any pending reveal."""

    removed = get_registry().discard(get_surface_id())
    return ok({"removed": removed})


@fortune_bp.get("/fortune/draw")
def draw_fortunes():
    """Draw fortunes immediately, without the reveal cycle."""

    data = _query_schema.load(request.args)
    draws = get_selector().draw_many(int(data.get("count") or 1))
    return ok({"draws": _draws_schema.dump(draws), "count": len(draws)})
