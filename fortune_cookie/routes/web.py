"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, render_template

from fortune_cookie.services.surface import render_surface
from fortune_cookie.surfaces import get_snapshot


web_bp = Blueprint("web", __name__)


@web_bp.get("/")
def index():
    view = render_surface(get_snapshot())
    return render_template(
        "index.html",
        view=view,
        reveal_delay_ms=int(current_app.config.get("REVEAL_DELAY_MS", 200)),
    )


@web_bp.get("/favicon.ico")
def favicon() -> Response:
    svg = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>
    <defs>
        <radialGradient id='g' cx='35%' cy='30%' r='80%'>
            <stop offset='0%' stop-color='#fde68a'/>
            <stop offset='60%' stop-color='#f59e0b'/>
            <stop offset='100%' stop-color='#92400e'/>
        </radialGradient>
    </defs>
    <path d='M8 38 C8 18 56 18 56 38 C46 30 38 44 32 30 C26 44 18 30 8 38 Z' fill='url(#g)'/>
    <path d='M32 30 L34 46' stroke='#fff7ed' stroke-width='2' stroke-linecap='round'/>
</svg>"""

    return Response(svg, mimetype="image/svg+xml")
