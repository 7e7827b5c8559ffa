from __future__ import annotations

import pytest

from fortune_cookie import create_app
from fortune_cookie.errors import ConfigurationError


def _data(resp):
    body = resp.get_json()
    assert body["success"] is True
    return body["data"]


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert _data(resp)["fortunes"] == 20


def test_index_renders_call_to_action(client):
    resp = client.get("/")

    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert "Fortune Cookie" in html
    assert "Reveal Your Fortune" in html
    assert "<section class=\"card\">" not in html


def test_reveal_cycle(client, scheduler, app):
    assert _data(client.get("/api/fortune"))["state"] == "idle"

    resp = client.post("/api/fortune/reveal")
    assert resp.status_code == 202
    view = _data(resp)
    assert view["state"] == "revealing"
    assert view["card"] is None
    assert view["trigger"]["disabled"] is True

    scheduler.advance(0.1)
    assert _data(client.get("/api/fortune"))["state"] == "revealing"

    scheduler.advance(0.1)
    view = _data(client.get("/api/fortune"))
    assert view["state"] == "ready"
    assert view["card"]["fortune"] in app.extensions["fortune_selector"].catalog
    numbers = view["card"]["lucky_numbers"]
    assert len(set(numbers)) == 6
    assert numbers == sorted(numbers)
    assert view["trigger"] == {"label": "Get Another Fortune", "disabled": False}

    html = client.get("/").get_data(as_text=True)
    assert "Get Another Fortune" in html
    assert "<section class=\"card\">" in html


def test_reveal_while_revealing_is_ignored(client, scheduler):
    client.post("/api/fortune/reveal")

    resp = client.post("/api/fortune/reveal")

    assert resp.status_code == 200
    assert _data(resp)["trigger"]["disabled"] is True
    assert len(scheduler.tasks) == 1


def test_visitors_have_separate_surfaces(app, scheduler):
    first = app.test_client()
    second = app.test_client()

    first.post("/api/fortune/reveal")
    scheduler.advance(0.2)

    assert _data(first.get("/api/fortune"))["state"] == "ready"
    assert _data(second.get("/api/fortune"))["state"] == "idle"


def test_delete_cancels_pending_reveal(client, scheduler):
    client.post("/api/fortune/reveal")

    resp = client.delete("/api/fortune")

    assert _data(resp) == {"removed": True}
    assert scheduler.tasks[0].cancelled
    assert _data(client.get("/api/fortune"))["state"] == "idle"


def test_draw_endpoint(client):
    resp = client.get("/api/fortune/draw?count=3")

    data = _data(resp)
    assert data["count"] == 3
    assert len(data["draws"]) == 3
    assert all(len(d["lucky_numbers"]) == 6 for d in data["draws"])


@pytest.mark.parametrize("count", ["0", "21", "many"])
def test_draw_endpoint_validates_count(client, count):
    resp = client.get(f"/api/fortune/draw?count={count}")

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert body["error"]["code"] == "validation_error"
    assert "count" in body["error"]["details"]


def test_unknown_route_is_not_found(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "not_found"


def test_empty_catalog_aborts_startup():
    with pytest.raises(ConfigurationError):
        create_app({"FORTUNE_CATALOG": []})


def test_seeded_draws_are_reproducible():
    a = create_app({"TESTING": True, "RANDOM_SEED": 99}).test_client()
    b = create_app({"TESTING": True, "RANDOM_SEED": 99}).test_client()

    assert _data(a.get("/api/fortune/draw?count=5")) == _data(b.get("/api/fortune/draw?count=5"))


def test_page_loads_without_cookie_do_not_evict_visitors(scheduler):
    app = create_app(
        {
            "TESTING": True,
            "MAX_SURFACES": 2,
            "REVEAL_SCHEDULER": scheduler,
        }
    )
    visitor = app.test_client()
    visitor.post("/api/fortune/reveal")
    scheduler.advance(0.2)

    for _ in range(3):
        assert app.test_client().get("/").status_code == 200
        assert app.test_client().get("/api/fortune").status_code == 200

    assert len(app.extensions["surface_registry"]) == 1
    assert _data(visitor.get("/api/fortune"))["state"] == "ready"


class _StuckSource:
    def next_int(self, bound: int) -> int:
        return 0


def test_draw_failure_uses_error_envelope():
    client = create_app({"TESTING": True, "FORTUNE_RANDOM_SOURCE": _StuckSource()}).test_client()

    resp = client.get("/api/fortune/draw")

    assert resp.status_code == 503
    body = resp.get_json()
    assert body["success"] is False
    assert body["data"] is None
    assert body["error"]["code"] == "draw_failed"
