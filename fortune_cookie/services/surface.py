"""Pure rendering of a reveal snapshot into the page's visual tree."""

from __future__ import annotations

from typing import Any

from fortune_cookie.services.reveal_service import RevealSnapshot, RevealState


TITLE = "Fortune Cookie"
SUBTITLE = "Discover your fortune and lucky numbers"
REVEAL_LABEL = "Reveal Your Fortune"
AGAIN_LABEL = "Get Another Fortune"


def render_surface(snapshot: RevealSnapshot) -> dict[str, Any]:
    """Build the visual tree for a snapshot.

    The card is present only once a fortune is ready; while revealing it is
    gated out and the trigger is disabled.
    """

    card: dict[str, Any] | None = None
    if snapshot.state == RevealState.READY and snapshot.fortune is not None:
        card = {
            "fortune": snapshot.fortune,
            "lucky_numbers": list(snapshot.lucky_numbers),
        }

    label = AGAIN_LABEL if snapshot.fortune is not None else REVEAL_LABEL

    return {
        "state": snapshot.state.value,
        "title": TITLE,
        "subtitle": SUBTITLE,
        "card": card,
        "trigger": {
            "label": label,
            "disabled": snapshot.state == RevealState.REVEALING,
        },
    }
