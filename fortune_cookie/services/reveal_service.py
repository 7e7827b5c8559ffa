"""Reveal state machine and the per-visitor session registry."""

from __future__ import annotations

import logging
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from threading import Lock, RLock, Timer
from typing import Callable, Protocol

from fortune_cookie.services.fortune_service import FortuneSelector


logger = logging.getLogger(__name__)


class RevealState(str, Enum):
    IDLE = "idle"
    REVEALING = "revealing"
    READY = "ready"


@dataclass(frozen=True)
class RevealSnapshot:
    state: RevealState
    fortune: str | None = None
    lucky_numbers: tuple[int, ...] = ()


class ScheduledTask(Protocol):
    def cancel(self) -> None:
        ...


class Scheduler(Protocol):
    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        ...


class TimerScheduler:
    """Run each callback once on a daemon :class:`threading.Timer`."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> ScheduledTask:
        timer = Timer(max(0.0, delay), callback)
        timer.daemon = True
        timer.start()
        return timer


class RevealSession:
    """One visitor's reveal cycle: idle -> revealing -> ready -> revealing -> ...

    The trigger and the delayed completion are serialized by a lock, so the
    three pieces of state are never observed half-updated.
    """

    def __init__(
        self,
        selector: FortuneSelector,
        scheduler: Scheduler,
        delay: float = 0.2,
    ) -> None:
        self._selector = selector
        self._scheduler = scheduler
        self._delay = delay

        self._lock = RLock()
        self._state = RevealState.IDLE
        self._fortune: str | None = None
        self._lucky_numbers: tuple[int, ...] = ()
        self._pending: ScheduledTask | None = None
        self._closed = False

    @property
    def state(self) -> RevealState:
        with self._lock:
            return self._state

    @property
    def trigger_enabled(self) -> bool:
        with self._lock:
            return not self._closed and self._state != RevealState.REVEALING

    def trigger(self) -> bool:
        """Start a reveal.

        Returns False without side effects while a reveal is already pending
        or after the session has been closed.
        """

        with self._lock:
            if self._closed or self._state == RevealState.REVEALING:
                return False

            self._state = RevealState.REVEALING
            self._pending = self._scheduler.schedule(self._delay, self._complete)
            return True

    def _complete(self) -> None:
        with self._lock:
            if self._closed or self._state != RevealState.REVEALING:
                return

            try:
                fortune = self._selector.draw_fortune()
                lucky_numbers = self._selector.draw_lucky_numbers()
            except Exception:
                # Timer thread: nothing above to propagate to. Trigger must not stay disabled.
                logger.exception("Fortune reveal failed")
                self._pending = None
                self._state = RevealState.READY if self._fortune is not None else RevealState.IDLE
                return

            self._fortune = fortune
            self._lucky_numbers = lucky_numbers
            self._pending = None
            self._state = RevealState.READY

        logger.debug("Fortune revealed: %s %s", fortune, list(lucky_numbers))

    def snapshot(self) -> RevealSnapshot:
        with self._lock:
            return RevealSnapshot(
                state=self._state,
                fortune=self._fortune,
                lucky_numbers=self._lucky_numbers,
            )

    def close(self) -> None:
        """Cancel any pending reveal. Idempotent."""

        with self._lock:
            self._closed = True
            pending, self._pending = self._pending, None

        if pending is not None:
            pending.cancel()


class SurfaceRegistry:
    """Reveal sessions keyed by visitor id, least recently used evicted first."""

    def __init__(
        self,
        factory: Callable[[], RevealSession],
        max_sessions: int = 1000,
    ) -> None:
        self._factory = factory
        self._max_sessions = max(1, int(max_sessions))
        self._lock = Lock()
        self._sessions: OrderedDict[str, RevealSession] = OrderedDict()

    def get(self, surface_id: str) -> RevealSession:
        evicted: list[RevealSession] = []
        with self._lock:
            session = self._sessions.get(surface_id)
            if session is not None:
                self._sessions.move_to_end(surface_id)
                return session

            session = self._factory()
            self._sessions[surface_id] = session
            while len(self._sessions) > self._max_sessions:
                old_id, old = self._sessions.popitem(last=False)
                logger.info("Evicting reveal session %s", old_id)
                evicted.append(old)

        for old in evicted:
            old.close()
        return session

    def peek(self, surface_id: str) -> RevealSession | None:
        with self._lock:
            return self._sessions.get(surface_id)

    def discard(self, surface_id: str) -> bool:
        with self._lock:
            session = self._sessions.pop(surface_id, None)

        if session is None:
            return False
        session.close()
        return True

    def close_all(self) -> None:
        with self._lock:
            sessions = list(self._sessions.values())
            self._sessions.clear()

        for session in sessions:
            session.close()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
