"""Business logic for drawing a fortune and its lucky numbers."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Protocol

from fortune_cookie.catalog import FortuneCatalog
from fortune_cookie.errors import AppError, ConfigurationError, ValidationError


LUCKY_COUNT = 6
LUCKY_MAX = 99


class RandomSource(Protocol):
    def next_int(self, bound: int) -> int:
        """Return a uniformly distributed int in [0, bound)."""
        ...


class SystemRandomSource:
    """RandomSource backed by :class:`random.Random`."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def next_int(self, bound: int) -> int:
        return self._random.randrange(bound)


@dataclass(frozen=True)
class FortuneDraw:
    fortune: str
    lucky_numbers: tuple[int, ...]


class FortuneSelector:
    """Draw fortunes from a catalog and sets of distinct lucky numbers."""

    def __init__(
        self,
        catalog: FortuneCatalog,
        random_source: RandomSource | None = None,
        lucky_count: int = LUCKY_COUNT,
        lucky_max: int = LUCKY_MAX,
        max_iterations: int = 10_000,
    ) -> None:
        if lucky_count < 1 or lucky_max < 1:
            raise ConfigurationError(
                message="Lucky number bounds must be positive",
                details={"lucky_count": lucky_count, "lucky_max": lucky_max},
            )
        if lucky_count > lucky_max:
            raise ConfigurationError(
                message=f"Cannot draw {lucky_count} distinct lucky numbers from 1..{lucky_max}",
                details={"lucky_count": lucky_count, "lucky_max": lucky_max},
            )

        self._catalog = catalog
        self._rng: RandomSource = random_source or SystemRandomSource()
        self._lucky_count = lucky_count
        self._lucky_max = lucky_max
        self._max_iterations = max_iterations

    @property
    def catalog(self) -> FortuneCatalog:
        return self._catalog

    def draw_fortune(self) -> str:
        """Pick one catalog entry, each with probability 1/len(catalog)."""

        return self._catalog[self._rng.next_int(len(self._catalog))]

    def draw_lucky_numbers(self) -> tuple[int, ...]:
        """Draw distinct numbers in [1, lucky_max], sorted ascending.

        Duplicate draws are discarded and redrawn.
        """

        picked: set[int] = set()
        for _ in range(self._max_iterations):
            picked.add(self._rng.next_int(self._lucky_max) + 1)
            if len(picked) == self._lucky_count:
                return tuple(sorted(picked))

        raise AppError(
            code="draw_failed",
            message=f"Failed to draw lucky numbers within retry limit ({self._max_iterations})",
            status_code=503,
        )

    def draw(self) -> FortuneDraw:
        return FortuneDraw(fortune=self.draw_fortune(), lucky_numbers=self.draw_lucky_numbers())

    def draw_many(self, count: int = 1) -> list[FortuneDraw]:
        if count < 1:
            raise ValidationError(
                message="Invalid count",
                details={"count": ["Must be >= 1"]},
            )
        if count > 20:
            raise ValidationError(
                message="Invalid count",
                details={"count": ["Must be <= 20"]},
            )

        return [self.draw() for _ in range(int(count))]
