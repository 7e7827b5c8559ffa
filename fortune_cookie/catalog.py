"""The fortune catalog."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fortune_cookie.errors import ConfigurationError


DEFAULT_FORTUNES: tuple[str, ...] = (
    "A journey of a thousand miles begins with a single step",
    "Your creativity will lead you to success",
    "Good things come to those who wait, but better things come to those who work",
    "The best time to plant a tree was 20 years ago. The second best time is now",
    "Your kindness will be returned to you tenfold",
    "Adventure awaits you around the corner",
    "Wisdom comes from experience, and experience comes from mistakes",
    "Your smile will bring happiness to many today",
    "An opportunity you seek will arrive soon",
    "The stars align in your favor this week",
    "Patience and persistence will bring great rewards",
    "Your unique talents will shine brightly soon",
    "A pleasant surprise awaits you",
    "Trust your intuition, it knows the way",
    "Your generosity will open unexpected doors",
    "Dreams are the seeds of great achievements",
    "Today's small steps lead to tomorrow's big leaps",
    "The universe conspires in your favor",
    "Your positive energy attracts wonderful things",
    "A new friendship will bring joy to your life",
)


class FortuneCatalog:
    """Immutable, ordered list of fortunes. Never empty."""

    __slots__ = ("_fortunes",)

    def __init__(self, fortunes: Iterable[str]) -> None:
        items = tuple(str(f) for f in fortunes)
        if not items:
            raise ConfigurationError(
                message="Fortune catalog is empty; at least one fortune is required",
                details={"fortune_catalog": ["Must contain at least one entry"]},
            )
        self._fortunes = items

    @classmethod
    def default(cls) -> "FortuneCatalog":
        return cls(DEFAULT_FORTUNES)

    def __len__(self) -> int:
        return len(self._fortunes)

    def __getitem__(self, index: int) -> str:
        return self._fortunes[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fortunes)

    def __contains__(self, fortune: object) -> bool:
        return fortune in self._fortunes

    def __repr__(self) -> str:
        return f"FortuneCatalog({len(self._fortunes)} entries)"
