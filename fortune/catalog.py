"""The fixed list of fortunes read out by the app."""
from __future__ import annotations

from typing import Iterable, Tuple


class InvalidCatalogSize(ValueError):
    """Raised when a catalog is too small to avoid immediate repeats."""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"Catalog must hold at least 2 entries, got {size}")


FORTUNES: Tuple[str, ...] = (
    "It is certain.",
    "It is decidedly so.",
    "Without a doubt.",
    "Yes definitely.",
    "You may rely on it.",
    "Reply hazy, try again.",
    "Ask again later.",
    "Better not tell you now.",
    "Cannot predict now.",
    "Concentrate and ask again.",
    "Don't count on it.",
    "My reply is no.",
    "My sources say no.",
    "Outlook not so good.",
    "Very doubtful.",
    "As I see it, yes.",
    "Most likely.",
    "Outlook good.",
    "Yes.",
    "Signs point to yes",
    "Never gonna give you up\n"
    "Never gonna let you down\n"
    "Never gonna run around and desert you\n"
    "Never gonna make you cry\n"
    "Never gonna say goodbye\n"
    "Never gonna tell a lie and hurt you",
)


def validate_catalog(entries: Iterable[str]) -> Tuple[str, ...]:
    """Freeze `entries` into a tuple usable by a Selector.

    Raises InvalidCatalogSize for fewer than two entries (a non-repeating
    pick needs somewhere else to go) and TypeError for non-string entries.
    """
    frozen = tuple(entries)
    for i, entry in enumerate(frozen):
        if not isinstance(entry, str):
            raise TypeError(f"Catalog entry {i} must be a string, got {type(entry).__name__}")
    if len(frozen) < 2:
        raise InvalidCatalogSize(len(frozen))
    return frozen
