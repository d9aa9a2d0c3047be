"""The row of gems on the battle field: elements, matching and rearranging."""

from __future__ import annotations

import dataclasses
import random
from enum import Enum
from itertools import takewhile
from typing import Iterator, Sequence

MAX_GEMS = 14
BANISH_THRESHOLD = 3
GEM_LETTERS = "".join(chr(ord("A") + offset) for offset in range(MAX_GEMS))


class Element(Enum):
    """Element of a gem or a monster; EMPTY marks a vacated gem slot."""

    FLAME = 0
    AQUA = 1
    LEAF = 2
    GROUND = 3
    SOUL = 4
    EMPTY = 5

    @property
    def mark(self) -> str:
        """Single character used to draw this element."""
        return _MARKS[self]


_MARKS = {
    Element.FLAME: "*",
    Element.AQUA: "~",
    Element.LEAF: "%",
    Element.GROUND: "#",
    Element.SOUL: "+",
    Element.EMPTY: " ",
}


@dataclasses.dataclass(frozen=True)
class BanishInfo:
    """A run of identical gems long enough to be removed."""

    element: Element
    start: int
    count: int

    @property
    def positions(self) -> range:
        return range(self.start, self.start + self.count)

    def __bool__(self) -> bool:
        return self.count > 0


NO_BANISH = BanishInfo(Element.EMPTY, 0, 0)


def identify_removable_gems(gems: Sequence[Element]) -> BanishInfo:
    """Return the leftmost run of at least three equal non-empty gems."""
    for start in range(len(gems) - BANISH_THRESHOLD + 1):
        element = gems[start]
        if element is Element.EMPTY:
            continue
        count = 1 + sum(1 for _ in takewhile(lambda gem: gem is element, gems[start + 1:]))
        if count >= BANISH_THRESHOLD:
            return BanishInfo(element, start, count)
    return NO_BANISH


def move_gem(gems: Sequence[Element], from_pos: int, to_pos: int) -> Iterator[list[Element]]:
    """Slide one gem to a new slot, yielding the row after every single swap.

    The given sequence is left untouched.
    """
    size = len(gems)
    for pos in (from_pos, to_pos):
        if not 0 <= pos < size:
            raise IndexError(f"gem position {pos} outside 0..{size - 1}")
    return _swaps(list(gems), from_pos, to_pos)


def _swaps(state: list[Element], from_pos: int, to_pos: int) -> Iterator[list[Element]]:
    step = 1 if to_pos > from_pos else -1
    for pos in range(from_pos, to_pos, step):
        state[pos], state[pos + step] = state[pos + step], state[pos]
        yield list(state)


def compact_gems(gems: Sequence[Element]) -> list[Element]:
    """Move every remaining gem to the left, keeping order, empties at the end."""
    remaining = [gem for gem in gems if gem is not Element.EMPTY]
    return remaining + [Element.EMPTY] * (len(gems) - len(remaining))


def fill_empty_gems(gems: Sequence[Element], rng: random.Random) -> list[Element]:
    """Replace every empty slot with a random non-empty gem, left to right."""
    return [
        Element(rng.randrange(Element.EMPTY.value)) if gem is Element.EMPTY else gem
        for gem in gems
    ]


def random_gems(rng: random.Random) -> list[Element]:
    """A full row of random gems."""
    return fill_empty_gems([Element.EMPTY] * MAX_GEMS, rng)


def format_gems(gems: Sequence[Element]) -> str:
    """Draw the gem row as one line, without the trailing newline."""
    return " " + "".join(f"{gem.mark} " for gem in gems)


def parse_command(text: str) -> tuple[int, int]:
    """Turn a two-letter command such as "AC" into (from, to) slot indices."""
    if len(text) != 2:
        raise ValueError(f"command must be two letters: {text!r}")
    first, second = text
    if first not in GEM_LETTERS or second not in GEM_LETTERS:
        raise ValueError(f"command letters must be between A and {GEM_LETTERS[-1]}: {text!r}")
    if first == second:
        raise ValueError(f"command letters must differ: {text!r}")
    return GEM_LETTERS.index(first), GEM_LETTERS.index(second)