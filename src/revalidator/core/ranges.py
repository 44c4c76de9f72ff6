"""Range values and the set algebra used to plan re-validation passes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol


class Spanned(Protocol):
    """Anything positioned in the document by integer ``start``/``end`` offsets."""

    start: int
    end: int


@dataclass(slots=True, frozen=True)
class Range:
    """Span of document positions; ``0 <= start <= end``."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid range {self.start}-{self.end}")

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the range covers no positions."""

        return self.start == self.end

    def clamp(self, *, upper: int) -> Range:
        """Pull both bounds down to at most ``upper``."""

        return Range(min(self.start, upper), min(self.end, upper))


def overlap_index(rng: Spanned, ranges: Sequence[Spanned]) -> int | None:
    """Return the index of the first entry in ``ranges`` overlapping ``rng``.

    An entry overlaps when it holds ``rng.start``, holds ``rng.end`` or sits
    entirely inside ``rng``. Bounds are inclusive, so touching ranges count.
    """

    for index, local in enumerate(ranges):
        if local.start <= rng.start <= local.end:
            return index
        if local.start <= rng.end <= local.end:
            return index
        if rng.start <= local.start and local.end <= rng.end:
            return index
    return None


def merge_pair(first: Spanned, second: Spanned) -> Range:
    """Return the smallest range covering both ``first`` and ``second``."""

    return Range(min(first.start, second.start), max(first.end, second.end))


def merge_all(ranges: Iterable[Spanned]) -> list[Range]:
    """Coalesce overlapping ranges.

    Each incoming range is folded into the first accumulated range it
    overlaps, or appended. The result keeps that first-seen order and is
    deliberately left unsorted.
    """

    merged: list[Range] = []
    for rng in ranges:
        index = overlap_index(rng, merged)
        if index is None:
            merged.append(Range(rng.start, rng.end))
        else:
            merged[index] = merge_pair(rng, merged[index])
            _absorb_siblings(merged, index)
    return merged


def _absorb_siblings(merged: list[Range], slot: int) -> None:
    # A widened range can reach siblings it did not touch before; fold them
    # into ``slot`` until it overlaps nothing else.
    while True:
        current = merged[slot]
        index = next(
            (i for i, other in enumerate(merged) if i != slot and overlap_index(current, (other,)) is not None),
            None,
        )
        if index is None:
            return
        merged[slot] = merge_pair(current, merged[index])
        del merged[index]
        if index < slot:
            slot -= 1


def diff_ranges(first: Iterable[Spanned], second: Iterable[Spanned]) -> list[Range]:
    """Cut the merged ``second`` set out of the merged ``first`` set.

    Each range of ``first`` is split at the first ``second`` range it
    overlaps; only the tail past that overlap is diffed again. The piece left
    of the overlap is kept as is, so when ``second`` is not ordered by start a
    later, lower ``second`` range is not removed from it.
    """

    subtrahend = merge_all(second)
    pending = deque(merge_all(first))
    result: list[Range] = []
    while pending:
        rng = pending.popleft()
        index = overlap_index(rng, subtrahend)
        if index is None:
            result.append(rng)
            continue
        overlap = subtrahend[index]
        if overlap.start > rng.start:
            result.append(Range(rng.start, overlap.start))
        if overlap.end < rng.end:
            remainder = Range(overlap.end + 1, rng.end)
            if not remainder.is_empty:
                # Split the tail off and diff it before moving on, so the
                # output stays ordered left to right.
                pending.appendleft(remainder)
    return result


__all__ = [
    "Range",
    "Spanned",
    "diff_ranges",
    "merge_all",
    "merge_pair",
    "overlap_index",
]
