"""Expansion of edited ranges to the blocks that enclose them."""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.errors import StructuralLookupError
from ..core.ranges import Range, Spanned, merge_all

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class BlockSpan:
    """Text span of a block-level container (a paragraph or heading)."""

    start: int
    length: int

    def __post_init__(self) -> None:
        if self.start < 0 or self.length < 0:
            raise ValueError(f"Invalid block span start={self.start} length={self.length}")

    @property
    def end(self) -> int:
        return self.start + self.length

    def contains(self, position: int) -> bool:
        return self.start <= position <= self.end

    def to_range(self) -> Range:
        return Range(self.start, self.end)


BlockLookup = Callable[[int], Optional[BlockSpan]]


class BlockIndex:
    """Resolves positions to their enclosing block via binary search.

    Blocks must not overlap. When two blocks share a boundary position the
    later block wins.
    """

    def __init__(self, blocks: Iterable[BlockSpan]) -> None:
        self._blocks: tuple[BlockSpan, ...] = tuple(sorted(blocks, key=lambda block: block.start))
        self._starts = [block.start for block in self._blocks]

    def __len__(self) -> int:
        return len(self._blocks)

    def __call__(self, position: int) -> BlockSpan | None:
        return self.lookup(position)

    @property
    def blocks(self) -> tuple[BlockSpan, ...]:
        return self._blocks

    def lookup(self, position: int) -> BlockSpan | None:
        index = bisect_right(self._starts, position) - 1
        if index < 0:
            return None
        block = self._blocks[index]
        return block if block.contains(position) else None


def expand_to_block(rng: Spanned, lookup: BlockLookup) -> Range:
    """Return the full text span of the block(s) enclosing ``rng``.

    Raises :class:`StructuralLookupError` when either end of ``rng`` cannot be
    resolved.
    """

    bounds = (rng.start, rng.end)
    first = lookup(rng.start)
    if first is None:
        raise StructuralLookupError(
            f"Parent block not found for position {rng.start} (range {rng.start}-{rng.end})",
            position=rng.start,
            reason="start_unresolved",
            range=bounds,
        )
    last = first if first.contains(rng.end) else lookup(rng.end)
    if last is None:
        raise StructuralLookupError(
            f"Parent block not found for position {rng.end} (range {rng.start}-{rng.end})",
            position=rng.end,
            reason="end_unresolved",
            range=bounds,
        )
    return Range(min(first.start, last.start), max(first.end, last.end))


def expand_all_to_blocks(
    ranges: Sequence[Spanned],
    lookup: BlockLookup,
    document_length: int,
) -> list[Range]:
    """Widen ``ranges`` to their enclosing blocks and merge the result.

    The original ranges stay in the merge so expansions coalesce with them.
    Everything is clamped to ``document_length``; spans left empty by the
    clamp are dropped.
    """

    expansions = [expand_to_block(rng, lookup) for rng in ranges]
    combined = [Range(rng.start, rng.end) for rng in ranges] + expansions
    clamped = (rng.clamp(upper=document_length) for rng in combined)
    merged = merge_all(rng for rng in clamped if not rng.is_empty)
    LOGGER.debug("Expanded %d range(s) to %d block range(s)", len(ranges), len(merged))
    return merged


__all__ = [
    "BlockIndex",
    "BlockLookup",
    "BlockSpan",
    "expand_all_to_blocks",
    "expand_to_block",
]
