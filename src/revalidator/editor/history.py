"""Edit history and the mapping of stored ranges through it."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace
from typing import Callable, TypeVar

from ..core.ranges import Spanned

LOGGER = logging.getLogger(__name__)

PositionMapping = Callable[[int], int]
SpannedT = TypeVar("SpannedT", bound=Spanned)


@dataclass(slots=True, frozen=True)
class EditRecord:
    """One edit in the log: its time key and its old-to-new position map."""

    time: int | float
    mapping: PositionMapping


@dataclass(slots=True, frozen=True)
class ReplaceMapping:
    """Position map for replacing ``[start, end)`` with ``inserted`` characters.

    Positions at an insertion point or inside the replaced span move to the
    end of the inserted text; the start of a non-empty replaced span stays put.
    """

    start: int
    end: int
    inserted: int = 0

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start or self.inserted < 0:
            raise ValueError(
                f"Invalid replace step start={self.start} end={self.end} inserted={self.inserted}"
            )

    @property
    def delta(self) -> int:
        return self.inserted - (self.end - self.start)

    def __call__(self, position: int) -> int:
        if position < self.start:
            return position
        if position > self.end:
            return position + self.delta
        if position == self.start and self.end > self.start:
            return self.start
        return self.start + self.inserted

    @classmethod
    def insertion(cls, position: int, length: int) -> ReplaceMapping:
        return cls(position, position, length)

    @classmethod
    def deletion(cls, start: int, end: int) -> ReplaceMapping:
        return cls(start, end, 0)


class EditLog(Sequence[EditRecord]):
    """Ordered, append-only history of edits keyed by strictly increasing time."""

    def __init__(self, records: Iterable[EditRecord] = ()) -> None:
        self._records: list[EditRecord] = []
        for record in records:
            self._append(record)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index):  # type: ignore[override]
        return self._records[index]

    def __iter__(self) -> Iterator[EditRecord]:
        return iter(self._records)

    @property
    def last_time(self) -> int | float | None:
        return self._records[-1].time if self._records else None

    def record(self, mapping: PositionMapping, *, time: int | float | None = None) -> EditRecord:
        """Append ``mapping`` to the log, assigning the next time key when omitted."""

        if time is None:
            last = self.last_time
            time = 0 if last is None else int(last) + 1
        entry = EditRecord(time=time, mapping=mapping)
        self._append(entry)
        return entry

    def index_of(self, time: int | float) -> int | None:
        for index, entry in enumerate(self._records):
            if entry.time == time:
                return index
        return None

    def map_ranges(self, ranges: Iterable[SpannedT], time: int | float) -> list[SpannedT]:
        return map_through_edits(ranges, time, self._records)

    def _append(self, entry: EditRecord) -> None:
        last = self.last_time
        if last is not None and entry.time <= last:
            raise ValueError(f"Edit time {entry.time!r} must be greater than {last!r}")
        self._records.append(entry)


def map_through_edits(
    ranges: Iterable[SpannedT],
    time: int | float,
    edit_log: Sequence[EditRecord],
) -> list[SpannedT]:
    """Map ``ranges`` recorded at ``time`` to current document coordinates.

    Every edit from the one stamped ``time`` to the end of the log is applied
    in order. A log with a single record means the document is unaltered, so
    ranges come back as given. When ``time`` is not in the log the ranges have
    no mapping and are dropped from the result.
    """

    items = list(ranges)
    if len(edit_log) == 1:
        return items
    first = next((index for index, entry in enumerate(edit_log) if entry.time == time), None)
    if first is None:
        LOGGER.debug("No edit at time %r; dropping %d unmappable range(s)", time, len(items))
        return []
    steps = [entry.mapping for entry in edit_log[first:]]
    mapped: list[SpannedT] = []
    for item in items:
        start, end = item.start, item.end
        for step in steps:
            start, end = step(start), step(end)
        mapped.append(replace(item, start=start, end=end))  # type: ignore[type-var]
    return mapped


__all__ = [
    "EditLog",
    "EditRecord",
    "PositionMapping",
    "ReplaceMapping",
    "map_through_edits",
]
