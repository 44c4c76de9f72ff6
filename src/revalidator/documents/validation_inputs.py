"""Validation inputs and helpers for re-slicing them against range sets."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from ..core.ranges import Range, Spanned, diff_ranges

PayloadT = TypeVar("PayloadT")


@dataclass(slots=True, frozen=True)
class ValidationInput(Generic[PayloadT]):
    """A run of document text tagged with its position.

    ``payload`` and any fields added by subclasses ride along untouched when
    the input is re-sliced.
    """

    start: int
    end: int
    text: str
    payload: PayloadT | None = None

    def to_range(self) -> Range:
        return input_to_range(self)


@dataclass(slots=True, frozen=True)
class ValidationOutput(ValidationInput[PayloadT]):
    """A validation result anchored to the text it was produced for."""

    annotation: str = ""
    category: str = ""


InputT = TypeVar("InputT", bound=ValidationInput)


def input_to_range(value: ValidationInput) -> Range:
    """Return the document span covered by ``value``'s text."""

    return Range(value.start, value.start + len(value.text))


def project_inputs(rng: Spanned, inputs: Iterable[InputT]) -> list[InputT]:
    """Slice every input that holds ``rng.start`` down to ``rng``.

    Inputs are selected by ``rng.start`` alone; one that only reaches
    ``rng.end`` is skipped. The slice keeps one character before the local
    start so downstream word-boundary checks see the preceding character.
    """

    projected: list[InputT] = []
    for item in inputs:
        if not item.start <= rng.start <= item.start + len(item.text):
            continue
        local_start = rng.start - item.start
        local_end = local_start + (rng.end - rng.start)
        text = item.text[local_start - 1 if local_start > 0 else 0 : local_end]
        if not text:
            continue
        projected.append(replace(item, start=rng.start, end=rng.end, text=text))
    return projected


def diff_inputs(first: Sequence[InputT], second: Iterable[ValidationInput]) -> list[InputT]:
    """Remove the spans covered by ``second`` from ``first``.

    Both collections are expected to be internally non-overlapping.
    """

    remaining = diff_ranges(
        (input_to_range(item) for item in first),
        (input_to_range(item) for item in second),
    )
    return [sliced for rng in remaining for sliced in project_inputs(rng, first)]


__all__ = [
    "ValidationInput",
    "ValidationOutput",
    "diff_inputs",
    "input_to_range",
    "project_inputs",
]
