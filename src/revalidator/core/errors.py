"""Exceptions raised by the range engine."""

from __future__ import annotations

from typing import Any


class StructuralLookupError(LookupError):
    """Raised when a position cannot be resolved to an enclosing block.

    This means the range and the document it was derived from disagree, so it
    is surfaced to the caller rather than recovered.
    """

    def __init__(
        self,
        message: str,
        *,
        position: int,
        reason: str = "block_not_found",
        range: tuple[int, int] | None = None,
    ) -> None:
        super().__init__(message)
        self.position = position
        self.reason = reason
        self.range = range

    def details(self) -> dict[str, Any]:
        return {
            "reason": self.reason,
            "position": self.position,
            "range": self.range,
        }


__all__ = ["StructuralLookupError"]
