"""Editor package containing the edit history and range mapping."""

from .history import EditLog, EditRecord, PositionMapping, ReplaceMapping, map_through_edits

__all__ = ["EditLog", "EditRecord", "PositionMapping", "ReplaceMapping", "map_through_edits"]
