"""Range algebra and position remapping for incremental document re-validation."""

from .core import (
    Range,
    Spanned,
    StructuralLookupError,
    diff_ranges,
    merge_all,
    merge_pair,
    overlap_index,
)
from .documents import (
    BlockIndex,
    BlockLookup,
    BlockSpan,
    ValidationInput,
    ValidationOutput,
    diff_inputs,
    expand_all_to_blocks,
    expand_to_block,
    input_to_range,
    project_inputs,
)
from .editor import EditLog, EditRecord, ReplaceMapping, map_through_edits

__version__ = "0.1.0"

__all__ = [
    "BlockIndex",
    "BlockLookup",
    "BlockSpan",
    "EditLog",
    "EditRecord",
    "Range",
    "ReplaceMapping",
    "Spanned",
    "StructuralLookupError",
    "ValidationInput",
    "ValidationOutput",
    "diff_inputs",
    "diff_ranges",
    "expand_all_to_blocks",
    "expand_to_block",
    "input_to_range",
    "map_through_edits",
    "merge_all",
    "merge_pair",
    "overlap_index",
    "project_inputs",
]
