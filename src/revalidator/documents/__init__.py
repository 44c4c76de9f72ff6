"""Document-facing helpers: validation inputs and block expansion."""

from .blocks import BlockIndex, BlockLookup, BlockSpan, expand_all_to_blocks, expand_to_block
from .validation_inputs import (
    ValidationInput,
    ValidationOutput,
    diff_inputs,
    input_to_range,
    project_inputs,
)

__all__ = [
    "BlockIndex",
    "BlockLookup",
    "BlockSpan",
    "ValidationInput",
    "ValidationOutput",
    "diff_inputs",
    "expand_all_to_blocks",
    "expand_to_block",
    "input_to_range",
    "project_inputs",
]
