"""Core domain types: ranges, the range algebra and engine errors."""

from .errors import StructuralLookupError
from .ranges import Range, Spanned, diff_ranges, merge_all, merge_pair, overlap_index

__all__ = [
    "Range",
    "Spanned",
    "StructuralLookupError",
    "diff_ranges",
    "merge_all",
    "merge_pair",
    "overlap_index",
]
