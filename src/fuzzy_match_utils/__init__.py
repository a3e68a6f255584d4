"""Fuzzy text matching and ranked filtering for typeahead option lists."""

from fuzzy_match_utils.matching import (
    clean_up_text,
    filter_options,
    full_string_distance,
    typeahead_similarity,
)
from fuzzy_match_utils.models import Option

__version__ = "0.1.0"

__all__ = [
    "Option",
    "clean_up_text",
    "filter_options",
    "full_string_distance",
    "typeahead_similarity",
    "__version__",
]
