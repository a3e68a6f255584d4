"""Text matching modules."""

from fuzzy_match_utils.matching.distance import full_string_distance
from fuzzy_match_utils.matching.normalizer import clean_up_text
from fuzzy_match_utils.matching.option_filter import filter_options
from fuzzy_match_utils.matching.similarity import typeahead_similarity

__all__ = [
    "clean_up_text",
    "filter_options",
    "full_string_distance",
    "typeahead_similarity",
]
