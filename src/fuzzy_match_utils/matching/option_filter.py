"""Typeahead filtering and ranking of option lists."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar

from fuzzy_match_utils.matching.normalizer import clean_up_text
from fuzzy_match_utils.matching.similarity import typeahead_similarity

logger = logging.getLogger(__name__)

OptionT = TypeVar("OptionT")

# Allowed shortfall between a label's score and the cleaned query length
MAX_MISSING_CHARACTERS = 2


@dataclass(frozen=True)
class ScoredOption:
    """An option paired with its similarity to the query."""

    option: Any
    score: float


def _field(option: Any, name: str) -> Any:
    """Read a field from an Option model, attribute object or mapping."""
    if isinstance(option, Mapping):
        return option.get(name)
    return getattr(option, name, None)


def filter_options(
    options: Sequence[OptionT],
    query: str | None = None,
    substitutions: Mapping[str, str] | None = None,
) -> Sequence[OptionT]:
    """Filter options by label similarity to a query and sort best first.

    Handles partial matches, eg. searching for "Waberg High" finds
    "Raoul Wallenberg Traditional High School". Case insensitive and blind
    to non-alphanumeric characters.

    Algorithm:
    1. Return the options untouched if the query is blank
    2. Clean the query once
    3. Drop options with a missing label or value
    4. Score each cleaned label against the cleaned query
    5. Keep scores >= len(cleaned query) - 2
    6. Sort by descending score (ties keep their input order)

    Args:
        options: Unfiltered options. Anything with ``label`` and ``value``
            attributes or keys is accepted.
        query: Search text typed by the user.
        substitutions: Ordered pattern -> replacement rules applied to both
            the query and every label.

    Returns:
        The original option records that matched, best match first. The
        input sequence itself when the query is blank.
    """
    if not query:
        return options

    clean_query = clean_up_text(query, substitutions)
    threshold = len(clean_query) - MAX_MISSING_CHARACTERS

    scored: list[ScoredOption] = []
    for option in options:
        label = _field(option, "label")
        if label is None or _field(option, "value") is None:
            continue
        score = typeahead_similarity(clean_up_text(label, substitutions), clean_query)
        if score >= threshold:
            scored.append(ScoredOption(option=option, score=score))

    scored.sort(key=lambda pair: pair.score, reverse=True)

    logger.debug(
        "Query %r matched %d of %d options", clean_query, len(scored), len(options)
    )

    return [pair.option for pair in scored]
