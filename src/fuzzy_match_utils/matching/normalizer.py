"""Text normalization for typeahead matching."""

import re
import unicodedata
from collections.abc import Mapping

# Anything outside ASCII alphanumerics and the accented Latin-1 letters
# (À-Ü, à-ü, minus the × and ÷ signs). Underscore is not kept.
_STRIP_RE = re.compile("[^0-9A-Za-zÀ-ÖØ-Üà-öø-ü]")


def clean_up_text(text: str | None, substitutions: Mapping[str, str] | None = None) -> str:
    """Uppercase text, strip non-alphanumerics and apply substitutions.

    Algorithm:
    1. Convert to uppercase
    2. Remove everything except letters, digits and accented Latin-1 letters
    3. Fold accented letters to their base letter (NFKD, drop combining marks)
    4. Apply each substitution in order, replacing every match

    Each substitution key is a regular expression matched against the output
    of the previous one. Replacements are literal. An invalid pattern raises
    ``re.error``.

    Args:
        text: Input text to clean.
        substitutions: Ordered mapping of pattern to replacement, for spelling
            variants or abbreviations that should match each other.

    Returns:
        The cleaned text.

    Examples:
        >>> clean_up_text("Scoil Bhríde Primary School")
        'SCOILBHRIDEPRIMARYSCHOOL'
        >>> clean_up_text("snake_case")
        'SNAKECASE'
        >>> clean_up_text("Saint Mary's", {"SAINT": "ST"})
        'STMARYS'
    """
    if not text:
        return ""

    result = _STRIP_RE.sub("", text.upper())

    # e.g. Í becomes I + combining acute accent
    result = unicodedata.normalize("NFKD", result)
    result = "".join(c for c in result if not unicodedata.combining(c))

    if not substitutions:
        return result

    for pattern, replacement in substitutions.items():
        # Backslashes are the only special characters in a replacement string
        result = re.sub(pattern, replacement.replace("\\", r"\\"), result)

    return result
