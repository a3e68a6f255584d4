"""Longest-common-subsequence similarity for typeahead ranking."""


def typeahead_similarity(a: str, b: str) -> float:
    """Score how well one string contains the other as a subsequence.

    Intended for strings of different lengths, eg. a typeahead search input
    against an option label. The longer string is searched for the shorter
    one, but the substring bonus is always computed from the lengths as
    passed, so a label contained in a longer query scores above the query length.

    Scoring:
        - Either string empty: 0
        - The longer string contains the shorter one contiguously:
          len(b) + 1 / len(a)
        - Otherwise: length of the longest common subsequence

    A contained substring therefore outscores any plain subsequence match of
    the same query, and among containing strings the shorter one wins.

    Args:
        a: Typically the candidate, eg. a cleaned option label.
        b: Typically the query.

    Returns:
        Non-negative score, higher is more similar.

    Examples:
        >>> typeahead_similarity("WALLENBERG", "WABERG")
        6
        >>> typeahead_similarity("WALLENBERGHIGH", "WALLENBERG")
        10.071428571428571
    """
    if not a or not b:
        return 0

    a_length = len(a)
    b_length = len(b)

    # Make sure `a` isn't shorter than `b`; the bonus keeps the unswapped lengths
    if a_length < b_length:
        a, b = b, a

    if b in a:
        return b_length + 1 / a_length

    a_length, b_length = len(a), len(b)

    # table[x][y] is the LCS length of a[:x] and b[:y]
    table = [[0] * (b_length + 1) for _ in range(a_length + 1)]

    for x in range(1, a_length + 1):
        for y in range(1, b_length + 1):
            if a[x - 1] == b[y - 1]:
                table[x][y] = 1 + table[x - 1][y - 1]
            else:
                table[x][y] = max(table[x][y - 1], table[x - 1][y])

    return table[a_length][b_length]
