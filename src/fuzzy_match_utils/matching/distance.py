"""Levenshtein edit distance."""


def full_string_distance(a: str, b: str) -> int:
    """Return the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1. Lower distance
    means higher similarity.

    Args:
        a: First string.
        b: Second string.

    Returns:
        The edit distance between the strings.

    Examples:
        >>> full_string_distance("kitten", "sitting")
        3
        >>> full_string_distance("", "abc")
        3
    """
    a_length = len(a)
    b_length = len(b)

    if not a_length:
        return b_length
    if not b_length:
        return a_length

    # Row 0 is 0..b_length, column 0 is 0..a_length
    table = [[0] * (b_length + 1) for _ in range(a_length + 1)]
    for x in range(a_length + 1):
        table[x][0] = x
    for y in range(b_length + 1):
        table[0][y] = y

    for x in range(1, a_length + 1):
        for y in range(1, b_length + 1):
            if a[x - 1] == b[y - 1]:
                table[x][y] = table[x - 1][y - 1]
            else:
                table[x][y] = 1 + min(
                    table[x - 1][y],  # deletion
                    table[x][y - 1],  # insertion
                    table[x - 1][y - 1],  # substitution
                )

    return table[a_length][b_length]
