"""Edit distance between short strings.

Only ever applied to single, already stripped lines, so the quadratic table is
bounded by line length rather than document size.
"""


def levenshtein(a: str, b: str) -> int:
    """Return the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1.

    Args:
        a: Source string.
        b: Target string.

    Returns:
        Minimum number of single-character edits turning *a* into *b*.
    """
    if not a or not b:
        return max(len(a), len(b))

    matrix = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        matrix[i][0] = i
    for j in range(len(b) + 1):
        matrix[0][j] = j

    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )

    return matrix[len(a)][len(b)]


def line_similarity(a: str, b: str) -> float:
    """Similarity in [0, 1] derived from the edit distance, 1.0 for two empty strings."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1 - levenshtein(a, b) / max_len
