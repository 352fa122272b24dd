"""
Levenshtein edit distance.

Computes the number of single-character insertions, deletions and substitutions
needed to turn one string into another, comparing raw Unicode code points.
"""


def levenshtein(a: str, b: str) -> int:
    """
    Compute the Levenshtein distance between two strings.

    Uses a single row of ``len(a)`` cells that is rewritten in place for each
    character of ``b``, instead of a full matrix.

    Args:
        a: Source string
        b: Target string

    Returns:
        Minimum number of edits to transform ``a`` into ``b``
    """
    if a == b:
        return 0

    length_a = len(a)
    length_b = len(b)

    if length_a == 0:
        return length_b
    if length_b == 0:
        return length_a

    # cache[i] holds the distance between a[:i + 1] and the prefix of b seen so far
    cache = list(range(1, length_a + 1))
    result = 0

    for index_b, char_b in enumerate(b):
        result = index_b
        distance_a = index_b

        for index_a, char_a in enumerate(a):
            distance_b = distance_a if char_a == char_b else distance_a + 1
            distance_a = cache[index_a]

            if distance_a > result:
                result = result + 1 if distance_b > result else distance_b
            elif distance_b > distance_a:
                result = distance_a + 1
            else:
                result = distance_b

            cache[index_a] = result

    return result
