"""
Distance
--------
This module defines the string metric used to match user input against edge keywords.
"""


def distance(first: str, second: str) -> int:
    """
    Compute case-insensitive Levenshtein distance between two strings:
    the minimum number of single-character insertions, deletions or substitutions
    needed to turn one string into the other.

    Both strings are normalized with :py:meth:`str.casefold` before comparison.
    Only a single row of costs is kept (over the shorter string).

    :param first: First string.
    :param second: Second string.
    :return: Non-negative edit distance.
    """
    first, second = first.casefold(), second.casefold()
    if len(first) < len(second):
        first, second = second, first

    if len(second) == 0:
        return len(first)

    costs = list(range(len(second) + 1))
    for i, first_char in enumerate(first):
        corner = costs[0]
        costs[0] = i + 1
        for j, second_char in enumerate(second):
            upper = costs[j + 1]
            if first_char == second_char:
                costs[j + 1] = corner
            else:
                costs[j + 1] = min(upper, corner, costs[j]) + 1
            corner = upper
    return costs[-1]
