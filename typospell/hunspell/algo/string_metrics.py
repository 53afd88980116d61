from typing import Optional


def levenshtein(s1: str, s2: str, *, limit: Optional[int] = None) -> int:
    """
    Classic Levenshtein distance: minimal number of single-character insertions, deletions and
    substitutions turning ``s1`` into ``s2``.

    If ``limit`` is passed, calculation stops as soon as the distance is known to exceed it, and
    ``limit + 1`` is returned. Suggest uses it to drop distant dictionary words quickly.
    """

    if s1 == s2:
        return 0
    if limit is not None and abs(len(s1) - len(s2)) > limit:
        return limit + 1
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, 1):
        current = [i]
        for j, c2 in enumerate(s2, 1):
            current.append(min(
                previous[j] + 1,                # deletion
                current[j - 1] + 1,             # insertion
                previous[j - 1] + (c1 != c2)    # substitution
            ))
        # No cell of the row is under the limit => the result won't be either
        if limit is not None and min(current) > limit:
            return limit + 1
        previous = current

    return previous[-1]

