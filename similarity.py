"""Edit-distance based string similarity used for fuzzy answer matching."""


def levenshtein_distance(a: str, b: str) -> int:
    """Return the minimum number of single-character edits turning a into b.

    Insertions, deletions and substitutions all cost 1.
    """
    if len(a) < len(b):
        a, b = b, a

    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            if char_a == char_b:
                current.append(previous[j - 1])
            else:
                current.append(
                    min(
                        previous[j - 1] + 1,  # substitution
                        current[j - 1] + 1,  # insertion
                        previous[j] + 1,  # deletion
                    )
                )
        previous = current

    return previous[-1]


def similarity(a: str, b: str) -> float:
    """Normalized similarity in [0, 1] between two strings.

    Identical strings score 1.0. If either string is empty the score is 0.0,
    including when both are empty.
    """
    if a == b and a:
        return 1.0

    if not a or not b:
        return 0.0

    distance = levenshtein_distance(a, b)
    return 1 - distance / max(len(a), len(b))
