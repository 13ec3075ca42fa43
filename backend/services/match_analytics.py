"""Score distribution over a set of ranked matches."""

import numpy as np

from models.responses import RankedMatch, ScoreBucket

# Decile edges: [0,10), [10,20), ..., [90,100]
_EDGES = np.arange(0, 101, 10)


def _label(lower: int) -> str:
    return "90-100" if lower == 90 else f"{lower}-{lower + 9}"


def score_distribution(matches: list[RankedMatch]) -> list[ScoreBucket]:
    """Bucket match scores into deciles, highest bucket first.

    Only non-empty buckets are returned.
    """
    if not matches:
        return []

    scores = np.array([m.match.score for m in matches], dtype=float)
    counts, _ = np.histogram(scores, bins=_EDGES)
    total = len(scores)

    buckets: list[ScoreBucket] = []
    for lower, count in reversed(list(zip(_EDGES[:-1].tolist(), counts.tolist()))):
        if count == 0:
            continue
        buckets.append(ScoreBucket(
            range=_label(int(lower)),
            count=int(count),
            percentage=int(count * 100 / total + 0.5),
        ))
    return buckets
