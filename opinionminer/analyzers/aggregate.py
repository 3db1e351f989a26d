from typing import List, Sequence

DEFAULT_BINS = 10


def averaged_scores(scores: Sequence[float], bins: int = DEFAULT_BINS) -> List[float]:
    """
    Downsample a score series by averaging consecutive chunks of `bins` items.

    The last chunk holds whatever remains, so the output has
    ceil(len(scores) / bins) points. A non-positive bins means the default.
    """
    if not bins or bins <= 0:
        bins = DEFAULT_BINS
    scores = list(scores)
    averaged = []
    for start in range(0, len(scores), bins):
        chunk = scores[start:start + bins]
        averaged.append(sum(chunk) / len(chunk))
    return averaged
