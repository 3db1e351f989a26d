from dataclasses import dataclass
from typing import Dict

EMOTIONS = (
    "anger",
    "anticipation",
    "disgust",
    "fear",
    "joy",
    "negative",
    "positive",
    "sadness",
    "surprise",
    "trust",
)


def null_vector() -> Dict[str, int]:
    """Return a fresh all-zero emotion vector."""
    return {emotion: 0 for emotion in EMOTIONS}


@dataclass(frozen=True)
class Polarity:
    positive: bool
    negative: bool

    @property
    def score(self) -> int:
        return 1 if self.positive else -1

    def as_dict(self) -> Dict[str, int]:
        return {"positive": int(self.positive), "negative": int(self.negative)}


@dataclass
class Familiarity:
    """
    Counts of tokens recognized (known) and not recognized (unknown) by the
    lexicon during one analysis pass.
    """

    known: int = 0
    unknown: int = 0

    @property
    def total(self) -> int:
        return self.known + self.unknown

    def record(self, found: bool) -> None:
        if found:
            self.known += 1
        else:
            self.unknown += 1

    def ratio(self, use_unknown: bool = False) -> float:
        """
        Fraction of known tokens, or of unknown tokens if use_unknown is set.

        Raises ZeroDivisionError when nothing has been counted.
        """
        numerator = self.unknown if use_unknown else self.known
        return numerator / self.total

    def as_dict(self) -> Dict[str, int]:
        return {"known": self.known, "unknown": self.unknown}
