import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from ..exceptions import LexiconError
from .base import EMOTIONS, Polarity

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "fdata"

PathLike = Union[str, Path]

_POSITIVE = Polarity(positive=True, negative=False)
_NEGATIVE = Polarity(positive=False, negative=True)


def _read_json(path: Path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, ValueError) as e:
        raise LexiconError(f"Could not load {path}: {e}") from e


def _read_lines(path: PathLike) -> List[str]:
    path = Path(path)
    if not path.exists():
        raise LexiconError(f"Lexicon file {path} does not exist")
    # The published opinion word lists contain a few latin-1 bytes.
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read().splitlines()


def read_word_list(path: PathLike) -> List[str]:
    """
    Read an opinion word list: one word per line, ';' starts a comment line.
    """
    words = []
    for line in _read_lines(path):
        line = line.strip()
        if not line or line.startswith(";"):
            continue
        words.append(line.lower())
    return words


def read_nrc_associations(path: PathLike) -> Dict[str, Dict[str, int]]:
    """
    Read an NRC word-level association file ("word<TAB>emotion<TAB>0|1").

    Every word listed is kept, including words with no associations.
    """
    table: Dict[str, Dict[str, int]] = {}
    for lineno, line in enumerate(_read_lines(path), start=1):
        if not line.strip():
            continue
        parts = line.split("\t")
        if len(parts) != 3:
            raise LexiconError(f"{path}:{lineno}: expected 3 tab-separated fields")
        word, emotion, flag = (p.strip() for p in parts)
        if emotion not in EMOTIONS:
            raise LexiconError(f"{path}:{lineno}: unknown emotion {emotion!r}")
        try:
            value = int(flag)
        except ValueError as e:
            raise LexiconError(f"{path}:{lineno}: bad association value {flag!r}") from e
        vector = table.setdefault(word.lower(), {e: 0 for e in EMOTIONS})
        vector[emotion] = value
    return table


def _vectors_from_tags(data: Mapping[str, Iterable[str]]) -> Dict[str, Dict[str, int]]:
    table = {}
    for word, tags in data.items():
        unknown = set(tags) - set(EMOTIONS)
        if unknown:
            raise LexiconError(f"Unknown emotion tags for {word!r}: {sorted(unknown)}")
        table[word] = {e: int(e in tags) for e in EMOTIONS}
    return table


@lru_cache(maxsize=1)
def _packaged_polarity() -> Tuple[Tuple[str, ...], Tuple[str, ...]]:
    data = _read_json(DATA_DIR / "polarity.json")
    return tuple(data.get("positive", [])), tuple(data.get("negative", []))


@lru_cache(maxsize=1)
def _packaged_emotions() -> Mapping[str, Tuple[int, ...]]:
    table = _vectors_from_tags(_read_json(DATA_DIR / "emotion.json"))
    return {w: tuple(v[e] for e in EMOTIONS) for w, v in table.items()}


class LexiconStore:
    """
    Read-only polarity and emotion lexicons.

    The polarity table maps a word to exactly one of positive/negative. The
    emotion table maps a word to a 10-tag vector (see base.EMOTIONS). A word
    missing from a table is unknown to it. Lookups expect lowercase words.

    Build one store and share it between analyses; nothing mutates it.
    """

    def __init__(
        self,
        positive: Iterable[str],
        negative: Iterable[str],
        emotions: Mapping[str, Union[Mapping[str, int], Tuple[int, ...]]],
    ):
        polarity: Dict[str, Polarity] = {}
        for word in negative:
            polarity[word] = _NEGATIVE
        for word in positive:
            if polarity.get(word) is _NEGATIVE:
                logger.debug(f"{word!r} listed as positive and negative; keeping positive")
            polarity[word] = _POSITIVE

        vectors: Dict[str, Tuple[int, ...]] = {}
        for word, vector in emotions.items():
            if isinstance(vector, Mapping):
                vector = tuple(int(vector.get(e, 0)) for e in EMOTIONS)
            if len(vector) != len(EMOTIONS) or any(v < 0 for v in vector):
                raise LexiconError(f"Invalid emotion vector for {word!r}: {vector}")
            vectors[word] = tuple(vector)

        self._polarity = MappingProxyType(polarity)
        self._emotions = MappingProxyType(vectors)
        logger.info(
            f"Lexicon loaded: {len(self._polarity)} polarity words, "
            f"{len(self._emotions)} emotion words"
        )

    @classmethod
    @lru_cache(maxsize=1)
    def default(cls) -> "LexiconStore":
        """
        The lexicon packaged in fdata/, loaded once per process.

        This is a small subset of the published lists: 359 opinion words
        (184 positive, 175 negative) and 79 NRC emotion entries, so
        familiarity on real prose is low. Load the full Bing Liu and NRC
        files with from_files() or the `lexicon:` config section.
        """
        positive, negative = _packaged_polarity()
        return cls(positive, negative, _packaged_emotions())

    @classmethod
    def from_files(
        cls,
        positive: Optional[PathLike] = None,
        negative: Optional[PathLike] = None,
        emotion: Optional[PathLike] = None,
    ) -> "LexiconStore":
        """
        Build a store from published lexicon files. Any source left out is
        taken from the packaged data.
        """
        packaged_positive, packaged_negative = _packaged_polarity()
        return cls(
            read_word_list(positive) if positive else packaged_positive,
            read_word_list(negative) if negative else packaged_negative,
            read_nrc_associations(emotion) if emotion else _packaged_emotions(),
        )

    @classmethod
    def from_config(cls, config: Optional[Dict] = None) -> "LexiconStore":
        section = (config or {}).get("lexicon", {}) or {}
        positive = section.get("positive")
        negative = section.get("negative")
        emotion = section.get("emotion")
        if not (positive or negative or emotion):
            return cls.default()
        return cls.from_files(positive=positive, negative=negative, emotion=emotion)

    @property
    def polarity_size(self) -> int:
        return len(self._polarity)

    @property
    def emotion_size(self) -> int:
        return len(self._emotions)

    def has_polarity(self, word: str) -> bool:
        return word in self._polarity

    def has_emotions(self, word: str) -> bool:
        return word in self._emotions

    def polarity_of(self, word: str) -> Optional[Polarity]:
        return self._polarity.get(word)

    def emotions_of(self, word: str) -> Optional[Dict[str, int]]:
        """Emotion vector for a word as a new dict, or None if unknown."""
        vector = self._emotions.get(word)
        if vector is None:
            return None
        return dict(zip(EMOTIONS, vector))

    def polarity_items(self) -> Iterable[Tuple[str, Polarity]]:
        return self._polarity.items()
