import logging
from typing import Callable, Iterable

from ..exceptions import StemmerUnavailable

logger = logging.getLogger(__name__)


class IdentityStemmer:
    """Stemmer used when stemming is disabled: returns the word unchanged."""

    def stem(self, word: str) -> str:
        return word


class CandidateStemmer:
    """
    Stems a word through a function that yields zero or more candidate stems.

    When several candidates come back the lexicographically smallest wins, so
    the result does not depend on the backend's ordering. No candidates means
    the word is returned as-is.
    """

    def __init__(self, candidates: Callable[[str], Iterable[str]]):
        self._candidates = candidates

    def stem(self, word: str) -> str:
        stems = sorted(set(self._candidates(word)))
        return stems[0] if stems else word


def _load_wordnet():
    from nltk.corpus import wordnet

    # The corpus reader is lazy; force it so a missing corpus fails here.
    wordnet.ensure_loaded()
    return wordnet


class WordNetStemmer(CandidateStemmer):
    """
    WordNet morphological stemmer backed by nltk.

    Candidates are the base forms WordNet's morphy finds for the word under
    each part of speech.
    """

    def __init__(self, wordnet=None):
        self._wordnet = wordnet if wordnet is not None else _load_wordnet()
        super().__init__(self._morphy_candidates)

    def _morphy_candidates(self, word: str) -> Iterable[str]:
        wn = self._wordnet
        for pos in (wn.NOUN, wn.VERB, wn.ADJ, wn.ADV):
            base = wn.morphy(word, pos)
            if base:
                yield base


def build_stemmer() -> WordNetStemmer:
    """
    Construct the WordNet stemmer.

    Raises StemmerUnavailable if nltk or its WordNet corpus is missing.
    """
    try:
        return WordNetStemmer()
    except (ImportError, LookupError, OSError) as e:
        logger.error(f"WordNet stemmer unavailable: {e}")
        raise StemmerUnavailable(
            "nltk and its WordNet corpus must be installed to enable stemming "
            "(python -m nltk.downloader wordnet)"
        ) from e
