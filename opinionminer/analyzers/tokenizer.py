import re
import logging
import unicodedata
from functools import lru_cache
from typing import Callable, List, Optional

from nltk.tokenize.punkt import PunktParameters, PunktSentenceTokenizer

logger = logging.getLogger(__name__)

SentenceSplitter = Callable[[str], List[str]]

# Punctuation and symbols (anything that is neither a word character nor
# whitespace), plus the underscore which \w lets through.
_PUNCT_RE = re.compile(r"[^\w\s]|_", re.UNICODE)
_SPACE_RE = re.compile(r"\s+", re.UNICODE)

# Decimal digits (Nd) and other numerals such as superscripts and fractions (No).
_DIGIT_CATEGORIES = {"Nd", "No"}

# Lowercase, without the final period, as Punkt stores them. "etc" is left
# out because it usually ends a sentence, as are "no" and "nos".
ENGLISH_ABBREVIATIONS = frozenset({
    "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st", "rev", "gen", "col",
    "lt", "sgt", "capt", "gov", "sen", "rep", "hon", "mt", "ft", "ave", "blvd",
    "co", "corp", "inc", "ltd", "dept", "univ", "assn", "bros",
    "e.g", "i.e", "vs", "cf", "al", "approx", "vol", "fig",
    "jan", "feb", "mar", "apr", "jun", "jul", "aug", "sep", "sept", "oct",
    "nov", "dec", "a.m", "p.m", "u.s", "u.k",
})


def _strip_digits(text: str) -> str:
    return "".join(ch for ch in text if unicodedata.category(ch) not in _DIGIT_CATEGORIES)


def tokenize(sentence: str) -> List[str]:
    """
    Normalize a sentence into lowercase word tokens.

    Punctuation is removed first, then digits, then the remainder is split on
    whitespace. So "happy2" becomes "happy" and "don't" becomes "dont".
    Punctuation-only pieces vanish.
    """
    if not sentence:
        return []
    text = _PUNCT_RE.sub("", sentence)
    text = _strip_digits(text)
    return [word.lower() for word in _SPACE_RE.split(text) if word]


@lru_cache(maxsize=1)
def _punkt() -> PunktSentenceTokenizer:
    # Built from parameters rather than the downloadable punkt model, so
    # splitting works without fetching nltk data.
    params = PunktParameters()
    params.abbrev_types = set(ENGLISH_ABBREVIATIONS)
    return PunktSentenceTokenizer(params)


def split_sentences(text: Optional[str]) -> List[str]:
    """Split raw text into sentences in source order, verbatim."""
    if not text or not text.strip():
        return []
    sentences = [s.strip() for s in _punkt().tokenize(text)]
    sentences = [s for s in sentences if s]
    logger.debug(f"Split text into {len(sentences)} sentences")
    return sentences
