import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .analyzers.aggregate import DEFAULT_BINS, averaged_scores
from .analyzers.base import Familiarity
from .analyzers.lexicon import LexiconStore
from .analyzers.scoring import ScoringEngine
from .analyzers.stemmer import IdentityStemmer, build_stemmer
from .analyzers.tokenizer import SentenceSplitter, split_sentences
from .extractors.text import TextExtractor

logger = logging.getLogger(__name__)


class Opinion:
    """
    Measures the polarity and emotional content of a text, sentence by sentence.

    Usage:
        opinion = Opinion(file="some.txt")
        opinion.analyze()
        opinion.averaged_scores(5)
        opinion.nrc_analyze()
        opinion.nrc_get_word("happy")

    Input comes from `text` or from `file` (checked for existence here). When
    both are given, text wins. With neither, every analysis runs over zero
    sentences.

    Sentences are split once, on first use, and kept for the lifetime of the
    object. Each analyze()/nrc_analyze() call replaces `scores`/`nrc_scores`
    and `familiarity`.

    With stem=True every word is reduced through WordNet before lookup. The
    stemmer is built on first use and raises StemmerUnavailable if nltk's
    WordNet corpus is missing.
    """

    def __init__(
        self,
        file: Optional[Union[str, Path]] = None,
        text: Optional[str] = None,
        stem: bool = False,
        lexicon: Optional[LexiconStore] = None,
        splitter: Optional[SentenceSplitter] = None,
        stemmer_factory: Optional[Callable[[], object]] = None,
    ):
        self._extractor = TextExtractor()
        self.file = self._extractor.validate_file(file) if file is not None else None
        self.text = text
        self.stem = stem
        self.lexicon = lexicon or LexiconStore.default()
        self._splitter = splitter or split_sentences
        self._stemmer_factory = stemmer_factory or build_stemmer
        self._stemmer = None
        self._engine: Optional[ScoringEngine] = None
        self._sentences: Optional[List[str]] = None

        self.scores: List[int] = []
        self.nrc_scores: List[Dict[str, int]] = []
        self.familiarity = Familiarity()

    @property
    def stemmer(self):
        if self._stemmer is None:
            self._stemmer = self._stemmer_factory() if self.stem else IdentityStemmer()
        return self._stemmer

    @property
    def engine(self) -> ScoringEngine:
        if self._engine is None:
            self._engine = ScoringEngine(self.lexicon, self.stemmer)
        return self._engine

    def _contents(self) -> Optional[str]:
        if self.text is not None:
            return self.text
        if self.file is not None:
            return self._extractor.extract(self.file)
        return None

    @property
    def sentences(self) -> List[str]:
        if self._sentences is None:
            self._sentences = list(self._splitter(self._contents() or ""))
            logger.debug(f"Cached {len(self._sentences)} sentences")
        return self._sentences

    def analyze(self) -> List[int]:
        """Compute the polarity score of every sentence and store it in `scores`."""
        scores, familiarity = self.engine.analyze(self.sentences)
        self.scores = scores
        self.familiarity = familiarity
        return scores

    def nrc_analyze(self) -> List[Dict[str, int]]:
        """Compute the emotion vector of every sentence and store it in `nrc_scores`."""
        nrc_scores, familiarity = self.engine.nrc_analyze(self.sentences)
        self.nrc_scores = nrc_scores
        self.familiarity = familiarity
        return nrc_scores

    nrc_sentiment = nrc_analyze

    def averaged_scores(self, bins: int = DEFAULT_BINS) -> List[float]:
        return averaged_scores(self.scores, bins)

    averaged_score = averaged_scores

    def ratio(self, use_unknown: bool = False) -> float:
        return self.familiarity.ratio(use_unknown)

    def get_word(self, word: str) -> Optional[int]:
        return self.engine.get_word(word)

    def get_word_polarity(self, word: str) -> Optional[Dict[str, int]]:
        return self.engine.get_word_polarity(word)

    def nrc_get_word(self, word: str) -> Optional[Dict[str, int]]:
        return self.engine.nrc_get_word(word)

    def get_sentence(self, sentence: str) -> List[int]:
        return self.engine.get_sentence(sentence)

    def nrc_get_sentence(self, sentence: str) -> Dict[str, Optional[Dict[str, int]]]:
        return self.engine.nrc_get_sentence(sentence)

    def summary(self) -> Dict:
        return {
            "source_path": str(self.file) if self.file else None,
            "sentences": self.sentences,
            "scores": self.scores,
            "nrc_scores": self.nrc_scores,
            "familiarity": self.familiarity.as_dict(),
        }
