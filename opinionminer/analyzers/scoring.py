import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .base import EMOTIONS, Familiarity, null_vector
from .lexicon import LexiconStore
from .stemmer import IdentityStemmer
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


class ScoringEngine:
    """
    Scores sentences against a LexiconStore.

    Polarity mode sums +1/-1 per positive/negative token into one integer per
    sentence. Emotion mode adds up the emotion vectors of the tokens in each
    sentence. Both count lexicon hits and misses in a fresh Familiarity per
    call, so one engine can serve independent analyses.

    The stemmer is any object with a stem(word) method; IdentityStemmer
    leaves tokens untouched.
    """

    def __init__(self, lexicon: LexiconStore, stemmer=None):
        self.lexicon = lexicon
        self.stemmer = stemmer or IdentityStemmer()

    def _words(self, sentence: str) -> List[str]:
        return [self.stemmer.stem(token) for token in tokenize(sentence)]

    def analyze(self, sentences: Sequence[str]) -> Tuple[List[int], Familiarity]:
        """Polarity score per sentence, plus familiarity for this pass."""
        familiarity = Familiarity()
        scores: List[int] = []
        for sentence in sentences:
            score = 0
            for word in self._words(sentence):
                polarity = self.lexicon.polarity_of(word)
                familiarity.record(polarity is not None)
                if polarity is not None:
                    score += polarity.score
            scores.append(score)
        logger.debug(
            f"Scored {len(scores)} sentences "
            f"(known={familiarity.known}, unknown={familiarity.unknown})"
        )
        return scores, familiarity

    def nrc_analyze(
        self, sentences: Sequence[str]
    ) -> Tuple[List[Dict[str, int]], Familiarity]:
        """
        Summed emotion vector per sentence, plus familiarity for this pass.

        A sentence without any emotion-lexicon word gets a null vector.
        """
        familiarity = Familiarity()
        series: List[Dict[str, int]] = []
        for sentence in sentences:
            accumulated: Optional[Dict[str, int]] = None
            for word in self._words(sentence):
                vector = self.lexicon.emotions_of(word)
                familiarity.record(vector is not None)
                if vector is None:
                    continue
                if accumulated is None:
                    accumulated = {emotion: 0 for emotion in EMOTIONS}
                for emotion, value in vector.items():
                    accumulated[emotion] += value
            series.append(accumulated if accumulated is not None else null_vector())
        logger.debug(
            f"Scored emotions for {len(series)} sentences "
            f"(known={familiarity.known}, unknown={familiarity.unknown})"
        )
        return series, familiarity

    def get_word(self, word: str) -> Optional[int]:
        """+1 or -1 for a polarity-lexicon word, None if unknown."""
        polarity = self.lexicon.polarity_of(self.stemmer.stem(word))
        return polarity.score if polarity is not None else None

    def get_word_polarity(self, word: str) -> Optional[Dict[str, int]]:
        polarity = self.lexicon.polarity_of(self.stemmer.stem(word))
        return polarity.as_dict() if polarity is not None else None

    def nrc_get_word(self, word: str) -> Optional[Dict[str, int]]:
        return self.lexicon.emotions_of(self.stemmer.stem(word))

    def get_sentence(self, sentence: str) -> List[int]:
        """Per-token polarity of a sentence, 0 for unknown tokens."""
        results = []
        for token in tokenize(sentence):
            score = self.get_word(token)
            results.append(score if score is not None else 0)
        return results

    def nrc_get_sentence(self, sentence: str) -> Dict[str, Optional[Dict[str, int]]]:
        """
        Emotion vector of each distinct token in a sentence.

        Keys are the unstemmed tokens; a repeated token appears once.
        """
        return {token: self.nrc_get_word(token) for token in tokenize(sentence)}
