from .base import EMOTIONS, Familiarity, Polarity, null_vector
from .tokenizer import tokenize, split_sentences
from .stemmer import IdentityStemmer, CandidateStemmer, WordNetStemmer, build_stemmer
from .lexicon import LexiconStore
from .scoring import ScoringEngine
from .aggregate import averaged_scores

__all__ = [
    "EMOTIONS",
    "Familiarity",
    "Polarity",
    "null_vector",
    "tokenize",
    "split_sentences",
    "IdentityStemmer",
    "CandidateStemmer",
    "WordNetStemmer",
    "build_stemmer",
    "LexiconStore",
    "ScoringEngine",
    "averaged_scores",
]
