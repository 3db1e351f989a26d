from .opinion import Opinion
from .analyzers import LexiconStore, ScoringEngine, Familiarity, EMOTIONS, averaged_scores
from .exceptions import OpinionMinerError, StemmerUnavailable, LexiconError, ConfigError

__version__ = "0.1.0"

__all__ = [
    "Opinion",
    "LexiconStore",
    "ScoringEngine",
    "Familiarity",
    "EMOTIONS",
    "averaged_scores",
    "OpinionMinerError",
    "StemmerUnavailable",
    "LexiconError",
    "ConfigError",
]
