class OpinionMinerError(Exception):
    """Base class for opinionminer errors."""


class StemmerUnavailable(OpinionMinerError):
    """Stemming was requested but the WordNet backend could not be loaded."""


class LexiconError(OpinionMinerError):
    """A lexicon source is missing or malformed."""


class ConfigError(OpinionMinerError):
    """A configuration file could not be used."""
