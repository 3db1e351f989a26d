import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "lexicon": {
        "positive": None,
        "negative": None,
        "emotion": None,
    },
    "analysis": {
        "stem": False,
        "bins": 10,
    },
    "logging": {
        "level": "INFO",
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load a YAML config and merge it over DEFAULT_CONFIG.

    With no path the defaults are returned. Relative lexicon paths are
    resolved against the config file's directory.
    """
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file {path} does not exist")

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    config = _merge(DEFAULT_CONFIG, data)
    lexicon = config.get("lexicon") or {}
    for key in ("positive", "negative", "emotion"):
        value = lexicon.get(key)
        if value and not Path(value).is_absolute():
            lexicon[key] = str(path.parent / value)
    logger.debug(f"Loaded config from {path}")
    return config
