# config_manager.py - JSON config manager

import json
import logging
import os
from typing import Any, Dict, List, Optional

from sentence_synth.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "max_word_length": 50,  # tokenizer bound
    "seed": None,  # None -> fresh random sentences every run
    "default_length": 8,  # interactive prompt default
    "log_level": "WARNING",
    "log_path": None,  # None -> logs/sentence_synth.log
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# options that must be whole numbers >= 1
POSITIVE_INTS = ("max_word_length", "default_length")


def _whole_number(key: str, val: Any) -> int:
    # bools are ints to Python but never a sensible option value
    if isinstance(val, bool) or not isinstance(val, (int, str)):
        raise ConfigError(key, f"not a whole number: {val!r}")
    try:
        return int(val)
    except ValueError:
        raise ConfigError(key, f"not a whole number: {val!r}") from None


def check_option(key: str, val: Any) -> Any:
    """
    Validate one option and return it in its stored form
    (numbers as int, log level upper case, paths as str).
    Raises ConfigError for a value the CLI could not use.
    """
    if key in POSITIVE_INTS:
        n = _whole_number(key, val)
        if n < 1:
            raise ConfigError(key, f"must be at least 1, got {n}")
        return n

    if key == "seed":
        return None if val is None else _whole_number(key, val)

    if key == "log_level":
        level = str(val).upper()
        if level not in LOG_LEVELS:
            raise ConfigError(key, f"{val!r} is not one of {', '.join(LOG_LEVELS)}")
        return level

    if key == "log_path":
        if val is None:
            return None
        try:
            return os.fspath(val)
        except TypeError:
            raise ConfigError(key, f"not a path: {val!r}") from None

    raise KeyError(f"No such option: {key}")


class Config:
    def __init__(self, path: str = "sentence_synth.json", create: bool = False):
        self.path = path
        self.data: Dict[str, Any] = dict(DEFAULTS)
        self._load(create)

    def _load(self, create: bool):
        if os.path.exists(self.path):
            try:
                with open(self.path, "r", encoding="utf8") as f:
                    loaded = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("ignoring unreadable config %s: %s", self.path, e)
                return
            if not isinstance(loaded, dict):
                logger.warning("ignoring config %s: top level is not an object", self.path)
                return
            self.data.update(loaded)
        elif create:
            self.save()

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self.data.get(key, default)

    def show(self) -> List[str]:
        return [f"{k:15} = {v}" for k, v in self.data.items()]

    def validated(self) -> Dict[str, Any]:
        """Known options after check_option; unknown keys in the file are ignored."""
        return {k: check_option(k, self.data.get(k, v)) for k, v in DEFAULTS.items()}

    def set(self, key: str, val: Any):
        """
        Set an option, coercing strings to the stored type.
        Raises KeyError for an unknown option, ConfigError for a bad value.
        """
        if key not in DEFAULTS:
            raise KeyError(f"No such option: {key}")
        self.data[key] = check_option(key, val)
        self.save()
