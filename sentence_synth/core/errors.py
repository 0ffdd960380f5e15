# errors.py
# Exceptions raised while building a model from a corpus.
# Failing to find a sentence is NOT an error: the synthesizer returns None.

from __future__ import annotations
from typing import Optional


class SentenceSynthError(Exception):
    """Base class for every error this package raises on purpose."""


class EmptyCorpusError(SentenceSynthError):
    """The token stream produced zero tokens, so no model can be built."""

    def __init__(self, msg: str = "could not create model, no words found") -> None:
        super().__init__(msg)


class UnreadableSourceError(SentenceSynthError):
    """
    The corpus (or a saved model) could not be opened or read.
    Kept separate from EmptyCorpusError so callers can tell
    "nothing there" apart from "couldn't look".
    """

    def __init__(self, path: str, reason: Optional[str] = None) -> None:
        self.path = str(path)
        self.reason = reason
        msg = f"could not read {self.path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ConfigError(SentenceSynthError):
    """An option (from a config file or Config.set) has an unusable value."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"bad config value for {key}: {reason}")
