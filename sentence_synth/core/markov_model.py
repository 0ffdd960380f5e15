# markov_model.py
# first-order word adjacency model built in one pass over a token stream.

from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
import logging

from sentence_synth.context.normalizer import decapitalize, split_sentence_ending
from sentence_synth.context.tokenizer import MAX_WORD_LENGTH, iter_file_tokens, iter_tokens
from sentence_synth.core.errors import EmptyCorpusError
from sentence_synth.core.registry import WordEntry, WordRegistry

logger = logging.getLogger(__name__)

MODEL_FORMAT_VERSION = 1


@dataclass(frozen=True)
class BuildConfig:
    """
    Knobs for turning corpus text into tokens before the builder sees them.
    """
    max_word_length: int = MAX_WORD_LENGTH


class Model:
    """
    The adjacency model: a vocabulary arena plus the list of words seen
    at sentence starts (one index per occurrence, so duplicates weight
    the draw). Read-only once constructed: the registry is frozen here,
    so register/link raise RuntimeError and a shared model cannot change
    under a running search. Safe to share between any number of
    synthesizers.
    """

    def __init__(self, registry: WordRegistry, sentence_starters: List[int]) -> None:
        registry.freeze()
        self.registry = registry
        self.sentence_starters = tuple(sentence_starters)

    # ------------------------------------------------------------------
    # Introspection helpers
    # ------------------------------------------------------------------
    def word(self, idx: int) -> WordEntry:
        return self.registry[idx]

    def words(self) -> List[WordEntry]:
        return list(self.registry)

    def starter_words(self) -> List[WordEntry]:
        return [self.registry[i] for i in self.sentence_starters]

    def vocabulary_size(self) -> int:
        return len(self.registry)

    def __len__(self) -> int:
        return len(self.registry)

    def __contains__(self, text: object) -> bool:
        return text in self.registry

    def __repr__(self) -> str:
        return (
            f"Model(words={len(self.registry)}, "
            f"starters={len(self.sentence_starters)})"
        )

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": MODEL_FORMAT_VERSION,
            "words": [
                {
                    "text": e.text,
                    "count": e.occurrence_count,
                    "sentence_ending": e.is_sentence_ending,
                    "successors": list(e.successors),
                }
                for e in self.registry
            ],
            "starters": list(self.sentence_starters),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Model":
        """
        Rebuild a model from to_dict() output.
        Raises ValueError for an unknown version or dangling indices.
        """
        version = data.get("version")
        if version != MODEL_FORMAT_VERSION:
            raise ValueError(f"unsupported model format version: {version!r}")

        registry = WordRegistry()
        raw_words = data.get("words", [])
        for w in raw_words:
            idx = registry.register(str(w["text"]), bool(w["sentence_ending"]))
            if idx != len(registry) - 1:
                raise ValueError(f"duplicate word in model data: {w['text']!r}")
            registry[idx].occurrence_count = int(w["count"])

        n = len(registry)
        for idx, w in enumerate(raw_words):
            for dst in w.get("successors", []):
                if not 0 <= int(dst) < n:
                    raise ValueError(f"successor index {dst} out of range")
                registry.link(idx, int(dst))

        starters = [int(i) for i in data.get("starters", [])]
        if any(not 0 <= i < n for i in starters):
            raise ValueError("sentence starter index out of range")
        if n == 0:
            raise EmptyCorpusError("model data contains no words")
        return cls(registry, starters)


class ModelBuilder:
    """
    Consumes tokens one at a time and grows the registry.
    Keeps a rolling `previous` index and an `at_sentence_start` flag:
     - a token ending in . ? ! ; closes the sentence (terminator stripped)
     - the first token of a sentence gets its first letter lowercased,
       is recorded as a sentence starter and is NOT linked from the
       previous word (no links across sentence boundaries)
     - every other token is linked as a successor of the previous word
    """

    def __init__(self) -> None:
        self._registry = WordRegistry()
        self._starters: List[int] = []
        self._previous: Optional[int] = None
        self._at_sentence_start = True
        self._n_tokens = 0
        self._finished = False

    # ------------------------------------------------------------------
    # Training
    # ------------------------------------------------------------------
    def add_token(self, token: str) -> int:
        """Feed one token; returns the arena index it was registered under."""
        if self._finished:
            raise RuntimeError("model already built; builders are single use")

        text, ends_sentence = split_sentence_ending(token)
        if self._at_sentence_start:
            text = decapitalize(text)

        idx = self._registry.register(text, ends_sentence)

        if self._at_sentence_start:
            self._starters.append(idx)
            self._at_sentence_start = False
        else:
            self._registry.link(self._previous, idx)

        if ends_sentence:
            self._at_sentence_start = True

        self._previous = idx
        self._n_tokens += 1
        return idx

    def add_tokens(self, tokens: Iterable[str]) -> None:
        for t in tokens:
            self.add_token(t)

    @property
    def token_count(self) -> int:
        return self._n_tokens

    def finish(self) -> Model:
        """Close construction and return the model."""
        if self._finished:
            raise RuntimeError("model already built; builders are single use")
        if not self._n_tokens:
            raise EmptyCorpusError()
        self._finished = True
        model = Model(self._registry, self._starters)
        logger.debug(
            "built model from %d tokens: %d words, %d sentence starters",
            self._n_tokens,
            len(self._registry),
            len(self._starters),
        )
        return model


# ----------------------------------------------------------------------
# Public API
# ----------------------------------------------------------------------
def build(tokens: Iterable[str]) -> Model:
    """Build a model from an already tokenized stream."""
    builder = ModelBuilder()
    builder.add_tokens(tokens)
    return builder.finish()


def build_from_text(text: str, config: Optional[BuildConfig] = None) -> Model:
    cfg = config or BuildConfig()
    return build(iter_tokens(text, cfg.max_word_length))


def build_from_file(path: Union[str, Path], config: Optional[BuildConfig] = None) -> Model:
    """
    Tokenize and build from a corpus file.
    Raises UnreadableSourceError if the file can't be read and
    EmptyCorpusError if it holds no tokens.
    """
    cfg = config or BuildConfig()
    model = build(iter_file_tokens(path, cfg.max_word_length))
    logger.info("loaded corpus %s: %r", path, model)
    return model
