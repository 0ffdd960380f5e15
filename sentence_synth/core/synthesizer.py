# synthesizer.py
"""
SentenceSynthesizer - exact-length sentence search over an adjacency Model.

Search:
 - outer level: sentence starters are tried in random order, each index
   at most once, until one of them can be extended to a full sentence
 - inner level: depth-first extension one position at a time; at every
   position the current word's successor indices are tried in random
   order without replacement, backtracking on a dead end
 - a path succeeds only if it reaches exactly `length` words and the
   last word has been seen ending a sentence

Every tried-set is local to one call frame, so a word that shows up at
two positions gets two independent sets and nothing leaks between
branches or between concurrent searches on the same model.

The search is exhaustive: if any valid chain exists one is returned,
whatever the random source does. Randomness only decides which chain
and how long it takes. Worst case is exponential in `length`.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence
import logging
import random
import sys

from sentence_synth.core.markov_model import Model
from sentence_synth.core.registry import WordEntry

logger = logging.getLogger(__name__)

# stack frames kept free on top of one frame per sentence position
_STACK_HEADROOM = 100


@contextmanager
def _recursion_allowance(depth: int) -> Iterator[None]:
    """Temporarily raise the interpreter recursion limit if `depth` needs it."""
    old = sys.getrecursionlimit()
    raised = depth >= _STACK_HEADROOM
    if raised:
        # frames already on the stack fit under `old`, so add on top of it
        sys.setrecursionlimit(old + depth + _STACK_HEADROOM)
    try:
        yield
    finally:
        if raised:
            sys.setrecursionlimit(old)


def _draw(untried: List[int], rng: random.Random) -> int:
    """Remove and return a uniformly chosen element of `untried`."""
    pos = rng.randrange(len(untried))
    untried[pos], untried[-1] = untried[-1], untried[pos]
    return untried.pop()


class SentenceSynthesizer:
    """
    Generates sentences of an exact word count from a read-only Model.

    rng: any object with random.Random's randrange(); pass a seeded
    random.Random for reproducible output. Defaults to a fresh
    OS-seeded generator.
    """

    def __init__(self, model: Model, rng: Optional[random.Random] = None) -> None:
        self.model = model
        self.rng = rng if rng is not None else random.Random()

    # ---------------------------------
    # Search
    # ---------------------------------
    def find_words(self, length: int) -> Optional[List[int]]:
        """
        Return `length` arena indices forming a valid chain, or None if
        the model has no such chain.
        """
        if length < 1:
            raise ValueError(f"sentence length must be >= 1, got {length}")

        starters = self.model.sentence_starters
        untried = list(range(len(starters)))
        sentence: List[int] = []

        with _recursion_allowance(length):
            while untried:
                pick = _draw(untried, self.rng)
                sentence.append(starters[pick])
                if self._extend(sentence, length):
                    return sentence
                sentence.pop()

        logger.debug("no sentence of %d words in %r", length, self.model)
        return None

    def _extend(self, sentence: List[int], length: int) -> bool:
        """
        Grow `sentence` (whose last word is confirmed) to `length` words.
        On failure `sentence` is left exactly as it was passed in.
        """
        registry = self.model.registry
        current = sentence[-1]

        if len(sentence) == length:
            return registry[current].is_sentence_ending

        successors = registry.successors_of(current)
        untried = list(range(len(successors)))
        while untried:
            pick = _draw(untried, self.rng)
            sentence.append(successors[pick])
            if self._extend(sentence, length):
                return True
            sentence.pop()
        return False

    # ---------------------------------
    # Public helpers
    # ---------------------------------
    def generate_words(self, length: int) -> Optional[List[WordEntry]]:
        found = self.find_words(length)
        if found is None:
            return None
        return [self.model.word(i) for i in found]

    def generate(self, length: int) -> Optional[str]:
        """Formatted sentence of `length` words, or None if impossible."""
        words = self.generate_words(length)
        if words is None:
            return None
        return format_sentence(words)


def format_sentence(words: Sequence[WordEntry]) -> str:
    """
    Join word texts with single spaces, uppercase the first character
    and close with a period.
    """
    out = " ".join(w.text for w in words) + "."
    return out[:1].upper() + out[1:]


def generate(
    model: Model, length: int, rng: Optional[random.Random] = None
) -> Optional[List[WordEntry]]:
    """Word sequence of exactly `length` entries, or None."""
    return SentenceSynthesizer(model, rng).generate_words(length)


def generate_sentence(
    model: Model, length: int, rng: Optional[random.Random] = None
) -> Optional[str]:
    return SentenceSynthesizer(model, rng).generate(length)
