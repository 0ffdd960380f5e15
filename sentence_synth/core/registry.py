"""
registry.py
Vocabulary arena for the adjacency model.
Every distinct word string gets exactly one WordEntry; entries refer
to each other by integer index into the arena, never by object.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass
class WordEntry:
    """
    One vocabulary item.
    text: the (possibly sentence-start normalized) string, the identity key
    occurrence_count: how many times this exact text was seen
    is_sentence_ending: sticky, True once any occurrence closed a sentence
    successors: arena indices, one per observed transition (duplicates = frequency)
    """

    text: str
    occurrence_count: int = 1
    is_sentence_ending: bool = False
    successors: List[int] = field(default_factory=list)


class WordRegistry:
    """
    Owns all WordEntry records for a model. Supports:
     - exact-match lookup by text
     - register (insert or update occurrence)
     - link (record a transition)
    Entries are only ever appended, so an index stays valid for the
    lifetime of the registry. Once frozen (a Model does this when it
    takes ownership) register and link raise RuntimeError.
    """

    def __init__(self) -> None:
        self._entries: List[WordEntry] = []
        # text -> arena index
        self._index: Dict[str, int] = {}
        self._frozen = False

    # LOOKUP ----------------------------------------------------------------
    def lookup(self, text: str) -> Optional[int]:
        """Arena index for `text`, or None if never registered."""
        return self._index.get(text)

    def index_of(self, text: str) -> int:
        idx = self._index.get(text)
        if idx is None:
            raise KeyError(text)
        return idx

    # MUTATION --------------------------------------------------------------
    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("registry is frozen; the model is read-only")

    def register(self, text: str, ends_sentence: bool) -> int:
        """
        Record one occurrence of `text` and return its index.
        A repeat bumps the count and can only turn is_sentence_ending on.
        """
        self._check_mutable()
        idx = self._index.get(text)
        if idx is not None:
            entry = self._entries[idx]
            entry.occurrence_count += 1
            if ends_sentence:
                entry.is_sentence_ending = True
            return idx

        idx = len(self._entries)
        self._entries.append(WordEntry(text=text, is_sentence_ending=ends_sentence))
        self._index[text] = idx
        return idx

    def link(self, src: int, dst: int) -> None:
        """Append `dst` to the successors of `src`."""
        self._check_mutable()
        self._entries[src].successors.append(dst)

    # INTROSPECTION ---------------------------------------------------------
    def successors_of(self, idx: int) -> List[int]:
        return self._entries[idx].successors

    def total_occurrences(self) -> int:
        return sum(e.occurrence_count for e in self._entries)

    def __getitem__(self, idx: int) -> WordEntry:
        return self._entries[idx]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[WordEntry]:
        return iter(self._entries)

    def __contains__(self, text: object) -> bool:
        return text in self._index
