# tests/conftest.py - shared corpora and fixtures

import pytest

from sentence_synth.core.markov_model import build_from_text
from sentence_synth.utils.logger_utils import Log

CAT_DOG = "The cat sat. The dog ran."

# "a" follows itself, so the adjacency graph has a cycle
CYCLE = "a a a b."

# a few branches that dead-end, some that close sentences, a loop through "the"
MIXED = (
    "The quick fox saw the dog. The dog saw the fox! "
    "A fox ran; the dog, tired, slept. Did the fox sleep? "
    "Nobody saw the quick dog run away from the fox."
)


@pytest.fixture(autouse=True)
def _log_to_tmp(tmp_path, monkeypatch):
    """Keep timing metrics out of the working tree."""
    monkeypatch.setattr(Log, "path", str(tmp_path / "test.log"))


@pytest.fixture
def cat_dog_model():
    return build_from_text(CAT_DOG)


@pytest.fixture
def cycle_model():
    return build_from_text(CYCLE)


@pytest.fixture
def mixed_model():
    return build_from_text(MIXED)


@pytest.fixture
def corpus_file(tmp_path):
    p = tmp_path / "corpus.txt"
    p.write_text(CAT_DOG, encoding="utf-8")
    return p


def chain_is_valid(model, words):
    """Check a generated word sequence against the model's adjacency rules."""
    registry = model.registry
    idx = [registry.index_of(w.text) for w in words]
    if idx[0] not in model.sentence_starters:
        return False
    for a, b in zip(idx, idx[1:]):
        if b not in registry[a].successors:
            return False
    return registry[idx[-1]].is_sentence_ending
