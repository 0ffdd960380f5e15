# sentence_synth/context/__init__.py
# text-side helpers: scanning corpus text and normalizing tokens

from .tokenizer import (
    MAX_WORD_LENGTH,
    iter_file_tokens,
    iter_tokens,
    tokenize,
)  # corpus text -> bounded word tokens
from .normalizer import (
    SENTENCE_ENDINGS,
    decapitalize,
    split_sentence_ending,
)  # sentence boundary detection and sentence-start normalization

__all__ = [
    "MAX_WORD_LENGTH",
    "SENTENCE_ENDINGS",
    "iter_tokens",
    "iter_file_tokens",
    "tokenize",
    "decapitalize",
    "split_sentence_ending",
]
