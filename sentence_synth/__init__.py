"""
sentence_synth

Builds a first-order word adjacency model from a body of text and
generates new sentences of an exact word count from it.

    >>> import random
    >>> from sentence_synth import build_from_text, generate_sentence
    >>> model = build_from_text("The cat sat. The dog ran.")
    >>> generate_sentence(model, 3, random.Random(1)) in ("The cat sat.", "The dog ran.")
    True
"""

__version__ = "0.1.0"

from .core import (
    BuildConfig,
    ConfigError,
    EmptyCorpusError,
    Model,
    ModelBuilder,
    SentenceSynthError,
    SentenceSynthesizer,
    UnreadableSourceError,
    WordEntry,
    WordRegistry,
    build,
    build_from_file,
    build_from_text,
    dump_model,
    format_sentence,
    generate,
    generate_sentence,
    model_table,
)
from .context import tokenize

__all__ = [
    "__version__",
    "BuildConfig",
    "ConfigError",
    "EmptyCorpusError",
    "Model",
    "ModelBuilder",
    "SentenceSynthError",
    "SentenceSynthesizer",
    "UnreadableSourceError",
    "WordEntry",
    "WordRegistry",
    "build",
    "build_from_file",
    "build_from_text",
    "dump_model",
    "format_sentence",
    "generate",
    "generate_sentence",
    "model_table",
    "tokenize",
]
