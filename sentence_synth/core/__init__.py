"""
sentence_synth.core

The model and the search that runs over it.
Contains:
 - the vocabulary arena (WordRegistry, WordEntry)
 - the one-pass adjacency model builder (ModelBuilder, build*)
 - exact-length randomized backtracking search (SentenceSynthesizer)
 - model dumps for inspection
"""

# errors first: context.tokenizer imports it while core is still loading
from .errors import (
    ConfigError,
    EmptyCorpusError,
    SentenceSynthError,
    UnreadableSourceError,
)
from .registry import WordEntry, WordRegistry
from .markov_model import (
    BuildConfig,
    Model,
    ModelBuilder,
    build,
    build_from_file,
    build_from_text,
)
from .synthesizer import (
    SentenceSynthesizer,
    format_sentence,
    generate,
    generate_sentence,
)
from .dump import dump_model, model_table

__all__ = [
    "SentenceSynthError",
    "ConfigError",
    "EmptyCorpusError",
    "UnreadableSourceError",
    "WordEntry",
    "WordRegistry",
    "BuildConfig",
    "Model",
    "ModelBuilder",
    "build",
    "build_from_file",
    "build_from_text",
    "SentenceSynthesizer",
    "format_sentence",
    "generate",
    "generate_sentence",
    "dump_model",
    "model_table",
]
