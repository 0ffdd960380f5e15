# sentence_synth/cli/__init__.py
from .cli import InteractiveSession, build_parser, main

__all__ = ["InteractiveSession", "build_parser", "main"]
