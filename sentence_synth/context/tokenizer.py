# sentence_synth/context/tokenizer.py
# scanner that turns raw corpus text into bounded word tokens


from __future__ import annotations
from pathlib import Path
from typing import Iterator, List, Union
import re

from sentence_synth.core.errors import UnreadableSourceError

# letters plus the punctuation a token may carry
TOKEN_CHARS = "A-Za-z!?,.;:'"
MAX_WORD_LENGTH = 50

_run_re = re.compile(f"[{TOKEN_CHARS}]+")


def _check_bound(max_word_length: int) -> None:
    if max_word_length < 1:
        raise ValueError(f"max_word_length must be >= 1, got {max_word_length}")


def iter_tokens(text: str, max_word_length: int = MAX_WORD_LENGTH) -> Iterator[str]:
    """
    Yield every maximal run of letters and ! ? , . ; : ' in `text`.
    Anything else (whitespace, digits, other symbols) only separates tokens.
    A run longer than `max_word_length` is cut into consecutive chunks,
    the way a bounded scanner resumes where it stopped.
    """
    _check_bound(max_word_length)
    if not text:
        return
    for m in _run_re.finditer(text):
        run = m.group(0)
        for i in range(0, len(run), max_word_length):
            yield run[i:i + max_word_length]


def tokenize(text: str, max_word_length: int = MAX_WORD_LENGTH) -> List[str]:
    """Return the token list for `text`. See iter_tokens."""
    return list(iter_tokens(text, max_word_length))


def iter_file_tokens(
    path: Union[str, Path], max_word_length: int = MAX_WORD_LENGTH
) -> Iterator[str]:
    """
    Tokenize a corpus file. The whole file is read up front so that
    open/decode problems surface as UnreadableSourceError before any
    token is handed out.
    """
    _check_bound(max_word_length)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableSourceError(str(path), str(e)) from e
    return iter_tokens(text, max_word_length)
