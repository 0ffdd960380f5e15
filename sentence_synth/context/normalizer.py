# sentence_synth/context/normalizer.py
from typing import Tuple

# punctuation that closes an independent clause
SENTENCE_ENDINGS = ".?!;"


def split_sentence_ending(token: str) -> Tuple[str, bool]:
    """
    Strip one trailing sentence terminator, if present.
    Returns (text, ends_sentence). Commas and colons stay attached.
    """
    if token and token[-1] in SENTENCE_ENDINGS:
        return token[:-1], True
    return token, False


def decapitalize(text: str) -> str:
    # only the first letter; "NASA" at a sentence start becomes "nASA"
    if not text:
        return text
    return text[0].lower() + text[1:]
