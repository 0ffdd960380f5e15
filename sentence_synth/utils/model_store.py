# model_store.py - persistence for built adjacency models

# - models are saved as JSON (see Model.to_dict for the layout)
# - indices in the file refer to positions in the "words" list
# - anything that stops a file from loading surfaces as UnreadableSourceError

import json
import logging
from pathlib import Path
from typing import Union

from sentence_synth.core.errors import UnreadableSourceError
from sentence_synth.core.markov_model import Model

logger = logging.getLogger(__name__)

MODEL_SUFFIX = ".json"


def save_model(model: Model, path: Union[str, Path]) -> Path:
    """
    Save a model to disk in JSON format.
    Args:
        model (Model): the model to write
        path: destination file, parent folders are created
    Returns:
        Path: where it was written
    """
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as f:
        json.dump(model.to_dict(), f, indent=2)
    logger.info("saved model (%d words) to %s", len(model), out)
    return out


def load_model(path: Union[str, Path]) -> Model:
    """
    Load a model written by save_model.
    Raises:
        UnreadableSourceError: missing file, bad JSON or inconsistent data
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise UnreadableSourceError(str(path), str(e)) from e

    if not isinstance(data, dict):
        raise UnreadableSourceError(str(path), "not a saved model")
    try:
        model = Model.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        raise UnreadableSourceError(str(path), f"bad model data: {e}") from e
    logger.info("loaded model (%d words) from %s", len(model), path)
    return model


def is_saved_model(path: Union[str, Path]) -> bool:
    return Path(path).suffix.lower() == MODEL_SUFFIX
