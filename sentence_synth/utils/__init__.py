# sentence_synth/utils/__init__.py
# logging, config and model persistence helpers

from .logger_utils import Log, configure_logging
from .config_manager import Config, check_option
from .model_store import is_saved_model, load_model, save_model

__all__ = [
    "Log",
    "configure_logging",
    "Config",
    "check_option",
    "is_saved_model",
    "load_model",
    "save_model",
]
