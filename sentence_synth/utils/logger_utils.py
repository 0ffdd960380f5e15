# logger_utils.py -  log file messages, timing metrics and stdlib logging setup

import logging
import os
import time
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler

# Directory where log files go unless a path is given
LOG_DIR = "logs"

# Path to the default log file, can be overriden
DEFAULT_LOG_PATH = os.path.join(LOG_DIR, "sentence_synth.log")


def configure_logging(level: str = "WARNING") -> None:
    """
    Route stdlib logging (used by the library modules) through rich.
    Only the CLI calls this; importing the package never installs handlers.
    """
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


class Log:
    """Appends timestamped timing metrics to a log file."""

    # shared by metric()/time_block(), the CLI may point it elsewhere
    path: str = DEFAULT_LOG_PATH

    @classmethod
    def set_default_path(cls, path: str) -> None:
        cls.path = path

    @staticmethod
    def metric(tag, value, unit=""):
        """
        Record a metric (like timing or counts) in the default log file.
        Example: [12:45:02] build model done: 0.123s
        """
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"[{ts}] {tag}: {value}{unit}"
        _append(Log.path, line)

    @staticmethod
    def time_block(label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with Log.time_block("build model") as t:
                build_from_file(path)
            t.duration  # seconds
        It automatically logs how long the block took.
        """
        return _Timer(label)


def _append(path: str, line: str) -> None:
    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)  # created on first write, not on import
    with open(path, "a", encoding="utf-8") as f:
        f.write(line + "\n")


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, label):
        self.label = label
        self.start = time.perf_counter()
        self.duration = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """When exiting the 'with' block, calculate how long it took and record it as a metric. """
        self.duration = round(time.perf_counter() - self.start, 3)  # seconds (rounded)
        status = "done" if exc_type is None else "failed"
        Log.metric(f"{self.label} {status}", self.duration, "s")
