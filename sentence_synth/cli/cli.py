"""
cli.py - command line front end for sentence_synth
Features:
- `model`: build a model from a corpus and dump it (plain or as a Rich table), optionally save it
- `sentence`: print one or more random sentences of an exact word count
- `interactive`: build once, then ask for sentence lengths in a loop
- JSON config file for defaults, command line flags win
- Uses Rich for tables, prompts and log output
"""

from __future__ import annotations

import argparse
import random
import time
from typing import List, Optional, TextIO

# ui styling with Rich
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich import box
from rich.markup import escape

from sentence_synth import __version__
from sentence_synth.core.dump import dump_model, model_table
from sentence_synth.core.errors import SentenceSynthError
from sentence_synth.core.markov_model import BuildConfig, Model, build_from_file
from sentence_synth.core.synthesizer import SentenceSynthesizer
from sentence_synth.utils.config_manager import DEFAULTS, LOG_LEVELS, Config
from sentence_synth.utils.logger_utils import Log, configure_logging
from sentence_synth.utils.model_store import is_saved_model, load_model, save_model

# initialise consoles for rich output
console = Console()
err_console = Console(stderr=True)

NO_SENTENCE = "No sentences of selected length possible from this model."


def _positive_int(raw: str) -> int:
    try:
        n = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a whole number: {raw!r}")
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sentence-synth",
        description="Build a word adjacency model from text and generate sentences from it.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="JSON config file with defaults")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS
    )
    parser.add_argument("--log-file", help="where timing metrics are appended")
    parser.add_argument(
        "--max-word-length", type=_positive_int, help="longest token the scanner keeps"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_model = sub.add_parser("model", help="print the model built from a corpus")
    p_model.add_argument("source", help="corpus text file or saved model (.json)")
    p_model.add_argument("--table", action="store_true", help="render as a table")
    p_model.add_argument("--save", metavar="OUT", help="also save the model as JSON")

    p_sent = sub.add_parser("sentence", help="print random sentences of N words")
    p_sent.add_argument("source", help="corpus text file or saved model (.json)")
    p_sent.add_argument("length", type=_positive_int, help="number of words")
    p_sent.add_argument("--seed", type=int, help="seed for reproducible output")
    p_sent.add_argument("--count", type=_positive_int, default=1, help="how many sentences")

    p_int = sub.add_parser("interactive", help="ask for sentence lengths in a loop")
    p_int.add_argument("source", help="corpus text file or saved model (.json)")
    p_int.add_argument("--seed", type=int, help="seed for reproducible output")

    return parser


def load_source(path: str, max_word_length: int) -> Model:
    """Saved models (.json) are loaded as-is, anything else is treated as corpus text."""
    if is_saved_model(path):
        with Log.time_block("load model"):
            return load_model(path)
    with Log.time_block("build model"):
        return build_from_file(path, BuildConfig(max_word_length=max_word_length))


class InteractiveSession:
    """Prompt loop that generates sentences from one already built model."""

    def __init__(
        self,
        model: Model,
        rng: Optional[random.Random] = None,
        default_length: int = 8,
        out: Optional[Console] = None,
        stream: Optional[TextIO] = None,
    ):
        self.model = model
        self.synth = SentenceSynthesizer(model, rng)
        self.default_length = default_length
        self.console = out or console
        self.stream = stream  # read input from here instead of the terminal (tests)
        self.running = True
        self.generated = 0
        self.impossible = 0
        self.search_time = 0.0

    def run(self) -> None:
        self.console.rule("[bold magenta]Sentence Synth[/bold magenta]")
        self.console.print("[cyan]Enter a word count to get a sentence of that length.[/cyan]")
        self.console.print("Commands: /model /stats /help /quit\n")

        while self.running:
            try:
                line = Prompt.ask(
                    "[green]Words[/green]",
                    console=self.console,
                    default=str(self.default_length),
                    stream=self.stream,
                )
            except (EOFError, KeyboardInterrupt):
                self.running = False
                break
            line = line.strip()
            if not line:
                continue
            if line.startswith("/"):
                self._handle_command(line)
                continue
            self._handle_length(line)

    # COMMAND HANDLING -------------------------------------------------------
    def _handle_command(self, cmd: str) -> None:
        if cmd in ("/q", "/quit", "/exit"):
            self.console.rule("[red]Exiting[/red]")
            self.running = False
            return

        if cmd == "/model":
            self.console.print(model_table(self.model))
            return

        if cmd == "/stats":
            self.console.print(self._stats_table())
            return

        if cmd == "/help":
            self.console.print(
                Panel(
                    "<n>     sentence of n words\n"
                    "/model  show the vocabulary\n"
                    "/stats  session statistics\n"
                    "/quit   leave",
                    title="Help",
                    border_style="cyan",
                )
            )
            return

        self.console.print(f"[red]Unknown command:[/red] {escape(cmd)}")

    def _handle_length(self, raw: str) -> None:
        try:
            length = _positive_int(raw)
        except argparse.ArgumentTypeError as e:
            self.console.print(f"[red]Bad length:[/red] {escape(str(e))}")
            return

        t0 = time.perf_counter()
        sentence = self.synth.generate(length)
        self.search_time += time.perf_counter() - t0

        if sentence is None:
            self.impossible += 1
            self.console.print(f"[yellow]{NO_SENTENCE}[/yellow]", soft_wrap=True)
            return
        self.generated += 1
        self.console.print(sentence, markup=False, highlight=False, soft_wrap=True)

    # DISPLAY ---------------------------------------------------------------------
    def _stats_table(self) -> Table:
        asked = self.generated + self.impossible
        avg_ms = (self.search_time / asked * 1000.0) if asked else 0.0
        t = Table(title="Session", box=box.MINIMAL)
        t.add_column("Metric", style="cyan")
        t.add_column("Value", style="white")
        t.add_row("Vocabulary", str(len(self.model)))
        t.add_row("Sentence starters", str(len(self.model.sentence_starters)))
        t.add_row("Sentences generated", str(self.generated))
        t.add_row("Impossible lengths", str(self.impossible))
        t.add_row("Avg search time", f"{avg_ms:.2f} ms")
        return t


def _settings(args: argparse.Namespace) -> dict:
    """
    Defaults, overlaid with the config file, overlaid with explicit flags.
    Config file values get the same checks argparse applies to the flags.
    """
    settings = dict(DEFAULTS)
    if args.config:
        settings.update(Config(args.config).validated())
    flags = {
        "log_level": args.log_level,
        "log_path": args.log_file,
        "max_word_length": args.max_word_length,
        "seed": getattr(args, "seed", None),
    }
    settings.update({k: v for k, v in flags.items() if v is not None})
    return settings


def _cmd_model(args: argparse.Namespace, settings: dict) -> int:
    model = load_source(args.source, settings["max_word_length"])
    if args.table:
        console.print(model_table(model))
    else:
        console.out(dump_model(model), end="", highlight=False)
    if args.save:
        try:
            out = save_model(model, args.save)
        except OSError as e:
            err_console.print(f"[red]Save failed:[/red] {escape(str(e))}", highlight=False)
            return 1
        err_console.print(f"[green]Model saved:[/green] {escape(str(out))}", highlight=False)
    return 0


def _cmd_sentence(args: argparse.Namespace, settings: dict) -> int:
    model = load_source(args.source, settings["max_word_length"])
    rng = random.Random(settings["seed"])
    synth = SentenceSynthesizer(model, rng)
    for _ in range(args.count):
        sentence = synth.generate(args.length)
        if sentence is None:
            console.print(NO_SENTENCE, markup=False, highlight=False, soft_wrap=True)
            # same length, same model: every later attempt fails too
            break
        console.print(
            f'Random sentence of {args.length} words: "{sentence}"',
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    return 0


def _cmd_interactive(args: argparse.Namespace, settings: dict) -> int:
    model = load_source(args.source, settings["max_word_length"])
    rng = random.Random(settings["seed"])
    InteractiveSession(model, rng, default_length=int(settings["default_length"])).run()
    return 0


COMMANDS = {
    "model": _cmd_model,
    "sentence": _cmd_sentence,
    "interactive": _cmd_interactive,
}


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = _settings(args)
        configure_logging(settings["log_level"])
        if settings["log_path"]:
            Log.set_default_path(settings["log_path"])
        return COMMANDS[args.command](args, settings)
    except SentenceSynthError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
