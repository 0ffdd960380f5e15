# dump.py - human-readable views of a Model

from __future__ import annotations
from typing import List

from rich import box
from rich.table import Table
from rich.text import Text

from sentence_synth.core.markov_model import Model


def dump_lines(model: Model) -> List[str]:
    """
    Plain text dump, one list item per output line:
    every word with its count, a (se) marker for sentence enders and its
    successor texts, then every sentence-starting word.
    """
    registry = model.registry
    lines = [
        "----------MODEL----------",
        f"---Model size: {len(registry)} words",
        "---Words:",
    ]
    for entry in registry:
        head = f"{entry.text} ({entry.occurrence_count})"
        if entry.is_sentence_ending:
            head += " (se)"
        # each successor keeps its trailing space
        tail = "".join(f"{registry[i].text} " for i in entry.successors)
        lines.append(f"{head}: {tail}")
    lines.append(f"---Sentence-starting words ({len(model.sentence_starters)}):")
    lines.extend(registry[i].text for i in model.sentence_starters)
    lines.append("---------------------------")
    return lines


def dump_model(model: Model) -> str:
    return "\n".join(dump_lines(model)) + "\n"


def model_table(model: Model) -> Table:
    """Rich table with one row per vocabulary entry."""
    registry = model.registry
    starters = set(model.sentence_starters)

    table = Table(
        title=f"Model ({len(registry)} words, {len(model.sentence_starters)} starters)",
        box=box.SIMPLE,
        show_edge=False,
    )
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Word", style="bold")
    table.add_column("Count", justify="right", style="magenta")
    table.add_column("Ends", justify="center")
    table.add_column("Starts", justify="center")
    table.add_column("Successors", style="dim")

    for i, entry in enumerate(registry):
        table.add_row(
            str(i),
            Text(entry.text),
            str(entry.occurrence_count),
            "[green]yes[/green]" if entry.is_sentence_ending else "",
            "[yellow]yes[/yellow]" if i in starters else "",
            Text(" ".join(registry[j].text for j in entry.successors)),
        )
    return table
