#!/usr/bin/env python3
"""
Terminal UI
===========
Rich-based rendering for the CLI: word tables, phonology inspection and
the debug diagnostic stream.

Usage:
    from namesmith.ui import configure_logging, words_table

    configure_logging(debug=True)
    console.print(words_table(words))
"""

import logging
from typing import List, Sequence

from rich import box
from rich.console import Console, Group
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from .generators import GeneratedWord, PhonologyDescriptor, template_slots
from .settings import log_date_format, log_format


def make_console(stderr: bool = False) -> Console:
    return Console(stderr=stderr, highlight=False)


def configure_logging(debug: bool = False, console: Console = None) -> logging.Handler:
    """
    Route namesmith's log records to stderr through rich.

    With ``debug`` the generation trace (draws, templates, affixes) is
    shown; otherwise only warnings and errors.
    """
    handler = RichHandler(
        console=console or make_console(stderr=True),
        show_path=False,
        markup=False,
        log_time_format=log_date_format(),
    )
    handler.setFormatter(logging.Formatter(log_format()))

    root = logging.getLogger("namesmith")
    for existing in list(root.handlers):
        if isinstance(existing, RichHandler):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.WARNING)
    return handler


def words_table(words: Sequence[GeneratedWord]) -> Table:
    """Table of generated words with their transcriptions."""
    table = Table(box=box.SIMPLE, show_edge=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Romanized", style="bold")
    table.add_column("Phonetic")
    table.add_column("Transcription", style="cyan")
    table.add_column("Syl", justify="right")
    table.add_column("Affixes", style="dim")

    for i, word in enumerate(words, 1):
        affixes = []
        if word.prefix:
            affixes.append(f"+{word.prefix}")
        if word.suffix:
            affixes.append(f"-{word.suffix}")
        table.add_row(
            str(i),
            word.romanized,
            f"/{word.phonetic}/",
            f"[{word.transcription}]",
            str(word.syllables),
            ', '.join(affixes) or '-',
        )
    return table


def phonology_view(descriptor: PhonologyDescriptor) -> Group:
    """Inventories, templates and romanization of one phonology."""
    summary = Table(box=box.SIMPLE, show_header=False, title=descriptor.name or None)
    summary.add_column("Field", style="bold")
    summary.add_column("Value")
    summary.add_row("Consonants", _inventory(descriptor.consonants))
    summary.add_row("Onsets", _inventory(descriptor.onsets))
    summary.add_row("Codas", _inventory(descriptor.codas))
    summary.add_row("Vowels", _inventory(descriptor.vowels))
    summary.add_row("Stressed", _stress_text(descriptor.stressed))
    summary.add_row("Max syllables", str(descriptor.max_syllable_count))

    templates = Table(box=box.SIMPLE, title="Syllable templates")
    templates.add_column("Template")
    templates.add_column("Onset slots", justify="right")
    templates.add_column("Coda slots", justify="right")
    for template in descriptor.structures:
        onsets, codas = template_slots(template)
        templates.add_row(template, str(onsets), str(codas))

    romanization = Table(box=box.SIMPLE, title="Romanization")
    romanization.add_column("Phoneme")
    romanization.add_column("Spelling")
    for phoneme, grapheme in descriptor.romanization.items():
        romanization.add_row(phoneme, grapheme)

    return Group(summary, templates, romanization)


def phonologies_table(names: List[str]) -> Table:
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Name")
    for name in names:
        table.add_row(name)
    return table


def _inventory(values: Sequence[str]) -> Text:
    if not values:
        return Text("(none)", style="dim")
    return Text(' '.join(values))


def _stress_text(stressed: int) -> str:
    if stressed >= 0:
        return f"{stressed} (syllable {stressed + 1} from the start)"
    return f"{stressed} (syllable {-stressed} from the end)"
