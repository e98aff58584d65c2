#!/usr/bin/env python3
"""
research.py - Everling Research CLI

Subcommands:
  run      Sync vocabulary, run every discourse mode for a seed, write reports
  sync     Merge the raw morpheme file into the stored vocabulary
  extract  Show what a morpheme file would contribute, without writing

Exit codes:
  0: success
  2: fatal error (unreadable/invalid file, invalid configuration)
"""

import json
import logging
import sys
from pathlib import Path
from typing import List

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from receipts import write_receipt_jsonl

from everling import (
    EverlingError,
    Language,
    VocabularyData,
    VocabularyRepository,
    extract,
    load_and_sync,
    report_to_dict,
    run_experiment_sets,
    write_report,
)
from everling.constants import MORPHEME_FILE, RECEIPTS_FILE, RESULTS_DIR, VOCABULARY_FILE, WORD_CLASSES

console = Console()

_LANGUAGES = [lang.value for lang in Language]


def print_success(message: str) -> None:
    """Print a success message with green checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with red X."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message with yellow warning sign."""
    console.print(f"[yellow]⚠[/yellow] {message}")


def print_next(command: str) -> None:
    """Print suggested next command."""
    console.print(f"\n[dim]Next:[/dim] [cyan]{command}[/cyan]")


def _fail(output: str, message: str) -> None:
    if output == "json":
        click.echo(json.dumps({"error": message}, ensure_ascii=False))
    else:
        print_error(message)
    sys.exit(2)


def _vocab_table(title: str, vocab: VocabularyData) -> Table:
    table = Table(title=title)
    table.add_column("Class", style="cyan")
    table.add_column("Words", justify="right")
    table.add_column("Sample")
    for word_class in WORD_CLASSES:
        words = getattr(vocab, word_class)
        table.add_row(word_class, str(len(words)), ", ".join(words[:5]))
    return table


def _sync_status(ledger: List[dict]) -> str:
    for receipt in reversed(ledger):
        if receipt["receipt_type"] == "vocabulary_sync":
            return receipt["status"]
    return "unknown"


# --- CLI Group ---

@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log informational messages")
def everling(verbose: bool) -> None:
    """Everling Semantic Integration research commands."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )


# --- run ---

@everling.command("run")
@click.option("--language", "-l", type=click.Choice(_LANGUAGES), prompt="Select language",
              default=Language.ENGLISH.value, help="Output language")
@click.option("--seed", "-s", "seed_text", prompt="Enter seed (starting fluctuation)",
              help="Seed text")
@click.option("--random-seed", type=int, default=None, help="Seed the random source for reproducible runs")
@click.option("--vocab", default=VOCABULARY_FILE, show_default=True, help="Vocabulary JSON file")
@click.option("--morphemes", default=MORPHEME_FILE, show_default=True, help="Raw morpheme table")
@click.option("--results-dir", default=RESULTS_DIR, show_default=True, help="Report directory")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich")
def run_cmd(language: str, seed_text: str, random_seed, vocab: str, morphemes: str,
            results_dir: str, output: str) -> None:
    """Run every discourse mode for a seed and save the reports."""
    seed_text = seed_text.strip()
    ledger: List[dict] = []

    try:
        vocabulary = load_and_sync(Language(language), VocabularyRepository(vocab), morphemes, ledger)
        reports = run_experiment_sets(seed_text, Language(language), vocabulary,
                                      random_seed=random_seed, ledger=ledger)
        paths = [write_report(report, results_dir, ledger) for report in reports]

        receipts_path = Path(results_dir) / RECEIPTS_FILE
        with receipts_path.open("a", encoding="utf-8") as fh:
            for receipt in ledger:
                write_receipt_jsonl(receipt, fh)
    except EverlingError as e:
        _fail(output, str(e))
    except OSError as e:
        _fail(output, f"Cannot write receipts: {e}")

    if output == "json":
        click.echo(json.dumps({
            "reports": [report_to_dict(r) for r in reports],
            "paths": [str(p) for p in paths],
        }, indent=2, ensure_ascii=False))
        return

    if _sync_status(ledger) == "empty_extraction":
        print_warning(f"{morphemes} yielded no vocabulary; stored vocabulary used as-is")

    for report, path in zip(reports, paths):
        content = (
            f"Seed:                        \"{seed_text}\"\n"
            f"Crystallized Meaning:        \"{report.generated_sentence}\"\n"
            f"Structural Emergence Factor: {report.variance_change:.2f}x\n"
            f"Mean Intensity Score:        {report.intensity_score:.4f}"
        )
        console.print(Panel(
            content,
            title=f"[bold]Experiment: {report.config.mode.value}[/bold]",
            border_style="green",
        ))
        print_success(f"Saved: {path}")

    print_success(f"Verification complete. Reports saved to '{results_dir}/'.")


# --- sync ---

@everling.command("sync")
@click.option("--language", "-l", type=click.Choice(_LANGUAGES), default=Language.JAPANESE.value,
              show_default=True)
@click.option("--vocab", default=VOCABULARY_FILE, show_default=True, help="Vocabulary JSON file")
@click.option("--morphemes", default=MORPHEME_FILE, show_default=True, help="Raw morpheme table")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich")
def sync_cmd(language: str, vocab: str, morphemes: str, output: str) -> None:
    """Merge the morpheme file into the stored vocabulary."""
    ledger: List[dict] = []
    try:
        vocabulary = load_and_sync(Language(language), VocabularyRepository(vocab), morphemes, ledger)
    except EverlingError as e:
        _fail(output, str(e))

    status = _sync_status(ledger)
    if output == "json":
        click.echo(json.dumps({
            "language": language,
            "status": status,
            "counts": vocabulary.counts(),
        }, indent=2, ensure_ascii=False))
        return

    console.print(_vocab_table(f"Vocabulary: {language}", vocabulary))
    if status == "merged":
        print_success(f"Merged {morphemes} into {vocab}")
    elif status == "empty_extraction":
        print_warning(f"{morphemes} yielded no vocabulary; {vocab} left untouched")
    else:
        print_warning(f"No morpheme file at {morphemes}; nothing to merge")
        print_next(f"research.py extract {morphemes} --language {language}")


# --- extract ---

@everling.command("extract")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--language", "-l", type=click.Choice(_LANGUAGES), default=Language.JAPANESE.value,
              show_default=True)
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich")
def extract_cmd(path: str, language: str, output: str) -> None:
    """Show the vocabulary a morpheme file contains."""
    try:
        vocabulary = extract(path, Language(language))
    except EverlingError as e:
        _fail(output, str(e))

    if output == "json":
        click.echo(json.dumps({
            "path": path,
            "language": language,
            "vocabulary": vocabulary.to_dict(),
        }, indent=2, ensure_ascii=False))
        return

    console.print(_vocab_table(f"Extracted: {path}", vocabulary))
    if vocabulary.is_empty():
        print_warning("No classifiable morphemes found")
    else:
        print_next(f"research.py sync --language {language} --morphemes {path}")


if __name__ == "__main__":
    everling()
