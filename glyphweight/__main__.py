"""
Flyweight demonstration runner.

    $ python -m glyphweight                 # render the sample text and its statistics
    $ python -m glyphweight efficiency      # shared vs unshared memory on a paragraph
    $ python -m glyphweight --log-level DEBUG sample
"""

import argparse
import logging
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .editor import TextEditor, create_sample_text
from .state import CharacterFormatting

# ==============================================================================================
# Constants
# ==============================================================================================

LOG_LEVEL = "INFO"
LOOKUP_POSITION = (30, 0)
LINE_WIDTH = 50
CHAR_ADVANCE = 10
LINE_HEIGHT = 20

SAMPLE_PARAGRAPH = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. "
    "Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua. "
    "Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris "
    "nisi ut aliquip ex ea commodo consequat."
)

PARAGRAPH_FORMATTINGS = [
    CharacterFormatting(),
    CharacterFormatting(is_bold=True),
    CharacterFormatting(font_family="Times New Roman", font_size=14, is_italic=True, color="blue"),
    CharacterFormatting(font_family="Courier New", is_underline=True, color="red"),
]

logger = logging.getLogger("glyphweight")


def configure_logging(level: str) -> None:
    """Attach a RichHandler to the package logger (once) and set its level."""
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def stats_table(editor: TextEditor, title: str) -> Table:
    stats = editor.get_stats()
    unshared = editor.unshared_memory()
    saving = unshared - stats.total_memory
    saving_percent = round(saving / unshared * 100) if unshared else 0

    table = Table(title=title, box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Metric", style="white", no_wrap=True)
    table.add_column("Value", style="green", justify="right")
    table.add_row("Characters", str(editor.count()))
    table.add_row("Unique flyweights", str(stats.unique_count))
    table.add_row("Created", str(stats.created_count))
    table.add_row("Reused", str(stats.reuse_count))
    table.add_row("Shared memory (bytes)", str(stats.total_memory))
    table.add_row("Unshared memory (bytes)", str(unshared))
    table.add_row("Saving", f"{saving} bytes ({saving_percent}%)")
    if editor.count():
        table.add_row(
            "Bytes per character", str(round(stats.total_memory / editor.count()))
        )
    return table


def run_sample(console: Console) -> TextEditor:
    console.print("[bold]=== Flyweight Pattern Example ===[/bold]")
    editor = create_sample_text(sink=lambda line: console.print(line, markup=False))
    editor.render_text()

    x, y = LOOKUP_POSITION
    console.print(f"\nFinding characters at position ({x}, {y}):")
    for context in editor.find_characters_at(x, y):
        flyweight = context.flyweight
        formatting = flyweight.formatting
        console.print(f"Found character: '{flyweight.char}'", markup=False)
        console.print(
            f"Formatting: {formatting.style_description()}, color: {formatting.color}",
            markup=False,
        )

    console.print(stats_table(editor, "Flyweight statistics"))
    return editor


def run_efficiency(console: Console) -> TextEditor:
    console.print("[bold]=== Flyweight Memory Efficiency ===[/bold]")
    editor = TextEditor()
    for index, char in enumerate(SAMPLE_PARAGRAPH):
        formatting = PARAGRAPH_FORMATTINGS[index % len(PARAGRAPH_FORMATTINGS)]
        editor.add_character(
            char, formatting, index * CHAR_ADVANCE, (index // LINE_WIDTH) * LINE_HEIGHT
        )

    console.print(stats_table(editor, "Memory efficiency"))
    return editor


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demonstration runner."""
    parser = argparse.ArgumentParser(
        prog="glyphweight", description="Flyweight pattern demonstration"
    )
    parser.add_argument(
        "demo",
        nargs="?",
        default="sample",
        choices=["sample", "efficiency"],
        help="Which demonstration to run (default: sample)",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {LOG_LEVEL})",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    console = Console()

    if args.demo == "efficiency":
        run_efficiency(console)
    else:
        run_sample(console)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
