# ABOUTME: Rich table utilities for styled, colorful CLI displays
# ABOUTME: Provides pre-configured table generators for import summaries, records and logging status

from collections import Counter
from collections.abc import Sequence
from typing import Any

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table

from qa_corpus.core.models import QuestionRecord


def create_key_value_table(
    title: str,
    data: dict[str, str],
    title_style: str = "bold cyan",
    key_style: str = "bold blue",
    value_style: str = "green",
    box_style=ROUNDED,
) -> Table:
    """Create a key-value table.

    Args:
        title: Table title with emoji/styling
        data: Dictionary of key-value pairs to display
        title_style: Style for the table title
        key_style: Style for the key column
        value_style: Style for the value column
        box_style: Border style for the table

    Returns:
        Formatted Rich table ready for printing
    """
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style="bold magenta",
        border_style="cyan",
        title_justify="left",
        expand=False,
    )

    table.add_column("Field", style=key_style, no_wrap=False)
    table.add_column("Value", style=value_style, no_wrap=False)

    for key, value in data.items():
        table.add_row(key, str(value))

    return table


def create_multi_column_table(
    title: str,
    columns: list[tuple[str, str]],
    rows: list[list[str]],
    title_style: str = "bold cyan",
    header_style: str = "bold magenta",
    alternate_row_styles: list[str] | None = None,
    box_style=ROUNDED,
) -> Table:
    """Create a multi-column table with zebra striping."""
    table = Table(
        title=f"[{title_style}]{title}[/{title_style}]",
        box=box_style,
        show_header=True,
        header_style=header_style,
        border_style="cyan",
        title_justify="left",
        row_styles=alternate_row_styles or ["", "dim"],
        expand=True,
    )

    for name, style in columns:
        table.add_column(name, style=style)

    for row in rows:
        table.add_row(*row)

    return table


def _counts(values: Sequence[str]) -> str:
    return ", ".join(f"{key}: {count}" for key, count in sorted(Counter(values).items())) or "None"


def create_import_summary_table(result: Any, written_files: Sequence[Any] = ()) -> Table:
    """Create a summary table for a finished import.

    Args:
        result: CorpusBuildResult from the builder
        written_files: Paths of the artifacts that were written

    Returns:
        Styled summary table
    """
    stats = result.stats
    records = result.records

    summary_data = {
        "📄 Documents Read": str(stats.documents_read),
        "❓ Missing Documents": ", ".join(result.missing_documents) or "None",
        "🧩 Sections": f"{stats.sections_seen} seen, {stats.sections_skipped} skipped, {stats.sections_failed} failed",
        "📥 Candidates": str(stats.candidates),
        "🔁 Duplicates": f"{stats.duplicates_discarded} discarded, {stats.duplicates_replaced} replaced",
        "✅ Unique Questions": str(len(records)),
        "📊 Levels": _counts([r.level.value for r in records]),
        "🏷️ Types": _counts([r.type.value for r in records]),
    }
    if written_files:
        summary_data["💾 Written"] = "\n".join(str(p) for p in written_files)

    return create_key_value_table(
        title="📚 Corpus Import Summary",
        data=summary_data,
        title_style="bold green",
        key_style="cyan",
        value_style="white",
    )


def create_records_table(records: Sequence[QuestionRecord], title: str) -> Table:
    """Create a table listing parsed records."""

    def _truncate(text: str, length: int) -> str:
        return text[:length] + "..." if len(text) > length else text

    columns = [
        ("ID", "cyan"),
        ("Topic", "magenta"),
        ("Level", "yellow"),
        ("Type", "green"),
        ("Question", "white"),
        ("Tags", "blue"),
    ]
    rows = [
        [r.id, r.topic, r.level.value, r.type.value, _truncate(r.question, 70), ", ".join(r.tags)] for r in records
    ]

    return create_multi_column_table(title=title, columns=columns, rows=rows)


def create_logging_status_table(status: dict[str, Any]) -> Table:
    """Create a logging configuration status table.

    Args:
        status: Logging status dictionary

    Returns:
        Styled logging configuration table
    """
    logging_data = {
        "🔧 Mode": status["mode"].title(),
        "📁 Log Directory": status["log_directory"] or "N/A (production mode)",
        "🔇 Suppressed Libraries": ", ".join(status["third_party_suppressed"]),
    }

    if status["log_files"]["main"]:
        logging_data["📝 Main Log"] = status["log_files"]["main"]
    if status["log_files"]["json"]:
        logging_data["📊 JSON Log"] = status["log_files"]["json"]
    if status["log_files"]["errors"]:
        logging_data["🚨 Error Log"] = status["log_files"]["errors"]

    return create_key_value_table(
        title="🔍 Logging Configuration",
        data=logging_data,
        title_style="bold green",
        key_style="blue",
        value_style="white",
    )


def print_rich_table(console: Console, table: Table) -> None:
    """Print a rich table with consistent spacing."""
    console.print()
    console.print(table)
    console.print()
