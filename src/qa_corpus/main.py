# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for building the question corpus, inspecting a document and logging status

import json as jsonlib
from pathlib import Path

import asyncclick as click
from rich.console import Console
from rich.panel import Panel

from qa_corpus.config import get_config
from qa_corpus.core.builder import CorpusBuilder
from qa_corpus.core.loader import discover_documents, read_document
from qa_corpus.core.service import CorpusImportService
from qa_corpus.extraction.base import CorpusError
from qa_corpus.persistence.manager import DatabaseManager
from qa_corpus.persistence.writers import records_to_json
from qa_corpus.utils.logging import (
    LoggingMode,
    configure_logging,
    create_smart_progress,
    get_logger,
    get_logging_status,
    with_pipeline_context,
)
from qa_corpus.utils.rich_tables import (
    create_import_summary_table,
    create_logging_status_table,
    create_records_table,
    print_rich_table,
)

console = Console()


@click.command()
@click.argument("files", nargs=-1)
@click.option("--source-dir", type=click.Path(path_type=Path), help="Directory holding the markdown documents")
@click.option("--all-markdown", is_flag=True, help="Import every *.md file in the source directory (sorted by name)")
@click.option("--output-dir", type=click.Path(path_type=Path), help="Directory receiving the corpus files")
@click.option("--no-typescript", is_flag=True, help="Skip the TypeScript data module")
@click.option("--database-url", help="Also store the corpus in this async SQLAlchemy database")
@click.option("--dry-run", is_flag=True, help="Build and report without writing any output")
@click.pass_context
async def build(
    ctx,
    files: tuple[str, ...],
    source_dir: Path | None,
    all_markdown: bool,
    output_dir: Path | None,
    no_typescript: bool,
    database_url: str | None,
    dry_run: bool,
):
    """
    📚 Build the deduplicated question corpus from markdown documents.

    FILES are document names inside the source directory, processed in the
    order given. Without FILES the configured document list is used.
    """
    json_output = ctx.obj["json_output"]
    overrides = {
        key: value
        for key, value in {
            "source_dir": source_dir,
            "output_dir": output_dir,
            "database_url": database_url,
        }.items()
        if value is not None
    }
    if no_typescript:
        overrides["typescript_module"] = False
    config = get_config().model_copy(update=overrides)

    with with_pipeline_context("corpus_import", source_dir=str(config.source_dir)) as logger:
        service = CorpusImportService(config=config)
        try:
            names = discover_documents(config.source_dir) if all_markdown else list(files) or None
            if json_output:
                report = await service.run(names=names, dry_run=dry_run)
            else:
                progress, _task_id, tracker = create_smart_progress(console)
                with progress, tracker:
                    report = await service.run(names=names, progress_callback=tracker, dry_run=dry_run)
        except CorpusError as e:
            logger.error("Corpus import failed", error=str(e), error_type=type(e).__name__)
            if not json_output:
                console.print(f"[red]❌ {e}[/red]")
            raise click.exceptions.Exit(1) from e
        finally:
            await service.close()

        if json_output:
            click.echo(jsonlib.dumps({"records": report.record_count, "files": [str(p) for p in report.written_files]}))
        else:
            print_rich_table(console, create_import_summary_table(report.result, report.written_files))


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
async def inspect(ctx, file: Path):
    """
    🔎 Parse a single markdown document and show its records (no dedup, no output files).
    """
    try:
        document = read_document(file)
    except CorpusError as e:
        get_logger(__name__).error("Inspect failed", document=str(file), error=str(e))
        if not ctx.obj["json_output"]:
            console.print(f"[red]❌ {e}[/red]")
        raise click.exceptions.Exit(1) from e

    builder = CorpusBuilder(default_topic=get_config().default_topic)
    records = builder.parse_document(document.content or "")

    if ctx.obj["json_output"]:
        click.echo(records_to_json(records))
        return

    console.print(Panel.fit(f"📄 [bold cyan]{file.name}[/bold cyan]: {len(records)} records", border_style="magenta"))
    print_rich_table(console, create_records_table(records, title=f"Records in {file.name}"))


@click.command(name="show-database")
@click.argument("database_url")
async def show_database(database_url: str):
    """
    🗄️ List the questions stored in a corpus database.
    """
    db = DatabaseManager(database_url)
    try:
        await db.create_tables()
        records = await db.list_questions()
    finally:
        await db.close()

    if not records:
        console.print("[yellow]No questions stored.[/yellow]")
        return
    print_rich_table(console, create_records_table(records, title=f"Stored questions ({len(records)})"))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output structured JSON logs instead of rich interface")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    📚 QA Corpus - Markdown Q&A to a typed question corpus

    Segment markdown question documents, classify each question, and merge
    near-duplicates across files into one canonical corpus.
    """
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    _initialize_logging(json, log_level, log_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


app.add_command(build)
app.add_command(inspect)
app.add_command(show_database)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
