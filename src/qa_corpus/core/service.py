# ABOUTME: High-level service API for one corpus import: load documents, build, persist
# ABOUTME: Output is all-or-nothing; nothing is written unless the whole corpus was built

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from qa_corpus.config import Config, get_config
from qa_corpus.core.builder import CorpusBuilder, ProgressCallback
from qa_corpus.core.loader import discover_documents, load_documents
from qa_corpus.core.models import CorpusBuildResult
from qa_corpus.persistence.manager import DatabaseManager
from qa_corpus.persistence.writers import CorpusWriter, JsonCorpusWriter, StagedWrite, TypeScriptModuleWriter
from qa_corpus.utils.logging import get_logger


@dataclass(slots=True)
class ImportReport:
    """Outcome of a corpus import run."""

    result: CorpusBuildResult
    written_files: list[Path] = field(default_factory=list)
    database_rows: int | None = None

    @property
    def record_count(self) -> int:
        return len(self.result.records)


class CorpusImportService:
    """Service that runs the corpus pipeline end to end."""

    def __init__(
        self,
        config: Config | None = None,
        builder: CorpusBuilder | None = None,
        writers: Sequence[CorpusWriter] | None = None,
        database: DatabaseManager | None = None,
    ):
        self.config = config or get_config()
        self.builder = builder or CorpusBuilder(default_topic=self.config.default_topic)
        self.writers = list(writers) if writers is not None else self._default_writers()
        self.database = database
        if self.database is None and self.config.database_url:
            self.database = DatabaseManager(self.config.database_url)
        self.logger = get_logger(__name__)

    def _default_writers(self) -> list[CorpusWriter]:
        writers: list[CorpusWriter] = [JsonCorpusWriter(self.config.output_dir, self.config.output_basename)]
        if self.config.typescript_module:
            writers.append(
                TypeScriptModuleWriter(
                    self.config.output_dir, self.config.output_basename, self.config.typescript_export_name
                )
            )
        return writers

    def resolve_sources(self, source_dir: Path | None = None, names: Sequence[str] | None = None) -> list[str]:
        """Explicit names win; otherwise the configured list, or every markdown file when it is empty."""
        if names:
            return list(names)
        if self.config.source_files:
            return list(self.config.source_files)
        return discover_documents(source_dir or self.config.source_dir)

    def build(
        self,
        source_dir: Path | None = None,
        names: Sequence[str] | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> CorpusBuildResult:
        """Load and build the corpus without writing anything."""
        directory = source_dir or self.config.source_dir
        documents = load_documents(directory, self.resolve_sources(directory, names))
        return self.builder.build(documents, progress_callback=progress_callback)

    async def run(
        self,
        source_dir: Path | None = None,
        names: Sequence[str] | None = None,
        progress_callback: ProgressCallback | None = None,
        dry_run: bool = False,
    ) -> ImportReport:
        """Build the corpus and hand it to every configured destination.

        Destinations are prepared and every file is staged before anything is
        replaced; a failure at any point leaves all previous output in place.

        Raises:
            CorpusWriteError: If an output destination cannot be written
        """
        result = self.build(source_dir, names, progress_callback)
        report = ImportReport(result=result)

        if dry_run:
            self.logger.info("Dry run - skipping output", records=report.record_count)
            return report

        if self.database is not None:
            await self.database.create_tables()

        with StagedWrite() as staged:
            for writer in self.writers:
                staged.stage(writer.path, writer.render(result.records))

            if self.database is not None:
                report.database_rows = await self.database.replace_corpus(result.records)

            report.written_files = staged.commit()

        self.logger.info(
            "Import complete",
            records=report.record_count,
            files=[str(p) for p in report.written_files],
            database_rows=report.database_rows,
        )
        return report

    async def close(self) -> None:
        """Close the service and clean up resources."""
        if self.database is not None:
            await self.database.close()
