# ABOUTME: All-or-nothing file writers for the finished corpus (JSON array and TypeScript module)
# ABOUTME: Artifacts are staged as temp files beside their targets and swapped in only once all succeed

import json
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from qa_corpus.core.models import QuestionRecord
from qa_corpus.extraction.base import CorpusError
from qa_corpus.utils.logging import get_logger

logger = get_logger(__name__)


class CorpusWriteError(CorpusError):
    """Raised when the output destination cannot be prepared or written."""

    pass


class CorpusWriter(Protocol):
    """Protocol for persisting a finished corpus as one file."""

    path: Path

    def render(self, records: Sequence[QuestionRecord]) -> str:
        """Return the full file content for ``records``."""
        ...

    def write(self, records: Sequence[QuestionRecord]) -> Path:
        """Persist ``records`` and return the path of the written artifact."""
        ...


def records_to_json(records: Sequence[QuestionRecord]) -> str:
    """Serialize records as a 2-space indented JSON array."""
    return json.dumps([record.to_export_dict() for record in records], indent=2, ensure_ascii=False)


class StagedWrite:
    """Temp files for several artifacts that replace their targets together or not at all.

    Use as a context manager: anything staged but not committed when the block
    exits is deleted, leaving every existing target untouched.
    """

    def __init__(self):
        self.pending: list[tuple[Path, str]] = []

    def stage(self, path: Path, content: str) -> None:
        """Write ``content`` to a temp file beside ``path``.

        Raises:
            CorpusWriteError: If the directory cannot be created or the temp file written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise CorpusWriteError(f"Cannot create output directory {path.parent}: {e}") from e

        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=path.parent, prefix=f".{path.name}.", suffix=".tmp", delete=False
            ) as handle:
                tmp_name = handle.name
                handle.write(content)
                handle.flush()
                os.fsync(handle.fileno())
        except OSError as e:
            if tmp_name is not None:
                _remove_quietly(tmp_name)
            raise CorpusWriteError(f"Failed to write {path}: {e}") from e

        self.pending.append((path, tmp_name))

    def commit(self) -> list[Path]:
        """Move every staged file onto its target, in staging order."""
        committed: list[Path] = []
        while self.pending:
            path, tmp_name = self.pending[0]
            try:
                os.replace(tmp_name, path)
            except OSError as e:
                raise CorpusWriteError(f"Failed to replace {path}: {e}") from e
            self.pending.pop(0)
            committed.append(path)
        return committed

    def discard(self) -> None:
        for _path, tmp_name in self.pending:
            _remove_quietly(tmp_name)
        self.pending.clear()

    def __enter__(self) -> "StagedWrite":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.discard()


def _remove_quietly(tmp_name: str) -> None:
    try:
        os.unlink(tmp_name)
    except FileNotFoundError:
        pass


def atomic_write_text(path: Path, content: str) -> Path:
    """Write ``content`` to ``path`` so readers never observe a partial file.

    Raises:
        CorpusWriteError: If the directory cannot be created or the write fails
    """
    with StagedWrite() as staged:
        staged.stage(path, content)
        staged.commit()
    return path


class JsonCorpusWriter:
    """Writes the corpus as ``<output_dir>/<basename>.json``."""

    def __init__(self, output_dir: Path, basename: str = "reactQuestions"):
        self.path = Path(output_dir) / f"{basename}.json"

    def render(self, records: Sequence[QuestionRecord]) -> str:
        return records_to_json(records)

    def write(self, records: Sequence[QuestionRecord]) -> Path:
        atomic_write_text(self.path, self.render(records))
        logger.info("Wrote JSON corpus", path=str(self.path), records=len(records))
        return self.path


class TypeScriptModuleWriter:
    """Writes an importable TypeScript module exporting the corpus as a typed array."""

    TEMPLATE = (
        "\n"
        "// Auto-generated from Q&A markdown files\n"
        "import {{ Question }} from '@/types';\n"
        "\n"
        "export const {export_name}: Question[] = {payload};\n"
    )

    def __init__(self, output_dir: Path, basename: str = "reactQuestions", export_name: str = "reactQuestions"):
        self.path = Path(output_dir) / f"{basename}Data.ts"
        self.export_name = export_name

    def render(self, records: Sequence[QuestionRecord]) -> str:
        return self.TEMPLATE.format(export_name=self.export_name, payload=records_to_json(records))

    def write(self, records: Sequence[QuestionRecord]) -> Path:
        atomic_write_text(self.path, self.render(records))
        logger.info("Wrote TypeScript corpus module", path=str(self.path), records=len(records))
        return self.path
