# ABOUTME: Reads named markdown source documents from disk into SourceDocument pairs
# ABOUTME: Missing files become content=None so the builder can log and skip them

from collections.abc import Iterable
from pathlib import Path

from qa_corpus.core.models import SourceDocument
from qa_corpus.extraction.base import DocumentLoadError
from qa_corpus.utils.logging import get_logger

logger = get_logger(__name__)


def read_document(path: Path, name: str | None = None) -> SourceDocument:
    """Read one UTF-8 document; a missing file yields ``content=None``."""
    name = name or path.name
    if not path.is_file():
        return SourceDocument(name=name, content=None)
    try:
        return SourceDocument(name=name, content=path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Failed to read {path}: {e}") from e


def load_documents(directory: Path, names: Iterable[str]) -> list[SourceDocument]:
    """Load documents in the given order, keeping missing ones as placeholders.

    An unreadable file is logged and treated like a missing one.
    """
    documents: list[SourceDocument] = []
    for name in names:
        try:
            documents.append(read_document(directory / name, name))
        except DocumentLoadError as e:
            logger.error("Unreadable source document", document=name, error=str(e))
            documents.append(SourceDocument(name=name, content=None))

    logger.debug(
        "Loaded source documents",
        directory=str(directory),
        requested=len(documents),
        missing=sum(1 for d in documents if d.is_missing),
    )
    return documents


def discover_documents(directory: Path, pattern: str = "*.md") -> list[str]:
    """Names of all matching files in ``directory``, sorted for a stable import order."""
    if not directory.is_dir():
        raise DocumentLoadError(f"Source directory does not exist: {directory}")
    return sorted(path.name for path in directory.glob(pattern) if path.is_file())
