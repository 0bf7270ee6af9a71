# ABOUTME: Shared error taxonomy and protocols for the markdown extraction stage
# ABOUTME: Defines the parser interface consumed by the corpus builder

from typing import Protocol

from qa_corpus.core.models import QuestionRecord


class CorpusError(Exception):
    """Base class for all corpus pipeline errors."""

    pass


class SectionParseError(CorpusError):
    """Raised when a single section cannot be turned into a record."""

    pass


class DocumentLoadError(CorpusError):
    """Raised when a source document exists but cannot be read."""

    pass


class QuestionSectionParser(Protocol):
    """Protocol for turning one raw markdown section into a record."""

    def parse(self, section: str) -> QuestionRecord | None:
        """Parse a raw section.

        Args:
            section: Raw section text, starting at its ``Q:`` label

        Returns:
            The extracted record, or None when a required field is missing
        """
        ...
