# ABOUTME: Domain models for the question corpus - records, enums and run results
# ABOUTME: QuestionRecord is the immutable output shape handed to every writer

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Difficulty(str, Enum):
    """Estimated difficulty of a question, derived from its answer."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class QuestionType(str, Enum):
    """Content category of a question section."""

    MCQ = "mcq"
    CODE = "code"
    OPEN = "open"
    FLASHCARD = "flashcard"


class QuestionRecord(BaseModel):
    """A single canonical question/answer record.

    Records are immutable; the deduplication stage keeps, discards or replaces
    them wholesale.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic identifier derived from the question text")
    topic: str = Field(default="React", description="Topic from a Category:/Topic: label")
    level: Difficulty = Field(description="Difficulty estimated from the answer")
    type: QuestionType = Field(description="Content category of the section")
    question: str = Field(description="Question text, trimmed")
    answer: str = Field(description="Answer text, trimmed")
    example: str | None = Field(default=None, description="Optional example from an E: span")
    tags: list[str] = Field(default_factory=list, description="Tags in classifier order")

    @field_validator("question", "answer")
    @classmethod
    def _require_text(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def to_export_dict(self) -> dict:
        """Plain JSON-ready dict; ``example`` is omitted when absent."""
        return self.model_dump(mode="json", exclude_none=True)


class SourceDocument(BaseModel):
    """A named source document; ``content`` is None when the file is missing."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: str | None = None

    @property
    def is_missing(self) -> bool:
        return self.content is None


class CorpusBuildStats(BaseModel):
    """Counters collected during one pipeline run."""

    documents_read: int = 0
    documents_missing: int = 0
    sections_seen: int = 0
    sections_skipped: int = 0
    sections_failed: int = 0
    candidates: int = 0
    duplicates_discarded: int = 0
    duplicates_replaced: int = 0

    @property
    def unique_records(self) -> int:
        return self.candidates - self.duplicates_discarded - self.duplicates_replaced


class CorpusBuildResult(BaseModel):
    """Deduplicated records plus the statistics of the run that produced them."""

    records: list[QuestionRecord] = Field(default_factory=list)
    stats: CorpusBuildStats = Field(default_factory=CorpusBuildStats)
    missing_documents: list[str] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.records)
