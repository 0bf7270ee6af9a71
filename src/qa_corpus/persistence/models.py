# ABOUTME: SQLModel table for the optional database copy of the corpus
# ABOUTME: One row per QuestionRecord, keyed by its position in corpus order

from __future__ import annotations

from datetime import UTC, datetime

from sqlmodel import JSON, Column, Field, SQLModel

from qa_corpus.core.models import Difficulty, QuestionRecord, QuestionType


def utcnow() -> datetime:
    """Returns the current UTC timestamp."""

    return datetime.now(UTC)


class QuestionRow(SQLModel, table=True):
    """Persisted form of a QuestionRecord."""

    __tablename__ = "question"  # type: ignore[assignment]

    position: int = Field(primary_key=True, description="Zero-based position in the corpus order")
    id: str = Field(index=True, description="Deterministic question identifier")
    topic: str = Field(description="Question topic")
    level: str = Field(description="easy, medium or hard")
    type: str = Field(description="mcq, code, open or flashcard")
    question: str = Field(description="Question text")
    answer: str = Field(description="Answer text")
    example: str | None = Field(default=None, description="Optional example text")
    tags: list[str] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
        description="Tags in classifier order",
    )
    imported_at: datetime = Field(default_factory=utcnow, description="Timestamp of the import run")

    @classmethod
    def from_record(cls, record: QuestionRecord, position: int, imported_at: datetime | None = None) -> QuestionRow:
        return cls(
            id=record.id,
            position=position,
            topic=record.topic,
            level=record.level.value,
            type=record.type.value,
            question=record.question,
            answer=record.answer,
            example=record.example,
            tags=list(record.tags),
            imported_at=imported_at or utcnow(),
        )

    def to_record(self) -> QuestionRecord:
        return QuestionRecord(
            id=self.id,
            topic=self.topic,
            level=Difficulty(self.level),
            type=QuestionType(self.type),
            question=self.question,
            answer=self.answer,
            example=self.example,
            tags=list(self.tags or []),
        )
