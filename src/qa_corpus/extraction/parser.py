# ABOUTME: Field extraction for a single question section (Q:/A:/E: spans plus labels)
# ABOUTME: Combines the span search with the classifiers and ID generation into a QuestionRecord

import re
from dataclasses import dataclass

from qa_corpus.core.models import QuestionRecord
from qa_corpus.extraction.classifiers import (
    ClassifierTables,
    DifficultyClassifier,
    TagClassifier,
    TypeClassifier,
    line_after_label,
)
from qa_corpus.extraction.hashing import question_id
from qa_corpus.utils.logging import get_logger

DEFAULT_TOPIC = "React"

HEADING_BOUNDARY = "\n##"

# label -> boundaries that close its span (end of string always closes)
SPAN_BOUNDARIES: dict[str, tuple[str, ...]] = {
    "Q:": ("\nA:", "\nE:", HEADING_BOUNDARY),
    "A:": ("\nQ:", "\nE:", HEADING_BOUNDARY),
    "E:": ("\nQ:", "\nA:", HEADING_BOUNDARY),
}

_TOPIC_LABELS = (
    re.compile(r"category:", re.IGNORECASE),
    re.compile(r"topic:", re.IGNORECASE),
)


def find_span(text: str, label: str) -> str | None:
    """Text between the first ``label`` and the nearest closing boundary.

    Returns None when the label does not occur. The span is not trimmed.
    """
    start = text.find(label)
    if start == -1:
        return None
    start += len(label)

    end = len(text)
    for boundary in SPAN_BOUNDARIES[label]:
        position = text.find(boundary, start)
        if position != -1 and position < end:
            end = position
    return text[start:end]


def find_topic(section: str) -> str | None:
    """Topic from the first non-blank ``Category:`` or ``Topic:`` label."""
    for label in _TOPIC_LABELS:
        value = line_after_label(section, label)
        if value is not None and value.strip():
            return value.strip()
    return None


@dataclass(frozen=True, slots=True)
class SectionFields:
    """Raw trimmed spans of one section before classification."""

    question: str | None
    answer: str | None
    example: str | None
    topic: str | None


def extract_fields(section: str) -> SectionFields:
    """Extract the trimmed Q/A/E spans and topic label of a section."""

    def _trimmed(label: str) -> str | None:
        span = find_span(section, label)
        return span.strip() if span is not None else None

    return SectionFields(
        question=_trimmed("Q:"),
        answer=_trimmed("A:"),
        example=_trimmed("E:"),
        topic=find_topic(section),
    )


class SectionParser:
    """Builds a QuestionRecord from one raw markdown section.

    Sections missing a question or an answer yield None rather than raising.
    """

    def __init__(self, tables: ClassifierTables | None = None, default_topic: str = DEFAULT_TOPIC):
        self.tables = tables or ClassifierTables()
        self.default_topic = default_topic
        self.difficulty_classifier = DifficultyClassifier(self.tables)
        self.type_classifier = TypeClassifier(self.tables)
        self.tag_classifier = TagClassifier(self.tables)
        self.logger = get_logger(__name__)

    def parse(self, section: str) -> QuestionRecord | None:
        fields = extract_fields(section)
        if not fields.question or not fields.answer:
            self.logger.debug(
                "Skipping section without question or answer",
                has_question=bool(fields.question),
                has_answer=bool(fields.answer),
                preview=section[:60],
            )
            return None

        return QuestionRecord(
            id=question_id(fields.question),
            topic=fields.topic or self.default_topic,
            level=self.difficulty_classifier.classify(fields.answer),
            type=self.type_classifier.classify(section),
            question=fields.question,
            answer=fields.answer,
            example=fields.example or None,
            tags=self.tag_classifier.classify(section),
        )
