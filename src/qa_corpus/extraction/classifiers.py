# ABOUTME: Heuristic classifiers for tags, content type and difficulty of question sections
# ABOUTME: All lookup tables live in an immutable ClassifierTables instance built once per run

import re

from pydantic import BaseModel, ConfigDict, Field

from qa_corpus.core.models import Difficulty, QuestionType
from qa_corpus.extraction.hashing import text_length

_TAGS_LABEL = re.compile(r"tags:", re.IGNORECASE)

DEFAULT_KEYWORD_TABLE: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("hooks", ("useState", "useEffect", "useContext", "useReducer", "useCallback", "useMemo", "useRef")),
    ("performance", ("optimization", "memoization", "memo", "shouldComponentUpdate", "pure component")),
    ("lifecycle", ("componentDidMount", "componentDidUpdate", "componentWillUnmount", "useEffect")),
    ("state management", ("redux", "context", "state", "reducer", "store", "recoil", "zustand")),
    ("styling", ("css", "style", "styled-components", "css-in-js", "tailwind", "sass")),
    ("routing", ("router", "navigation", "link", "route", "url", "history", "location")),
    ("typescript", ("typescript", "interface", "type", "generic", "typing", "typed")),
)

DEFAULT_COMPLEXITY_MARKERS: tuple[str, ...] = (
    "advanced",
    "complex",
    "difficult",
    "optimization",
    "performance",
    "security",
    "architecture",
    "design pattern",
)


class ClassifierTables(BaseModel):
    """Immutable lookup data shared by the classifiers of one pipeline run."""

    model_config = ConfigDict(frozen=True)

    keyword_table: tuple[tuple[str, tuple[str, ...]], ...] = Field(
        default=DEFAULT_KEYWORD_TABLE, description="Ordered (tag, keywords) pairs for implicit tagging"
    )
    complexity_markers: tuple[str, ...] = Field(
        default=DEFAULT_COMPLEXITY_MARKERS, description="Answer phrases that force the hard level"
    )
    hard_length: int = Field(default=1000, description="Answers longer than this are hard")
    medium_length: int = Field(default=500, description="Answers longer than this are at least medium")
    flashcard_length: int = Field(default=500, description="Sections shorter than this may be flashcards")


def line_after_label(text: str, label: re.Pattern[str]) -> str | None:
    """Return the remainder of the line following the first ``label`` match."""
    match = label.search(text)
    if match is None:
        return None
    end = text.find("\n", match.end())
    return text[match.end() :] if end == -1 else text[match.end() : end]


class DifficultyClassifier:
    """Maps answer text to a difficulty level by length and marker words."""

    def __init__(self, tables: ClassifierTables | None = None):
        self.tables = tables or ClassifierTables()

    def classify(self, answer: str) -> Difficulty:
        lowered = answer.lower()
        has_marker = any(marker.lower() in lowered for marker in self.tables.complexity_markers)
        if text_length(answer) > self.tables.hard_length or has_marker:
            return Difficulty.HARD
        if text_length(answer) > self.tables.medium_length:
            return Difficulty.MEDIUM
        return Difficulty.EASY


class TypeClassifier:
    """Maps a raw section to one of the four content types, first rule wins."""

    def __init__(self, tables: ClassifierTables | None = None):
        self.tables = tables or ClassifierTables()

    def classify(self, section: str) -> QuestionType:
        lowered = section.lower()

        # A backtick also covers fenced blocks
        if "`" in lowered or "<code>" in lowered:
            return QuestionType.CODE

        if ("a)" in lowered and "b)" in lowered) or ("option a" in lowered and "option b" in lowered):
            return QuestionType.MCQ

        is_short = text_length(section) < self.tables.flashcard_length
        if is_short and "example" not in lowered and "code" not in lowered:
            return QuestionType.FLASHCARD

        return QuestionType.OPEN


class TagClassifier:
    """Extracts tags from an explicit ``Tags:`` line or from the keyword table."""

    def __init__(self, tables: ClassifierTables | None = None):
        self.tables = tables or ClassifierTables()

    def explicit_tags(self, section: str) -> list[str] | None:
        """Tags from a ``Tags:`` label, or None when the section has no label."""
        line = line_after_label(section, _TAGS_LABEL)
        if line is None:
            return None
        return [tag.strip() for tag in line.split(",")]

    def classify(self, section: str) -> list[str]:
        explicit = self.explicit_tags(section)
        if explicit is not None:
            return explicit

        lowered = section.lower()
        return [
            tag
            for tag, keywords in self.tables.keyword_table
            if any(keyword.lower() in lowered for keyword in keywords)
        ]
