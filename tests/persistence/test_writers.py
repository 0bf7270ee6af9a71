# ABOUTME: Tests for the JSON and TypeScript corpus writers
# ABOUTME: Validates output shape, atomic replacement and write-failure reporting

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from qa_corpus.core.models import Difficulty, QuestionRecord, QuestionType
from qa_corpus.persistence.writers import (
    CorpusWriteError,
    JsonCorpusWriter,
    StagedWrite,
    TypeScriptModuleWriter,
    atomic_write_text,
    records_to_json,
)


@pytest.fixture
def records() -> list[QuestionRecord]:
    return [
        QuestionRecord(
            id="what_is_jsx_4dd509",
            level=Difficulty.EASY,
            type=QuestionType.FLASHCARD,
            question="What is JSX?",
            answer="Syntax sugar.",
            tags=["syntax", "jsx"],
        ),
        QuestionRecord(
            id="what_is_a_hook_2ad227",
            topic="Hooks",
            level=Difficulty.MEDIUM,
            type=QuestionType.CODE,
            question="What is a hook?",
            answer="A function like `useState`. Très simple.",
            example="const [x, setX] = useState(0);",
        ),
    ]


class TestRecordsToJson:
    """Test corpus serialization."""

    def test_field_order_and_optional_example(self, records):
        data = json.loads(records_to_json(records))

        assert list(data[0]) == ["id", "topic", "level", "type", "question", "answer", "tags"]
        assert data[1]["example"] == "const [x, setX] = useState(0);"
        assert data[0]["topic"] == "React"

    def test_two_space_indent_and_unicode(self, records):
        text = records_to_json(records)

        assert text.startswith('[\n  {\n    "id": "what_is_jsx_4dd509"')
        assert "Très" in text

    def test_empty_corpus(self):
        assert records_to_json([]) == "[]"


class TestAtomicWriteText:
    """Test the all-or-nothing file write."""

    def test_creates_parent_directories(self, tmp_path: Path):
        target = tmp_path / "nested" / "out.json"

        atomic_write_text(target, "[]")

        assert target.read_text(encoding="utf-8") == "[]"

    def test_replaces_existing_file(self, tmp_path: Path):
        target = tmp_path / "out.json"
        target.write_text("old", encoding="utf-8")

        atomic_write_text(target, "new")

        assert target.read_text(encoding="utf-8") == "new"
        assert os.listdir(tmp_path) == ["out.json"]

    def test_failed_replace_keeps_old_file_and_cleans_up(self, tmp_path: Path):
        target = tmp_path / "out.json"
        target.write_text("old", encoding="utf-8")

        with patch("qa_corpus.persistence.writers.os.replace", side_effect=OSError("read-only")):
            with pytest.raises(CorpusWriteError):
                atomic_write_text(target, "new")

        assert target.read_text(encoding="utf-8") == "old"
        assert os.listdir(tmp_path) == ["out.json"]

    def test_unwritable_directory_raises(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(CorpusWriteError):
            atomic_write_text(blocker / "out.json", "[]")


class TestJsonCorpusWriter:
    """Test the JSON array writer."""

    def test_writes_basename_json(self, tmp_path: Path, records):
        path = JsonCorpusWriter(tmp_path, "questions").write(records)

        assert path == tmp_path / "questions.json"
        assert len(json.loads(path.read_text(encoding="utf-8"))) == 2


class TestTypeScriptModuleWriter:
    """Test the TypeScript data module writer."""

    def test_render(self, records):
        writer = TypeScriptModuleWriter(Path("."), export_name="reactQuestions")

        module = writer.render(records[:1])

        assert module.startswith("\n// Auto-generated from Q&A markdown files\n")
        assert "import { Question } from '@/types';" in module
        assert "export const reactQuestions: Question[] = [\n  {" in module
        assert module.endswith("];\n")

    def test_writes_data_module(self, tmp_path: Path, records):
        path = TypeScriptModuleWriter(tmp_path, "reactQuestions").write(records)

        assert path == tmp_path / "reactQuestionsData.ts"
        assert '"what_is_a_hook_2ad227"' in path.read_text(encoding="utf-8")


class TestStagedWrite:
    """Test swapping several files in together."""

    def test_nothing_replaced_before_commit(self, tmp_path: Path):
        first = tmp_path / "a.json"
        first.write_text("old", encoding="utf-8")

        with StagedWrite() as staged:
            staged.stage(first, "new")
            staged.stage(tmp_path / "b.ts", "module")
            assert first.read_text(encoding="utf-8") == "old"
            committed = staged.commit()

        assert committed == [first, tmp_path / "b.ts"]
        assert first.read_text(encoding="utf-8") == "new"
        assert sorted(os.listdir(tmp_path)) == ["a.json", "b.ts"]

    def test_error_before_commit_discards_everything(self, tmp_path: Path):
        first = tmp_path / "a.json"
        first.write_text("old", encoding="utf-8")

        with pytest.raises(CorpusWriteError):
            with StagedWrite() as staged:
                staged.stage(first, "new")
                raise CorpusWriteError("second artifact failed")

        assert first.read_text(encoding="utf-8") == "old"
        assert os.listdir(tmp_path) == ["a.json"]
