# ABOUTME: Tests for the corpus builder orchestrating segmentation, parsing and merging
# ABOUTME: Includes determinism, missing documents, malformed sections and cross-file merges

import json

import pytest

from qa_corpus.core.builder import CorpusBuilder
from qa_corpus.core.models import CorpusBuildStats, QuestionRecord, SourceDocument
from qa_corpus.dedup.similarity import are_similar, normalize_question
from qa_corpus.extraction.base import SectionParseError
from qa_corpus.extraction.parser import SectionParser
from qa_corpus.persistence.writers import records_to_json

DOC_A = "## Q: What is JSX?\nA: JSX is syntax sugar.\nTags: syntax, jsx"

DOC_B = (
    "# More React questions\n"
    "## Q: What is jsx?\n"
    "A: JSX is a syntax extension that compiles to React.createElement calls.\n"
    "Tags: syntax, jsx\n"
    "## Q: What does useEffect do?\n"
    "A: It runs side effects after render.\n"
)


class ExplodingParser:
    """Parser that fails on sections containing a marker word."""

    def __init__(self):
        self.inner = SectionParser()

    def parse(self, section: str) -> QuestionRecord | None:
        if "BROKEN" in section:
            raise SectionParseError("cannot parse")
        return self.inner.parse(section)


@pytest.fixture
def builder() -> CorpusBuilder:
    return CorpusBuilder()


class TestParseDocument:
    """Test single-document parsing."""

    def test_parses_sections_in_order(self, builder):
        records = builder.parse_document(DOC_B)

        assert [r.question for r in records] == ["What is jsx?", "What does useEffect do?"]

    def test_preamble_without_question_is_skipped(self, builder):
        stats = CorpusBuildStats()
        builder.parse_document(DOC_B, stats)

        assert stats.sections_seen == 3
        assert stats.sections_skipped == 1

    def test_empty_document(self, builder):
        assert builder.parse_document("") == []


class TestCorpusBuilder:
    """Test the full build over ordered documents."""

    def test_cross_document_duplicate_keeps_longer_answer(self, builder):
        """Test the shorter doc A answer is replaced by doc B's, tags included."""
        result = builder.build([("a.md", DOC_A), ("b.md", DOC_B)])

        jsx = [r for r in result.records if r.question.lower() == "what is jsx?"]
        assert len(jsx) == 1
        assert jsx[0].tags == ["syntax", "jsx"]
        assert jsx[0].answer.startswith("JSX is a syntax extension")
        assert result.stats.duplicates_replaced == 1

    def test_end_to_end_two_documents(self, builder):
        doc_b = "## Q: What is JSX?\nA: JSX is a syntax extension for JavaScript used by React.\nTags: syntax, jsx"

        records = builder.build_records([("a.md", DOC_A), ("b.md", doc_b)])

        assert len(records) == 1
        assert records[0].tags == ["syntax", "jsx"]
        assert records[0].answer.startswith("JSX is a syntax extension for JavaScript")

    def test_first_seen_position_is_kept(self, builder):
        doc_one = "\n## Q: What is JSX?\nA: Short.\n## Q: What is a hook?\nA: A function."
        doc_two = "\n## Q: What is JSX?\nA: A much longer explanation of JSX."

        records = builder.build_records([("one.md", doc_one), ("two.md", doc_two)])

        assert [r.question for r in records] == ["What is JSX?", "What is a hook?"]
        assert records[0].answer == "A much longer explanation of JSX."

    def test_document_order_decides_ties(self, builder):
        doc_one = "\n## Q: What is JSX?\nA: Answer one."
        doc_two = "\n## Q: What is JSX?\nA: Answer two."

        assert builder.build_records([("1", doc_one), ("2", doc_two)])[0].answer == "Answer one."
        assert builder.build_records([("2", doc_two), ("1", doc_one)])[0].answer == "Answer two."

    def test_missing_document_is_skipped(self, builder):
        result = builder.build([SourceDocument(name="gone.md"), ("b.md", DOC_B)])

        assert result.missing_documents == ["gone.md"]
        assert result.stats.documents_missing == 1
        assert result.stats.documents_read == 1
        assert len(result.records) == 2

    def test_all_documents_missing_yields_empty_corpus(self, builder):
        result = builder.build([("a.md", None), ("b.md", None)])

        assert result.records == []
        assert result.missing_documents == ["a.md", "b.md"]

    def test_malformed_section_is_dropped_not_fatal(self):
        builder = CorpusBuilder(parser=ExplodingParser())
        content = "\n## Q: Good one?\nA: Yes.\n## Q: BROKEN?\nA: No.\n## Q: Another good one?\nA: Yes again."

        result = builder.build([("doc.md", content)])

        assert [r.question for r in result.records] == ["Good one?", "Another good one?"]
        assert result.stats.sections_failed == 1

    def test_build_is_deterministic(self, builder):
        documents = [("a.md", DOC_A), ("b.md", DOC_B)]

        first = records_to_json(builder.build_records(documents))
        second = records_to_json(CorpusBuilder().build_records(documents))

        assert first == second
        assert len(json.loads(first)) == 2

    def test_no_two_records_are_similar(self, builder):
        records = builder.build_records([("a.md", DOC_A), ("b.md", DOC_B), ("c.md", DOC_A + "\n" + DOC_B)])
        keys = [normalize_question(r.question) for r in records]

        for i, first in enumerate(keys):
            for second in keys[i + 1 :]:
                assert not are_similar(first, second)

    def test_stats(self, builder):
        result = builder.build([("a.md", DOC_A), ("b.md", DOC_B)])

        assert result.stats.candidates == 3
        assert result.stats.duplicates_replaced == 1
        assert result.stats.duplicates_discarded == 0
        assert result.stats.unique_records == len(result.records) == 2

    def test_progress_callback_sees_every_document(self, builder):
        calls = []

        builder.build([("a.md", DOC_A), ("gone.md", None)], progress_callback=lambda *args: calls.append(args))

        assert calls == [("a.md", 1, 2), ("gone.md", 2, 2)]

    def test_default_topic_is_configurable(self):
        records = CorpusBuilder(default_topic="Vue").build_records([("a.md", DOC_A)])

        assert records[0].topic == "Vue"
