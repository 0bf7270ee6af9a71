# ABOUTME: Tests for splitting markdown documents into question sections
# ABOUTME: Validates heading boundaries, preamble handling and whitespace-only sections

from qa_corpus.extraction.segmenter import CorpusSegmenter, iter_sections


class TestIterSections:
    """Test section boundaries at question headings."""

    def test_splits_on_question_headings(self):
        text = "# React Q&A\nIntro text\n## Q: One?\nA: 1\n## Q: Two?\nA: 2\n"

        assert list(iter_sections(text)) == [
            "# React Q&A\nIntro text",
            "Q: One?\nA: 1",
            "Q: Two?\nA: 2\n",
        ]

    def test_whitespace_between_hashes_and_label_is_optional(self):
        text = "intro\n##Q: One?\nA: 1\n##   Q: Two?\nA: 2"

        assert list(iter_sections(text)) == ["intro", "Q: One?\nA: 1", "Q: Two?\nA: 2"]

    def test_whitespace_may_include_newlines(self):
        assert list(iter_sections("intro\n##\n  Q: One?\nA: 1")) == ["intro", "Q: One?\nA: 1"]

    def test_other_headings_stay_inside_section(self):
        text = "\n## Q: One?\nA: 1\n## Notes\nmore\n### Q: not a boundary"

        assert list(iter_sections(text)) == ["Q: One?\nA: 1\n## Notes\nmore\n### Q: not a boundary"]

    def test_blank_sections_are_skipped(self):
        text = "\n\n## Q: One?\nA: 1"

        assert list(iter_sections(text)) == ["Q: One?\nA: 1"]

    def test_document_without_leading_newline_is_one_section(self):
        """A heading at the very start is not preceded by a newline, so it is not a boundary."""
        text = "## Q: One?\nA: 1"

        assert list(iter_sections(text)) == ["## Q: One?\nA: 1"]

    def test_empty_and_blank_documents(self):
        assert list(iter_sections("")) == []
        assert list(iter_sections("  \n\t\n")) == []

    def test_no_headings(self):
        assert list(iter_sections("Just prose.")) == ["Just prose."]


class TestCorpusSegmenter:
    """Test the segmenter wrapper."""

    def test_segment_matches_iter_sections(self):
        text = "intro\n## Q: One?\nA: 1"

        assert list(CorpusSegmenter().segment(text)) == list(iter_sections(text))
