# ABOUTME: Splits a raw markdown document into question sections at "## Q:" headings
# ABOUTME: Single-pass generator over explicit boundary tokens, no regex splitting

from collections.abc import Iterator

HEADING_MARKER = "\n##"
QUESTION_LABEL = "Q:"


def _boundary_end(text: str, marker_at: int) -> int | None:
    """If a heading at ``marker_at`` introduces a question, return where ``Q:`` starts."""
    position = marker_at + len(HEADING_MARKER)
    while position < len(text) and text[position].isspace():
        position += 1
    return position if text.startswith(QUESTION_LABEL, position) else None


def iter_sections(text: str) -> Iterator[str]:
    """Yield the raw sections of ``text``, skipping whitespace-only ones.

    A boundary is a newline, two hash marks, optional whitespace and then the
    literal ``Q:``. The boundary itself is consumed; each yielded section after
    the first begins at its ``Q:`` label. Content before the first boundary is
    yielded as-is unless it is blank.
    """
    section_start = 0
    search_from = 0
    while True:
        marker_at = text.find(HEADING_MARKER, search_from)
        if marker_at == -1:
            break
        question_at = _boundary_end(text, marker_at)
        if question_at is None:
            search_from = marker_at + 1
            continue

        section = text[section_start:marker_at]
        if section.strip():
            yield section
        section_start = question_at
        search_from = question_at

    tail = text[section_start:]
    if tail.strip():
        yield tail


class CorpusSegmenter:
    """Thin object wrapper around :func:`iter_sections` for the builder."""

    def segment(self, text: str) -> Iterator[str]:
        return iter_sections(text)
