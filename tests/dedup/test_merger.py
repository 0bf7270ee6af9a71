# ABOUTME: Tests for the order-sensitive deduplication fold
# ABOUTME: Validates first-seen slots, longer-answer replacement and merge counters

from qa_corpus.core.models import Difficulty, QuestionRecord, QuestionType
from qa_corpus.dedup.merger import DeduplicationMerger
from qa_corpus.extraction.hashing import question_id


def make_record(question: str, answer: str, **overrides) -> QuestionRecord:
    """Build a record with sensible defaults for merge tests."""
    fields = {
        "id": question_id(question),
        "level": Difficulty.EASY,
        "type": QuestionType.FLASHCARD,
        "question": question,
        "answer": answer,
    }
    fields.update(overrides)
    return QuestionRecord(**fields)


class TestDeduplicationMerger:
    """Test merging of candidate records."""

    def setup_method(self):
        self.merger = DeduplicationMerger()

    def test_distinct_records_keep_order(self):
        candidates = [make_record("What is JSX?", "Syntax."), make_record("What is a hook?", "A function.")]

        outcome = self.merger.merge(candidates)

        assert outcome.records == candidates
        assert outcome.discarded == 0
        assert outcome.replaced == 0

    def test_longer_answer_replaces_in_place(self):
        first = make_record("What is JSX?", "Syntax.")
        other = make_record("What is a hook?", "A function.")
        longer = make_record("what is jsx?", "A syntax extension for JavaScript.")

        outcome = self.merger.merge([first, other, longer])

        assert outcome.records == [longer, other]
        assert outcome.replaced == 1

    def test_shorter_or_equal_answer_is_discarded(self):
        first = make_record("What is JSX?", "Syntax sugar.")
        shorter = make_record("What is JSX?", "Syntax.")
        equal = make_record("WHAT IS JSX?", "Sugar syntax.")

        outcome = self.merger.merge([first, shorter, equal])

        assert outcome.records == [first]
        assert outcome.discarded == 2

    def test_near_duplicates_merge(self):
        first = make_record("What is the virtual DOM in React?", "A tree.")
        second = make_record("What is the virtual DOM in React JS?", "An in-memory tree mirroring the UI.")

        outcome = self.merger.merge([first, second])

        assert outcome.records == [second]

    def test_slot_key_stays_with_first_accepted_question(self):
        """Test a replacement does not change the key later candidates are compared to."""
        seen_slot_keys = []

        def similar(candidate_key, slot_key):
            seen_slot_keys.append(slot_key)
            return candidate_key == slot_key or "jsx" in candidate_key

        merger = DeduplicationMerger(similar=similar)
        first = make_record("What is JSX?", "Short.")
        replacement = make_record("Explain jsx please", "A much longer answer.")
        later = make_record("Why jsx at all", "x")

        outcome = merger.merge([first, replacement, later])

        assert outcome.records == [replacement]
        assert set(seen_slot_keys) == {"what is jsx?"}

    def test_merge_is_idempotent(self):
        candidates = [
            make_record("What is JSX?", "Syntax."),
            make_record("what is jsx?", "A longer syntax answer."),
            make_record("What is a hook?", "A function."),
        ]

        once = self.merger.merge(candidates).records
        twice = self.merger.merge(once).records

        assert twice == once

    def test_empty_input(self):
        outcome = self.merger.merge([])

        assert outcome.records == []
        assert outcome.discarded == 0

    def test_answer_length_counts_astral_characters_twice(self):
        first = make_record("What is JSX?", "a😀")
        same_length = make_record("What is JSX?", "abc")

        outcome = self.merger.merge([first, same_length])

        assert outcome.records == [first]
        assert outcome.discarded == 1
