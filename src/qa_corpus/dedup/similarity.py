# ABOUTME: Near-duplicate test for normalized question strings
# ABOUTME: Short questions must match exactly; longer ones compare significant-word overlap

import re

from qa_corpus.extraction.hashing import text_length

_NON_WORD = re.compile(r"\W+", re.ASCII)

MIN_FUZZY_LENGTH = 20
MIN_TOKEN_LENGTH = 4
SIMILARITY_THRESHOLD = 0.7


def normalize_question(question: str) -> str:
    return question.lower().strip()


def significant_words(text: str) -> set[str]:
    """Words of four or more characters, split on ASCII non-word runs."""
    return {word for word in _NON_WORD.split(text) if len(word) >= MIN_TOKEN_LENGTH}


def similarity_ratio(first: str, second: str) -> float | None:
    """Shared significant words over the smaller word set, or None if either set is empty."""
    first_words = significant_words(first)
    second_words = significant_words(second)
    smaller = min(len(first_words), len(second_words))
    if smaller == 0:
        return None
    return len(first_words & second_words) / smaller


def are_similar(first: str, second: str) -> bool:
    """Whether two normalized questions should be treated as the same question."""
    if text_length(first) < MIN_FUZZY_LENGTH or text_length(second) < MIN_FUZZY_LENGTH:
        return first == second

    ratio = similarity_ratio(first, second)
    return ratio is not None and ratio > SIMILARITY_THRESHOLD
