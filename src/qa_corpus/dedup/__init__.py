# ABOUTME: Near-duplicate detection and merging across documents
# ABOUTME: Pipeline Stage 2: Candidate records → One record per question slot

"""
Dedup Layer: Collapse near-duplicate questions

This layer handles:
- Question normalization and word-overlap similarity
- Order-preserving merging that prefers the longer answer

Data Flow: extraction/ candidates → Unique records → core/ corpus
"""

from .merger import DeduplicationMerger, MergeOutcome
from .similarity import are_similar, normalize_question, significant_words, similarity_ratio

__all__ = [
    "DeduplicationMerger",
    "MergeOutcome",
    "are_similar",
    "normalize_question",
    "significant_words",
    "similarity_ratio",
]
