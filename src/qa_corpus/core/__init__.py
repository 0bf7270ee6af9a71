# ABOUTME: Business logic and orchestration layer
# ABOUTME: Pipeline Stage 3: Parsed candidates → Deduplicated, ordered corpus

"""
Core Layer: Corpus building and workflow orchestration

This layer handles:
- Domain models for question records and build statistics
- Loading source documents in their configured order
- Corpus building (segment, parse, merge) and the import service

Data Flow: extraction/ + dedup/ → Corpus → persistence/ outputs
"""

from .models import (
    CorpusBuildResult,
    CorpusBuildStats,
    Difficulty,
    QuestionRecord,
    QuestionType,
    SourceDocument,
)

# Import builder and service on-demand to avoid circular imports
# Use: from qa_corpus.core.service import CorpusImportService

__all__ = [
    "CorpusBuildResult",
    "CorpusBuildStats",
    "Difficulty",
    "QuestionRecord",
    "QuestionType",
    "SourceDocument",
]
