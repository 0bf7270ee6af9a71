# ABOUTME: Output and storage layer for the finished corpus
# ABOUTME: Pipeline Stage 4: Corpus → JSON file, TypeScript module and optional database

"""
Persistence Layer: Write the corpus out, all or nothing

This layer handles:
- Atomic JSON and TypeScript module writers
- SQLModel table (JSON tag column) for the optional database copy
- Single-transaction replacement of the stored corpus

Data Flow: core/ corpus → Files and database
"""

from .manager import DatabaseManager
from .models import QuestionRow
from .writers import (
    CorpusWriteError,
    JsonCorpusWriter,
    StagedWrite,
    TypeScriptModuleWriter,
    atomic_write_text,
    records_to_json,
)

__all__ = [
    "CorpusWriteError",
    "DatabaseManager",
    "JsonCorpusWriter",
    "QuestionRow",
    "StagedWrite",
    "TypeScriptModuleWriter",
    "atomic_write_text",
    "records_to_json",
]
