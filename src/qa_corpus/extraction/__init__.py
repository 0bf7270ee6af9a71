# ABOUTME: Markdown Q&A extraction: segmentation, field parsing, classification and hashing
# ABOUTME: Pipeline Stage 1: Raw markdown text → Candidate question records

"""
Extraction Layer: Turn markdown documents into candidate records

This layer handles:
- Splitting a document into question sections
- Extracting labelled Q:/A:/E: spans and topic labels
- Classifying difficulty, question type and tags
- Deterministic question identifiers

Data Flow: Markdown text → Candidate records → dedup/ layer
"""

from .base import CorpusError, DocumentLoadError, SectionParseError
from .classifiers import ClassifierTables, DifficultyClassifier, TagClassifier, TypeClassifier
from .hashing import hash6, question_id, simple_hash, slugify, text_length
from .parser import SectionParser
from .segmenter import CorpusSegmenter, iter_sections

__all__ = [
    "ClassifierTables",
    "CorpusError",
    "CorpusSegmenter",
    "DifficultyClassifier",
    "DocumentLoadError",
    "SectionParseError",
    "SectionParser",
    "TagClassifier",
    "TypeClassifier",
    "hash6",
    "iter_sections",
    "question_id",
    "simple_hash",
    "slugify",
    "text_length",
]
