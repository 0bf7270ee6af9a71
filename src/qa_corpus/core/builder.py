# ABOUTME: Orchestrates segmentation, parsing and deduplication over an ordered set of documents
# ABOUTME: Pipeline core: (name, content) pairs → candidate records → unique QuestionRecord list

from collections.abc import Callable, Iterable

from qa_corpus.core.models import CorpusBuildResult, CorpusBuildStats, QuestionRecord, SourceDocument
from qa_corpus.dedup.merger import DeduplicationMerger
from qa_corpus.extraction.base import QuestionSectionParser
from qa_corpus.extraction.classifiers import ClassifierTables
from qa_corpus.extraction.parser import DEFAULT_TOPIC, SectionParser
from qa_corpus.extraction.segmenter import CorpusSegmenter
from qa_corpus.utils.logging import get_logger, log_pipeline_step, with_document_context

DocumentInput = SourceDocument | tuple[str, str | None]
ProgressCallback = Callable[[str, int, int], None]


def _as_document(document: DocumentInput) -> SourceDocument:
    if isinstance(document, SourceDocument):
        return document
    name, content = document
    return SourceDocument(name=name, content=content)


class CorpusBuilder:
    """Builds a deduplicated question corpus from markdown documents.

    Documents are processed strictly in the order given; the merge step is
    order-sensitive, so the same input order always yields the same output.
    """

    def __init__(
        self,
        tables: ClassifierTables | None = None,
        default_topic: str = DEFAULT_TOPIC,
        segmenter: CorpusSegmenter | None = None,
        parser: QuestionSectionParser | None = None,
        merger: DeduplicationMerger | None = None,
    ):
        self.tables = tables or ClassifierTables()
        self.segmenter = segmenter or CorpusSegmenter()
        self.parser = parser or SectionParser(self.tables, default_topic=default_topic)
        self.merger = merger or DeduplicationMerger()
        self.logger = get_logger(__name__)

    def parse_document(self, content: str, stats: CorpusBuildStats | None = None) -> list[QuestionRecord]:
        """Segment and parse one document, dropping sections that fail."""
        stats = stats if stats is not None else CorpusBuildStats()
        records: list[QuestionRecord] = []

        for section in self.segmenter.segment(content):
            stats.sections_seen += 1
            try:
                record = self.parser.parse(section)
            except Exception as e:
                stats.sections_failed += 1
                self.logger.warning(
                    "Dropping malformed section",
                    error=str(e),
                    error_type=type(e).__name__,
                    preview=section[:60],
                )
                continue

            if record is None:
                stats.sections_skipped += 1
            else:
                records.append(record)

        return records

    @log_pipeline_step("collect_candidates")
    def collect_candidates(
        self,
        documents: Iterable[DocumentInput],
        stats: CorpusBuildStats,
        missing: list[str],
        progress_callback: ProgressCallback | None = None,
    ) -> list[QuestionRecord]:
        """Parse every available document, concatenating records in document order."""
        documents = [_as_document(d) for d in documents]
        total = len(documents)
        candidates: list[QuestionRecord] = []

        for index, document in enumerate(documents, start=1):
            if progress_callback:
                progress_callback(document.name, index, total)

            with with_document_context(document.name) as logger:
                if document.content is None:
                    logger.warning("Source document not found, skipping")
                    stats.documents_missing += 1
                    missing.append(document.name)
                    continue

                records = self.parse_document(document.content, stats)
                stats.documents_read += 1
                candidates.extend(records)
                logger.info("Parsed document", records=len(records))

        stats.candidates = len(candidates)
        return candidates

    def build(
        self, documents: Iterable[DocumentInput], progress_callback: ProgressCallback | None = None
    ) -> CorpusBuildResult:
        """Run the full pipeline and return the unique records with run statistics."""
        stats = CorpusBuildStats()
        missing: list[str] = []

        candidates = self.collect_candidates(documents, stats, missing, progress_callback)
        outcome = self.merger.merge(candidates)

        stats.duplicates_discarded = outcome.discarded
        stats.duplicates_replaced = outcome.replaced

        self.logger.info(
            "Corpus built",
            documents_read=stats.documents_read,
            documents_missing=stats.documents_missing,
            candidates=stats.candidates,
            unique=len(outcome.records),
        )
        return CorpusBuildResult(records=outcome.records, stats=stats, missing_documents=missing)

    def build_records(self, documents: Iterable[DocumentInput]) -> list[QuestionRecord]:
        """Convenience wrapper returning only the record sequence."""
        return self.build(documents).records
