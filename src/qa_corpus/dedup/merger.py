# ABOUTME: Order-sensitive fold of candidate records into a unique list
# ABOUTME: Similar questions collapse onto the first accepted slot; the longest answer wins the slot

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from qa_corpus.core.models import QuestionRecord
from qa_corpus.dedup.similarity import are_similar, normalize_question
from qa_corpus.extraction.hashing import text_length
from qa_corpus.utils.logging import get_logger


@dataclass(slots=True)
class MergeOutcome:
    """Unique records in acceptance order plus merge counters."""

    records: list[QuestionRecord] = field(default_factory=list)
    discarded: int = 0
    replaced: int = 0


class DeduplicationMerger:
    """Folds candidates into a unique set using a similarity predicate.

    Each accepted slot remembers the normalized question it was first accepted
    under; later replacements keep that key. The scan is linear over accepted
    slots, so a full merge is quadratic in the number of unique records.
    """

    def __init__(self, similar: Callable[[str, str], bool] = are_similar):
        self.similar = similar
        self.logger = get_logger(__name__)

    def merge(self, candidates: Iterable[QuestionRecord]) -> MergeOutcome:
        outcome = MergeOutcome()
        slot_keys: list[str] = []

        for candidate in candidates:
            key = normalize_question(candidate.question)
            index = self._find_slot(slot_keys, key)

            if index is None:
                slot_keys.append(key)
                outcome.records.append(candidate)
                continue

            existing = outcome.records[index]
            if text_length(candidate.answer) > text_length(existing.answer):
                self.logger.debug(
                    "Replacing duplicate with longer answer",
                    kept_id=candidate.id,
                    replaced_id=existing.id,
                    slot=index,
                )
                outcome.records[index] = candidate
                outcome.replaced += 1
            else:
                outcome.discarded += 1

        self.logger.info(
            "Deduplication complete",
            unique=len(outcome.records),
            discarded=outcome.discarded,
            replaced=outcome.replaced,
        )
        return outcome

    def _find_slot(self, slot_keys: list[str], key: str) -> int | None:
        for index, existing_key in enumerate(slot_keys):
            if self.similar(key, existing_key):
                return index
        return None
