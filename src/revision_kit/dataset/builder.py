# src/revision_kit/dataset/builder.py

import logging
from collections.abc import Iterable, Iterator, Sequence
from time import monotonic

from revision_kit.config import DEFAULT_CONTEXT_WORDS
from revision_kit.observability import names
from revision_kit.observability.base import MetricsHook, NoOpMetricsHook
from revision_kit.parsers.models import Entry, EntryKind, Paragraph
from revision_kit.segmenting import ChangeSegment, Segment, TextSegment, build_segments

from .models import DatasetRecord

logger = logging.getLogger(__name__)


def extract_tail_words(text: str, count: int = DEFAULT_CONTEXT_WORDS) -> str:
    """Last ``count`` whitespace-delimited words of ``text``.

    Words are rejoined with single spaces. Trailing whitespace, the side that
    touches the change, survives as one space.
    """
    words = text.split()
    tail = " ".join(words[max(len(words) - count, 0) :])
    if text[-1:].isspace():
        tail += " "
    return tail


def extract_head_words(text: str, count: int = DEFAULT_CONTEXT_WORDS) -> str:
    """First ``count`` whitespace-delimited words of ``text``.

    Leading whitespace survives as one space.
    """
    head = " ".join(text.split()[:count])
    if text[:1].isspace():
        head = " " + head
    return head


def reduce_change_group(changes: Iterable[Entry]) -> tuple[str, str]:
    """Collapse a change group to ``(original_change, correction_change)``.

    Deletions make up the original side, insertions the corrected side.
    """
    original_change = ""
    correction_change = ""
    for change in changes:
        if change.kind is EntryKind.DELETION:
            original_change += change.content
        elif change.kind is EntryKind.INSERTION:
            correction_change += change.content
    return original_change, correction_change


def build_records(
    segments: Sequence[Segment],
    *,
    context_words: int = DEFAULT_CONTEXT_WORDS,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[DatasetRecord]:
    if context_words < 0:
        raise ValueError("context_words must be >= 0")

    records = []
    for record in _iter_change_groups(segments, context_words):
        metrics_hook.increment(names.DATASET_CHANGE_GROUPS_TOTAL)
        if record.is_blank:
            logger.debug("Skipping change group with blank sides: %r", record)
            metrics_hook.increment(names.DATASET_RECORDS_SKIPPED)
            continue
        metrics_hook.increment(names.DATASET_RECORDS_EMITTED)
        records.append(record)
    return records


def build_dataset(
    paragraphs: Iterable[Paragraph],
    *,
    context_words: int = DEFAULT_CONTEXT_WORDS,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[DatasetRecord]:
    """Records for every change group, in paragraph then in-paragraph order."""
    start = monotonic()
    dataset: list[DatasetRecord] = []
    paragraph_count = 0

    for paragraph in paragraphs:
        paragraph_count += 1
        if not paragraph.has_changes:
            continue
        dataset.extend(
            build_records(
                build_segments(paragraph.entries),
                context_words=context_words,
                metrics_hook=metrics_hook,
            )
        )

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.DATASET_BUILD_DURATION, elapsed_ms)
    logger.info(
        "Built %d records from %d paragraphs (context_words=%d)",
        len(dataset),
        paragraph_count,
        context_words,
    )
    return dataset


def _iter_change_groups(
    segments: Sequence[Segment], context_words: int
) -> Iterator[DatasetRecord]:
    i = 0
    while i < len(segments):
        if not isinstance(segments[i], ChangeSegment):
            i += 1
            continue

        group_start = i
        group: list[Entry] = []
        while i < len(segments):
            segment = segments[i]
            if not isinstance(segment, ChangeSegment):
                break
            group.append(segment.entry)
            i += 1

        prev_text = _text_at(segments, group_start - 1)
        next_text = _text_at(segments, i)

        original_change, correction_change = reduce_change_group(group)
        context_prev = extract_tail_words(prev_text, context_words)
        context_next = extract_head_words(next_text, context_words)

        yield DatasetRecord(
            original=context_prev + original_change + context_next,
            correction=context_prev + correction_change + context_next,
        )


def _text_at(segments: Sequence[Segment], index: int) -> str:
    if 0 <= index < len(segments):
        segment = segments[index]
        if isinstance(segment, TextSegment):
            return segment.content
    return ""
