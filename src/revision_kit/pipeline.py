# src/revision_kit/pipeline.py

"""File-level stages: document → paragraph JSON → dataset JSONL → labels."""

import json
import logging
from pathlib import Path
from typing import BinaryIO

from revision_kit.classification import Classifier, RecordClassifier
from revision_kit.config import PipelineConfig
from revision_kit.dataset import DatasetRecord, build_dataset
from revision_kit.errors import DecodeError
from revision_kit.observability import names
from revision_kit.observability.base import MetricsHook, NoOpMetricsHook
from revision_kit.parsers import DocxRevisionParser, Paragraph
from revision_kit.prompts import Prompt
from revision_kit.storage import (
    iter_record_lines,
    load_paragraphs,
    save_paragraphs,
    write_records,
)

logger = logging.getLogger(__name__)


def extract_revisions(
    source: str | Path | BinaryIO,
    config: PipelineConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Paragraph]:
    """Parse ``source`` and save its paragraphs to ``config.revisions_path``."""
    paragraphs = DocxRevisionParser(metrics_hook=metrics_hook).parse(source)
    save_paragraphs(paragraphs, config.revisions_path)
    return paragraphs


def render_corrected_readings(paragraphs: list[Paragraph]) -> list[str]:
    return [
        f"Paragraph {index}: {paragraph.corrected_text()}"
        for index, paragraph in enumerate(paragraphs, start=1)
    ]


def build_dataset_file(
    config: PipelineConfig,
    input_path: Path | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> int:
    """Turn paragraph JSON into dataset JSONL. Returns the record count.

    The input is decoded completely before the output file is opened, so a
    DecodeError leaves no partial dataset behind.
    """
    paragraphs = load_paragraphs(input_path or config.revisions_path)
    records = build_dataset(
        paragraphs,
        context_words=config.context_words,
        metrics_hook=metrics_hook,
    )
    return write_records(records, config.dataset_path)


def run(
    source: str | Path | BinaryIO,
    config: PipelineConfig,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> int:
    """Extract revisions and build the dataset in one go."""
    extract_revisions(source, config, metrics_hook=metrics_hook)
    return build_dataset_file(config, metrics_hook=metrics_hook)


async def classify_dataset_file(
    classifier: Classifier,
    config: PipelineConfig,
    prompt: Prompt | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> int:
    """Label every record of ``config.dataset_path`` into ``config.classified_path``.

    Lines that are not valid records are logged and skipped. Output rows use
    the key ``corrected`` for the corrected side.
    """
    record_classifier = RecordClassifier(
        classifier, prompt=prompt, metrics_hook=metrics_hook
    )
    # Read the whole input before truncating an earlier classified file
    lines = list(iter_record_lines(config.dataset_path))
    output_path = config.classified_path
    output_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open(output_path, "w", encoding="utf-8") as out:
        for line_number, line in lines:
            try:
                record = DatasetRecord.from_dict(json.loads(line))
            except (json.JSONDecodeError, DecodeError) as e:
                logger.error("Error processing line %d: %s", line_number, e)
                metrics_hook.increment(names.CLASSIFICATION_LINES_SKIPPED)
                continue

            labelled = await record_classifier.classify(record)
            row = {
                "original": labelled.original,
                "corrected": labelled.correction,
                "error_type": labelled.error_type,
                "explanation": labelled.explanation,
            }
            out.write(json.dumps(row, ensure_ascii=False) + "\n")
            count += 1

    logger.info("Classified dataset written to %s (%d records)", output_path, count)
    return count
