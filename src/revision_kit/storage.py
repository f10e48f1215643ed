# src/revision_kit/storage.py

"""Readers and writers for the intermediate paragraph JSON and record JSONL."""

import json
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from revision_kit.dataset.models import DatasetRecord
from revision_kit.errors import DecodeError
from revision_kit.parsers.models import Paragraph

logger = logging.getLogger(__name__)


def save_paragraphs(paragraphs: Iterable[Paragraph], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = [p.to_dict() for p in paragraphs]
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Saved %d paragraphs to %s", len(data), path)


def loads_paragraphs(text: str) -> list[Paragraph]:
    """Decode paragraph JSON. Any problem aborts the whole load."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid paragraph JSON: {e}") from e

    if not isinstance(data, list):
        raise DecodeError(
            f"Paragraph JSON must be a list, got {type(data).__name__}"
        )
    return [Paragraph.from_dict(item) for item in data]


def load_paragraphs(path: Path) -> list[Paragraph]:
    logger.debug("Loading paragraphs from %s", path)
    paragraphs = loads_paragraphs(Path(path).read_text(encoding="utf-8"))
    logger.info("Loaded %d paragraphs from %s", len(paragraphs), path)
    return paragraphs


def dumps_record(record: DatasetRecord) -> str:
    return json.dumps(record.to_dict(), ensure_ascii=False)


def write_records(records: Iterable[DatasetRecord], path: Path) -> int:
    """Write one JSON object per line. Returns the number of lines written."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for record in records:
            f.write(dumps_record(record) + "\n")
            count += 1
    logger.info("Wrote %d records to %s", count, path)
    return count


def iter_record_lines(path: Path) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every non-blank line of a JSONL file."""
    with open(path, encoding="utf-8") as f:
        for line_number, line in enumerate(f, start=1):
            if line.strip():
                yield line_number, line


def read_records(path: Path) -> list[DatasetRecord]:
    records = []
    for line_number, line in iter_record_lines(path):
        try:
            data = json.loads(line)
        except json.JSONDecodeError as e:
            raise DecodeError(f"{path}:{line_number}: invalid JSON: {e}") from e
        records.append(DatasetRecord.from_dict(data))
    return records
