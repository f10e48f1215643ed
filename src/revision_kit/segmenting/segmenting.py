from collections.abc import Iterable
from dataclasses import dataclass

from revision_kit.parsers.models import Entry, EntryKind


@dataclass(frozen=True)
class TextSegment:
    content: str


@dataclass(frozen=True)
class ChangeSegment:
    entry: Entry


Segment = TextSegment | ChangeSegment


def build_segments(entries: Iterable[Entry]) -> list[Segment]:
    """Map a paragraph's entries to text and change segments.

    Every insertion or deletion becomes its own ChangeSegment; grouping
    happens later, in the dataset builder. Empty text is dropped and a text
    entry following a text segment extends it, so no zero-length text
    segment ever separates two changes.
    """
    segments: list[Segment] = []
    for entry in entries:
        if entry.kind is EntryKind.TEXT:
            if not entry.content:
                continue
            if segments and isinstance(segments[-1], TextSegment):
                segments[-1] = TextSegment(segments[-1].content + entry.content)
            else:
                segments.append(TextSegment(entry.content))
        else:
            segments.append(ChangeSegment(entry))
    return segments
