from .segmenting import ChangeSegment, Segment, TextSegment, build_segments

__all__ = [
    "ChangeSegment",
    "Segment",
    "TextSegment",
    "build_segments",
]
