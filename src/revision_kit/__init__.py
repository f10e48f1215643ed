__version__ = "0.1.0"

# Errors
from .errors import ClassificationError, DecodeError, ParseError, RevisionKitError

# Config
from .config import PipelineConfig

# Observability
from .observability import CountingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    DocxRevisionParser,
    Entry,
    EntryKind,
    Paragraph,
    RevisionParser,
)

# Segmenting
from .segmenting import ChangeSegment, Segment, TextSegment, build_segments

# Dataset
from .dataset import DatasetRecord, build_dataset, build_records

# Prompts
from .prompts import Prompt, PromptsLibrary

# Classification
from .classification import Classification, Classifier, RecordClassifier

__all__ = [
    # Errors
    "ClassificationError",
    "DecodeError",
    "ParseError",
    "RevisionKitError",
    # Config
    "PipelineConfig",
    # Observability
    "CountingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "DocxRevisionParser",
    "Entry",
    "EntryKind",
    "Paragraph",
    "RevisionParser",
    # Segmenting
    "ChangeSegment",
    "Segment",
    "TextSegment",
    "build_segments",
    # Dataset
    "DatasetRecord",
    "build_dataset",
    "build_records",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Classification
    "Classification",
    "Classifier",
    "RecordClassifier",
]
