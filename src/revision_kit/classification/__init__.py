"""Classification stage for dataset records.

No model client ships with revision-kit: callers provide any object that
satisfies the ``Classifier`` protocol.

Example:
    >>> class EchoClassifier:
    ...     async def complete(self, prompt: str) -> str:
    ...         return '{"error_type": "Spelling", "explanation": "accent"}'
    >>>
    >>> record_classifier = RecordClassifier(EchoClassifier())
    >>> labelled = await record_classifier.classify_all(records)
"""

from .base import UNKNOWN_CLASSIFICATION, Classification, Classifier
from .classify import RecordClassifier, default_prompt, parse_classification

__all__ = [
    "Classification",
    "Classifier",
    "RecordClassifier",
    "UNKNOWN_CLASSIFICATION",
    "default_prompt",
    "parse_classification",
]
