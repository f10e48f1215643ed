# src/revision_kit/classification/classify.py

import json
import logging
from collections.abc import Iterable
from dataclasses import replace
from time import monotonic

from pydantic import ValidationError

from revision_kit.dataset.models import DatasetRecord
from revision_kit.errors import ClassificationError
from revision_kit.observability import names
from revision_kit.observability.base import MetricsHook, NoOpMetricsHook
from revision_kit.prompts import Prompt, PromptsLibrary

from .base import UNKNOWN_CLASSIFICATION, Classification, Classifier

logger = logging.getLogger(__name__)

PROMPT_NAME = "classify_correction"
PROMPT_VERSION = "1"


def default_prompt() -> Prompt:
    return PromptsLibrary().get(PROMPT_NAME, PROMPT_VERSION)


def parse_classification(output: str) -> Classification:
    """Pull the JSON object out of a free-text model reply.

    Everything between the first ``{`` and the last ``}`` is decoded.
    """
    json_start = output.find("{")
    json_end = output.rfind("}")
    if json_start == -1 or json_end < json_start:
        raise ClassificationError("No JSON portion found in the response.")

    try:
        data = json.loads(output[json_start : json_end + 1])
    except json.JSONDecodeError as e:
        raise ClassificationError(f"Invalid JSON in response: {e}") from e

    if not isinstance(data, dict):
        raise ClassificationError("Invalid response format")
    try:
        return Classification(**data)
    except ValidationError as e:
        raise ClassificationError(f"Invalid response format: {e}") from e


class RecordClassifier:
    """Annotates dataset records with an error type and explanation.

    Records are classified one at a time, in order. A reply that cannot be
    parsed is logged and replaced by the ``unknown`` classification; errors
    raised by the classifier itself propagate.
    """

    def __init__(
        self,
        classifier: Classifier,
        prompt: Prompt | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._classifier = classifier
        self._prompt = prompt if prompt is not None else default_prompt()
        self.metrics_hook = metrics_hook

    async def classify(self, record: DatasetRecord) -> DatasetRecord:
        start = monotonic()
        prompt = self._prompt.render(
            original=record.original, correction=record.correction
        )
        output = await self._classifier.complete(prompt)

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.CLASSIFICATION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.CLASSIFICATION_REQUESTS_TOTAL)

        try:
            classification = parse_classification(output)
        except ClassificationError as e:
            logger.warning(
                "Error classifying correction %r -> %r: %s",
                record.original,
                record.correction,
                e,
            )
            self.metrics_hook.increment(names.CLASSIFICATION_ERRORS_TOTAL)
            classification = UNKNOWN_CLASSIFICATION

        return replace(
            record,
            error_type=classification.error_type,
            explanation=classification.explanation,
        )

    async def classify_all(
        self, records: Iterable[DatasetRecord]
    ) -> list[DatasetRecord]:
        classified = [await self.classify(record) for record in records]
        logger.info("Classified %d records", len(classified))
        return classified
