# src/revision_kit/classification/base.py

from typing import Protocol

from pydantic import BaseModel, Field


class Classification(BaseModel):
    """Error type and explanation for one correction."""

    error_type: str = Field(min_length=1)
    explanation: str = Field(min_length=1)


UNKNOWN_CLASSIFICATION = Classification(
    error_type="unknown",
    explanation="Unable to classify correction.",
)


class Classifier(Protocol):
    """Protocol for the model that labels corrections.

    Implementations own transport concerns (network, retries, rate limits).
    They receive a fully rendered prompt and return the model's raw reply.
    """

    async def complete(self, prompt: str) -> str: ...
