# src/revision_kit/dataset/models.py

from dataclasses import dataclass
from typing import Any

from revision_kit.errors import DecodeError


@dataclass(frozen=True)
class DatasetRecord:
    """One (original, correction) training pair.

    ``error_type`` and ``explanation`` stay empty until the classification
    stage fills them in.
    """

    original: str
    correction: str
    error_type: str | None = None
    explanation: str | None = None

    @property
    def is_blank(self) -> bool:
        return not self.original.strip() and not self.correction.strip()

    def to_dict(self) -> dict[str, str]:
        data = {"original": self.original, "correction": self.correction}
        if self.error_type is not None:
            data["error_type"] = self.error_type
        if self.explanation is not None:
            data["explanation"] = self.explanation
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "DatasetRecord":
        if not isinstance(data, dict):
            raise DecodeError(f"Record must be an object, got {type(data).__name__}")
        original = data.get("original")
        correction = data.get("correction")
        if not isinstance(original, str) or not isinstance(correction, str):
            raise DecodeError("Record needs string 'original' and 'correction'")

        error_type = data.get("error_type")
        explanation = data.get("explanation")
        for name, value in (("error_type", error_type), ("explanation", explanation)):
            if value is not None and not isinstance(value, str):
                raise DecodeError(f"Record {name} must be a string")

        return cls(
            original=original,
            correction=correction,
            error_type=error_type,
            explanation=explanation,
        )
