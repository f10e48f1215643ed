# src/revision_kit/config.py

from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONTEXT_WORDS = 4

REVISIONS_FILE = "revisions_grouped.json"
DATASET_FILE = "dataset.jsonl"
CLASSIFIED_DATASET_FILE = "dataset_classified.jsonl"


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration for a revision-kit run.

    Immutable. Explicit. No magic defaults from environment.
    """

    output_dir: Path = Path("outputs")
    context_words: int = DEFAULT_CONTEXT_WORDS
    revisions_file: str = REVISIONS_FILE
    dataset_file: str = DATASET_FILE
    classified_file: str = CLASSIFIED_DATASET_FILE

    def __post_init__(self) -> None:
        if self.context_words < 0:
            raise ValueError("context_words must be >= 0")

    @property
    def revisions_path(self) -> Path:
        return Path(self.output_dir) / self.revisions_file

    @property
    def dataset_path(self) -> Path:
        return Path(self.output_dir) / self.dataset_file

    @property
    def classified_path(self) -> Path:
        return Path(self.output_dir) / self.classified_file
