# parser/base.py

from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO

from .models import Paragraph


class RevisionParser(ABC):
    @abstractmethod
    def parse(self, source: str | Path | BinaryIO) -> list[Paragraph]:
        """
        Parse a document and return its paragraphs as ordered entry lists.

        Requirements:
        - Deterministic output for same input
        - One Paragraph per document paragraph, in document order
        - Adjacent text entries already merged
        - Malformed input raises ParseError, never a partial result
        """
        raise NotImplementedError
