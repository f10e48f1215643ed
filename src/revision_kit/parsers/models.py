# parser/models.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from revision_kit.errors import DecodeError


class EntryKind(str, Enum):
    """Kind of a paragraph entry."""

    TEXT = "text"
    INSERTION = "insertion"
    DELETION = "deletion"


@dataclass(frozen=True)
class Entry:
    """One piece of paragraph content: stable text or a tracked change.

    Text entries carry no author/date. Insertions and deletions always do,
    as empty strings when the markup has none.
    """

    kind: EntryKind
    content: str
    author: str | None = None
    date: str | None = None

    @property
    def is_change(self) -> bool:
        return self.kind is not EntryKind.TEXT

    def to_dict(self) -> dict[str, str]:
        data = {"type": self.kind.value, "content": self.content}
        if self.author is not None:
            data["author"] = self.author
        if self.date is not None:
            data["date"] = self.date
        return data

    @classmethod
    def from_dict(cls, data: Any) -> "Entry":
        if not isinstance(data, dict):
            raise DecodeError(f"Entry must be an object, got {type(data).__name__}")
        try:
            kind = EntryKind(data.get("type"))
        except ValueError:
            raise DecodeError(f"Unknown entry type: {data.get('type')!r}") from None

        content = data.get("content")
        if not isinstance(content, str):
            raise DecodeError("Entry content must be a string")

        author = data.get("author")
        date = data.get("date")
        for name, value in (("author", author), ("date", date)):
            if value is not None and not isinstance(value, str):
                raise DecodeError(f"Entry {name} must be a string")

        if kind is not EntryKind.TEXT:
            author = author if author is not None else ""
            date = date if date is not None else ""

        return cls(kind=kind, content=content, author=author, date=date)


@dataclass(frozen=True)
class Paragraph:
    """Ordered entries of one document paragraph.

    The entries form a two-way edit script: text + insertions read as the
    corrected paragraph, text + deletions read as the original one.
    """

    entries: list[Entry] = field(default_factory=list)

    def corrected_text(self) -> str:
        return "".join(
            e.content for e in self.entries if e.kind is not EntryKind.DELETION
        )

    def original_text(self) -> str:
        return "".join(
            e.content for e in self.entries if e.kind is not EntryKind.INSERTION
        )

    @property
    def has_changes(self) -> bool:
        return any(e.is_change for e in self.entries)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {"entries": [e.to_dict() for e in self.entries]}

    @classmethod
    def from_dict(cls, data: Any) -> "Paragraph":
        if not isinstance(data, dict):
            raise DecodeError(
                f"Paragraph must be an object, got {type(data).__name__}"
            )
        entries = data.get("entries")
        if not isinstance(entries, list):
            raise DecodeError("Paragraph is missing its 'entries' list")
        return cls(entries=[Entry.from_dict(e) for e in entries])
