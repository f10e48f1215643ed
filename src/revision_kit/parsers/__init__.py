from .base import RevisionParser
from .docx_parser import DocxRevisionParser, merge_text_entries, read_document_xml
from .models import Entry, EntryKind, Paragraph

__all__ = [
    "DocxRevisionParser",
    "Entry",
    "EntryKind",
    "Paragraph",
    "RevisionParser",
    "merge_text_entries",
    "read_document_xml",
]
