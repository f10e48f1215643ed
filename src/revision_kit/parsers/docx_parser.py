# parser/docx_parser.py

import io
import logging
import zipfile
from collections.abc import Iterable
from pathlib import Path
from time import monotonic
from typing import Any, BinaryIO

from lxml import etree

from revision_kit.errors import ParseError
from revision_kit.observability import names
from revision_kit.observability.base import MetricsHook, NoOpMetricsHook

from .base import RevisionParser
from .models import Entry, EntryKind, Paragraph
from .nodes import (
    DeletionNode,
    InsertionNode,
    MarkupNode,
    OtherNode,
    RunNode,
    decode_node,
    w,
)

logger = logging.getLogger(__name__)

DOCUMENT_XML_MEMBER = "word/document.xml"

# Stands in for a run or change whose text is empty, so it still counts
# as a token when context words are extracted.
PLACEHOLDER = " "


class DocxRevisionParser(RevisionParser):
    """
    Tracked-changes parser for WordprocessingML.
    - Accepts a .docx container or a bare document.xml
    - Reads direct w:p children of w:body, in order
    - Fails the whole document on malformed markup
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, source: str | Path | BinaryIO) -> list[Paragraph]:
        return self.parse_xml(read_document_xml(source))

    def parse_xml(self, xml: bytes | str) -> list[Paragraph]:
        start = monotonic()
        try:
            body = self._find_body(xml)
            paragraphs = [parse_paragraph(p) for p in body.iterchildren(w("p"))]
        except ParseError:
            self.metrics_hook.increment(names.PARSING_ERRORS_TOTAL)
            raise

        entry_count = sum(len(p.entries) for p in paragraphs)
        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSING_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSING_PARAGRAPHS_TOTAL, len(paragraphs))
        self.metrics_hook.increment(names.PARSING_ENTRIES_TOTAL, entry_count)

        logger.info(
            "Parsed %d paragraphs (%d entries) in %.0fms",
            len(paragraphs),
            entry_count,
            elapsed_ms,
        )
        return paragraphs

    def _find_body(self, xml: bytes | str) -> Any:
        if isinstance(xml, str):
            # Already decoded: the declared encoding no longer applies
            data = xml.encode("utf-8")
            parser = etree.XMLParser(
                encoding="utf-8", remove_blank_text=False, resolve_entities=False
            )
        else:
            data = xml
            parser = etree.XMLParser(remove_blank_text=False, resolve_entities=False)
        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            raise ParseError(f"Invalid XML in document: {e}") from e

        if root.tag != w("document"):
            raise ParseError(f"Expected a w:document root element, got {root.tag}")

        body = root.find(w("body"))
        if body is None:
            raise ParseError("w:document has no w:body element")
        return body


def read_document_xml(source: str | Path | BinaryIO) -> bytes:
    """Return the main document part of ``source``.

    Paths ending in ``.docx`` and zip streams are opened as containers and
    their ``word/document.xml`` member is returned; anything else is taken
    to be document XML already.
    """
    if isinstance(source, (str, Path)):
        path = Path(source)
        logger.debug("Reading document source: %s", path)
        data = path.read_bytes()
        if path.suffix.lower() != ".docx":
            return data
    else:
        data = source.read()
        if not zipfile.is_zipfile(io.BytesIO(data)):
            return data

    try:
        with zipfile.ZipFile(io.BytesIO(data)) as archive:
            return archive.read(DOCUMENT_XML_MEMBER)
    except zipfile.BadZipFile as e:
        raise ParseError(f"Not a valid docx container: {e}") from e
    except KeyError:
        raise ParseError("document.xml not found in the docx file") from None


def parse_paragraph(element: Any) -> Paragraph:
    nodes = [decode_node(child) for child in element]
    entries = [e for e in (extract_entry(n) for n in nodes) if e is not None]
    return Paragraph(entries=merge_text_entries(entries))


def extract_entry(node: MarkupNode) -> Entry | None:
    if isinstance(node, RunNode):
        return Entry(kind=EntryKind.TEXT, content=_join(node.texts))

    if isinstance(node, DeletionNode):
        return Entry(
            kind=EntryKind.DELETION,
            content=_join(node.texts),
            author=node.author,
            date=node.date,
        )

    if isinstance(node, InsertionNode):
        return Entry(
            kind=EntryKind.INSERTION,
            content=_join(node.texts),
            author=node.author,
            date=node.date,
        )

    if isinstance(node, OtherNode):
        return None

    raise ParseError(f"Unsupported markup node: {node!r}")


def merge_text_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Fold each run of consecutive text entries into one. Idempotent."""
    merged: list[Entry] = []
    for entry in entries:
        if (
            entry.kind is EntryKind.TEXT
            and merged
            and merged[-1].kind is EntryKind.TEXT
        ):
            merged[-1] = Entry(
                kind=EntryKind.TEXT, content=merged[-1].content + entry.content
            )
        else:
            merged.append(entry)
    return merged


def _join(texts: Iterable[str]) -> str:
    return "".join(texts) or PLACEHOLDER
