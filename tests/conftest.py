import io
import zipfile
from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    '<Override PartName="/word/document.xml" ContentType="application/'
    'vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
    "</Types>"
)


def _document(*paragraphs: str) -> str:
    """Wrap paragraph inner XML strings in a minimal w:document."""
    body = "".join(f"<w:p>{p}</w:p>" for p in paragraphs)
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}"><w:body>{body}</w:body></w:document>'
    )


def _run(text: str) -> str:
    return f'<w:r><w:t xml:space="preserve">{text}</w:t></w:r>'


def _deletion(
    text: str, author: str = "Editor", date: str = "2024-01-02T10:00:00Z"
) -> str:
    return (
        f'<w:del w:id="1" w:author="{author}" w:date="{date}">'
        f'<w:r><w:delText xml:space="preserve">{text}</w:delText></w:r></w:del>'
    )


def _insertion(
    text: str, author: str = "Editor", date: str = "2024-01-02T10:00:00Z"
) -> str:
    return (
        f'<w:ins w:id="2" w:author="{author}" w:date="{date}">'
        f'<w:r><w:t xml:space="preserve">{text}</w:t></w:r></w:ins>'
    )


def _docx_bytes(document_xml: str) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        archive.writestr("[Content_Types].xml", CONTENT_TYPES)
        archive.writestr("word/document.xml", document_xml)
    return buffer.getvalue()


@pytest.fixture
def markup() -> SimpleNamespace:
    """Builders for WordprocessingML snippets."""
    return SimpleNamespace(
        document=_document,
        run=_run,
        deletion=_deletion,
        insertion=_insertion,
        docx_bytes=_docx_bytes,
    )


@pytest.fixture
def write_docx(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a .docx holding the given document.xml and return its path."""

    def _write(name: str, document_xml: str) -> Path:
        path = tmp_path / name
        path.write_bytes(_docx_bytes(document_xml))
        return path

    return _write
