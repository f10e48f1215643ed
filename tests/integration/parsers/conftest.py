from collections.abc import Callable
from pathlib import Path
from types import SimpleNamespace

import pytest

from revision_kit.parsers.docx_parser import DocxRevisionParser
from revision_kit.parsers.models import Paragraph


def _sample_document(markup: SimpleNamespace) -> str:
    """A short review: one substitution, one insertion, one clean paragraph."""
    return markup.document(
        markup.run("Egli ")
        + markup.deletion("ha", author="Maria", date="2024-02-10T08:30:00Z")
        + markup.insertion("è", author="Maria", date="2024-02-10T08:30:00Z")
        + markup.run(" andato a casa ieri sera."),
        markup.run("Abbiamo visto ")
        + markup.insertion("l'")
        + markup.run("anno scorso un film."),
        markup.run("Nessuna modifica qui."),
    )


@pytest.fixture
def sample_docx(
    markup: SimpleNamespace, write_docx: Callable[[str, str], Path]
) -> Path:
    return write_docx("sample.docx", _sample_document(markup))


@pytest.fixture
def sample_xml(markup: SimpleNamespace, tmp_path: Path) -> Path:
    path = tmp_path / "document.xml"
    path.write_text(_sample_document(markup), encoding="utf-8")
    return path


@pytest.fixture
def parsed_sample(sample_docx: Path) -> list[Paragraph]:
    """Parse the sample docx once per test."""
    return DocxRevisionParser().parse(sample_docx)
