# parser/nodes.py

"""Closed node model for WordprocessingML paragraph children.

Raw lxml elements are decoded once, at the parser boundary, into one of
four node kinds. Everything downstream works on these nodes only.
"""

from dataclasses import dataclass
from typing import Any

from revision_kit.errors import ParseError

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"


def w(tag: str) -> str:
    """Clark-notation name for a tag in the WordprocessingML namespace."""
    return f"{{{W_NS}}}{tag}"


@dataclass(frozen=True)
class RunNode:
    """A ``w:r`` outside any change-tracking wrapper."""

    texts: tuple[str, ...]


@dataclass(frozen=True)
class DeletionNode:
    """A ``w:del`` wrapper; ``texts`` are its ``w:delText`` leaves."""

    texts: tuple[str, ...]
    author: str
    date: str


@dataclass(frozen=True)
class InsertionNode:
    """A ``w:ins`` wrapper; ``texts`` are its ``w:t`` leaves."""

    texts: tuple[str, ...]
    author: str
    date: str


@dataclass(frozen=True)
class OtherNode:
    """Any other child (``w:pPr``, bookmarks, comments...). Produces no entry."""

    tag: str


MarkupNode = RunNode | DeletionNode | InsertionNode | OtherNode


def decode_node(element: Any) -> MarkupNode:
    try:
        tag = element.tag
    except AttributeError:
        raise ParseError(f"Not a markup element: {element!r}") from None

    # Comments and processing instructions have a callable tag in lxml
    if not isinstance(tag, str):
        return OtherNode(tag="#comment")

    if tag == w("r"):
        return RunNode(texts=_leaf_texts(element, w("t")))

    if tag == w("del"):
        return DeletionNode(
            texts=_leaf_texts(element, w("delText")),
            author=_attribute(element, "author"),
            date=_attribute(element, "date"),
        )

    if tag == w("ins"):
        return InsertionNode(
            texts=_leaf_texts(element, w("t")),
            author=_attribute(element, "author"),
            date=_attribute(element, "date"),
        )

    return OtherNode(tag=tag)


def _leaf_texts(element: Any, leaf_tag: str) -> tuple[str, ...]:
    """Text of every ``leaf_tag`` descendant, in document order, at any depth."""
    try:
        return tuple(leaf.text or "" for leaf in element.iter(leaf_tag))
    except AttributeError as e:
        raise ParseError(f"Cannot read text leaves of {element!r}: {e}") from e


def _attribute(element: Any, name: str) -> str:
    value = element.get(w(name))
    return value if value is not None else ""
