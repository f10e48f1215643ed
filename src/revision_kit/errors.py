# src/revision_kit/errors.py


class RevisionKitError(Exception):
    """Base class for all revision-kit errors."""


class ParseError(RevisionKitError):
    """Change-tracking markup is malformed or has an unexpected shape.

    Fatal for the whole document: no paragraphs are returned.
    """


class DecodeError(RevisionKitError):
    """Paragraph JSON handed to the dataset stage is invalid.

    Fatal for the run: nothing is written.
    """


class ClassificationError(RevisionKitError):
    """A classifier reply could not be turned into a classification."""
