"""Exception types raised outside the (total) diff engine"""


class DocDiffError(Exception):
    """Base class for expected, user-reportable failures."""


class DocumentNotFoundError(DocDiffError, LookupError):
    """No stored document matches the given slug or path."""

    def __init__(self, key: str):
        super().__init__(f"Document not found: {key}")
        self.key = key


class RevertError(DocDiffError, ValueError):
    """A requested revert does not correspond to a changed line in the diff."""
