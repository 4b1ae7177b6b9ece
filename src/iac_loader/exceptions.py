"""Errors raised while loading documents.

Every error carries the records built before the failure in ``documents`` so
callers can still report how far the load got.
"""

from typing import List, Optional

from .models import IacDocument


class LoaderError(Exception):
    """Base class for document loading failures."""

    def __init__(self, message: str, file_path: str, documents: Optional[List[IacDocument]] = None):
        super().__init__(message)
        self.file_path = file_path
        self.documents: List[IacDocument] = documents if documents is not None else []


class DocumentReadError(LoaderError):
    """The file could not be opened or read."""


class LineScanError(LoaderError):
    """The line reader failed part way through the boundary scan."""


class DocumentDecodeError(LoaderError):
    """A document in the stream is not well-formed YAML."""

    def __init__(self, message: str, file_path: str, document_index: int, documents=None):
        super().__init__(message, file_path, documents)
        self.document_index = document_index


class DocumentEncodeError(LoaderError):
    """A decoded document could not be re-encoded canonically."""

    def __init__(self, message: str, file_path: str, document_index: int, documents=None):
        super().__init__(message, file_path, documents)
        self.document_index = document_index


class DocumentCountMismatchError(LoaderError):
    """More documents were decoded than the line scan found boundaries for."""

    def __init__(self, file_path: str, expected: int, document_index: int, documents=None):
        super().__init__(
            f"document count was higher than expected count ({expected}) in {file_path}",
            file_path,
            documents,
        )
        self.expected = expected
        self.document_index = document_index
