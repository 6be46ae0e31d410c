"""Document acquisition exports."""

from .document_sources import (
    AcquisitionError,
    DocumentSource,
    LocalDocumentSource,
    RemoteDocumentSource,
    build_document_source,
)

__all__ = [
    "AcquisitionError",
    "DocumentSource",
    "LocalDocumentSource",
    "RemoteDocumentSource",
    "build_document_source",
]
