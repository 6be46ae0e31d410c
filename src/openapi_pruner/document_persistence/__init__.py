"""Document persistence exports."""

from .document_writer import PersistenceError, render_document, save_document

__all__ = ["PersistenceError", "render_document", "save_document"]
