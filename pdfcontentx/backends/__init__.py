"""Document store backends supplying raw content stream instructions."""

from .base import BackendDocument, DocumentStore
from .pypdf_backend import PypdfDocument, PypdfStore

__all__ = [
    "BackendDocument",
    "DocumentStore",
    "PypdfDocument",
    "PypdfStore",
]
