"""Document store protocol consumed by the content stream walker."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Hashable, Protocol, Sequence

from ..operations import Instruction


@dataclass
class BackendDocument:
    """Loaded PDF document; backends subclass it to carry their reader."""

    path: Path | None
    num_pages: int


class DocumentStore(Protocol):
    """Operations the walker needs from a PDF backend.

    Implementations translate their own failures into the
    :class:`~pdfcontentx.exceptions.DocumentStoreError` family.
    """

    def load(self, path: str | Path) -> BackendDocument:
        """Load a PDF file and return a backend document wrapper."""

    def pages(self, document: BackendDocument) -> Sequence[Hashable]:
        """Return page identifiers in document order."""

    def content_objects(self, document: BackendDocument, page: Hashable) -> Sequence[Any]:
        """Return the content object identifiers of ``page``."""

    def resolve(self, document: BackendDocument, object_id: Any) -> Any:
        """Dereference ``object_id``."""

    def is_stream(self, obj: Any) -> bool:
        """Return ``True`` when ``obj`` is a stream object."""

    def decompress(self, stream: Any) -> bytes:
        """Return the stream data with all filters applied."""

    def tokenize(self, data: bytes) -> list[Instruction]:
        """Split decompressed content bytes into instructions."""
