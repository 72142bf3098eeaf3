"""Walk every page content stream of a PDF and decode its instructions."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Hashable, Iterator

from .backends import BackendDocument, DocumentStore, PypdfStore
from .config import WalkerConfig
from .decoder import decode_instruction
from .exceptions import ContentDecodeError, UnexpectedObjectError
from .handlers import OperationHandler
from .operations import Instruction, Operation
from .utils import get_logger

__all__ = ["SkippedInstruction", "WalkSummary", "ContentStreamWalker", "walk_document"]

LOGGER = get_logger("pdfcontentx.walker")

ProgressCallback = Callable[[str], None]


@dataclass(slots=True)
class SkippedInstruction:
    """Instruction dropped while walking with ``on_error="skip"``."""

    page: Hashable
    stream_index: int
    instruction_index: int
    instruction: Instruction
    error: ContentDecodeError


@dataclass(slots=True)
class WalkSummary:
    """Counters collected over one walk."""

    pages: int = 0
    content_streams: int = 0
    operations: int = 0
    operator_counts: Counter[str] = field(default_factory=Counter)
    category_counts: Counter[str] = field(default_factory=Counter)
    skipped: list[SkippedInstruction] = field(default_factory=list)


class ContentStreamWalker:
    """Drive a document store through every page content stream.

    Pages are visited in document order and content objects in the order
    the store lists them. Each instruction is decoded on its own; no text or
    graphics state is carried from one operation to the next.
    """

    def __init__(
        self,
        store: DocumentStore | None = None,
        config: WalkerConfig | None = None,
        *,
        progress: ProgressCallback | None = None,
    ) -> None:
        self.store = store or PypdfStore()
        self.config = config or WalkerConfig()
        self.progress = progress

    def load(self, path: str | Path) -> BackendDocument:
        self._report(f"Loading from {path}...")
        return self.store.load(path)

    def walk(self, source: str | Path | BackendDocument, handler: OperationHandler) -> WalkSummary:
        """Decode every instruction of ``source`` and pass it to ``handler``."""

        document = source if isinstance(source, BackendDocument) else self.load(source)
        summary = WalkSummary()
        for _page, operation in self.iter_operations(document, summary=summary):
            handler(operation)
        return summary

    def iter_operations(
        self,
        document: BackendDocument,
        *,
        summary: WalkSummary | None = None,
    ) -> Iterator[tuple[Hashable, Operation]]:
        summary = summary if summary is not None else WalkSummary()
        for page in self.store.pages(document):
            summary.pages += 1
            LOGGER.debug("Processing page %s", page)
            for stream_index, object_id in enumerate(self.store.content_objects(document, page)):
                instructions = self._read_instructions(document, object_id)
                summary.content_streams += 1
                LOGGER.debug(
                    "Page %s content stream %s holds %s instruction(s)",
                    page,
                    stream_index,
                    len(instructions),
                )
                for index, instruction in enumerate(instructions):
                    try:
                        operation = decode_instruction(instruction)
                    except ContentDecodeError as exc:
                        if self.config.on_error != "skip":
                            raise
                        LOGGER.warning(
                            "Skipping instruction %s of page %s stream %s: %s",
                            index,
                            page,
                            stream_index,
                            exc,
                        )
                        summary.skipped.append(
                            SkippedInstruction(page, stream_index, index, instruction, exc)
                        )
                        continue
                    summary.operations += 1
                    summary.operator_counts[operation.operator] += 1
                    summary.category_counts[operation.category] += 1
                    yield page, operation

    def _read_instructions(self, document: BackendDocument, object_id: Any) -> list[Instruction]:
        store = self.store
        obj = store.resolve(document, object_id)
        if not store.is_stream(obj):
            raise UnexpectedObjectError(
                f"Page content object {object_id!r} is a {type(obj).__name__}, not a stream"
            )
        self._report("Decompressing stream...")
        data = store.decompress(obj)
        return store.tokenize(data)

    def _report(self, message: str) -> None:
        if self.progress is not None:
            self.progress(message)


def walk_document(
    path: str | Path,
    handler: OperationHandler,
    *,
    config: WalkerConfig | None = None,
    store: DocumentStore | None = None,
    progress: ProgressCallback | None = None,
) -> WalkSummary:
    """Convenience wrapper walking ``path`` with a fresh walker."""

    walker = ContentStreamWalker(store, config, progress=progress)
    return walker.walk(path, handler)
