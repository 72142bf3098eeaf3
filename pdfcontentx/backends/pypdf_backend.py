"""pypdf backend implementation of the document store."""

from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pypdf import PdfReader
from pypdf._utils import StreamType, read_non_whitespace, read_until_regex
from pypdf.errors import PdfReadError
from pypdf.generic import (
    ArrayObject,
    ContentStream,
    DecodedStreamObject,
    IndirectObject,
    NameObject,
    NullObject,
    StreamObject,
    read_object,
)

from ..exceptions import (
    DecompressError,
    DereferenceError,
    DocumentLoadError,
    TokenizeError,
)
from ..operations import Instruction
from ..values import RawNameObject
from ..utils import get_logger, resolve_path
from .base import BackendDocument

LOGGER = get_logger("pdfcontentx.backends.pypdf")


def _decode_operator(operator: object) -> str:
    if isinstance(operator, bytes):
        return operator.decode("latin-1")
    return str(operator)


def _operand_tuple(operands: object) -> tuple[Any, ...]:
    # Inline images carry a settings/data mapping instead of an operand list.
    if isinstance(operands, (list, tuple)):
        return tuple(operands)
    return (operands,)


class _ContentTokenizer(ContentStream):
    """Content stream parser that keeps the raw bytes of name operands.

    Follows pypdf's own content stream loop, but reads top-level names
    through :meth:`_read_name` and reports inline images under their real
    operator ``BI``.
    """

    def _parse_content_stream(self, stream: StreamType) -> None:
        stream.seek(0, 0)
        operands: list[Any] = []
        while True:
            peek = read_non_whitespace(stream)
            if peek == b"" or peek == 0:
                break
            stream.seek(-1, 1)
            if peek.isalpha() or peek in (b"'", b'"'):
                operator = read_until_regex(stream=stream, regex=NameObject.delimiter_pattern)
                if operator == b"BI":
                    self._operations.append((self._read_inline_image(stream), b"BI"))
                else:
                    self._operations.append((operands, operator))
                operands = []
            elif peek == b"%":
                while peek not in (b"\r", b"\n", b""):
                    peek = stream.read(1)
            elif peek == b"/":
                operands.append(self._read_name(stream))
            else:
                operands.append(read_object(stream, None, self.forced_encoding))

    def _read_name(self, stream: StreamType) -> RawNameObject:
        token = stream.read(1) + read_until_regex(stream=stream, regex=NameObject.delimiter_pattern)
        return RawNameObject.from_token(token)


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader


class PypdfStore:
    """Document store that uses `pypdf` under the hood."""

    def load(self, path: str | Path) -> PypdfDocument:
        resolved = resolve_path(path)
        if not resolved.exists() or not resolved.is_file():
            raise DocumentLoadError(f"PDF file not found: {resolved}")

        try:
            raw_bytes = resolved.read_bytes()
        except OSError as exc:
            raise DocumentLoadError(f"Unable to read PDF file: {resolved}. Error: {exc}") from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
            num_pages = len(reader.pages)
        except PdfReadError as exc:
            raise DocumentLoadError(f"Corrupted or invalid PDF file: {resolved}. Error: {exc}") from exc
        except Exception as exc:
            raise DocumentLoadError(f"Unexpected error reading PDF: {resolved}. Error: {exc}") from exc

        LOGGER.debug("Loaded %s with %s page(s)", resolved, num_pages)
        return PypdfDocument(path=resolved, num_pages=num_pages, reader=reader)

    def pages(self, document: PypdfDocument) -> list[int]:
        return list(range(document.num_pages))

    def content_objects(self, document: PypdfDocument, page: int) -> list[Any]:
        try:
            page_obj = document.reader.pages[page]
        except Exception as exc:
            raise DereferenceError(f"Couldn't load page {page}. Error: {exc}") from exc

        contents = page_obj.get(NameObject("/Contents"))
        if contents is None or isinstance(contents, NullObject):
            return []
        resolved = contents
        if isinstance(contents, IndirectObject):
            resolved = self.resolve(document, contents)
        # An indirect reference to an array still lists the individual streams.
        if isinstance(resolved, ArrayObject):
            return list(resolved)
        return [contents]

    def resolve(self, document: PypdfDocument, object_id: Any) -> Any:
        if not isinstance(object_id, IndirectObject):
            return object_id
        try:
            resolved = object_id.get_object()
        except Exception as exc:
            raise DereferenceError(
                f"Couldn't dereference object {object_id.idnum} {object_id.generation} R. Error: {exc}"
            ) from exc
        if resolved is None or isinstance(resolved, NullObject):
            raise DereferenceError(f"Object {object_id.idnum} {object_id.generation} R does not exist")
        return resolved

    def is_stream(self, obj: Any) -> bool:
        return isinstance(obj, StreamObject)

    def decompress(self, stream: StreamObject) -> bytes:
        try:
            return stream.get_data()
        except Exception as exc:
            raise DecompressError(f"Couldn't decompress stream. Error: {exc}") from exc

    def tokenize(self, data: bytes) -> list[Instruction]:
        stream = DecodedStreamObject()
        stream.set_data(data)
        try:
            operations = _ContentTokenizer(stream, None).operations
        except Exception as exc:
            raise TokenizeError(f"Couldn't decode stream content. Error: {exc}") from exc
        return [
            Instruction(operator=_decode_operator(operator), operands=_operand_tuple(operands))
            for operands, operator in operations
        ]
