from __future__ import annotations

from pathlib import Path
from typing import Callable, Sequence
import sys

import pytest
from pypdf import PdfWriter
from pypdf.generic import ArrayObject, DecodedStreamObject, NameObject

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def write_content_pdf(
    path: Path,
    pages: Sequence[Sequence[bytes]],
    *,
    compress: bool = True,
) -> Path:
    """Write a PDF whose pages carry the given content streams."""

    writer = PdfWriter()
    for streams in pages:
        page = writer.add_blank_page(width=200, height=200)
        refs = []
        for data in streams:
            stream = DecodedStreamObject()
            stream.set_data(data)
            if compress:
                stream = stream.flate_encode()
            refs.append(writer._add_object(stream))
        if len(refs) == 1:
            page[NameObject("/Contents")] = refs[0]
        elif refs:
            page[NameObject("/Contents")] = ArrayObject(refs)
    with path.open("wb") as handle:
        writer.write(handle)
    return path


@pytest.fixture()
def content_pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, pages: Sequence[Sequence[bytes]], *, compress: bool = True) -> Path:
        return write_content_pdf(tmp_path / filename, pages, compress=compress)

    return _create


@pytest.fixture()
def text_pdf(content_pdf_factory: Callable[..., Path]) -> Path:
    return content_pdf_factory(
        "text.pdf",
        [
            [b"BT /F1 12 Tf 72 700 Td (Hello) Tj ET"],
            [b"q 0 0 100 50 re f Q", b"BT [(A) -120 (B)] TJ (World) Tj ET"],
        ],
    )


@pytest.fixture()
def blank_pdf(content_pdf_factory: Callable[..., Path]) -> Path:
    return content_pdf_factory("blank.pdf", [[], []])
