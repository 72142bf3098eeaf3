from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from pdfcontentx.exceptions import UnhandledOperationError
from pdfcontentx.handlers import SUPPRESSED_OPERATIONS, OperationCollector, OperationPrinter
from pdfcontentx.operations import (
    OPERATION_TYPES,
    BeginTextObject,
    FillPathUsingEvenOddRule,
    SetColorSpaceForStrokingOperations,
    SetTextFontAndSize,
    ShowText,
)


def _printer(**kwargs) -> tuple[OperationPrinter, StringIO]:
    buffer = StringIO()
    console = Console(file=buffer, width=200, highlight=False, emoji=False)
    return OperationPrinter(console, **kwargs), buffer


def test_printer_reports_interesting_operations():
    printer, buffer = _printer()
    printer(ShowText(body="Hello [world]"))
    printer(FillPathUsingEvenOddRule())
    printer(SetColorSpaceForStrokingOperations())

    assert buffer.getvalue().splitlines() == [
        "ShowText(body='Hello [world]')",
        "FillPathUsingEvenOddRule()",
        "SetColorSpaceForStrokingOperations()",
    ]


def test_printer_suppresses_bookkeeping_operations():
    printer, buffer = _printer()
    printer(BeginTextObject())
    printer(SetTextFontAndSize(name=b"F1", size=12.0))

    assert buffer.getvalue() == ""


def test_printer_custom_suppression():
    printer, buffer = _printer(suppressed={ShowText})
    printer(ShowText(body="hidden"))
    printer(BeginTextObject())

    assert buffer.getvalue().strip() == "BeginTextObject()"


def test_suppressed_operations_are_known_types():
    assert SUPPRESSED_OPERATIONS <= set(OPERATION_TYPES.values())
    assert ShowText not in SUPPRESSED_OPERATIONS


def test_handlers_reject_foreign_objects():
    printer, _ = _printer()
    with pytest.raises(UnhandledOperationError):
        printer("Tj")
    with pytest.raises(UnhandledOperationError):
        OperationCollector()(object())
