"""Operation consumers handed to the content stream walker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable

from rich.console import Console

from .exceptions import UnhandledOperationError
from .operations import (
    OPERATION_TYPES,
    AppendRectangleToPath,
    BeginMarkedContentSequenceWithPropertyList,
    BeginTextObject,
    EndMarkedContentSequence,
    EndPathWithoutFillingOrStroking,
    EndTextObject,
    FillPathUsingNonzeroWindingNumberRule,
    MoveTextPosition,
    MoveTextPositionAndSetLeading,
    MoveToStartOfNextLine,
    Operation,
    RestoreGraphicsState,
    SaveGraphicsState,
    SetCharacterSpacing,
    SetClippingPathUsingNonzeroWindingNumberRule,
    SetTextFontAndSize,
    SetTextMatrixAndTextLineMatrix,
    SetWordSpacing,
    ShowTextAllowingIndividualGlyphPositioning,
)

__all__ = ["OperationHandler", "SUPPRESSED_OPERATIONS", "OperationPrinter", "OperationCollector"]

OperationHandler = Callable[[Operation], None]

# Structural and state operations that are not worth reporting.
SUPPRESSED_OPERATIONS: frozenset[type[Operation]] = frozenset(
    {
        MoveTextPosition,
        MoveTextPositionAndSetLeading,
        ShowTextAllowingIndividualGlyphPositioning,
        AppendRectangleToPath,
        FillPathUsingNonzeroWindingNumberRule,
        SetTextMatrixAndTextLineMatrix,
        SetCharacterSpacing,
        SetWordSpacing,
        EndPathWithoutFillingOrStroking,
        BeginMarkedContentSequenceWithPropertyList,
        SetClippingPathUsingNonzeroWindingNumberRule,
        SetTextFontAndSize,
        MoveToStartOfNextLine,
        EndMarkedContentSequence,
        BeginTextObject,
        SaveGraphicsState,
        RestoreGraphicsState,
        EndTextObject,
    }
)

_KNOWN_OPERATIONS = frozenset(OPERATION_TYPES.values())


def _ensure_known(operation: object) -> Operation:
    if type(operation) not in _KNOWN_OPERATIONS:
        raise UnhandledOperationError(operation)
    return operation  # type: ignore[return-value]


class OperationPrinter:
    """Print the debug representation of every operation not suppressed."""

    def __init__(
        self,
        console: Console | None = None,
        *,
        suppressed: Iterable[type[Operation]] = SUPPRESSED_OPERATIONS,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.suppressed = frozenset(suppressed)

    def wants(self, operation: Operation) -> bool:
        return type(_ensure_known(operation)) not in self.suppressed

    def __call__(self, operation: Operation) -> None:
        if self.wants(operation):
            self.console.print(repr(operation), markup=False, highlight=False, soft_wrap=True)


@dataclass
class OperationCollector:
    """Keep every handled operation in order."""

    operations: list[Operation] = field(default_factory=list)

    def __call__(self, operation: Operation) -> None:
        self.operations.append(_ensure_known(operation))
