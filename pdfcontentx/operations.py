"""Strongly typed operations decoded from PDF content stream instructions.

Each supported operator maps to exactly one frozen dataclass below. Variants
without fields are marker operations for state changes that carry nothing
of interest to the decoder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Sequence

from .values import RawValue

__all__ = [
    "Instruction",
    "Operation",
    "OPERATION_TYPES",
    "register_operation",
    "BeginMarkedContentSequenceWithPropertyList",
    "EndMarkedContentSequence",
    "BeginTextObject",
    "EndTextObject",
    "SetColorSpaceForStrokingOperations",
    "SetColorSpaceForNonstrokingOperations",
    "SetColorForNonstrokingOperations",
    "SetTextFontAndSize",
    "SetCharacterSpacing",
    "SetWordSpacing",
    "SetTextMatrixAndTextLineMatrix",
    "ShowText",
    "ShowTextAllowingIndividualGlyphPositioning",
    "SaveGraphicsState",
    "RestoreGraphicsState",
    "MoveTextPosition",
    "MoveTextPositionAndSetLeading",
    "MoveToStartOfNextLine",
    "AppendRectangleToPath",
    "FillPathUsingNonzeroWindingNumberRule",
    "FillPathUsingNonzeroWindingNumberRuleObsolete",
    "FillPathUsingEvenOddRule",
    "SetClippingPathUsingNonzeroWindingNumberRule",
    "EndPathWithoutFillingOrStroking",
]


@dataclass(frozen=True, slots=True)
class Instruction:
    """Raw operator/operands pair produced by the content stream tokenizer."""

    operator: str
    operands: Sequence[RawValue] = ()


@dataclass(frozen=True, slots=True)
class Operation:
    """Base class of the closed operation set."""

    operator: ClassVar[str] = ""
    category: ClassVar[str] = ""


OPERATION_TYPES: dict[str, type[Operation]] = {}


def register_operation(operator: str, category: str) -> Callable[[type[Operation]], type[Operation]]:
    def decorator(cls: type[Operation]) -> type[Operation]:
        if operator in OPERATION_TYPES:
            raise ValueError(f"Operator '{operator}' is already registered")
        cls.operator = operator
        cls.category = category
        OPERATION_TYPES[operator] = cls
        return cls

    return decorator


# -- Marked content ----------------------------------------------------------


@register_operation("BDC", "marked_content")
@dataclass(frozen=True, slots=True)
class BeginMarkedContentSequenceWithPropertyList(Operation):
    pass


@register_operation("EMC", "marked_content")
@dataclass(frozen=True, slots=True)
class EndMarkedContentSequence(Operation):
    pass


# -- Text objects ------------------------------------------------------------


@register_operation("BT", "text_control")
@dataclass(frozen=True, slots=True)
class BeginTextObject(Operation):
    pass


@register_operation("ET", "text_control")
@dataclass(frozen=True, slots=True)
class EndTextObject(Operation):
    pass


# -- Color -------------------------------------------------------------------


@register_operation("CS", "color")
@dataclass(frozen=True, slots=True)
class SetColorSpaceForStrokingOperations(Operation):
    pass


@register_operation("cs", "color")
@dataclass(frozen=True, slots=True)
class SetColorSpaceForNonstrokingOperations(Operation):
    pass


@register_operation("scn", "color")
@dataclass(frozen=True, slots=True)
class SetColorForNonstrokingOperations(Operation):
    pass


# -- Text state --------------------------------------------------------------


@register_operation("Tf", "text_state")
@dataclass(frozen=True, slots=True)
class SetTextFontAndSize(Operation):
    """Select the font resource ``name`` at ``size`` text space units."""

    name: bytes
    size: float


@register_operation("Tc", "text_state")
@dataclass(frozen=True, slots=True)
class SetCharacterSpacing(Operation):
    spacing: float


@register_operation("Tw", "text_state")
@dataclass(frozen=True, slots=True)
class SetWordSpacing(Operation):
    spacing: float


# -- Text positioning --------------------------------------------------------


@register_operation("Tm", "text_position")
@dataclass(frozen=True, slots=True)
class SetTextMatrixAndTextLineMatrix(Operation):
    """Replace the text matrix and text line matrix with ``[a b c d e f]``."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float


@register_operation("Td", "text_position")
@dataclass(frozen=True, slots=True)
class MoveTextPosition(Operation):
    t_x: float
    t_y: float


@register_operation("TD", "text_position")
@dataclass(frozen=True, slots=True)
class MoveTextPositionAndSetLeading(Operation):
    t_x: float
    t_y: float


@register_operation("T*", "text_position")
@dataclass(frozen=True, slots=True)
class MoveToStartOfNextLine(Operation):
    pass


# -- Text showing ------------------------------------------------------------


@register_operation("Tj", "text_show")
@dataclass(frozen=True, slots=True)
class ShowText(Operation):
    body: str


@register_operation("TJ", "text_show")
@dataclass(frozen=True, slots=True)
class ShowTextAllowingIndividualGlyphPositioning(Operation):
    """Text of a ``TJ`` glyph run; positioning adjustments are dropped."""

    body: str


# -- Graphics state ----------------------------------------------------------


@register_operation("q", "graphics_state")
@dataclass(frozen=True, slots=True)
class SaveGraphicsState(Operation):
    pass


@register_operation("Q", "graphics_state")
@dataclass(frozen=True, slots=True)
class RestoreGraphicsState(Operation):
    pass


# -- Paths -------------------------------------------------------------------


@register_operation("re", "path_construction")
@dataclass(frozen=True, slots=True)
class AppendRectangleToPath(Operation):
    x: float
    y: float
    width: float
    height: float


@register_operation("f", "path_painting")
@dataclass(frozen=True, slots=True)
class FillPathUsingNonzeroWindingNumberRule(Operation):
    pass


@register_operation("F", "path_painting")
@dataclass(frozen=True, slots=True)
class FillPathUsingNonzeroWindingNumberRuleObsolete(Operation):
    pass


@register_operation("f*", "path_painting")
@dataclass(frozen=True, slots=True)
class FillPathUsingEvenOddRule(Operation):
    pass


@register_operation("W", "clipping")
@dataclass(frozen=True, slots=True)
class SetClippingPathUsingNonzeroWindingNumberRule(Operation):
    pass


@register_operation("n", "path_painting")
@dataclass(frozen=True, slots=True)
class EndPathWithoutFillingOrStroking(Operation):
    pass
