"""Decode raw content stream instructions into typed operations.

The operator table is plain data: every supported operator names the
operation it produces and one operand reader per required position. A
reader pulls the operand at its position, checks its shape and returns the
converted field value, so a row of the table reads like the operator's
signature::

    "Tf": OperatorContract(SetTextFontAndSize, (NAME, NUMBER))

Operators whose operands carry nothing this decoder models (marked
content, color, path painting) have an empty reader tuple and ignore
whatever operands they receive.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Sequence

from .exceptions import MissingOperandsError, OperandTypeError, UnknownOperatorError, Utf8DecodeError
from .operations import (
    OPERATION_TYPES,
    AppendRectangleToPath,
    BeginMarkedContentSequenceWithPropertyList,
    BeginTextObject,
    EndMarkedContentSequence,
    EndPathWithoutFillingOrStroking,
    EndTextObject,
    FillPathUsingEvenOddRule,
    FillPathUsingNonzeroWindingNumberRule,
    FillPathUsingNonzeroWindingNumberRuleObsolete,
    Instruction,
    MoveTextPosition,
    MoveTextPositionAndSetLeading,
    MoveToStartOfNextLine,
    Operation,
    RestoreGraphicsState,
    SaveGraphicsState,
    SetCharacterSpacing,
    SetClippingPathUsingNonzeroWindingNumberRule,
    SetColorForNonstrokingOperations,
    SetColorSpaceForNonstrokingOperations,
    SetColorSpaceForStrokingOperations,
    SetTextFontAndSize,
    SetTextMatrixAndTextLineMatrix,
    SetWordSpacing,
    ShowText,
    ShowTextAllowingIndividualGlyphPositioning,
)
from .values import RawValue, as_array, as_name, as_number, as_string

__all__ = [
    "OperandReader",
    "OperatorContract",
    "OPERATORS",
    "NUMBER",
    "NAME",
    "TEXT",
    "GLYPH_RUN",
    "decode",
    "decode_instruction",
    "decode_text",
]


# -- Operand readers ---------------------------------------------------------


@dataclass(frozen=True, slots=True)
class OperandReader:
    """Converts the operand at one position into an operation field."""

    expected: str
    convert: Callable[[str, RawValue], Any]
    required: bool = True
    default: Any = None

    def read(self, operator: str, operands: Sequence[RawValue], index: int) -> Any:
        if index >= len(operands):
            if self.required:
                raise MissingOperandsError(operator, index, self.expected, len(operands))
            return self.default
        value = operands[index]
        converted = self.convert(operator, value)
        if converted is None:
            raise OperandTypeError(operator, index, self.expected, value)
        return converted


def decode_text(operator: str, data: bytes) -> str:
    """Interpret text operand bytes as UTF-8, refusing lossy recovery."""

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Utf8DecodeError(operator, data, exc) from exc


def _number(operator: str, value: RawValue) -> float | None:
    return as_number(value)


def _name(operator: str, value: RawValue) -> bytes | None:
    return as_name(value)


def _text(operator: str, value: RawValue) -> str | None:
    data = as_string(value)
    if data is None:
        return None
    return decode_text(operator, data)


def _glyph_run(operator: str, value: RawValue) -> str | None:
    elements = as_array(value)
    if elements is None:
        return None
    parts: list[str] = []
    for position, element in enumerate(elements):
        data = as_string(element)
        if data is not None:
            parts.append(decode_text(operator, data))
        elif as_number(element) is not None:
            # Glyph positioning adjustments are not modelled.
            parts.append("")
        else:
            raise OperandTypeError(operator, 0, f"string or number at array element {position}", element)
    return "".join(parts)


NUMBER = OperandReader("number", _number)
NAME = OperandReader("name", _name)
TEXT = OperandReader("string", _text)
GLYPH_RUN = OperandReader("array", _glyph_run, required=False, default="")


# -- Operator table ----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class OperatorContract:
    """Operation produced by an operator and the operand readers it needs."""

    operation: type[Operation]
    operands: tuple[OperandReader, ...] = ()

    def build(self, operator: str, operands: Sequence[RawValue]) -> Operation:
        values = [reader.read(operator, operands, index) for index, reader in enumerate(self.operands)]
        return self.operation(*values)


OPERATORS: Mapping[str, OperatorContract] = {
    "BDC": OperatorContract(BeginMarkedContentSequenceWithPropertyList),
    "EMC": OperatorContract(EndMarkedContentSequence),
    "BT": OperatorContract(BeginTextObject),
    "ET": OperatorContract(EndTextObject),
    "CS": OperatorContract(SetColorSpaceForStrokingOperations),
    "cs": OperatorContract(SetColorSpaceForNonstrokingOperations),
    "scn": OperatorContract(SetColorForNonstrokingOperations),
    "Tf": OperatorContract(SetTextFontAndSize, (NAME, NUMBER)),
    "Tc": OperatorContract(SetCharacterSpacing, (NUMBER,)),
    "Tw": OperatorContract(SetWordSpacing, (NUMBER,)),
    "Tm": OperatorContract(SetTextMatrixAndTextLineMatrix, (NUMBER,) * 6),
    "Tj": OperatorContract(ShowText, (TEXT,)),
    "TJ": OperatorContract(ShowTextAllowingIndividualGlyphPositioning, (GLYPH_RUN,)),
    "q": OperatorContract(SaveGraphicsState),
    "Q": OperatorContract(RestoreGraphicsState),
    "Td": OperatorContract(MoveTextPosition, (NUMBER, NUMBER)),
    "TD": OperatorContract(MoveTextPositionAndSetLeading, (NUMBER, NUMBER)),
    "T*": OperatorContract(MoveToStartOfNextLine),
    "re": OperatorContract(AppendRectangleToPath, (NUMBER,) * 4),
    "f": OperatorContract(FillPathUsingNonzeroWindingNumberRule),
    "F": OperatorContract(FillPathUsingNonzeroWindingNumberRuleObsolete),
    "f*": OperatorContract(FillPathUsingEvenOddRule),
    "W": OperatorContract(SetClippingPathUsingNonzeroWindingNumberRule),
    "n": OperatorContract(EndPathWithoutFillingOrStroking),
}

_unregistered = {
    operator for operator, contract in OPERATORS.items() if OPERATION_TYPES.get(operator) is not contract.operation
}
if _unregistered or set(OPERATION_TYPES) != set(OPERATORS):  # pragma: no cover - import time guard
    raise RuntimeError(f"Operator table out of sync with operation types: {sorted(_unregistered)}")


# -- Public API --------------------------------------------------------------


def decode(operator: str, operands: Sequence[RawValue] = ()) -> Operation:
    """Decode one ``operator`` with its ``operands`` into an :class:`Operation`.

    Raises :class:`UnknownOperatorError` for operators outside the table,
    :class:`OperandTypeError` (or its :class:`MissingOperandsError`
    subclass) when a required operand is wrongly shaped or absent, and
    :class:`Utf8DecodeError` when text operands are not valid UTF-8.
    """

    contract = OPERATORS.get(operator)
    if contract is None:
        raise UnknownOperatorError(operator)
    return contract.build(operator, operands)


def decode_instruction(instruction: Instruction) -> Operation:
    return decode(instruction.operator, instruction.operands)
