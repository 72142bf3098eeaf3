"""
Custom exceptions for pdfcontentx.

Two families are kept apart: :class:`ContentDecodeError` covers the
classification of a single content stream instruction, while
:class:`DocumentStoreError` wraps failures reported by the PDF backend
(loading, dereferencing, decompression and tokenizing).
"""

from __future__ import annotations


class PdfContentError(Exception):
    """Base exception for all pdfcontentx errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF content error occurred."


# -- Instruction decoding ----------------------------------------------------


class ContentDecodeError(PdfContentError):
    """Raised when an instruction cannot be turned into an operation."""

    @property
    def default_message(self) -> str:
        return "Content stream instruction could not be decoded."


class UnknownOperatorError(ContentDecodeError):
    """Raised when the operator is not part of the supported operator table."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"Unknown content stream operator: {operator!r}")


class OperandTypeError(ContentDecodeError):
    """Raised when an operand does not have the shape its operator requires."""

    def __init__(self, operator: str, index: int, expected: str, value: object = None) -> None:
        self.operator = operator
        self.index = index
        self.expected = expected
        self.value = value
        super().__init__(self._describe())

    def _describe(self) -> str:
        return (
            f"Operator {self.operator!r} expects {self.expected} at operand {self.index}, "
            f"got {self.value!r}"
        )


class MissingOperandsError(OperandTypeError):
    """Raised when an operator receives fewer operands than it requires.

    A missing operand is a special case of a wrongly shaped one, so callers
    catching :class:`OperandTypeError` see arity failures as well.
    """

    def __init__(self, operator: str, index: int, expected: str, received: int) -> None:
        self.received = received
        super().__init__(operator, index, expected)

    def _describe(self) -> str:
        return (
            f"Operator {self.operator!r} expects {self.expected} at operand {self.index}, "
            f"but only {self.received} operand(s) were supplied"
        )


class Utf8DecodeError(ContentDecodeError):
    """Raised when text operand bytes are not valid UTF-8."""

    def __init__(self, operator: str, data: bytes, reason: UnicodeDecodeError) -> None:
        self.operator = operator
        self.data = data
        self.reason = reason
        super().__init__(f"Operator {operator!r} text is not valid UTF-8: {reason}")


# -- Document store ----------------------------------------------------------


class DocumentStoreError(PdfContentError):
    """Raised when the PDF backend fails to provide content stream data."""

    @property
    def default_message(self) -> str:
        return "The PDF backend failed to provide content data."


class DocumentLoadError(DocumentStoreError):
    """Raised when a PDF file cannot be read."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class DereferenceError(DocumentStoreError):
    """Raised when an object reference cannot be resolved."""

    @property
    def default_message(self) -> str:
        return "Couldn't dereference object."


class UnexpectedObjectError(DocumentStoreError):
    """Raised when a page content object is not a stream."""

    @property
    def default_message(self) -> str:
        return "Page content object is not a stream."


class DecompressError(DocumentStoreError):
    """Raised when stream data cannot be decoded through its filters."""

    @property
    def default_message(self) -> str:
        return "Couldn't decompress stream."


class TokenizeError(DocumentStoreError):
    """Raised when decompressed bytes are not a valid content stream."""

    @property
    def default_message(self) -> str:
        return "Couldn't decode stream content."


# -- Handlers ----------------------------------------------------------------


class UnhandledOperationError(PdfContentError):
    """Raised when a handler receives an object outside the operation set."""

    def __init__(self, operation: object) -> None:
        self.operation = operation
        super().__init__(f"Unhandled operation variant: {type(operation).__name__}")
