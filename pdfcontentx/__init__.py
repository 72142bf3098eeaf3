"""
pdfcontentx - decode PDF page content streams into typed operations.

Quick Start:
    >>> from pypdf.generic import NameObject, NumberObject
    >>> from pdfcontentx import decode
    >>> decode("Tf", [NameObject("/F1"), NumberObject(12)])
    SetTextFontAndSize(name=b'F1', size=12.0)

Main entry points:
    - decode / decode_instruction: classify one content stream instruction
    - ContentStreamWalker / walk_document: decode every page of a PDF
    - OperationPrinter / OperationCollector: ready-made operation handlers

Exceptions:
    - ContentDecodeError and its subclasses UnknownOperatorError,
      OperandTypeError, MissingOperandsError and Utf8DecodeError
    - DocumentStoreError and its subclasses for backend failures

For CLI usage, use the 'pdfcontentx' command after installation.
"""

# Decoder
from pdfcontentx.decoder import OPERATORS, OperatorContract, decode, decode_instruction

# Operations
from pdfcontentx.operations import OPERATION_TYPES, Instruction, Operation

# Walking
from pdfcontentx.backends import DocumentStore, PypdfStore
from pdfcontentx.config import WalkerConfig
from pdfcontentx.handlers import SUPPRESSED_OPERATIONS, OperationCollector, OperationPrinter
from pdfcontentx.walker import ContentStreamWalker, WalkSummary, walk_document

# Exceptions
from pdfcontentx.exceptions import (
    ContentDecodeError,
    DecompressError,
    DereferenceError,
    DocumentLoadError,
    DocumentStoreError,
    MissingOperandsError,
    OperandTypeError,
    PdfContentError,
    TokenizeError,
    UnexpectedObjectError,
    UnhandledOperationError,
    UnknownOperatorError,
    Utf8DecodeError,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    # Decoder
    "decode",
    "decode_instruction",
    "OPERATORS",
    "OperatorContract",
    # Operations
    "Instruction",
    "Operation",
    "OPERATION_TYPES",
    # Walking
    "ContentStreamWalker",
    "WalkSummary",
    "WalkerConfig",
    "walk_document",
    "DocumentStore",
    "PypdfStore",
    "OperationPrinter",
    "OperationCollector",
    "SUPPRESSED_OPERATIONS",
    # Exceptions
    "PdfContentError",
    "ContentDecodeError",
    "UnknownOperatorError",
    "OperandTypeError",
    "MissingOperandsError",
    "Utf8DecodeError",
    "DocumentStoreError",
    "DocumentLoadError",
    "DereferenceError",
    "UnexpectedObjectError",
    "DecompressError",
    "TokenizeError",
    "UnhandledOperationError",
    # Version info
    "__version__",
]
