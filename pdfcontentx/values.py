"""Shape accessors for raw content stream operands.

Operands arrive as pypdf generic objects (``NumberObject``, ``FloatObject``,
``NameObject``, ``TextStringObject``/``ByteStringObject``, ``ArrayObject``
and friends). The helpers below narrow such a value to one primitive shape
and return ``None`` when the value has a different shape; they never raise.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Sequence

from pypdf.generic import BooleanObject, ByteStringObject, NameObject, TextStringObject

__all__ = ["RawValue", "RawNameObject", "as_number", "as_name", "as_string", "as_array"]

RawValue = Any


class RawNameObject(NameObject):
    """Name operand that remembers the bytes it was written with.

    ``raw_bytes`` holds the token after ``#xx`` escapes are resolved and
    without the leading solidus. pypdf only keeps the decoded ``str``, which
    loses names that are not valid UTF-8.
    """

    raw_bytes: bytes = b""

    @classmethod
    def from_token(cls, token: bytes) -> "RawNameObject":
        """Build a name from its content stream ``token`` (e.g. ``b"/F#E9"``).

        The ``str`` value is decoded with pypdf's name charsets and falls
        back to ``charmap``, so it never fails.
        """

        data = NameObject.unnumber(token[1:] if token.startswith(b"/") else token)
        for encoding in NameObject.CHARSETS:
            try:
                text = data.decode(encoding)
                break
            except UnicodeDecodeError:
                continue
        else:
            text = data.decode("charmap")
        raw = cls("/" + text)
        raw.raw_bytes = data
        return raw


def as_number(value: RawValue) -> float | None:
    """Return ``value`` as a float when it is an integer or real operand."""

    if isinstance(value, (bool, BooleanObject)):
        return None
    if isinstance(value, (int, float, Decimal)):
        try:
            return float(value)
        except OverflowError:
            return None
    return None


def as_name(value: RawValue) -> bytes | None:
    """Return the bytes of a name operand without its leading solidus."""

    if isinstance(value, RawNameObject):
        return value.raw_bytes
    if not isinstance(value, NameObject):
        return None
    # Names built in memory have no token bytes; use their UTF-8 form.
    name = str(value)
    if name.startswith("/"):
        name = name[1:]
    return name.encode("utf-8", "surrogateescape")


def as_string(value: RawValue) -> bytes | None:
    """Return the original bytes of a string literal operand.

    A ``TextStringObject`` built in memory has no original bytes; pypdf then
    encodes it with PDFDocEncoding.
    """

    if isinstance(value, TextStringObject):
        return bytes(value.get_original_bytes())
    if isinstance(value, ByteStringObject):
        return bytes(value)
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return None


def as_array(value: RawValue) -> Sequence[RawValue] | None:
    if isinstance(value, (list, tuple)):
        return value
    return None

