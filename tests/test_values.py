from __future__ import annotations

from pypdf.generic import (
    ArrayObject,
    BooleanObject,
    ByteStringObject,
    DictionaryObject,
    FloatObject,
    NameObject,
    NullObject,
    NumberObject,
    TextStringObject,
)

from pdfcontentx.values import RawNameObject, as_array, as_name, as_number, as_string


def test_as_number_accepts_integers_and_reals():
    assert as_number(NumberObject(12)) == 12.0
    assert isinstance(as_number(NumberObject(12)), float)
    assert as_number(FloatObject("1.5")) == 1.5
    assert as_number(-3) == -3.0
    assert as_number(0.25) == 0.25


def test_as_number_rejects_other_shapes():
    assert as_number(NameObject("/F1")) is None
    assert as_number(TextStringObject("12")) is None
    assert as_number(BooleanObject(True)) is None
    assert as_number(True) is None
    assert as_number(NullObject()) is None
    assert as_number(ArrayObject([NumberObject(1)])) is None


def test_as_number_rejects_integers_beyond_float_range():
    assert as_number(10**400) is None


def test_as_name_strips_solidus():
    assert as_name(NameObject("/F1")) == b"F1"
    assert as_name(NameObject("/Helvetica-Bold")) == b"Helvetica-Bold"


def test_as_name_rejects_strings():
    assert as_name(TextStringObject("F1")) is None
    assert as_name("/F1") is None
    assert as_name(NumberObject(1)) is None


def test_as_string_returns_original_bytes():
    text = TextStringObject("Hello")
    assert as_string(text) == b"Hello"
    assert as_string(ByteStringObject(b"\xc3\x28")) == b"\xc3\x28"
    assert as_string(b"raw") == b"raw"


def test_as_string_rejects_names_and_numbers():
    assert as_string(NameObject("/F1")) is None
    assert as_string(NumberObject(5)) is None


def test_as_array():
    array = ArrayObject([NumberObject(1), NameObject("/A")])
    assert as_array(array) is array
    assert as_array([]) == []
    assert as_array(DictionaryObject()) is None
    assert as_array(TextStringObject("abc")) is None


def test_as_name_keeps_raw_token_bytes():
    name = RawNameObject.from_token(b"/F#E9")
    assert as_name(name) == b"F\xe9"
    assert name == NameObject("/Fé")


def test_raw_name_matches_pypdf_for_ascii_names():
    name = RawNameObject.from_token(b"/Font#20A")
    assert name == NameObject("/Font A")
    assert as_name(name) == b"Font A"


def test_as_name_hand_built_names_use_utf8():
    assert as_name(NameObject("/Fé")) == b"F\xc3\xa9"
