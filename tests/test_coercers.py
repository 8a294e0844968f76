"""Tests for value coercion, per option kind."""

from __future__ import annotations

import pytest

from couch_viewopts import (
    DEFAULT_REGISTRY,
    AssignFlags,
    InvalidChoiceError,
    MalformedNumberError,
    OptionKind,
    OptionRecord,
    ValueTypeError,
    assign,
    build_default_coercers,
    create_option,
)

BOOL_OPTIONS = DEFAULT_REGISTRY.by_kind(OptionKind.BOOL)
NUMBER_OPTIONS = DEFAULT_REGISTRY.by_kind(OptionKind.NUMBER)
STRING_OPTIONS = DEFAULT_REGISTRY.by_kind(
    OptionKind.STRING, OptionKind.JSON_VALUE, OptionKind.JSON_ARRAY
)


def _ids(entries):
    return [e.name for e in entries]


def _kv(name, value, flags=AssignFlags.NONE) -> bytes:
    with create_option(name, value, flags) as record:
        return record.to_kv()


# -- Boolean -----------------------------------------------------------------


@pytest.mark.parametrize("entry", BOOL_OPTIONS, ids=_ids(BOOL_OPTIONS))
def test_boolean_options(entry):
    key = entry.name.encode()
    assert _kv(entry.name, 1) == key + b"=true"
    assert _kv(entry.name, 0) == key + b"=false"
    assert _kv(entry.name, 42) == key + b"=true"
    assert _kv(entry.ident, 1) == key + b"=true"
    for text in ("true", "TRUE", "True"):
        assert _kv(entry.name, text) == key + b"=true"
    for text in ("false", "FALSE", "fAlSe"):
        assert _kv(entry.ident, text) == key + b"=false"


@pytest.mark.parametrize("value", ["yes", "1", "t", "truex", "f"])
def test_boolean_rejects_other_strings(value: str):
    with pytest.raises(InvalidChoiceError) as exc_info:
        create_option("descending", value)
    assert exc_info.value.reason == "String must be either 'true' or 'false'"


def test_boolean_value_is_constant_storage():
    with create_option("reduce", "TRUE") as record:
        assert record.value_storage.owned is False
        assert record.flags & AssignFlags.VALUE_CONSTANT


def test_python_bool_is_numeric():
    assert _kv("descending", True) == b"descending=true"
    assert _kv("descending", False) == b"descending=false"


# -- Number ------------------------------------------------------------------


@pytest.mark.parametrize("entry", NUMBER_OPTIONS, ids=_ids(NUMBER_OPTIONS))
def test_numeric_options(entry):
    key = entry.name.encode()
    for number in (0, 1, 20, -5, 2**31 - 1, -(2**31)):
        expected = key + b"=" + str(number).encode()
        assert _kv(entry.name, number) == expected
        assert _kv(entry.name, str(number)) == expected
        assert _kv(entry.ident, number) == expected
        assert _kv(entry.ident, str(number)) == expected


@pytest.mark.parametrize("value", ["abc", "1a", "1-2", "+1", "1.5", " 1", "-"])
def test_numeric_rejects_malformed_strings(value: str):
    with pytest.raises(MalformedNumberError):
        create_option("limit", value)


def test_numeric_reasons():
    coercers = build_default_coercers()
    with pytest.raises(MalformedNumberError) as empty:
        coercers.coerce(OptionKind.NUMBER, b"", AssignFlags.NONE)
    with pytest.raises(MalformedNumberError) as sign:
        coercers.coerce(OptionKind.NUMBER, b"x1", AssignFlags.NONE)
    with pytest.raises(MalformedNumberError) as digits:
        coercers.coerce(OptionKind.NUMBER, b"-1x", AssignFlags.NONE)
    assert empty.value.reason == "Received an empty string"
    assert sign.value.reason == "String must consist entirely of a signed number"
    assert digits.value.reason == "String must consist entirely of digits"


def test_numeric_out_of_int32_range():
    with pytest.raises(MalformedNumberError):
        create_option("skip", 2**31)


def test_numeric_formatted_value_is_owned():
    with create_option("limit", 10) as record:
        assert record.value_storage.owned is True
        assert record.value == b"10"


def test_numeric_flag_requires_int():
    with pytest.raises(ValueTypeError):
        create_option("limit", "10", AssignFlags.VALUE_NUMERIC)


# -- String ------------------------------------------------------------------


@pytest.mark.parametrize("entry", STRING_OPTIONS, ids=_ids(STRING_OPTIONS))
def test_string_options_round_trip(entry):
    key = entry.name.encode()
    for value in (b"plain", b'["a", 1]', b"a space", b"\xff\x00\x01"):
        assert _kv(entry.name, value) == key + b"=" + value
        assert _kv(entry.ident, value) == key + b"=" + value


@pytest.mark.parametrize("entry", STRING_OPTIONS, ids=_ids(STRING_OPTIONS))
def test_string_options_reject_numbers(entry):
    with pytest.raises(ValueTypeError) as exc_info:
        create_option(entry.name, 10)
    assert exc_info.value.reason == "Option requires a string value"


def test_string_percent_encoding():
    assert (
        _kv("startkey_docid", "a space", AssignFlags.PCT_ENCODE)
        == b"startkey_docid=a%20space"
    )
    assert _kv("key", '"k"', AssignFlags.PCT_ENCODE) == b"key=%22k%22"


def test_percent_encoding_reuses_unchanged_value():
    value = bytearray(b"doc-1")
    flags = AssignFlags.PCT_ENCODE | AssignFlags.VALUE_CONSTANT
    with create_option("endkey_docid", value, flags) as record:
        assert record.value_storage.owned is False
        value[0:3] = b"DOC"
        assert record.value == b"DOC-1"


def test_percent_encoded_value_is_owned():
    flags = AssignFlags.PCT_ENCODE | AssignFlags.VALUE_CONSTANT
    with create_option("endkey_docid", b"a b", flags) as record:
        assert record.value_storage.owned is True
        assert not record.flags & AssignFlags.VALUE_CONSTANT


def test_string_value_copied_by_default():
    value = bytearray(b"doc")
    with create_option("startkey_docid", value) as record:
        value[0:1] = b"X"
        assert record.value == b"doc"
        assert record.value_storage.owned is True


# -- Stale -------------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1, b"ok"),
        (True, b"ok"),
        (0, b"false"),
        ("true", b"ok"),
        ("false", b"false"),
        ("FALSE", b"false"),
        ("update_after", b"update_after"),
        ("UPDATE_AFTER", b"update_after"),
        ("ok", b"ok"),
        ("OK", b"ok"),
    ],
)
def test_stale_values(value, expected: bytes):
    assert _kv("stale", value) == b"stale=" + expected


@pytest.mark.parametrize("value", ["update", "okay", "never", "after"])
def test_stale_rejects_others(value: str):
    with pytest.raises(InvalidChoiceError) as exc_info:
        create_option("stale", value)
    assert exc_info.value.choices == ("false", "ok", "update_after")


# -- On error ----------------------------------------------------------------


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("stop", b"stop"),
        ("STOP", b"stop"),
        ("continue", b"continue"),
        ("Continue", b"continue"),
    ],
)
def test_on_error_values(value: str, expected: bytes):
    assert _kv("on_error", value) == b"on_error=" + expected


@pytest.mark.parametrize("value", ["halt", "cont", "stopp", "true", 1])
def test_on_error_rejects_others(value):
    with pytest.raises(InvalidChoiceError) as exc_info:
        create_option("on_error", value)
    assert exc_info.value.reason == "on_error must be one of 'continue' or 'stop'"


# -- Registry dispatch -------------------------------------------------------


def test_coercer_registry_unknown_kind():
    coercers = build_default_coercers()
    assert coercers.has(OptionKind.JSON_ARRAY)
    with pytest.raises(ValueError):
        coercers.coerce("nope", b"x", AssignFlags.NONE)  # type: ignore[arg-type]


def test_failed_coercion_leaves_record_empty():
    record = OptionRecord()
    with pytest.raises(InvalidChoiceError):
        assign(record, "stale", "sometimes")
    assert not record.is_assigned
    assert record.name_storage is None
    record.cleanup()
    record.cleanup()
