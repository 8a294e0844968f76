"""Tests for query string serialisation."""

from __future__ import annotations

import pytest

from couch_viewopts import (
    AssignFlags,
    QueryStringBuilder,
    ViewOptionsConfig,
    calc_length,
    cleanup_list,
    create_option,
    make_uri,
    write_query,
)


@pytest.fixture
def records():
    opts = [
        create_option("stale", "false"),
        create_option("startkey_docid", "a space", AssignFlags.PCT_ENCODE),
    ]
    yield opts
    cleanup_list(opts)


# -- Measure then write ------------------------------------------------------


def test_calc_length(records):
    # '?' + "stale=false&" + "startkey_docid=a%20space&" + terminator
    assert calc_length(records) == 1 + (5 + 5 + 2) + (14 + 9 + 2) + 1


def test_calc_length_empty():
    assert calc_length([]) == 2


def test_write_query(records):
    buf = bytearray(calc_length(records))
    written = write_query(records, buf)
    assert bytes(buf[:written]) == b"?stale=false&startkey_docid=a%20space"
    assert buf[written] == 0
    assert written == calc_length(records) - 2


def test_write_query_single_option():
    with create_option("limit", "100") as record:
        buf = bytearray(calc_length([record]))
        written = write_query([record], buf)
        assert bytes(buf[:written]) == b"?limit=100"


def test_write_query_empty():
    buf = bytearray(calc_length([]))
    assert write_query([], buf) == 0
    assert buf[0] == 0


def test_write_query_into_larger_buffer(records):
    buf = bytearray(b"\xff" * 100)
    written = write_query(records, memoryview(buf)[10:])
    assert bytes(buf[10 : 10 + written]) == b"?stale=false&startkey_docid=a%20space"


def test_write_query_refuses_undersized_buffer(records):
    with pytest.raises(ValueError):
        write_query(records, bytearray(calc_length(records) - 1))


def test_order_and_duplicates_are_preserved():
    opts = [
        create_option("limit", "1"),
        create_option("skip", "2"),
        create_option("limit", "3"),
    ]
    buf = bytearray(calc_length(opts))
    written = write_query(opts, buf)
    assert bytes(buf[:written]) == b"?limit=1&skip=2&limit=3"
    cleanup_list(opts)


# -- URI composition ---------------------------------------------------------


def test_make_uri(records):
    uri = make_uri("ddoc", "vdoc", records)
    assert uri == b"_design/ddoc/_view/vdoc?stale=false&startkey_docid=a%20space"


def test_make_uri_without_options():
    assert make_uri("ddoc", "vdoc", []) == b"_design/ddoc/_view/vdoc"


def test_make_uri_explicit_lengths(records):
    uri = make_uri(b"ddocXX", b"vdocYY", records, design_length=4, view_length=4)
    assert uri.startswith(b"_design/ddoc/_view/vdoc?")


def test_make_uri_stops_at_terminator():
    with create_option("limit", 5) as record:
        uri = make_uri(b"ddoc\x00junk", "vdoc\x00", [record])
    assert uri == b"_design/ddoc/_view/vdoc?limit=5"


def test_make_uri_custom_segments(records):
    config = ViewOptionsConfig(design_prefix="_design", view_segment="_spatial")
    uri = make_uri("geo", "points", records[:1], config=config)
    assert uri == b"_design/geo/_spatial/points?stale=false"


# -- Growing buffer builder --------------------------------------------------


def test_builder_matches_two_pass_writer(records):
    buf = bytearray(calc_length(records))
    written = write_query(records, buf)
    assert QueryStringBuilder().build(records) == bytes(buf[:written])


def test_builder_without_prefix(records):
    assert QueryStringBuilder().build(records, prefix=False) == (
        b"stale=false&startkey_docid=a%20space"
    )


def test_builder_empty():
    assert QueryStringBuilder().build([]) == b""


def test_builder_uri(records):
    assert QueryStringBuilder().build_uri("ddoc", "vdoc", records) == make_uri(
        "ddoc", "vdoc", records
    )
