import dataclasses
import logging
import pytest
from file_library.browser.state import ViewState, filter_records, visible_records
from file_library.browser.format import format_timestamp, human_size, icon_for
from file_library import config


@pytest.fixture
def records(make_record):
    return [
        make_record("Quarterly Report.PDF", size_bytes=2048, modified_ms=5_000),
        make_record("holiday.jpg", size_bytes=500_000, modified_ms=4_000),
        make_record("notes.md", size_bytes=12, modified_ms=3_000),
        make_record("intro.mp4", size_bytes=9_000_000, modified_ms=2_000),
        make_record("Makefile", size_bytes=40, modified_ms=1_000),
    ]


def names(records):
    return [r.name for r in records]


def test_default_state_shows_everything_newest_first(records):
    assert names(visible_records(records, ViewState())) == names(records)


@pytest.mark.parametrize(
    "query,expected",
    [
        ("report", ["Quarterly Report.PDF"]),
        ("pdf", ["Quarterly Report.PDF"]),
        ("  JPG ", ["holiday.jpg"]),
        ("o", ["Quarterly Report.PDF", "holiday.jpg", "notes.md", "intro.mp4"]),
        ("", ["Quarterly Report.PDF", "holiday.jpg", "notes.md", "intro.mp4", "Makefile"]),
        ("zzz", []),
    ],
)
def test_query_matches_name_or_extension(records, query, expected):
    assert names(filter_records(records, ViewState(query=query))) == expected


def test_kind_filter(records):
    state = ViewState(kind="link")
    assert names(filter_records(records, state)) == ["Makefile"]


def test_query_and_kind_combine(records):
    state = ViewState(query="o", kind="text")
    assert names(filter_records(records, state)) == ["notes.md"]


def test_filter_is_idempotent(records):
    state = ViewState(query="o")
    once = filter_records(records, state)
    assert filter_records(once, state) == once


def test_sort_applies_after_filter(records):
    state = ViewState(query="o", sort="size-asc")
    assert names(visible_records(records, state)) == [
        "notes.md", "Quarterly Report.PDF", "holiday.jpg", "intro.mp4"
    ]


def test_default_state():
    assert ViewState() == ViewState(query="", kind="", sort=config.DEFAULT_SORT)


def test_states_are_immutable():
    state = ViewState()
    with pytest.raises(dataclasses.FrozenInstanceError):
        state.query = "x"


def test_unknown_sort_key_is_rejected(records):
    with pytest.raises(ValueError):
        visible_records(records, ViewState(sort="random"))


def test_empty_record_set(records):
    assert visible_records([], ViewState(query="anything")) == []


@pytest.mark.parametrize(
    "size,expected",
    [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.0 KB"),
        (1280, "1.3 KB"),
        (2048, "2.0 KB"),
        (500_000, "488.3 KB"),
        (1024 ** 2, "1.0 MB"),
        (5 * 1024 ** 3, "5.0 GB"),
        (3 * 1024 ** 4, "3.0 TB"),
        (2048 * 1024 ** 4, "2048.0 TB"),
    ],
)
def test_human_size(size, expected):
    assert human_size(size) == expected


def test_icons_cover_every_kind():
    for kind in config.PREVIEW_KINDS:
        assert icon_for(kind) == config.KIND_ICONS[kind]
    assert icon_for("mystery") == config.FALLBACK_ICON


def test_unformattable_timestamp_is_logged(caplog):
    with caplog.at_level(logging.DEBUG):
        assert format_timestamp(10 ** 18) == ""
    assert "Cannot format timestamp" in caplog.text
