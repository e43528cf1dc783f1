"""
Summary: Exercise the flat record codec shared by publisher and loader.
Why: Escaping and field splitting must agree on both sides of filedata.txt.
"""

from __future__ import annotations

import pytest

from radiopress.features.catalog import Track, format_record, parse_records
from radiopress.features.catalog.domain.record_format import (
    EQUAL_SENTINEL,
    LINE_BREAKS,
    escape_field,
    parse_record,
    unescape_field,
)

COVER = "data:image/jpeg;base64,/9j/4AAQSkZJRg=="


def test_format_record_escapes_title_and_artist() -> None:
    line = format_record("song.mp3", "1+1=2", "A=B", None)
    assert line == f"(song.mp3=1+1{EQUAL_SENTINEL}2=A{EQUAL_SENTINEL}B=none)"


def test_parse_record_restores_equals_signs() -> None:
    track = parse_record("(song.mp3=1+1_EQUAL_2=A_EQUAL_B=none)")
    assert track == Track("song.mp3", "1+1=2", "A=B", None)


def test_image_field_keeps_base64_padding() -> None:
    track = parse_record(f"(song.mp3=Title=Artist={COVER})")
    assert track is not None
    assert track.cover_image == COVER


def test_three_field_record_has_no_image() -> None:
    assert parse_record("(x.mp3=T=A)") == Track("x.mp3", "T", "A", None)


def test_empty_image_field_means_no_image() -> None:
    track = parse_record("(x.mp3=T=A=)")
    assert track is not None
    assert track.cover_image is None


@pytest.mark.parametrize(
    "line",
    [
        "",
        "()",
        "(only=two)",
        "no parentheses=a=b=c",
        "(missing close=a=b",
        "missing open=a=b)",
    ],
)
def test_malformed_lines_are_rejected(line: str) -> None:
    assert parse_record(line) is None


def test_surrounding_whitespace_is_ignored() -> None:
    assert parse_record("  (x.mp3=T=A=none)\r") == Track("x.mp3", "T", "A", None)


def test_escape_field_flattens_line_breaks() -> None:
    assert escape_field("Line\r\nBreak") == "LineBreak"
    assert unescape_field(escape_field("a=b")) == "a=b"


def test_parse_records_skips_bad_lines() -> None:
    text = "\n".join(
        [
            "(a.mp3=A=X=none)",
            "garbage",
            "",
            f"(b.mp3=B=Y={COVER})",
            "(c.mp3=C)",
        ]
    )
    tracks = parse_records(text)
    assert [track.filename for track in tracks] == ["a.mp3", "b.mp3"]
    assert tracks[1].cover_image == COVER


def test_format_then_parse_preserves_track() -> None:
    line = format_record("Track 01.jlres3", "Title = Subtitle", "Band=Name", COVER)
    assert parse_record(line) == Track("Track 01.jlres3", "Title = Subtitle", "Band=Name", COVER)


def test_unicode_line_separator_stays_inside_title() -> None:
    text = "(a.mp3=Intro\u2028Outro=X=none)\r\n(b.mp3=B=Y=none)\n"

    tracks = parse_records(text)

    assert [track.filename for track in tracks] == ["a.mp3", "b.mp3"]
    assert tracks[0].title == "Intro\u2028Outro"


@pytest.mark.parametrize("separator", LINE_BREAKS, ids=repr)
def test_escaped_field_never_splits_a_record(separator: str) -> None:
    line = format_record("a.mp3", f"Intro{separator}Outro", f"X{separator}Y", None)

    assert line.splitlines() == [line]
    assert parse_records(line + "\n") == [Track("a.mp3", "IntroOutro", "XY", None)]
