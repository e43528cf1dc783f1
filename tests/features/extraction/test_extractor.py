"""Tests for turning probe results into catalog records."""

from __future__ import annotations

import base64
from pathlib import Path

import pytest

from radiopress.features.extraction import (
    MetadataExtractor,
    ProbeError,
    ProbeResult,
    UnencodableFilenameError,
)
from radiopress.features.extraction.domain.probe_result import sniff_image_mime
from radiopress.features.extraction.usecases import validate_record_filename

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 8


class FakeProbe:
    def __init__(self, result: ProbeResult | None = None, error: Exception | None = None) -> None:
        self.result = result or ProbeResult()
        self.error = error
        self.calls: list[Path] = []

    def probe(self, path: Path) -> ProbeResult:
        self.calls.append(path)
        if self.error is not None:
            raise self.error
        return self.result


def test_tags_and_cover_become_record() -> None:
    probe = FakeProbe(ProbeResult(title="A=B", artist="Band", cover=PNG, cover_mime="image/png"))

    track = MetadataExtractor(probe).extract(Path("/music/song.mp3"))

    encoded = base64.b64encode(PNG).decode("ascii")
    assert track.filename == "song.mp3"
    assert track.cover_image == f"data:image/png;base64,{encoded}"
    assert track.to_record() == f"(song.mp3=A_EQUAL_B=Band=data:image/png;base64,{encoded})"


def test_missing_tags_fall_back_to_stem_and_unknown_artist() -> None:
    track = MetadataExtractor(FakeProbe(), "Nobody").extract(Path("/music/Track 07.jlres3"))

    assert track.title == "Track 07"
    assert track.artist == "Nobody"
    assert track.cover_image is None
    assert track.to_record() == "(Track 07.jlres3=Track 07=Nobody=none)"


def test_blank_and_multiline_tags() -> None:
    probe = FakeProbe(ProbeResult(title="   ", artist="First line\nsecond"))

    track = MetadataExtractor(probe).extract(Path("x.mp3"))

    assert track.title == "x"
    assert track.artist == "First line"


def test_default_unknown_artist() -> None:
    assert MetadataExtractor(FakeProbe()).extract(Path("x.mp3")).artist == "Unknown Artist"


@pytest.mark.parametrize("name", ["a=b.mp3", "close).mp3", " lead.mp3", "trail.mp3 "])
def test_unencodable_names_are_rejected_before_probing(name: str) -> None:
    probe = FakeProbe()

    with pytest.raises(UnencodableFilenameError):
        _ = MetadataExtractor(probe).extract(Path("/music") / name)

    assert probe.calls == []


def test_unencodable_name_is_a_probe_error() -> None:
    with pytest.raises(ProbeError):
        validate_record_filename("bad=name.mp3")
    validate_record_filename("fine [live].mp3")


def test_probe_errors_propagate() -> None:
    with pytest.raises(ProbeError, match="broken"):
        _ = MetadataExtractor(FakeProbe(error=ProbeError("broken"))).extract(Path("x.mp3"))


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (PNG, "image/png"),
        (b"\xff\xd8\xff\xe0rest", "image/jpeg"),
        (b"GIF89a", "image/gif"),
        (b"RIFF\x00\x00\x00\x00WEBPVP8 ", "image/webp"),
        (b"????", "image/jpeg"),
    ],
)
def test_sniff_image_mime(data: bytes, expected: str) -> None:
    assert sniff_image_mime(data) == expected
