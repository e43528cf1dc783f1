"""Tests for audio file discovery."""

from pathlib import Path

from radiopress.features.extraction import scan_audio_files


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_bytes(b"\x00")
    return path


def test_finds_matching_extensions_sorted(tmp_path: Path) -> None:
    _ = _touch(tmp_path / "b" / "two.jlres3")
    _ = _touch(tmp_path / "a" / "one.MP3")
    _ = _touch(tmp_path / "zero.mp3")
    _ = _touch(tmp_path / "cover.jpg")

    found = scan_audio_files(tmp_path, [".mp3", ".jlres3"])

    assert [path.relative_to(tmp_path.resolve()).as_posix() for path in found] == [
        "a/one.MP3",
        "b/two.jlres3",
        "zero.mp3",
    ]


def test_skips_hidden_and_excluded_directories(tmp_path: Path) -> None:
    _ = _touch(tmp_path / ".git" / "objects" / "x.mp3")
    _ = _touch(tmp_path / "site" / "copied.mp3")
    kept = _touch(tmp_path / "music" / "kept.mp3")

    found = scan_audio_files(tmp_path, [".mp3"], exclude_dirs=[tmp_path / "site"])

    assert found == [kept.resolve()]


def test_empty_tree(tmp_path: Path) -> None:
    assert scan_audio_files(tmp_path, [".mp3"]) == []
