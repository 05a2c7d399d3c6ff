"""Tests for moving files into category directories."""

from pathlib import Path
from types import MappingProxyType
import pytest

from filesort.config import load_config
from filesort.extensions import ExtensionRecord
from filesort.mover import FileSorter, MoveResult, move_file
from filesort.resolver import NestingLevelError


@pytest.fixture
def source_dir(tmp_path):
    """Create a source directory with one file per category."""
    source = tmp_path / "source"
    source.mkdir()
    for name in [
        "photo.png",
        "clip.mp4",
        "song.mp3",
        "report.pdf",
        "backup.zip",
        "script.py",
        "notes.unknownext",
    ]:
        (source / name).write_text(name)
    return source


@pytest.fixture
def config():
    """Create test configuration."""
    return load_config()


def test_move_file(tmp_path):
    """Test moving a single file into a new directory."""
    original = tmp_path / "file.txt"
    original.write_text("content")
    target_dir = tmp_path / "deep" / "nested"

    result = move_file(original, target_dir)

    assert result == target_dir / "file.txt"
    assert result.read_text() == "content"
    assert not original.exists()


def test_move_file_refuses_to_overwrite(tmp_path):
    """Test that an existing destination file is never replaced."""
    original = tmp_path / "file.txt"
    original.write_text("new")
    target_dir = tmp_path / "out"
    target_dir.mkdir()
    (target_dir / "file.txt").write_text("existing")

    with pytest.raises(FileExistsError):
        move_file(original, target_dir)

    assert original.read_text() == "new"
    assert (target_dir / "file.txt").read_text() == "existing"


def test_move_file_permission_error(tmp_path, monkeypatch):
    """Test that rename failures propagate."""
    original = tmp_path / "file.txt"
    original.touch()

    def mock_rename(self, target):
        raise PermissionError("No permission")

    monkeypatch.setattr(Path, "rename", mock_rename)

    with pytest.raises(PermissionError):
        move_file(original, tmp_path / "out")
    assert original.exists()


def test_sort_one_file_per_category(tmp_path, source_dir, config):
    """Test sorting at nesting level 2 without alternate naming."""
    output = tmp_path / "output"

    results = FileSorter(config).sort(source_dir, output, 2, False)

    assert len(results) == 7
    assert sorted(p.name for p in output.iterdir()) == [
        "archive", "audio", "code", "document", "image", "other", "video",
    ]
    for category in output.iterdir():
        moved = [p for p in category.rglob("*") if p.is_file()]
        assert len(moved) == 1
    assert (output / "image" / "png" / "photo.png").exists()
    assert (output / "video" / "mp4" / "clip.mp4").exists()
    assert (output / "code" / "python" / "script.py").exists()
    assert (output / "other" / "notes.unknownext").exists()
    assert list(source_dir.iterdir()) == []


def test_sort_nesting_level_one(tmp_path, source_dir, config):
    """Test sorting into bare category directories."""
    output = tmp_path / "output"

    FileSorter(config).sort(source_dir, output, 1, True)

    assert (output / "image" / "photo.png").exists()
    assert (output / "code" / "script.py").exists()


def test_sort_alternate_names(tmp_path, config):
    """Test alternate naming at nesting levels 2 and 3."""
    table = MappingProxyType({"gif": ExtensionRecord("image", "animated", None)})
    source = tmp_path / "source"
    source.mkdir()
    (source / "a.gif").touch()
    (source / "b.GIF").touch()

    sorter = FileSorter(config, table=table)
    results = sorter.sort(source, tmp_path / "out", 3, True)

    assert results == [
        MoveResult(source / "a.gif", tmp_path / "out" / "image" / "animated" / "gif" / "a.gif"),
        MoveResult(source / "b.GIF", tmp_path / "out" / "image" / "animated" / "gif" / "b.GIF"),
    ]


def test_sort_uses_config_defaults(tmp_path, source_dir, config):
    """Test nesting level and alternate naming come from config when omitted."""
    config["nesting_level"] = 1
    output = tmp_path / "output"

    FileSorter(config).sort(source_dir, output)

    assert (output / "audio" / "song.mp3").exists()


def test_sort_uses_config_extension_overrides(tmp_path, source_dir, config):
    """Test extension overrides from config are applied."""
    config["extensions"] = {"unknownext": {"category": "notes"}}

    FileSorter(config).sort(source_dir, tmp_path / "output", 1)

    assert (tmp_path / "output" / "notes" / "notes.unknownext").exists()


@pytest.mark.parametrize("nesting_level", [0, 4])
def test_sort_invalid_nesting_level_touches_nothing(tmp_path, source_dir, config, nesting_level):
    """Test an invalid nesting level fails before any file is moved."""
    with pytest.raises(NestingLevelError):
        FileSorter(config).sort(source_dir, tmp_path / "output", nesting_level)

    assert len(list(source_dir.iterdir())) == 7
    assert not (tmp_path / "output").exists()


def test_sort_twice_is_a_noop(tmp_path, source_dir, config):
    """Test sorting a directory into itself twice moves nothing the second time."""
    sorter = FileSorter(config)
    first = sorter.sort(source_dir, source_dir, 2, False)
    second = sorter.sort(source_dir, source_dir, 2, False)

    assert len(first) == 7
    assert second == []
    assert (source_dir / "image" / "png" / "photo.png").exists()


def test_sort_collision_aborts(tmp_path, source_dir, config):
    """Test a destination collision stops the run without overwriting."""
    existing = tmp_path / "output" / "audio" / "mp3" / "song.mp3"
    existing.parent.mkdir(parents=True)
    existing.write_text("existing")

    with pytest.raises(FileExistsError):
        FileSorter(config).sort(source_dir, tmp_path / "output", 2, False)

    assert existing.read_text() == "existing"
    assert (source_dir / "song.mp3").exists()


def test_sort_verbose_prints_moves(tmp_path, source_dir, config, capsys):
    """Test verbose mode prints every move."""
    config["verbose"] = True

    FileSorter(config).sort(source_dir, tmp_path / "output", 1)

    out = capsys.readouterr().out
    assert "photo.png moved to" in out
    assert len(out.strip().splitlines()) == 7


def test_sort_writes_move_log(tmp_path, source_dir, config):
    """Test log mode appends one line per move to the input directory's log."""
    config["log"] = True
    output = tmp_path / "output"

    FileSorter(config).sort(source_dir, output, 1)

    log_file = source_dir / "sorter-logs" / "sorter.log"
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 7
    assert f"{source_dir / 'photo.png'} Moved to {output / 'image' / 'photo.png'}" in lines


def test_custom_sort(tmp_path, config):
    """Test moving files with one literal extension into a flat directory."""
    source = tmp_path / "source"
    source.mkdir()
    (source / "a.iso").touch()
    (source / "b.iso").touch()
    (source / "c.ISO").touch()
    (source / "d.txt").touch()
    output = tmp_path / "images"

    results = FileSorter(config).custom_sort(source, output, ".iso")

    assert [r.destination for r in results] == [output / "a.iso", output / "b.iso"]
    assert sorted(p.name for p in source.iterdir()) == ["c.ISO", "d.txt"]


def test_custom_sort_no_matches(tmp_path, config):
    """Test custom sort without matching files creates nothing."""
    source = tmp_path / "source"
    source.mkdir()
    (source / "d.txt").touch()

    results = FileSorter(config).custom_sort(source, tmp_path / "out", "iso")

    assert results == []
    assert not (tmp_path / "out").exists()


def test_custom_sort_empty_extension(tmp_path, config):
    """Test an empty extension is rejected."""
    with pytest.raises(ValueError):
        FileSorter(config).custom_sort(tmp_path, tmp_path / "out", ".")
