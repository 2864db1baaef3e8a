from __future__ import annotations

from pathlib import Path

from componentforge.files import copy, empty_dir, is_empty


def _snapshot(root: Path) -> dict[str, bytes]:
    return {
        path.relative_to(root).as_posix(): path.read_bytes()
        for path in sorted(root.rglob("*"))
        if path.is_file()
    }


def test_copy_reproduces_nested_tree(tmp_path: Path):
    source = tmp_path / "source"
    (source / "nested" / "deep").mkdir(parents=True)
    (source / "empty").mkdir()
    (source / "top.txt").write_text("top", encoding="utf-8")
    (source / "nested" / "deep" / "data.bin").write_bytes(b"\x00\xffbinary")

    destination = tmp_path / "out" / "copy"
    copy(source, destination)

    assert _snapshot(destination) == _snapshot(source)
    assert (destination / "empty").is_dir()


def test_copy_single_file_creates_parents(tmp_path: Path):
    source = tmp_path / "file.txt"
    source.write_text("payload", encoding="utf-8")

    destination = tmp_path / "a" / "b" / "file.txt"
    copy(source, destination)

    assert destination.read_text(encoding="utf-8") == "payload"


def test_empty_dir_keeps_directory(tmp_path: Path):
    target = tmp_path / "target"
    (target / "sub").mkdir(parents=True)
    (target / "sub" / "file.txt").write_text("x", encoding="utf-8")
    (target / "other.txt").write_text("y", encoding="utf-8")

    empty_dir(target)

    assert target.is_dir()
    assert list(target.iterdir()) == []


def test_empty_dir_ignores_missing_directory(tmp_path: Path):
    empty_dir(tmp_path / "missing")
    assert not (tmp_path / "missing").exists()


def test_is_empty(tmp_path: Path):
    target = tmp_path / "target"
    target.mkdir()
    assert is_empty(target)

    (target / ".git").mkdir()
    assert is_empty(target)

    (target / "README.md").write_text("hi", encoding="utf-8")
    assert not is_empty(target)


def test_empty_dir_on_vcs_only_directory(tmp_path: Path):
    target = tmp_path / "target"
    (target / ".git" / "objects").mkdir(parents=True)
    (target / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    assert is_empty(target)

    empty_dir(target)

    assert target.is_dir()
    assert list(target.iterdir()) == []
