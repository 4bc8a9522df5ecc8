from __future__ import annotations

import json
from pathlib import Path

import pytest

import pmstore.backups as backups
from pmstore.errors import DocumentIOError, DocumentParseError
from pmstore.json_store import atomic_write_json, dumps_document, read_json


def test_atomic_write_creates_parents_and_pretty_prints(tmp_path: Path):
    target = tmp_path / "nested" / "dir" / "doc.json"
    atomic_write_json(target, {"b": 1, "a": ["ü", 2]})

    text = target.read_text(encoding="utf-8")
    assert text == '{\n  "a": [\n    "ü",\n    2\n  ],\n  "b": 1\n}\n'
    assert not (target.parent / "doc.json.tmp").exists()
    # Nothing existed before, so nothing to back up.
    assert not (target.parent / "backups").exists()


def test_overwrite_backs_up_previous_bytes(tmp_path: Path):
    target = tmp_path / "tasks.json"
    atomic_write_json(target, {"version": 1, "tasks": [{"id": "t1"}]})
    first_bytes = target.read_bytes()

    atomic_write_json(target, {"version": 1, "tasks": [{"id": "t2"}]})

    entries = list((tmp_path / "backups").iterdir())
    assert len(entries) == 1
    assert entries[0].name.endswith("-tasks.json")
    assert entries[0].read_bytes() == first_bytes
    assert read_json(target) == {"version": 1, "tasks": [{"id": "t2"}]}


def test_explicit_backups_dir(tmp_path: Path):
    target = tmp_path / "docs" / "settings.json"
    atomic_write_json(target, {"v": 1})
    atomic_write_json(target, {"v": 2}, backups_dir=tmp_path / "bk")
    assert [p.name[16:] for p in (tmp_path / "bk").iterdir()] == ["settings.json"]


def test_backup_failure_does_not_block_write(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    target = tmp_path / "settings.json"
    atomic_write_json(target, {"v": 1})

    def _fail_copy(src, dst, *args, **kwargs):
        raise PermissionError("read-only backups")

    monkeypatch.setattr(backups.shutil, "copy2", _fail_copy)
    atomic_write_json(target, {"v": 2})

    assert read_json(target) == {"v": 2}


def test_interrupted_rename_leaves_original_intact(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    target = tmp_path / "tasks.json"
    atomic_write_json(target, {"version": 1, "tasks": [{"id": "keep"}]})
    before = target.read_bytes()

    def _crash(self, other):
        raise OSError("simulated crash before rename")

    monkeypatch.setattr(Path, "replace", _crash)
    with pytest.raises(DocumentIOError):
        atomic_write_json(target, {"version": 1, "tasks": [{"id": "lost"}]})
    monkeypatch.undo()

    assert target.read_bytes() == before
    assert read_json(target) == {"version": 1, "tasks": [{"id": "keep"}]}
    assert not (tmp_path / "tasks.json.tmp").exists()


def test_stale_temp_file_does_not_affect_target(tmp_path: Path):
    target = tmp_path / "tasks.json"
    atomic_write_json(target, {"version": 1, "tasks": []})
    (tmp_path / "tasks.json.tmp").write_text('{"version": 1, "tas', encoding="utf-8")

    assert read_json(target) == {"version": 1, "tasks": []}
    atomic_write_json(target, {"version": 1, "tasks": [{"id": "x"}]})
    assert read_json(target) == {"version": 1, "tasks": [{"id": "x"}]}


def test_unserializable_document_never_touches_disk(tmp_path: Path):
    target = tmp_path / "doc.json"
    atomic_write_json(target, {"ok": True})

    with pytest.raises(DocumentIOError):
        atomic_write_json(target, {"bad": object()})
    with pytest.raises(DocumentIOError):
        atomic_write_json(target, {"nan": float("nan")})

    assert read_json(target) == {"ok": True}
    assert not (tmp_path / "backups").exists()


def test_read_json_errors(tmp_path: Path):
    broken = tmp_path / "broken.json"
    broken.write_text('{"version": 1,', encoding="utf-8")
    with pytest.raises(DocumentParseError):
        read_json(broken)

    empty = tmp_path / "empty.json"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(DocumentParseError):
        read_json(empty)

    binary = tmp_path / "binary.json"
    binary.write_bytes(b"\xff\xfe\x00")
    with pytest.raises(DocumentParseError):
        read_json(binary)

    with pytest.raises(DocumentIOError):
        read_json(tmp_path / "missing.json")


def test_dumps_document_is_stable():
    doc = {"z": 1, "a": {"y": [1, 2], "b": None}}
    assert dumps_document(doc) == dumps_document(json.loads(dumps_document(doc)))
    assert dumps_document(doc).endswith(b"}\n")
