"""Tests for the temporary build workspace."""

from __future__ import annotations

from pathlib import Path

import pytest

from protoctl.errors import WorkspaceError
from protoctl.infrastructure.workspace import build_workspace


class TestBuildWorkspace:
    def test_created_under_temp_root(self, temp_root: Path) -> None:
        with build_workspace() as ws:
            assert ws.root.is_dir()
            assert ws.root.parent == temp_root
            assert ws.root.name.startswith("proto-build")

    def test_custom_prefix(self, temp_root: Path) -> None:
        with build_workspace("schema-check") as ws:
            assert ws.root.name.startswith("schema-check")

    def test_removed_after_success(self, temp_root: Path) -> None:
        with build_workspace() as ws:
            (ws.language_dir("go") / "out.pb.go").write_text("package x\n", encoding="utf-8")
            root = ws.root
        assert not root.exists()
        assert list(temp_root.iterdir()) == []

    def test_removed_after_exception(self, temp_root: Path) -> None:
        with pytest.raises(RuntimeError), build_workspace() as ws:
            ws.language_dir("java")
            root = ws.root
            raise RuntimeError("boom")
        assert not root.exists()
        assert list(temp_root.iterdir()) == []

    def test_removed_after_interrupt(self, temp_root: Path) -> None:
        with pytest.raises(KeyboardInterrupt), build_workspace() as ws:
            raise KeyboardInterrupt
        assert not ws.root.exists()

    def test_language_dir(self, temp_root: Path) -> None:
        with build_workspace() as ws:
            go = ws.language_dir("go")
            java = ws.language_dir("java")
            assert go == ws.root / "go"
            assert go.is_dir()
            assert java.is_dir()

    def test_duplicate_language_dir_raises(self, temp_root: Path) -> None:
        with build_workspace() as ws:
            ws.language_dir("go")
            with pytest.raises(WorkspaceError):
                ws.language_dir("go")

    def test_unwritable_temp_root_raises(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        import tempfile

        monkeypatch.setattr(tempfile, "tempdir", str(tmp_path / "does-not-exist"))
        with pytest.raises(WorkspaceError), build_workspace():
            pass
