"""Shared pytest fixtures and test helpers for protoctl tests."""

from __future__ import annotations

import logging
import tempfile
from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from protoctl.config.settings import ProtoSettings


class FakeRunner:
    """Recording stand-in for :class:`~protoctl.infrastructure.process.SubprocessRunner`.

    Return codes are consumed in call order; once exhausted every call
    succeeds. ``on_run`` sees each invocation as it happens.
    """

    def __init__(
        self,
        returncodes: Sequence[int] = (),
        on_run: Callable[[str, list[str]], None] | None = None,
    ) -> None:
        self.calls: list[tuple[str, list[str]]] = []
        self.returncodes = list(returncodes)
        self._on_run = on_run

    def run(self, command: str, args: Sequence[str]) -> int:
        self.calls.append((command, list(args)))
        if self._on_run is not None:
            self._on_run(command, list(args))
        if self.returncodes:
            return self.returncodes.pop(0)
        return 0

    @property
    def commands(self) -> list[str]:
        return [command for command, _ in self.calls]


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo any logging configuration a test (or a CLI run) installed."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    proto = logging.getLogger("protoctl")
    proto_level = proto.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    proto.setLevel(proto_level)
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project tree with two schema files and one unrelated file.

    Layout::

        project/
          api-linter.yaml
          nexus/
            a.proto
            README.md
            v1/b.proto
    """
    root = tmp_path / "project"
    (root / "nexus" / "v1").mkdir(parents=True)
    (root / "api-linter.yaml").write_text("---\n", encoding="utf-8")
    (root / "nexus" / "a.proto").write_text('syntax = "proto3";\n', encoding="utf-8")
    (root / "nexus" / "README.md").write_text("# schemas\n", encoding="utf-8")
    (root / "nexus" / "v1" / "b.proto").write_text('syntax = "proto3";\n', encoding="utf-8")
    return root


@pytest.fixture
def settings(project_root: Path) -> ProtoSettings:
    return ProtoSettings.from_cli(project_root=project_root)


@pytest.fixture
def log() -> structlog.stdlib.BoundLogger:
    return structlog.stdlib.get_logger("protoctl.test")


@pytest.fixture
def temp_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the system temp root to an empty directory we can inspect."""
    root = tmp_path / "systmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def fake_runner(monkeypatch: pytest.MonkeyPatch) -> FakeRunner:
    """FakeRunner installed as the CLI's process runner."""
    runner = FakeRunner()
    monkeypatch.setattr(
        "protoctl.commands._context.SubprocessRunner", lambda **_kwargs: runner
    )
    return runner


@pytest.fixture
def make_runner() -> type[FakeRunner]:
    """The FakeRunner class, for tests that build their own."""
    return FakeRunner
