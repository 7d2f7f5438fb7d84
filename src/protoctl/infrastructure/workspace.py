"""Temporary build workspace for compiler output.

One workspace root per build-check run, one subdirectory per target
language. The tree is removed on every exit path of the ``with`` block.
"""

from __future__ import annotations

import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from protoctl.errors import WorkspaceError

DEFAULT_PREFIX = "proto-build"


class BuildWorkspace:
    """Handle to a live temporary workspace root."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def language_dir(self, lang: str) -> Path:
        """Create and return the output directory for *lang*."""
        path = self.root / lang
        try:
            path.mkdir()
        except OSError as exc:
            raise WorkspaceError(f"Cannot create {path}: {exc}") from exc
        return path


@contextmanager
def build_workspace(prefix: str = DEFAULT_PREFIX) -> Iterator[BuildWorkspace]:
    """Create a uniquely named temp directory and remove it afterwards."""
    try:
        root = Path(tempfile.mkdtemp(prefix=prefix))
    except OSError as exc:
        raise WorkspaceError(f"Cannot create temporary workspace: {exc}") from exc
    try:
        yield BuildWorkspace(root)
    finally:
        shutil.rmtree(root, ignore_errors=True)
