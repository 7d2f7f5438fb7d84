"""Schema file discovery.

Walks a fixed subdirectory of the project root and collects every file
whose suffix matches the schema extension. Contents are never read.
"""

from __future__ import annotations

import os
from pathlib import Path

from protoctl.errors import DiscoveryError

DEFAULT_SCHEMA_DIR = "nexus"
DEFAULT_SUFFIX = ".proto"


class SchemaDiscoverer:
    """Locate schema source files beneath ``root / schema_dir``.

    The root is supplied explicitly so the walk can be pointed at any
    directory tree (tests use ``tmp_path``).
    """

    def __init__(
        self,
        root: Path,
        schema_dir: str = DEFAULT_SCHEMA_DIR,
        suffix: str = DEFAULT_SUFFIX,
    ) -> None:
        self.root = root
        self.schema_dir = schema_dir
        self.suffix = suffix

    @property
    def search_dir(self) -> Path:
        return (self.root / self.schema_dir).absolute()

    def discover(self) -> list[Path]:
        """Return absolute schema file paths in directory-walk order.

        A name matches when it ends with the suffix, so a bare ``.proto``
        dotfile counts as a schema file.

        An empty directory yields ``[]``. A missing directory or an
        unreadable subdirectory raises :class:`DiscoveryError`.
        """
        top = self.search_dir
        if not top.is_dir():
            raise DiscoveryError(top, "not a directory")

        def _raise(exc: OSError) -> None:
            raise DiscoveryError(Path(exc.filename or top), exc.strerror or str(exc)) from exc

        files: list[Path] = []
        for dirpath, _dirnames, filenames in os.walk(top, onerror=_raise):
            base = Path(dirpath)
            files.extend(base / name for name in filenames if name.endswith(self.suffix))
        return files

