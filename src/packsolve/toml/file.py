from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from tomlkit.exceptions import TOMLKitError

from packsolve.toml.exceptions import TOMLError


if TYPE_CHECKING:
    from pathlib import Path

    from tomlkit.toml_document import TOMLDocument


class TOMLFile:
    """
    A TOML file on disk.

    Reading and writing go through tomlkit so comments and layout of existing
    files survive edits. Files created by ``write`` are only readable and
    writable by their owner.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def read(self) -> TOMLDocument:
        try:
            content = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise TOMLError(f"TOML file {self} does not exist.")

        try:
            return tomlkit.parse(content)
        except (ValueError, TOMLKitError) as e:
            raise TOMLError(f"Invalid TOML file {self}: {e}")

    def read_or_create(self) -> TOMLDocument:
        if not self.exists():
            return tomlkit.document()

        return self.read()

    def write(self, data: TOMLDocument) -> None:
        if not self.exists():
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.touch(mode=0o600)

        self._path.write_text(tomlkit.dumps(data), encoding="utf-8")

    def __str__(self) -> str:
        return self._path.as_posix()
