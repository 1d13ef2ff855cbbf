from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING
from typing import Any

from tomlkit import table

from packsolve.config.config_source import ConfigSource


if TYPE_CHECKING:
    from collections.abc import Iterator
    from collections.abc import MutableMapping

    from tomlkit.toml_document import TOMLDocument

    from packsolve.toml.file import TOMLFile


class FileConfigSource(ConfigSource):
    def __init__(self, file: TOMLFile) -> None:
        self._file = file

    @property
    def name(self) -> str:
        return str(self._file.path)

    def load(self) -> MutableMapping[str, Any]:
        if not self._file.exists():
            return {}

        return self._file.read()

    def new_table(self) -> MutableMapping[str, Any]:
        return table()

    @contextmanager
    def edit(self) -> Iterator[TOMLDocument]:
        config = self._file.read_or_create()

        yield config

        self._file.write(config)
