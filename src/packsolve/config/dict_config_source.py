from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING
from typing import Any

from packsolve.config.config_source import ConfigSource


if TYPE_CHECKING:
    from collections.abc import Iterator


class DictConfigSource(ConfigSource):
    def __init__(self) -> None:
        self._config: dict[str, Any] = {}

    @property
    def name(self) -> str:
        return "<memory>"

    @property
    def config(self) -> dict[str, Any]:
        return self._config

    def load(self) -> dict[str, Any]:
        return self._config

    @contextmanager
    def edit(self) -> Iterator[dict[str, Any]]:
        yield self._config
