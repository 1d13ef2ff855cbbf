from __future__ import annotations

from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar

from cleo.commands.command import Command as BaseCommand
from cleo.exceptions import CleoValueError


if TYPE_CHECKING:
    from packsolve.config.config import Config


class Command(BaseCommand):
    loggers: ClassVar[list[str]] = []

    _config: Config | None = None

    @property
    def config(self) -> Config:
        if self._config is None:
            from packsolve.config.config import Config

            self._config = Config.create()

        return self._config

    def option(self, name: str, default: Any = None) -> Any:
        try:
            return super().option(name)
        except CleoValueError:
            return default
