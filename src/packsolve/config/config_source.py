from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING
from typing import Any


if TYPE_CHECKING:
    from collections.abc import MutableMapping
    from contextlib import AbstractContextManager


class PropertyNotFoundError(ValueError):
    pass


class ConfigSource(ABC):
    """
    A place settings are read from and written to, addressed with dotted keys
    such as ``resolver.max-steps``.
    """

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def load(self) -> MutableMapping[str, Any]: ...

    @abstractmethod
    def edit(self) -> AbstractContextManager[MutableMapping[str, Any]]: ...

    def new_table(self) -> MutableMapping[str, Any]:
        return {}

    def get_property(self, key: str) -> Any:
        config: Any = self.load()

        for part in key.split("."):
            if not hasattr(config, "keys") or part not in config:
                raise PropertyNotFoundError(f"Key {key} not in config")

            config = config[part]

        return config

    def add_property(self, key: str, value: Any) -> None:
        *parents, last = key.split(".")

        with self.edit() as config:
            for part in parents:
                if part not in config:
                    config[part] = self.new_table()

                config = config[part]

            config[last] = value

    def remove_property(self, key: str) -> None:
        *parents, last = key.split(".")

        with self.edit() as config:
            tables = [config]
            for part in parents:
                if part not in tables[-1]:
                    return

                tables.append(tables[-1][part])

            if last not in tables[-1]:
                return

            del tables[-1][last]

            # Drop the tables left empty by the removal.
            for part, table in zip(reversed(parents), reversed(tables[:-1])):
                if table[part]:
                    break

                del table[part]
