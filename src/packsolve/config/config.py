from __future__ import annotations

import logging
import os

from copy import deepcopy
from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar

from packsolve.config.dict_config_source import DictConfigSource
from packsolve.config.file_config_source import FileConfigSource
from packsolve.locations import CONFIG_DIR
from packsolve.resolver.behavior import DependencyBehavior
from packsolve.toml import TOMLFile
from packsolve.utils.helpers import merge_dicts


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Mapping

    from packsolve.config.config_source import ConfigSource


def int_validator(val: str) -> bool:
    try:
        return int(val) > 0
    except ValueError:
        return False


def int_normalizer(val: str) -> int:
    return int(val)


def behavior_validator(val: str) -> bool:
    try:
        DependencyBehavior.create(val)
    except ValueError:
        return False

    return True


def behavior_normalizer(val: str) -> str:
    return DependencyBehavior.create(val).value


logger = logging.getLogger(__name__)

_default_config: Config | None = None


class Config:
    default_config: ClassVar[dict[str, Any]] = {
        "resolver": {
            "dependency-behavior": DependencyBehavior.LOWEST.value,
            "max-steps": None,
        },
    }

    def __init__(self, use_environment: bool = True) -> None:
        self._config = deepcopy(self.default_config)
        self._use_environment = use_environment
        self._config_source: ConfigSource = DictConfigSource()

    @property
    def config(self) -> dict[str, Any]:
        return self._config

    @property
    def config_source(self) -> ConfigSource:
        return self._config_source

    def set_config_source(self, config_source: ConfigSource) -> Config:
        self._config_source = config_source

        return self

    def merge(self, config: Mapping[str, Any]) -> None:
        merge_dicts(self._config, config)

    def all(self) -> dict[str, Any]:
        def _all(config: dict[str, Any], parent_key: str = "") -> dict[str, Any]:
            all_ = {}

            for key in config:
                value = self.get(parent_key + key)
                if isinstance(value, dict):
                    all_[key] = _all(config[key], parent_key=f"{parent_key}{key}.")
                    continue

                all_[key] = value

            return all_

        return _all(self.config)

    def raw(self) -> dict[str, Any]:
        return self._config

    @property
    def dependency_behavior(self) -> DependencyBehavior:
        return DependencyBehavior.create(self.get("resolver.dependency-behavior"))

    @property
    def max_steps(self) -> int | None:
        value = self.get("resolver.max-steps")
        if value is None:
            return None

        return int(value)

    def get(self, setting_name: str, default: Any = None) -> Any:
        """
        Retrieve a setting value.
        """
        keys = setting_name.split(".")

        # Looking in the environment if the setting
        # is set via a PACKSOLVE_* environment variable
        if self._use_environment:
            env = "PACKSOLVE_" + "_".join(k.upper().replace("-", "_") for k in keys)
            env_value = os.getenv(env)
            if env_value is not None:
                return self._get_normalizer(setting_name)(env_value)

        value: Any = self._config
        for key in keys:
            if not isinstance(value, dict) or key not in value:
                return default

            value = value[key]

        return value

    @staticmethod
    def _get_normalizer(name: str) -> Callable[[str], Any]:
        if name == "resolver.max-steps":
            return int_normalizer

        if name == "resolver.dependency-behavior":
            return behavior_normalizer

        return lambda val: val

    @staticmethod
    def _get_validator(name: str) -> Callable[[str], bool] | None:
        if name == "resolver.max-steps":
            return int_validator

        if name == "resolver.dependency-behavior":
            return behavior_validator

        return None

    @classmethod
    def unique_config_values(
        cls,
    ) -> dict[str, tuple[Callable[[str], bool], Callable[[str], Any]]]:
        """
        The settings that can be changed, with how to validate and normalize
        a value given as text.
        """
        values = {}
        for section, settings in cls.default_config.items():
            for name in settings:
                key = f"{section}.{name}"
                validator = cls._get_validator(key)
                if validator is not None:
                    values[key] = (validator, cls._get_normalizer(key))

        return values

    @classmethod
    def create(cls, reload: bool = False) -> Config:
        global _default_config

        if _default_config is None or reload:
            _default_config = cls()

            # Load global config
            config_file = TOMLFile(CONFIG_DIR / "config.toml")
            if config_file.exists():
                logger.debug("Loading configuration file %s", config_file.path)
                _default_config.merge(config_file.read())

            _default_config.set_config_source(FileConfigSource(config_file))

        return _default_config
