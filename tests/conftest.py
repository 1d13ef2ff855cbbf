from __future__ import annotations

import os

from pathlib import Path
from typing import TYPE_CHECKING
from typing import Any

import pytest

from packsolve.config.config import Config as BaseConfig
from packsolve.config.dict_config_source import DictConfigSource
from tests.helpers import isolated_environment


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Iterator

    from pytest_mock import MockerFixture


class Config(BaseConfig):
    _config_source: DictConfigSource

    def get(self, setting_name: str, default: Any = None) -> Any:
        self.merge(self._config_source.config)

        return super().get(setting_name, default=default)

    def raw(self) -> dict[str, Any]:
        self.merge(self._config_source.config)

        return super().raw()

    def all(self) -> dict[str, Any]:
        self.merge(self._config_source.config)

        return super().all()


@pytest.fixture
def config_source() -> DictConfigSource:
    return DictConfigSource()


@pytest.fixture(autouse=True)
def config(config_source: DictConfigSource, mocker: MockerFixture) -> Config:
    c = Config()
    c.merge(config_source.config)
    c.set_config_source(config_source)

    mocker.patch("packsolve.config.config.Config.create", return_value=c)

    return c


@pytest.fixture()
def environ() -> Iterator[None]:
    with isolated_environment():
        yield


@pytest.fixture(autouse=True)
def isolate_environ() -> Iterator[None]:
    """Ensure the environment is isolated from user configuration."""
    with isolated_environment():
        for var in list(os.environ):
            if var.startswith("PACKSOLVE_"):
                del os.environ[var]

        yield


@pytest.fixture(scope="session")
def fixture_base() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def fixture_dir(fixture_base: Path) -> Callable[[str], Path]:
    def _fixture_dir(name: str) -> Path:
        return fixture_base / name

    return _fixture_dir
