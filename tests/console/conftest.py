from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cleo.testers.application_tester import ApplicationTester
from cleo.testers.command_tester import CommandTester

from packsolve.console.application import Application


if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def app() -> Application:
    return Application()


@pytest.fixture
def app_tester(app: Application) -> ApplicationTester:
    return ApplicationTester(app)


@pytest.fixture
def command_tester_factory(app: Application) -> Callable[[str], CommandTester]:
    def _tester(command: str) -> CommandTester:
        command_obj = app.find(command)
        tester = CommandTester(command_obj)

        # Setting the formatter from the application
        app_io = app.create_io()
        formatter = app_io.output.formatter
        tester.io.output.set_formatter(formatter)
        tester.io.error_output.set_formatter(formatter)

        return tester

    return _tester
