from __future__ import annotations

import json

from typing import TYPE_CHECKING
from typing import Any
from typing import ClassVar

from cleo.helpers import argument
from cleo.helpers import option

from packsolve.console.commands.command import Command
from packsolve.console.exceptions import PackSolveConsoleError
from packsolve.utils.helpers import flatten_dict


if TYPE_CHECKING:
    from collections.abc import Callable

    from cleo.io.inputs.argument import Argument
    from cleo.io.inputs.option import Option

    from packsolve.config.config_source import ConfigSource


class ConfigCommand(Command):
    name = "config"
    description = "Manages configuration settings."

    arguments: ClassVar[list[Argument]] = [
        argument("key", "Setting key.", optional=True),
        argument("value", "Setting value.", optional=True, multiple=True),
    ]

    options: ClassVar[list[Option]] = [
        option("list", None, "List configuration settings."),
        option("unset", None, "Unset configuration setting."),
    ]

    help = """\
This command allows you to edit the packsolve config settings.

To pick the highest allowed versions by default:

    <comment>packsolve config resolver.dependency-behavior highest</comment>

To go back to the default:

    <comment>packsolve config --unset resolver.dependency-behavior</comment>"""

    def handle(self) -> int:
        config = self.config

        if self.option("list"):
            self._list_configuration(config.all(), config.raw())

            return 0

        setting_key = self.argument("key")
        if not setting_key:
            return 0

        values: list[str] = self.argument("value")

        if values and self.option("unset"):
            raise PackSolveConsoleError(
                "You can not combine a setting value with --unset"
            )

        unique_config_values = config.unique_config_values()
        if setting_key not in unique_config_values:
            raise PackSolveConsoleError(f"There is no {setting_key} setting.")

        # show the value if no value is provided
        if not values and not self.option("unset"):
            value = config.get(setting_key)
            if not isinstance(value, str):
                value = json.dumps(value)

            self.line(value)

            return 0

        if self.option("unset"):
            config.config_source.remove_property(setting_key)

            return 0

        return self._handle_single_value(
            config.config_source,
            setting_key,
            unique_config_values[setting_key],
            values,
        )

    def _handle_single_value(
        self,
        source: ConfigSource,
        key: str,
        callbacks: tuple[Callable[[str], bool], Callable[[str], Any]],
        values: list[str],
    ) -> int:
        validator, normalizer = callbacks

        if len(values) > 1:
            raise PackSolveConsoleError("You can only pass one value.")

        value = values[0]
        if not validator(value):
            raise PackSolveConsoleError(f'"{value}" is an invalid value for {key}')

        source.add_property(key, normalizer(value))

        return 0

    def _list_configuration(self, config: dict[str, Any], raw: dict[str, Any]) -> None:
        values = flatten_dict(config)
        raw_values = flatten_dict(raw)

        for key, value in sorted(values.items()):
            raw_val = raw_values.get(key)

            if raw_val is not None and raw_val != value:
                message = (
                    f"<c1>{key}</c1> = <c2>{json.dumps(raw_val)}</c2>"
                    f"  # {json.dumps(value)}"
                )
            else:
                message = f"<c1>{key}</c1> = <c2>{json.dumps(value)}</c2>"

            self.line(message)
