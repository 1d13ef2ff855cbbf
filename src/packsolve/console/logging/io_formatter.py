from __future__ import annotations

import logging

from typing import TYPE_CHECKING

from packsolve.console.logging.filters import PACKSOLVE_FILTER


if TYPE_CHECKING:
    from logging import LogRecord


class IOFormatter(logging.Formatter):
    _colors = {
        "error": "fg=red",
        "warning": "fg=yellow",
        "debug": "debug",
        "info": "fg=blue",
    }

    def format(self, record: LogRecord) -> str:
        if not record.exc_info:
            level = record.levelname.lower()
            if level in self._colors:
                record.msg = f"<{self._colors[level]}>{record.msg}</>"

        formatted = super().format(record)

        if not PACKSOLVE_FILTER.filter(record):
            # third-party records are prefixed with their logger name
            formatted = "\n".join(
                f"[{record.name}] {line}" for line in formatted.splitlines()
            )

        return formatted
