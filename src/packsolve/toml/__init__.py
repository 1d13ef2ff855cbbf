from __future__ import annotations

from packsolve.toml.exceptions import TOMLError
from packsolve.toml.file import TOMLFile


__all__ = ["TOMLError", "TOMLFile"]
