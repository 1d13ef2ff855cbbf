from __future__ import annotations

from abc import ABC
from abc import abstractmethod
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from packsolve.semver.version import Version


class VersionConstraint(ABC):
    @abstractmethod
    def is_empty(self) -> bool: ...

    @abstractmethod
    def is_any(self) -> bool: ...

    @abstractmethod
    def allows(self, version: Version) -> bool: ...
