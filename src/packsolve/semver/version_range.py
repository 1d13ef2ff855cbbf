from __future__ import annotations

from typing import TYPE_CHECKING

from packsolve.semver.version_constraint import VersionConstraint


if TYPE_CHECKING:
    from packsolve.semver.version import Version


class VersionRange(VersionConstraint):
    """
    An interval of versions. A missing bound is unbounded on that side.
    """

    def __init__(
        self,
        min: Version | None = None,
        max: Version | None = None,
        include_min: bool = False,
        include_max: bool = False,
    ) -> None:
        self._min = min
        self._max = max
        self._include_min = include_min if min is not None else False
        self._include_max = include_max if max is not None else False

    @property
    def min(self) -> Version | None:
        return self._min

    @property
    def max(self) -> Version | None:
        return self._max

    @property
    def include_min(self) -> bool:
        return self._include_min

    @property
    def include_max(self) -> bool:
        return self._include_max

    def is_empty(self) -> bool:
        return False

    def is_any(self) -> bool:
        return self._min is None and self._max is None

    def is_exact(self) -> bool:
        return (
            self._min is not None
            and self._min == self._max
            and self._include_min
            and self._include_max
        )

    def allows(self, version: Version) -> bool:
        if self._min is not None:
            if version < self._min:
                return False

            if not self._include_min and version == self._min:
                return False

        if self._max is not None:
            if version > self._max:
                return False

            if not self._include_max and version == self._max:
                return False

        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionRange):
            return False

        return (
            self._min == other.min
            and self._max == other.max
            and self._include_min == other.include_min
            and self._include_max == other.include_max
        )

    def __hash__(self) -> int:
        return hash((self._min, self._max, self._include_min, self._include_max))

    def __str__(self) -> str:
        if self.is_any():
            return "*"

        if self.is_exact():
            return f"[{self._min}]"

        if self._min is not None and self._include_min and self._max is None:
            return f"{self._min}"

        text = "[" if self._include_min else "("
        if self._min is not None:
            text += str(self._min)

        text += ", "
        if self._max is not None:
            text += str(self._max)

        text += "]" if self._include_max else ")"

        return text

    def __repr__(self) -> str:
        return f"<VersionRange ({self})>"
