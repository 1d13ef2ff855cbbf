from __future__ import annotations

from typing import TYPE_CHECKING

from packsolve.semver.version_constraint import VersionConstraint


if TYPE_CHECKING:
    from packsolve.semver.version import Version


class EmptyConstraint(VersionConstraint):
    def is_empty(self) -> bool:
        return True

    def is_any(self) -> bool:
        return False

    def allows(self, version: Version) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EmptyConstraint)

    def __hash__(self) -> int:
        return hash("empty")

    def __str__(self) -> str:
        return "<empty>"

    def __repr__(self) -> str:
        return "<EmptyConstraint>"
