from __future__ import annotations

from packsolve.packages.package_identity import normalize_name
from packsolve.semver import VersionConstraint
from packsolve.semver import VersionRange
from packsolve.semver import parse_constraint


class Dependency:
    def __init__(
        self, name: str, constraint: str | VersionConstraint | None = None
    ) -> None:
        if not name or not name.strip():
            raise ValueError("A dependency requires a non-empty package name.")

        self._name = name.strip()
        self._key = normalize_name(name)

        if constraint is None:
            constraint = VersionRange()
        elif isinstance(constraint, str):
            constraint = parse_constraint(constraint)

        self._constraint = constraint

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return self._key

    @property
    def constraint(self) -> VersionConstraint:
        return self._constraint

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dependency):
            return NotImplemented

        return self._key == other.key and self._constraint == other.constraint

    def __hash__(self) -> int:
        return hash((self._key, self._constraint))

    def __str__(self) -> str:
        return f"{self._name} ({self._constraint})"

    def __repr__(self) -> str:
        return f"<Dependency {self}>"
