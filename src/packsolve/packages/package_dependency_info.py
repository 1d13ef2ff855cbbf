from __future__ import annotations

from typing import TYPE_CHECKING

from packsolve.packages.dependency import Dependency
from packsolve.packages.package_identity import PackageIdentity
from packsolve.packages.package_identity import normalize_name


if TYPE_CHECKING:
    from collections.abc import Iterable

    from packsolve.semver import Version
    from packsolve.semver import VersionConstraint


class PackageDependencyInfo(PackageIdentity):
    """
    An available package version together with the dependencies it declares.
    """

    def __init__(
        self,
        name: str,
        version: str | Version,
        dependencies: Iterable[Dependency] | None = None,
    ) -> None:
        if version is None:
            raise ValueError(f"Package {name} requires a concrete version.")

        super().__init__(name, version)

        self._dependencies = list(dependencies or [])

    @property
    def dependencies(self) -> list[Dependency]:
        return self._dependencies

    def add_dependency(
        self, name: str, constraint: str | VersionConstraint | None = None
    ) -> Dependency:
        dependency = Dependency(name, constraint)
        self._dependencies.append(dependency)

        return dependency

    def find_dependency(self, name: str) -> Dependency | None:
        key = normalize_name(name)
        for dependency in self._dependencies:
            if dependency.key == key:
                return dependency

        return None

    def repeated_dependencies(self) -> list[str]:
        """
        Names of the packages depended upon more than once, ignoring case.
        """
        seen: set[str] = set()
        repeated: dict[str, str] = {}
        for dependency in self._dependencies:
            if dependency.key in seen:
                repeated.setdefault(dependency.key, dependency.name)

            seen.add(dependency.key)

        return list(repeated.values())

    def same_dependencies_as(self, other: PackageDependencyInfo) -> bool:
        if len(self._dependencies) != len(other.dependencies):
            return False

        return self._constraints() == other._constraints()

    def _constraints(self) -> dict[str, VersionConstraint]:
        return {d.key: d.constraint for d in self._dependencies}

    def __repr__(self) -> str:
        return f"<PackageDependencyInfo {self}>"
