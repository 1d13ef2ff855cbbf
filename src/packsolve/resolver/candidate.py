from __future__ import annotations

import dataclasses

from typing import TYPE_CHECKING
from typing import Union

from packsolve.packages import PackageIdentity
from packsolve.packages.package_identity import normalize_name


if TYPE_CHECKING:
    from packsolve.packages import Dependency
    from packsolve.packages import PackageDependencyInfo
    from packsolve.semver import Version
    from packsolve.semver import VersionConstraint


@dataclasses.dataclass(frozen=True)
class RealCandidate:
    """
    A concrete version of a package that the search may select.
    """

    name: str
    version: Version
    dependencies: tuple[Dependency, ...] = ()

    @classmethod
    def from_package(cls, package: PackageDependencyInfo) -> RealCandidate:
        assert package.version is not None

        return cls(package.name, package.version, tuple(package.dependencies))

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    @property
    def absent(self) -> bool:
        return False

    def find_dependency_range(self, name: str) -> VersionConstraint | None:
        key = normalize_name(name)
        for dependency in self.dependencies:
            if dependency.key == key:
                return dependency.constraint

        return None

    def to_identity(self) -> PackageIdentity:
        return PackageIdentity(self.name, self.version)

    def __str__(self) -> str:
        return f"{self.name} ({self.version})"


@dataclasses.dataclass(frozen=True)
class AbsentCandidate:
    """
    Stands for "this package is not installed at all".
    """

    name: str

    @property
    def key(self) -> str:
        return normalize_name(self.name)

    @property
    def absent(self) -> bool:
        return True

    def find_dependency_range(self, name: str) -> VersionConstraint | None:
        return None

    def __str__(self) -> str:
        return f"{self.name} (absent)"


Candidate = Union[RealCandidate, AbsentCandidate]
