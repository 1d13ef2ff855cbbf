from __future__ import annotations

import functools

from typing import TYPE_CHECKING
from typing import Any

from packsolve.packages import PackageIdentity
from packsolve.resolver.behavior import DependencyBehavior


if TYPE_CHECKING:
    from collections.abc import Callable
    from collections.abc import Iterable

    from packsolve.resolver.candidate import Candidate
    from packsolve.semver import Version


def _highest_minor_key(version: Version) -> tuple[int, int, int, int]:
    return version.major, -version.minor, -version.patch, -version.revision


def _highest_patch_key(version: Version) -> tuple[int, int, int, int]:
    return version.major, version.minor, -version.patch, -version.revision


class CandidateComparator:
    """
    Orders the candidates of one package from most to least preferred.

    The absent candidate always comes first, then the installed version, then
    the versions in the order given by the dependency behavior.

    The ``highest-minor`` and ``highest-patch`` behaviors sort by major version
    ascending before looking at the minor and patch parts, which means a lower
    major version wins over a higher one.
    """

    def __init__(
        self,
        behavior: DependencyBehavior | str,
        installed: Iterable[PackageIdentity] | None = None,
    ) -> None:
        self._behavior = DependencyBehavior.create(behavior)
        self._installed = frozenset(installed or [])

    @property
    def behavior(self) -> DependencyBehavior:
        return self._behavior

    def is_installed(self, candidate: Candidate) -> bool:
        if candidate.absent:
            return False

        return PackageIdentity(candidate.name, candidate.version) in self._installed

    def compare(self, x: Candidate, y: Candidate) -> int:
        assert x.key == y.key, f"Cannot order {x} against {y}"

        if x.absent or y.absent:
            if x.absent and y.absent:
                return 0

            return -1 if x.absent else 1

        x_installed = self.is_installed(x)
        y_installed = self.is_installed(y)
        if x_installed != y_installed:
            return -1 if x_installed else 1

        return self._compare_versions(x.version, y.version)

    def sort_key(self) -> Callable[[Candidate], Any]:
        return functools.cmp_to_key(self.compare)

    def _compare_versions(self, x: Version, y: Version) -> int:
        if self._behavior is DependencyBehavior.LOWEST:
            return x.compare(y)

        if self._behavior is DependencyBehavior.HIGHEST:
            return -x.compare(y)

        if self._behavior is DependencyBehavior.HIGHEST_MINOR:
            x_key, y_key = _highest_minor_key(x), _highest_minor_key(y)
        else:
            x_key, y_key = _highest_patch_key(x), _highest_patch_key(y)

        if x_key == y_key:
            return 0

        return -1 if x_key < y_key else 1
