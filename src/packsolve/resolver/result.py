from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from packsolve.packages import PackageIdentity


class ResolverResult:
    def __init__(
        self, packages: list[PackageIdentity], attempted_solutions: int
    ) -> None:
        self._packages = packages
        self._attempted_solutions = attempted_solutions

    @property
    def packages(self) -> list[PackageIdentity]:
        return self._packages

    @property
    def attempted_solutions(self) -> int:
        return self._attempted_solutions
