from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from collections.abc import Collection
    from collections.abc import Sequence

    from packsolve.resolver.candidate import Candidate
    from packsolve.resolver.candidate import RealCandidate


class ResolverError(Exception):
    pass


class InvalidInputError(ResolverError, ValueError):
    pass


class UnresolvableTargetError(ResolverError):
    def __init__(self, targets: Collection[str]) -> None:
        self._targets = sorted(targets)

        names = ", ".join(f'"{t}"' for t in self._targets)
        super().__init__(f"Unable to find any version of the requested {names}.")

    @property
    def targets(self) -> list[str]:
        return self._targets


class SolveFailureError(ResolverError):
    """
    The combination search exhausted every candidate of the first domain.
    """

    def __init__(self, conflicts: Sequence[tuple[object, object]]) -> None:
        self._conflicts = list(conflicts)

        super().__init__("Unable to find a combination without conflicts.")

    @property
    def conflicts(self) -> list[tuple[object, object]]:
        return self._conflicts


class SearchBudgetExceededError(ResolverError):
    def __init__(self, max_steps: int) -> None:
        self._max_steps = max_steps

        super().__init__(
            f"Version solving gave up after {max_steps} attempted solutions."
        )

    @property
    def max_steps(self) -> int:
        return self._max_steps


class NoFeasibleSolutionError(ResolverError):
    def __init__(
        self,
        violations: Sequence[tuple[RealCandidate, Candidate]],
        packages: Collection[str],
    ) -> None:
        self._packages = set(packages)

        lines = sorted(
            {self._describe(dependent, offered) for dependent, offered in violations}
        )
        message = "Unable to resolve dependencies"
        if self._packages:
            message += " between " + ", ".join(sorted(self._packages))

        message += "."
        if lines:
            message += "\n\n" + "\n".join(f"  - {line}" for line in lines)

        self._violations = lines

        super().__init__(message)

    @property
    def packages(self) -> set[str]:
        return self._packages

    @property
    def violations(self) -> list[str]:
        return self._violations

    @staticmethod
    def _describe(dependent: RealCandidate, offered: Candidate) -> str:
        dependency = dependent.find_dependency_range(offered.name)
        requirement = f"{offered.name} ({dependency})"
        if offered.absent:
            return f"{dependent} requires {requirement} but it was left out"

        return f"{dependent} requires {requirement} but {offered} was considered"


class InternalConsistencyError(ResolverError):
    pass
