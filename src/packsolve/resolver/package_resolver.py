from __future__ import annotations

import logging

from typing import TYPE_CHECKING

from packsolve.packages import PackageIdentity
from packsolve.resolver.behavior import DependencyBehavior
from packsolve.resolver.combination_solver import CombinationSolver
from packsolve.resolver.comparator import CandidateComparator
from packsolve.resolver.conflicts import dependency_violation
from packsolve.resolver.conflicts import should_reject_pair
from packsolve.resolver.exceptions import InvalidInputError
from packsolve.resolver.exceptions import NoFeasibleSolutionError
from packsolve.resolver.exceptions import SolveFailureError
from packsolve.resolver.grouping import group_candidates
from packsolve.resolver.result import ResolverResult
from packsolve.resolver.sequencer import topological_sort


if TYPE_CHECKING:
    from collections.abc import Iterable

    from packsolve.packages import PackageDependencyInfo
    from packsolve.resolver.candidate import Candidate


logger = logging.getLogger(__name__)


class PackageResolver:
    """
    Resolves requested packages and their dependencies to a single version
    per package, listed in an order in which they can be installed.

    The resolver only holds its settings: every call builds its own search
    state, so one instance can be used from several threads.
    """

    def __init__(
        self,
        dependency_behavior: DependencyBehavior | str = DependencyBehavior.LOWEST,
        max_steps: int | None = None,
    ) -> None:
        self._behavior = DependencyBehavior.create(dependency_behavior)

        if max_steps is not None and max_steps < 1:
            raise InvalidInputError(
                f"The maximum number of steps must be positive, got {max_steps}."
            )

        self._max_steps = max_steps

    @property
    def dependency_behavior(self) -> DependencyBehavior:
        return self._behavior

    @property
    def max_steps(self) -> int | None:
        return self._max_steps

    def resolve(
        self,
        targets: Iterable[str | PackageIdentity],
        available: Iterable[PackageDependencyInfo],
        installed: Iterable[PackageIdentity] | None = None,
    ) -> list[PackageIdentity]:
        return self.solve(targets, available, installed).packages

    def solve(
        self,
        targets: Iterable[str | PackageIdentity],
        available: Iterable[PackageDependencyInfo],
        installed: Iterable[PackageIdentity] | None = None,
    ) -> ResolverResult:
        target_names = [
            target.name if isinstance(target, PackageIdentity) else target
            for target in targets
        ]
        comparator = CandidateComparator(self._behavior, installed)
        domains = group_candidates(target_names, available)

        logger.debug(
            "Resolving %s among %d packages with the %s behavior",
            ", ".join(target_names) or "nothing",
            len(domains),
            self._behavior,
        )

        solver: CombinationSolver[Candidate] = CombinationSolver(self._max_steps)
        try:
            solution = solver.find_solution(
                domains, comparator.compare, should_reject_pair
            )
        except SolveFailureError as e:
            raise self._no_solution(e) from e

        accepted = [candidate for candidate in solution if not candidate.absent]
        ordered = topological_sort(accepted)

        for candidate in solution:
            if candidate.absent:
                logger.debug("Leaving out %s", candidate.name)

        return ResolverResult(
            [candidate.to_identity() for candidate in ordered],
            solver.attempted_solutions,
        )

    @staticmethod
    def _no_solution(error: SolveFailureError) -> NoFeasibleSolutionError:
        violations = []
        packages = set()
        for p1, p2 in error.conflicts:
            violation = dependency_violation(p1, p2)
            if violation is None:
                continue

            violations.append(violation)
            packages.update(candidate.name for candidate in violation)

        return NoFeasibleSolutionError(violations, packages)


def resolve(
    targets: Iterable[str | PackageIdentity],
    available: Iterable[PackageDependencyInfo],
    installed: Iterable[PackageIdentity] | None = None,
    behavior: DependencyBehavior | str = DependencyBehavior.LOWEST,
    max_steps: int | None = None,
) -> list[PackageIdentity]:
    return PackageResolver(behavior, max_steps=max_steps).resolve(
        targets, available, installed
    )
