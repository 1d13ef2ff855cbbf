from __future__ import annotations

from typing import TYPE_CHECKING

from packsolve.packages import PackageDependencyInfo
from packsolve.packages import PackageIdentity
from packsolve.resolver import DependencyBehavior
from packsolve.resolver import PackageResolver
from packsolve.resolver import ResolverError
from packsolve.resolver.candidate import RealCandidate


if TYPE_CHECKING:
    from collections.abc import Mapping

    from packsolve.resolver import ResolverResult


def add_to_repo(
    repository: list[PackageDependencyInfo],
    name: str,
    version: str,
    deps: Mapping[str, str | None] | None = None,
) -> PackageDependencyInfo:
    package = PackageDependencyInfo(name, version)

    if deps:
        for dep_name, dep_constraint in deps.items():
            package.add_dependency(dep_name, dep_constraint)

    repository.append(package)

    return package


def installed(*packages: str) -> list[PackageIdentity]:
    """
    Builds installed identities from "name version" strings.
    """
    identities = []
    for package in packages:
        name, version = package.split(" ")
        identities.append(PackageIdentity(name, version))

    return identities


def check_resolver_result(
    targets: list[str],
    repository: list[PackageDependencyInfo],
    result: dict[str, str] | None = None,
    error: str | None = None,
    tries: int | None = None,
    behavior: DependencyBehavior | str = DependencyBehavior.LOWEST,
    installed: list[PackageIdentity] | None = None,
) -> ResolverResult | None:
    resolver = PackageResolver(behavior)

    try:
        solution = resolver.solve(targets, repository, installed)
    except ResolverError as e:
        if error:
            assert str(e) == error
            return None

        raise

    assert error is None, "The resolution was expected to fail"

    packages = {}
    for package in solution.packages:
        packages[package.name] = str(package.version)

    assert packages == result

    assert_valid_order(solution.packages, repository)

    if tries is not None:
        assert solution.attempted_solutions == tries

    return solution


def assert_valid_order(
    packages: list[PackageIdentity], repository: list[PackageDependencyInfo]
) -> None:
    """
    Every package must come after the packages it depends on, except within
    dependency cycles.
    """
    positions = {package.key: i for i, package in enumerate(packages)}
    nodes = {}
    for package in packages:
        info = next(p for p in repository if p == package)
        nodes[package.key] = RealCandidate.from_package(info)

    for key, node in nodes.items():
        for dependency in node.dependencies:
            if dependency.key == key:
                continue

            assert dependency.key in positions, f"{node} misses {dependency}"
            assert dependency.constraint.allows(nodes[dependency.key].version)

            if _reaches(nodes, dependency.key, key):
                continue

            assert positions[dependency.key] < positions[key], (
                f"{node} is placed before {dependency.name}"
            )


def _reaches(nodes: dict[str, RealCandidate], start: str, goal: str) -> bool:
    stack = [start]
    seen = set()
    while stack:
        key = stack.pop()
        if key == goal:
            return True

        if key in seen:
            continue

        seen.add(key)
        stack.extend(d.key for d in nodes[key].dependencies if d.key in nodes)

    return False
