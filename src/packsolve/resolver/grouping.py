from __future__ import annotations

import logging

from typing import TYPE_CHECKING

from packsolve.packages.package_identity import normalize_name
from packsolve.resolver.candidate import AbsentCandidate
from packsolve.resolver.candidate import RealCandidate
from packsolve.resolver.exceptions import InvalidInputError
from packsolve.resolver.exceptions import UnresolvableTargetError


if TYPE_CHECKING:
    from collections.abc import Iterable

    from packsolve.packages import PackageDependencyInfo
    from packsolve.resolver.candidate import Candidate


logger = logging.getLogger(__name__)


def group_candidates(
    targets: Iterable[str],
    available: Iterable[PackageDependencyInfo],
) -> list[list[Candidate]]:
    """
    Builds one domain per package name.

    Domains follow the order in which names first appear among the available
    packages, then the names only known through dependencies or targets.
    Every domain except the targets' ones gets an absent candidate so the
    search is free to leave the package out.
    """
    target_keys: dict[str, str] = {}
    for target in targets:
        target_keys.setdefault(normalize_name(target), target)

    names: dict[str, str] = {}
    groups: dict[str, list[Candidate]] = {}
    seen: dict[tuple[str, object], PackageDependencyInfo] = {}

    for package in available:
        if package.version is None:
            raise InvalidInputError(
                f"Available package {package.name} has no version."
            )

        repeated = package.repeated_dependencies()
        if repeated:
            raise InvalidInputError(
                f"{package} declares more than one dependency on "
                + ", ".join(repeated)
                + "."
            )

        identity = (package.key, package.version)
        if identity in seen:
            if not seen[identity].same_dependencies_as(package):
                raise InvalidInputError(
                    f"Conflicting definitions of {package}: the entries declare"
                    " different dependencies."
                )

            logger.debug("Ignoring duplicate definition of %s", package)
            continue

        seen[identity] = package
        names.setdefault(package.key, package.name)
        groups.setdefault(package.key, []).append(RealCandidate.from_package(package))

    missing_targets = [name for key, name in target_keys.items() if key not in groups]
    if missing_targets:
        raise UnresolvableTargetError(missing_targets)

    for package in seen.values():
        for dependency in package.dependencies:
            if dependency.key not in groups:
                names[dependency.key] = dependency.name
                groups[dependency.key] = []

    domains = []
    for key, candidates in groups.items():
        if key not in target_keys:
            candidates.append(AbsentCandidate(names[key]))

        domains.append(candidates)

    return domains
