from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from packsolve.resolver.candidate import Candidate


def _is_unsatisfied(dependent: Candidate, offered: Candidate) -> bool:
    dependency_range = dependent.find_dependency_range(offered.name)
    if dependency_range is None:
        return False

    return offered.absent or not dependency_range.allows(offered.version)


def should_reject_pair(p1: Candidate, p2: Candidate) -> bool:
    """
    Returns whether two candidates of different packages cannot be installed
    together.

    Only a dependency of one on the other can make them incompatible: the
    depended upon package must be present and its version must be allowed.
    Both directions are checked, so the order of the arguments does not
    matter.
    """
    return _is_unsatisfied(p1, p2) or _is_unsatisfied(p2, p1)


def dependency_violation(
    p1: Candidate, p2: Candidate
) -> tuple[Candidate, Candidate] | None:
    """
    Returns the rejected pair as (dependent, depended upon), or None when the
    pair is compatible.
    """
    if _is_unsatisfied(p1, p2):
        return p1, p2

    if _is_unsatisfied(p2, p1):
        return p2, p1

    return None
