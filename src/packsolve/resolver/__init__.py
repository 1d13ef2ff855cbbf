from __future__ import annotations

from packsolve.resolver.behavior import DependencyBehavior
from packsolve.resolver.exceptions import InternalConsistencyError
from packsolve.resolver.exceptions import InvalidInputError
from packsolve.resolver.exceptions import NoFeasibleSolutionError
from packsolve.resolver.exceptions import ResolverError
from packsolve.resolver.exceptions import SearchBudgetExceededError
from packsolve.resolver.exceptions import UnresolvableTargetError
from packsolve.resolver.package_resolver import PackageResolver
from packsolve.resolver.package_resolver import resolve
from packsolve.resolver.result import ResolverResult


__all__ = [
    "DependencyBehavior",
    "InternalConsistencyError",
    "InvalidInputError",
    "NoFeasibleSolutionError",
    "PackageResolver",
    "ResolverError",
    "ResolverResult",
    "SearchBudgetExceededError",
    "UnresolvableTargetError",
    "resolve",
]
