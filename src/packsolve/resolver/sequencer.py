from __future__ import annotations

import logging

from collections import deque
from typing import TYPE_CHECKING

from packsolve.resolver.exceptions import InternalConsistencyError


if TYPE_CHECKING:
    from collections.abc import Sequence

    from packsolve.resolver.candidate import RealCandidate


logger = logging.getLogger(__name__)


def topological_sort(nodes: Sequence[RealCandidate]) -> list[RealCandidate]:
    """
    Orders the selected packages so that every package comes after the
    packages it depends on.

    Ready packages are placed in the order they are given. When only
    dependency cycles are left, the first package in that order that sits
    on a cycle nothing else is waiting for is placed first.
    """
    by_key = {node.key: node for node in nodes}

    dependencies: dict[str, list[str]] = {}
    dependents: dict[str, list[str]] = {node.key: [] for node in nodes}
    for node in nodes:
        keys = []
        for dependency in node.dependencies:
            if dependency.key == node.key or dependency.key in keys:
                continue

            if dependency.key not in by_key:
                raise InternalConsistencyError(
                    f"{node} depends on {dependency.name} which is not part of"
                    " the solution."
                )

            keys.append(dependency.key)
            dependents[dependency.key].append(node.key)

        dependencies[node.key] = keys

    placed: set[str] = set()
    result: list[RealCandidate] = []

    def is_ready(key: str) -> bool:
        return all(dep in placed for dep in dependencies[key])

    ready = deque(node.key for node in nodes if is_ready(node.key))
    queued = set(ready)

    while len(result) < len(nodes):
        if not ready:
            key = _break_cycle(nodes, dependencies, placed)
            logger.warning(
                "Circular dependency detected involving %s, installing it first",
                by_key[key],
            )
            ready.append(key)
            queued.add(key)

        key = ready.popleft()
        placed.add(key)
        result.append(by_key[key])

        for dependent in dependents[key]:
            if dependent not in queued and is_ready(dependent):
                ready.append(dependent)
                queued.add(dependent)

    return result


def _break_cycle(
    nodes: Sequence[RealCandidate],
    dependencies: dict[str, list[str]],
    placed: set[str],
) -> str:
    reachable: dict[str, set[str]] = {}

    def reach(key: str) -> set[str]:
        if key not in reachable:
            seen: set[str] = set()
            stack = [dep for dep in dependencies[key] if dep not in placed]
            while stack:
                current = stack.pop()
                if current in seen:
                    continue

                seen.add(current)
                stack.extend(dep for dep in dependencies[current] if dep not in placed)

            reachable[key] = seen

        return reachable[key]

    # Every package left waits on something, so at least one of them is on
    # a cycle whose members only wait on each other.
    for node in nodes:
        if node.key in placed:
            continue

        if all(node.key in reach(other) for other in reach(node.key)):
            return node.key

    raise InternalConsistencyError("Unable to find an installation order.")
