from __future__ import annotations

import pytest

from packsolve.packages import PackageIdentity
from packsolve.resolver import DependencyBehavior
from packsolve.resolver import InvalidInputError
from packsolve.resolver.candidate import AbsentCandidate
from packsolve.resolver.candidate import RealCandidate
from packsolve.resolver.comparator import CandidateComparator
from packsolve.semver import Version


def candidates(*versions: str) -> list[RealCandidate]:
    return [RealCandidate("a", Version.parse(v)) for v in versions]


def ordered(
    behavior: str,
    items: list[RealCandidate | AbsentCandidate],
    installed: list[PackageIdentity] | None = None,
) -> list[str]:
    comparator = CandidateComparator(behavior, installed)

    return [str(c) for c in sorted(items, key=comparator.sort_key())]


VERSIONS = ["2.0.0", "1.0.0", "1.2.5", "2.9.0", "1.0.3", "1.2.0"]


@pytest.mark.parametrize(
    ("behavior", "expected"),
    [
        ("lowest", ["1.0.0", "1.0.3", "1.2.0", "1.2.5", "2.0.0", "2.9.0"]),
        ("highest", ["2.9.0", "2.0.0", "1.2.5", "1.2.0", "1.0.3", "1.0.0"]),
        ("highest-minor", ["1.2.5", "1.2.0", "1.0.3", "1.0.0", "2.9.0", "2.0.0"]),
        ("highest-patch", ["1.0.3", "1.0.0", "1.2.5", "1.2.0", "2.0.0", "2.9.0"]),
    ],
)
def test_version_order(behavior: str, expected: list[str]):
    assert ordered(behavior, candidates(*VERSIONS)) == [f"a ({v})" for v in expected]


@pytest.mark.parametrize("behavior", [b.value for b in DependencyBehavior])
def test_absent_then_installed_come_first(behavior: str):
    items = [*candidates("1.0", "3.0"), AbsentCandidate("a"), *candidates("2.0")]

    result = ordered(behavior, items, [PackageIdentity("A", "2.0")])

    assert result[:2] == ["a (absent)", "a (2.0)"]


@pytest.mark.parametrize("behavior", [b.value for b in DependencyBehavior])
def test_order_is_strict_for_distinct_versions(behavior: str):
    comparator = CandidateComparator(behavior)
    items = candidates("1.2.3", "1.2.3.1", "1.2.4", "1.3", "2.0")

    for x in items:
        for y in items:
            result = comparator.compare(x, y)
            assert result == -comparator.compare(y, x)
            assert (result == 0) == (x == y)


def test_equal_versions_compare_equal():
    comparator = CandidateComparator(DependencyBehavior.HIGHEST)

    assert comparator.compare(*candidates("1.0", "1.0.0.0")) == 0
    assert comparator.compare(AbsentCandidate("a"), AbsentCandidate("A")) == 0


def test_is_installed():
    comparator = CandidateComparator("lowest", [PackageIdentity("a", "1.0")])

    assert comparator.is_installed(candidates("1.0.0")[0])
    assert not comparator.is_installed(candidates("1.1")[0])
    assert not comparator.is_installed(AbsentCandidate("a"))


def test_unknown_behavior_is_rejected():
    with pytest.raises(InvalidInputError):
        CandidateComparator("newest")
