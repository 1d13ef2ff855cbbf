from __future__ import annotations

from typing import TYPE_CHECKING

from packsolve.packages import PackageIdentity
from packsolve.resolver import PackageResolver
from packsolve.resolver import resolve
from tests.resolver.helpers import add_to_repo
from tests.resolver.helpers import check_resolver_result


if TYPE_CHECKING:
    from packsolve.packages import PackageDependencyInfo


def test_no_targets(repo: list[PackageDependencyInfo]):
    add_to_repo(repo, "a", "1.0.0")

    check_resolver_result([], repo, {}, tries=1)


def test_simple_dependencies(repo: list[PackageDependencyInfo]):
    add_to_repo(repo, "a", "1.0.0", deps={"aa": "1.0.0", "ab": "1.0.0"})
    add_to_repo(repo, "b", "1.0.0", deps={"ba": "1.0.0", "bb": "1.0.0"})
    add_to_repo(repo, "aa", "1.0.0")
    add_to_repo(repo, "ab", "1.0.0")
    add_to_repo(repo, "ba", "1.0.0")
    add_to_repo(repo, "bb", "1.0.0")

    result = check_resolver_result(
        ["a", "b"],
        repo,
        {
            "a": "1.0.0",
            "aa": "1.0.0",
            "ab": "1.0.0",
            "b": "1.0.0",
            "ba": "1.0.0",
            "bb": "1.0.0",
        },
        tries=10,
    )

    assert result is not None
    assert [p.name for p in result.packages] == ["aa", "ab", "ba", "bb", "a", "b"]


def test_shared_dependencies_with_overlapping_constraints(
    repo: list[PackageDependencyInfo],
):
    add_to_repo(repo, "a", "1.0.0", deps={"shared": "[2.0.0, 4.0.0)"})
    add_to_repo(repo, "b", "1.0.0", deps={"shared": "[3.0.0, 5.0.0)"})
    add_to_repo(repo, "shared", "2.0.0")
    add_to_repo(repo, "shared", "3.0.0")
    add_to_repo(repo, "shared", "3.6.9")
    add_to_repo(repo, "shared", "4.0.0")
    add_to_repo(repo, "shared", "5.0.0")

    check_resolver_result(
        ["a", "b"], repo, {"a": "1.0.0", "b": "1.0.0", "shared": "3.0.0"}
    )
    check_resolver_result(
        ["a", "b"],
        repo,
        {"a": "1.0.0", "b": "1.0.0", "shared": "3.6.9"},
        tries=6,
        behavior="highest",
    )


def test_shared_dependency_where_dependent_version_affects_other_dependencies(
    repo: list[PackageDependencyInfo],
):
    add_to_repo(repo, "foo", "1.0.0")
    add_to_repo(repo, "foo", "1.0.1", deps={"bang": "1.0.0"})
    add_to_repo(repo, "foo", "1.0.2", deps={"whoop": "1.0.0"})
    add_to_repo(repo, "foo", "1.0.3", deps={"zoop": "1.0.0"})
    add_to_repo(repo, "bar", "1.0.0", deps={"foo": "(, 1.0.1]"})
    add_to_repo(repo, "bang", "1.0.0")
    add_to_repo(repo, "whoop", "1.0.0")
    add_to_repo(repo, "zoop", "1.0.0")

    result = check_resolver_result(
        ["foo", "bar"],
        repo,
        {"foo": "1.0.1", "bar": "1.0.0", "bang": "1.0.0"},
        tries=10,
        behavior="highest",
    )

    assert result is not None
    assert [p.name for p in result.packages] == ["bang", "foo", "bar"]


def test_packages_nobody_needs_are_left_out(repo: list[PackageDependencyInfo]):
    add_to_repo(repo, "a", "1.0.0")
    add_to_repo(repo, "a", "2.0.0", deps={"b": "1.0.0"})
    add_to_repo(repo, "b", "1.0.0")
    add_to_repo(repo, "c", "1.0.0")

    check_resolver_result(["a"], repo, {"a": "1.0.0"})
    check_resolver_result(
        ["a"], repo, {"a": "2.0.0", "b": "1.0.0"}, behavior="highest"
    )


def test_names_are_case_insensitive(repo: list[PackageDependencyInfo]):
    add_to_repo(repo, "Foo", "1.0", deps={"BAR": "[1.0, 2.0)"})
    add_to_repo(repo, "bar", "1.0")

    check_resolver_result(["foo"], repo, {"Foo": "1.0", "bar": "1.0"})


def test_target_identities_only_use_the_name(repo: list[PackageDependencyInfo]):
    add_to_repo(repo, "a", "1.0")
    add_to_repo(repo, "a", "2.0")

    assert resolve([PackageIdentity("a", "2.0")], repo) == [
        PackageIdentity("a", "1.0")
    ]


def test_dependency_without_range_allows_any_version(
    repo: list[PackageDependencyInfo],
):
    add_to_repo(repo, "a", "1.0", deps={"b": None})
    add_to_repo(repo, "b", "0.1")
    add_to_repo(repo, "b", "9.0")

    check_resolver_result(["a"], repo, {"a": "1.0", "b": "0.1"})
    check_resolver_result(["a"], repo, {"a": "1.0", "b": "9.0"}, behavior="highest")


def test_self_dependencies_are_ignored(repo: list[PackageDependencyInfo]):
    add_to_repo(repo, "a", "1.0", deps={"a": "[2.0]"})

    check_resolver_result(["a"], repo, {"a": "1.0"})


def test_duplicate_entries_are_collapsed(repo: list[PackageDependencyInfo]):
    add_to_repo(repo, "a", "1.0", deps={"b": "1.0"})
    add_to_repo(repo, "A", "1.0.0", deps={"B": "1.0"})
    add_to_repo(repo, "b", "1.0")

    check_resolver_result(["a"], repo, {"a": "1.0", "b": "1.0"})


def test_resolving_twice_gives_the_same_result(repo: list[PackageDependencyInfo]):
    add_to_repo(repo, "a", "1.0", deps={"b": "[1.0, 3.0)", "c": "1.0"})
    add_to_repo(repo, "b", "1.0", deps={"c": "[2.0, 3.0)"})
    add_to_repo(repo, "b", "2.0")
    add_to_repo(repo, "c", "1.0")
    add_to_repo(repo, "c", "2.0")

    resolver = PackageResolver("highest")

    first = resolver.resolve(["a"], repo)
    second = resolver.resolve(["a"], repo)

    assert first == second
    assert [str(p) for p in first] == ["b 2.0", "c 2.0", "a 1.0"]
