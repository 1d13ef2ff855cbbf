from __future__ import annotations

from packsolve.semver.empty_constraint import EmptyConstraint
from packsolve.semver.exceptions import ParseConstraintError
from packsolve.semver.exceptions import ParseVersionError
from packsolve.semver.patterns import INTERVAL_CONSTRAINT
from packsolve.semver.version import Version
from packsolve.semver.version_constraint import VersionConstraint
from packsolve.semver.version_range import VersionRange


def parse_constraint(constraints: str) -> VersionConstraint:
    """
    Parses a version range written in interval notation.

    ``1.0`` means "1.0 or later", ``[1.0]`` means exactly 1.0, and the bracket
    forms ``[1.0,2.0)``, ``(,2.0]`` or ``[1.0,)`` give explicit bounds where a
    square bracket includes the bound. ``*`` and the empty string allow any
    version.
    """
    text = constraints.strip()
    if text in {"", "*"}:
        return VersionRange()

    if text[0] not in "[(":
        return VersionRange(min=_parse_bound(text, constraints), include_min=True)

    m = INTERVAL_CONSTRAINT.match(text)
    if m is None:
        raise ParseConstraintError(
            f"Could not parse version constraint: {constraints}"
        )

    include_min = m.group("open") == "["
    include_max = m.group("close") == "]"
    min_text = m.group("min")
    max_text = m.group("max")

    if m.group("comma") is None:
        # A single version is only valid as an exact match: [1.0]
        if not (include_min and include_max and min_text):
            raise ParseConstraintError(
                f"Could not parse version constraint: {constraints}"
            )

        version = _parse_bound(min_text, constraints)

        return VersionRange(version, version, include_min=True, include_max=True)

    min_version = _parse_bound(min_text, constraints) if min_text else None
    max_version = _parse_bound(max_text, constraints) if max_text else None

    if min_version is None and max_version is None:
        raise ParseConstraintError(
            f"Could not parse version constraint: {constraints}"
        )

    if min_version is not None and max_version is not None:
        if min_version > max_version:
            return EmptyConstraint()

        if min_version == max_version and not (include_min and include_max):
            return EmptyConstraint()

    return VersionRange(
        min_version,
        max_version,
        include_min=include_min,
        include_max=include_max,
    )


def _parse_bound(text: str, constraints: str) -> Version:
    try:
        return Version.parse(text)
    except ParseVersionError:
        raise ParseConstraintError(
            f"Could not parse version constraint: {constraints}"
        )


__all__ = [
    "EmptyConstraint",
    "ParseConstraintError",
    "ParseVersionError",
    "Version",
    "VersionConstraint",
    "VersionRange",
    "parse_constraint",
]
