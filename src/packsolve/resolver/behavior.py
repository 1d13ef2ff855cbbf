from __future__ import annotations

from enum import Enum

from packsolve.resolver.exceptions import InvalidInputError


class DependencyBehavior(Enum):
    """
    Which version of a package is preferred when several would satisfy
    every constraint.
    """

    LOWEST = "lowest"
    HIGHEST = "highest"
    HIGHEST_MINOR = "highest-minor"
    HIGHEST_PATCH = "highest-patch"

    @classmethod
    def create(cls, value: str | DependencyBehavior) -> DependencyBehavior:
        if isinstance(value, DependencyBehavior):
            return value

        if isinstance(value, str):
            normalized = value.strip().lower().replace("_", "-")
            for behavior in cls:
                if behavior.value == normalized:
                    return behavior

        choices = ", ".join(b.value for b in cls)
        raise InvalidInputError(
            f'Unknown dependency behavior "{value}". Valid values are: {choices}.'
        )

    def __str__(self) -> str:
        return self.value
