from __future__ import annotations

from packsolve.semver import Version


def normalize_name(name: str) -> str:
    return name.strip().lower()


class PackageIdentity:
    """
    A package name with an optional version.

    Names compare case-insensitively, versions exactly.
    """

    def __init__(self, name: str, version: str | Version | None = None) -> None:
        if not name or not name.strip():
            raise ValueError("A package identity requires a non-empty name.")

        self._name = name.strip()
        self._key = normalize_name(name)

        if isinstance(version, str):
            version = Version.parse(version)

        self._version = version

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return self._key

    @property
    def version(self) -> Version | None:
        return self._version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackageIdentity):
            return NotImplemented

        return self._key == other.key and self._version == other.version

    def __hash__(self) -> int:
        return hash((self._key, self._version))

    def __str__(self) -> str:
        if self._version is None:
            return self._name

        return f"{self._name} {self._version}"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self}>"
