from __future__ import annotations

import dataclasses
import logging

from typing import TYPE_CHECKING
from typing import Any

from packsolve.exceptions import ManifestError
from packsolve.packages import Dependency
from packsolve.packages import PackageDependencyInfo
from packsolve.packages import PackageIdentity
from packsolve.resolver.behavior import DependencyBehavior
from packsolve.resolver.exceptions import InvalidInputError
from packsolve.toml import TOMLFile


if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


logger = logging.getLogger(__name__)


@dataclasses.dataclass
class ResolutionRequest:
    targets: list[str]
    available: list[PackageDependencyInfo]
    installed: list[PackageIdentity] = dataclasses.field(default_factory=list)
    dependency_behavior: DependencyBehavior | None = None

    def find_package(self, identity: PackageIdentity) -> PackageDependencyInfo:
        for package in self.available:
            if package == identity:
                return package

        raise KeyError(str(identity))


class Factory:
    """
    Builds resolution requests from TOML manifests.
    """

    def create_request(self, path: Path) -> ResolutionRequest:
        file = TOMLFile(path)
        if not file.exists():
            raise ManifestError(f"Manifest file {path} does not exist.")

        logger.debug("Loading manifest %s", path)

        return self.create_request_from_data(file.read(), source=str(path))

    @classmethod
    def create_request_from_data(
        cls, data: Mapping[str, Any], source: str = "<manifest>"
    ) -> ResolutionRequest:
        request = data.get("request", {})
        if not isinstance(request, dict):
            raise ManifestError(f"{source}: [request] must be a table.")

        targets = request.get("targets", [])
        if not isinstance(targets, list) or not all(
            isinstance(t, str) for t in targets
        ):
            raise ManifestError(f"{source}: request.targets must be a list of names.")

        installed = [
            cls.create_identity(entry, f"{source}: request.installed[{i}]")
            for i, entry in enumerate(request.get("installed", []))
        ]

        behavior = request.get("dependency-behavior")
        if behavior is not None:
            try:
                behavior = DependencyBehavior.create(str(behavior))
            except InvalidInputError as e:
                raise ManifestError(f"{source}: {e}")

        packages = data.get("package", [])
        if not isinstance(packages, list):
            raise ManifestError(f"{source}: package must be an array of tables.")

        available = [
            cls.create_package(entry, f"{source}: package[{i}]")
            for i, entry in enumerate(packages)
        ]

        return ResolutionRequest(
            targets=[str(t) for t in targets],
            available=available,
            installed=installed,
            dependency_behavior=behavior,
        )

    @classmethod
    def create_identity(cls, entry: Any, location: str) -> PackageIdentity:
        if isinstance(entry, str):
            name, _, version = entry.strip().partition(" ")
            entry = {"name": name, "version": version.strip()}

        if not isinstance(entry, dict) or not entry.get("name"):
            raise ManifestError(f"{location}: expected a name and a version.")

        if not entry.get("version"):
            raise ManifestError(f"{location}: {entry['name']} has no version.")

        try:
            return PackageIdentity(str(entry["name"]), str(entry["version"]))
        except ValueError as e:
            raise ManifestError(f"{location}: {e}")

    @classmethod
    def create_package(cls, entry: Any, location: str) -> PackageDependencyInfo:
        if not isinstance(entry, dict):
            raise ManifestError(f"{location}: expected a table.")

        identity = cls.create_identity(entry, location)

        dependencies = entry.get("dependencies", {})
        if not isinstance(dependencies, dict):
            raise ManifestError(f"{location}: dependencies must be a table.")

        try:
            return PackageDependencyInfo(
                identity.name,
                identity.version,  # type: ignore[arg-type]
                [
                    cls.create_dependency(name, constraint)
                    for name, constraint in dependencies.items()
                ],
            )
        except ValueError as e:
            raise ManifestError(f"{location}: {e}")

    @staticmethod
    def create_dependency(name: str, constraint: Any) -> Dependency:
        if isinstance(constraint, dict):
            constraint = constraint.get("version")

        return Dependency(str(name), None if constraint is None else str(constraint))
