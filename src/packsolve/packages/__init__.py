from __future__ import annotations

from packsolve.packages.dependency import Dependency
from packsolve.packages.package_dependency_info import PackageDependencyInfo
from packsolve.packages.package_identity import PackageIdentity


__all__ = ["Dependency", "PackageDependencyInfo", "PackageIdentity"]
