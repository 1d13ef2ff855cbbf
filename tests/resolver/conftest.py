from __future__ import annotations

import pytest

from packsolve.packages import PackageDependencyInfo


@pytest.fixture
def repo() -> list[PackageDependencyInfo]:
    return []
