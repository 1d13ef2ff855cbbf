from __future__ import annotations

from packsolve.resolver.exceptions import InvalidInputError


class ManifestError(InvalidInputError):
    pass
