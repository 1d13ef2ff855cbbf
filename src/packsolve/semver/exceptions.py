from __future__ import annotations


class ParseVersionError(ValueError):
    pass


class ParseConstraintError(ValueError):
    pass
