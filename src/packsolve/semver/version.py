from __future__ import annotations

from packsolve.semver.exceptions import ParseVersionError
from packsolve.semver.patterns import COMPLETE_VERSION


class Version:
    """
    A four part ordinal version number (major.minor.patch.revision).

    Missing parts default to zero and negative parts are normalized to zero,
    so ``1.0`` and ``1.0.0.0`` are equal. The text the version was created
    from is kept for display purposes only.
    """

    def __init__(
        self,
        major: int,
        minor: int | None = None,
        patch: int | None = None,
        revision: int | None = None,
        text: str | None = None,
    ) -> None:
        self._major = max(int(major), 0)
        self._minor = max(int(minor or 0), 0)
        self._patch = max(int(patch or 0), 0)
        self._revision = max(int(revision or 0), 0)

        if text is None:
            parts = [self._major, self._minor]
            if patch is not None or self._revision:
                parts.append(self._patch)

            if self._revision:
                parts.append(self._revision)

            text = ".".join(str(p) for p in parts)

        self._text = text

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def release(self) -> tuple[int, int, int, int]:
        return self._major, self._minor, self._patch, self._revision

    @classmethod
    def parse(cls, text: str) -> Version:
        text = text.strip() if isinstance(text, str) else text
        match = COMPLETE_VERSION.match(text) if isinstance(text, str) else None
        if match is None:
            raise ParseVersionError(f'Unable to parse "{text}".')

        major = int(match.group(1))
        minor = int(match.group(2)) if match.group(2) else None
        patch = int(match.group(3)) if match.group(3) else None
        revision = int(match.group(4)) if match.group(4) else None

        return Version(major, minor, patch, revision, text=text.lstrip("vV"))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.release < other.release

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.release <= other.release

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.release > other.release

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.release >= other.release

    def compare(self, other: Version) -> int:
        if self.release == other.release:
            return 0

        return -1 if self.release < other.release else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented

        return self.release == other.release

    def __hash__(self) -> int:
        return hash(self.release)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"<Version {self}>"
