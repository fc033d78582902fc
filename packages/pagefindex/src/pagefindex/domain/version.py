"""Version value object and compatibility policy.

Pagefind releases use semantic versions, optionally with an alpha, beta or
rc pre-release tag (``1.4.0``, ``1.4.0-beta.2``, ``1.4.0-rc3``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pagefindex.domain.exceptions import PagefindVersionError

LATEST = "latest"

VERSION_PATTERN = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(?:-(?P<label>alpha|beta|rc)(?P<sep>\.?)(?P<number>\d+))?$"
)

# Release precedence of pre-release labels
_LABEL_ORDER = {"alpha": 0, "beta": 1, "rc": 2}


def is_exact_version(value: object) -> bool:
    """Return True if value is a version string accepted by Version.parse()."""
    return isinstance(value, str) and VERSION_PATTERN.match(value) is not None


@dataclass(frozen=True, eq=False)
class Version:
    """Semantic version with an optional pre-release tag.

    Immutable value object. Comparison follows semantic versioning: the
    numeric triple decides first, a pre-release sorts before the release it
    precedes, and pre-releases of the same triple compare by label then number.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Pre-release tag as written (``"alpha.1"``, ``"rc3"``), or None.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a version from string format.

        Args:
            version_string: Version string such as ``"1.4.0"`` or ``"1.4.0-alpha.1"``.

        Returns:
            Version instance.

        Raises:
            PagefindVersionError: If the string does not match the version grammar.
        """
        match = VERSION_PATTERN.match(version_string) if isinstance(version_string, str) else None
        if match is None:
            raise PagefindVersionError(
                f"Invalid version format, expected 'X.Y.Z[-pre]', got: {version_string!r}"
            )

        prerelease = None
        if match.group("label"):
            prerelease = f"{match.group('label')}{match.group('sep')}{match.group('number')}"

        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=prerelease,
        )

    @property
    def prerelease_label(self) -> str | None:
        """Return the pre-release label (alpha, beta, rc) or None."""
        if self.prerelease is None:
            return None
        return self.prerelease.rstrip("0123456789").rstrip(".")

    @property
    def prerelease_number(self) -> int | None:
        """Return the pre-release number or None."""
        if self.prerelease is None:
            return None
        label = self.prerelease_label or ""
        return int(self.prerelease[len(label) :].lstrip("."))

    def _sort_key(self) -> tuple[int, int, int, int, int, int]:
        if self.prerelease is None:
            # Releases rank above every pre-release of the same triple
            return (self.major, self.minor, self.patch, 1, 0, 0)
        return (
            self.major,
            self.minor,
            self.patch,
            0,
            _LABEL_ORDER[self.prerelease_label or ""],
            self.prerelease_number or 0,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __lt__(self, other: Version) -> bool:
        return self._sort_key() < other._sort_key()

    def __le__(self, other: Version) -> bool:
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: Version) -> bool:
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: Version) -> bool:
        return self._sort_key() >= other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())

    def __str__(self) -> str:
        """Return string representation of version."""
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease is None:
            return base
        return f"{base}-{self.prerelease}"


def check_compatibility(found: str, required: str) -> str | None:
    """Apply the version compatibility policy to a discovered pagefind.

    Args:
        found: Version reported by the pagefind binary.
        required: Configured version, or ``"latest"``.

    Returns:
        None when the versions are compatible, or a warning message when the
        discovered version is newer than the configured one.

    Raises:
        PagefindVersionError: If either version is malformed, the major
            versions differ, or the discovered version is older.
    """
    if required == LATEST:
        return None

    found_version = Version.parse(found)
    required_version = Version.parse(required)

    if found_version.major != required_version.major:
        raise PagefindVersionError(
            f"pagefind major version {found_version.major} does not match "
            f"required major version {required_version.major}"
        )

    if found_version < required_version:
        raise PagefindVersionError(
            f"pagefind version {found} is older than required version {required}"
        )

    if found_version > required_version:
        return f"pagefind version {found} is newer than configured version {required}"

    return None
