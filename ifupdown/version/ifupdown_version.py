from dataclasses import dataclass
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class Version:
    """
    Semantic version information for ifupdown.

    Major, minor and patch numbers following semver, plus the release date.
    """
    major: int
    minor: int
    patch: int
    date: datetime

    def __str__(self) -> str:
        """Return the semantic version string (e.g., '0.1.0')."""
        return f"{self.major}.{self.minor}.{self.patch}"

    def full_version(self) -> str:
        """Return version info including the release date."""
        return f"{self} (date: {self.date_string()})"

    def semver(self) -> Tuple[int, int, int]:
        """Return semantic version as tuple (major, minor, patch)."""
        return (self.major, self.minor, self.patch)

    def date_string(self, fmt: str = "%Y-%m-%d") -> str:
        """Return formatted date string."""
        return self.date.strftime(fmt)


# Current version instance, keep in sync with pyproject.toml
IFUPDOWN_VERSION = Version(
    major=0,
    minor=1,
    patch=0,
    date=datetime(2026, 10, 19),
)
