"""Models the versions baked into a generated information class."""

import logging
import re
from dataclasses import dataclass
from typing import Final, Self

from .exceptions import MalformedVersionError

logger = logging.getLogger(__name__)

SNAPSHOT_SUFFIX: Final = "-SNAPSHOT"

# ASCII digits only; \d would also accept other Unicode decimal digits.
VERSION_PATTERN: Final = re.compile(
    r"([0-9]+)(?:\.([0-9]+)(?:\.([0-9]+))?)?(" + re.escape(SNAPSHOT_SUFFIX) + r")?"
)


@dataclass(frozen=True)
class ParsedVersion:
    """A version parsed from the fixed ``MAJOR[.MINOR[.MICRO]][-SNAPSHOT]`` grammar.

    Attributes:
        major: Major version number.
        minor: Minor version number, 0 when absent.
        micro: Micro version number, 0 when absent.
        is_snapshot: Whether the version carried the snapshot suffix.
    """

    major: int
    minor: int = 0
    micro: int = 0
    is_snapshot: bool = False

    @classmethod
    def parse(cls, raw: str, role: str | None = None) -> Self:
        """Parse a version string.

        The whole string must match the grammar. Missing minor and micro
        components default to 0.

        Args:
            raw: Version string such as "1", "1.2" or "1.2.3-SNAPSHOT".
            role: Optional label ("specification", "implementation") used in the
                error message.

        Returns:
            Parsed version.

        Raises:
            TypeError: If raw is not a string.
            MalformedVersionError: If raw does not match the grammar.
        """
        if not isinstance(raw, str):
            raise TypeError(
                f"Version must be a string, got {type(raw).__name__}"
            )

        match = VERSION_PATTERN.fullmatch(raw)
        if match is None:
            raise MalformedVersionError(raw, VERSION_PATTERN.pattern, role)

        major, minor, micro, snapshot = match.groups()
        try:
            version = cls(
                major=int(major),
                minor=int(minor) if minor is not None else 0,
                micro=int(micro) if micro is not None else 0,
                is_snapshot=snapshot is not None,
            )
        except ValueError as e:
            # int() refuses strings past sys.get_int_max_str_digits().
            raise MalformedVersionError(raw, VERSION_PATTERN.pattern, role) from e
        logger.debug("Parsed %s version %r as %r", role or "raw", raw, version)
        return version

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string in format "major.minor.micro", with the snapshot
            suffix when applicable.
        """
        suffix = SNAPSHOT_SUFFIX if self.is_snapshot else ""
        return f"{self.major}.{self.minor}.{self.micro}{suffix}"
