"""Exceptions raised by vresolve."""

from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from .version import Version


class VersionResolutionError(Exception):
    """Base exception for all vresolve errors."""


class MalformedVersionError(VersionResolutionError, ValueError):
    """Raised when a version string does not follow the version grammar.

    Attributes:
        input: The text that failed to parse.
    """

    def __init__(self: Self, input: str) -> None:  # noqa: A002
        """Initialize the error.

        Args:
            input: The text that failed to parse.
        """
        self.input = input
        super().__init__(f"Invalid version string: '{input}'")


class InvalidVersionShapeError(VersionResolutionError, ValueError):
    """Raised when a version is constructed from inconsistent components.

    A minor component requires a major one, a patch component requires a minor
    one, components are non-negative and a pre-release label is never empty.
    """

    def __init__(
        self: Self,
        major: int | None,
        minor: int | None,
        patch: int | None,
        pre_release: str | None,
        reason: str,
    ) -> None:
        """Initialize the error.

        Args:
            major: Major component that was given.
            minor: Minor component that was given.
            patch: Patch component that was given.
            pre_release: Pre-release label that was given.
            reason: Which rule the components violate.
        """
        self.major = major
        self.minor = minor
        self.patch = patch
        self.pre_release = pre_release
        self.reason = reason
        super().__init__(
            f"Invalid version shape (major={major!r}, minor={minor!r}, "
            f"patch={patch!r}, pre_release={pre_release!r}): {reason}"
        )


class VersionConflictError(VersionResolutionError):
    """Raised when a fully specified release is requested again.

    Attributes:
        requested: The version that was requested.
        existing: The highest version already on record.
    """

    def __init__(self: Self, requested: "Version", existing: "Version") -> None:
        """Initialize the error.

        Args:
            requested: The version that was requested.
            existing: The highest version already on record.
        """
        self.requested = requested
        self.existing = existing
        super().__init__(f"Version {requested} already exists")


class ConfigError(VersionResolutionError):
    """Raised when a configuration file cannot be loaded."""
