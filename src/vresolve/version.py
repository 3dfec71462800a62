"""Models the versions requested for and recorded against artifacts."""

import re
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Any, Final, NoReturn, Self

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .exceptions import InvalidVersionShapeError, MalformedVersionError

_NUMBER = r"(0|[1-9][0-9]*)"
_LABEL = r"([0-9A-Za-z][0-9A-Za-z.+_-]*)"
VERSION_PATTERN: Final = re.compile(
    rf"{_NUMBER}(?:\.{_NUMBER}(?:\.{_NUMBER})?)?(?:-{_LABEL})?"
)


class Specificity(IntEnum):
    """How many numeric components of a version are pinned."""

    UNSPECIFIED = 0
    MAJOR = 1
    MINOR = 2
    PATCH = 3


@total_ordering
@dataclass(frozen=True)
class Version:
    """Semantic version that may be partial.

    Components must be given as a prefix of (major, minor, patch): a minor
    component needs a major one and a patch component needs a minor one. The
    all-empty value is ``NO_VERSION``.

    Attributes:
        major: Major version number, or None when unspecified.
        minor: Minor version number, or None when unspecified.
        patch: Patch version number, or None when unspecified.
        pre_release: Pre-release label such as ``SNAPSHOT``, or None.
    """

    major: int | None = None
    minor: int | None = None
    patch: int | None = None
    pre_release: str | None = None

    def __post_init__(self: Self) -> None:
        """Reject component combinations that do not form a version.

        Raises:
            InvalidVersionShapeError: If the components are inconsistent.
        """
        if self.minor is not None and self.major is None:
            self._reject("minor requires major")
        if self.patch is not None and self.minor is None:
            self._reject("patch requires minor")
        if any(c is not None and c < 0 for c in self.components):
            self._reject("components must be non-negative")
        if self.pre_release is not None:
            if self.major is None:
                self._reject("pre-release requires major")
            if not self.pre_release:
                self._reject("pre-release label must not be empty")

    def _reject(self: Self, reason: str) -> NoReturn:
        raise InvalidVersionShapeError(
            self.major, self.minor, self.patch, self.pre_release, reason
        )

    @classmethod
    def parse(cls, version_str: str | None) -> Self:
        """Parse a version string.

        Args:
            version_str: Version string in format
                "major[.minor[.patch]][-pre_release]". An empty string or None
                means no version.

        Returns:
            Parsed Version instance.

        Raises:
            MalformedVersionError: If version string format is invalid.
        """
        if not version_str:
            return cls()

        match = VERSION_PATTERN.fullmatch(version_str)
        if match is None:
            raise MalformedVersionError(version_str)

        major, minor, patch, pre_release = match.groups()
        return cls(
            int(major),
            None if minor is None else int(minor),
            None if patch is None else int(patch),
            pre_release,
        )

    @classmethod
    def coerce(cls, value: "str | Version | None") -> "Version":
        """Return ``value`` as a Version, parsing it if it is a string.

        Args:
            value: A Version, a version string, or None for no version.

        Returns:
            The corresponding Version instance.

        Raises:
            MalformedVersionError: If ``value`` cannot be read as a version.
        """
        if isinstance(value, Version):
            return value
        if value is None or isinstance(value, str):
            return cls.parse(value)
        raise MalformedVersionError(repr(value))

    @property
    def components(self: Self) -> tuple[int | None, int | None, int | None]:
        """The numeric (major, minor, patch) triple."""
        return (self.major, self.minor, self.patch)

    @property
    def specificity(self: Self) -> Specificity:
        """The number of leading numeric components that are set."""
        return Specificity(sum(c is not None for c in self.components))

    @property
    def is_unspecified(self: Self) -> bool:
        """True for the ``NO_VERSION`` sentinel."""
        return self.specificity is Specificity.UNSPECIFIED

    @property
    def is_partial(self: Self) -> bool:
        """True when only major, or only major and minor, are set."""
        return self.specificity in (Specificity.MAJOR, Specificity.MINOR)

    @property
    def is_pre_release(self: Self) -> bool:
        """True when the version carries a pre-release label."""
        return self.pre_release is not None

    @property
    def is_release(self: Self) -> bool:
        """True for a fully specified version without a pre-release label."""
        return self.specificity is Specificity.PATCH and not self.is_pre_release

    def truncate(self: Self, specificity: Specificity) -> "Version":
        """Keep the numeric components up to ``specificity``.

        The pre-release label is always dropped.

        Args:
            specificity: Number of leading components to keep.

        Returns:
            A version with at most ``specificity`` components set.
        """
        kept = self.components[:specificity]
        return Version(*kept)

    def _precedence_key(self: Self) -> tuple[Any, ...]:
        numbers = tuple(-1 if c is None else c for c in self.components)
        if self.pre_release is None:
            return (numbers, (1,))
        identifiers = tuple(
            (0, int(part), part) if part.isdigit() else (1, 0, part)
            for part in self.pre_release.split(".")
        )
        return (numbers, (0, identifiers))

    def __lt__(self: Self, other: object) -> bool:
        """Compare versions by semantic precedence.

        Unset components sort below any number, so ``NO_VERSION`` is the lowest
        version. A pre-release sorts below the same release.
        """
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_key() < other._precedence_key()

    def __str__(self: Self) -> str:
        """Return string representation of version.

        Returns:
            Version string accepted by ``parse``. Empty for ``NO_VERSION``.
        """
        text = ".".join(str(c) for c in self.components if c is not None)
        if self.pre_release is not None:
            text += f"-{self.pre_release}"
        return text

    def __repr__(self: Self) -> str:
        """Return detailed string representation.

        Returns:
            Detailed version representation.
        """
        return (
            f"Version({self.major!r}, {self.minor!r}, {self.patch!r}, "
            f"{self.pre_release!r})"
        )

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Validate versions from strings and serialize them back to strings."""
        return core_schema.no_info_plain_validator_function(
            cls.coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe versions as strings in JSON schemas."""
        return {"type": "string", "pattern": f"^({VERSION_PATTERN.pattern})?$"}


NO_VERSION: Final = Version()
