"""Type aliases needed in the package."""

from typing import Literal, TypeAlias

from .version import Version

VersionLike: TypeAlias = Version | str | None

OutputFormat: TypeAlias = Literal["text", "json"]
LogLevel: TypeAlias = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
