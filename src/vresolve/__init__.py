"""vresolve - semantic version resolution for versioned artifacts.

Determines the concrete version to assign when publishing an artifact from a
possibly partial request, and lists the keys to probe when looking an artifact
up by version.
"""

from ._version import __version__
from .exceptions import (
    ConfigError,
    InvalidVersionShapeError,
    MalformedVersionError,
    VersionConflictError,
    VersionResolutionError,
)
from .resolver import (
    BASELINE_VERSION,
    all_resolutions,
    determine_version,
    stream_all_resolutions,
)
from .types import VersionLike
from .version import NO_VERSION, Specificity, Version

__all__ = [
    "BASELINE_VERSION",
    "NO_VERSION",
    "ConfigError",
    "InvalidVersionShapeError",
    "MalformedVersionError",
    "Specificity",
    "Version",
    "VersionConflictError",
    "VersionLike",
    "VersionResolutionError",
    "__version__",
    "all_resolutions",
    "determine_version",
    "stream_all_resolutions",
]
