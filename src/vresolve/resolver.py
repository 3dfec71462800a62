"""Resolves requested versions against the highest version on record."""

import logging
from collections.abc import Iterator, Sequence

from .exceptions import VersionConflictError
from .types import VersionLike
from .version import NO_VERSION, Specificity, Version

logger = logging.getLogger(__name__)

BASELINE_VERSION = Version(1, 0, 0)


def determine_version(requested: VersionLike, existing: VersionLike) -> Version:
    """Determine the concrete version to assign to an artifact.

    Components pinned by ``requested`` are kept as given. The first unpinned
    component is incremented from ``existing`` when ``existing`` lies on the same
    line, or starts from the baseline otherwise, and every less significant
    component is reset to 0.

    Args:
        requested: Version asked for. ``NO_VERSION`` (or None, or "") assigns the
            next major version automatically.
        existing: Highest version currently on record. ``NO_VERSION`` when the
            artifact has no version yet.

    Returns:
        Fully specified version to assign. A requested pre-release is always
        returned unchanged.

    Raises:
        VersionConflictError: If ``requested`` is a release equal to
            ``existing``.
        MalformedVersionError: If a string argument cannot be parsed.

    Example:
        >>> str(determine_version("3.42", "3.42.5"))
        '3.42.6'
        >>> str(determine_version(NO_VERSION, "41.2.3"))
        '42.0.0'
    """
    requested = Version.coerce(requested)
    existing = Version.coerce(existing)

    if requested.is_pre_release:
        logger.debug("Keeping pre-release %s", requested)
        return requested

    pinned = requested.specificity
    if pinned is Specificity.PATCH:
        if requested == existing:
            logger.info("Rejecting %s: version already exists", requested)
            raise VersionConflictError(requested, existing)
        return requested

    resolved = _next_on_line(requested, existing, pinned)
    logger.debug(
        "Resolved %r against existing %r to %s",
        str(requested),
        str(existing),
        resolved,
    )
    return resolved


def _next_on_line(
    requested: Version, existing: Version, pinned: Specificity
) -> Version:
    """Increment the first component ``requested`` leaves open.

    When ``existing`` is ``NO_VERSION`` or does not share the pinned prefix, the
    open component starts from the baseline instead.
    """
    prefix = list(requested.components[:pinned])
    same_line = existing != NO_VERSION and (
        existing.truncate(pinned) == requested.truncate(pinned)
    )

    if same_line:
        previous = existing.components[pinned]
        prefix.append((previous or 0) + 1)
    else:
        prefix.append(BASELINE_VERSION.components[pinned])

    prefix.extend(0 for _ in range(len(prefix), Specificity.PATCH))
    return Version(*prefix)


def stream_all_resolutions(version: VersionLike) -> Sequence[Version]:
    """Return the lookup keys for ``version``, most specific first.

    The least significant component is dropped one at a time until
    ``NO_VERSION`` is reached. Pre-releases only match exactly, so for them the
    version itself is the only key.

    Args:
        version: Version to look up.

    Returns:
        Immutable sequence of ``version`` followed by each less specific
        fallback. It can be iterated any number of times.

    Raises:
        MalformedVersionError: If ``version`` is a string that cannot be parsed.

    Example:
        >>> [str(v) for v in stream_all_resolutions("3.42.6")]
        ['3.42.6', '3.42', '3', '']
    """
    return tuple(_resolutions(Version.coerce(version)))


def _resolutions(version: Version) -> Iterator[Version]:
    yield version
    if version.is_pre_release:
        return

    for specificity in reversed(range(version.specificity)):
        yield version.truncate(Specificity(specificity))


def all_resolutions(version: VersionLike) -> list[Version]:
    """Return the lookup keys for ``version`` as a list.

    Args:
        version: Version to look up.

    Returns:
        The keys produced by ``stream_all_resolutions``, in order.
    """
    return list(stream_all_resolutions(version))
