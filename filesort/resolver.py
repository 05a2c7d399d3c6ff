"""Destination path resolution by file extension."""

from pathlib import Path
from typing import Mapping

from filesort.extensions import EXTENSIONS, ExtensionRecord, lookup

MIN_NESTING_LEVEL = 1
MAX_NESTING_LEVEL = 3

UNCLASSIFIED_DIR = "other"


class NestingLevelError(ValueError):
    """Raised when a nesting level outside 1-3 is requested."""


def check_nesting_level(nesting_level: int) -> None:
    """
    Validate a nesting level.

    Raises:
        NestingLevelError: If the level is not 1, 2 or 3
    """
    if isinstance(nesting_level, bool) or not isinstance(nesting_level, int):
        raise NestingLevelError(f"Nesting level must be an integer, got {nesting_level!r}")
    if not MIN_NESTING_LEVEL <= nesting_level <= MAX_NESTING_LEVEL:
        raise NestingLevelError(
            f"Nesting level is out of range: {nesting_level} "
            f"(expected {MIN_NESTING_LEVEL}-{MAX_NESTING_LEVEL})"
        )


def resolve(
    extension: str,
    nesting_level: int,
    use_alternate: bool,
    table: Mapping[str, ExtensionRecord] = EXTENSIONS,
) -> Path:
    """
    Resolve the relative destination directory for an extension.

    Examples with ``gif -> (image, animated, -)``, ``qt -> (video, -, quicktime)``
    and ``mp4 -> (video, -, -)``::

        1, any       -> image               video            video
        2, plain     -> image/gif           video/quicktime  video/mp4
        3, plain     -> image/gif           video/quicktime  video/mp4
        2, alternate -> image/animated      video/quicktime  video/mp4
        3, alternate -> image/animated/gif  video/quicktime  video/mp4

    Level 3 without alternate naming yields the same path as level 2.

    Args:
        extension: Lower-case extension without the leading dot
        nesting_level: Number of directory levels, 1 to 3
        use_alternate: Prefer the record's alternate name
        table: Extension table to consult

    Returns:
        Relative path; ``other`` for extensions missing from the table

    Raises:
        NestingLevelError: If nesting_level is not 1, 2 or 3
    """
    check_nesting_level(nesting_level)

    record = lookup(extension, table)
    if record is None:
        return Path(UNCLASSIFIED_DIR)

    path = Path(record.category)
    if nesting_level == 1:
        return path

    sort_directory = record.sort_directory or extension

    if not use_alternate:
        return path / sort_directory

    if nesting_level == 2:
        return path / (record.alternate_name or sort_directory)

    if record.alternate_name:
        path = path / record.alternate_name
    return path / sort_directory
