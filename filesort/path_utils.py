"""Path validation utilities for file sorting."""

from pathlib import Path


def validate_safe_path(path: Path, must_exist: bool = True) -> Path:
    """
    Validate a user-supplied path and return it resolved.

    Args:
        path: Path to validate
        must_exist: Whether the path must exist

    Returns:
        Resolved absolute path

    Raises:
        ValueError: If path contains null bytes
        FileNotFoundError: If path doesn't exist and must_exist is True
    """
    if '\0' in str(path):
        raise ValueError("Path contains null bytes")

    resolved_path = Path(path).resolve()

    if must_exist and not resolved_path.exists():
        raise FileNotFoundError(f"Path does not exist: {resolved_path}")

    return resolved_path


def validate_directory(path: Path) -> Path:
    """
    Validate that a path exists and is a directory.

    Raises:
        ValueError: If path contains null bytes
        FileNotFoundError: If path doesn't exist
        NotADirectoryError: If path is not a directory
    """
    resolved_path = validate_safe_path(path, must_exist=True)

    if not resolved_path.is_dir():
        raise NotADirectoryError(f"Provided path is not a directory: {resolved_path}")

    return resolved_path
