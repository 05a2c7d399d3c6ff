"""Moving files into their category directories."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Dict, Any, Mapping, Optional

from filesort.config import DEFAULT_CONFIG
from filesort.extensions import EXTENSIONS, ExtensionRecord, build_extension_table
from filesort.move_log import MoveLog
from filesort.resolver import check_nesting_level, resolve
from filesort.scanner import FileScanner

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    """A completed move."""

    source: Path
    destination: Path


def move_file(src: Path, dst_dir: Path) -> Path:
    """
    Move a file into a directory, creating the directory if needed.

    Args:
        src: File to move
        dst_dir: Target directory

    Returns:
        The file's new path

    Raises:
        FileExistsError: If a file with the same name is already in dst_dir
        OSError: If the directory cannot be created or the rename fails
    """
    dst_dir.mkdir(parents=True, exist_ok=True)
    dst = dst_dir / src.name

    # Path.rename silently replaces an existing file on POSIX
    if dst.exists():
        raise FileExistsError(f"Destination already exists: {dst}")

    return src.rename(dst)


class FileSorter:
    """Sorts the files of a directory into category subdirectories."""

    def __init__(
        self,
        config: Optional[Dict[str, Any]] = None,
        table: Optional[Mapping[str, ExtensionRecord]] = None,
    ):
        """
        Initialize the file sorter.

        Args:
            config: Configuration dictionary
            table: Extension table; built from config["extensions"] if omitted
        """
        self.config = config or DEFAULT_CONFIG
        if table is None:
            overrides = self.config.get("extensions")
            table = build_extension_table(overrides) if overrides else EXTENSIONS
        self.table = table
        self.verbose = self.config.get("verbose", False)
        self.log = self.config.get("log", False)
        self.scanner = FileScanner()

    def sort(
        self,
        input_dir: Path,
        output_dir: Path,
        nesting_level: Optional[int] = None,
        use_alternate: Optional[bool] = None,
    ) -> List[MoveResult]:
        """
        Move every file in input_dir into output_dir/<resolved subdirectory>.

        Args:
            input_dir: Directory whose files are sorted
            output_dir: Root of the sorted tree
            nesting_level: Directory levels (1-3), default from config
            use_alternate: Use alternate names, default from config

        Returns:
            List of completed moves

        Raises:
            NestingLevelError: If nesting_level is out of range
            OSError: If any move fails; earlier moves are not rolled back
        """
        if nesting_level is None:
            nesting_level = self.config.get("nesting_level", DEFAULT_CONFIG["nesting_level"])
        if use_alternate is None:
            use_alternate = self.config.get("use_alternate", False)
        check_nesting_level(nesting_level)

        move_log = MoveLog(input_dir, self.config) if self.log else None
        results = []

        for file_info in self.scanner.scan(input_dir):
            subdir = resolve(
                file_info["normalized_extension"], nesting_level, use_alternate, self.table
            )
            results.append(self._move(file_info["path"], output_dir / subdir, move_log))

        logger.info(f"Sorted {len(results)} files from {input_dir} into {output_dir}")
        return results

    def custom_sort(self, input_dir: Path, output_dir: Path, extension: str) -> List[MoveResult]:
        """
        Move every file with exactly the given extension into output_dir.

        The table is not consulted and no subdirectories are created.

        Args:
            input_dir: Directory whose files are sorted
            output_dir: Flat destination directory
            extension: Extension to match, with or without a leading dot

        Returns:
            List of completed moves
        """
        if extension.startswith("."):
            extension = extension[1:]
        if not extension:
            raise ValueError("Extension must not be empty")

        move_log = MoveLog(input_dir, self.config) if self.log else None
        results = []

        for file_info in self.scanner.scan(input_dir):
            if file_info["extension"] != extension:
                continue
            results.append(self._move(file_info["path"], output_dir, move_log))

        logger.info(f"Moved {len(results)} '.{extension}' files from {input_dir} into {output_dir}")
        return results

    def _move(self, src: Path, dst_dir: Path, move_log: Optional[MoveLog]) -> MoveResult:
        """Move one file and report it."""
        destination = move_file(src, dst_dir)

        if self.verbose:
            print(f"{src.name} moved to {dst_dir}")

        if move_log:
            move_log.record(src, destination)

        return MoveResult(source=src, destination=destination)
