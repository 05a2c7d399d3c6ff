"""Directory scanning for files to sort."""

import logging
from pathlib import Path
from typing import List, Dict, Any

logger = logging.getLogger(__name__)


class FileScanner:
    """Lists the sortable files directly inside a directory."""

    def scan(self, input_dir: Path) -> List[Dict[str, Any]]:
        """
        Scan a directory for files with an extension.

        Subdirectories are not descended into, and files without an
        extension (including dotfiles such as ``.bashrc``) are skipped.

        Args:
            input_dir: Directory to scan

        Returns:
            List of file dictionaries sorted by name

        Raises:
            NotADirectoryError: If input_dir is not a directory
        """
        if not input_dir.is_dir():
            raise NotADirectoryError(f"Not a directory: {input_dir}")

        files = []
        for entry in sorted(input_dir.iterdir()):
            if entry.is_dir():
                continue
            if not entry.suffix:
                logger.debug(f"Skipping file without extension: {entry.name}")
                continue
            files.append(self._create_file_info(entry))

        logger.debug(f"Found {len(files)} files in {input_dir}")
        return files

    def _create_file_info(self, file_path: Path) -> Dict[str, Any]:
        """Create file information dictionary."""
        extension = file_path.suffix[1:]
        return {
            "path": file_path,
            "name": file_path.name,
            "extension": extension,
            "normalized_extension": extension.lower(),
        }
