"""Append-only log of file moves."""

from pathlib import Path
from typing import Dict, Any, Optional

from filesort.config import DEFAULT_CONFIG


class MoveLog:
    """Appends one line per move to a log file inside the input directory."""

    def __init__(self, input_dir: Path, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the move log.

        Args:
            input_dir: Directory being sorted; the log lives beneath it
            config: Configuration dictionary
        """
        config = config or DEFAULT_CONFIG
        self.log_dir = Path(input_dir) / config.get("log_dir_name", DEFAULT_CONFIG["log_dir_name"])
        self.log_file = self.log_dir / config.get("log_file_name", DEFAULT_CONFIG["log_file_name"])
        self.encoding = config.get("log_encoding", DEFAULT_CONFIG["log_encoding"])

    @staticmethod
    def format_line(source: Path, destination: Path) -> str:
        """Format a single log line: ``<source> Moved to <destination>``."""
        return f"{source} Moved to {destination}\n"

    def record(self, source: Path, destination: Path) -> None:
        """
        Append a move to the log.

        Raises:
            OSError: If the log directory or file cannot be written
        """
        self.log_dir.mkdir(parents=True, exist_ok=True)
        with open(self.log_file, 'a', encoding=self.encoding) as f:
            f.write(self.format_line(source, destination))
