"""Test-file generation and sort benchmarking."""

import logging
import random
import shutil
import time
from pathlib import Path
from typing import List, Dict, Any, Mapping, Optional

from filesort.config import DEFAULT_CONFIG
from filesort.extensions import EXTENSIONS, ExtensionRecord
from filesort.mover import FileSorter

logger = logging.getLogger(__name__)

BENCHMARK_FILE_COUNT = DEFAULT_CONFIG["benchmark_file_count"]
BENCHMARK_NESTING_LEVEL = 3


def create_files(
    amount: int,
    directory: Path = Path("."),
    rng: Optional[random.Random] = None,
    table: Mapping[str, ExtensionRecord] = EXTENSIONS,
) -> List[Path]:
    """
    Create empty files ``1.<ext>`` to ``<amount>.<ext>`` with random extensions.

    Args:
        amount: Number of files to create
        directory: Directory to create them in
        rng: Random source, a fresh ``random.Random`` if omitted
        table: Extension table to draw extensions from

    Returns:
        Paths of the created files
    """
    rng = rng or random.Random()
    extensions = sorted(table)
    directory = Path(directory)

    created = []
    for number in range(1, amount + 1):
        file_path = directory / f"{number}.{rng.choice(extensions)}"
        file_path.touch()
        created.append(file_path)

    logger.debug(f"Created {len(created)} files in {directory}")
    return created


def run_benchmark(
    directory: Path = Path("."),
    amount: Optional[int] = None,
    config: Optional[Dict[str, Any]] = None,
) -> float:
    """
    Time creating and sorting a batch of generated files.

    The directory must be empty. The sorted tree is removed afterwards.

    Args:
        directory: Empty working directory
        amount: Number of files to generate, default from config
        config: Configuration dictionary

    Returns:
        Elapsed seconds, or 0.0 if the directory is not empty
    """
    config = config or DEFAULT_CONFIG
    directory = Path(directory)
    if amount is None:
        amount = config.get("benchmark_file_count", BENCHMARK_FILE_COUNT)

    if any(directory.iterdir()):
        logger.warning(f"Benchmark directory is not empty: {directory.resolve()}")
        print("Please run benchmark in an empty directory.")
        return 0.0

    # Generated files are sorted silently, whatever the caller's settings
    sorter_config = dict(config, verbose=False, log=False)
    sorter = FileSorter(sorter_config)
    output_dir = directory / config.get("benchmark_output_dir", DEFAULT_CONFIG["benchmark_output_dir"])

    created: List[Path] = []
    try:
        start = time.perf_counter()
        created = create_files(amount, directory, table=sorter.table)
        sorter.sort(directory, output_dir, BENCHMARK_NESTING_LEVEL, use_alternate=False)
        elapsed = time.perf_counter() - start
    finally:
        # Leave the directory empty so the benchmark can be run again
        if output_dir.exists():
            shutil.rmtree(output_dir)
        for file_path in created:
            if file_path.exists():
                file_path.unlink()

    logger.info(f"Benchmark sorted {amount} files in {elapsed:.3f}s")
    return elapsed
