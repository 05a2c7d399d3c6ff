"""Command-line interface for sorting files by extension."""

import argparse
import sys
import logging
import time
from pathlib import Path

from filesort.benchmark import create_files, run_benchmark
from filesort.config import load_config, save_config
from filesort.extensions import build_extension_table
from filesort.mover import FileSorter
from filesort.path_utils import validate_directory
from filesort.resolver import MIN_NESTING_LEVEL, MAX_NESTING_LEVEL

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """
    Configure logging for the application.

    Args:
        verbose: Enable debug logging
    """
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(levelname)s: %(message)s'
    )


def _prepare_config(args):
    """Load configuration from file and apply CLI overrides."""
    try:
        config = load_config(getattr(args, "config", None))
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    if getattr(args, "nesting_level", None) is not None:
        config["nesting_level"] = args.nesting_level
    if getattr(args, "use_alt", False):
        config["use_alternate"] = True
    if getattr(args, "verbose", False):
        config["verbose"] = True
    if getattr(args, "log", False):
        config["log"] = True

    return config


def _validate_input_dir(input_dir: Path) -> Path:
    """Validate the input directory or exit."""
    try:
        return validate_directory(input_dir)
    except (FileNotFoundError, NotADirectoryError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


def _print_elapsed(start: float) -> None:
    print(f"Time taken: {time.perf_counter() - start:.6f}s")


def cmd_sort(args) -> None:
    """Sort files by the extension table."""
    start = time.perf_counter()
    config = _prepare_config(args)
    input_dir = _validate_input_dir(args.input)

    sorter = FileSorter(config)
    sorter.sort(input_dir, args.output)
    _print_elapsed(start)


def cmd_customsort(args) -> None:
    """Move files with one literal extension into a flat directory."""
    start = time.perf_counter()
    config = _prepare_config(args)
    input_dir = _validate_input_dir(args.input)

    sorter = FileSorter(config)
    sorter.custom_sort(input_dir, args.output, args.extension)
    _print_elapsed(start)


def cmd_create(args) -> None:
    """Create files with random extensions."""
    start = time.perf_counter()
    config = _prepare_config(args)
    directory = _validate_input_dir(args.directory)

    table = build_extension_table(config.get("extensions"))
    create_files(args.amount, directory, table=table)
    _print_elapsed(start)


def cmd_benchmark(args) -> None:
    """Run the sort benchmark in an empty directory."""
    config = _prepare_config(args)
    directory = _validate_input_dir(args.directory)

    elapsed = run_benchmark(directory, config=config)
    print(f"Time taken: {elapsed:.6f}s")


def cmd_config(args) -> None:
    """Write the effective configuration to a YAML file."""
    config = _prepare_config(args)
    save_config(config, args.output)
    print(f"Configuration written to: {args.output}")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="Path to YAML configuration file"
    )


def _add_move_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i", "--input",
        type=Path,
        required=True,
        help="Directory whose files are sorted"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="Directory to sort files into"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print every move"
    )
    parser.add_argument(
        "-l", "--log",
        action="store_true",
        help="Append every move to sorter-logs/sorter.log in the input directory"
    )
    _add_common_arguments(parser)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="filesort",
        description="Sort files into directories by file extension",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Sort ~/Downloads into ~/Sorted as image/png, video/mp4, ...
  filesort sort -i ~/Downloads -o ~/Sorted

  # One directory per category, and keep a move log
  filesort sort -i ~/Downloads -o ~/Sorted -n 1 --log

  # Three levels with alternate names (image/animated/gif)
  filesort sort -i ~/Downloads -o ~/Sorted -n 3 --use-alt

  # Move only .iso files
  filesort customsort -i ~/Downloads -o ~/Images -e iso

  # Generate test files, or benchmark in an empty directory
  filesort create -a 500
  filesort benchmark

  # Write the default settings to edit them
  filesort config -o filesort.yaml
        """
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    p_sort = sub.add_parser("sort", help="Sort files by the extension table")
    _add_move_arguments(p_sort)
    p_sort.add_argument(
        "-n", "--nesting-level",
        type=int,
        choices=range(MIN_NESTING_LEVEL, MAX_NESTING_LEVEL + 1),
        default=None,
        help="Number of directory levels, 1-3 (default: 2)"
    )
    p_sort.add_argument(
        "-a", "--use-alt",
        action="store_true",
        help="Use alternative sorting directory names"
    )

    p_custom = sub.add_parser("customsort", help="Move files with one extension into a directory")
    _add_move_arguments(p_custom)
    p_custom.add_argument(
        "-e", "--extension",
        required=True,
        help="The file extension to move, e.g. 'iso'"
    )

    p_create = sub.add_parser("create", help="Create files with random extensions")
    p_create.add_argument(
        "-a", "--amount",
        type=int,
        required=True,
        help="Number of files to create"
    )
    p_create.add_argument(
        "-d", "--directory",
        type=Path,
        default=Path("."),
        help="Directory to create files in (default: current directory)"
    )
    _add_common_arguments(p_create)

    p_bench = sub.add_parser("benchmark", help="Time a sort of generated files (empty directory only)")
    p_bench.add_argument(
        "-d", "--directory",
        type=Path,
        default=Path("."),
        help="Empty directory to run in (default: current directory)"
    )
    _add_common_arguments(p_bench)

    p_config = sub.add_parser("config", help="Write the effective configuration to a YAML file")
    p_config.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="YAML file to write, e.g. filesort.yaml"
    )
    _add_common_arguments(p_config)

    return parser


COMMANDS = {
    "sort": cmd_sort,
    "customsort": cmd_customsort,
    "create": cmd_create,
    "benchmark": cmd_benchmark,
    "config": cmd_config,
}


def main():
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    setup_logging(getattr(args, "verbose", False))

    try:
        COMMANDS[args.command](args)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        sys.exit(130)
    except (OSError, ValueError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
