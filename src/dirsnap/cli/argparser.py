"""Command-line argument parsing for dirsnap.

This module defines the command-line interface for dirsnap,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Tuple, Union

from dirsnap import __version__
from dirsnap.exclusion_rules.snapshot_rules import SnapshotIgnoreExclusionRules

# Ordered exclusion sources as given on the command line: ("file", Path) or ("pattern", str)
ExclusionSource = Tuple[str, Union[Path, str]]


class ExclusionSourceAction(argparse.Action):
    """Action recording -e/--exclude and -i/--ignore options in command-line order.

    Both options append to the shared ``exclusions`` list of the namespace, so
    files and inline patterns can later be applied in exactly the order they
    were given, after the project's own ``.gitignore``.
    """

    def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        if values is None:
            return

        kind = "file" if option_string in ("-e", "--exclude") else "pattern"
        value: Union[Path, str] = Path(str(values)) if kind == "file" else str(values)

        if getattr(namespace, "exclusions", None) is None:
            namespace.exclusions = []
        namespace.exclusions.append((kind, value))

        # Also maintain the per-option attribute
        if getattr(namespace, self.dest, None) is None:
            setattr(namespace, self.dest, [])
        getattr(namespace, self.dest).append(value)


def apply_exclusion_sources(rules: SnapshotIgnoreExclusionRules, sources: Sequence[ExclusionSource]) -> None:
    """Add command-line exclusion sources to a rule set, preserving their order.

    Args:
        rules: The rule set to extend.
        sources: Sources collected by :class:`ExclusionSourceAction`.

    Raises:
        FileNotFoundError: If an exclusion file does not exist.
    """
    for kind, value in sources:
        if kind == "file":
            rules.load_rules(value)
        else:
            rules.add_rule(str(value))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dirsnap's options.
    """
    description = """
    dirsnap: Write a Markdown snapshot of a project directory.

    The snapshot starts with a tree of the project's files and continues with the
    full contents of every file, in the same order as the tree. Entries matching
    the project's .gitignore (and any extra rules given on the command line) are
    left out, as is the output directory itself.

    Supported rule syntax is a basic subset of .gitignore: a rule containing * or ?
    is a wildcard matched against the whole relative path or the file name; any
    other rule matches an entry of that name at any depth, together with
    everything below it. Lines starting with # are comments.

    Snapshots are written to <output-dir>/<Ddd-MM-DD-YYYY>/snap-<Ddd-MM-DD-YYYY>--<h>-<mm>-<am|pm>.md.
    """

    epilog = """
    Examples:
      # Snapshot the project containing the current directory
      dirsnap

      # Snapshot a specific directory
      dirsnap /path/to/project

      # Add exclusion files and inline rules on top of .gitignore
      dirsnap -e .dockerignore -i "*.lock" -i dist /path/to/project

      # Ignore the project's .gitignore entirely
      dirsnap --no-gitignore /path/to/project

      # Write to a different output directory
      dirsnap -o /tmp/snapshots /path/to/project

      # Print the document instead of writing a file
      dirsnap --stdout /path/to/project | less

      # Skip unreadable subdirectories instead of failing
      dirsnap -P ignore /path/to/project

      # Print a summary of counted entries to stderr
      dirsnap -s stderr /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="dirsnap",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirsnap {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        help=(
            "The project directory to snapshot. Defaults to the nearest directory at or above the "
            "current one that contains .git, pyproject.toml, setup.py, setup.cfg or package.json."
        ),
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        metavar="DIR",
        help="Directory snapshots are written to (default: <directory>/snapshots). Always excluded.",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        metavar="FILE",
        action=ExclusionSourceAction,
        help="Additional exclusion file, applied after .gitignore (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERN",
        action=ExclusionSourceAction,
        help=(
            "Additional exclusion rule (can be specified multiple times). Rules are applied in the "
            "order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "--no-gitignore",
        action="store_true",
        help="Do not read <directory>/.gitignore.",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Write the snapshot to standard output instead of a file.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "fail"],
        default="fail",
        help="How to handle subdirectories that cannot be listed (default: fail).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout"],
        help="Print a summary of directory and file counts. Valid destinations: stderr, stdout",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress progress messages.",
    )
    parser.set_defaults(exclusions=None)

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.stdout and args.output_dir is not None:
        raise ValueError("--stdout cannot be combined with -o/--output-dir")
    if args.stdout and args.summary == "stdout":
        raise ValueError("--summary=stdout cannot be combined with --stdout")
