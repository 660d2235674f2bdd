"""Command-line interface for dirsnap.

This module provides the command-line entry point that resolves the project
root, gathers exclusion rules, builds the snapshot document and writes it.

Progress messages and errors are printed to stderr. Progress messages can be
silenced with -q/--quiet; errors cannot.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe while writing to stdout

Example:
    # Snapshot the project containing the current directory
    $ dirsnap

    # Snapshot a directory with an extra exclusion rule
    $ dirsnap /path/to/project -i "*.lock"
"""

import locale
import os
import sys
from collections.abc import Mapping
from datetime import datetime
from pathlib import Path
from typing import Optional

from dirsnap.cli.argparser import apply_exclusion_sources, create_parser, validate_args
from dirsnap.exclusion_rules.matcher import compile_matcher
from dirsnap.exclusion_rules.reserved_rules import DEFAULT_RESERVED_NAME
from dirsnap.exclusion_rules.snapshot_rules import SnapshotIgnoreExclusionRules
from dirsnap.file_system_tree.permission_action import PermissionAction
from dirsnap.project_root import find_project_root
from dirsnap.snapshot_builder import SnapshotBuilder
from dirsnap.snapshot_writer import SnapshotWriter

GITIGNORE_NAME = ".gitignore"


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing the directory, file and symlink counts.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    return "\n".join(
        [
            f"Directories: {counts['directories']}",
            f"Files: {counts['files']}",
            f"Symlinks: {counts['symlinks']}",
        ]
    )


def reserved_name_for(output_dir: Path, project_root: Path) -> str:
    """Name of the output directory relative to the project root.

    An output directory outside the project is reserved by its base name.

    Raises:
        ValueError: If the output directory is the project root itself.
    """
    if output_dir == project_root:
        raise ValueError(f"Output directory cannot be the project root: {output_dir}")
    try:
        return output_dir.relative_to(project_root).as_posix()
    except ValueError:
        return output_dir.name


def configure_collation() -> None:
    """Order names according to the user's locale, keeping the C locale if it is unavailable."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error:
        pass


def main() -> None:
    """Main entry point for the dirsnap command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe while writing to stdout
    """
    configure_collation()

    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = create_parser().parse_args()

    def report(message: str) -> None:
        if not args.quiet:
            print(message, file=sys.stderr)

    try:
        validate_args(args)

        if args.directory is not None:
            project_root = args.directory.resolve()
        else:
            project_root = find_project_root(Path.cwd())
        output_dir = (args.output_dir or project_root / DEFAULT_RESERVED_NAME).resolve()

        report("Creating snapshot...")
        report(f"Project root: {project_root}")
        if not project_root.exists():
            raise FileNotFoundError(f"Root path does not exist: {project_root}")
        if not project_root.is_dir():
            raise NotADirectoryError(f"Root path is not a directory: {project_root}")

        ignore_rules = SnapshotIgnoreExclusionRules()
        gitignore = project_root / GITIGNORE_NAME
        if not args.no_gitignore and gitignore.is_file():
            ignore_rules.load_rules(gitignore)
        apply_exclusion_sources(ignore_rules, args.exclusions or [])
        report(f"Found {len(ignore_rules.rules)} ignore patterns")

        builder = SnapshotBuilder(
            project_root,
            exclusion_rules=compile_matcher(
                reserved_name=reserved_name_for(output_dir, project_root), ignore_rules=ignore_rules
            ),
            permission_action=PermissionAction.IGNORE if args.permission_action == "ignore" else PermissionAction.RAISE,
        )

        writer: Optional[SnapshotWriter] = None
        if not args.stdout:
            # The output directory is part of the walked tree from the first run on
            writer = SnapshotWriter(output_dir)
            writer.prepare()

        # One instant for the header, the folder and the filename
        now = datetime.now()
        document = builder.build(now)

        if writer is None:
            sys.stdout.write(document)
            sys.stdout.flush()
        else:
            path = writer.write(document, now, builder.output_strategy.get_file_extension())
            report(f"Snapshot saved to: {path}")
            report("Snapshot created successfully!")

        if args.summary:
            count_output_str = format_counts(
                {
                    "directories": builder.directory_count,
                    "files": builder.file_count,
                    "symlinks": builder.symlink_count,
                }
            )
            print(count_output_str, file=sys.stdout if args.summary == "stdout" else sys.stderr)

    except BrokenPipeError:
        # Keep the interpreter from complaining again while flushing at exit
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
