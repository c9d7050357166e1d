"""Command-line argument parsing for project-tree.

This module defines the command-line interface for project-tree,
handling argument parsing and resolution of the default exclusions.
"""

import argparse
from pathlib import Path
from typing import List

from project_tree import __version__
from project_tree.file_system_tree.gitignore_policy import GitignorePolicy


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with project-tree's options.
    """
    description = """
    project-tree: A simple ASCII file tree generator.

    Prints the directory tree of a project, leaving out version control and editor
    folders and not descending into dependency or build output folders. Entries
    matched by .gitignore files are dimmed and not descended into by default. The
    tree is also copied to the clipboard.
    """

    epilog = """
    Examples:
      # Tree of the current directory
      project-tree

      # Include the root directory name and list directories first
      project-tree -r -d

      # Leave out a file and do not descend into a directory
      project-tree -i src/generated.rs -s docs

      # Remove .gitignore matches instead of dimming them
      project-tree -g ignore

      # Write the tree to a file without touching the clipboard
      project-tree -o TREE.txt --noclip
    """

    parser = argparse.ArgumentParser(
        prog="project-tree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"project-tree {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="The directory to render (default: the current directory).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="FILE",
        action="append",
        default=[],
        help=(
            "Path or filename to leave out of the tree. Paths may be written as ./src/main.rs, "
            "src/main.rs or just main.rs (can be specified multiple times)."
        ),
    )
    parser.add_argument(
        "-s",
        "--stop",
        metavar="FILE",
        action="append",
        default=[],
        help="Directory to list without descending into it (can be specified multiple times).",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Also write the tree to this file.",
    )
    parser.add_argument(
        "-r",
        "--root",
        action="store_true",
        help="Include the root directory name as the first line.",
    )
    parser.add_argument(
        "-d",
        "--dirs",
        action="store_true",
        help="List directories before files.",
    )
    parser.add_argument(
        "-g",
        "--gitignore",
        choices=[policy.value for policy in GitignorePolicy],
        default=GitignorePolicy.DIM_AND_STOP.value,
        help="What to do with entries matched by .gitignore files (default: dim-and-stop).",
    )
    parser.add_argument("--git", action="store_true", help="Show the .git directory.")
    parser.add_argument("--vscode", action="store_true", help="Show the .vscode directory.")
    parser.add_argument(
        "--node-modules",
        action="store_true",
        help="Descend into node_modules directories.",
    )
    parser.add_argument(
        "--target",
        action="store_true",
        help="Descend into the target directory of a Rust project.",
    )
    parser.add_argument(
        "--noclip",
        action="store_true",
        help="Do not copy the tree to the clipboard.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.output is not None and args.output.is_dir():
        raise ValueError(f"Output path is a directory: {args.output}")


def resolve_ignore_patterns(args: argparse.Namespace) -> List[str]:
    """Combine the default ignore list with the user's patterns.

    .git and .vscode are ignored unless --git or --vscode is given.
    """
    patterns = []
    if not args.git:
        patterns.append(".git")
    if not args.vscode:
        patterns.append(".vscode")
    patterns.extend(args.ignore)
    return patterns


def resolve_stop_patterns(args: argparse.Namespace) -> List[str]:
    """Combine the default stop list with the user's patterns.

    node_modules is not descended into unless --node-modules is given. In a Rust
    project (one with a Cargo.toml in the rendered directory) the same holds for
    target unless --target is given.
    """
    patterns = []
    if not args.node_modules:
        patterns.append("node_modules")
    if not args.target and (args.directory / "Cargo.toml").is_file():
        patterns.append("target")
    patterns.extend(args.stop)
    return patterns
