"""Command-line interface for project-tree.

This module provides the `project-tree` command, which prints the tree of a
directory, optionally writes it to a file and copies it to the clipboard.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    # Tree of the current directory, root name included
    $ project-tree -r

    # Display version information
    $ project-tree --version
"""

import os
import sys

import pyperclip

from project_tree.cli.argparser import create_parser, resolve_ignore_patterns, resolve_stop_patterns, validate_args
from project_tree.cli.safe_writer import SafeWriter
from project_tree.file_system_tree.gitignore_policy import GitignorePolicy
from project_tree.file_system_tree.tree_scanner import TreeScanner


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    A missing clipboard mechanism (e.g. on a headless machine) is reported as a
    warning rather than an error.

    Returns:
        True if the text was copied, False otherwise.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        print(f"Warning: Could not copy to clipboard: {e}", file=sys.stderr)
        return False
    return True


def main() -> None:
    """Main entry point for the project-tree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    try:
        parser = create_parser()
        args = parser.parse_args()
        validate_args(args)

        scanner = TreeScanner(
            ignore_patterns=resolve_ignore_patterns(args),
            stop_patterns=resolve_stop_patterns(args),
            prioritize_directories=args.dirs,
            gitignore_policy=GitignorePolicy(args.gitignore),
        )
        tree = scanner.get_tree_representation(args.directory, include_root=args.root)

        with SafeWriter(sys.stdout.fileno()) as safe_writer:
            safe_writer.write(tree + "\n")

        if args.output:
            with SafeWriter(args.output) as file_writer:
                file_writer.write(tree)

        if not args.noclip:
            copy_to_clipboard(tree)

    except BrokenPipeError:
        # Keep the interpreter from complaining while flushing stdout at exit
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
