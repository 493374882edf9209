"""
Command-line interface for the file stash.

Handles argument parsing and orchestrates operations.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config, DEFAULT_CONFIG
from .errors import StashError
from .operations import list_stashes, stash_files, unstash_files
from .store import load_store

COMMANDS = ("stash", "unstash", "list")


def create_parser(config: Config = DEFAULT_CONFIG) -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.
    
    Args:
        config: Configuration to use for names in help text
        
    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="file-stash",
        description="Temporarily move everything in the current directory into a dated stash folder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Commands:
  stash       Stash files and folders in the current directory
  unstash     Restore a stash (today's unless a date is given)
  list        List available stashes

Categories (stash --categorize):
  {', '.join(config.categories)}, {config.default_category}

Layout:
  {config.identifier_prefix}<date>/<category>/<file>   categorized files
  {config.identifier_prefix}<date>/<file>              files with --no-categorize
  {config.identifier_prefix}<date>/<folder>/           folders, always
  {config.sidecar_name}                    stash records

Examples:
  file-stash stash                      # Stash with categorization
  file-stash --no-categorize stash      # Stash without categorization
  file-stash unstash 2024-01-15         # Unstash a specific date
        """
    )
    
    parser.add_argument(
        "command",
        nargs="?",
        help=f"One of: {', '.join(COMMANDS)}"
    )
    
    parser.add_argument(
        "date",
        nargs="?",
        help="Stash date for unstash, e.g. 2024-01-15 (default: today)"
    )
    
    parser.add_argument(
        "--categorize", "-c",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Sort stashed files into category folders by extension"
    )
    
    return parser


def run(
    args: argparse.Namespace,
    config: Config = DEFAULT_CONFIG,
    directory: Optional[Path] = None,
) -> int:
    """
    Run the file stash with the given arguments.
    
    Args:
        args: Parsed command-line arguments
        config: Configuration to use
        directory: Working directory (defaults to the current directory)
        
    Returns:
        Exit code (0 for success, 1 for error)
    """
    if args.command is None:
        print("Error: no command given", file=sys.stderr)
        create_parser(config).print_usage(sys.stderr)
        return 1
    
    if args.command not in COMMANDS:
        print(f"Error: unknown command: {args.command}", file=sys.stderr)
        create_parser(config).print_usage(sys.stderr)
        return 1
    
    if args.date is not None and args.command != "unstash":
        print(f"Error: '{args.command}' does not take a date (got {args.date})", file=sys.stderr)
        return 1
    
    if directory is None:
        directory = Path.cwd()
    
    try:
        store = load_store(directory, config=config)
    except StashError as e:
        print(f"Error loading stash records: {e}", file=sys.stderr)
        return 1
    
    try:
        if args.command == "stash":
            stash_files(store, directory, categorize=args.categorize, config=config)
        elif args.command == "unstash":
            unstash_files(store, directory, requested_date=args.date, config=config)
        else:
            list_stashes(store, config=config)
        return 0
        
    except StashError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.
    
    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])
        
    Returns:
        Exit code
    """
    config = DEFAULT_CONFIG
    parser = create_parser(config)
    args = parser.parse_args(argv)
    return run(args, config)


if __name__ == "__main__":
    sys.exit(main())
