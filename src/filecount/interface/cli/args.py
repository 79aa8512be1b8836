from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

from filecount import __version__

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the filecount CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="filecount",
        description="Count files and directories beneath one or more paths.",
    )

    p.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Directories to count (default: current directory).",
    )

    # --- Traversal Flags ---
    # Tri-state: None means "keep the configured value"
    p.add_argument(
        "-r", "--recursive",
        dest="recursive",
        action="store_true",
        default=None,
        help="Descend into subdirectories.",
    )
    p.add_argument(
        "-n", "--no-recursive",
        dest="recursive",
        action="store_false",
        default=None,
        help="Count only the immediate children of each PATH.",
    )
    p.add_argument(
        "-a", "--hidden",
        dest="include_hidden",
        action="store_true",
        default=None,
        help="Include hidden entries.",
    )
    p.add_argument(
        "--no-hidden",
        dest="include_hidden",
        action="store_false",
        default=None,
        help="Skip hidden entries.",
    )
    p.add_argument(
        "-q", "--quiet",
        dest="quiet",
        action="store_true",
        default=None,
        help="Suppress diagnostics for unreadable entries.",
    )
    p.add_argument(
        "--no-quiet",
        dest="quiet",
        action="store_false",
        default=None,
        help="Report unreadable entries.",
    )
    p.add_argument(
        "--skip-long-paths",
        dest="skip_long_paths",
        action="store_true",
        default=None,
        help="Skip over-long paths instead of abandoning their directory.",
    )
    p.add_argument(
        "--abort-on-long-paths",
        dest="skip_long_paths",
        action="store_false",
        default=None,
        help="Abandon the rest of a directory on an over-long path.",
    )
    p.add_argument(
        "--max-path-length",
        dest="max_path_length",
        type=int,
        default=None,
        help="Override the platform path-length limit.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective flags as the new defaults.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print results as JSON.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Flags the user did not pass map to None and are skipped by the merge.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    return {
        "recursive": args.recursive,
        "include_hidden": args.include_hidden,
        "quiet": args.quiet,
        "skip_long_paths": args.skip_long_paths,
        "max_path_length": args.max_path_length,
    }
