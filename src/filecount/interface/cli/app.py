from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration resolution
(defaults, persisted file and CLI overrides), counting each requested root
and rendering the results.
"""

import json
import os
import sys
from typing import Any, Dict, List, Optional, Tuple

from filecount.core.counter import DirectoryCounter
from filecount.core.validator import validate_config
from filecount.domain.config import get_default_config, load_config, save_config
from filecount.domain.models import CountResult, TraversalConfig
from filecount.infra.fs import normalize_path
from filecount.infra.logging import LoggingConfig, configure_logging, get_logger
from filecount.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: 0 when every root was counted cleanly, 1 when any failure was
             absorbed, 130 when interrupted.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # Diagnostics are WARNING records, so the default level keeps them visible
    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=None))

    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.save_config:
        save_config(clean_conf)

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    counter = DirectoryCounter(TraversalConfig.from_dict(clean_conf))
    roots = args.paths or [os.curdir]

    results: List[Tuple[str, CountResult]] = []
    try:
        for root in roots:
            logger.debug(f"Targeting directory: {normalize_path(root, os.curdir)}")
            results.append((root, counter.count(root)))
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    if args.json_output:
        print(json.dumps(_results_payload(results), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(results)

    return 0 if all(r.ok for _, r in results) else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys with a non-None value are merged.
    """
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _results_payload(results: List[Tuple[str, CountResult]]) -> List[Dict[str, Any]]:
    payload = []
    for root, result in results:
        entry: Dict[str, Any] = {"path": root}
        entry.update(result.to_dict())
        payload.append(entry)
    return payload


def _print_human_summary(results: List[Tuple[str, CountResult]]) -> None:
    """Print one line per root, plus a total when several roots were given."""
    for root, result in results:
        print(f"{root}: {result.files} files, {result.directories} directories")

    if len(results) > 1:
        files = sum(r.files for _, r in results)
        dirs = sum(r.directories for _, r in results)
        print(f"total: {files} files, {dirs} directories")


if __name__ == "__main__":
    sys.exit(main())
