from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the shelltree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="shelltree",
        description=(
            "Rebuild a filesystem tree from a shell transcript and report "
            "directory size statistics."
        ),
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="transcript_path",
        default=None,
        help="Transcript file with '$ cd' / '$ ls' commands and their output.",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration overrides.",
    )

    # --- Query parameters ---
    p.add_argument(
        "--threshold",
        dest="size_threshold",
        type=int,
        default=None,
        help="Maximum size of the directories summed by the small-directory query.",
    )
    p.add_argument(
        "--capacity",
        dest="device_capacity",
        type=int,
        default=None,
        help="Total device capacity.",
    )
    p.add_argument(
        "--required",
        dest="required_free_space",
        type=int,
        default=None,
        help="Free space required on the device.",
    )

    # --- Output ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the reconstructed tree.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the result as JSON.",
    )

    # --- Diagnostics ---
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
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this rotating file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration overrides dict.

    Options left unset map to None so they do not mask lower-precedence
    sources when merged.
    """
    overrides: Dict[str, Any] = {
        "transcript_path": args.transcript_path,
        "size_threshold": args.size_threshold,
        "device_capacity": args.device_capacity,
        "required_free_space": args.required_free_space,
    }
    if args.print_tree:
        overrides["render_tree"] = True
    return overrides
