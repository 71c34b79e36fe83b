from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from filetree_markup.infra.logging import get_default_log_path
from filetree_markup.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the filetree-markup CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="filetree-markup",
        description=i18n.t("app.description"),
    )

    # --- Input / Output ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help=i18n.t("cli.args.input"),
    )
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help=i18n.t("cli.args.output"),
    )

    # --- Rendering ---
    p.add_argument(
        "--locale",
        default=None,
        help=i18n.t("cli.args.locale"),
    )
    p.add_argument(
        "--label",
        dest="directory_label",
        default=None,
        help=i18n.t("cli.args.label"),
    )
    p.add_argument(
        "--definitions",
        dest="definitions_path",
        default=None,
        help=i18n.t("cli.args.definitions"),
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        nargs="?",
        const="",
        default=None,
        metavar="PATH",
        help=i18n.t("cli.args.log_file"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse namespace into configuration overrides.

    Only options given on the command line are returned.
    """
    overrides: Dict[str, Any] = {}

    if args.locale:
        overrides["locale"] = args.locale.strip()
    if args.directory_label is not None:
        overrides["directory_label"] = args.directory_label
    if args.definitions_path:
        overrides["definitions_path"] = args.definitions_path
    if args.debug:
        overrides["log_level"] = "DEBUG"
    if args.log_file is not None:
        overrides["log_file"] = args.log_file or get_default_log_path()

    return overrides
