from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Bootstraps logging, resolves the configuration hierarchy (defaults, config
file, command-line overrides), runs the file tree transformation and writes
the result.
"""

import os
import sys
from typing import Any, Dict, List, Optional

from filetree_markup.core.pipeline.engine import process_file_tree
from filetree_markup.core.pipeline.stages.validator import FileTreeValidationError
from filetree_markup.domain.config import ConfigError, get_default_config, load_config, load_definitions
from filetree_markup.infra.fs import STDIO_PATH, read_text, write_text
from filetree_markup.infra.logging import LoggingConfig, configure_logging, get_logger
from filetree_markup.interface.cli import args as cli_args
from filetree_markup.utils.i18n import get_directory_label, i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID_TREE = 1
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Exit code (0 success, 1 invalid file tree, 2 bad input, output
        or configuration, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    overrides = cli_args.args_to_overrides(args)
    config = _merge_config(load_config(args.config_path), overrides)

    configure_logging(LoggingConfig.from_settings(config))
    logger.debug(f"Effective configuration: {config}")

    if config.get("locale") and config["locale"] != i18n.locale:
        i18n.load_locale(config["locale"])

    input_path = args.input_path
    if input_path and input_path != STDIO_PATH and not os.path.exists(input_path):
        return _fail(i18n.t("cli.errors.path_not_exist", path=input_path), EXIT_BAD_INPUT)

    try:
        definitions = load_definitions(config["definitions_path"])
    except ConfigError as e:
        return _fail(i18n.t("cli.errors.config", error=str(e)), EXIT_BAD_INPUT)

    directory_label = resolve_directory_label(config)

    try:
        html = read_text(input_path)
        output = process_file_tree(html, directory_label, definitions=definitions)
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except (OSError, UnicodeDecodeError) as e:
        msg = i18n.t("cli.errors.read_failed", path=input_path or STDIO_PATH, error=e)
        return _fail(msg, EXIT_BAD_INPUT)
    except FileTreeValidationError as e:
        return _fail(i18n.t("cli.errors.invalid_tree", error=str(e)), EXIT_INVALID_TREE)

    try:
        write_text(args.output_path, output)
    except (OSError, UnicodeEncodeError) as e:
        msg = i18n.t("cli.errors.write_failed", path=args.output_path or STDIO_PATH, error=e)
        return _fail(msg, EXIT_BAD_INPUT)

    if args.output_path and args.output_path != STDIO_PATH:
        logger.info(i18n.t("cli.status.written", path=args.output_path))

    return EXIT_OK


def _fail(msg: str, code: int) -> int:
    """Report an error on stderr and return the exit code."""
    logger.debug(msg)
    print(f"ERROR: {msg}", file=sys.stderr)
    return code

# -----------------------------------------------------------------------------
# CONFIGURATION
# -----------------------------------------------------------------------------

def resolve_directory_label(config: Dict[str, Any]) -> str:
    """
    Pick the directory label: explicit label first, then the locale translation.
    """
    label = config.get("directory_label") or ""
    if label.strip():
        return label
    return get_directory_label(config.get("locale") or "en")


def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known override keys into the base configuration."""
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out


if __name__ == "__main__":
    sys.exit(main())
