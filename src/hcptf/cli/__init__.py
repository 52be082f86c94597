"""
Command-line entry point for hcptf.

Usage:
    hcptf <command> <verb> [-flag=value ...]
    hcptf acme                        Show an organization
    hcptf acme workspaces             List its workspaces
    hcptf acme prod runs              List runs in a workspace
    hcptf acme prod run-abc123 apply  Apply a run
    hcptf acme prod -h                Show what a workspace address can reach
    hcptf route acme prod runs        Show a translation without running it
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from hcptf.catalog import COMMAND_PATHS
from hcptf.cli.dispatch import dispatch_command, get_handler, register_handler
from hcptf.cli.normalize import build_get_verb_index, normalize_args
from hcptf.cli.utils import print_error, print_warning
from hcptf.config import Config, ConfigError
from hcptf.exceptions import AmbiguousOperationError, ConfigurationError, ResourceNotFoundError
from hcptf.logging import enable_verbose, is_valid_level
from hcptf.router.command_tree import CommandTree
from hcptf.router.keywords import KeywordTable
from hcptf.router.router import Router
from hcptf.router.validation import APIResourceValidator

__all__ = ["main", "build_router", "register_handler", "get_handler"]

logger = logging.getLogger(__name__)


def build_router(config: Config, validator=None) -> Router:
    """Build a router over the command catalog, honoring router config."""
    tree = CommandTree(COMMAND_PATHS)
    keywords = KeywordTable.from_command_paths(
        COMMAND_PATHS, passthrough_tokens=("help", *config.router.passthrough)
    )
    return Router(tree=tree, keywords=keywords, validator=validator)


def _configure_logging(config: Config) -> None:
    level = os.environ.get("HCPTF_LOG", "")
    if level and is_valid_level(level):
        enable_verbose(level)
    elif config.defaults.verbose:
        enable_verbose("DEBUG")


def _validate(router: Router, decision, config: Config) -> int:
    """Check the addressed organization/workspace exist. Returns an exit code."""
    mode = config.router.validation
    try:
        router.validate(decision, timeout=config.api.timeout)
    except ResourceNotFoundError as e:
        if mode == "strict":
            print_error(e)
            return 1
        print_warning(e.message)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the hcptf command."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = Config.load()
    except (ConfigError, ConfigurationError) as e:
        print_error(e)
        return 1

    _configure_logging(config)

    validator = None
    if config.router.validation != "off":
        validator = APIResourceValidator(config.address, Config.token(), config.api.timeout)

    try:
        router = build_router(config, validator=validator)
        decision = router.resolve(argv)

        index = build_get_verb_index(COMMAND_PATHS)
        try:
            args = normalize_args(decision.args, router.tree, index)
        except AmbiguousOperationError as e:
            print_error(e)
            return 1

        if validator is not None and decision.rewritten:
            code = _validate(router, decision, config)
            if code:
                return code

        return dispatch_command(args, router, index, output_format=config.defaults.output_format)
    finally:
        if validator is not None:
            validator.close()


if __name__ == "__main__":
    sys.exit(main())
