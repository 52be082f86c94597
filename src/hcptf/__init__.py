"""
hcptf: URL-style command-line client for HCP Terraform and Terraform Enterprise.

Resources can be addressed positionally instead of with fully-qualified
subcommands::

    hcptf acme                      # organization show -name=acme
    hcptf acme workspaces           # workspace list -org=acme
    hcptf acme prod runs            # run list -org=acme -workspace=prod
    hcptf acme prod run-abc123 plan # plan read -id=run-abc123

Modules:
    router: Argument routing engine (command registry, rewrite rules)
    catalog: Static list of canonical command paths
    cli: Command-line entry point, normalization and dispatch
    config: Configuration file loading
    exceptions: Error hierarchy

Quick Start::

    from hcptf import Router, command_paths

    router = Router(command_paths())
    router.translate_args(["acme", "prod", "runs"])
    # ['run', 'list', '-org=acme', '-workspace=prod']
"""

import logging as _logging

__version__ = "0.5.0"

# Empty for a release build
__version_prerelease__ = "dev"


def get_version() -> str:
    """Version string as printed by `hcptf version`, e.g. `0.5.0-dev`."""
    if __version_prerelease__:
        return f"{__version__}-{__version_prerelease__}"
    return __version__


_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from hcptf.catalog import COMMAND_PATHS, command_paths
from hcptf.exceptions import (
    AmbiguousOperationError,
    ConfigurationError,
    HcptfError,
    ResourceNotFoundError,
)
from hcptf.router import CommandTree, KeywordTable, RouteDecision, Router

__all__ = [
    # Version
    "__version__",
    "get_version",
    # Catalog
    "COMMAND_PATHS",
    "command_paths",
    # Routing
    "CommandTree",
    "KeywordTable",
    "Router",
    "RouteDecision",
    # Errors
    "HcptfError",
    "ResourceNotFoundError",
    "AmbiguousOperationError",
    "ConfigurationError",
]
