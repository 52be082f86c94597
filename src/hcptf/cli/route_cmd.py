"""
Route command: show how arguments would be translated, without running them.

Usage:
    hcptf route acme prod runs
    hcptf route --json acme prod run-123 apply
    hcptf route --table acme prod   Table output even when defaults.output_format is json
    hcptf route -- acme -h          Pass flags through to the router after "--"
"""

from __future__ import annotations

import json
import sys

from rich.table import Table

from hcptf.cli.normalize import GetVerbs, normalize_args
from hcptf.cli.utils import get_console, print_error
from hcptf.exceptions import AmbiguousOperationError
from hcptf.router.router import Router

USAGE = "usage: hcptf route [--json | --table] [--] <args...>"


def _split_options(argv: list[str]) -> tuple[set[str], list[str]]:
    """Peel route's own options off the front of argv.

    Options stop at "--" or the first token that is not one of ours, so
    everything after can carry flags meant for the routed command.
    """
    options: set[str] = set()
    for i, arg in enumerate(argv):
        if arg == "--":
            return options, argv[i + 1 :]
        if arg in ("--json", "--table", "--help"):
            options.add(arg)
            continue
        return options, argv[i:]
    return options, []


def main(
    argv: list[str],
    router: Router,
    index: dict[str, GetVerbs],
    output_format: str = "table",
) -> int:
    """Entry point for the route command.

    ``output_format`` is the configured default; --json and --table override it.
    """
    options, args = _split_options(argv)
    as_json = "--json" in options or (output_format == "json" and "--table" not in options)

    if "--help" in options or not args:
        print(USAGE)
        print()
        print("Show how URL-style arguments translate into a canonical command.")
        return 0 if "--help" in options else 1

    decision = router.resolve(args)
    error = None
    try:
        normalized = normalize_args(decision.args, router.tree, index)
    except AmbiguousOperationError as e:
        normalized = None
        error = e

    if as_json:
        data = {
            "input": list(decision.original),
            "args": decision.args,
            "normalized": normalized,
            "rule": decision.rule,
            "rewritten": decision.rewritten,
            "organization": decision.organization,
            "workspace": decision.workspace,
        }
        if error is not None:
            data["error"] = error.message
        json.dump(data, sys.stdout, indent=2)
        print()
        return 0 if error is None else 1

    table = Table(show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column()
    table.add_row("input", " ".join(decision.original))
    table.add_row("rule", decision.rule or "(none)")
    table.add_row("routed", " ".join(decision.args))
    if normalized is not None and normalized != decision.args:
        table.add_row("normalized", " ".join(normalized))
    if decision.organization is not None:
        table.add_row("organization", decision.organization)
    if decision.workspace is not None:
        table.add_row("workspace", decision.workspace)
    get_console().print(table)

    if error is not None:
        print_error(error)
        return 1
    return 0
