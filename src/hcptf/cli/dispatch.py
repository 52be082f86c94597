"""
Command dispatch for the hcptf CLI.

Local built-ins (``version``, ``config``, ``route`` and the two context
commands) are handled here. Every other catalog command runs whatever handler
has been installed for its path with ``register_handler``:

    from hcptf.cli.dispatch import register_handler

    @register_handler("workspace list")
    def workspace_list(argv: list[str]) -> int:
        ...
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, Union

from hcptf import get_version
from hcptf.cli.normalize import GetVerbs
from hcptf.cli.utils import get_console, print_error
from hcptf.exceptions import HcptfError
from hcptf.router.command_tree import tokenize
from hcptf.router.keywords import HELP_MARKERS
from hcptf.router.router import Router

logger = logging.getLogger(__name__)

Handler = Callable[[list[str]], int]

VERSION_FLAGS = ("-v", "--version", "-version", "version")

EXIT_UNKNOWN_COMMAND = 127

# Handlers keyed by canonical command path
_handlers: dict[tuple[str, ...], Handler] = {}


def register_handler(
    path: Union[str, Sequence[str]], handler: Handler | None = None
) -> Union[Handler, Callable[[Handler], Handler]]:
    """Install a handler for a canonical command path.

    Usable directly, ``register_handler("run list", fn)``, or as a decorator.
    A later registration for the same path replaces the earlier one.
    """
    key = tokenize(path) if isinstance(path, str) else tuple(path)

    def decorator(fn: Handler) -> Handler:
        _handlers[key] = fn
        return fn

    if handler is not None:
        return decorator(handler)
    return decorator


def get_handler(path: Union[str, Sequence[str]]) -> Handler | None:
    key = tokenize(path) if isinstance(path, str) else tuple(path)
    return _handlers.get(key)


def clear_handlers() -> None:
    """Remove every registered handler."""
    _handlers.clear()


def print_usage(router: Router) -> None:
    console = get_console()
    console.print("usage: hcptf <command> [<verb>] [-flag=value ...]")
    console.print("       hcptf <org> [<workspace>] [<collection> | <run-id> [<action>]]")
    console.print()
    if router.tree is not None:
        console.print("Commands:")
        for root in router.tree.roots:
            console.print(f"  {root}")
        console.print()
    console.print("Run 'hcptf <org> -h' to see what an address can reach.")


def print_namespace_help(router: Router, path: Sequence[str]) -> None:
    """List the sub-commands registered below a namespace."""
    namespace = " ".join(path)
    console = get_console()
    console.print(f"usage: hcptf {namespace} <subcommand> [-flag=value ...]")
    console.print()
    console.print("Subcommands:")
    for child in router.tree.children(path):
        console.print(f"  {child}")


def _leading_tokens(args: Sequence[str]) -> list[str]:
    tokens: list[str] = []
    for arg in args:
        if arg.startswith("-"):
            break
        tokens.append(arg)
    return tokens


def _match_command(args: Sequence[str], router: Router) -> tuple[str, ...]:
    """Longest catalog path formed by the leading non-flag tokens."""
    if router.tree is None:
        return ()
    tokens = _leading_tokens(args)
    for i in range(len(tokens), 0, -1):
        if router.tree.has_path(tokens[:i]):
            return tuple(tokens[:i])
    return ()


def _namespace_help(args: Sequence[str], router: Router) -> tuple[str, ...]:
    """The namespace ``args`` asks help for, e.g. ``team -h``; else ()."""
    if router.tree is None:
        return ()
    tokens = _leading_tokens(args)
    tail = args[len(tokens) :]
    if not tokens or not tail or not all(arg in HELP_MARKERS for arg in tail):
        return ()
    if tuple(tokens) in _handlers or not router.tree.children(tokens):
        return ()
    return tuple(tokens)


def dispatch_command(
    args: Sequence[str],
    router: Router,
    index: dict[str, GetVerbs],
    output_format: str = "table",
) -> int:
    """Run the command named by a routed, normalized argument vector."""
    args = list(args)

    if not args or (len(args) == 1 and args[0] in HELP_MARKERS):
        print_usage(router)
        return 0

    command, rest = args[0], args[1:]

    if command in VERSION_FLAGS:
        print(f"hcptf {get_version()}")
        return 0

    if command == "organization:context":
        from .context_cmd import organization_main

        return organization_main(rest, keywords=router.keywords)

    elif command == "workspace:context":
        from .context_cmd import workspace_main

        return workspace_main(rest, keywords=router.keywords)

    elif command == "route":
        from .route_cmd import main as route_cmd

        return route_cmd(rest, router, index, output_format=output_format)

    elif command == "config":
        from .config_cmd import main as config_cmd

        return config_cmd(rest)

    namespace = _namespace_help(args, router)
    if namespace:
        print_namespace_help(router, namespace)
        return 0

    path = _match_command(args, router)
    if not path:
        print_error(
            HcptfError(
                f"unknown command: {command}",
                suggestions=["Run 'hcptf route <args>' to see how arguments are translated"],
            )
        )
        return EXIT_UNKNOWN_COMMAND

    handler = _handlers.get(path)
    if handler is None:
        print_error(
            HcptfError(
                f"no handler installed for '{' '.join(path)}'",
                context={"args": " ".join(args)},
            )
        )
        return 1

    logger.debug(f"Dispatching {' '.join(path)} with {args[len(path):]}")
    return handler(args[len(path) :])

