"""Argument normalization applied after URL-style routing.

Two rewrites run on the routed argument vector before dispatch:

- ``infer_implicit_get_verb``: ``hcptf workspace -org=acme`` becomes
  ``hcptf workspace list -org=acme`` and ``hcptf workspace -name=prod``
  becomes ``hcptf workspace read -name=prod``.
- ``normalize_delete_confirmation_flags``: ``-f`` and ``-y`` on a delete
  command become ``-force``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from hcptf.exceptions import AmbiguousOperationError
from hcptf.router.command_tree import CommandTree, tokenize
from hcptf.router.keywords import HELP_MARKERS

GET_VERBS = ("list", "read", "show")

# Flags that select a single resource
IDENTITY_FLAGS = ("id", "name")

# Flags that say nothing about single vs. collection
NEUTRAL_FLAGS = frozenset({"id", "name", "h", "help", "output", "o"})


@dataclass
class GetVerbs:
    """Which get verbs a namespace provides."""

    has_list: bool = False
    has_read: bool = False
    has_show: bool = False

    def available(self) -> list[str]:
        """Available verbs in display order."""
        verbs = []
        if self.has_list:
            verbs.append("list")
        if self.has_show:
            verbs.append("show")
        if self.has_read:
            verbs.append("read")
        return verbs


def build_get_verb_index(command_paths: Iterable[str]) -> dict[str, GetVerbs]:
    """Map each namespace to the get verbs registered under it."""
    index: dict[str, GetVerbs] = {}
    for path in command_paths:
        tokens = tokenize(path)
        if len(tokens) < 2 or tokens[-1] not in GET_VERBS:
            continue
        namespace = " ".join(tokens[:-1])
        verbs = index.setdefault(namespace, GetVerbs())
        setattr(verbs, f"has_{tokens[-1]}", True)
    return index


def has_help_flag(args: Sequence[str]) -> bool:
    return any(arg in HELP_MARKERS for arg in args)


def first_flag_index(args: Sequence[str]) -> int:
    """Index of the first flag, or len(args) if there is none."""
    for i, arg in enumerate(args):
        if arg.startswith("-"):
            return i
    return len(args)


def flag_name(flag: str) -> str:
    """``--org=acme`` -> ``org``."""
    return flag.lstrip("-").split("=", 1)[0]


def has_identity_selector(flags: Sequence[str]) -> bool:
    for i, flag in enumerate(flags):
        if not flag.startswith("-"):
            continue
        name = flag_name(flag)
        if name not in IDENTITY_FLAGS:
            continue
        if "=" in flag:
            return True
        # "-id value" form
        if i + 1 < len(flags) and not flags[i + 1].startswith("-"):
            return True
    return False


def has_collection_selector(flags: Sequence[str]) -> bool:
    return any(flag.startswith("-") and flag_name(flag) not in NEUTRAL_FLAGS for flag in flags)


def choose_implicit_get_verb(
    namespace: str, flags: Sequence[str], verbs: GetVerbs
) -> str | None:
    """Pick a get verb from the flags given.

    Returns None when the namespace has no get verbs.

    Raises:
        AmbiguousOperationError: If several verbs fit equally well
    """
    available = verbs.available()
    if not available:
        return None
    if len(available) == 1:
        return available[0]

    if has_identity_selector(flags):
        if verbs.has_read:
            return "read"
        if verbs.has_show:
            return "show"

    if verbs.has_list and has_collection_selector(flags):
        return "list"

    raise AmbiguousOperationError(namespace, available)


def infer_implicit_get_verb(args: Sequence[str], index: dict[str, GetVerbs]) -> list[str]:
    """Insert a get verb when the positional tokens name only a namespace.

    Raises:
        AmbiguousOperationError: If the namespace has several get verbs and
            the flags do not pick one
    """
    args = list(args)
    if not args or not index:
        return args
    if args[0].startswith("-") or has_help_flag(args):
        return args

    split = first_flag_index(args)
    tokens = args[:split]
    if not tokens:
        return args

    # Only a bare namespace gets a verb; "workspace lock" is left alone
    namespace = " ".join(tokens)
    if namespace not in index:
        return args

    verb = choose_implicit_get_verb(namespace, args[split:], index[namespace])
    if verb is None:
        return args

    return [*tokens, verb, *args[split:]]


def normalize_delete_confirmation_flags(args: Sequence[str], tree: CommandTree) -> list[str]:
    """Rewrite ``-f``/``-y`` to ``-force`` on delete commands."""
    args = list(args)
    if not args or args[0].startswith("-") or has_help_flag(args):
        return args

    split = first_flag_index(args)
    tokens = args[:split]

    command: tuple[str, ...] = ()
    for i in range(len(tokens), 0, -1):
        if tree.has_path(tokens[:i]):
            command = tuple(tokens[:i])
            break
    if not command or command[-1] != "delete":
        return args

    return args[:split] + ["-force" if arg in ("-f", "-y") else arg for arg in args[split:]]


def normalize_args(
    args: Sequence[str], tree: CommandTree, index: dict[str, GetVerbs]
) -> list[str]:
    """Run the full post-routing pipeline.

    Raises:
        AmbiguousOperationError: From implicit verb inference
    """
    inferred = infer_implicit_get_verb(args, index)
    return normalize_delete_confirmation_flags(inferred, tree)
