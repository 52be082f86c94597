"""Ordered rewrite rules for URL-style arguments.

Each rule inspects an ``Address`` (the leading positional tokens of the
argument vector plus everything after them) and either returns a rewritten
argument list or ``None`` to let the next rule try. The first rule that
returns a list wins; if none does, the arguments pass through unchanged.

Order is precedence. Collection keywords are always tried before a token is
read as a literal organization or workspace name, so an organization named
``teams`` is only reachable through ``organization show -name=teams``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from hcptf.router.command_tree import CommandTree, has_root, tokenize
from hcptf.router.keywords import KeywordTable


class Scope(Enum):
    """What part of an address a rule consumed."""

    NONE = "none"
    ORGANIZATION = "organization"
    WORKSPACE = "workspace"


@dataclass(frozen=True)
class Address:
    """An argument vector split into positional address and trailing tokens.

    ``tokens`` holds the leading arguments that do not start with ``-``;
    ``remaining`` holds the first flag and everything after it. Remaining
    tokens are appended verbatim to any rewrite.
    """

    args: tuple[str, ...]
    tokens: tuple[str, ...]
    remaining: tuple[str, ...]

    @classmethod
    def parse(cls, args: Sequence[str]) -> "Address":
        args = tuple(args)
        split = len(args)
        for i, arg in enumerate(args):
            if arg.startswith("-"):
                split = i
                break
        return cls(args=args, tokens=args[:split], remaining=args[split:])

    @property
    def org(self) -> str:
        return self.tokens[0]

    @property
    def workspace(self) -> str:
        return self.tokens[1]

    def depth(self) -> int:
        return len(self.tokens)


@dataclass(frozen=True)
class RuleContext:
    """Read-only routing configuration shared by all rules."""

    tree: Optional[CommandTree]
    keywords: KeywordTable

    def is_verb(self, namespace: str, verb: str) -> bool:
        """True if ``namespace verb`` is a registered command.

        Without a registry every verb is trusted.
        """
        if self.tree is None:
            return True
        return self.tree.has_path((namespace, verb))

    def help_only(self, address: Address) -> bool:
        """True if the trailing tokens are nothing but help markers."""
        return bool(address.remaining) and all(
            self.keywords.is_help(token) for token in address.remaining
        )


RuleFn = Callable[[Address, RuleContext], Optional[list[str]]]


@dataclass(frozen=True)
class Rule:
    name: str
    scope: Scope
    apply: RuleFn


def _passthrough(address: Address, ctx: RuleContext) -> list[str] | None:
    if not address.args:
        return []
    first = address.args[0]
    if (
        first.startswith("-")
        or not first.strip()
        or first in ctx.keywords.passthrough_tokens
        or has_root(ctx.tree, first)
    ):
        return list(address.args)
    return None


def _organization_context(address: Address, ctx: RuleContext) -> list[str] | None:
    if address.depth() == 1 and ctx.help_only(address):
        return ["organization:context", f"-org={address.org}"]
    return None


def _organization(address: Address, ctx: RuleContext) -> list[str] | None:
    if address.depth() == 1:
        return ["organization", "show", f"-name={address.org}", *address.remaining]
    return None


def _org_collection_help(address: Address, ctx: RuleContext) -> list[str] | None:
    if address.depth() != 2 or not ctx.help_only(address):
        return None
    namespace = ctx.keywords.org_collections.get(address.tokens[1])
    if namespace is None:
        return None
    return [namespace, *address.remaining]


def _org_collection(address: Address, ctx: RuleContext) -> list[str] | None:
    namespace = ctx.keywords.org_collections.get(address.tokens[1])
    if namespace is None:
        return None

    org_flag = f"-org={address.org}"
    if address.depth() == 2:
        return [namespace, "list", org_flag, *address.remaining]

    verb = address.tokens[2]
    if not ctx.is_verb(namespace, verb):
        return None
    return [namespace, verb, org_flag, *address.tokens[3:], *address.remaining]


def _org_keyword_guard(address: Address, ctx: RuleContext) -> list[str] | None:
    # An org-level keyword never names a workspace
    if address.tokens[1] in ctx.keywords.org_collections:
        return list(address.args)
    return None


def _workspace_context(address: Address, ctx: RuleContext) -> list[str] | None:
    # "acme tags -h" is a workspace named tags plus a help flag, not context help
    if ctx.keywords.is_resource_keyword(address.workspace):
        return None
    if address.depth() == 2 and ctx.help_only(address):
        return [
            "workspace:context",
            f"-org={address.org}",
            f"-workspace={address.workspace}",
        ]
    return None


def _workspace(address: Address, ctx: RuleContext) -> list[str] | None:
    if address.depth() == 2:
        return [
            "workspace",
            "read",
            f"-org={address.org}",
            f"-name={address.workspace}",
            *address.remaining,
        ]
    return None


def _workspace_collection(address: Address, ctx: RuleContext) -> list[str] | None:
    if address.depth() not in (3, 4):
        return None
    keyword = address.tokens[2]
    namespace = ctx.keywords.workspace_collections.get(keyword)
    if namespace is None:
        return None

    verb = "list"
    if address.depth() == 4:
        verb = address.tokens[3]
        if verb != "list" and verb not in ctx.keywords.collection_verbs.get(keyword, ()):
            return None

    # Some namespaces span two tokens ("workspace resource")
    return [
        *tokenize(namespace),
        verb,
        f"-org={address.org}",
        f"-workspace={address.workspace}",
        *address.remaining,
    ]


def _run_route(
    address: Address, ctx: RuleContext, run_id: str, rest: tuple[str, ...]
) -> list[str] | None:
    """Resolve ``<run-id> [action [extra...]]`` through the run action table."""
    if not rest:
        return ["run", "show", f"-id={run_id}", *address.remaining]

    action, extra = rest[0], rest[1:]
    entry = ctx.keywords.run_actions.get(action)
    if entry is not None:
        flags = entry.flags(address.org, address.workspace, run_id)
        return [entry.namespace, entry.verb, *flags, *extra, *address.remaining]

    if ctx.is_verb("run", action):
        return ["run", action, f"-id={run_id}", *extra, *address.remaining]
    return None


def _long_run(address: Address, ctx: RuleContext) -> list[str] | None:
    if address.depth() < 4:
        return None
    if ctx.keywords.workspace_collections.get(address.tokens[2]) != "run":
        return None
    return _run_route(address, ctx, address.tokens[3], address.tokens[4:])


def _short_run(address: Address, ctx: RuleContext) -> list[str] | None:
    if address.depth() < 3 or not ctx.keywords.is_run_id(address.tokens[2]):
        return None
    return _run_route(address, ctx, address.tokens[2], address.tokens[3:])


RULES: tuple[Rule, ...] = (
    Rule("passthrough", Scope.NONE, _passthrough),
    Rule("organization-context", Scope.ORGANIZATION, _organization_context),
    Rule("organization", Scope.ORGANIZATION, _organization),
    Rule("org-collection-help", Scope.ORGANIZATION, _org_collection_help),
    Rule("org-collection", Scope.ORGANIZATION, _org_collection),
    Rule("org-keyword-guard", Scope.NONE, _org_keyword_guard),
    Rule("workspace-context", Scope.WORKSPACE, _workspace_context),
    Rule("workspace", Scope.WORKSPACE, _workspace),
    Rule("workspace-collection", Scope.WORKSPACE, _workspace_collection),
    Rule("long-run", Scope.WORKSPACE, _long_run),
    Rule("short-run", Scope.WORKSPACE, _short_run),
)


def match(
    address: Address, ctx: RuleContext, rules: Sequence[Rule] = RULES
) -> tuple[Rule, list[str]] | None:
    """Return the first rule that rewrites ``address`` and its result."""
    for rule in rules:
        result = rule.apply(address, ctx)
        if result is not None:
            return rule, result
    return None
