"""Keyword tables for URL-style argument routing.

A ``KeywordTable`` is immutable configuration handed to the router at
construction. It tells the router which tokens name collections rather
than resources, how run short-syntax actions map onto canonical commands,
and which tokens mark a help request.

Organization-level collections are derived from the same command catalog
that builds the command tree, so adding ``"gpgkey list"`` / ``"gpgkey
delete"`` / ``"gpgkey read"`` to the catalog is enough to make
``hcptf acme gpgkeys`` work.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping

from hcptf.router.command_tree import tokenize


class RunScope(Enum):
    """How a run short-syntax action addresses its target."""

    RUN = "run"  # -id=<run-id>
    RUN_REF = "run-ref"  # -run-id=<run-id>
    WORKSPACE = "workspace"  # -org=<org> -workspace=<workspace>


@dataclass(frozen=True)
class RunAction:
    """Canonical command for one run short-syntax action."""

    namespace: str
    verb: str
    scope: RunScope = RunScope.RUN

    def flags(self, org: str, workspace: str, run_id: str) -> list[str]:
        if self.scope is RunScope.RUN:
            return [f"-id={run_id}"]
        if self.scope is RunScope.RUN_REF:
            return [f"-run-id={run_id}"]
        return [f"-org={org}", f"-workspace={workspace}"]


HELP_MARKERS = ("-h", "-help", "--help")

# Plural keywords valid directly after an organization
ORG_COLLECTIONS = {
    "workspaces": "workspace",
    "projects": "project",
    "teams": "team",
    "policies": "policy",
    "policysets": "policyset",
    "variables": "variable",
    "runs": "run",
    "state": "state",
}

# Org-level keywords whose namespaces do not qualify by verb shape
EXTRA_ORG_COLLECTIONS = {
    "variables": "variable",
    "runs": "run",
    "state": "state",
}

# Keywords valid after organization + workspace
WORKSPACE_COLLECTIONS = {
    "runs": "run",
    "variables": "variable",
    "state": "state",
    "resources": "workspace resource",
    "tags": "workspace tag",
    "configversions": "configversion",
    "assessments": "assessmentresult",
    "changerequests": "changerequest",
}

# Sub-verbs a workspace collection accepts in addition to "list"
COLLECTION_VERBS = {
    "state": frozenset({"outputs"}),
}

RUN_ACTIONS = {
    "show": RunAction("run", "show"),
    "apply": RunAction("run", "apply"),
    "plan": RunAction("plan", "read"),
    "logs": RunAction("plan", "logs"),
    "planlogs": RunAction("plan", "logs"),
    "applylogs": RunAction("apply", "logs"),
    "applyread": RunAction("apply", "read"),
    "applydetails": RunAction("apply", "read"),
    "comments": RunAction("comment", "list", RunScope.RUN_REF),
    "policychecks": RunAction("policycheck", "list", RunScope.RUN_REF),
    "configversion": RunAction("configversion", "read", RunScope.RUN_REF),
    # Outputs and state versions belong to the workspace, not the run
    "outputs": RunAction("state", "outputs", RunScope.WORKSPACE),
    "state": RunAction("state", "list", RunScope.WORKSPACE),
    "stateversions": RunAction("state", "list", RunScope.WORKSPACE),
    "assessment": RunAction("assessmentresult", "list", RunScope.WORKSPACE),
}


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class KeywordTable:
    """Immutable keyword configuration for the argument router.

    Attributes:
        org_collections: Plural keyword -> namespace after an organization
        workspace_collections: Keyword -> namespace after organization + workspace
        collection_verbs: Namespace -> extra sub-verbs besides "list"
        run_actions: Run short-syntax action -> canonical command
        run_id_prefix: Prefix that identifies a run ID in the short syntax
        help_markers: Tokens that request help
        passthrough_tokens: Non-command tokens that are never routed
    """

    org_collections: Mapping[str, str] = field(default_factory=lambda: _frozen(ORG_COLLECTIONS))
    workspace_collections: Mapping[str, str] = field(
        default_factory=lambda: _frozen(WORKSPACE_COLLECTIONS)
    )
    collection_verbs: Mapping[str, frozenset[str]] = field(
        default_factory=lambda: _frozen(COLLECTION_VERBS)
    )
    run_actions: Mapping[str, RunAction] = field(default_factory=lambda: _frozen(RUN_ACTIONS))
    run_id_prefix: str = "run-"
    help_markers: frozenset[str] = frozenset(HELP_MARKERS)
    passthrough_tokens: frozenset[str] = frozenset({"help"})

    def __post_init__(self) -> None:
        # Accept plain dicts from callers but never expose them mutably
        for name in ("org_collections", "workspace_collections", "collection_verbs", "run_actions"):
            value = getattr(self, name)
            if not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, _frozen(value))
        object.__setattr__(self, "help_markers", frozenset(self.help_markers))
        object.__setattr__(self, "passthrough_tokens", frozenset(self.passthrough_tokens))

    @classmethod
    def from_command_paths(
        cls,
        command_paths: Iterable[str],
        passthrough_tokens: Iterable[str] = ("help",),
    ) -> "KeywordTable":
        """Derive organization-level collections from the command catalog.

        A two-token root such as ``team`` becomes the ``teams`` collection when
        it has ``list`` and ``delete`` verbs and either ``read``, or ``show``
        together with ``add-member``/``remove-member``.
        """
        paths = [tokenize(path) for path in command_paths]
        root_verbs: dict[str, set[str]] = {}
        for tokens in paths:
            if len(tokens) == 2:
                root_verbs.setdefault(tokens[0], set()).add(tokens[1])

        org_collections: dict[str, str] = {}
        for tokens in paths:
            if len(tokens) != 2 or tokens[-1] != "list":
                continue
            root = tokens[0]
            if is_org_collection(root, root_verbs.get(root, set())):
                org_collections[resource_keyword(root)] = root

        for keyword, namespace in EXTRA_ORG_COLLECTIONS.items():
            org_collections.setdefault(keyword, namespace)

        return cls(
            org_collections=org_collections,
            passthrough_tokens=frozenset(passthrough_tokens),
        )

    def is_help(self, token: str) -> bool:
        return token in self.help_markers

    def is_resource_keyword(self, token: str) -> bool:
        """True if ``token`` names a collection at either level."""
        return token in self.org_collections or token in self.workspace_collections

    def is_run_id(self, token: str) -> bool:
        return token.startswith(self.run_id_prefix) and len(token) > len(self.run_id_prefix)


def is_org_collection(root: str, verbs: set[str] | frozenset[str]) -> bool:
    """Return True if a root's verbs make it an organization-level collection."""
    if not root or "list" not in verbs or "delete" not in verbs:
        return False
    if "read" in verbs:
        return True
    if "show" not in verbs:
        return False
    return "add-member" in verbs or "remove-member" in verbs


def resource_keyword(token: str) -> str:
    """Return the collection keyword for a command namespace.

    Examples::

        resource_keyword("team")              -> "teams"
        resource_keyword("policy")            -> "policies"
        resource_keyword("workspaceresource") -> "resources"
        resource_keyword("assessmentresult")  -> "assessments"
    """
    if not token:
        return token

    if token.startswith("workspace") and token != "workspace":
        return pluralize(token[len("workspace") :])

    if token.endswith("result"):
        return token[: -len("result")] + "s"

    return pluralize(token)


def pluralize(token: str) -> str:
    """Naive English plural used for command namespaces."""
    if not token:
        return token

    if token.endswith(("s", "sh", "ch", "x", "z")):
        return token + "es"

    if token.endswith("y") and token[-2:-1] not in ("a", "e", "i", "o", "u"):
        return token[:-1] + "ies"

    return token + "s"


DEFAULT_KEYWORDS = KeywordTable()
