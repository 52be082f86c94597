"""
URL-style argument router.

Rewrites terse resource addresses into the canonical
``<noun> <verb> -flag=value...`` form understood by command dispatch:

    acme                        -> organization show -name=acme
    acme teams                  -> team list -org=acme
    acme prod                   -> workspace read -org=acme -name=prod
    acme prod runs              -> run list -org=acme -workspace=prod
    acme prod run-123 apply     -> run apply -id=run-123
    acme -h                     -> organization:context -org=acme
    acme prod -h                -> workspace:context -org=acme -workspace=prod

Arguments that already name a command, start with a flag, or match no rule
are returned unchanged. Translation never raises and never touches the
network; resource validation is a separate, explicit call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from hcptf.router.command_tree import CommandTree, has_root
from hcptf.router.keywords import DEFAULT_KEYWORDS, KeywordTable
from hcptf.router.rules import RULES, Address, Rule, RuleContext, Scope, match
from hcptf.router.validation import NullValidator, ResourceValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouteDecision:
    """Outcome of routing one argument vector.

    Attributes:
        args: The resulting argument vector (a fresh list)
        original: The input arguments
        rule: Name of the rule that rewrote the arguments, or None
        organization: Organization named by the address, if routed
        workspace: Workspace named by the address, if routed
    """

    args: list[str]
    original: tuple[str, ...]
    rule: Optional[str] = None
    organization: Optional[str] = None
    workspace: Optional[str] = None

    @property
    def rewritten(self) -> bool:
        return tuple(self.args) != self.original


class Router:
    """Translate URL-style arguments into canonical command arguments.

    Usage::

        router = Router(command_paths())
        router.translate_args(["acme", "prod", "run-123", "plan"])
        # ['plan', 'read', '-id=run-123']

    Args:
        command_paths: Canonical command paths used to build the registry.
            When omitted no token is treated as a known command.
        tree: A prebuilt registry to share instead of ``command_paths``.
        keywords: Keyword table. Derived from ``command_paths`` when omitted,
            falling back to the built-in table.
        validator: Resource-existence capability for ``validate_*`` calls.
    """

    def __init__(
        self,
        command_paths: Optional[Iterable[str]] = None,
        *,
        tree: Optional[CommandTree] = None,
        keywords: Optional[KeywordTable] = None,
        validator: Optional[ResourceValidator] = None,
        rules: Sequence[Rule] = RULES,
    ):
        if tree is None and command_paths is not None:
            tree = CommandTree(command_paths)
        if keywords is None and tree is not None:
            keywords = KeywordTable.from_command_paths(" ".join(path) for path in tree.paths())

        self.tree = tree
        self.keywords = keywords or DEFAULT_KEYWORDS
        self.validator: ResourceValidator = validator or NullValidator()
        self.rules = tuple(rules)
        self._context = RuleContext(tree=self.tree, keywords=self.keywords)

    def translate_args(self, args: Sequence[str]) -> list[str]:
        """Return the canonical argument vector for ``args``."""
        return self.resolve(args).args

    def resolve(self, args: Sequence[str]) -> RouteDecision:
        """Route ``args`` and report which rule fired."""
        address = Address.parse(args)
        found = match(address, self._context, self.rules)

        if found is None:
            logger.debug(f"No route for {list(address.args)}, passing through")
            return RouteDecision(args=list(address.args), original=address.args)

        rule, result = found
        decision = RouteDecision(
            args=result,
            original=address.args,
            rule=rule.name,
            organization=address.org if rule.scope is not Scope.NONE else None,
            workspace=address.workspace if rule.scope is Scope.WORKSPACE else None,
        )
        if decision.rewritten:
            logger.debug(f"Route {rule.name}: {list(address.args)} -> {result}")
        return decision

    def is_known_command(self, token: str) -> bool:
        return has_root(self.tree, token)

    def validate_organization(self, name: str, timeout: Optional[float] = None) -> None:
        """Check that an organization exists.

        Raises:
            ResourceNotFoundError: If the validator cannot find it
        """
        self.validator.organization_exists(name, timeout=timeout)

    def validate_workspace(
        self, org: str, name: str, timeout: Optional[float] = None
    ) -> None:
        """Check that a workspace exists within an organization.

        Raises:
            ResourceNotFoundError: If the validator cannot find it
        """
        self.validator.workspace_exists(org, name, timeout=timeout)

    def validate(self, decision: RouteDecision, timeout: Optional[float] = None) -> None:
        """Validate the organization and workspace a decision addresses."""
        if decision.organization is not None:
            self.validate_organization(decision.organization, timeout=timeout)
        if decision.workspace is not None:
            self.validate_workspace(decision.organization, decision.workspace, timeout=timeout)
