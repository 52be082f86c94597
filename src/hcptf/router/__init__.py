"""
URL-style argument routing.

Turns ``hcptf acme prod runs`` into ``hcptf run list -org=acme -workspace=prod``.

Modules:
    command_tree: Registry of canonical command paths (token trie)
    keywords: Collection keywords, run actions and help markers
    rules: Ordered rewrite rules
    router: The Router and its RouteDecision
    validation: Optional organization/workspace existence checks
"""

from hcptf.router.command_tree import CommandTree, has_root
from hcptf.router.keywords import DEFAULT_KEYWORDS, KeywordTable, RunAction, RunScope
from hcptf.router.router import RouteDecision, Router
from hcptf.router.rules import RULES, Address, Rule
from hcptf.router.validation import APIResourceValidator, NullValidator, ResourceValidator

__all__ = [
    "CommandTree",
    "has_root",
    "KeywordTable",
    "DEFAULT_KEYWORDS",
    "RunAction",
    "RunScope",
    "Router",
    "RouteDecision",
    "Rule",
    "RULES",
    "Address",
    "ResourceValidator",
    "NullValidator",
    "APIResourceValidator",
]
