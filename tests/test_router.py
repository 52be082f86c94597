"""Tests for URL-style argument routing."""

from unittest.mock import MagicMock

import pytest


class TestPassthrough:
    """Arguments that already name a command are left alone."""

    @pytest.mark.parametrize(
        "args",
        [
            [],
            ["workspace", "list", "-org=acme"],
            ["run", "apply", "-id=run-123"],
            ["version"],
            ["-h"],
            ["--version"],
            ["-org=acme", "prod"],
            ["help"],
            [""],
        ],
    )
    def test_unchanged(self, router, args):
        assert router.translate_args(args) == args

    def test_known_root_with_unknown_verb(self, router):
        """A known root is never reinterpreted as an organization."""
        assert router.translate_args(["workspace", "bogus"]) == ["workspace", "bogus"]

    def test_passthrough_rule_reported(self, router):
        decision = router.resolve(["workspace", "list"])
        assert decision.rule == "passthrough"
        assert decision.rewritten is False
        assert decision.organization is None


class TestPurity:
    """Routing is a pure function of its input."""

    def test_deterministic(self, router):
        args = ["acme", "prod", "run-123", "apply"]
        assert router.translate_args(args) == router.translate_args(args)

    def test_input_not_mutated(self, router):
        args = ["acme", "prod", "runs", "-h"]
        snapshot = list(args)
        router.translate_args(args)
        assert args == snapshot

    def test_result_is_fresh_list(self, router):
        args = ["workspace", "list"]
        result = router.translate_args(args)
        assert result == args
        assert result is not args

    def test_accepts_tuple(self, router):
        assert router.translate_args(("acme",)) == ["organization", "show", "-name=acme"]


class TestOrganizationRoutes:
    """Single-token and organization-level collection addresses."""

    def test_single_token_org(self, router):
        assert router.translate_args(["acme"]) == ["organization", "show", "-name=acme"]

    def test_single_token_org_keeps_flags(self, router):
        assert router.translate_args(["acme", "-output=json"]) == [
            "organization",
            "show",
            "-name=acme",
            "-output=json",
        ]

    def test_collection_list(self, router):
        assert router.translate_args(["acme", "teams"]) == ["team", "list", "-org=acme"]

    def test_collection_verb(self, router):
        assert router.translate_args(["acme", "teams", "create"]) == [
            "team",
            "create",
            "-org=acme",
        ]

    def test_collection_verb_with_flags(self, router):
        assert router.translate_args(["acme", "teams", "create", "-name=ops"]) == [
            "team",
            "create",
            "-org=acme",
            "-name=ops",
        ]

    def test_collection_trailing_flags(self, router):
        assert router.translate_args(["acme", "workspaces", "-search=prod"]) == [
            "workspace",
            "list",
            "-org=acme",
            "-search=prod",
        ]

    def test_org_level_runs(self, router):
        assert router.translate_args(["acme", "runs"]) == ["run", "list", "-org=acme"]

    def test_unregistered_collection_verb_unchanged(self, router):
        """A collection keyword never falls back to a workspace name."""
        args = ["acme", "teams", "bogus"]
        decision = router.resolve(args)
        assert decision.args == args
        assert decision.rewritten is False

    def test_decision_fields(self, router):
        decision = router.resolve(["acme", "teams"])
        assert decision.rule == "org-collection"
        assert decision.organization == "acme"
        assert decision.workspace is None
        assert decision.rewritten is True
        assert decision.original == ("acme", "teams")


class TestWorkspaceRoutes:
    """Organization + workspace addresses."""

    def test_two_token_fallback(self, router):
        assert router.translate_args(["acme", "prod"]) == [
            "workspace",
            "read",
            "-org=acme",
            "-name=prod",
        ]

    def test_collection_beats_workspace_name(self, router):
        """'teams' is a keyword, so no workspace lookup happens."""
        assert router.translate_args(["acme", "teams"])[0] == "team"

    def test_workspace_decision_fields(self, router):
        decision = router.resolve(["acme", "prod"])
        assert decision.rule == "workspace"
        assert decision.organization == "acme"
        assert decision.workspace == "prod"

    @pytest.mark.parametrize(
        "keyword,namespace",
        [
            ("runs", ["run"]),
            ("variables", ["variable"]),
            ("state", ["state"]),
            ("configversions", ["configversion"]),
            ("assessments", ["assessmentresult"]),
            ("changerequests", ["changerequest"]),
            ("resources", ["workspace", "resource"]),
            ("tags", ["workspace", "tag"]),
        ],
    )
    def test_workspace_collection(self, router, keyword, namespace):
        assert router.translate_args(["acme", "prod", keyword]) == [
            *namespace,
            "list",
            "-org=acme",
            "-workspace=prod",
        ]

    def test_explicit_list(self, router):
        assert router.translate_args(["acme", "prod", "variables", "list"]) == [
            "variable",
            "list",
            "-org=acme",
            "-workspace=prod",
        ]

    def test_state_outputs(self, router):
        assert router.translate_args(["acme", "prod", "state", "outputs"]) == [
            "state",
            "outputs",
            "-org=acme",
            "-workspace=prod",
        ]

    def test_unknown_collection_verb_unchanged(self, router):
        args = ["acme", "prod", "variables", "bogus"]
        assert router.translate_args(args) == args

    @pytest.mark.parametrize(
        "name", ["tags", "resources", "assessments", "configversions", "changerequests"]
    )
    def test_workspace_named_after_workspace_keyword(self, router, name):
        """Workspace-level keywords are not organization collections."""
        decision = router.resolve(["acme", name])
        assert decision.args == ["workspace", "read", "-org=acme", f"-name={name}"]
        assert decision.workspace == name

    def test_collection_of_workspace_named_after_keyword(self, router):
        assert router.translate_args(["acme", "tags", "runs"]) == [
            "run",
            "list",
            "-org=acme",
            "-workspace=tags",
        ]

    def test_keyword_workspace_help_is_not_context(self, router):
        assert router.translate_args(["acme", "tags", "-h"]) == [
            "workspace",
            "read",
            "-org=acme",
            "-name=tags",
            "-h",
        ]

    def test_catalog_workspace_named_tags(self, catalog_router):
        assert catalog_router.translate_args(["acme", "tags"]) == [
            "workspace",
            "read",
            "-org=acme",
            "-name=tags",
        ]


class TestRunRoutes:
    """Run short syntax and long form."""

    def test_run_show(self, router):
        assert router.translate_args(["acme", "prod", "run-123"]) == [
            "run",
            "show",
            "-id=run-123",
        ]

    @pytest.mark.parametrize(
        "action,expected",
        [
            ("apply", ["run", "apply", "-id=run-123"]),
            ("show", ["run", "show", "-id=run-123"]),
            ("plan", ["plan", "read", "-id=run-123"]),
            ("logs", ["plan", "logs", "-id=run-123"]),
            ("planlogs", ["plan", "logs", "-id=run-123"]),
            ("applylogs", ["apply", "logs", "-id=run-123"]),
            ("applyread", ["apply", "read", "-id=run-123"]),
            ("applydetails", ["apply", "read", "-id=run-123"]),
            ("comments", ["comment", "list", "-run-id=run-123"]),
            ("policychecks", ["policycheck", "list", "-run-id=run-123"]),
            ("configversion", ["configversion", "read", "-run-id=run-123"]),
            ("outputs", ["state", "outputs", "-org=acme", "-workspace=prod"]),
            ("state", ["state", "list", "-org=acme", "-workspace=prod"]),
            ("stateversions", ["state", "list", "-org=acme", "-workspace=prod"]),
            ("assessment", ["assessmentresult", "list", "-org=acme", "-workspace=prod"]),
        ],
    )
    def test_action_table(self, router, action, expected):
        assert router.translate_args(["acme", "prod", "run-123", action]) == expected

    def test_action_keeps_flags(self, router):
        assert router.translate_args(["acme", "prod", "run-123", "apply", "-comment=ok"]) == [
            "run",
            "apply",
            "-id=run-123",
            "-comment=ok",
        ]

    def test_registered_run_verb_fallback(self, router):
        assert router.translate_args(["acme", "prod", "run-123", "cancel"]) == [
            "run",
            "cancel",
            "-id=run-123",
        ]

    def test_unregistered_action_unchanged(self, router):
        args = ["acme", "prod", "run-123", "frobnicate"]
        assert router.translate_args(args) == args

    def test_long_form(self, router):
        assert router.translate_args(["acme", "prod", "runs", "run-123", "apply"]) == [
            "run",
            "apply",
            "-id=run-123",
        ]

    def test_long_form_show(self, router):
        assert router.translate_args(["acme", "prod", "runs", "run-123"]) == [
            "run",
            "show",
            "-id=run-123",
        ]

    def test_short_syntax_requires_prefix(self, router):
        args = ["acme", "prod", "abc123", "apply"]
        assert router.translate_args(args) == args


class TestHelpRedirection:
    """Help markers after an address."""

    @pytest.mark.parametrize("marker", ["-h", "-help", "--help"])
    def test_organization_context(self, router, marker):
        assert router.translate_args(["acme", marker]) == ["organization:context", "-org=acme"]

    def test_workspace_context(self, router):
        assert router.translate_args(["acme", "prod", "-h"]) == [
            "workspace:context",
            "-org=acme",
            "-workspace=prod",
        ]

    def test_collection_help(self, router):
        assert router.translate_args(["acme", "teams", "-h"]) == ["team", "-h"]

    def test_collection_help_keeps_marker(self, router):
        assert router.translate_args(["acme", "teams", "--help"]) == ["team", "--help"]

    def test_workspace_collection_help(self, router):
        assert router.translate_args(["acme", "prod", "runs", "-h"]) == [
            "run",
            "list",
            "-org=acme",
            "-workspace=prod",
            "-h",
        ]

    def test_help_with_other_flags_is_not_context(self, router):
        assert router.translate_args(["acme", "-h", "-output=json"]) == [
            "organization",
            "show",
            "-name=acme",
            "-h",
            "-output=json",
        ]

    def test_context_decision_scope(self, router):
        decision = router.resolve(["acme", "prod", "-h"])
        assert decision.rule == "workspace-context"
        assert decision.workspace == "prod"


class TestDegradeSafely:
    """Shapes no rule understands come back unchanged."""

    @pytest.mark.parametrize(
        "args",
        [
            ["acme", "prod", "x", "y", "z"],
            ["acme", "prod", "nothing"],
            ["acme", "prod", "variables", "list", "extra"],
        ],
    )
    def test_unchanged(self, router, args):
        decision = router.resolve(args)
        assert decision.args == args
        assert decision.rule is None


class TestRouterWithoutRegistry:
    """A router built before the registry exists."""

    def test_no_token_is_a_root(self):
        from hcptf.router import Router

        router = Router()
        assert router.tree is None
        assert not router.is_known_command("workspace")

    def test_everything_reads_as_address(self):
        from hcptf.router import Router

        assert Router().translate_args(["workspace"]) == [
            "organization",
            "show",
            "-name=workspace",
        ]

    def test_collection_verbs_trusted(self):
        from hcptf.router import Router

        assert Router().translate_args(["acme", "teams", "anything"]) == [
            "team",
            "anything",
            "-org=acme",
        ]

    def test_empty_args(self):
        from hcptf.router import Router

        assert Router().translate_args([]) == []


class TestCustomConfiguration:
    """Injected keyword tables and registries."""

    def test_shared_tree(self, tree):
        from hcptf.router import Router

        first = Router(tree=tree)
        second = Router(tree=tree)
        assert first.tree is second.tree
        assert first.translate_args(["acme"]) == second.translate_args(["acme"])

    def test_custom_passthrough_token(self, command_paths):
        from hcptf.router import KeywordTable, Router

        keywords = KeywordTable.from_command_paths(
            command_paths, passthrough_tokens=("help", "shell")
        )
        router = Router(command_paths, keywords=keywords)
        assert router.translate_args(["shell"]) == ["shell"]

    def test_custom_run_prefix(self, command_paths):
        from hcptf.router import KeywordTable, Router

        keywords = KeywordTable(run_id_prefix="r-")
        router = Router(command_paths, keywords=keywords)
        assert router.translate_args(["acme", "prod", "r-9"]) == ["run", "show", "-id=r-9"]


class TestCatalogRouting:
    """Rewrites against the shipped catalog name real commands."""

    def test_examples(self, catalog_router):
        assert catalog_router.translate_args(["acme", "prod", "run-123", "plan"]) == [
            "plan",
            "read",
            "-id=run-123",
        ]
        assert catalog_router.translate_args(["acme", "prod", "tags"]) == [
            "workspace",
            "tag",
            "list",
            "-org=acme",
            "-workspace=prod",
        ]

    def test_workspace_collections_are_registered(self, catalog_router):
        for keyword in catalog_router.keywords.workspace_collections:
            result = catalog_router.translate_args(["acme", "prod", keyword])
            command = result[: result.index("-org=acme")]
            assert catalog_router.tree.has_path(command), keyword

    def test_run_actions_are_registered(self, catalog_router):
        for action in catalog_router.keywords.run_actions:
            result = catalog_router.translate_args(["acme", "prod", "run-1", action])
            assert catalog_router.tree.has_path(result[:2]), action

    def test_org_collections_are_registered(self, catalog_router):
        for keyword, namespace in catalog_router.keywords.org_collections.items():
            result = catalog_router.translate_args(["acme", keyword])
            assert result[:2] == [namespace, "list"]
            assert catalog_router.tree.has_path(result[:2]), keyword


class TestValidation:
    """Explicit resource validation through the injected capability."""

    def test_default_validator_accepts(self, router):
        router.validate_organization("acme")
        router.validate_workspace("acme", "prod")

    def test_validate_workspace_decision(self, command_paths):
        from hcptf.router import Router

        validator = MagicMock()
        router = Router(command_paths, validator=validator)
        router.validate(router.resolve(["acme", "prod", "runs"]), timeout=5)

        validator.organization_exists.assert_called_once_with("acme", timeout=5)
        validator.workspace_exists.assert_called_once_with("acme", "prod", timeout=5)

    def test_validate_org_decision(self, command_paths):
        from hcptf.router import Router

        validator = MagicMock()
        router = Router(command_paths, validator=validator)
        router.validate(router.resolve(["acme", "teams"]))

        validator.organization_exists.assert_called_once_with("acme", timeout=None)
        validator.workspace_exists.assert_not_called()

    def test_passthrough_not_validated(self, command_paths):
        from hcptf.router import Router

        validator = MagicMock()
        router = Router(command_paths, validator=validator)
        router.validate(router.resolve(["workspace", "list"]))

        validator.organization_exists.assert_not_called()

    def test_not_found_propagates(self, command_paths):
        from hcptf.exceptions import ResourceNotFoundError
        from hcptf.router import Router

        validator = MagicMock()
        validator.organization_exists.side_effect = ResourceNotFoundError("organization", "acme")
        router = Router(command_paths, validator=validator)

        with pytest.raises(ResourceNotFoundError, match='organization "acme" not found'):
            router.validate_organization("acme")

    def test_translation_never_validates(self, command_paths):
        from hcptf.router import Router

        validator = MagicMock()
        router = Router(command_paths, validator=validator)
        router.translate_args(["acme", "prod", "runs"])
        validator.assert_not_called()
        validator.organization_exists.assert_not_called()
