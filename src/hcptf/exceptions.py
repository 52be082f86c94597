"""
Custom exception hierarchy for hcptf.

Provides consistent error handling with context, suggestions, and actionable guidance.
All exceptions include:
- Context information (organization, workspace, command, etc.)
- Suggestions for how to fix the issue
- Clear, formatted error messages

Argument translation itself never raises. These exceptions come from the
collaborators around it: resource validation, verb inference and configuration.

Example::

    from hcptf.exceptions import ResourceNotFoundError

    raise ResourceNotFoundError("workspace", "prod", organization="acme")
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence


class HcptfError(Exception):
    """
    Base exception for all hcptf errors.

    Provides consistent formatting with context and suggestions.

    Attributes:
        context: Dictionary of contextual information (organization, command, etc.)
        suggestions: List of actionable suggestions for fixing the error
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.context = context or {}
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context and suggestions."""
        parts = [self.message]

        if self.context:
            parts.append("\n\nContext:")
            for key, value in self.context.items():
                parts.append(f"\n  {key}: {value}")

        if self.suggestions:
            parts.append("\n\nSuggestions:")
            for suggestion in self.suggestions:
                parts.append(f"\n  - {suggestion}")

        return "".join(parts)

    def __str__(self) -> str:
        return self._format_message()


class ResourceNotFoundError(HcptfError):
    """
    An organization or workspace addressed on the command line does not exist.

    Raised only by resource validation, never by argument translation. The
    underlying lookup failure is kept in ``context["cause"]`` and chained
    with ``raise ... from``.

    Example::

        raise ResourceNotFoundError(
            "workspace",
            "prod",
            organization="acme",
            cause="404 Client Error: Not Found",
        )

    Attributes:
        resource: "organization" or "workspace"
        name: The name that was looked up
        organization: Owning organization for workspace lookups
    """

    def __init__(
        self,
        resource: str,
        name: str,
        organization: Optional[str] = None,
        cause: Optional[Any] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.resource = resource
        self.name = name
        self.organization = organization

        if organization is not None:
            message = f'{resource} "{name}" not found in organization "{organization}"'
        else:
            message = f'{resource} "{name}" not found'

        context: Dict[str, Any] = {}
        if cause is not None:
            context["cause"] = cause

        if suggestions is None:
            suggestions = [f"Check the {resource} name spelling"]
            if organization is None:
                suggestions.append("Verify your API token has access to the organization")
        super().__init__(message, context, suggestions)


class AmbiguousOperationError(HcptfError):
    """
    A namespace was given without a verb and the verb cannot be inferred.

    Example::

        raise AmbiguousOperationError("workspace", ["list", "read"])

    Attributes:
        namespace: The command namespace (e.g. "workspace", "organization token")
        candidates: The get verbs available for the namespace
    """

    def __init__(self, namespace: str, candidates: Sequence[str]):
        self.namespace = namespace
        self.candidates = list(candidates)
        super().__init__(
            f'ambiguous operation for "{namespace}"; specify one of: '
            + ", ".join(self.candidates),
            suggestions=[f"hcptf {namespace} {verb}" for verb in self.candidates],
        )


class ConfigurationError(HcptfError):
    """
    Configuration or settings error.

    Raised when configuration is invalid, missing, or incompatible.

    Example::

        raise ConfigurationError(
            "Invalid router validation mode",
            context={"router.validation": "loud", "available": ["off", "warn", "strict"]},
            suggestions=["Use one of the available validation modes"]
        )
    """

    pass


__all__ = [
    "HcptfError",
    "ResourceNotFoundError",
    "AmbiguousOperationError",
    "ConfigurationError",
]
