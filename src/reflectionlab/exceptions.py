"""
reflectionlab Exception Hierarchy

Custom exceptions raised while resolving members and loading configuration.
"""
from __future__ import annotations

from typing import Any, Optional


class ReflectionLabError(Exception):
    """Base exception for all reflectionlab errors.

    Attributes:
        message: Human-readable error description.
        context: Optional dict of additional context for debugging.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[dict[str, Any]] = None,
    ) -> None:
        """Initialize ReflectionLabError.

        Args:
            message: Error message.
            context: Optional context dict.
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        ctx_str = f", context={self.context}" if self.context else ""
        return f"{self.__class__.__name__}({self.message!r}{ctx_str})"


class MemberNotFoundError(ReflectionLabError):
    """Raised when a member cannot be resolved by name.

    This is a setup error: the benchmark run cannot continue when a
    method or property name is mistyped.

    Attributes:
        member: The member name that failed to resolve.
        owner: Name of the type that was searched.
        kind: Kind of member expected ("method", "property" or "getter").
    """

    def __init__(
        self,
        member: str,
        *,
        owner: Optional[str] = None,
        kind: str = "member",
        message: Optional[str] = None,
    ) -> None:
        """Initialize MemberNotFoundError.

        Args:
            member: Member name.
            owner: Owning type name.
            kind: Expected member kind.
            message: Optional custom message.
        """
        self.member = member
        self.owner = owner
        self.kind = kind

        if message is None:
            if owner:
                message = f"No {kind} named '{member}' found on '{owner}'"
            else:
                message = f"No {kind} named '{member}' found"

        super().__init__(
            message,
            context={
                "member": member,
                "owner": owner,
                "kind": kind,
            },
        )


class ConfigError(ReflectionLabError):
    """Raised when configuration cannot be loaded or is invalid.

    Attributes:
        field: The config field that failed validation, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
    ) -> None:
        self.field = field
        super().__init__(message, context={"field": field} if field else None)
