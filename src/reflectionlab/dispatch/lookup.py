"""
Member Lookup by Name

Resolves methods and properties through runtime introspection and returns
typed handles. Resolution is meant to happen once, outside any timed loop;
the handles are then invoked many times.
"""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from reflectionlab.exceptions import MemberNotFoundError

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True, slots=True)
class MethodHandle:
    """Resolved method on a type.

    Attributes:
        owner: Type the method was resolved on.
        name: Method name.
        function: The unbound function object.
    """

    owner: type
    name: str
    function: Callable[..., Any]

    def invoke(self, target: Any, parameters: Sequence[Any]) -> Any:
        """Invoke the method on target with positional parameters."""
        return self.function(target, *parameters)


@dataclass(frozen=True, slots=True)
class PropertyHandle:
    """Resolved property on a type.

    Attributes:
        owner: Type the property was resolved on.
        name: Property name.
        descriptor: The ``property`` object.
    """

    owner: type
    name: str
    descriptor: property

    @property
    def getter(self) -> Callable[[Any], Any] | None:
        """Raw getter function, or None for a write-only property."""
        return self.descriptor.fget

    @property
    def setter(self) -> Callable[[Any, Any], None] | None:
        """Raw setter function, or None for a read-only property."""
        return self.descriptor.fset

    def get_value(self, target: Any) -> Any:
        """Read the property from target through its descriptor."""
        return self.descriptor.__get__(target, self.owner)

    def set_value(self, target: Any, value: Any) -> None:
        """Write the property on target through its descriptor."""
        self.descriptor.__set__(target, value)


def resolve_method(owner: type, name: str) -> MethodHandle:
    """Resolve a method by name.

    Args:
        owner: Type to search.
        name: Method name.

    Returns:
        MethodHandle for the method.

    Raises:
        MemberNotFoundError: If no callable member with that name exists.
    """
    member = inspect.getattr_static(owner, name, _MISSING)
    if member is _MISSING or isinstance(member, property) or not callable(member):
        raise MemberNotFoundError(name, owner=owner.__name__, kind="method")

    function = getattr(owner, name)
    logger.debug("Resolved method %s.%s", owner.__name__, name)
    return MethodHandle(owner=owner, name=name, function=function)


def resolve_property(owner: type, name: str) -> PropertyHandle:
    """Resolve a property by name.

    Args:
        owner: Type to search.
        name: Property name.

    Returns:
        PropertyHandle for the property.

    Raises:
        MemberNotFoundError: If no property with that name exists.
    """
    member = inspect.getattr_static(owner, name, _MISSING)
    if not isinstance(member, property):
        raise MemberNotFoundError(name, owner=owner.__name__, kind="property")

    logger.debug("Resolved property %s.%s", owner.__name__, name)
    return PropertyHandle(owner=owner, name=name, descriptor=member)
