"""
Bound Delegates

Factories that bind a resolved method or property getter to one target
instance, plus a generic wrapper around a bound getter.
"""
from __future__ import annotations

import logging
from types import MethodType
from typing import Any, Callable, Generic, TypeVar

from reflectionlab.dispatch.lookup import MethodHandle, PropertyHandle
from reflectionlab.exceptions import MemberNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Delegate signatures
CallBack = Callable[[Any], None]
ReadProperty = Callable[[], T]


def create_delegate(target: Any, handle: MethodHandle) -> CallBack:
    """Bind a resolved method to target.

    The returned callable takes exactly the method's own parameters.
    """
    return MethodType(handle.function, target)


def create_getter_delegate(target: Any, handle: PropertyHandle) -> ReadProperty[Any]:
    """Bind a resolved property getter to target.

    Raises:
        MemberNotFoundError: If the property has no getter.
    """
    getter = handle.getter
    if getter is None:
        raise MemberNotFoundError(handle.name, owner=handle.owner.__name__, kind="getter")
    return MethodType(getter, target)


class GetterWrapper(Generic[T]):
    """Typed wrapper around a bound property getter.

    Example:
        ```python
        handle = resolve_property(TargetObject, "number")
        wrapper = GetterWrapper[int](TargetObject(999), handle)
        wrapper.get_value()  # 999
        ```
    """

    def __init__(self, target: Any, handle: PropertyHandle) -> None:
        self._getter: ReadProperty[T] = create_getter_delegate(target, handle)

    def get_value(self) -> T:
        return self._getter()
