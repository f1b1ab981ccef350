"""
reflectionlab Dispatch Strategies

Lookup, delegate and expression building blocks the benchmark runner times.
"""
from reflectionlab.dispatch.lookup import (
    MethodHandle,
    PropertyHandle,
    resolve_method,
    resolve_property,
)
from reflectionlab.dispatch.delegates import (
    CallBack,
    GetterWrapper,
    ReadProperty,
    create_delegate,
    create_getter_delegate,
)
from reflectionlab.dispatch.expressions import (
    build_call_expression,
    build_property_expression,
    compile_call_expression,
    compile_property_expression,
)

__all__ = [
    # Lookup
    "MethodHandle",
    "PropertyHandle",
    "resolve_method",
    "resolve_property",
    # Delegates
    "CallBack",
    "GetterWrapper",
    "ReadProperty",
    "create_delegate",
    "create_getter_delegate",
    # Expressions
    "build_call_expression",
    "build_property_expression",
    "compile_call_expression",
    "compile_property_expression",
]
