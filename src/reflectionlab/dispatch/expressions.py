"""
Compiled Expressions

Builds expression trees with the ``ast`` module and compiles them once into
plain callables:

- compile_call_expression: ``lambda target, parameter: target.<method>(parameter)``
- compile_property_expression: ``lambda target: target.<property>``

Member names are resolved first, so a mistyped name fails before any
tree is built.
"""
from __future__ import annotations

import ast
import logging
from typing import Any, Callable

from reflectionlab.dispatch.lookup import resolve_method, resolve_property

logger = logging.getLogger(__name__)

TARGET_ARG = "target"
PARAMETER_ARG = "parameter"


def _lambda(arg_names: list[str], body: ast.expr) -> ast.Expression:
    arguments = ast.arguments(
        posonlyargs=[],
        args=[ast.arg(arg=name) for name in arg_names],
        vararg=None,
        kwonlyargs=[],
        kw_defaults=[],
        kwarg=None,
        defaults=[],
    )
    return ast.Expression(body=ast.Lambda(args=arguments, body=body))


def _load(name: str) -> ast.Name:
    return ast.Name(id=name, ctx=ast.Load())


def compile_expression(tree: ast.Expression, filename: str) -> Callable[..., Any]:
    """Compile a lambda expression tree and return the resulting function.

    Args:
        tree: Expression whose body is an ``ast.Lambda``.
        filename: Pseudo filename shown in tracebacks.

    Returns:
        The compiled function.
    """
    tree = ast.fix_missing_locations(tree)
    code = compile(tree, filename, "eval")
    logger.debug("Compiled expression %s", filename)
    return eval(code, {"__builtins__": {}})


def build_call_expression(method_name: str) -> ast.Expression:
    """Build ``lambda target, parameter: target.<method_name>(parameter)``."""
    body = ast.Call(
        func=ast.Attribute(value=_load(TARGET_ARG), attr=method_name, ctx=ast.Load()),
        args=[_load(PARAMETER_ARG)],
        keywords=[],
    )
    return _lambda([TARGET_ARG, PARAMETER_ARG], body)


def build_property_expression(property_name: str) -> ast.Expression:
    """Build ``lambda target: target.<property_name>``."""
    body = ast.Attribute(value=_load(TARGET_ARG), attr=property_name, ctx=ast.Load())
    return _lambda([TARGET_ARG], body)


def compile_call_expression(owner: type, method_name: str) -> Callable[[Any, Any], Any]:
    """Compile a call expression for a method on owner.

    Raises:
        MemberNotFoundError: If owner has no method named method_name.
    """
    handle = resolve_method(owner, method_name)
    return compile_expression(
        build_call_expression(handle.name),
        f"<expression {owner.__name__}.{handle.name}()>",
    )


def compile_property_expression(owner: type, property_name: str) -> Callable[[Any], Any]:
    """Compile a property-read expression for a property on owner.

    Raises:
        MemberNotFoundError: If owner has no property named property_name.
    """
    handle = resolve_property(owner, property_name)
    return compile_expression(
        build_property_expression(handle.name),
        f"<expression {owner.__name__}.{handle.name}>",
    )
