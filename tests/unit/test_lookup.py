"""Tests for member lookup by name."""
from __future__ import annotations

import pytest

from reflectionlab.dispatch.lookup import (
    MethodHandle,
    PropertyHandle,
    resolve_method,
    resolve_property,
)
from reflectionlab.exceptions import MemberNotFoundError
from reflectionlab.model import TargetObject


class TestResolveMethod:

    def test_resolves_call(self) -> None:
        handle = resolve_method(TargetObject, "call")

        assert isinstance(handle, MethodHandle)
        assert handle.owner is TargetObject
        assert handle.name == "call"
        assert handle.function is TargetObject.call

    def test_invoke(self, target: TargetObject) -> None:
        handle = resolve_method(TargetObject, "call")

        assert handle.invoke(target, (object(),)) is None
        assert target.number == 1

    def test_invoke_passes_parameters(self) -> None:
        class Recorder:
            def __init__(self) -> None:
                self.seen: list = []

            def record(self, value) -> None:
                self.seen.append(value)

        r = Recorder()
        resolve_method(Recorder, "record").invoke(r, ["x"])

        assert r.seen == ["x"]

    def test_missing_method(self) -> None:
        with pytest.raises(MemberNotFoundError) as exc_info:
            resolve_method(TargetObject, "cal")

        assert exc_info.value.member == "cal"
        assert exc_info.value.kind == "method"
        assert "cal" in str(exc_info.value)

    def test_property_is_not_a_method(self) -> None:
        with pytest.raises(MemberNotFoundError):
            resolve_method(TargetObject, "number")


class TestResolveProperty:

    def test_resolves_number(self) -> None:
        handle = resolve_property(TargetObject, "number")

        assert isinstance(handle, PropertyHandle)
        assert isinstance(handle.descriptor, property)
        assert handle.getter is not None
        assert handle.setter is not None

    def test_get_value(self, target: TargetObject) -> None:
        assert resolve_property(TargetObject, "number").get_value(target) == 1

    def test_set_value(self, target: TargetObject) -> None:
        resolve_property(TargetObject, "text").set_value(target, "test")

        assert target.text == "test"

    def test_timestamp_property(self, target: TargetObject) -> None:
        handle = resolve_property(TargetObject, "timestamp")

        assert handle.get_value(target) == target.timestamp

    def test_missing_property(self) -> None:
        with pytest.raises(MemberNotFoundError) as exc_info:
            resolve_property(TargetObject, "numbr")

        assert exc_info.value.kind == "property"
        assert exc_info.value.owner == "TargetObject"

    def test_method_is_not_a_property(self) -> None:
        with pytest.raises(MemberNotFoundError):
            resolve_property(TargetObject, "call")

    def test_private_attribute_is_not_a_property(self) -> None:
        with pytest.raises(MemberNotFoundError):
            resolve_property(TargetObject, "_number")
