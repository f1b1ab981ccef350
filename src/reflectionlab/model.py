"""
Benchmark Target Object

The single object every dispatch strategy is measured against.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional


class TargetObject:
    """Object with three properties and one no-op method.

    Attributes:
        number: Integer value, set from the constructor argument.
        text: String value, unset until assigned.
        timestamp: Timestamp value, ``datetime.min`` until assigned.
    """

    def __init__(self, number: int) -> None:
        self._number = number
        self._text: Optional[str] = None
        self._timestamp = datetime.min

    @property
    def number(self) -> int:
        return self._number

    @number.setter
    def number(self, value: int) -> None:
        self._number = value

    @property
    def text(self) -> Optional[str]:
        return self._text

    @text.setter
    def text(self, value: Optional[str]) -> None:
        self._text = value

    @property
    def timestamp(self) -> datetime:
        return self._timestamp

    @timestamp.setter
    def timestamp(self, value: datetime) -> None:
        self._timestamp = value

    def call(self, arg: Any) -> None:
        """Accept one argument and do nothing."""

    def __repr__(self) -> str:
        return (
            f"TargetObject(number={self._number!r}, text={self._text!r}, "
            f"timestamp={self._timestamp!r})"
        )
