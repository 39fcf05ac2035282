"""
Builder for enumeration members.
"""

from __future__ import annotations

from ..errors import MissingBuilderSettingError
from ..nodes import EnumerationMember
from .base import is_blank, require_int_or_none, require_not_none


class EnumMemberBuilder:
    def __init__(self, name: str | None = None, value: int | None = None):
        self._name = name
        self._value = require_int_or_none(value, "value")
        self._summary: str | None = None

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def value(self) -> int | None:
        return self._value

    def with_name(self, name: str) -> EnumMemberBuilder:
        self._name = require_not_none(name, "name")
        return self

    def with_value(self, value: int | None) -> EnumMemberBuilder:
        """Set the explicit value of the member, or clear it with None."""
        self._value = require_int_or_none(value, "value")
        return self

    def with_summary(self, summary: str) -> EnumMemberBuilder:
        self._summary = require_not_none(summary, "summary")
        return self

    def build(self) -> EnumerationMember:
        if is_blank(self._name):
            raise MissingBuilderSettingError("Providing the name of the enum member is required when building an enum member.")
        return EnumerationMember(name=self._name, value=self._value, summary=self._summary)
