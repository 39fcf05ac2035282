"""
Builder for enumerations.

Flags enums whose members have no explicit values get the values 0, 1, 2, 4,
8, ... in member order. The values are written into the built members only;
the member builders keep whatever they were given.
"""

from __future__ import annotations

import logging
from collections import Counter

from ..errors import CSharpSyntaxError, MissingBuilderSettingError
from ..nodes import AccessModifier, EnumerationMember, Enumeration
from .base import SourceBuilder, collect, is_blank, names_match, require_access_modifier, require_not_none
from .enum_member import EnumMemberBuilder

logger = logging.getLogger(__name__)


def flag_values(count: int) -> list[int]:
    """Return the first `count` flag values: 0 followed by successive powers of two."""
    return [0 if index == 0 else 1 << (index - 1) for index in range(count)]


class EnumBuilder(SourceBuilder):
    def __init__(self, name: str | None = None, access_modifier: AccessModifier = AccessModifier.PUBLIC):
        self._name = name
        self._access = access_modifier
        self._summary: str | None = None
        self._is_flags = False
        self._members: list[EnumMemberBuilder] = []

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def access_modifier(self) -> AccessModifier:
        return self._access

    def with_access_modifier(self, access_modifier: AccessModifier) -> EnumBuilder:
        self._access = require_access_modifier(access_modifier)
        return self

    def with_name(self, name: str) -> EnumBuilder:
        self._name = require_not_none(name, "name")
        return self

    def with_summary(self, summary: str) -> EnumBuilder:
        self._summary = require_not_none(summary, "summary")
        return self

    def with_member(self, builder: EnumMemberBuilder) -> EnumBuilder:
        self._members.append(require_not_none(builder, "builder"))
        return self

    def with_members(self, *builders: EnumMemberBuilder) -> EnumBuilder:
        self._members.extend(collect(builders, "builders"))
        return self

    def make_flags_enum(self, make_flags: bool = True) -> EnumBuilder:
        """Mark the enum with ``[System.Flags]``."""
        self._is_flags = make_flags
        return self

    def has_member(self, name: str, case_sensitive: bool = False) -> bool:
        require_not_none(name, "name")
        return any(names_match(member.name, name, case_sensitive) for member in self._members)

    def build(self) -> Enumeration:
        if is_blank(self._name):
            raise MissingBuilderSettingError("Providing the name of the enum is required when building an enum.")

        members = [builder.build() for builder in self._members]

        duplicates = [name for name, count in Counter(member.name for member in members).items() if count > 1]
        if duplicates:
            raise CSharpSyntaxError(f"The enum '{self._name}' already contains a definition for '{duplicates[0]}'. (CS0102)")

        if self._is_flags and all(member.value is None for member in members):
            members = [
                EnumerationMember(name=member.name, value=value, summary=member.summary)
                for member, value in zip(members, flag_values(len(members)))
            ]

        logger.debug("Building enum %s: %d members, flags=%s", self._name, len(members), self._is_flags)

        return Enumeration(
            name=self._name,
            access=self._access,
            summary=self._summary,
            is_flags=self._is_flags,
            members=members,
        )
