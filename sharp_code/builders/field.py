"""
Builder for class and struct fields.
"""

from __future__ import annotations

from ..errors import MissingBuilderSettingError
from ..nodes import AccessModifier, Field
from .base import SourceBuilder, collect, is_blank, require_access_modifier, require_not_none, type_name_of
from .type_parameter import TypeParameterBuilder, build_type_parameters


class FieldBuilder(SourceBuilder):
    """Builds a field, e.g. ``private readonly int _id;``."""

    def __init__(
        self,
        type_name: str | None = None,
        name: str | None = None,
        access_modifier: AccessModifier = AccessModifier.PRIVATE,
    ):
        self._type_name = type_name
        self._name = name
        self._access = access_modifier
        self._is_readonly = False
        self._summary: str | None = None
        self._type_parameters: list[TypeParameterBuilder] = []

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def access_modifier(self) -> AccessModifier:
        return self._access

    def with_access_modifier(self, access_modifier: AccessModifier) -> FieldBuilder:
        self._access = require_access_modifier(access_modifier)
        return self

    def with_type(self, type_name: str | type) -> FieldBuilder:
        """Set the type, either by name or from a Python type (its ``__name__`` is used)."""
        self._type_name = type_name_of(type_name)
        return self

    def with_name(self, name: str) -> FieldBuilder:
        self._name = require_not_none(name, "name")
        return self

    def with_summary(self, summary: str) -> FieldBuilder:
        self._summary = require_not_none(summary, "summary")
        return self

    def make_readonly(self, make_readonly: bool = True) -> FieldBuilder:
        self._is_readonly = make_readonly
        return self

    def with_type_parameter(self, builder: TypeParameterBuilder) -> FieldBuilder:
        self._type_parameters.append(require_not_none(builder, "builder"))
        return self

    def with_type_parameters(self, *builders: TypeParameterBuilder) -> FieldBuilder:
        self._type_parameters.extend(collect(builders, "builders"))
        return self

    def build(self) -> Field:
        if is_blank(self._name):
            raise MissingBuilderSettingError("Providing the name of the field is required when building a field.")
        if is_blank(self._type_name):
            raise MissingBuilderSettingError("Providing the type of the field is required when building a field.")

        return Field(
            name=self._name,
            type_name=self._type_name,
            access=self._access,
            is_readonly=self._is_readonly,
            summary=self._summary,
            type_arguments=build_type_parameters(self._type_parameters),
        )
