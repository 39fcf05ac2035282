"""
Builder for structs.
"""

from __future__ import annotations

import logging

from ..errors import CSharpSyntaxError, MissingBuilderSettingError
from ..nodes import AccessModifier, MemberType, Struct
from .base import (
    SourceBuilder,
    collect,
    collect_names,
    has_staged_member,
    is_blank,
    require_access_modifier,
    require_not_blank,
    require_not_none,
)
from .constructor import ConstructorBuilder
from .field import FieldBuilder
from .property import PropertyBuilder
from .type_parameter import TypeParameterBuilder, build_type_parameters

logger = logging.getLogger(__name__)


class StructBuilder(SourceBuilder):
    """
    Builds a struct.

    Structs cannot initialize properties and cannot declare a parameterless
    constructor; both are reported when building.
    """

    def __init__(self, name: str | None = None, access_modifier: AccessModifier = AccessModifier.PUBLIC):
        self._name = name
        self._access = access_modifier
        self._summary: str | None = None
        self._interfaces: list[str] = []
        self._fields: list[FieldBuilder] = []
        self._properties: list[PropertyBuilder] = []
        self._constructors: list[ConstructorBuilder] = []
        self._type_parameters: list[TypeParameterBuilder] = []

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def access_modifier(self) -> AccessModifier:
        return self._access

    def with_access_modifier(self, access_modifier: AccessModifier) -> StructBuilder:
        self._access = require_access_modifier(access_modifier)
        return self

    def with_name(self, name: str) -> StructBuilder:
        self._name = require_not_none(name, "name")
        return self

    def with_summary(self, summary: str) -> StructBuilder:
        self._summary = require_not_none(summary, "summary")
        return self

    def with_implemented_interface(self, name: str) -> StructBuilder:
        self._interfaces.append(require_not_blank(name, "name"))
        return self

    def with_implemented_interfaces(self, *names: str) -> StructBuilder:
        self._interfaces.extend(collect_names(names, "names"))
        return self

    def with_field(self, builder: FieldBuilder) -> StructBuilder:
        self._fields.append(require_not_none(builder, "builder"))
        return self

    def with_fields(self, *builders: FieldBuilder) -> StructBuilder:
        self._fields.extend(collect(builders, "builders"))
        return self

    def with_property(self, builder: PropertyBuilder) -> StructBuilder:
        self._properties.append(require_not_none(builder, "builder"))
        return self

    def with_properties(self, *builders: PropertyBuilder) -> StructBuilder:
        self._properties.extend(collect(builders, "builders"))
        return self

    def with_constructor(self, builder: ConstructorBuilder) -> StructBuilder:
        self._constructors.append(require_not_none(builder, "builder"))
        return self

    def with_constructors(self, *builders: ConstructorBuilder) -> StructBuilder:
        self._constructors.extend(collect(builders, "builders"))
        return self

    def with_type_parameter(self, builder: TypeParameterBuilder) -> StructBuilder:
        self._type_parameters.append(require_not_none(builder, "builder"))
        return self

    def with_type_parameters(self, *builders: TypeParameterBuilder) -> StructBuilder:
        self._type_parameters.extend(collect(builders, "builders"))
        return self

    def has_member(
        self,
        name: str,
        member_type: MemberType | None = None,
        access_modifier: AccessModifier | None = None,
        case_sensitive: bool = False,
    ) -> bool:
        require_not_none(name, "name")
        if member_type in (None, MemberType.FIELD) and has_staged_member(self._fields, name, access_modifier, case_sensitive):
            return True
        if member_type in (None, MemberType.PROPERTY) and has_staged_member(self._properties, name, access_modifier, case_sensitive):
            return True
        return False

    def build(self) -> Struct:
        if is_blank(self._name):
            raise MissingBuilderSettingError("Providing the name of the struct is required when building a struct.")

        logger.debug("Building struct %s: %d fields, %d properties", self._name, len(self._fields), len(self._properties))

        type_parameters = build_type_parameters(self._type_parameters)
        fields = [builder.build() for builder in self._fields]

        properties = [builder.build() for builder in self._properties]
        for prop in properties:
            if prop.default_value is not None:
                raise CSharpSyntaxError(f"Struct '{self._name}' cannot have instance property or field initializers. (CS0573) Property '{prop.name}'.")

        constructors = [builder.build(self._name) for builder in self._constructors]
        if any(not constructor.parameters for constructor in constructors):
            raise CSharpSyntaxError(f"Struct '{self._name}' cannot contain explicit parameterless constructors. (CS0568)")

        return Struct(
            name=self._name,
            access=self._access,
            summary=self._summary,
            interfaces=list(self._interfaces),
            type_parameters=type_parameters,
            fields=fields,
            properties=properties,
            constructors=constructors,
        )
