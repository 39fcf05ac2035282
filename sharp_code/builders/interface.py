"""
Builder for interfaces.
"""

from __future__ import annotations

import logging

from ..errors import CSharpSyntaxError, MissingBuilderSettingError
from ..nodes import AccessModifier, Interface, MemberType, Property
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
from .property import PropertyBuilder
from .type_parameter import TypeParameterBuilder, build_type_parameters

logger = logging.getLogger(__name__)


class InterfaceBuilder(SourceBuilder):
    def __init__(self, name: str | None = None, access_modifier: AccessModifier = AccessModifier.PUBLIC):
        self._name = name
        self._access = access_modifier
        self._summary: str | None = None
        self._interfaces: list[str] = []
        self._properties: list[PropertyBuilder] = []
        self._type_parameters: list[TypeParameterBuilder] = []

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def access_modifier(self) -> AccessModifier:
        return self._access

    def with_access_modifier(self, access_modifier: AccessModifier) -> InterfaceBuilder:
        self._access = require_access_modifier(access_modifier)
        return self

    def with_name(self, name: str) -> InterfaceBuilder:
        self._name = require_not_none(name, "name")
        return self

    def with_summary(self, summary: str) -> InterfaceBuilder:
        self._summary = require_not_none(summary, "summary")
        return self

    def with_implemented_interface(self, name: str) -> InterfaceBuilder:
        self._interfaces.append(require_not_blank(name, "name"))
        return self

    def with_implemented_interfaces(self, *names: str) -> InterfaceBuilder:
        self._interfaces.extend(collect_names(names, "names"))
        return self

    def with_property(self, builder: PropertyBuilder) -> InterfaceBuilder:
        self._properties.append(require_not_none(builder, "builder"))
        return self

    def with_properties(self, *builders: PropertyBuilder) -> InterfaceBuilder:
        self._properties.extend(collect(builders, "builders"))
        return self

    def with_type_parameter(self, builder: TypeParameterBuilder) -> InterfaceBuilder:
        self._type_parameters.append(require_not_none(builder, "builder"))
        return self

    def with_type_parameters(self, *builders: TypeParameterBuilder) -> InterfaceBuilder:
        self._type_parameters.extend(collect(builders, "builders"))
        return self

    def has_member(
        self,
        name: str,
        member_type: MemberType | None = None,
        access_modifier: AccessModifier | None = None,
        case_sensitive: bool = False,
    ) -> bool:
        """Check whether a property with the given name has been added. Interfaces hold no other members."""
        require_not_none(name, "name")
        if member_type not in (None, MemberType.PROPERTY):
            return False
        return has_staged_member(self._properties, name, access_modifier, case_sensitive)

    def build(self) -> Interface:
        if is_blank(self._name):
            raise MissingBuilderSettingError("Providing the name of the interface is required when building an interface.")

        logger.debug("Building interface %s: %d properties", self._name, len(self._properties))

        type_parameters = build_type_parameters(self._type_parameters)
        properties = [builder.build(interface_member=True) for builder in self._properties]
        for prop in properties:
            self._check_property(prop)

        return Interface(
            name=self._name,
            access=self._access,
            summary=self._summary,
            interfaces=list(self._interfaces),
            type_parameters=type_parameters,
            properties=properties,
        )

    def _check_property(self, prop: Property) -> None:
        if prop.default_value is not None:
            raise CSharpSyntaxError(f"Interface '{self._name}' cannot have property initializers. (CS8053) Property '{prop.name}'.")
        if prop.getter is None and prop.setter is None:
            raise CSharpSyntaxError(f"Interface property '{prop.name}' must have at least one accessor. (CS0548)")
        if prop.getter is not None and not prop.getter.is_auto:
            raise CSharpSyntaxError(f"Interface property '{prop.name}' cannot have a custom getter.")
        if prop.setter is not None and not prop.setter.is_auto:
            raise CSharpSyntaxError(f"Interface property '{prop.name}' cannot have a custom setter.")
