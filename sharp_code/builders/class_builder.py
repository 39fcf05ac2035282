"""
Builder for classes.
"""

from __future__ import annotations

import logging

from ..errors import CSharpSyntaxError, MissingBuilderSettingError
from ..nodes import AccessModifier, Class, MemberType
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


class ClassBuilder(SourceBuilder):
    """
    Builds a class.

    Fields, properties and constructors are kept as builders and only built
    when the class itself is built, so they can still be changed after being
    added to the class.
    """

    def __init__(self, name: str | None = None, access_modifier: AccessModifier = AccessModifier.PUBLIC):
        self._name = name
        self._access = access_modifier
        self._summary: str | None = None
        self._base_class: str | None = None
        self._interfaces: list[str] = []
        self._is_static = False
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

    def with_access_modifier(self, access_modifier: AccessModifier) -> ClassBuilder:
        self._access = require_access_modifier(access_modifier)
        return self

    def with_name(self, name: str) -> ClassBuilder:
        self._name = require_not_none(name, "name")
        return self

    def with_summary(self, summary: str) -> ClassBuilder:
        self._summary = require_not_none(summary, "summary")
        return self

    def with_inherited_class(self, name: str) -> ClassBuilder:
        self._base_class = require_not_blank(name, "name")
        return self

    def with_implemented_interface(self, name: str) -> ClassBuilder:
        self._interfaces.append(require_not_blank(name, "name"))
        return self

    def with_implemented_interfaces(self, *names: str) -> ClassBuilder:
        self._interfaces.extend(collect_names(names, "names"))
        return self

    def with_field(self, builder: FieldBuilder) -> ClassBuilder:
        self._fields.append(require_not_none(builder, "builder"))
        return self

    def with_fields(self, *builders: FieldBuilder) -> ClassBuilder:
        self._fields.extend(collect(builders, "builders"))
        return self

    def with_property(self, builder: PropertyBuilder) -> ClassBuilder:
        self._properties.append(require_not_none(builder, "builder"))
        return self

    def with_properties(self, *builders: PropertyBuilder) -> ClassBuilder:
        self._properties.extend(collect(builders, "builders"))
        return self

    def with_constructor(self, builder: ConstructorBuilder) -> ClassBuilder:
        self._constructors.append(require_not_none(builder, "builder"))
        return self

    def with_constructors(self, *builders: ConstructorBuilder) -> ClassBuilder:
        self._constructors.extend(collect(builders, "builders"))
        return self

    def with_type_parameter(self, builder: TypeParameterBuilder) -> ClassBuilder:
        self._type_parameters.append(require_not_none(builder, "builder"))
        return self

    def with_type_parameters(self, *builders: TypeParameterBuilder) -> ClassBuilder:
        self._type_parameters.extend(collect(builders, "builders"))
        return self

    def make_static(self, make_static: bool = True) -> ClassBuilder:
        """Make the class static. Its constructor, if any, becomes a static constructor."""
        self._is_static = make_static
        return self

    def has_member(
        self,
        name: str,
        member_type: MemberType | None = None,
        access_modifier: AccessModifier | None = None,
        case_sensitive: bool = False,
    ) -> bool:
        """
        Check whether a field or property with the given name has been added.

        Args:
            name: Name of the member
            member_type: Only look at fields or at properties
            access_modifier: Only match members with this access modifier
            case_sensitive: Compare names case sensitively
        """
        require_not_none(name, "name")
        if member_type in (None, MemberType.FIELD) and has_staged_member(self._fields, name, access_modifier, case_sensitive):
            return True
        if member_type in (None, MemberType.PROPERTY) and has_staged_member(self._properties, name, access_modifier, case_sensitive):
            return True
        return False

    def build(self) -> Class:
        if is_blank(self._name):
            raise MissingBuilderSettingError("Providing the name of the class is required when building a class.")
        if self._is_static and len(self._constructors) > 1:
            raise CSharpSyntaxError(f"Static classes can have only one constructor. Class '{self._name}' has {len(self._constructors)}.")

        logger.debug(
            "Building class %s: %d fields, %d properties, %d constructors",
            self._name,
            len(self._fields),
            len(self._properties),
            len(self._constructors),
        )

        return Class(
            name=self._name,
            access=self._access,
            summary=self._summary,
            base_class=self._base_class,
            interfaces=list(self._interfaces),
            is_static=self._is_static,
            type_parameters=build_type_parameters(self._type_parameters),
            fields=[builder.build() for builder in self._fields],
            properties=[builder.build() for builder in self._properties],
            constructors=[builder.build(self._name, is_static=self._is_static) for builder in self._constructors],
        )
