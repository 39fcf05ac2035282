"""
Entry points for creating builders.

Every factory can be called without arguments, returning an empty builder to
be configured fluently, or with the mandatory settings of the entity:

    create_class("User").with_property(create_property("int", "Id"))

Settings passed to a factory are validated immediately: None raises
ArgumentNullError and a blank name or type raises ArgumentEmptyError.
"""

from __future__ import annotations

from typing import Any

from .builders import (
    ClassBuilder,
    ConstructorBuilder,
    EnumBuilder,
    EnumMemberBuilder,
    FieldBuilder,
    InterfaceBuilder,
    NamespaceBuilder,
    PropertyBuilder,
    StructBuilder,
    TypeParameterBuilder,
)
from .builders.base import collect_names, require_access_modifier, require_not_blank, type_name_of
from .nodes import AccessModifier

# Distinguishes "not passed" from an explicit None
_UNSET: Any = object()


def _given(*values: Any) -> bool:
    return any(value is not _UNSET for value in values)


def _name(value: Any, argument: str = "name") -> str:
    return require_not_blank(None if value is _UNSET else value, argument)


def _type_name(value: Any) -> str:
    return require_not_blank(type_name_of(None if value is _UNSET else value), "type_name")


def create_namespace(name: str = _UNSET) -> NamespaceBuilder:
    if not _given(name):
        return NamespaceBuilder()
    return NamespaceBuilder(_name(name))


def create_class(name: str = _UNSET, access_modifier: AccessModifier = AccessModifier.PUBLIC) -> ClassBuilder:
    if not _given(name):
        return ClassBuilder(access_modifier=require_access_modifier(access_modifier))
    return ClassBuilder(_name(name), require_access_modifier(access_modifier))


def create_struct(name: str = _UNSET, access_modifier: AccessModifier = AccessModifier.PUBLIC) -> StructBuilder:
    if not _given(name):
        return StructBuilder(access_modifier=require_access_modifier(access_modifier))
    return StructBuilder(_name(name), require_access_modifier(access_modifier))


def create_interface(name: str = _UNSET, access_modifier: AccessModifier = AccessModifier.PUBLIC) -> InterfaceBuilder:
    if not _given(name):
        return InterfaceBuilder(access_modifier=require_access_modifier(access_modifier))
    return InterfaceBuilder(_name(name), require_access_modifier(access_modifier))


def create_enum(name: str = _UNSET, access_modifier: AccessModifier = AccessModifier.PUBLIC) -> EnumBuilder:
    if not _given(name):
        return EnumBuilder(access_modifier=require_access_modifier(access_modifier))
    return EnumBuilder(_name(name), require_access_modifier(access_modifier))


def create_enum_member(name: str = _UNSET, value: int | None = None) -> EnumMemberBuilder:
    if not _given(name):
        return EnumMemberBuilder(value=value)
    return EnumMemberBuilder(_name(name), value)


def create_field(
    type_name: str | type = _UNSET,
    name: str = _UNSET,
    access_modifier: AccessModifier = AccessModifier.PRIVATE,
) -> FieldBuilder:
    """
    Create a field builder.

    Args:
        type_name: Type of the field, by name or as a Python type
        name: Name of the field
        access_modifier: Access modifier, private by default
    """
    if not _given(type_name, name):
        return FieldBuilder(access_modifier=require_access_modifier(access_modifier))
    return FieldBuilder(_type_name(type_name), _name(name), require_access_modifier(access_modifier))


def create_property(
    type_name: str | type = _UNSET,
    name: str = _UNSET,
    access_modifier: AccessModifier = AccessModifier.PUBLIC,
) -> PropertyBuilder:
    """
    Create a property builder. The property starts out with auto implemented
    getter and setter.

    Args:
        type_name: Type of the property, by name or as a Python type
        name: Name of the property
        access_modifier: Access modifier, public by default
    """
    if not _given(type_name, name):
        return PropertyBuilder(access_modifier=require_access_modifier(access_modifier))
    return PropertyBuilder(_type_name(type_name), _name(name), require_access_modifier(access_modifier))


def create_constructor(access_modifier: AccessModifier = _UNSET) -> ConstructorBuilder:
    if not _given(access_modifier):
        return ConstructorBuilder()
    return ConstructorBuilder(require_access_modifier(access_modifier))


def create_type_parameter(name: str = _UNSET, *constraints: str) -> TypeParameterBuilder:
    if not _given(name):
        return TypeParameterBuilder()
    return TypeParameterBuilder(_name(name), collect_names(constraints, "constraints"))
