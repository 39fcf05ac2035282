"""
Builder for properties.
"""

from __future__ import annotations

from ..errors import CSharpSyntaxError, MissingBuilderSettingError
from ..nodes import Accessor, AccessModifier, Property
from .base import (
    SourceBuilder,
    collect,
    is_blank,
    require_access_modifier,
    require_not_blank,
    require_not_none,
    type_name_of,
)
from .type_parameter import TypeParameterBuilder, build_type_parameters


class PropertyBuilder(SourceBuilder):
    """
    Builds a property.

    Both accessors start out auto implemented (``get; set;``). An accessor can
    be given a custom body, which is either an expression (``_id`` renders as
    ``get => _id;``) or a block starting with ``{``, or it can be removed
    altogether with ``without_getter``/``without_setter``.
    """

    def __init__(
        self,
        type_name: str | None = None,
        name: str | None = None,
        access_modifier: AccessModifier = AccessModifier.PUBLIC,
    ):
        self._type_name = type_name
        self._name = name
        self._access = access_modifier
        self._getter: Accessor | None = Accessor.auto()
        self._setter: Accessor | None = Accessor.auto()
        self._setter_access: AccessModifier | None = None
        self._default_value: str | None = None
        self._is_static = False
        self._summary: str | None = None
        self._type_parameters: list[TypeParameterBuilder] = []

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def access_modifier(self) -> AccessModifier:
        return self._access

    def with_access_modifier(self, access_modifier: AccessModifier) -> PropertyBuilder:
        self._access = require_access_modifier(access_modifier)
        return self

    def with_type(self, type_name: str | type) -> PropertyBuilder:
        """Set the type, either by name or from a Python type (its ``__name__`` is used)."""
        self._type_name = type_name_of(type_name)
        return self

    def with_name(self, name: str) -> PropertyBuilder:
        self._name = require_not_none(name, "name")
        return self

    def with_summary(self, summary: str) -> PropertyBuilder:
        self._summary = require_not_none(summary, "summary")
        return self

    def with_getter(self, expression: str | None = None) -> PropertyBuilder:
        """
        Set the getter. Without an expression the getter is auto implemented.

        Examples:
            with_getter()                    -> get;
            with_getter("_id")               -> get => _id;
            with_getter("{ return _id; }")   -> get { return _id; }
        """
        self._getter = self._accessor(expression, "expression")
        return self

    def without_getter(self) -> PropertyBuilder:
        self._getter = None
        return self

    def with_setter(self, expression: str | None = None) -> PropertyBuilder:
        """
        Set the setter. Without an expression the setter is auto implemented.
        Custom bodies can use the implicit ``value`` parameter.
        """
        self._setter = self._accessor(expression, "expression")
        return self

    def without_setter(self) -> PropertyBuilder:
        self._setter = None
        return self

    def with_setter_access_modifier(self, access_modifier: AccessModifier) -> PropertyBuilder:
        """Restrict the setter, e.g. ``public int Id { get; private set; }``."""
        self._setter_access = require_access_modifier(access_modifier)
        return self

    def with_default_value(self, default_value: str) -> PropertyBuilder:
        """
        Set the initializer of the property.

        The value is used as-is, so string values need their own quotes:
        ``with_default_value('"text"')``.
        """
        self._default_value = require_not_blank(default_value, "default_value")
        return self

    def make_static(self, make_static: bool = True) -> PropertyBuilder:
        self._is_static = make_static
        return self

    def with_type_parameter(self, builder: TypeParameterBuilder) -> PropertyBuilder:
        self._type_parameters.append(require_not_none(builder, "builder"))
        return self

    def with_type_parameters(self, *builders: TypeParameterBuilder) -> PropertyBuilder:
        self._type_parameters.extend(collect(builders, "builders"))
        return self

    def build(self, interface_member: bool = False) -> Property:
        """
        Build the property.

        Args:
            interface_member: The property is declared inside an interface; it
                gets no access modifier and may have an auto setter alone.
        """
        if is_blank(self._name):
            raise MissingBuilderSettingError("Providing the name of the property is required when building a property.")
        if is_blank(self._type_name):
            raise MissingBuilderSettingError("Providing the type of the property is required when building a property.")

        getter, setter = self._getter, self._setter
        if setter is not None and setter.is_auto and not interface_member:
            if getter is None:
                raise CSharpSyntaxError("Properties with auto implemented setters must also have auto implemented getters. (CS8051)")
            if not getter.is_auto:
                raise CSharpSyntaxError("Properties with custom getters cannot have auto implemented setters.")

        if self._default_value is not None and any(accessor is not None and not accessor.is_auto for accessor in (getter, setter)):
            raise CSharpSyntaxError("Only auto implemented properties can have a default value. (CS8050)")

        access = AccessModifier.NONE if interface_member else self._access
        if setter is not None and self._setter_access is not None:
            if not self._setter_access.is_more_restrictive_than(access):
                raise CSharpSyntaxError(
                    f"The accessibility modifier of the accessor must be more restrictive than the property '{self._name}'. (CS0273)"
                )

        return Property(
            name=self._name,
            type_name=self._type_name,
            access=access,
            getter=getter,
            setter=setter,
            setter_access=self._setter_access if setter is not None else None,
            default_value=self._default_value,
            is_static=self._is_static,
            summary=self._summary,
            type_arguments=build_type_parameters(self._type_parameters),
        )

    @staticmethod
    def _accessor(expression: str | None, argument: str) -> Accessor:
        if expression is None:
            return Accessor.auto()
        return Accessor.custom(require_not_blank(expression, argument))
