"""
Builder for constructors.

A constructor does not know the name of the type it belongs to. The owning
class or struct builder passes it in when building, along with whether the
constructor is static.
"""

from __future__ import annotations

from ..errors import CSharpSyntaxError
from ..nodes import AccessModifier, Constructor, Parameter
from .base import collect_names, require_access_modifier, require_not_blank, require_not_none


class ConstructorBuilder:
    def __init__(self, access_modifier: AccessModifier | None = None):
        # None means the modifier was never set explicitly; it then defaults to public
        self._access = access_modifier
        self._parameters: list[Parameter] = []
        self._base_call_args: list[str] | None = None
        self._summary: str | None = None

    @property
    def access_modifier(self) -> AccessModifier:
        return AccessModifier.PUBLIC if self._access is None else self._access

    def with_access_modifier(self, access_modifier: AccessModifier) -> ConstructorBuilder:
        self._access = require_access_modifier(access_modifier)
        return self

    def with_summary(self, summary: str) -> ConstructorBuilder:
        self._summary = require_not_none(summary, "summary")
        return self

    def with_parameter(self, type_name: str, name: str, receiving_member: str | None = None) -> ConstructorBuilder:
        """
        Add a parameter.

        Args:
            type_name: Type of the parameter
            name: Name of the parameter
            receiving_member: Field or property the constructor body assigns the
                parameter to, e.g. ``_id = id;``
        """
        require_not_blank(type_name, "type_name")
        require_not_blank(name, "name")
        if receiving_member is not None:
            require_not_blank(receiving_member, "receiving_member")

        self._parameters.append(Parameter(name=name, type_name=type_name, receiving_member=receiving_member))
        return self

    def with_base_call(self, *arguments: str) -> ConstructorBuilder:
        """Call the base constructor with the given argument expressions, e.g. ``: base(4)``."""
        self._base_call_args = collect_names(arguments, "arguments")
        return self

    def build(self, type_name: str, is_static: bool = False) -> Constructor:
        """
        Build the constructor of the type `type_name`.

        Raises:
            CSharpSyntaxError: If a static constructor has an explicit access
                modifier, parameters or a base call
        """
        if is_static:
            if self._access not in (None, AccessModifier.NONE):
                raise CSharpSyntaxError(f"Access modifiers are not allowed on static constructors. (CS0515) Constructor of '{type_name}'.")
            if self._parameters:
                raise CSharpSyntaxError(f"A static constructor must be parameterless. (CS0132) Constructor of '{type_name}'.")
            if self._base_call_args is not None:
                raise CSharpSyntaxError(f"A static constructor cannot have an explicit base constructor call. (CS0514) Constructor of '{type_name}'.")

        return Constructor(
            class_name=type_name,
            access=AccessModifier.NONE if is_static else self.access_modifier,
            parameters=list(self._parameters),
            base_call_args=None if self._base_call_args is None else list(self._base_call_args),
            is_static=is_static,
            summary=self._summary,
        )
