"""
Builder for namespaces, the top level of a generated file.
"""

from __future__ import annotations

import logging

from ..errors import CSharpSyntaxError, MissingBuilderSettingError
from ..nodes import AccessModifier, MemberType, Namespace
from .base import SourceBuilder, collect, has_staged_member, is_blank, require_not_blank, require_not_none
from .class_builder import ClassBuilder
from .enum_builder import EnumBuilder
from .interface import InterfaceBuilder
from .struct import StructBuilder

logger = logging.getLogger(__name__)

# Access modifiers allowed on types declared directly in a namespace
NAMESPACE_ACCESS_MODIFIERS = frozenset({AccessModifier.NONE, AccessModifier.INTERNAL, AccessModifier.PUBLIC})


class NamespaceBuilder(SourceBuilder):
    """
    Builds a namespace together with the using directives of its file.

    Types are emitted grouped by kind: interfaces, enums, structs, then
    classes, each group in insertion order.
    """

    def __init__(self, name: str | None = None):
        self._name = name
        self._usings: list[str] = []
        self._classes: list[ClassBuilder] = []
        self._structs: list[StructBuilder] = []
        self._interfaces: list[InterfaceBuilder] = []
        self._enums: list[EnumBuilder] = []

    @property
    def name(self) -> str | None:
        return self._name

    def with_name(self, name: str) -> NamespaceBuilder:
        self._name = require_not_none(name, "name")
        return self

    def with_using(self, using: str) -> NamespaceBuilder:
        """Add a using directive, e.g. ``System.Text`` (a trailing ``;`` is ignored)."""
        self._usings.append(self._using_name(using, "using"))
        return self

    def with_usings(self, *usings: str) -> NamespaceBuilder:
        self._usings.extend([self._using_name(using, "usings") for using in collect(usings, "usings")])
        return self

    @staticmethod
    def _using_name(using: str, argument: str) -> str:
        require_not_blank(using, argument)
        return require_not_blank(using.strip().removesuffix(";").rstrip(), argument)

    def with_class(self, builder: ClassBuilder) -> NamespaceBuilder:
        self._classes.append(require_not_none(builder, "builder"))
        return self

    def with_classes(self, *builders: ClassBuilder) -> NamespaceBuilder:
        self._classes.extend(collect(builders, "builders"))
        return self

    def with_struct(self, builder: StructBuilder) -> NamespaceBuilder:
        self._structs.append(require_not_none(builder, "builder"))
        return self

    def with_structs(self, *builders: StructBuilder) -> NamespaceBuilder:
        self._structs.extend(collect(builders, "builders"))
        return self

    def with_interface(self, builder: InterfaceBuilder) -> NamespaceBuilder:
        self._interfaces.append(require_not_none(builder, "builder"))
        return self

    def with_interfaces(self, *builders: InterfaceBuilder) -> NamespaceBuilder:
        self._interfaces.extend(collect(builders, "builders"))
        return self

    def with_enum(self, builder: EnumBuilder) -> NamespaceBuilder:
        self._enums.append(require_not_none(builder, "builder"))
        return self

    def with_enums(self, *builders: EnumBuilder) -> NamespaceBuilder:
        self._enums.extend(collect(builders, "builders"))
        return self

    def has_member(
        self,
        name: str,
        member_type: MemberType | None = None,
        access_modifier: AccessModifier | None = None,
        case_sensitive: bool = False,
    ) -> bool:
        """
        Check whether a type with the given name has been added.

        Args:
            name: Name of the type
            member_type: Only look at classes, structs, interfaces or enums
            access_modifier: Only match types with this access modifier
            case_sensitive: Compare names case sensitively
        """
        require_not_none(name, "name")
        staged = {
            MemberType.CLASS: self._classes,
            MemberType.STRUCT: self._structs,
            MemberType.INTERFACE: self._interfaces,
            MemberType.ENUM: self._enums,
        }
        if member_type is not None:
            return has_staged_member(staged.get(member_type, []), name, access_modifier, case_sensitive)
        return any(has_staged_member(builders, name, access_modifier, case_sensitive) for builders in staged.values())

    def build(self) -> Namespace:
        if is_blank(self._name):
            raise MissingBuilderSettingError("Providing the name of the namespace is required when building a namespace.")

        logger.debug(
            "Building namespace %s: %d classes, %d structs, %d interfaces, %d enums",
            self._name,
            len(self._classes),
            len(self._structs),
            len(self._interfaces),
            len(self._enums),
        )

        namespace = Namespace(
            name=self._name,
            usings=list(self._usings),
            classes=[builder.build() for builder in self._classes],
            structs=[builder.build() for builder in self._structs],
            interfaces=[builder.build() for builder in self._interfaces],
            enums=[builder.build() for builder in self._enums],
        )

        for kind, types in (
            ("class", namespace.classes),
            ("struct", namespace.structs),
            ("interface", namespace.interfaces),
            ("enum", namespace.enums),
        ):
            for declared in types:
                if declared.access not in NAMESPACE_ACCESS_MODIFIERS:
                    raise CSharpSyntaxError(
                        f"The {kind} '{declared.name}' cannot be declared '{declared.access.value}' inside a namespace. "
                        "Only 'public' and 'internal' are allowed. (CS1527)"
                    )

        return namespace
