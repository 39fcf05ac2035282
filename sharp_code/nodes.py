"""
C# entity definitions.

These nodes are the finalized output of the builders. Every call to a
builder's ``build()`` produces a fresh graph of these nodes, which is then
handed to the serializer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class AccessModifier(str, Enum):
    """C# access modifiers. The value is the source text of the modifier."""

    NONE = ""
    PRIVATE = "private"
    INTERNAL = "internal"
    PROTECTED = "protected"
    PUBLIC = "public"
    PRIVATE_INTERNAL = "private internal"
    PROTECTED_INTERNAL = "protected internal"
    PRIVATE_PROTECTED = "private protected"

    def is_more_restrictive_than(self, other: AccessModifier) -> bool:
        """Whether an accessor with this modifier is allowed inside a member with `other`."""
        return self in _MORE_RESTRICTIVE.get(other, frozenset())


# Modifiers that an accessor may use, keyed by the modifier of the owning member.
_MORE_RESTRICTIVE: dict[AccessModifier, frozenset[AccessModifier]] = {
    AccessModifier.INTERNAL: frozenset({AccessModifier.PRIVATE, AccessModifier.PRIVATE_PROTECTED}),
    AccessModifier.PROTECTED: frozenset({AccessModifier.PRIVATE, AccessModifier.PRIVATE_PROTECTED}),
    AccessModifier.PRIVATE_PROTECTED: frozenset({AccessModifier.PRIVATE}),
    AccessModifier.PROTECTED_INTERNAL: frozenset(
        {
            AccessModifier.PRIVATE,
            AccessModifier.INTERNAL,
            AccessModifier.PROTECTED,
            AccessModifier.PRIVATE_PROTECTED,
        }
    ),
    AccessModifier.PUBLIC: frozenset(
        {
            AccessModifier.PRIVATE,
            AccessModifier.INTERNAL,
            AccessModifier.PROTECTED,
            AccessModifier.PRIVATE_PROTECTED,
            AccessModifier.PROTECTED_INTERNAL,
        }
    ),
}


class MemberType(str, Enum):
    """Kinds of members that can be looked up with ``has_member``."""

    FIELD = "field"
    PROPERTY = "property"
    CLASS = "class"
    STRUCT = "struct"
    INTERFACE = "interface"
    ENUM = "enum"


class TypeParameterConstraint:
    """Special generic constraints.

    Any other constraint (a base class or an interface name) is passed as a
    plain string.
    """

    # Non-nullable value type, implies new()
    STRUCT = "struct"
    # Non-nullable reference type
    CLASS = "class"
    # Nullable or non-nullable reference type
    NULLABLE_CLASS = "class?"
    # Non-nullable reference or value type
    NOT_NULL = "notnull"
    # Unconstrained parameter in overrides and explicit implementations
    DEFAULT = "default"
    # Non-nullable unmanaged type
    UNMANAGED = "unmanaged"
    # Public parameterless constructor, must come last
    NEW = "new()"


class AccessorKind(str, Enum):
    AUTO = "auto"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Accessor:
    """A property getter or setter. A missing accessor is represented by None."""

    kind: AccessorKind = AccessorKind.AUTO
    body: str | None = None

    @property
    def is_auto(self) -> bool:
        return self.kind == AccessorKind.AUTO

    @staticmethod
    def auto() -> Accessor:
        return Accessor()

    @staticmethod
    def custom(body: str) -> Accessor:
        return Accessor(kind=AccessorKind.CUSTOM, body=body)


@dataclass
class CSharpNode:
    """Base class for all C# entities."""

    pass


@dataclass
class TypeParameter(CSharpNode):
    name: str = ""
    constraints: list[str] = field(default_factory=list)


@dataclass
class Field(CSharpNode):
    name: str = ""
    type_name: str = ""
    access: AccessModifier = AccessModifier.PRIVATE
    is_readonly: bool = False
    summary: str | None = None
    type_arguments: list[TypeParameter] = field(default_factory=list)


@dataclass
class Property(CSharpNode):
    name: str = ""
    type_name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    getter: Accessor | None = field(default_factory=Accessor.auto)
    setter: Accessor | None = field(default_factory=Accessor.auto)
    setter_access: AccessModifier | None = None
    default_value: str | None = None
    is_static: bool = False
    summary: str | None = None
    type_arguments: list[TypeParameter] = field(default_factory=list)


@dataclass
class Parameter(CSharpNode):
    name: str = ""
    type_name: str = ""
    receiving_member: str | None = None


@dataclass
class Constructor(CSharpNode):
    class_name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    parameters: list[Parameter] = field(default_factory=list)
    base_call_args: list[str] | None = None
    is_static: bool = False
    summary: str | None = None


@dataclass
class Class(CSharpNode):
    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    summary: str | None = None
    base_class: str | None = None
    interfaces: list[str] = field(default_factory=list)
    is_static: bool = False
    fields: list[Field] = field(default_factory=list)
    properties: list[Property] = field(default_factory=list)
    constructors: list[Constructor] = field(default_factory=list)
    type_parameters: list[TypeParameter] = field(default_factory=list)


@dataclass
class Struct(CSharpNode):
    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    summary: str | None = None
    interfaces: list[str] = field(default_factory=list)
    fields: list[Field] = field(default_factory=list)
    properties: list[Property] = field(default_factory=list)
    constructors: list[Constructor] = field(default_factory=list)
    type_parameters: list[TypeParameter] = field(default_factory=list)


@dataclass
class Interface(CSharpNode):
    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    summary: str | None = None
    interfaces: list[str] = field(default_factory=list)
    properties: list[Property] = field(default_factory=list)
    type_parameters: list[TypeParameter] = field(default_factory=list)


@dataclass
class EnumerationMember(CSharpNode):
    name: str = ""
    value: int | None = None
    summary: str | None = None


@dataclass
class Enumeration(CSharpNode):
    name: str = ""
    access: AccessModifier = AccessModifier.PUBLIC
    summary: str | None = None
    is_flags: bool = False
    members: list[EnumerationMember] = field(default_factory=list)


@dataclass
class Namespace(CSharpNode):
    """A namespace declaration together with the using directives of its file."""

    name: str = ""
    usings: list[str] = field(default_factory=list)
    classes: list[Class] = field(default_factory=list)
    structs: list[Struct] = field(default_factory=list)
    interfaces: list[Interface] = field(default_factory=list)
    enums: list[Enumeration] = field(default_factory=list)
