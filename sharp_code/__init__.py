"""Sharp Code

A fluent builder API for generating C# source code: namespaces, classes,
structs, interfaces, enums, their members and generic type parameters.
Builders validate the shape of the code when it is built and render it
with Allman braces and 4-space indentation.
"""

__version__ = "1.0.0"

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
from .code import (
    create_class,
    create_constructor,
    create_enum,
    create_enum_member,
    create_field,
    create_interface,
    create_namespace,
    create_property,
    create_struct,
    create_type_parameter,
)
from .errors import (
    ArgumentEmptyError,
    ArgumentNullError,
    ArgumentTypeError,
    CSharpSyntaxError,
    InvalidArgumentError,
    MissingBuilderSettingError,
    SharpCodeError,
)
from .nodes import AccessModifier, MemberType, TypeParameterConstraint

__all__ = [
    "create_namespace",
    "create_class",
    "create_struct",
    "create_interface",
    "create_enum",
    "create_enum_member",
    "create_field",
    "create_property",
    "create_constructor",
    "create_type_parameter",
    "AccessModifier",
    "MemberType",
    "TypeParameterConstraint",
    "ClassBuilder",
    "ConstructorBuilder",
    "EnumBuilder",
    "EnumMemberBuilder",
    "FieldBuilder",
    "InterfaceBuilder",
    "NamespaceBuilder",
    "PropertyBuilder",
    "StructBuilder",
    "TypeParameterBuilder",
    "SharpCodeError",
    "MissingBuilderSettingError",
    "InvalidArgumentError",
    "ArgumentNullError",
    "ArgumentEmptyError",
    "ArgumentTypeError",
    "CSharpSyntaxError",
]
