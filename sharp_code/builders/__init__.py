from .class_builder import ClassBuilder
from .constructor import ConstructorBuilder
from .enum_builder import EnumBuilder
from .enum_member import EnumMemberBuilder
from .field import FieldBuilder
from .interface import InterfaceBuilder
from .namespace import NamespaceBuilder
from .property import PropertyBuilder
from .struct import StructBuilder
from .type_parameter import TypeParameterBuilder

__all__ = [
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
]
