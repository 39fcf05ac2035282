"""
C# Serializer.

Converts built C# entities to formatted C# source code:
- Braces on new lines (Allman style)
- 4-space indentation
- Accessors on their own lines
- XML documentation comments above declarations
- Blank line after every member that ends with a closing brace

Members are rendered here line by line; the shells of classes, structs,
interfaces, enums and namespaces come from the Jinja2 templates.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ..nodes import (
    Accessor,
    Class,
    Constructor,
    CSharpNode,
    Enumeration,
    EnumerationMember,
    Field,
    Interface,
    Namespace,
    Property,
    Struct,
    TypeParameter,
)
from .fragments import INDENT, FragmentParser

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


def modifiers(*parts: str) -> str:
    """Join the non-empty modifier keywords."""
    return " ".join(part for part in parts if part)


class CSharpSerializer:
    """Serializes C# entities to source code."""

    INDENT = INDENT

    def __init__(self, fragments: FragmentParser | None = None):
        self._fragments = fragments
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.jinja_env.filters["summary"] = self._summary_lines
        self.type_template = self.jinja_env.get_template("type.cs.jinja2")
        self.enum_template = self.jinja_env.get_template("enum.cs.jinja2")
        self.namespace_template = self.jinja_env.get_template("namespace.cs.jinja2")

    @property
    def fragments(self) -> FragmentParser:
        # The tree-sitter parser is only needed for custom accessors and initializers
        if self._fragments is None:
            self._fragments = FragmentParser()
        return self._fragments

    def serialize(self, node: CSharpNode) -> str:
        """Serialize any built entity to source code."""
        if isinstance(node, Namespace):
            return self.serialize_namespace(node)
        if isinstance(node, (Class, Struct, Interface)):
            return self.serialize_type(node)
        if isinstance(node, Enumeration):
            return self.serialize_enum(node)
        if isinstance(node, Field):
            return "\n".join(self._serialize_field(node))
        if isinstance(node, Property):
            return "\n".join(self._serialize_property(node))
        raise TypeError(f"Cannot serialize {type(node).__name__}")

    def serialize_namespace(self, namespace: Namespace) -> str:
        types = [self.serialize_type(interface) for interface in namespace.interfaces]
        types += [self.serialize_enum(enum) for enum in namespace.enums]
        types += [self.serialize_type(struct) for struct in namespace.structs]
        types += [self.serialize_type(cls) for cls in namespace.classes]
        return self.namespace_template.render(namespace=namespace, types=types)

    def serialize_type(self, node: Class | Struct | Interface) -> str:
        """Serialize a class, struct or interface."""
        members: list[list[str]] = []
        if isinstance(node, (Class, Struct)):
            members += [self._serialize_field(field) for field in node.fields]
            members += [self._serialize_constructor(constructor) for constructor in node.constructors]
        members += [self._serialize_property(prop) for prop in node.properties]

        return self.type_template.render(
            node=node,
            declaration=self._type_declaration(node),
            constraints=self._constraint_clauses(node.type_parameters),
            members=self._separate(members),
        )

    def serialize_enum(self, enum: Enumeration) -> str:
        declaration = modifiers(enum.access.value, "enum", enum.name)
        members = ["\n".join(self._serialize_enum_member(member)) for member in enum.members]
        return self.enum_template.render(enum=enum, declaration=declaration, members=members)

    def _separate(self, members: list[list[str]]) -> list[dict]:
        """Pair every member with whether a blank line precedes it."""
        result = []
        previous: list[str] | None = None
        for lines in members:
            result.append(
                {
                    "text": "\n".join(lines),
                    "blank_line_before": previous is not None and previous[-1].endswith("}"),
                }
            )
            previous = lines
        return result

    def _type_declaration(self, node: Class | Struct | Interface) -> str:
        if isinstance(node, Class):
            keyword = modifiers("static" if node.is_static else "", "class")
            bases = ([node.base_class] if node.base_class else []) + node.interfaces
        elif isinstance(node, Struct):
            keyword = "struct"
            bases = node.interfaces
        else:
            keyword = "interface"
            bases = node.interfaces

        declaration = modifiers(node.access.value, keyword, node.name + self._type_parameter_list(node.type_parameters))
        if bases:
            declaration += " : " + ", ".join(bases)
        return declaration

    def _type_parameter_list(self, type_parameters: list[TypeParameter]) -> str:
        if not type_parameters:
            return ""
        return "<" + ", ".join(parameter.name for parameter in type_parameters) + ">"

    def _constraint_clauses(self, type_parameters: list[TypeParameter]) -> str:
        return " ".join(f"where {parameter.name} : {', '.join(parameter.constraints)}" for parameter in type_parameters if parameter.constraints)

    def _summary_lines(self, summary: str | None) -> list[str]:
        """Return the XML documentation comment for a summary."""
        if summary is None:
            return []
        lines = ["/// <summary>"]
        lines += [f"/// {line}".rstrip() for line in summary.splitlines() or [""]]
        lines.append("/// </summary>")
        return lines

    def _serialize_field(self, field: Field) -> list[str]:
        lines = self._summary_lines(field.summary)
        type_name = field.type_name + self._type_parameter_list(field.type_arguments)
        lines.append(modifiers(field.access.value, "readonly" if field.is_readonly else "", type_name, field.name) + ";")
        return lines

    def _serialize_property(self, prop: Property) -> list[str]:
        lines = self._summary_lines(prop.summary)
        type_name = prop.type_name + self._type_parameter_list(prop.type_arguments)
        declaration = modifiers(prop.access.value, "static" if prop.is_static else "", type_name, prop.name)
        initializer = f" = {self.fragments.format_default_value(prop.default_value)};" if prop.default_value is not None else ""

        if prop.getter is None and prop.setter is None:
            lines.append(declaration + (initializer or ";"))
            return lines

        lines.append(declaration)
        lines.append("{")
        if prop.getter is not None:
            lines += [self.INDENT + line for line in self._serialize_accessor("get", prop.getter)]
        if prop.setter is not None:
            keyword = modifiers(prop.setter_access.value if prop.setter_access else "", "set")
            lines += [self.INDENT + line for line in self._serialize_accessor(keyword, prop.setter)]
        lines.append("}" + initializer)
        return lines

    def _serialize_accessor(self, keyword: str, accessor: Accessor) -> list[str]:
        if accessor.is_auto:
            return [f"{keyword};"]
        body = accessor.body.strip()
        if body.startswith("{"):
            return [keyword] + self.fragments.format_block(body)
        return [f"{keyword} => {self.fragments.format_expression(body)};"]

    def _serialize_constructor(self, constructor: Constructor) -> list[str]:
        lines = self._summary_lines(constructor.summary)

        access = "" if constructor.is_static else constructor.access.value
        parameters = ", ".join(f"{parameter.type_name} {parameter.name}" for parameter in constructor.parameters)
        declaration = modifiers(access, "static" if constructor.is_static else "", f"{constructor.class_name}({parameters})")
        if constructor.base_call_args is not None:
            declaration += f": base({', '.join(constructor.base_call_args)})"

        lines.append(declaration)
        lines.append("{")
        for parameter in constructor.parameters:
            if parameter.receiving_member:
                lines.append(f"{self.INDENT}{parameter.receiving_member} = {parameter.name};")
        lines.append("}")
        return lines

    def _serialize_enum_member(self, member: EnumerationMember) -> list[str]:
        lines = self._summary_lines(member.summary)
        if member.value is None:
            lines.append(f"{member.name},")
        else:
            lines.append(f"{member.name} = {member.value},")
        return lines
