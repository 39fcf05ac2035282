"""
Properties shared by every composite builder: rendering is repeatable and
bulk ``with_*s`` calls are interchangeable with repeated single calls.
"""

import pytest

from sharp_code import (
    AccessModifier,
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


def fields():
    return [create_field("int", "_x").make_readonly(), create_field("string", "_title", AccessModifier.PROTECTED)]


def class_properties():
    return [create_property("int", "X").with_getter("_x").without_setter(), create_property("string", "Title").with_default_value('"none"')]


def struct_properties():
    return [create_property("int", "X").with_getter("_x").without_setter(), create_property("string", "Title").without_setter()]


def interface_properties():
    return [create_property("int", "Id").without_setter(), create_property("string", "Name")]


def constructors():
    return [
        create_constructor().with_parameter("int", "x", "_x"),
        create_constructor(AccessModifier.PRIVATE).with_parameter("int", "x", "_x").with_parameter("string", "title", "_title"),
    ]


def members():
    return [create_enum_member("None"), create_enum_member("Read"), create_enum_member("Write"), create_enum_member("Delete")]


def type_parameters():
    return [create_type_parameter("TKey", "notnull"), create_type_parameter("TValue")]


def full_class():
    return (
        create_class("Document")
        .with_summary("A document.")
        .with_inherited_class("Entity")
        .with_implemented_interfaces("IDocument", "IComparable")
        .with_type_parameters(type_parameters())
        .with_fields(fields())
        .with_constructors(constructors())
        .with_properties(class_properties())
    )


def full_struct():
    return create_struct("Point").with_implemented_interfaces("IPoint").with_fields(fields()).with_constructors(constructors()).with_properties(struct_properties())


def full_interface():
    return create_interface("IRepository").with_implemented_interfaces("IDisposable").with_type_parameters(type_parameters()).with_properties(interface_properties())


def flags_enum():
    return create_enum("Permissions").make_flags_enum().with_members(members())


def full_namespace():
    return (
        create_namespace("Generated")
        .with_usings("System", "System.Collections.Generic")
        .with_classes(full_class(), create_class("Empty", AccessModifier.INTERNAL))
        .with_structs(full_struct())
        .with_interfaces(full_interface())
        .with_enums(flags_enum(), create_enum("Colors").with_member(create_enum_member("Red", 4)))
    )


COMPOSITE_BUILDERS = {
    "class": full_class,
    "struct": full_struct,
    "interface": full_interface,
    "enum": flags_enum,
    "namespace": full_namespace,
}


class TestRepeatedRendering:
    @pytest.mark.parametrize("make_builder", list(COMPOSITE_BUILDERS.values()), ids=list(COMPOSITE_BUILDERS))
    def test_output_is_identical_across_calls(self, make_builder):
        builder = make_builder()

        first = builder.to_source_code()

        assert builder.to_source_code() == first
        assert str(builder) == first
        assert builder.build() == builder.build()

    def test_flag_values_are_derived_once(self):
        builder = full_namespace()
        builder.to_source_code()

        code = builder.to_source_code()

        assert "None = 0," in code
        assert "Delete = 4," in code
        assert code.count("[System.Flags]") == 1
        assert code.count("public Document(int x)") == 1


def single_calls_class():
    builder = create_class("Document").with_summary("A document.").with_inherited_class("Entity")
    builder.with_implemented_interface("IDocument").with_implemented_interface("IComparable")
    for type_parameter in type_parameters():
        builder.with_type_parameter(type_parameter)
    for field in fields():
        builder.with_field(field)
    for constructor in constructors():
        builder.with_constructor(constructor)
    for prop in class_properties():
        builder.with_property(prop)
    return builder


def single_calls_struct():
    builder = create_struct("Point").with_implemented_interface("IPoint")
    for field in fields():
        builder.with_field(field)
    for constructor in constructors():
        builder.with_constructor(constructor)
    for prop in struct_properties():
        builder.with_property(prop)
    return builder


def single_calls_interface():
    builder = create_interface("IRepository").with_implemented_interface("IDisposable")
    for type_parameter in type_parameters():
        builder.with_type_parameter(type_parameter)
    for prop in interface_properties():
        builder.with_property(prop)
    return builder


def single_calls_enum():
    builder = create_enum("Permissions").make_flags_enum()
    for member in members():
        builder.with_member(member)
    return builder


def single_calls_namespace():
    return (
        create_namespace("Generated")
        .with_using("System")
        .with_using("System.Collections.Generic")
        .with_class(single_calls_class())
        .with_class(create_class("Empty", AccessModifier.INTERNAL))
        .with_struct(single_calls_struct())
        .with_interface(single_calls_interface())
        .with_enum(single_calls_enum())
        .with_enum(create_enum("Colors").with_member(create_enum_member("Red", 4)))
    )


EQUIVALENT_BUILDERS = {
    "class": (full_class, single_calls_class),
    "struct": (full_struct, single_calls_struct),
    "interface": (full_interface, single_calls_interface),
    "enum": (flags_enum, single_calls_enum),
    "namespace": (full_namespace, single_calls_namespace),
}


class TestBulkCalls:
    @pytest.mark.parametrize("make_bulk,make_single", list(EQUIVALENT_BUILDERS.values()), ids=list(EQUIVALENT_BUILDERS))
    def test_bulk_and_single_calls_are_equivalent(self, make_bulk, make_single):
        assert make_bulk().to_source_code() == make_single().to_source_code()

    def test_bulk_calls_accept_varargs_and_lists(self):
        assert (
            create_struct("Point").with_implemented_interfaces("IPoint").with_fields(*fields()).with_constructors(*constructors()).with_properties(*struct_properties()).to_source_code()
            == full_struct().to_source_code()
        )
        assert create_interface("IRepository").with_implemented_interfaces("IDisposable").with_type_parameters(
            *type_parameters()
        ).with_properties(*interface_properties()).to_source_code() == full_interface().to_source_code()
        assert create_enum("Permissions").make_flags_enum().with_members(*members()).to_source_code() == flags_enum().to_source_code()
