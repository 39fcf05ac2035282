"""
Tests for has_member on the composite builders.
"""

import pytest

from sharp_code import (
    AccessModifier,
    ArgumentNullError,
    MemberType,
    create_class,
    create_enum,
    create_enum_member,
    create_field,
    create_interface,
    create_namespace,
    create_property,
    create_struct,
)


class TestClassIntrospection:
    @pytest.fixture
    def builder(self):
        return (
            create_class("Test")
            .with_fields(create_field("string", "_name"), create_field("int", "_count", AccessModifier.PROTECTED))
            .with_properties(create_property("string", "Name"), create_property("bool", "HasValue"))
        )

    def test_any_member(self, builder):
        assert builder.has_member("_name")
        assert builder.has_member("Name")
        assert not builder.has_member("Missing")

    def test_fields(self, builder):
        assert builder.has_member("_count", MemberType.FIELD)
        assert builder.has_member("_COUNT", MemberType.FIELD)
        assert not builder.has_member("_COUNT", MemberType.FIELD, case_sensitive=True)
        assert not builder.has_member("_name", MemberType.PROPERTY)

    def test_properties(self, builder):
        assert builder.has_member("HaSValUE", MemberType.PROPERTY)
        assert not builder.has_member("HaSValUE", MemberType.PROPERTY, case_sensitive=True)
        assert not builder.has_member("Name", MemberType.FIELD)

    def test_access_modifier_filter(self, builder):
        assert builder.has_member("_count", access_modifier=AccessModifier.PROTECTED)
        assert not builder.has_member("_count", access_modifier=AccessModifier.PRIVATE)
        assert builder.has_member("Name", MemberType.PROPERTY, AccessModifier.PUBLIC)

    def test_kinds_a_class_cannot_hold(self, builder):
        assert not builder.has_member("Name", MemberType.ENUM)

    def test_works_before_members_are_complete(self):
        builder = create_class("Test").with_property(create_property().with_name("Draft"))

        assert builder.has_member("draft")

    def test_null_name(self, builder):
        with pytest.raises(ArgumentNullError):
            builder.has_member(None)


class TestStructIntrospection:
    def test_has_member(self):
        builder = (
            create_struct("Test")
            .with_fields(create_field("int", "_x"), create_field("string", "_title"))
            .with_properties(
                create_property("int", "X").with_getter("_x").with_setter("_x = value"),
                create_property("string", "Title").with_getter("_title").with_setter("_title = value"),
            )
        )

        assert builder.has_member("_x")
        assert builder.has_member("_title", MemberType.FIELD)
        assert builder.has_member("Title", MemberType.PROPERTY)
        assert not builder.has_member("_x", MemberType.PROPERTY)
        assert not builder.has_member("X", MemberType.FIELD)


class TestInterfaceIntrospection:
    def test_has_member(self):
        builder = create_interface("ITest").with_properties(create_property(str, "Prefix"), create_property(str, "Suffix"))

        assert builder.has_member("Prefix")
        assert builder.has_member("suffix", MemberType.PROPERTY)
        assert not builder.has_member("Prefix", MemberType.FIELD)


class TestEnumIntrospection:
    def test_has_member(self):
        builder = create_enum("Test").with_members(create_enum_member("None"), create_enum_member("Some"))

        assert builder.has_member("none")
        assert builder.has_member("some")
        assert not builder.has_member("any")
        assert not builder.has_member("NONE", case_sensitive=True)


class TestNamespaceIntrospection:
    @pytest.fixture
    def builder(self):
        return (
            create_namespace("Container")
            .with_class(create_class("TestClass"))
            .with_enum(create_enum("TestEnum", AccessModifier.INTERNAL))
            .with_interface(create_interface("ITest"))
            .with_struct(create_struct("TestStruct"))
        )

    def test_by_kind(self, builder):
        assert builder.has_member("TestClass", MemberType.CLASS)
        assert builder.has_member("TestEnum", MemberType.ENUM)
        assert builder.has_member("ITest", MemberType.INTERFACE)
        assert builder.has_member("TestStruct", MemberType.STRUCT)
        assert not builder.has_member("TestClass", MemberType.STRUCT)
        assert not builder.has_member("TestClass", MemberType.FIELD)

    def test_any_kind(self, builder):
        assert builder.has_member("teststruct")
        assert not builder.has_member("teststruct", case_sensitive=True)

    def test_access_modifier_filter(self, builder):
        assert builder.has_member("TestEnum", access_modifier=AccessModifier.INTERNAL)
        assert not builder.has_member("TestEnum", access_modifier=AccessModifier.PUBLIC)
