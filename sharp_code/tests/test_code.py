"""
Tests for the builder factories.
"""

import pytest

from sharp_code import (
    AccessModifier,
    ArgumentEmptyError,
    ArgumentNullError,
    InvalidArgumentError,
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

NAMED_FACTORIES = [create_namespace, create_class, create_struct, create_interface, create_enum, create_enum_member, create_type_parameter]


class TestFactories:
    """Test factory argument validation"""

    @pytest.mark.parametrize("factory", NAMED_FACTORIES)
    def test_null_name(self, factory):
        with pytest.raises(ArgumentNullError):
            factory(None)

    @pytest.mark.parametrize("factory", NAMED_FACTORIES)
    @pytest.mark.parametrize("name", ["", "  "])
    def test_blank_name(self, factory, name):
        with pytest.raises(ArgumentEmptyError):
            factory(name)

    @pytest.mark.parametrize("factory", [create_field, create_property])
    def test_member_null_arguments(self, factory):
        with pytest.raises(ArgumentNullError):
            factory("string", None)
        with pytest.raises(ArgumentNullError):
            factory(None, "test")

    @pytest.mark.parametrize("factory", [create_field, create_property])
    @pytest.mark.parametrize("value", ["", "  "])
    def test_member_blank_arguments(self, factory, value):
        with pytest.raises(ArgumentEmptyError):
            factory("string", value)
        with pytest.raises(ArgumentEmptyError):
            factory(value, "test")

    def test_null_access_modifier(self):
        with pytest.raises(ArgumentNullError):
            create_class("Test", None)
        with pytest.raises(ArgumentNullError):
            create_constructor(None)

    def test_invalid_argument_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            create_class("")
        assert issubclass(ArgumentNullError, InvalidArgumentError)

    def test_empty_builders(self):
        assert create_class().name is None
        assert create_field().access_modifier == AccessModifier.PRIVATE
        assert create_property().access_modifier == AccessModifier.PUBLIC
        assert create_constructor().access_modifier == AccessModifier.PUBLIC
        assert create_enum_member().value is None

    def test_shorthand_sets_mandatory_fields(self):
        assert create_class("User", AccessModifier.INTERNAL).access_modifier == AccessModifier.INTERNAL
        assert create_enum_member("Red", 4).value == 4
        assert create_property(int, "Count").to_source_code().splitlines()[0] == "public int Count"
