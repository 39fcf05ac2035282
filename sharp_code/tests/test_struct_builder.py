"""
Tests for StructBuilder.
"""

from textwrap import dedent

import pytest

from sharp_code import (
    AccessModifier,
    ArgumentEmptyError,
    ArgumentNullError,
    CSharpSyntaxError,
    MissingBuilderSettingError,
    TypeParameterConstraint,
    create_constructor,
    create_field,
    create_property,
    create_struct,
    create_type_parameter,
)


def expected(code: str) -> str:
    return dedent(code).strip()


class TestStructBuilder:
    """Test struct generation"""

    def test_struct(self):
        code = (
            create_struct()
            .with_summary("Represents an X/Y position.")
            .with_access_modifier(AccessModifier.PROTECTED_INTERNAL)
            .with_name("Position")
            .with_implemented_interface("IComparable")
            .with_fields(create_field("int", "_x"), create_field("int", "_y"))
            .with_constructor(create_constructor().with_parameter("int", "x", "_x").with_parameter("int", "y", "_y"))
            .with_properties(
                create_property("int", "X").with_getter("_x").with_setter("_x = value"),
                create_property("int", "Y").with_getter("_y").with_setter("_y = value"),
            )
            .to_source_code()
        )

        assert code == expected(
            """
            /// <summary>
            /// Represents an X/Y position.
            /// </summary>
            protected internal struct Position : IComparable
            {
                private int _x;
                private int _y;
                public Position(int x, int y)
                {
                    _x = x;
                    _y = y;
                }

                public int X
                {
                    get => _x;
                    set => _x = value;
                }

                public int Y
                {
                    get => _y;
                    set => _y = value;
                }
            }
            """
        )

    def test_generic_struct_with_members(self):
        code = (
            create_struct("Dict")
            .with_type_parameter(create_type_parameter("TKey", "IEquatable<TKey>"))
            .with_type_parameter(create_type_parameter("TValue", TypeParameterConstraint.NOT_NULL))
            .with_field(create_field("Dictionary", "_store").with_type_parameters(create_type_parameter("TKey"), create_type_parameter("TValue")).make_readonly())
            .with_property(create_property("Dictionary", "Store").with_type_parameters(create_type_parameter("TKey"), create_type_parameter("TValue")))
            .to_source_code()
        )

        assert code == expected(
            """
            public struct Dict<TKey, TValue>
                where TKey : IEquatable<TKey> where TValue : notnull
            {
                private readonly Dictionary<TKey, TValue> _store;
                public Dictionary<TKey, TValue> Store
                {
                    get;
                    set;
                }
            }
            """
        )

    def test_type_parameters_without_constraints(self):
        code = create_struct("Dict").with_type_parameters([create_type_parameter("K"), create_type_parameter("V")]).to_source_code()

        assert code == "public struct Dict<K, V>\n{\n}"

    def test_bulk_interfaces_equivalent(self):
        from_list = create_struct("Test", AccessModifier.NONE).with_implemented_interfaces(["IHasNoMembers", "IAmAStruct"])
        from_args = create_struct("Test", AccessModifier.NONE).with_implemented_interfaces("IHasNoMembers", "IAmAStruct")

        assert from_list.to_source_code() == from_args.to_source_code()
        assert from_args.to_source_code().splitlines()[0] == "struct Test : IHasNoMembers, IAmAStruct"

    def test_to_string_matches_source_code(self):
        builder = create_struct("Structure", AccessModifier.INTERNAL).with_property(create_property("double", "Seed"))

        assert str(builder) == builder.to_source_code()


class TestStructBuilderValidation:
    """Test struct argument and build validation"""

    def test_missing_name(self):
        with pytest.raises(MissingBuilderSettingError):
            create_struct().to_source_code()

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, name):
        with pytest.raises(MissingBuilderSettingError):
            create_struct().with_name(name).to_source_code()

    def test_null_name(self):
        with pytest.raises(ArgumentNullError):
            create_struct().with_name(None)

    def test_parameterless_constructor(self):
        with pytest.raises(CSharpSyntaxError, match="CS0568"):
            create_struct("Test").with_constructor(create_constructor()).to_source_code()

    def test_property_default_value(self):
        builder = create_struct("Test").with_property(create_property("string", "Name").with_default_value('"fail"'))
        with pytest.raises(CSharpSyntaxError, match="CS0573"):
            builder.to_source_code()

    def test_property_check_precedes_constructor_check(self):
        builder = (
            create_struct("Test")
            .with_property(create_property("string", "Name").with_default_value('"fail"'))
            .with_constructor(create_constructor())
        )
        with pytest.raises(CSharpSyntaxError, match="CS0573"):
            builder.build()

    def test_implemented_interface_validation(self):
        with pytest.raises(ArgumentNullError):
            create_struct("Test").with_implemented_interface(None)
        with pytest.raises(ArgumentEmptyError):
            create_struct("Test").with_implemented_interface("   ")
