"""
Tests for the descriptor encoder.
"""

import pytest

from pistonmeta.mapping_converter import (
    PRIMITIVE_DESCRIPTORS,
    encode_descriptor,
    encode_method_descriptor,
    internal_name,
    strip_array_markers,
)


class TestStripArrayMarkers:
    """Tests for counting array dimensions."""

    @pytest.mark.parametrize(
        "token, expected",
        [
            ("int", ("int", 0)),
            ("int[]", ("int", 1)),
            ("java.lang.String[][]", ("java.lang.String", 2)),
            ("a[][][]", ("a", 3)),
        ],
    )
    def test_counts_trailing_markers(self, token, expected):
        """Test that every trailing [] is removed and counted."""
        assert strip_array_markers(token) == expected

    def test_only_trailing_markers_are_counted(self):
        """Test that a marker that is not at the tail stays part of the name."""
        assert strip_array_markers("a[]b") == ("a[]b", 0)


class TestEncodeDescriptor:
    """Tests for encoding a single type token."""

    @pytest.mark.parametrize(
        "keyword, letter",
        [
            ("int", "I"),
            ("double", "D"),
            ("boolean", "Z"),
            ("float", "F"),
            ("long", "J"),
            ("byte", "B"),
            ("short", "S"),
            ("char", "C"),
            ("void", "V"),
        ],
    )
    def test_primitives(self, keyword, letter):
        """Test that each primitive keyword encodes to its letter."""
        assert encode_descriptor(keyword) == letter

    def test_primitive_table_is_complete(self):
        """Test that exactly nine primitives are known."""
        assert len(PRIMITIVE_DESCRIPTORS) == 9

    def test_reference_type(self):
        """Test wrapping a qualified class name."""
        assert encode_descriptor("java.lang.String") == "Ljava/lang/String;"

    def test_unqualified_reference_type(self):
        """Test wrapping a class name without a package."""
        assert encode_descriptor("Foo") == "LFoo;"

    @pytest.mark.parametrize("token", ["Int", "INT", "integer", "in", "voids"])
    def test_primitive_match_is_exact(self, token):
        """Test that near-miss keywords are class names, not primitives."""
        assert encode_descriptor(token) == f"L{token};"

    @pytest.mark.parametrize("dimensions", [0, 1, 2, 3])
    def test_array_dimensions_prefix_the_element(self, dimensions):
        """Test that each array dimension adds one [ in front of the element."""
        for token in ("int", "java.lang.Object"):
            expected = "[" * dimensions + encode_descriptor(token)
            assert encode_descriptor(token + "[]" * dimensions) == expected

    def test_known_class_is_replaced(self):
        """Test that a declared class encodes to its obfuscated name."""
        table = {"Lcom/example/Foo;": "x"}
        assert encode_descriptor("com.example.Foo", table) == "Lx;"

    def test_known_class_inside_array(self):
        """Test that array markers stay outside the replaced class name."""
        table = {"Lcom/example/Foo;": "x"}
        assert encode_descriptor("com.example.Foo[][]", table) == "[[Lx;"

    def test_qualified_obfuscated_name(self):
        """Test that dots in the obfuscated name become slashes."""
        table = {"Lcom/example/Foo;": "net.minecraft.a"}
        assert encode_descriptor("com.example.Foo", table) == "Lnet/minecraft/a;"

    def test_unknown_class_keeps_its_name(self):
        """Test that an undeclared class is only wrapped."""
        table = {"Lcom/example/Foo;": "x"}
        assert encode_descriptor("com.example.Bar", table) == "Lcom/example/Bar;"

    def test_primitives_ignore_the_table(self):
        """Test that primitives are never looked up."""
        table = {"Lint;": "x", "I": "y"}
        assert encode_descriptor("int", table) == "I"

    def test_same_token_encodes_identically(self):
        """Test that encoding the same token twice gives the same descriptor."""
        table = {"Lcom/example/Foo;": "x"}
        assert encode_descriptor("com.example.Foo", table) == encode_descriptor(
            "com.example.Foo", table
        )


class TestMethodDescriptor:
    """Tests for building method descriptors."""

    def test_no_parameters(self):
        """Test a method without parameters."""
        assert encode_method_descriptor([], "void") == "()V"

    def test_parameters_are_concatenated(self):
        """Test that parameter descriptors are joined without separators."""
        table = {"Lcom/example/Foo;": "x"}
        descriptor = encode_method_descriptor(
            ["int", "com.example.Foo", "java.lang.String[]"], "boolean", table
        )
        assert descriptor == "(ILx;[Ljava/lang/String;)Z"


class TestInternalName:
    """Tests for removing the reference wrapper."""

    def test_strips_reference_wrapper(self):
        """Test that L and ; are removed from a class descriptor."""
        assert internal_name("Lcom/example/Foo;") == "com/example/Foo"

    @pytest.mark.parametrize("descriptor", ["I", "[I", "[Lx;"])
    def test_leaves_other_descriptors_alone(self, descriptor):
        """Test that primitives and arrays are returned unchanged."""
        assert internal_name(descriptor) == descriptor
