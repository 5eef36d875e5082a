"""
Tests for the mapping line classifier.
"""

import pytest

from pistonmeta.mapping_converter import (
    ClassHeader,
    Comment,
    FieldMember,
    MethodMember,
    Skipped,
    classify_line,
    iter_lines,
)


class TestClassifyLine:
    """Tests for classifying single lines."""

    def test_comment(self):
        """Test that a line starting with # is a comment."""
        assert classify_line("# compiler: R8") == Comment("# compiler: R8")

    def test_comment_containing_separator(self):
        """Test that a comment stays a comment even with a separator in it."""
        assert isinstance(classify_line("# a -> b:"), Comment)

    def test_class_header(self):
        """Test parsing a class header."""
        assert classify_line("com.example.Foo -> x:") == ClassHeader(
            deobfuscated_name="com.example.Foo", obfuscated_name="x"
        )

    def test_class_header_without_colon(self):
        """Test a class header missing its trailing colon."""
        assert classify_line("com.example.Foo -> x") == ClassHeader("com.example.Foo", "x")

    def test_field(self):
        """Test parsing a field line."""
        assert classify_line("    int count -> a") == FieldMember(
            obfuscated_name="a", field_name="count"
        )

    def test_method_without_parameters(self):
        """Test parsing a method with an empty parameter list."""
        assert classify_line("    void tick() -> b") == MethodMember(
            obfuscated_name="b",
            function_name="tick",
            return_type="void",
            parameter_types=[],
        )

    def test_method_with_line_range(self):
        """Test that the line range in front of the return type is dropped."""
        entry = classify_line("    12:15:java.lang.String name(int,com.example.Foo[]) -> c")
        assert entry == MethodMember(
            obfuscated_name="c",
            function_name="name",
            return_type="java.lang.String",
            parameter_types=["int", "com.example.Foo[]"],
        )

    def test_method_with_trailing_original_range(self):
        """Test a method followed by the line range it had before inlining."""
        entry = classify_line("    1:1:void <init>():10:10 -> <init>")
        assert entry == MethodMember("<init>", "<init>", "void", [])

    def test_obfuscated_member_name_is_trimmed(self):
        """Test that whitespace around the obfuscated member name is removed."""
        entry = classify_line("    int count -> a  \r")
        assert entry == FieldMember("a", "count")

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "com.example.Foo",
            "com.example.Foo->x:",
            "    int count",
            "    count -> a",
        ],
    )
    def test_malformed_lines_are_skipped(self, line):
        """Test that lines without the expected shape are skipped."""
        assert isinstance(classify_line(line), Skipped)


class TestIterLines:
    """Tests for splitting mapping text into lines."""

    def test_final_terminator_adds_no_line(self):
        """Test that a trailing newline does not add an empty line."""
        assert list(iter_lines("a\nb\n")) == ["a", "b"]

    def test_carriage_returns_are_removed(self):
        """Test splitting text with Windows line endings."""
        assert list(iter_lines("a\r\nb\r\n")) == ["a", "b"]

    def test_blank_lines_are_kept(self):
        """Test that blank lines in the middle are kept."""
        assert list(iter_lines("a\n\nb")) == ["a", "", "b"]

    def test_empty_text(self):
        """Test that empty text has no lines."""
        assert list(iter_lines("")) == []
