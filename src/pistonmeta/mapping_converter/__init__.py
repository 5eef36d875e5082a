"""
ProGuard mapping conversion.

This package handles:
1. Classifying the lines of a mapping file
2. Collecting the declared classes (first pass)
3. Encoding source-level types as JVM descriptors
4. Emitting descriptor mappings (second pass)
"""

from .converter import (
    ConversionResult,
    MappingConverter,
    convert_mappings,
)
from .descriptor_encoder import (
    PRIMITIVE_DESCRIPTORS,
    encode_descriptor,
    encode_method_descriptor,
    internal_name,
    strip_array_markers,
)
from .line_classifier import (
    ClassHeader,
    Comment,
    FieldMember,
    MappingLine,
    MethodMember,
    Skipped,
    classify_line,
    iter_lines,
)
from .name_table import NameTable, build_name_table

__all__ = [
    "ConversionResult",
    "MappingConverter",
    "convert_mappings",
    "PRIMITIVE_DESCRIPTORS",
    "encode_descriptor",
    "encode_method_descriptor",
    "internal_name",
    "strip_array_markers",
    "ClassHeader",
    "Comment",
    "FieldMember",
    "MappingLine",
    "MethodMember",
    "Skipped",
    "classify_line",
    "iter_lines",
    "NameTable",
    "build_name_table",
]
