"""
Conversion of ProGuard mappings into descriptor mappings.

Input:

    com.example.Foo -> a:
        int count -> b
        1:3:com.example.Foo copy(int[]) -> c

Output:

    a com/example/Foo
    \\tb count
    \\tc ([I)La; copy

The conversion makes two passes over the same text. The first collects every
class so the second can resolve classes referenced before their declaration.
"""

import logging
import pathlib
from dataclasses import dataclass
from typing import List, Optional, Union

from pistonmeta.pistonmeta_logger import PistonMetaLogger
from pistonmeta.mapping_converter.descriptor_encoder import encode_method_descriptor
from pistonmeta.mapping_converter.line_classifier import (
    ClassHeader,
    FieldMember,
    MethodMember,
    Skipped,
    classify_line,
    iter_lines,
)
from pistonmeta.mapping_converter.name_table import NameTable, build_name_table


@dataclass
class ConversionResult:
    """
    Converted text together with counts collected while converting.

    `skipped_lines` counts non-blank lines that matched none of the expected shapes.
    """

    text: str
    class_count: int = 0
    method_count: int = 0
    field_count: int = 0
    skipped_lines: int = 0
    duplicate_classes: int = 0


def emit_class(header: ClassHeader) -> str:
    return (
        f"{header.obfuscated_name.replace('.', '/')} "
        f"{header.deobfuscated_name.replace('.', '/')}"
    )


def emit_method(method: MethodMember, name_table: NameTable) -> str:
    descriptor = encode_method_descriptor(
        method.parameter_types, method.return_type, name_table
    )
    return f"\t{method.obfuscated_name} {descriptor} {method.function_name}"


def emit_field(member: FieldMember) -> str:
    return f"\t{member.obfuscated_name} {member.field_name}"


class MappingConverter:
    """
    Converts ProGuard mapping text. Each call builds its own name table, so one
    converter can be shared between threads.
    """

    def __init__(self, logger: Optional[PistonMetaLogger] = None):
        self.logger = logger or PistonMetaLogger()

    def convert(self, mappings: str) -> ConversionResult:
        lines = list(iter_lines(mappings))
        name_table = build_name_table(lines)

        output: List[str] = []
        result = ConversionResult(text="", duplicate_classes=name_table.duplicate_count)
        for line in lines:
            entry = classify_line(line)
            if isinstance(entry, ClassHeader):
                output.append(emit_class(entry))
                result.class_count += 1
            elif isinstance(entry, MethodMember):
                output.append(emit_method(entry, name_table))
                result.method_count += 1
            elif isinstance(entry, FieldMember):
                output.append(emit_field(entry))
                result.field_count += 1
            elif isinstance(entry, Skipped) and entry.text.strip():
                result.skipped_lines += 1

        result.text = "".join(line + "\n" for line in output)

        self.logger.log(
            f"Converted {result.class_count} classes, {result.method_count} methods "
            f"and {result.field_count} fields",
            logging.DEBUG,
        )
        if result.skipped_lines:
            self.logger.log(
                f"Skipped {result.skipped_lines} malformed mapping lines",
                logging.INFO,
            )
        if result.duplicate_classes:
            self.logger.log(
                f"{result.duplicate_classes} classes are declared more than once, "
                "the last declaration wins",
                logging.INFO,
            )
        return result

    def convert_file(
        self,
        source: Union[str, pathlib.Path],
        destination: Union[str, pathlib.Path],
    ) -> ConversionResult:
        """
        Convert the mapping file at `source` and write the result to `destination`.
        """
        source = pathlib.Path(source)
        destination = pathlib.Path(destination)
        self.logger.log(f"Converting {source} to {destination}", logging.INFO)

        result = self.convert(source.read_text(encoding="utf-8"))

        destination.parent.mkdir(parents=True, exist_ok=True)
        # newline="" keeps the "\n" terminators on every platform
        with open(destination, "w", encoding="utf-8", newline="") as f:
            f.write(result.text)
        return result


def convert_mappings(mappings: str) -> str:
    """
    Convert ProGuard mapping text into descriptor mapping text.
    """
    return MappingConverter().convert(mappings).text
