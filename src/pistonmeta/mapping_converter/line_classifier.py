"""
Classification of the lines of a ProGuard mapping file.

    # comment
    com.example.Foo -> a:
        int count -> b
        1:4:com.example.Foo get(int,java.lang.String[]) -> c
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Union

SEPARATOR = " -> "
MEMBER_INDENT = "    "
COMMENT_PREFIX = "#"


@dataclass(frozen=True)
class Comment:
    text: str


@dataclass(frozen=True)
class Skipped:
    """A line that has none of the expected shapes."""

    text: str


@dataclass(frozen=True)
class ClassHeader:
    deobfuscated_name: str
    obfuscated_name: str


@dataclass(frozen=True)
class MethodMember:
    obfuscated_name: str
    function_name: str
    return_type: str
    parameter_types: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class FieldMember:
    obfuscated_name: str
    field_name: str


MappingLine = Union[Comment, ClassHeader, MethodMember, FieldMember, Skipped]


def iter_lines(text: str) -> Iterator[str]:
    """
    Split text on `\\n`, dropping a trailing `\\r` from each line. A final line
    terminator does not produce an empty last line.
    """
    if not text:
        return
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def classify_line(line: str) -> MappingLine:
    """
    Classify one raw line of a mapping file.
    """
    if line.startswith(COMMENT_PREFIX):
        return Comment(line)

    parts = line.split(SEPARATOR)
    if len(parts) < 2:
        return Skipped(line)

    if line.startswith(MEMBER_INDENT):
        return _classify_member(line, parts[0].lstrip(), parts[1].strip())

    # The obfuscated side ends with a colon: `com.example.Foo -> a:`
    return ClassHeader(
        deobfuscated_name=parts[0],
        obfuscated_name=parts[1].strip().split(":")[0],
    )


def _classify_member(line: str, declaration: str, obfuscated_name: str) -> MappingLine:
    tokens = declaration.split()
    if len(tokens) < 2:
        return Skipped(line)

    type_token, name_token = tokens[0], tokens[1]

    if "(" not in name_token or ")" not in name_token:
        return FieldMember(obfuscated_name=obfuscated_name, field_name=name_token)

    # Drop the `<start>:<end>:` line range in front of the return type
    return_type = type_token.rsplit(":", 1)[-1]
    function_name = name_token.split("(", 1)[0]
    parameter_list = name_token.rsplit("(", 1)[-1].split(")", 1)[0]

    return MethodMember(
        obfuscated_name=obfuscated_name,
        function_name=function_name,
        return_type=return_type,
        parameter_types=parameter_list.split(",") if parameter_list else [],
    )
