"""
Conversion of Java source-level type names into JVM type descriptors.

    int                     -> I
    java.lang.String        -> Ljava/lang/String;
    com.example.Foo[][]     -> [[Lcom/example/Foo;    (or [[Lx; once Foo is known as x)
"""

from typing import Iterable, Mapping, Optional, Tuple

ARRAY_MARKER = "[]"
ARRAY_PREFIX = "["

PRIMITIVE_DESCRIPTORS = {
    "int": "I",
    "double": "D",
    "boolean": "Z",
    "float": "F",
    "long": "J",
    "byte": "B",
    "short": "S",
    "char": "C",
    "void": "V",
}


def strip_array_markers(token: str) -> Tuple[str, int]:
    """
    Remove the trailing `[]` markers of a type token.

    Returns:
        The element type and the number of array dimensions removed
    """
    dimensions = 0
    while token.endswith(ARRAY_MARKER):
        token = token[: -len(ARRAY_MARKER)]
        dimensions += 1
    return token, dimensions


def wrap_reference(name: str) -> str:
    """`com.example.Foo` -> `Lcom/example/Foo;`"""
    return "L" + name.replace(".", "/") + ";"


def internal_name(descriptor: str) -> str:
    """
    Strip the reference wrapper of a descriptor, `Lcom/example/Foo;` -> `com/example/Foo`.
    Anything that is not a wrapped reference is returned unchanged.
    """
    if len(descriptor) >= 2 and descriptor.startswith("L") and descriptor.endswith(";"):
        return descriptor[1:-1]
    return descriptor


def encode_descriptor(token: str, name_table: Optional[Mapping[str, str]] = None) -> str:
    """
    Encode a type token as a descriptor.

    Args:
        token: A primitive keyword or dotted class name, optionally followed by `[]` markers
        name_table: Lookup from the wrapped deobfuscated class name to the obfuscated name.
            Classes found there are replaced by their obfuscated name.

    Returns:
        The descriptor, e.g. `I`, `Ljava/lang/String;` or `[[Lx;`
    """
    element, dimensions = strip_array_markers(token)

    if element in PRIMITIVE_DESCRIPTORS:
        descriptor = PRIMITIVE_DESCRIPTORS[element]
    else:
        descriptor = wrap_reference(element)
        if name_table is not None:
            obfuscated = name_table.get(descriptor)
            if obfuscated is not None:
                descriptor = wrap_reference(obfuscated)

    return ARRAY_PREFIX * dimensions + descriptor


def encode_method_descriptor(
    parameter_types: Iterable[str],
    return_type: str,
    name_table: Optional[Mapping[str, str]] = None,
) -> str:
    """Build `(<parameters>)<return>` from the source-level type tokens."""
    parameters = "".join(encode_descriptor(p, name_table) for p in parameter_types)
    return f"({parameters}){encode_descriptor(return_type, name_table)}"
