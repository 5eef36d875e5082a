"""
First pass of the conversion: the table of every class declared in a mapping
file, keyed by the descriptor of its deobfuscated name.
"""

from typing import Dict, Iterable, Iterator, Mapping, Optional

from pistonmeta.mapping_converter.descriptor_encoder import encode_descriptor
from pistonmeta.mapping_converter.line_classifier import ClassHeader, classify_line


class NameTable(Mapping[str, str]):
    """
    Lookup from `L<deobfuscated/internal/name>;` to the obfuscated class name.

    A class declared twice keeps the obfuscated name of its last declaration;
    `duplicate_count` records how many declarations were overwritten.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, str] = {}
        self.duplicate_count = 0

    def add(self, header: ClassHeader) -> None:
        key = encode_descriptor(header.deobfuscated_name)
        if key in self._entries:
            self.duplicate_count += 1
        self._entries[key] = header.obfuscated_name

    def resolve(self, deobfuscated_name: str) -> Optional[str]:
        """Obfuscated name of a dotted deobfuscated class name, if declared."""
        return self._entries.get(encode_descriptor(deobfuscated_name))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NameTable(classes={len(self)}, duplicates={self.duplicate_count})"


def build_name_table(lines: Iterable[str]) -> NameTable:
    """
    Collect every class header of a mapping file. Member, comment and malformed
    lines are ignored.
    """
    table = NameTable()
    for line in lines:
        entry = classify_line(line)
        if isinstance(entry, ClassHeader):
            table.add(entry)
    return table
