"""
pistonmeta: typed access to the published game version manifests, and a
converter from ProGuard deobfuscation mappings to descriptor mappings.
"""

__version__ = "0.1.0"

from pistonmeta.mapping_converter import (
    ConversionResult,
    MappingConverter,
    convert_mappings,
)

__all__ = [
    "__version__",
    "ConversionResult",
    "MappingConverter",
    "convert_mappings",
]
