"""Schema extraction - read declaration files into schema entities."""

from __future__ import annotations

from ts_mapper.extraction.registry import SchemaRegistry
from ts_mapper.extraction.typescript import SchemaDocument, TypeScriptSchemaExtractor

__all__ = [
    "SchemaDocument",
    "SchemaRegistry",
    "TypeScriptSchemaExtractor",
]
