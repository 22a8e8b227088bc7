"""Schema registry - extracts and caches schema documents per file.

Keyed by resolved file location, so two requests naming the same file
through different relative paths share one extraction.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ts_mapper.extraction.typescript import SchemaDocument, TypeScriptSchemaExtractor

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Extracts schema documents on demand and caches them by location.

    Args:
        extractor: Extractor used for cache misses.
        cache: When False every lookup re-extracts the file.
    """

    def __init__(self, extractor: TypeScriptSchemaExtractor, cache: bool = True) -> None:
        self._extractor = extractor
        self._cache_enabled = cache
        self._documents: dict[Path, SchemaDocument] = {}

    def get(self, file_location: Path | str) -> SchemaDocument:
        """Return the schema document for *file_location*, extracting it if needed."""
        key = Path(file_location).resolve()
        if self._cache_enabled and key in self._documents:
            logger.debug("Schema cache hit for %s", key)
            return self._documents[key]

        document = self._extractor.extract(file_location)
        logger.debug(
            "Extracted %d entities and %d imports from %s",
            len(document.entities),
            len(document.imports),
            key,
        )
        if self._cache_enabled:
            self._documents[key] = document
        return document

    def has(self, file_location: Path | str) -> bool:
        """Check if a document for *file_location* is cached."""
        return Path(file_location).resolve() in self._documents

    def __len__(self) -> int:
        """Number of cached documents."""
        return len(self._documents)
