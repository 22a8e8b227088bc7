"""ts_mapper exception hierarchy.

All exceptions are ts_mapper-specific. Parser, validation and template
library exceptions are chained, never exposed directly.
"""

from __future__ import annotations

from ts_mapper.core.enums import ConfigErrorKind


class TSMapperError(Exception):
    """Base exception for all ts_mapper errors."""


# --- Config ---


class ConfigError(TSMapperError):
    """Base for mapping config errors. Always fatal."""

    kind: ConfigErrorKind

    def __init__(self, kind: ConfigErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class ConfigNotAnArrayError(ConfigError):
    """Raised when the top-level config value is not an array."""

    def __init__(self, actual_type: str) -> None:
        self.actual_type = actual_type
        super().__init__(
            ConfigErrorKind.NOT_AN_ARRAY,
            f"The value in the json file is not array as expected (got {actual_type})",
        )


class InvalidConfigEntryError(ConfigError):
    """Raised when an array element is not a valid source/target object."""

    def __init__(self, index: int, detail: str) -> None:
        self.index = index
        self.detail = detail
        super().__init__(
            ConfigErrorKind.INVALID_ENTRY,
            f"Invalid mapping entry at index {index}: {detail}",
        )


class InvalidConfigDocumentError(ConfigError):
    """Raised when the config file does not contain valid JSON."""

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        super().__init__(ConfigErrorKind.INVALID_JSON, f"Invalid JSON in '{path}': {detail}")


class ConfigFileNotFoundError(TSMapperError):
    """Raised when the mapping config file does not exist."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"You need to specify a JSON config file with the mapping specification: "
            f"'{path}' not found"
        )


# --- Extraction ---


class ExtractionError(TSMapperError):
    """Raised when a declaration file cannot be tokenized."""

    def __init__(self, file_location: str, detail: str) -> None:
        self.file_location = file_location
        super().__init__(f"Cannot extract schemas from '{file_location}': {detail}")


# --- Rendering ---


class RenderError(TSMapperError):
    """Raised when the mapper template is missing or fails to render."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Template rendering failed: {detail}")
