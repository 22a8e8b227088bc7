"""Enumerations shared across the generator."""

from __future__ import annotations

from enum import Enum


class PropertyKind(Enum):
    """How a target property is populated by a generated mapper."""

    AUTO_MAPPED = "auto_mapped"
    CUSTOM_MAP_REQUIRED = "custom_map_required"


class ConfigErrorKind(Enum):
    """Reasons a mapping config document is rejected."""

    NOT_AN_ARRAY = "not_an_array"
    INVALID_ENTRY = "invalid_entry"
    INVALID_JSON = "invalid_json"


class EntityVisibility(Enum):
    """Which declarations of a schema file are considered entities."""

    EXPORTED_ONLY = "exported_only"
    ALL = "all"
