"""ts_mapper - generate mapper functions between TypeScript schemas."""

from __future__ import annotations

from ts_mapper.core.config import (
    GeneratorSettings,
    MappingRequest,
    load_config,
    validate,
)
from ts_mapper.core.enums import ConfigErrorKind, EntityVisibility, PropertyKind
from ts_mapper.core.exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigNotAnArrayError,
    ExtractionError,
    InvalidConfigDocumentError,
    InvalidConfigEntryError,
    RenderError,
    TSMapperError,
)
from ts_mapper.extraction import SchemaDocument, SchemaRegistry, TypeScriptSchemaExtractor
from ts_mapper.generator import MapperGenerator, generate_mappers
from ts_mapper.mapping import (
    GeneratedArtifact,
    ImportAggregator,
    ImportDeclaration,
    MappingPlan,
    PropertyClassification,
    PropertyDescriptor,
    SchemaEntity,
    aggregate,
    infer,
    infer_all,
    infer_request,
)
from ts_mapper.rendering import MapperRenderer

__all__ = [
    # Config
    "GeneratorSettings",
    "MappingRequest",
    "load_config",
    "validate",
    # Extraction
    "TypeScriptSchemaExtractor",
    "SchemaDocument",
    "SchemaRegistry",
    # Mapping
    "infer",
    "infer_all",
    "infer_request",
    "ImportAggregator",
    "aggregate",
    "GeneratedArtifact",
    "ImportDeclaration",
    "MappingPlan",
    "PropertyClassification",
    "PropertyDescriptor",
    "SchemaEntity",
    # Rendering
    "MapperRenderer",
    # Generator
    "MapperGenerator",
    "generate_mappers",
    # Enums
    "ConfigErrorKind",
    "EntityVisibility",
    "PropertyKind",
    # Exceptions
    "TSMapperError",
    "ConfigError",
    "ConfigNotAnArrayError",
    "InvalidConfigEntryError",
    "InvalidConfigDocumentError",
    "ConfigFileNotFoundError",
    "ExtractionError",
    "RenderError",
]
