"""Mapping layer - classify schema properties into mapping plans."""

from __future__ import annotations

from ts_mapper.mapping.imports import ImportAggregator, aggregate
from ts_mapper.mapping.inference import infer, infer_all, infer_request
from ts_mapper.mapping.plan import (
    GeneratedArtifact,
    ImportDeclaration,
    MappingPlan,
    PropertyClassification,
    PropertyDescriptor,
    SchemaEntity,
)

__all__ = [
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
]
