"""Mapping inference engine.

Decides, per target property, whether a generated mapper can copy the
value from the source entity or must take it from a caller-supplied
custom map. Nullability rules (source -> target):

    nullable     -> non-nullable : custom map required
    nullable     -> nullable     : auto-mapped
    non-nullable -> nullable     : auto-mapped
    non-nullable -> non-nullable : auto-mapped

Inference is total: anything it cannot copy becomes a required custom
map entry, never an error.
"""

from __future__ import annotations

from collections.abc import Iterable

from ts_mapper.core.enums import PropertyKind
from ts_mapper.mapping.plan import (
    MappingPlan,
    PropertyClassification,
    PropertyDescriptor,
    SchemaEntity,
)

UNION_DELIMITER = "|"
_NULLABLE_MEMBERS = frozenset({"undefined", "null"})


def strip_nullable_members(declared_type: str | None) -> str | None:
    """Drop ``null``/``undefined`` members from a union type string."""
    if declared_type is None:
        return None
    members = (member.strip() for member in declared_type.split(UNION_DELIMITER))
    return UNION_DELIMITER.join(m for m in members if m not in _NULLABLE_MEMBERS)


def is_nullable(declared_type: str | None, is_optional: bool) -> bool:
    """Substring test: ``null``/``undefined`` anywhere in the type, or an optional marker."""
    if declared_type is None:
        return False
    return "null" in declared_type or "undefined" in declared_type or is_optional


def return_type(prop: PropertyDescriptor) -> str:
    """Type a custom map function must return for *prop*."""
    if prop.is_optional:
        return prop.declared_type + " | undefined"
    return prop.declared_type


def classify(
    target_prop: PropertyDescriptor,
    source_prop: PropertyDescriptor | None,
) -> PropertyClassification:
    """Classify a single target property against its source counterpart."""
    result_type = return_type(target_prop)

    if source_prop is None or strip_nullable_members(
        source_prop.declared_type
    ) != strip_nullable_members(target_prop.declared_type):
        return PropertyClassification(
            target_prop.name, PropertyKind.CUSTOM_MAP_REQUIRED, result_type, is_optional=False
        )

    source_nullable = is_nullable(source_prop.declared_type, source_prop.is_optional)
    target_nullable = is_nullable(target_prop.declared_type, target_prop.is_optional)
    if source_nullable and not target_nullable:
        return PropertyClassification(
            target_prop.name, PropertyKind.CUSTOM_MAP_REQUIRED, result_type, is_optional=False
        )

    return PropertyClassification(
        target_prop.name, PropertyKind.AUTO_MAPPED, result_type, is_optional=True
    )


def infer(source: SchemaEntity, target: SchemaEntity) -> MappingPlan:
    """Build the mapping plan for *source* -> *target*.

    The plan holds exactly one classification per target property, in
    target declaration order.
    """
    properties = tuple(
        classify(prop, source.properties.get(name)) for name, prop in target.properties.items()
    )
    return MappingPlan(
        source_entity_name=source.name,
        target_entity_name=target.name,
        properties=properties,
        all_custom_optional=all(p.is_optional for p in properties),
    )


def infer_all(
    sources: Iterable[SchemaEntity],
    targets: Iterable[SchemaEntity],
) -> list[MappingPlan]:
    """Infer plans for every (source, target) pair, source-major order."""
    target_list = list(targets)
    return [infer(source, target) for source in sources for target in target_list]


def infer_request(
    sources: Iterable[SchemaEntity],
    targets: Iterable[SchemaEntity],
    bidirectional: bool = False,
) -> list[MappingPlan]:
    """Forward plans, followed by the reverse plans when *bidirectional*."""
    source_list = list(sources)
    target_list = list(targets)
    plans = infer_all(source_list, target_list)
    if bidirectional:
        plans.extend(infer_all(target_list, source_list))
    return plans
