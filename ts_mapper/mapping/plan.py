"""Schema and mapping plan data classes.

Frozen dataclasses describing extracted schemas, the classified mapping
plans built from them, and the artifact handed to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ts_mapper.core.enums import PropertyKind


@dataclass(frozen=True)
class PropertyDescriptor:
    """A named, typed property of a schema entity."""

    name: str
    declared_type: str  # may be a "|"-delimited union
    is_optional: bool = False


@dataclass(frozen=True)
class SchemaEntity:
    """A named declaration with its properties, in declaration order."""

    name: str
    properties: dict[str, PropertyDescriptor] = field(default_factory=dict)
    exported: bool = True
    default_export: bool = False

    @classmethod
    def of(
        cls,
        name: str,
        *properties: PropertyDescriptor,
        exported: bool = True,
        default_export: bool = False,
    ) -> SchemaEntity:
        """Build an entity from descriptors, keyed by property name."""
        return cls(
            name=name,
            properties={p.name: p for p in properties},
            exported=exported or default_export,
            default_export=default_export,
        )


@dataclass(frozen=True)
class ImportDeclaration:
    """An import statement found in a schema source file."""

    declaring_file: str
    raw_text: str
    referenced_path: str
    was_relative: bool


@dataclass(frozen=True)
class PropertyClassification:
    """How one target property is produced by the generated mapper.

    Every property gets a custom-map slot; ``is_optional`` tells whether
    the caller may omit it (auto-mapped) or must supply it.
    """

    name: str
    kind: PropertyKind
    return_type: str
    is_optional: bool

    @property
    def auto_mapped(self) -> bool:
        return self.kind is PropertyKind.AUTO_MAPPED


@dataclass(frozen=True)
class MappingPlan:
    """Classified description of how to map one entity onto another."""

    source_entity_name: str
    target_entity_name: str
    properties: tuple[PropertyClassification, ...] = ()
    all_custom_optional: bool = True

    @property
    def auto_mapped(self) -> list[str]:
        """Names of properties copied directly from the source."""
        return [p.name for p in self.properties if p.auto_mapped]

    @property
    def custom_required(self) -> list[str]:
        """Names of properties the caller must supply."""
        return [p.name for p in self.properties if not p.is_optional]


@dataclass(frozen=True)
class GeneratedArtifact:
    """Ordered imports and mapping plans for one generation run."""

    imports: tuple[str, ...] = ()
    mappers: tuple[MappingPlan, ...] = ()
