"""Mapper generator.

Sequences a run: validated requests -> schema extraction -> inference
(forward, then reverse for bidirectional requests) -> import aggregation
-> rendering -> one write to the output file.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ts_mapper.core.config import GeneratorSettings, MappingRequest, load_config
from ts_mapper.extraction.registry import SchemaRegistry
from ts_mapper.extraction.typescript import TypeScriptSchemaExtractor
from ts_mapper.mapping.imports import ImportAggregator
from ts_mapper.mapping.inference import infer_request
from ts_mapper.mapping.plan import GeneratedArtifact, MappingPlan
from ts_mapper.rendering.renderer import MapperRenderer

logger = logging.getLogger(__name__)


class MapperGenerator:
    """Builds and writes the mapper artifact for a list of requests.

    Args:
        settings: Generation options. Defaults to ``GeneratorSettings()``.
        extractor: Schema extractor; built from *settings* when omitted.
        renderer: Artifact renderer; built from *settings* when omitted.
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        extractor: TypeScriptSchemaExtractor | None = None,
        renderer: MapperRenderer | None = None,
    ) -> None:
        self._settings = settings or GeneratorSettings()
        self._extractor = extractor or TypeScriptSchemaExtractor(self._settings.visibility)
        self._registry = SchemaRegistry(self._extractor, cache=self._settings.cache_schemas)
        self._renderer = renderer or MapperRenderer(self._settings.template_path)

    @property
    def settings(self) -> GeneratorSettings:
        return self._settings

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    def build(self, requests: Iterable[MappingRequest], output_location: str) -> GeneratedArtifact:
        """Assemble the artifact without writing anything.

        Requests whose source or target file does not exist are skipped
        with a warning.
        """
        aggregator = ImportAggregator(
            output_location,
            strip_extension=self._settings.strip_import_extension,
        )
        mappers: list[MappingPlan] = []

        for request in requests:
            missing = [p for p in (request.source, request.target) if not os.path.exists(p)]
            if missing:
                logger.warning(
                    "Skipping mapping %s -> %s: file not found: %s",
                    request.source,
                    request.target,
                    ", ".join(missing),
                )
                continue

            source_doc = self._registry.get(request.source)
            target_doc = self._registry.get(request.target)

            logger.info('Mapping from source: "%s" to target: "%s"', request.source, request.target)
            if request.bidirectional:
                logger.info(
                    'Mapping from source: "%s" to target: "%s"', request.target, request.source
                )
            mappers.extend(
                infer_request(source_doc.entities, target_doc.entities, request.bidirectional)
            )

            aggregator.add(
                [*source_doc.imports, *target_doc.imports],
                {
                    request.source: source_doc.entity_names,
                    request.target: target_doc.entity_names,
                },
                {
                    request.source: source_doc.default_entity_name,
                    request.target: target_doc.default_entity_name,
                },
            )

        return GeneratedArtifact(imports=tuple(aggregator.statements), mappers=tuple(mappers))

    def generate(
        self,
        requests: Iterable[MappingRequest],
        output_location: Path | str,
    ) -> GeneratedArtifact:
        """Build the artifact, render it and write it to *output_location*."""
        output = os.path.abspath(output_location)
        artifact = self.build(requests, output)
        content = self._renderer.render_artifact(artifact)

        with open(output, "w", encoding="utf-8") as sink:
            sink.write(content)

        logger.info("Wrote %d mappers to %s", len(artifact.mappers), output)
        return artifact


def generate_mappers(
    config_location: Path | str,
    output_location: Path | str,
    settings: GeneratorSettings | None = None,
) -> GeneratedArtifact:
    """Load a mapping config and generate the mapper file.

    Config errors are raised before the output file is opened.

    Raises:
        ConfigFileNotFoundError: If the config file does not exist.
        ConfigError: If the config document is invalid.
    """
    requests = load_config(config_location)
    return MapperGenerator(settings).generate(requests, output_location)
