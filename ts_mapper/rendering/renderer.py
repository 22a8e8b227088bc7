"""Mapper renderer.

Renders a generated artifact (imports + mapping plans) through a Jinja2
template. The bundled template emits one TypeScript mapper function per
plan; a custom template file can replace it.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateError,
    TemplateNotFound,
)

from ts_mapper.core.exceptions import RenderError
from ts_mapper.mapping.plan import GeneratedArtifact

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = "mapper.ts.j2"

_TS_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


def ts_key(name: str) -> str:
    """Object-literal key for a property name, quoted when not an identifier."""
    if _TS_IDENTIFIER.match(name):
        return name
    return json.dumps(name)


def ts_access(name: str, optional: bool = False) -> str:
    """Member access suffix for a property name.

    ``optional=True`` yields the part following ``?.``.
    """
    if _TS_IDENTIFIER.match(name):
        return name if optional else "." + name
    return f"[{json.dumps(name)}]"


def _build_environment(loader: BaseLoader | None = None) -> Environment:
    env = Environment(
        loader=loader,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["ts_key"] = ts_key
    env.filters["ts_access"] = ts_access
    return env


def render(template: str, data: Mapping[str, Any]) -> str:
    """Render template source text with *data*."""
    try:
        return _build_environment().from_string(template).render(**data)
    except TemplateError as e:
        raise RenderError(str(e)) from e


class MapperRenderer:
    """Renders generated artifacts through a file-based template.

    Args:
        template_path: Template file to use. Defaults to the bundled
            ``mapper.ts.j2``.
    """

    def __init__(self, template_path: Path | str | None = None) -> None:
        if template_path is None:
            loader: BaseLoader = PackageLoader("ts_mapper", "rendering/templates")
            self._template_name = DEFAULT_TEMPLATE
        else:
            path = Path(template_path)
            loader = FileSystemLoader(str(path.parent))
            self._template_name = path.name
        self._env = _build_environment(loader)

    @property
    def template_name(self) -> str:
        return self._template_name

    def render(self, data: Mapping[str, Any]) -> str:
        """Render the template with *data*.

        Raises:
            RenderError: If the template is missing or fails to render.
        """
        try:
            template = self._env.get_template(self._template_name)
            return template.render(**data)
        except TemplateNotFound as e:
            raise RenderError(f"template not found: {e.name}") from e
        except TemplateError as e:
            raise RenderError(str(e)) from e

    def render_artifact(self, artifact: GeneratedArtifact) -> str:
        """Render a complete artifact as one text block."""
        logger.debug(
            "Rendering %d imports and %d mappers with %s",
            len(artifact.imports),
            len(artifact.mappers),
            self._template_name,
        )
        return self.render({"imports": list(artifact.imports), "mappers": list(artifact.mappers)})
