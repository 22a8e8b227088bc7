"""Mapping config validation and generator settings.

The mapping config is a JSON array of objects:

    [{"source": "src/model/user.ts", "target": "src/view/user.ts", "viceVersa": true}]
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from ts_mapper.core.enums import EntityVisibility
from ts_mapper.core.exceptions import (
    ConfigFileNotFoundError,
    ConfigNotAnArrayError,
    InvalidConfigDocumentError,
    InvalidConfigEntryError,
)


@dataclass(frozen=True)
class MappingRequest:
    """One validated source -> target mapping request."""

    source: str
    target: str
    bidirectional: bool = False


class MappingEntry(BaseModel):
    """Schema of a single config array element."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    source: StrictStr
    target: StrictStr
    vice_versa: StrictBool = Field(default=False, alias="viceVersa")


class GeneratorSettings(BaseModel):
    """Options controlling a generation run."""

    model_config = ConfigDict(frozen=True)

    template_path: Path | None = None
    visibility: EntityVisibility = EntityVisibility.EXPORTED_ONLY
    cache_schemas: bool = True
    strip_import_extension: bool = True


def _describe_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "entry"
    return f"{location}: {first['msg']}"


def validate(document: Any) -> list[MappingRequest]:
    """Validate a parsed config document into deduplicated mapping requests.

    Duplicates collapse by full (source, target, bidirectional) equality;
    first-occurrence order is kept.

    Raises:
        ConfigNotAnArrayError: If *document* is not a JSON array.
        InvalidConfigEntryError: If an element is not a valid entry object.
    """
    if not isinstance(document, list):
        raise ConfigNotAnArrayError(type(document).__name__)

    requests: dict[MappingRequest, None] = {}
    for index, item in enumerate(document):
        if not isinstance(item, dict):
            raise InvalidConfigEntryError(index, "expected an object with 'source' and 'target'")
        try:
            entry = MappingEntry.model_validate(item)
        except ValidationError as e:
            raise InvalidConfigEntryError(index, _describe_error(e)) from e

        request = MappingRequest(
            source=entry.source,
            target=entry.target,
            bidirectional=entry.vice_versa,
        )
        requests.setdefault(request, None)

    return list(requests)


def parse(text: str, origin: str = "<string>") -> list[MappingRequest]:
    """Parse JSON *text* and validate it."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidConfigDocumentError(origin, str(e)) from e
    return validate(document)


def resolve_requests(
    requests: list[MappingRequest],
    base_dir: Path | str | None = None,
) -> list[MappingRequest]:
    """Make request locations absolute against *base_dir* (default: cwd)."""
    base = os.fspath(base_dir) if base_dir is not None else os.getcwd()
    resolved = [
        replace(
            request,
            source=os.path.normpath(os.path.join(base, request.source)),
            target=os.path.normpath(os.path.join(base, request.target)),
        )
        for request in requests
    ]
    return list(dict.fromkeys(resolved))


def load_config(path: Path | str) -> list[MappingRequest]:
    """Read and validate a mapping config file.

    Returns requests with locations resolved against the current
    working directory.

    Raises:
        ConfigFileNotFoundError: If *path* does not exist.
        ConfigError: If the content is not a valid mapping config.
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigFileNotFoundError(str(config_path))

    requests = parse(config_path.read_text(encoding="utf-8"), str(config_path))
    return resolve_requests(requests)
