"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from ts_mapper.mapping.plan import PropertyDescriptor, SchemaEntity


@pytest.fixture
def ts_dir(tmp_path: Path) -> Path:
    """Temporary project directory for declaration files."""
    return tmp_path / "project"


@pytest.fixture
def write_ts(ts_dir: Path):
    """Helper to write TypeScript files into the temp project.

    Usage:
        write_ts("model/user.ts", "export interface User { id: number }")
    """

    def _write(relative_path: str, content: str) -> Path:
        file_path = ts_dir / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def write_config(ts_dir: Path):
    """Helper to write a JSON mapping config into the temp project."""

    def _write(entries: Any, name: str = "mapping.json") -> Path:
        file_path = ts_dir / name
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(entries), encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def user_entity() -> SchemaEntity:
    """Model-side user schema."""
    return SchemaEntity.of(
        "User",
        PropertyDescriptor("id", "number"),
        PropertyDescriptor("name", "string"),
        PropertyDescriptor("email", "string | null"),
        PropertyDescriptor("age", "number", is_optional=True),
    )


@pytest.fixture
def user_view_entity() -> SchemaEntity:
    """View-model-side user schema."""
    return SchemaEntity.of(
        "UserViewModel",
        PropertyDescriptor("id", "number"),
        PropertyDescriptor("name", "string"),
        PropertyDescriptor("email", "string"),
        PropertyDescriptor("age", "number | undefined"),
        PropertyDescriptor("displayName", "string"),
    )
