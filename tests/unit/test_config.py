"""Unit tests for mapping config validation and loading."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from ts_mapper.core.config import (
    GeneratorSettings,
    MappingRequest,
    load_config,
    parse,
    resolve_requests,
    validate,
)
from ts_mapper.core.enums import ConfigErrorKind, EntityVisibility
from ts_mapper.core.exceptions import (
    ConfigError,
    ConfigFileNotFoundError,
    ConfigNotAnArrayError,
    InvalidConfigDocumentError,
    InvalidConfigEntryError,
)


class TestValidate:
    def test_single_entry(self) -> None:
        assert validate([{"source": "a", "target": "b"}]) == [MappingRequest("a", "b", False)]

    def test_vice_versa(self) -> None:
        requests = validate([{"source": "a", "target": "b", "viceVersa": True}])
        assert requests == [MappingRequest("a", "b", True)]

    def test_duplicates_collapse(self) -> None:
        requests = validate([{"source": "a", "target": "b"}, {"source": "a", "target": "b"}])
        assert len(requests) == 1

    def test_absent_vice_versa_equals_false(self) -> None:
        requests = validate(
            [{"source": "a", "target": "b"}, {"source": "a", "target": "b", "viceVersa": False}]
        )
        assert requests == [MappingRequest("a", "b", False)]

    def test_distinct_direction_flags_kept(self) -> None:
        requests = validate(
            [{"source": "a", "target": "b"}, {"source": "a", "target": "b", "viceVersa": True}]
        )
        assert len(requests) == 2

    def test_first_occurrence_order(self) -> None:
        requests = validate(
            [
                {"source": "c", "target": "d"},
                {"source": "a", "target": "b"},
                {"source": "c", "target": "d"},
            ]
        )
        assert [r.source for r in requests] == ["c", "a"]

    def test_extra_keys_ignored(self) -> None:
        requests = validate([{"source": "a", "target": "b", "comment": "x"}])
        assert requests == [MappingRequest("a", "b")]

    def test_empty_array(self) -> None:
        assert validate([]) == []

    @pytest.mark.parametrize("document", [{"source": "a", "target": "b"}, "a", 1, None])
    def test_not_an_array(self, document: object) -> None:
        with pytest.raises(ConfigNotAnArrayError) as exc_info:
            validate(document)
        assert exc_info.value.kind is ConfigErrorKind.NOT_AN_ARRAY

    def test_missing_target(self) -> None:
        with pytest.raises(InvalidConfigEntryError, match="target") as exc_info:
            validate([{"source": "a"}])
        assert exc_info.value.kind is ConfigErrorKind.INVALID_ENTRY
        assert exc_info.value.index == 0

    @pytest.mark.parametrize(
        "entry",
        [
            {"source": 1, "target": "b"},
            {"source": "a", "target": ["b"]},
            {"source": "a", "target": "b", "viceVersa": "yes"},
            {"source": "a", "target": "b", "viceVersa": 1},
            {"source": "a", "target": "b", "viceVersa": None},
            ["a", "b"],
            "a",
        ],
    )
    def test_invalid_entries(self, entry: object) -> None:
        with pytest.raises(InvalidConfigEntryError):
            validate([{"source": "x", "target": "y"}, entry])

    def test_index_reported(self) -> None:
        with pytest.raises(InvalidConfigEntryError) as exc_info:
            validate([{"source": "x", "target": "y"}, {"source": "a"}])
        assert exc_info.value.index == 1

    def test_config_errors_share_base(self) -> None:
        with pytest.raises(ConfigError):
            validate({})

    def test_request_is_frozen(self) -> None:
        request = MappingRequest("a", "b")
        with pytest.raises(AttributeError):
            request.source = "c"  # type: ignore[misc]


class TestParse:
    def test_valid_json(self) -> None:
        assert parse('[{"source": "a", "target": "b"}]') == [MappingRequest("a", "b")]

    def test_invalid_json(self) -> None:
        with pytest.raises(InvalidConfigDocumentError) as exc_info:
            parse("[{", "mapping.json")
        assert exc_info.value.kind is ConfigErrorKind.INVALID_JSON
        assert "mapping.json" in str(exc_info.value)


class TestResolveRequests:
    def test_relative_paths_resolved(self, tmp_path: Path) -> None:
        resolved = resolve_requests([MappingRequest("model/a.ts", "view/b.ts")], tmp_path)
        assert resolved == [
            MappingRequest(
                os.path.join(str(tmp_path), "model", "a.ts"),
                os.path.join(str(tmp_path), "view", "b.ts"),
            )
        ]

    def test_absolute_paths_kept(self, tmp_path: Path) -> None:
        source = str(tmp_path / "a.ts")
        resolved = resolve_requests([MappingRequest(source, source, True)], "/elsewhere")
        assert resolved[0].source == source
        assert resolved[0].bidirectional is True

    def test_equivalent_paths_collapse(self, tmp_path: Path) -> None:
        resolved = resolve_requests(
            [MappingRequest("a.ts", "b.ts"), MappingRequest("./a.ts", "x/../b.ts")], tmp_path
        )
        assert len(resolved) == 1


class TestLoadConfig:
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigFileNotFoundError):
            load_config(tmp_path / "missing.json")

    def test_loads_and_resolves(
        self, ts_dir: Path, write_config, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config = write_config([{"source": "a.ts", "target": "b.ts", "viceVersa": True}])
        monkeypatch.chdir(ts_dir)
        requests = load_config(config)
        assert requests == [
            MappingRequest(str(ts_dir / "a.ts"), str(ts_dir / "b.ts"), True),
        ]

    def test_not_an_array_file(self, write_config) -> None:
        config = write_config({"source": "a.ts", "target": "b.ts"})
        with pytest.raises(ConfigNotAnArrayError):
            load_config(config)


class TestGeneratorSettings:
    def test_defaults(self) -> None:
        settings = GeneratorSettings()
        assert settings.template_path is None
        assert settings.visibility is EntityVisibility.EXPORTED_ONLY
        assert settings.cache_schemas is True
        assert settings.strip_import_extension is True

    def test_frozen(self) -> None:
        settings = GeneratorSettings()
        with pytest.raises(ValidationError):
            settings.cache_schemas = False  # type: ignore[misc]

    def test_template_path_coerced(self) -> None:
        settings = GeneratorSettings(template_path="custom.j2")
        assert settings.template_path == Path("custom.j2")
