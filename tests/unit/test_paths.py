"""Unit tests for import path arithmetic."""

from __future__ import annotations

import pytest

from ts_mapper.core import paths


class TestIsRelative:
    @pytest.mark.parametrize("specifier", ["./a", "../a", ".", ".hidden"])
    def test_relative(self, specifier: str) -> None:
        assert paths.is_relative(specifier) is True

    @pytest.mark.parametrize("specifier", ["react", "@scope/pkg", "/abs/path", "src/a"])
    def test_not_relative(self, specifier: str) -> None:
        assert paths.is_relative(specifier) is False


class TestRelative:
    def test_sibling_directory(self) -> None:
        assert paths.relative("/out/mapper.ts", "/out/models/a.ts") == "./models/a.ts"

    def test_same_directory_gets_dot_prefix(self) -> None:
        assert paths.relative("/out/mapper.ts", "/out/a.ts") == "./a.ts"

    def test_parent_directory(self) -> None:
        assert paths.relative("/out/gen/mapper.ts", "/out/models/a") == "../models/a"

    def test_directory_itself(self) -> None:
        assert paths.relative("/out/mapper.ts", "/out") == "."

    def test_forward_slashes(self) -> None:
        assert "\\" not in paths.relative("/out/gen/mapper.ts", "/src/models/deep/a.ts")


class TestJoin:
    def test_resolves_against_containing_directory(self) -> None:
        assert paths.join("/src/model/user.ts", "./address") == "/src/model/address"

    def test_parent_segments_normalized(self) -> None:
        assert paths.join("/src/model/user.ts", "../shared/types") == "/src/shared/types"


class TestToImportPath:
    def test_backslashes_converted(self) -> None:
        assert paths.to_import_path("..\\models\\a") == "../models/a"


class TestStripExtension:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("./a.ts", "./a"),
            ("./a.tsx", "./a"),
            ("./types.d.ts", "./types"),
            ("./a.js", "./a.js"),
            ("./a", "./a"),
        ],
    )
    def test_strip(self, path: str, expected: str) -> None:
        assert paths.strip_extension(path) == expected
