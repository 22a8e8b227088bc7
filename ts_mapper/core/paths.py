"""Path arithmetic for import specifiers.

Pure helpers; nothing here touches the filesystem.
"""

from __future__ import annotations

import os

_IMPORT_EXTENSIONS = (".d.ts", ".tsx", ".ts")


def is_relative(path: str) -> bool:
    """Return True if an import specifier is relative (starts with ``.``)."""
    return path.startswith(".")


def to_import_path(path: str) -> str:
    """Normalize path separators to forward slashes."""
    return path.replace("\\", "/")


def relative(from_path: str, to_path: str) -> str:
    """Express *to_path* relative to the directory containing *from_path*.

    The result always uses forward slashes and starts with ``.``:

        relative("/out/mapper.ts", "/out/models/a.ts") -> "./models/a.ts"
    """
    from_dir = os.path.dirname(from_path) or os.curdir
    result = to_import_path(os.path.relpath(to_path, from_dir))
    if not result.startswith("."):
        return "./" + result
    return result


def join(from_path: str, to_path: str) -> str:
    """Resolve *to_path* as if written inside the file *from_path*."""
    return os.path.normpath(os.path.join(os.path.dirname(from_path), to_path))


def strip_extension(path: str) -> str:
    """Drop a TypeScript source extension so the path is importable."""
    for extension in _IMPORT_EXTENSIONS:
        if path.endswith(extension):
            return path[: -len(extension)]
    return path
