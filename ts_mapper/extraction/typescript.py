"""TypeScript schema extractor.

Reads a declaration file and yields its top-level object-shaped
declarations as schema entities, plus the import statements it makes:

    export interface User { id: number; name?: string | null }
    export type UserView = { id: number }
    import { Address } from './address'

Only the shapes needed for mapping are understood. Method, call and
index signatures are skipped; ``extends`` clauses are not followed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path

from ts_mapper.core import paths
from ts_mapper.core.enums import EntityVisibility
from ts_mapper.core.exceptions import ExtractionError
from ts_mapper.mapping.plan import ImportDeclaration, PropertyDescriptor, SchemaEntity

logger = logging.getLogger(__name__)

_IDENTIFIER = r"[A-Za-z_$][\w$]*"

_DECLARATION = re.compile(
    r"(?P<export>export\s+(?:default\s+)?)?(?:declare\s+)?"
    rf"(?:interface\s+(?P<interface>{_IDENTIFIER})|type\s+(?P<alias>{_IDENTIFIER}))"
)

_IMPORT = re.compile(
    r"import\s+(?:type\s+)?[\w$*{}\s,]+?\s+from\s+"
    r"(?P<quote>['\"])(?P<path>[^'\"\n]+)(?P=quote)\s*;?"
)

# export { A, B as C } without a "from" clause
_EXPORT_LIST = re.compile(r"export\s+(?:type\s+)?\{(?P<names>[^{}]*)\}(?!\s*from\b)")

_MEMBER = re.compile(
    rf"^(?:readonly\s+)?(?P<name>{_IDENTIFIER}|'[^']*'|\"[^\"]*\")"
    r"\s*(?P<optional>\?)?\s*:\s*(?P<type>.+)$",
    re.DOTALL,
)

_QUOTES = "'\"`"
_OPENERS = {"{": "}", "(": ")", "[": "]", "<": ">"}
_CLOSERS = frozenset(_OPENERS.values())
_CONTINUATION_SUFFIXES = ("|", "&", ":", "=>", "?", ",")
_CONTINUATION_PREFIXES = ("|", "&", "?", ":")

# A "/" after one of these (or at the start of input) opens a regex literal
_REGEX_PRECEDERS = frozenset("(,=:[!&|?{};+-*%<>~^")
_REGEX_KEYWORDS = frozenset(
    {"return", "typeof", "case", "do", "else", "in", "of", "void", "yield", "await", "throw"}
)


@dataclass(frozen=True)
class SchemaDocument:
    """Entities and imports extracted from one declaration file."""

    file_location: str
    entities: tuple[SchemaEntity, ...] = ()
    imports: tuple[ImportDeclaration, ...] = ()

    @property
    def entity_names(self) -> list[str]:
        return [entity.name for entity in self.entities]

    @property
    def default_entity_name(self) -> str | None:
        """Name of the entity that is the file's default export, if any."""
        return next((entity.name for entity in self.entities if entity.default_export), None)


# ---------------------------------------------------------------------------
# Low-level scanning
# ---------------------------------------------------------------------------


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch in "_$"


def _skip_string(text: str, start: int, file_location: str) -> int:
    """Return the index just past the string literal opening at *start*."""
    quote = text[start]
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == quote:
            return i + 1
        if ch == "\n" and quote != "`":
            break
        i += 1
    raise ExtractionError(file_location, f"unterminated string literal at offset {start}")


def _ends_with_word(text: str, word: str) -> bool:
    if not text.endswith(word):
        return False
    before = len(text) - len(word) - 1
    return before < 0 or not _is_word_char(text[before])


def _regex_end(text: str, start: int) -> int | None:
    """Return the index just past a regex literal opening at *start*.

    Returns None when the ``/`` at *start* is a division operator or the
    literal does not close on the same line.
    """
    j = start - 1
    while j >= 0 and text[j].isspace():
        j -= 1
    if j >= 0 and text[j] not in _REGEX_PRECEDERS:
        if not _is_word_char(text[j]):
            return None
        k = j
        while k >= 0 and _is_word_char(text[k]):
            k -= 1
        if text[k + 1 : j + 1] not in _REGEX_KEYWORDS:
            return None

    i = start + 1
    n = len(text)
    in_class = False
    while i < n:
        ch = text[i]
        if ch == "\\":
            i += 2
            continue
        if ch == "\n":
            return None
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
        elif ch == "/":
            i += 1
            while i < n and _is_word_char(text[i]):
                i += 1
            return i
        i += 1
    return None


def strip_comments(source: str, file_location: str = "<string>") -> str:
    """Remove ``//`` and ``/* */`` comments, preserving string and regex literals."""
    result: list[str] = []
    i = 0
    n = len(source)
    last = 0

    while i < n:
        ch = source[i]
        if ch in _QUOTES:
            i = _skip_string(source, i, file_location)
        elif source.startswith("//", i):
            result.append(source[last:i])
            j = source.find("\n", i)
            if j == -1:
                last = i = n
            else:
                last = i = j
        elif source.startswith("/*", i):
            result.append(source[last:i])
            j = source.find("*/", i + 2)
            if j == -1:
                raise ExtractionError(file_location, f"unterminated block comment at offset {i}")
            result.append(" ")
            last = i = j + 2
        elif ch == "/":
            end = _regex_end(source, i)
            i = end if end is not None else i + 1
        else:
            i += 1

    result.append(source[last:])
    return "".join(result)


def _find_closing(text: str, open_index: int, file_location: str) -> int:
    """Index of the ``}`` matching the ``{`` at *open_index*."""
    depth = 0
    i = open_index
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i, file_location)
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    raise ExtractionError(file_location, f"unbalanced braces starting at offset {open_index}")


def _skip_whitespace(text: str, i: int) -> int:
    while i < len(text) and text[i].isspace():
        i += 1
    return i


def _find_body_start(text: str, i: int, file_location: str) -> int:
    """Find the ``{`` opening an interface body, skipping generics and ``extends``."""
    angle = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i, file_location)
            continue
        if text.startswith("=>", i):
            i += 2
            continue
        if ch == "<":
            angle += 1
        elif ch == ">":
            angle -= 1
        elif ch == "{":
            if angle == 0:
                return i
            i = _find_closing(text, i, file_location)
        elif ch == ";" and angle == 0:
            break
        i += 1
    raise ExtractionError(file_location, f"declaration at offset {i} has no body")


def _skip_generics(text: str, i: int, file_location: str) -> int:
    """Skip a ``<...>`` type parameter list starting at *i*, if present."""
    i = _skip_whitespace(text, i)
    if i >= len(text) or text[i] != "<":
        return i
    depth = 0
    while i < len(text):
        ch = text[i]
        if ch in _QUOTES:
            i = _skip_string(text, i, file_location)
            continue
        if text.startswith("=>", i):
            i += 2
            continue
        if ch == "<":
            depth += 1
        elif ch == ">":
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    raise ExtractionError(file_location, "unterminated type parameter list")


# ---------------------------------------------------------------------------
# Members
# ---------------------------------------------------------------------------


def _split_members(body: str, file_location: str) -> list[str]:
    """Split a declaration body on top-level ``;``, ``,`` and line breaks.

    A line break does not end a member while its type continues, as in
    multi-line unions written with a leading or trailing ``|`` and
    conditional types whose ``?``/``:`` branches start new lines.
    """
    members: list[str] = []
    depth = 0
    i = 0
    last = 0
    n = len(body)

    while i < n:
        ch = body[i]
        if ch in _QUOTES:
            i = _skip_string(body, i, file_location)
            continue
        if body.startswith("=>", i):
            i += 2
            continue
        if ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            depth -= 1
        elif depth == 0 and ch in ";,":
            members.append(body[last:i])
            last = i + 1
        elif depth == 0 and ch == "\n":
            pending = body[last:i].strip()
            following = body[_skip_whitespace(body, i) :]
            if (
                pending
                and not pending.endswith(_CONTINUATION_SUFFIXES)
                and not _ends_with_word(pending, "extends")
                and not following.startswith(_CONTINUATION_PREFIXES)
            ):
                members.append(body[last:i])
                last = i + 1
        i += 1

    members.append(body[last:])
    return [member.strip() for member in members if member.strip()]


def normalize_type(type_text: str) -> str:
    """Collapse whitespace and drop a leading union/intersection operator."""
    normalized = " ".join(type_text.split())
    if normalized.startswith(("|", "&")):
        normalized = normalized[1:].strip()
    return normalized


def parse_members(body: str, file_location: str = "<string>") -> list[PropertyDescriptor]:
    """Parse property signatures from a declaration body."""
    properties: list[PropertyDescriptor] = []
    for member in _split_members(body, file_location):
        match = _MEMBER.match(member)
        if not match:
            logger.debug("Skipping unsupported member in %s: %s", file_location, member)
            continue
        name = match.group("name")
        if name[0] in "'\"":
            name = name[1:-1]
        properties.append(
            PropertyDescriptor(
                name=name,
                declared_type=normalize_type(match.group("type")),
                is_optional=match.group("optional") is not None,
            )
        )
    return properties


# ---------------------------------------------------------------------------
# Public class
# ---------------------------------------------------------------------------


class TypeScriptSchemaExtractor:
    """Extracts schema entities and imports from TypeScript source files.

    Args:
        visibility: Whether only exported declarations become entities.
    """

    def __init__(self, visibility: EntityVisibility = EntityVisibility.EXPORTED_ONLY) -> None:
        self._visibility = visibility

    @property
    def visibility(self) -> EntityVisibility:
        return self._visibility

    def extract(self, file_location: str | Path) -> SchemaDocument:
        """Read and parse the declaration file at *file_location*."""
        location = str(file_location)
        source = Path(location).read_text(encoding="utf-8")
        return self.parse(source, location)

    def parse(self, source: str, file_location: str = "<string>") -> SchemaDocument:
        """Parse TypeScript *source* declared at *file_location*.

        Raises:
            ExtractionError: On unterminated comments, strings or bodies.
        """
        text = strip_comments(source, file_location)
        entities: list[SchemaEntity] = []
        imports: list[ImportDeclaration] = []

        i = 0
        depth = 0
        n = len(text)
        while i < n:
            ch = text[i]
            if ch in _QUOTES:
                i = _skip_string(text, i, file_location)
                continue
            if ch == "/":
                end = _regex_end(text, i)
                if end is not None:
                    i = end
                    continue
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth = max(depth - 1, 0)
            elif depth == 0 and ch.isalpha() and (i == 0 or not _is_word_char(text[i - 1])):
                import_match = _IMPORT.match(text, i)
                if import_match:
                    imports.append(self._import_from_match(import_match, file_location))
                    i = import_match.end()
                    continue
                declaration = _DECLARATION.match(text, i)
                if declaration:
                    entity, i = self._parse_declaration(text, declaration, file_location)
                    if entity is not None:
                        entities.append(entity)
                    continue
            i += 1

        exported_names, default_name = self._exported_names(text)
        entities = [
            SchemaEntity(
                entity.name,
                entity.properties,
                exported=True,
                default_export=entity.default_export or entity.name == default_name,
            )
            if entity.name in exported_names or entity.name == default_name
            else entity
            for entity in entities
        ]
        if self._visibility is EntityVisibility.EXPORTED_ONLY:
            entities = [entity for entity in entities if entity.exported]

        return SchemaDocument(
            file_location=file_location,
            entities=tuple(entities),
            imports=tuple(imports),
        )

    @staticmethod
    def _import_from_match(match: re.Match[str], file_location: str) -> ImportDeclaration:
        referenced = match.group("path")
        raw_text = match.group(0).rstrip().rstrip(";").rstrip()
        return ImportDeclaration(
            declaring_file=file_location,
            raw_text=raw_text,
            referenced_path=referenced,
            was_relative=paths.is_relative(referenced),
        )

    @staticmethod
    def _exported_names(text: str) -> tuple[set[str], str | None]:
        """Names listed in ``export { ... }``, and the one exported as ``default``."""
        names: set[str] = set()
        default_name = None
        for match in _EXPORT_LIST.finditer(text):
            for part in match.group("names").split(","):
                local, _, exported_as = part.partition(" as ")
                local = local.strip()
                if local.startswith("type "):
                    local = local[len("type ") :].strip()
                if not local:
                    continue
                if exported_as.strip() == "default":
                    default_name = local
                else:
                    names.add(local)
        return names, default_name

    def _parse_declaration(
        self,
        text: str,
        match: re.Match[str],
        file_location: str,
    ) -> tuple[SchemaEntity | None, int]:
        """Parse the declaration at *match*; return the entity and resume index."""
        export = match.group("export")
        exported = export is not None
        default_export = exported and "default" in export
        name = match.group("interface") or match.group("alias")
        pos = _skip_generics(text, match.end(), file_location)

        if match.group("interface"):
            body_start = _find_body_start(text, pos, file_location)
        else:
            pos = _skip_whitespace(text, pos)
            if not text.startswith("=", pos):
                return None, pos
            body_start = _skip_whitespace(text, pos + 1)
            if not text.startswith("{", body_start):
                # Aliases of non-object types (unions, primitives) are not entities
                return None, body_start

        body_end = _find_closing(text, body_start, file_location)
        resume = body_end + 1

        if match.group("alias"):
            following = text[_skip_whitespace(text, resume) :]
            if following.startswith(("&", "|", "[")):
                logger.debug("Skipping composite type alias %s in %s", name, file_location)
                return None, resume

        properties = parse_members(text[body_start + 1 : body_end], file_location)
        entity = SchemaEntity.of(
            name, *properties, exported=exported, default_export=default_export
        )
        return entity, resume
