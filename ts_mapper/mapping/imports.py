"""Import aggregation for the generated mapper file.

Collects one import per schema file for its entities plus the
imports those schema files declare themselves, rewrites relative
specifiers so they resolve from the output location, and deduplicates
by final statement text across a whole run.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from ts_mapper.core import paths
from ts_mapper.mapping.plan import ImportDeclaration


class ImportAggregator:
    """Running, order-preserving set of import statements.

    Args:
        output_location: File the statements will be written into.
        strip_extension: Drop ``.ts``/``.tsx``/``.d.ts`` from synthesized
            entity import specifiers.
    """

    def __init__(self, output_location: str, strip_extension: bool = True) -> None:
        self._output_location = output_location
        self._strip_extension = strip_extension
        self._statements: dict[str, None] = {}

    def specifier_for(self, file_location: str) -> str:
        """Import specifier reaching *file_location* from the output file."""
        specifier = paths.relative(self._output_location, file_location)
        if self._strip_extension:
            specifier = paths.strip_extension(specifier)
        return specifier

    def entity_import(
        self,
        file_location: str,
        names: Sequence[str],
        default_name: str | None = None,
    ) -> str | None:
        """Import of *names* from *file_location*, or None if there are none.

        *default_name*, when given, is imported as the default binding
        (``import A, { B } from ...``) and left out of the braces.
        """
        clauses = [default_name] if default_name else []
        named = [name for name in dict.fromkeys(names) if name != default_name]
        if named:
            clauses.append(f"{{ {', '.join(named)} }}")
        if not clauses:
            return None
        return f"import {', '.join(clauses)} from '{self.specifier_for(file_location)}'"

    def rewrite(self, declaration: ImportDeclaration) -> str:
        """Re-express a collected import relative to the output file."""
        if not declaration.was_relative:
            return declaration.raw_text

        absolute = paths.join(declaration.declaring_file, declaration.referenced_path)
        new_path = paths.relative(self._output_location, absolute)

        text = declaration.raw_text
        for quote in ("'", '"'):
            quoted = f"{quote}{declaration.referenced_path}{quote}"
            position = text.rfind(quoted)
            if position != -1:
                return text[:position] + f"{quote}{new_path}{quote}" + text[position + len(quoted) :]
        return text

    def _add(self, statement: str | None) -> None:
        if statement is not None:
            self._statements.setdefault(statement, None)

    def add_entities(
        self,
        entity_names_by_file: Mapping[str, Sequence[str]],
        default_names_by_file: Mapping[str, str | None] | None = None,
    ) -> None:
        """Add one synthesized import per contributing file, in mapping order."""
        defaults = default_names_by_file or {}
        for file_location, names in entity_names_by_file.items():
            self._add(self.entity_import(file_location, names, defaults.get(file_location)))

    def add_declarations(self, declarations: Iterable[ImportDeclaration]) -> None:
        """Add rewritten in-file imports."""
        for declaration in declarations:
            self._add(self.rewrite(declaration))

    def add(
        self,
        declarations: Iterable[ImportDeclaration],
        entity_names_by_file: Mapping[str, Sequence[str]],
        default_names_by_file: Mapping[str, str | None] | None = None,
    ) -> None:
        """Fold one request's imports: entity imports first, then declarations."""
        self.add_entities(entity_names_by_file, default_names_by_file)
        self.add_declarations(declarations)

    @property
    def statements(self) -> list[str]:
        """Deduplicated statements in first-occurrence order."""
        return list(self._statements)

    def __len__(self) -> int:
        return len(self._statements)


def aggregate(
    declarations: Iterable[ImportDeclaration],
    entity_names_by_file: Mapping[str, Sequence[str]],
    output_location: str,
    strip_extension: bool = True,
    default_names_by_file: Mapping[str, str | None] | None = None,
) -> list[str]:
    """One-shot aggregation of a single batch of imports."""
    aggregator = ImportAggregator(output_location, strip_extension=strip_extension)
    aggregator.add(declarations, entity_names_by_file, default_names_by_file)
    return aggregator.statements
