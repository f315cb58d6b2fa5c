"""Import manager for generated modules."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ImportSpec:
    """Specification for an import statement."""

    module: str
    items: list[str] = field(default_factory=list)
    alias: Optional[str] = None


class ImportsManager:
    """Collects the imports a generated module needs and renders them."""

    def __init__(self):
        self._imports: list[ImportSpec] = []

    def add_import(
        self,
        module: str,
        items: Optional[list[str]] = None,
        alias: Optional[str] = None,
    ) -> "ImportsManager":
        """Add an import, merging items into an existing one for ``module``.

        Args:
            module: Module/package name
            items: Specific items to import
            alias: Alias for the import
        """
        existing = next((i for i in self._imports if i.module == module), None)
        if existing:
            existing.items = sorted(set(existing.items) | set(items or []))
        else:
            self._imports.append(
                ImportSpec(module=module, items=sorted(items or []), alias=alias)
            )
        return self

    def get_imports_code(self) -> str:
        """Generate import statements.

        Plain ``import x`` lines come first, then ``from x import ...``,
        each group in the order the imports were added.
        """
        plain = []
        from_imports = []
        for spec in self._imports:
            if spec.items:
                line = f"from {spec.module} import {', '.join(spec.items)}"
                from_imports.append(f"{line} as {spec.alias}" if spec.alias else line)
            elif spec.alias:
                plain.append(f"import {spec.module} as {spec.alias}")
            else:
                plain.append(f"import {spec.module}")

        if plain and from_imports:
            return "\n".join(plain) + "\n" + "\n".join(from_imports)
        return "\n".join(plain + from_imports)
