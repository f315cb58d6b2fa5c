"""Code fragment model.

Translated actions are built as CodeBlocks (lines with a nesting level)
and only turned into text by a template, which owns the base indentation.
"""

from dataclasses import dataclass
from typing import Iterator

INDENT_UNIT = "    "


@dataclass(frozen=True)
class CodeLine:
    """A single line of generated code at a nesting level."""

    text: str
    level: int = 0


@dataclass(frozen=True)
class CodeBlock:
    """An ordered, immutable sequence of code lines."""

    lines: tuple[CodeLine, ...] = ()

    @classmethod
    def of(cls, *texts: str) -> "CodeBlock":
        """Create a block of top-level lines."""
        return cls(tuple(CodeLine(text) for text in texts))

    def __add__(self, other: "CodeBlock") -> "CodeBlock":
        return CodeBlock(self.lines + other.lines)

    def __iter__(self) -> Iterator[CodeLine]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def indented(self, levels: int = 1) -> "CodeBlock":
        """Return a copy nested ``levels`` deeper."""
        return CodeBlock(
            tuple(CodeLine(line.text, line.level + levels) for line in self.lines)
        )

    def render(self, base_indent: str = "") -> str:
        """Render to text, prefixing every non-empty line with ``base_indent``."""
        rendered = []
        for line in self.lines:
            if not line.text:
                rendered.append("")
                continue
            rendered.append(f"{base_indent}{INDENT_UNIT * line.level}{line.text}")
        return "\n".join(rendered)
