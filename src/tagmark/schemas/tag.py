"""Tag tree models."""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Iterator

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from tagmark.exceptions import ValidationError


class TagKind(str, Enum):
    """Tag kinds known to the validator and the renderer."""

    MAIN = "main"
    TEXT = "text"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINED = "underlined"
    BLOCK = "block"
    COLUMNS = "columns"
    IMAGE = "image"
    LINK = "link"
    FONT = "font"

    @classmethod
    def lookup(cls, name: str) -> TagKind | None:
        """Return the kind named ``name``, or None for unrecognized names."""
        try:
            return cls(name)
        except ValueError:
            return None


class Position(BaseModel):
    """Zero-based location in a source document.

    ``offset`` and ``column`` count characters of the decoded text after
    ``\\r\\n`` and ``\\r`` line endings are normalized to ``\\n``, not bytes.
    """

    model_config = ConfigDict(frozen=True)

    offset: int = 0
    row: int = 0
    column: int = 0


class Tag(BaseModel):
    """A node of the parsed document tree.

    Containers carry a kind, options and children. Text leaves have kind
    ``text`` and only carry ``content``.

    Attributes:
        kind: Tag name as written after the ``@`` marker.
        options: Option values keyed by option name.
        children: Nested tags in source order.
        content: Literal text, only set on text leaves.
        position: Location of the opening marker (or of the text run).
    """

    model_config = ConfigDict(frozen=True)

    kind: str
    options: dict[str, str] = Field(default_factory=dict)
    children: list["Tag"] = Field(default_factory=list)
    content: str = ""
    position: Position = Field(default_factory=Position)

    @classmethod
    def text_leaf(cls, content: str, position: Position) -> Tag:
        """Create a text leaf holding ``content``."""
        return cls(kind=TagKind.TEXT.value, content=content, position=position)

    @property
    def is_text(self) -> bool:
        return self.kind == TagKind.TEXT

    def option(self, name: str, default: str) -> str:
        """Return option ``name``, falling back to ``default`` when absent."""
        return self.options.get(name, default)

    def walk(self) -> Iterator[Tag]:
        """Yield this tag and all of its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def validation_errors(self) -> list[ValidationError]:
        """Run the document validator with this tag as the root."""
        from tagmark.validator import validate

        return validate(self)

    def dump(self, prefix: str = "") -> str:
        """Render the subtree as indented, human-readable markup."""
        options = ", ".join(f'{key}: "{value}"' for key, value in self.options.items())
        lines = [f"{prefix}@{self.kind}({options}) {{\n"]
        for child in self.children:
            lines.append(child.dump(prefix + "    "))
        if self.content:
            lines.append(f"{prefix}  {json.dumps(self.content, ensure_ascii=False)}\n")
        lines.append(f"{prefix}}}\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.dump()
