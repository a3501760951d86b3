"""Plain text <-> rich-text (paragraph/text-leaf) conversion."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TextLeaf(BaseModel):
    """Single node inside a block. Formatting marks (bold, italic, ...) are kept as extra keys."""

    model_config = ConfigDict(extra="allow")

    type: str = "text"
    text: str = ""


class ParagraphBlock(BaseModel):
    """
    Top-level rich-text block. to_rich_text only emits paragraphs, but
    headings, lists and any other block the CMS sends are kept as given.
    """

    model_config = ConfigDict(extra="allow")

    type: str = "paragraph"
    children: list[TextLeaf] = Field(default_factory=list)


def to_rich_text(plain_text: Optional[str]) -> list[ParagraphBlock]:
    """
    Convert plain text to paragraph blocks, one per line.
    Lines are kept verbatim (no trimming). Empty or missing text gives a
    single paragraph with an empty leaf.
    """
    lines = plain_text.split("\n") if plain_text else [""]
    return [
        ParagraphBlock(type="paragraph", children=[TextLeaf(type="text", text=line)])
        for line in lines
    ]


def _plain_text(node: dict[str, Any]) -> str:
    children = node.get("children")
    if isinstance(children, list):
        return "".join(_plain_text(child) for child in children if isinstance(child, dict))
    return node.get("text") or ""


def from_rich_text(blocks: Optional[list[ParagraphBlock]]) -> str:
    """Join block text back into newline-separated plain text. Nested nodes are flattened."""
    if not blocks:
        return ""
    return "\n".join(_plain_text(block.model_dump()) for block in blocks)
