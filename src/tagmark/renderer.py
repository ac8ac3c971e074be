"""Render validated tag trees as HTML fragments."""

from __future__ import annotations

import html
from typing import Callable

from tagmark.schemas.tag import Tag, TagKind

LINE_BREAK = "<br/>"

_DEFAULT_ALIGNMENT = "left"
_DEFAULT_LEVEL = "1"
_DEFAULT_LIST_STYLE = "unordered"


def render(tag: Tag, *, escape_text: bool = False) -> str:
    """Render ``tag`` and its subtree as an HTML fragment.

    The tree should have passed validation first; rendering never fails, but
    missing required options produce empty attributes.

    Args:
        tag: Root of the subtree to render.
        escape_text: If True, HTML-escape text leaves. By default text is
            emitted verbatim, so markup written as plain text reaches the
            output unchanged.

    Returns:
        The HTML fragment.
    """
    kind = TagKind.lookup(tag.kind)
    renderer = TAG_RENDERERS[kind] if kind is not None else _render_unknown
    return renderer(tag, escape_text=escape_text)


def _render_children(tag: Tag, *, escape_text: bool = False) -> str:
    return "".join(render(child, escape_text=escape_text) for child in tag.children)


def _wrap(open_tag: str, close_tag: str, tag: Tag, *, escape_text: bool = False) -> str:
    return open_tag + _render_children(tag, escape_text=escape_text) + close_tag


def _render_text(tag: Tag, *, escape_text: bool = False) -> str:
    content = html.escape(tag.content) if escape_text else tag.content
    return content.replace("\n", LINE_BREAK)


def _render_main(tag: Tag, *, escape_text: bool = False) -> str:
    return _wrap('<div class="main-tag">', "</div>", tag, escape_text=escape_text)


def _render_paragraph(tag: Tag, *, escape_text: bool = False) -> str:
    alignment = tag.option("alignment", _DEFAULT_ALIGNMENT)
    return _wrap(f'<p class="text-{alignment}">', "</p>", tag, escape_text=escape_text)


def _render_heading(tag: Tag, *, escape_text: bool = False) -> str:
    level = tag.option("level", _DEFAULT_LEVEL)
    alignment = tag.option("alignment", _DEFAULT_ALIGNMENT)
    return _wrap(f'<p class="h{level} text-{alignment}">', "</p>", tag, escape_text=escape_text)


def _render_list(tag: Tag, *, escape_text: bool = False) -> str:
    element = "ol" if tag.option("style", _DEFAULT_LIST_STYLE) == "ordered" else "ul"
    items = "".join(f"<li>{render(child, escape_text=escape_text)}</li>" for child in tag.children)
    return f"<{element}>{items}</{element}>"


def _render_bold(tag: Tag, *, escape_text: bool = False) -> str:
    return _wrap("<strong>", "</strong>", tag, escape_text=escape_text)


def _render_italic(tag: Tag, *, escape_text: bool = False) -> str:
    return _wrap("<em>", "</em>", tag, escape_text=escape_text)


def _render_underlined(tag: Tag, *, escape_text: bool = False) -> str:
    return _wrap("<u>", "</u>", tag, escape_text=escape_text)


def _render_block(tag: Tag, *, escape_text: bool = False) -> str:
    return _wrap("<div>", "</div>", tag, escape_text=escape_text)


def _render_columns(tag: Tag, *, escape_text: bool = False) -> str:
    columns = "".join(
        f'<div class="col-sm">{render(child, escape_text=escape_text)}</div>' for child in tag.children
    )
    return f'<div class="row">{columns}</div>'


def _render_image(tag: Tag, *, escape_text: bool = False) -> str:
    # Images are void elements; nested content is ignored.
    return f'<img src="{tag.option("uri", "")}" class="rounded mx-auto d-block" >'


def _render_link(tag: Tag, *, escape_text: bool = False) -> str:
    return _wrap(f'<a href="{tag.option("uri", "")}">', "</a>", tag, escape_text=escape_text)


def _render_font(tag: Tag, *, escape_text: bool = False) -> str:
    style = ""
    if "size" in tag.options:
        style += f"font-size: {tag.options['size']}px; "
    if "family" in tag.options:
        style += f"font-family: {tag.options['family']}; "
    if "color" in tag.options:
        style += f"color: {tag.options['color']}; "
    return _wrap(f'<span style="{style}">', "</span>", tag, escape_text=escape_text)


def _render_unknown(tag: Tag, *, escape_text: bool = False) -> str:
    return _wrap("<span>", "</span>", tag, escape_text=escape_text)


TAG_RENDERERS: dict[TagKind, Callable[..., str]] = {
    TagKind.TEXT: _render_text,
    TagKind.MAIN: _render_main,
    TagKind.PARAGRAPH: _render_paragraph,
    TagKind.HEADING: _render_heading,
    TagKind.LIST: _render_list,
    TagKind.BOLD: _render_bold,
    TagKind.ITALIC: _render_italic,
    TagKind.UNDERLINED: _render_underlined,
    TagKind.BLOCK: _render_block,
    TagKind.COLUMNS: _render_columns,
    TagKind.IMAGE: _render_image,
    TagKind.LINK: _render_link,
    TagKind.FONT: _render_font,
}
