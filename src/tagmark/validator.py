"""Structural validation of parsed tag trees."""

from __future__ import annotations

from typing import Callable, Iterable, Iterator

from tagmark.exceptions import ValidationError
from tagmark.schemas.tag import Tag, TagKind

DOCUMENT_KIND = TagKind.MAIN
ALIGNMENTS = ("left", "right", "center")
HEADING_LEVELS = ("1", "2", "3", "4", "5")
LIST_STYLES = ("unordered", "ordered")


def validate(root: Tag) -> list[ValidationError]:
    """Collect every structural violation in the tree rooted at ``root``.

    The root must be of the document kind. Every node, at any depth, is then
    checked against the rule registered for its kind. Nothing is raised; an
    empty list means the document is valid.
    """
    errors: list[ValidationError] = []
    if root.kind != DOCUMENT_KIND:
        errors.append(ValidationError(f"root tag must be @{DOCUMENT_KIND.value}", root.position))

    for tag in root.walk():
        kind = TagKind.lookup(tag.kind)
        rule = TAG_RULES.get(kind) if kind is not None else None
        if rule is not None:
            errors.extend(rule(tag))
    return errors


def _check_choice(tag: Tag, option: str, allowed: Iterable[str]) -> Iterator[ValidationError]:
    allowed = tuple(allowed)
    value = tag.options.get(option)
    if value is not None and value not in allowed:
        yield ValidationError(f"{option} must be: {', '.join(allowed)}", tag.position)


def _check_required(tag: Tag, option: str) -> Iterator[ValidationError]:
    if option not in tag.options:
        yield ValidationError(f"{option} parameter is required", tag.position)


def _validate_paragraph(tag: Tag) -> Iterator[ValidationError]:
    yield from _check_choice(tag, "alignment", ALIGNMENTS)


def _validate_heading(tag: Tag) -> Iterator[ValidationError]:
    yield from _check_choice(tag, "alignment", ALIGNMENTS)
    yield from _check_choice(tag, "level", HEADING_LEVELS)


def _validate_list(tag: Tag) -> Iterator[ValidationError]:
    yield from _check_choice(tag, "style", LIST_STYLES)


def _validate_uri_target(tag: Tag) -> Iterator[ValidationError]:
    yield from _check_required(tag, "uri")


TAG_RULES: dict[TagKind, Callable[[Tag], Iterable[ValidationError]]] = {
    TagKind.PARAGRAPH: _validate_paragraph,
    TagKind.HEADING: _validate_heading,
    TagKind.LIST: _validate_list,
    TagKind.IMAGE: _validate_uri_target,
    TagKind.LINK: _validate_uri_target,
}
