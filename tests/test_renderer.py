"""Tests for the HTML renderer."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from tagmark.parser import parse
from tagmark.renderer import LINE_BREAK, TAG_RENDERERS, render
from tagmark.schemas import Tag, TagKind


def _body(source: str, **kwargs: bool) -> str:
    """Render a document and strip the main wrapper."""
    html = render(parse(source), **kwargs)
    prefix, suffix = '<div class="main-tag">', "</div>"
    assert html.startswith(prefix) and html.endswith(suffix)
    return html[len(prefix) : -len(suffix)]


class TestDispatch:
    """Tests for kind-to-rule dispatch."""

    def test_every_known_kind_has_a_renderer(self) -> None:
        assert set(TAG_RENDERERS) == set(TagKind)

    def test_main_wrapper(self) -> None:
        assert render(parse("@main{}")) == '<div class="main-tag"></div>'

    def test_unknown_kind_falls_back_to_span(self) -> None:
        assert _body("@main{@whatever{x}}") == "<span>x</span>"

    def test_rendering_unvalidated_tree_does_not_fail(self) -> None:
        tag = Tag(kind="image")

        assert render(tag) == '<img src="" class="rounded mx-auto d-block" >'


class TestBlockKinds:
    """Tests for paragraph, heading, list and layout kinds."""

    def test_paragraph_defaults_to_left(self) -> None:
        assert _body("@main{@paragraph{x}}") == '<p class="text-left">x</p>'

    def test_paragraph_alignment(self) -> None:
        assert _body('@main{@paragraph(alignment: "center"){x}}') == '<p class="text-center">x</p>'

    def test_heading_defaults_match_explicit_options(self) -> None:
        implicit = render(parse("@main{@heading{Title}}"))
        explicit = render(parse('@main{@heading(level: "1", alignment: "left"){Title}}'))

        assert implicit == explicit
        assert implicit == '<div class="main-tag"><p class="h1 text-left">Title</p></div>'

    def test_heading_level_and_alignment(self) -> None:
        assert _body('@main{@heading(level: "3", alignment: "right"){T}}') == '<p class="h3 text-right">T</p>'

    def test_ordered_list(self) -> None:
        html = _body('@main{@list(style: "ordered"){@text1{}}}')

        assert html == "<ol><li><span></span></li></ol>"

    def test_list_defaults_to_unordered(self) -> None:
        assert _body("@main{@list{a @bold{b}}}") == "<ul><li>a </li><li><strong>b</strong></li></ul>"

    def test_block(self) -> None:
        assert _body("@main{@block{x}}") == "<div>x</div>"

    def test_columns_wrap_each_child(self) -> None:
        html = _body("@main{@columns{@block{a}@block{b}}}")

        assert html == (
            '<div class="row">'
            '<div class="col-sm"><div>a</div></div>'
            '<div class="col-sm"><div>b</div></div>'
            "</div>"
        )


class TestInlineKinds:
    """Tests for inline formatting, links, images and fonts."""

    @pytest.mark.parametrize(
        ("kind", "element"),
        [("bold", "strong"), ("italic", "em"), ("underlined", "u")],
    )
    def test_emphasis(self, kind: str, element: str) -> None:
        assert _body(f"@main{{@{kind}{{x}}}}") == f"<{element}>x</{element}>"

    def test_image(self) -> None:
        html = render(parse('@main{@image(uri: "x.png"){}}'))

        assert html == '<div class="main-tag"><img src="x.png" class="rounded mx-auto d-block" ></div>'

    def test_image_ignores_nested_content(self) -> None:
        assert _body('@main{@image(uri: "x.png"){caption}}') == '<img src="x.png" class="rounded mx-auto d-block" >'

    def test_link(self) -> None:
        assert _body('@main{@link(uri: "https://e.com"){site}}') == '<a href="https://e.com">site</a>'

    def test_font_with_all_options(self) -> None:
        html = _body('@main{@font(color: "red", family: "serif", size: "12"){x}}')

        assert html == '<span style="font-size: 12px; font-family: serif; color: red; ">x</span>'

    def test_font_with_some_options(self) -> None:
        assert _body('@main{@font(color: "#333"){x}}') == '<span style="color: #333; ">x</span>'

    def test_font_without_options(self) -> None:
        assert _body("@main{@font{x}}") == '<span style="">x</span>'


class TestText:
    """Tests for text leaf rendering."""

    def test_escaped_newline_renders_single_break(self) -> None:
        html = _body(r"@main{a\nb}")

        assert html == "a" + LINE_BREAK + "b"
        assert html.count(LINE_BREAK) == 1

    def test_escaped_backslash_renders_once(self) -> None:
        assert _body(r"@main{a\\b}") == "a\\b"

    def test_source_newline_renders_as_space(self) -> None:
        assert _body("@main{a\nb}") == "a b"

    def test_text_is_emitted_verbatim_by_default(self) -> None:
        """HTML in plain text passes through unchanged unless escaping is requested."""
        assert _body('@main{<b class="x">&</b>}') == '<b class="x">&</b>'

    def test_escape_text_option(self) -> None:
        html = _body("@main{<b>&</b>}", escape_text=True)

        assert html == "&lt;b&gt;&amp;&lt;/b&gt;"

    def test_escape_text_keeps_line_breaks(self) -> None:
        assert _body(r"@main{<\n>}", escape_text=True) == "&lt;" + LINE_BREAK + "&gt;"


def test_full_document_structure(sample_document: str) -> None:
    soup = BeautifulSoup(render(parse(sample_document)), "html.parser")

    main = soup.find("div", class_="main-tag")
    assert main is not None
    assert main.find("p", class_="h2").get_text(strip=True) == "Welcome"
    assert main.find("p", class_="text-left").find("strong").get_text() == "bold"
    assert [li.get_text() for li in main.find("ol").find_all("li")] == ["first", "second"]
    assert len(main.find("div", class_="row").find_all("div", class_="col-sm")) == 2
    assert main.find("a")["href"] == "https://example.com"
    assert main.find("img")["src"] == "logo.png"
