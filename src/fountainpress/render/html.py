"""HTML rendering of parsed screenplays.

Produces semantic markup only. Element text already carries inline emphasis
tags and note markers, so it is emitted as is; title page values are plain
text and get escaped.
"""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from fountainpress.config import get_logger
from fountainpress.parser.models import (
    Action,
    Centered,
    Character,
    Dialogue,
    Document,
    Element,
    PageBreak,
    Parenthetical,
    SceneHeading,
    Section,
    Synopsis,
    Transition,
)

logger = get_logger(__name__)

# Title page key -> (tag, css class)
TITLE_PAGE_MARKUP: dict[str, tuple[str, str | None]] = {
    "title": ("h1", None),
    "credit": ("p", "credit"),
    "author": ("p", "authors"),
    "source": ("p", "source"),
    "draft date": ("p", "date"),
    "contact": ("p", "contact"),
    "copyright": ("p", "copyright"),
    "notes": ("p", "notes"),
}

SCREENPLAY_CSS = """\
body {
  font-family: 'Courier New', Courier, monospace;
  margin: 1in;
  line-height: 1.5;
}
.dialogue, .dual-dialogue { margin-left: 2.5in; margin-right: 1.5in; max-width: 3.5in; }
.character, .dual-dialogue-character { margin-left: 3.7in; text-transform: uppercase; }
.parenthetical { margin-left: 3.1in; }
.scene-heading { text-transform: uppercase; margin-top: 1.5em; margin-bottom: 1.5em; }
.action { margin-top: 1em; margin-bottom: 1em; }
.transition {
  text-transform: uppercase;
  text-align: right;
  margin-top: 1.5em;
  margin-bottom: 1.5em;
}
.centered { text-align: center; }
.title-page { text-align: center; page-break-after: always; }
"""


@dataclass(frozen=True)
class RenderedHtml:
    """The two HTML fragments of a rendered screenplay."""

    title_page: str
    script: str


def _div(css_class: str, content: str) -> str:
    return f'<div class="{css_class}">{content}</div>'


class HtmlRenderer:
    """Render a Document into title page and script HTML fragments."""

    def render_title_page(self, document: Document) -> str:
        """Render title page fields in their canonical order."""
        parts = []
        for key, (tag, css_class) in TITLE_PAGE_MARKUP.items():
            value = document.title_fields.get(key)
            if value is None:
                continue
            class_attr = f' class="{css_class}"' if css_class else ""
            parts.append(f"<{tag}{class_attr}>{escape(value)}</{tag}>")
        return "".join(parts)

    def render_element(self, element: Element) -> str:
        """Render one element; outline-only elements render as nothing."""
        match element:
            case SceneHeading():
                number = escape(str(element.number))
                return (
                    f'<div class="scene-heading" data-scene="{number}">'
                    f"{element.heading}</div>"
                )
            case Transition():
                return _div("transition", element.text)
            case Action():
                return _div("action", element.text)
            case Character():
                css_class = "dual-dialogue-character" if element.dual else "character"
                return _div(css_class, escape(element.name))
            case Parenthetical():
                return _div("parenthetical", element.text)
            case Dialogue():
                css_class = "dual-dialogue" if element.dual else "dialogue"
                return _div(css_class, element.text)
            case Centered():
                return _div("centered", element.text)
            case PageBreak():
                return "<hr>"
            case Section() | Synopsis():
                return ""
        raise TypeError(f"Unknown element type: {type(element).__name__}")

    def render_script(self, document: Document) -> str:
        """Render the body elements in document order."""
        return "".join(self.render_element(e) for e in document.elements)

    def render(self, document: Document) -> RenderedHtml:
        """Render both fragments."""
        rendered = RenderedHtml(
            title_page=self.render_title_page(document),
            script=self.render_script(document),
        )
        logger.debug(
            "Rendered HTML",
            elements=len(document.elements),
            script_bytes=len(rendered.script),
        )
        return rendered


def render_page(
    document: Document,
    include_title_page: bool = True,
    renderer: HtmlRenderer | None = None,
) -> str:
    """Render a standalone HTML page with screenplay styling.

    Args:
        document: Parsed screenplay
        include_title_page: Whether to emit the title page block
        renderer: Renderer to use; a default one is created if omitted

    Returns:
        Complete HTML document as a string
    """
    rendered = (renderer or HtmlRenderer()).render(document)
    title = escape(document.title or "Screenplay")
    title_block = ""
    if include_title_page and rendered.title_page:
        title_block = f'<div class="title-page">{rendered.title_page}</div>'
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "<head>\n"
        '<meta charset="utf-8">\n'
        f"<title>{title}</title>\n"
        f"<style>\n{SCREENPLAY_CSS}</style>\n"
        "</head>\n"
        "<body>\n"
        f"{title_block}{rendered.script}\n"
        "</body>\n"
        "</html>\n"
    )
