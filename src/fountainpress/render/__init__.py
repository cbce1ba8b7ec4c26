"""Renderers that turn a parsed Document into output markup."""

from __future__ import annotations

from fountainpress.render.html import HtmlRenderer, RenderedHtml, render_page

__all__ = ["HtmlRenderer", "RenderedHtml", "render_page"]
