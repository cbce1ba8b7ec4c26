"""fountainpress: Fountain screenplay markup to structured documents.

Parses plain-text Fountain scripts into an immutable Document of title page
fields and classified screenplay elements, ready for a layout engine.
"""

from .exceptions import FountainPressError, InvalidInputError
from .parser import Document, FountainParser, parse
from .render import HtmlRenderer, render_page

__version__ = "0.1.0"

__all__ = [
    "Document",
    "FountainParser",
    "FountainPressError",
    "HtmlRenderer",
    "InvalidInputError",
    "__version__",
    "parse",
    "render_page",
]
