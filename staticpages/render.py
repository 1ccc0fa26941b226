import logging
from collections.abc import Iterable, Mapping
from mimetypes import types_map as mimetype_map
from pathlib import Path
from typing import Any, TypeAlias

from staticpages.constants import MINIFIABLE_SUFFIXES

import minify
from jinja2 import Template
from markupsafe import escape

logger = logging.getLogger(__name__)

Renderable: TypeAlias = Any


def render_to_static_markup(content: Renderable) -> str:
    """
    Serializes a page's content to a string of static markup.

    Objects implementing the `__html__` protocol (`markupsafe.Markup`, elements built with `staticpages.markup.h`) are
    emitted as-is, jinja `Template` objects are rendered with an empty context, iterables (lists, tuples, generators)
    are rendered item by item and concatenated and `None` renders as nothing. Anything else, plain strings included,
    is treated as text and escaped.

    :param content: The value returned by a page's content function.
    :return: Markup ready to be written to disk.
    """
    if content is None:
        return ""

    if hasattr(content, "__html__"):
        return str(content.__html__())

    if isinstance(content, Template):
        return content.render()

    # Strings and bytes are iterable too, mappings would render only their keys.
    if isinstance(content, Iterable) and not isinstance(content, (str, bytes, Mapping)):
        return "".join(render_to_static_markup(child) for child in content)

    return str(escape(content))


def minify_markup(file_path: str | Path, markup: str) -> str:
    # Output is chosen by the page path, so the suffix decides the mimetype. Unknown suffixes are left alone.
    suffix = Path(file_path).suffix.lower()
    if suffix not in MINIFIABLE_SUFFIXES:
        logger.debug("Not minifying %s, unsupported suffix %r", file_path, suffix)
        return markup

    return minify.string(mimetype_map[suffix], markup)
