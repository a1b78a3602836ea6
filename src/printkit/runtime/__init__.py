"""Rendering runtime: dispatch protocol, printing, building and joining.

Exports:
    render_plain, render_literal, Renderable: Two-mode dispatch protocol
    print_, println, show: Atomic output to a sink
    sprint, string, string_with_config, repr_, ...: String builder
    join, join_to, print_join: Delimited output
    RenderConfig, RenderContext: Rendering properties carried by a sink
    RendererRegistry, get_shared_registry, renders: Renderers for foreign types
    format_number: Locale-aware number text (requires Babel)

Python 3.13+.
"""

from .builder import (
    print_to_string,
    repr_,
    sprint,
    string,
    string_from_chars,
    string_with_config,
    tostr_sizehint,
)
from .context import RenderContext, config_of
from .joining import join, join_to, print_join
from .locale_format import format_number
from .printing import print_, println, show
from .registry import RendererEntry, RendererRegistry, get_shared_registry, renders
from .render import Renderable, render_literal, render_plain
from .render_config import DEFAULT_CONFIG, RenderConfig

__all__ = [
    "DEFAULT_CONFIG",
    "RenderConfig",
    "RenderContext",
    "Renderable",
    "RendererEntry",
    "RendererRegistry",
    "config_of",
    "format_number",
    "get_shared_registry",
    "join",
    "join_to",
    "print_",
    "print_join",
    "print_to_string",
    "println",
    "render_literal",
    "render_plain",
    "renders",
    "repr_",
    "show",
    "sprint",
    "string",
    "string_from_chars",
    "string_with_config",
    "tostr_sizehint",
]
