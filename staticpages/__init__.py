from staticpages.builder import BuildConfig, Builder, Page, build
from staticpages.exceptions import BuildError, ConfigurationError, OutputError, PageError, RenderError
from staticpages.markup import doctype, fragment, h, template
from staticpages.render import render_to_static_markup

__all__ = [
    "build", "Builder", "BuildConfig", "Page",
    "BuildError", "ConfigurationError", "PageError", "RenderError", "OutputError",
    "h", "fragment", "doctype", "template", "render_to_static_markup",
]
