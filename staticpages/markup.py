"""
Helpers for producing page content without a templating language.

    h("html", h("head", h("title", "Hello")), h("body", h("p", "Hello", class_="greeting")))

Every helper returns `markupsafe.Markup`, so the results nest inside each other and inside jinja templates without
being escaped twice.
"""

from staticpages.constants import DOCTYPE, VOID_ELEMENTS
from staticpages.render import Renderable, render_to_static_markup

from jinja2 import Environment
from markupsafe import Markup, escape


def attribute_name(name: str) -> str:
    # Python keywords can't be used as keyword arguments, `class_` and `for_` are the usual workaround.
    if name.endswith("_") and name != "_":
        name = name[:-1]
    return name.replace("_", "-")


def render_attributes(attributes: dict) -> str:
    rendered = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue

        name = attribute_name(name)
        if value is True:
            rendered.append(f" {name}")
        else:
            rendered.append(f' {name}="{escape(value)}"')

    return "".join(rendered)


def h(tag: str, *children: Renderable, **attributes) -> Markup:
    """
    Builds a single element.

    :param tag: Name of the element, e.g. "div".
    :param children: Child content, rendered with `render_to_static_markup` so plain strings are escaped.
    :param attributes: Element attributes. `True` renders a bare attribute, `False` and `None` leave it out.
    :return: The element as markup.
    """
    tag = tag.lower()
    open_tag = f"<{tag}{render_attributes(attributes)}>"

    if tag in VOID_ELEMENTS:
        if children:
            raise ValueError(f"<{tag}> is a void element and can't have children.")
        return Markup(open_tag)

    return Markup(f"{open_tag}{render_to_static_markup(children)}</{tag}>")


def fragment(*children: Renderable) -> Markup:
    return Markup(render_to_static_markup(children))


def doctype(document: Renderable) -> Markup:
    return Markup(DOCTYPE + render_to_static_markup(document))


def template(env: Environment, name: str, **context) -> Markup:
    return Markup(env.get_template(name).render(**context))
