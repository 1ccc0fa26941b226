# Build with `staticpages build example/site.py`, or run this file directly.
import asyncio
from pathlib import Path

from staticpages import BuildConfig, Page, build, doctype, h

HERE = Path(__file__).parent.resolve()


def layout(title, *body):
    return doctype(h(
        "html",
        h("head",
          h("meta", charset="utf-8"),
          h("title", title),
          h("link", rel="stylesheet", href="/style.css")),
        h("body", *body),
        lang="en",
    ))


config = BuildConfig(
    to=HERE / "out",
    pages=[
        Page(
            path="index.html",
            metadata={},
            content=lambda: layout("Page title", "Hello"),
        ),
        Page(
            path="about/index.html",
            metadata={"nav": False},
            content=lambda: layout("About", h("p", "Built with ", h("a", "staticpages", href="/"), ".")),
        ),
    ],
    copy_assets_from=HERE / "assets",
)


if __name__ == "__main__":
    asyncio.run(build(config))
