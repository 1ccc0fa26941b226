import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, NamedTuple, TypeVar

from staticpages.exceptions import BuildError, ConfigurationError, OutputError, RenderError
from staticpages.fs import copy_directory, ensure_directories_and_write_file, remove_tree
from staticpages.render import Renderable, minify_markup, render_to_static_markup

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    A page to be rendered by `build`.

    :param path: Where the page is written, relative to the destination directory. Nested directories are created
    as needed. The path must stay inside the destination directory.
    :param content: Called without arguments once per build, returns the content of the page. May be an `async def`
    function (or return any awaitable), in which case the result is awaited before rendering.
    :param metadata: Additional data for the page. The builder never looks at it.
    """
    path: str
    content: Callable[[], Renderable | Awaitable[Renderable]]
    metadata: T | None = None


@dataclass(frozen=True)
class BuildConfig:
    to: str | Path
    pages: Sequence[Page]
    copy_assets_from: str | Path | None = None


class RenderedPage(NamedTuple):
    file_path: Path
    markup: str


class Builder:
    def __init__(self, minified=False):
        self.minified = minified

    @staticmethod
    def destination(to: str | Path) -> Path:
        if to is None or str(to) == "":
            raise ConfigurationError("No destination directory given.")

        to = Path(to)
        if Path.cwd().is_relative_to(to.resolve()):
            raise ConfigurationError(f"Refusing to build into '{to}', it would delete the working directory.")

        return to

    @staticmethod
    def page_file_path(page: Page, to: Path) -> Path:
        # "/index.html" is taken relative to the destination, as if the destination were the site root.
        file_path = to / page.path.lstrip("/")

        resolved = file_path.resolve()
        if resolved == to.resolve() or not resolved.is_relative_to(to.resolve()):
            raise ConfigurationError(f"Page path '{page.path}' does not point to a file inside '{to}'.")

        return file_path

    @staticmethod
    def call_content(page: Page):
        try:
            return page.content()
        except Exception as exc:
            raise RenderError(page.path, f"rendering failed: {exc!r}") from exc

    @staticmethod
    async def await_content(page: Page, content: Awaitable[Renderable]) -> Renderable:
        try:
            return await content
        except Exception as exc:
            raise RenderError(page.path, f"rendering failed: {exc!r}") from exc

    def render_page(self, page: Page, content: Renderable, to: Path) -> RenderedPage:
        file_path = self.page_file_path(page, to)

        try:
            markup = render_to_static_markup(content)
            if self.minified:
                markup = minify_markup(file_path, markup)
        except Exception as exc:
            raise RenderError(page.path, f"rendering failed: {exc!r}") from exc

        return RenderedPage(file_path, markup)

    def write_page(self, page: Page, content: Renderable, to: Path) -> Path:
        file_path, markup = self.render_page(page, content, to)

        try:
            ensure_directories_and_write_file(file_path, markup)
        except OSError as exc:
            raise OutputError(page.path, f"writing '{file_path}' failed: {exc}") from exc

        logger.debug("Wrote %s", file_path)
        return file_path

    def build_page(self, page: Page, to: Path) -> Path | Awaitable[Renderable]:
        """
        Renders and writes a page in one go, meant to run in a worker thread.

        :return: Path of the written file, or the awaitable returned by the content function. Awaitables can't be
        resolved from a worker thread, `run_page` awaits them on the event loop and finishes the page afterwards.
        """
        content = self.call_content(page)
        if inspect.isawaitable(content):
            return content

        return self.write_page(page, content, to)

    async def run_page(self, page: Page, to: Path) -> Path:
        result = await asyncio.to_thread(self.build_page, page, to)
        if not inspect.isawaitable(result):
            return result

        content = await self.await_content(page, result)
        return await asyncio.to_thread(self.write_page, page, content, to)

    async def build(self, config: BuildConfig) -> None:
        to = self.destination(config.to)

        # Checked up front so a bad page path fails the build before anything is deleted.
        for page in config.pages:
            self.page_file_path(page, to)

        try:
            remove_tree(to)
        except OSError as exc:
            raise ConfigurationError(f"Could not remove destination '{to}': {exc}") from exc

        logger.info("Building %d page(s) into %s", len(config.pages), to)

        # No ordering between pages. The first failure is raised here while the remaining pages keep running to
        # completion, so a failed build can leave some of them written.
        await asyncio.gather(*(
            self.run_page(page, to)
            for page in config.pages
        ))

        if config.copy_assets_from:
            logger.info("Copying assets from %s", config.copy_assets_from)
            try:
                await asyncio.to_thread(copy_directory, config.copy_assets_from, to)
            except OSError as exc:
                raise BuildError(f"Copying assets from '{config.copy_assets_from}' failed: {exc}") from exc

        logger.info("Built %s", to)


async def build(config: BuildConfig | None = None, /, *, minified=False, **fields) -> None:
    """
    Render a set of page definitions into a static site.

        await build(to="out", pages=[Page("index.html", lambda: h("html", h("body", "Hello")))])

    :param config: The build to run. Alternatively pass the `BuildConfig` fields (`to`, `pages`, `copy_assets_from`)
    as keyword arguments.
    :param minified: Minify rendered pages based on the suffix of their path.
    :raises BuildError: if anything fails. Pages written before the failure are left on disk.
    """
    if config is None:
        config = BuildConfig(**fields)
    elif fields:
        raise TypeError("Pass either a BuildConfig or its fields as keyword arguments, not both.")

    await Builder(minified=minified).build(config)
