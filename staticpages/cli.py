import asyncio
import logging
import runpy
import sys
import argparse
from pathlib import Path

from staticpages.builder import BuildConfig, Builder
from staticpages.constants import DEFAULT_CONFIG_ATTRIBUTE
from staticpages.exceptions import BuildError, ConfigurationError

logger = logging.getLogger(__name__)


def load_config(target: str) -> BuildConfig:
    """
    Runs a build script and returns the build configuration it defines.

    :param target: "path/to/script.py" or "path/to/script.py:attribute". The attribute defaults to `config` and must be
    a `BuildConfig` or a function returning one.
    """
    script, _, attribute = target.partition(":")
    attribute = attribute or DEFAULT_CONFIG_ATTRIBUTE

    if not Path(script).is_file():
        raise ConfigurationError(f"Build script '{script}' does not exist.")

    try:
        namespace = runpy.run_path(script, run_name="__staticpages__")
    except Exception as exc:
        raise ConfigurationError(f"Build script '{script}' failed to run: {exc!r}") from exc

    if attribute not in namespace:
        raise ConfigurationError(f"Build script '{script}' does not define '{attribute}'.")

    config = namespace[attribute]
    if callable(config) and not isinstance(config, BuildConfig):
        try:
            config = config()
        except Exception as exc:
            raise ConfigurationError(f"'{target}' failed: {exc!r}") from exc

    if not isinstance(config, BuildConfig):
        raise ConfigurationError(f"'{target}' is a {type(config).__name__!r}, expected a BuildConfig.")

    return config


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog="staticpages",
        description="Render page definitions into a static site.",
    )

    subparser = parser.add_subparsers(
        title="command",
        dest="command",
        required=True,
    )

    build_parser = subparser.add_parser(
        name="build",
        help="Build the site described by a build script."
    )
    build_parser.add_argument(
        "target", help=f"Build script, optionally followed by ':attribute' (Default attribute: {DEFAULT_CONFIG_ATTRIBUTE})"
    )
    build_parser.add_argument(
        "-m", "--minify", action="store_true", help="Enable minification."
    )
    build_parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every page written."
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    match args.command:
        case "build":
            try:
                config = load_config(args.target)
                asyncio.run(Builder(minified=args.minify).build(config))
            except BuildError as exc:
                logger.error("Build failed: %s", exc)
                return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
