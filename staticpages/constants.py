__all__ = [
    "DEFAULT_CONFIG_ATTRIBUTE", "MINIFIABLE_SUFFIXES", "VOID_ELEMENTS", "DOCTYPE",
]

# Name looked up in a build script when the CLI target doesn't specify one.
DEFAULT_CONFIG_ATTRIBUTE = "config"

MINIFIABLE_SUFFIXES = (".html", ".htm", ".css", ".js", ".svg", ".xml", ".json")

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "source", "track", "wbr",
})

DOCTYPE = "<!DOCTYPE html>"
