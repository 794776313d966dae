"""Placeholder converters for route patterns.

Built-in converters for placeholders like ``{id:int}``.
"""

# regex pattern for each supported converter
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"\d+",
    "float": r"\d+(?:\.\d+)?",
    "path": r".+",
    "slug": r"[a-z0-9]+(?:-[a-z0-9]+)*",
}

# Default pattern for a host placeholder: one DNS label
HOST_PATTERN = r"[^.]+"


def variable_pattern(
    name: str,
    converter: str | None,
    requirements: dict[str, str],
    *,
    host: bool = False,
) -> str:
    """Pick the regex for a placeholder.

    An explicit requirement for *name* wins, then the converter, then the
    default for the part of the URL being compiled.
    Raises ``KeyError`` if *converter* is not registered.
    """
    if name in requirements:
        return requirements[name]
    if converter is not None:
        return CONVERTERS[converter]
    return HOST_PATTERN if host else CONVERTERS["str"]
