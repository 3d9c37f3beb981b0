"""Identifier helpers for the servers.com collection generator."""

import re

# Wire names that collide with Go keywords, remapped before camelizing
RESERVED_WORD_REMAPS: dict[str, str] = {
    "type": "t",
}

NAMESPACE_SEPARATOR = "::"

_LEADING_RUN = re.compile(r"^[a-z\d]*")
_WORD_BREAK = re.compile(r"(?:_|(/))([a-z\d]*)")
_PLACEHOLDER = re.compile(r"%[ds]")


def uncapitalize(string: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    return string[:1].lower() + string[1:]


def camelize(string: str, upper_first: bool = True) -> str:
    """
    Convert an underscore/slash delimited token into a Go identifier.

    ``upper_first`` selects PascalCase (type and method names) over
    lowerCamelCase (fields and variables). Slashes mark namespaces and are
    rendered as ``::`` instead of being flattened into the word.
    """
    if upper_first:
        string = _LEADING_RUN.sub(lambda m: m.group(0).capitalize(), string, count=1)
    else:
        string = uncapitalize(string)

    def _join(match: re.Match[str]) -> str:
        return (match.group(1) or "") + match.group(2).capitalize()

    return _WORD_BREAK.sub(_join, string).replace("/", NAMESPACE_SEPARATOR)


def pluralize(name: str, plural_name: str | None = None) -> str:
    """Naive plural: an explicit override, else ``name + "s"``."""
    if plural_name is None:
        return f"{name}s"
    return plural_name


def to_variable_name(wire_name: str) -> str:
    """Field/variable name for a query parameter, avoiding reserved words."""
    return camelize(RESERVED_WORD_REMAPS.get(wire_name, wire_name), False)


def to_snake_case(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def path_placeholders(path: str) -> list[str]:
    """Return the positional ``%d``/``%s`` markers of a path, in order."""
    return _PLACEHOLDER.findall(path)
