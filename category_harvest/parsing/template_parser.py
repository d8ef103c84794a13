"""Field extraction from package template files.

Templates are shell scripts, but only top-level ``KEY=VALUE`` assignments
are read here. No expansion or command substitution is performed:
variable references inside list fields are dropped, not resolved.
"""

import re
from typing import Final

from category_harvest.consts import DEPENDENCY_FIELDS

# Line-anchored assignment; indented assignments (inside functions) are ignored
ASSIGNMENT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<key>[A-Za-z0-9_]+)[ \t]*=", re.MULTILINE
)

_EDGE_QUOTES: Final[str] = "\"'`,;"
_VERSION_DELIMITERS: Final[re.Pattern[str]] = re.compile(r"[<>=(\[{)]")
_EDGE_JUNK: Final[re.Pattern[str]] = re.compile(r"^[^A-Za-z0-9+.\-]+|[^A-Za-z0-9+.\-]+$")


def extract_assignment(raw: str, key: str) -> str | None:
    """Return the value of the first top-level assignment to ``key``.

    Args:
        raw: Full template text.
        key: Variable name (e.g. "pkgname", "short_desc").

    Returns:
        The assigned value with quotes removed, or None if ``key`` is never
        assigned at the start of a line.
    """
    for match in ASSIGNMENT_PATTERN.finditer(raw):
        if match.group("key") == key:
            return read_value(raw, match.end())
    return None


def read_value(raw: str, offset: int) -> str:
    """Read an assignment value starting just after the ``=`` sign."""
    length = len(raw)
    while offset < length and raw[offset] in " \t":
        offset += 1

    if offset < length and raw[offset] in "\"'":
        return read_quoted_value(raw, offset + 1, raw[offset])

    end = offset
    while end < length and raw[end] not in "\r\n":
        end += 1
    return raw[offset:end].strip()


def read_quoted_value(raw: str, offset: int, quote: str) -> str:
    """Read a quoted value up to the first unescaped closing ``quote``.

    The value may span several lines. An escaped quote is kept verbatim,
    backslash included (``\\"`` stays ``\\"``). An unterminated value runs
    to the end of the text.
    """
    chars: list[str] = []
    length = len(raw)
    while offset < length:
        char = raw[offset]
        if char == quote and raw[offset - 1] != "\\":
            break
        chars.append(char)
        offset += 1
    return "".join(chars)


def sanitize_token(token: str) -> str | None:
    """Reduce a raw list token to a bare package name.

    Examples:
        "'gtk+3-devel>=3.24'" -> "gtk+3-devel"
        "${ncurses>=6.0}"     -> None (variable expansion)
        "python3-foo(2.0)"    -> "python3-foo"

    Returns:
        The cleaned name, or None if nothing usable remains.
    """
    if not token or token.startswith("$"):
        return None

    trimmed = token.strip(_EDGE_QUOTES)
    while trimmed.startswith("${"):
        trimmed = trimmed[2:]
    trimmed = trimmed.rstrip("}").strip("()")
    if not trimmed:
        return None

    name = _VERSION_DELIMITERS.split(trimmed, maxsplit=1)[0]
    name = _EDGE_JUNK.sub("", name).strip()
    return name or None


def parse_list(value: str) -> list[str]:
    """Split a whitespace-separated list value into sanitized names."""
    names = []
    for token in value.split():
        name = sanitize_token(token)
        if name is not None:
            names.append(name)
    return names


def collect_dependency_fields(raw: str) -> list[str]:
    """Collect every dependency-like field into one deduplicated list.

    Dependency kinds (run, build, host, check) and subpackage names are not
    distinguished. First occurrence order is preserved.
    """
    collected: list[str] = []
    for key in DEPENDENCY_FIELDS:
        value = extract_assignment(raw, key)
        if value is not None:
            collected.extend(parse_list(value))
    return list(dict.fromkeys(collected))
