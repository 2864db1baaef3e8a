"""String normalisation utilities used throughout the project."""

from __future__ import annotations

import re

__all__ = [
    "format_target_dir",
    "get_kebab_case",
    "is_hook_name",
    "is_valid_package_name",
    "to_valid_component_name",
    "to_valid_package_name",
]


HOOK_PREFIX = "use"

_VALID_PACKAGE_NAME = re.compile(r"^(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*$")
_UPPERCASE = re.compile(r"[A-Z]")
_WHITESPACE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE = re.compile(r"^[._]")
_DISALLOWED = re.compile(r"[^a-z0-9\-~]+")
_WORD_SEPARATOR = re.compile(r"[\s_.~\-]+(\w)")
_EDGE_SEPARATORS = re.compile(r"^[\s_.~\-]+|[\s_.~\-]+$")
_TRAILING_SLASHES = re.compile(r"/+$")


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` when ``name`` is usable as a ``package.json`` name."""

    return bool(_VALID_PACKAGE_NAME.fullmatch(name))


def get_kebab_case(value: str) -> str:
    """Split ``value`` on its uppercase letters, e.g. ``MyCoolThing`` -> ``my-cool-thing``."""

    text = value.strip("-")

    def replace(match: re.Match[str]) -> str:
        letter = match.group(0).lower()
        index = match.start()
        if index == 0 or text[index - 1] == "-" or text[index - 1].isspace():
            return letter
        return f"-{letter}"

    return _UPPERCASE.sub(replace, text)


def to_valid_package_name(name: str) -> str:
    """Normalise a free text project name into a ``package.json`` name.

    The result only contains lowercase ASCII letters, digits, ``-`` and ``~``
    and never starts or ends with ``-``, so applying the function twice gives
    the same value as applying it once.
    """

    candidate = get_kebab_case(name.strip()).lower()
    candidate = _WHITESPACE.sub("-", candidate)
    candidate = _LEADING_DOT_OR_UNDERSCORE.sub("", candidate)
    candidate = _DISALLOWED.sub("-", candidate)
    return candidate.strip("-")


def to_valid_component_name(name: str) -> str:
    """Return the React identifier generated from ``name``.

    Separated words are folded into camelCase. Names starting with ``use`` are
    hooks and stay camelCase, everything else becomes PascalCase.
    """

    folded = _WORD_SEPARATOR.sub(lambda match: match.group(1).upper(), _EDGE_SEPARATORS.sub("", name))
    if not folded or is_hook_name(folded):
        return folded
    return folded[0].upper() + folded[1:]


def is_hook_name(identifier: str) -> bool:
    return identifier.startswith(HOOK_PREFIX)


def format_target_dir(value: str | None) -> str:
    """Trim whitespace and trailing slashes from a user supplied directory."""

    if not value:
        return ""
    return _TRAILING_SLASHES.sub("", value.strip())
