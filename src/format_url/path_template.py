"""Path template interpolation and base/path joining.

A path template is a plain string that may contain placeholders written as
``:name``. Placeholders are not parsed: a substitution ``(key, value)``
replaces every literal occurrence of ``":" + key`` with the percent-encoded
value. Consequently a key ``id`` also matches the start of ``:identity``;
callers must choose key names that are not prefixes of other placeholders.
Placeholders with no matching key are left in the output verbatim.
"""
from __future__ import annotations
import re

from .safe_chars import percent_encode
from .string_pairs import StrPairs

_PLACEHOLDER_PATTERN = re.compile(r":([A-Za-z0-9_]+)")


def strip_double_slash(base: str, path: str) -> str:
    """Drop one leading slash from path if base already ends with one.

    Args:
        base: The URL prefix the path will be appended to.
        path: The (already interpolated) path.

    Returns:
        str: path without its first character if both base ends with ``/``
        and path starts with ``/``; otherwise path unchanged.
    """
    if base.endswith("/") and path.startswith("/"):
        return path[1:]
    return path


def format_path(path_template: str, substitutes: StrPairs) -> str:
    """Replace ``:key`` placeholders with percent-encoded values.

    Substitutions are applied one after another in the given order, each on
    the result of the previous one.

    Args:
        path_template: Template possibly containing ``:key`` placeholders.
        substitutes: Ordered (key, value) pairs.

    Returns:
        str: The interpolated path.
    """
    path = path_template
    for key, value in substitutes:
        path = path.replace(":" + key, percent_encode(value))
    return path


def find_placeholders(path_template: str) -> list[str]:
    """List placeholder names in order of first appearance.

    A placeholder is ``:`` followed by one or more ASCII letters, digits
    or underscores. Duplicates are reported once.

    Args:
        path_template: The template to scan.

    Returns:
        list[str]: Placeholder names without the leading colon.
    """
    names = []
    for match in _PLACEHOLDER_PATTERN.finditer(path_template):
        if match.group(1) not in names:
            names.append(match.group(1))
    return names
