"""Validation of ordered (key, value) string pairs.

Substitutions and query parameters are both supplied as ordered sequences
of 2-item pairs of strings. Order matters and duplicates are allowed, so
mappings are rejected rather than silently iterated.
"""
from __future__ import annotations
from collections.abc import Sequence, Mapping
from typing import Any

StrPairs = Sequence[tuple[str, str]]
"""An ordered sequence of (key, value) string pairs."""


def _is_sequence_not_mapping(obj: Any) -> bool:
    """Return True if the object looks like a sequence but not a mapping.

    Strings are sequences too, but never a valid container of pairs,
    so they are rejected here as well.

    Args:
        obj: Object to inspect.

    Returns:
        bool: True if obj is a sequence (e.g., list, tuple) and not a mapping
        (e.g., dict) or a string; otherwise False.
    """
    if isinstance(obj, (str, bytes)):
        return False
    elif isinstance(obj, Sequence) and not isinstance(obj, Mapping):
        return True
    elif hasattr(obj, "keys") and callable(obj.keys):
        return False
    elif (
        hasattr(obj, "__getitem__")
        and callable(obj.__getitem__)
        and hasattr(obj, "__len__")
        and callable(obj.__len__)
        and hasattr(obj, "__iter__")
        and callable(obj.__iter__)
    ):
        return True
    else:
        return False


def to_str_pairs(pairs: Any, argument_name: str) -> tuple[tuple[str, str], ...]:
    """Validate pairs and return them as an immutable tuple of tuples.

    Args:
        pairs: An ordered sequence of 2-item (key, value) sequences.
        argument_name: Name used in error messages.

    Returns:
        tuple[tuple[str, str], ...]: The same pairs, in the same order.

    Raises:
        TypeError: If pairs is a mapping or not a sequence, if an element is
            not a 2-item pair, or if a key or value is not a str.
    """
    if not _is_sequence_not_mapping(pairs):
        raise TypeError(
            f"{argument_name} must be an ordered sequence of (key, value) "
            f"pairs, got {type(pairs)!r}")
    result = []
    for position, pair in enumerate(pairs):
        if not _is_sequence_not_mapping(pair) or len(pair) != 2:
            raise TypeError(
                f"{argument_name}[{position}] must be a (key, value) pair, "
                f"got {pair!r}")
        key, value = pair
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f"{argument_name}[{position}] must contain two strings, "
                f"got ({type(key).__name__}, {type(value).__name__})")
        result.append((key, value))
    return tuple(result)
