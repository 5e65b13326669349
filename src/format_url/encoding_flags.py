"""Singleton flags selecting how query parameters are emitted.

Encoding mode flags:
    - ENCODE_QUERY: percent-encode every query key and value (default).
    - RAW_QUERY: emit query keys and values verbatim.

The mode applies to the query section only. Values substituted into a path
template are always percent-encoded.
"""
from typing import Final

from mixinforge import SingletonMixin


class EncodingModeFlag(SingletonMixin):
    """Base class for query encoding mode flags."""
    pass


class EncodeQueryFlag(EncodingModeFlag):
    """Flag instructing FormatUrl to percent-encode query pairs.

    Keys and values are encoded with ``percent_encode``; only ASCII letters
    and digits are left as is.

    Note:
        This is a singleton class; constructing it repeatedly returns the same
        instance.
    """
    pass


class RawQueryFlag(EncodingModeFlag):
    """Flag instructing FormatUrl to emit query pairs verbatim.

    Usage:
        Meant for servers that reject standard-encoded forms, e.g. ones
        that require ``+`` for spaces. The caller is responsible for the
        validity of the resulting query string: ``&`` and ``=`` are still
        used as separators and are not escaped inside keys or values.

    Note:
        This is a singleton class; constructing it repeatedly returns the same
        instance.
    """
    pass


ENCODE_QUERY: Final[EncodeQueryFlag] = EncodeQueryFlag()
"""Percent-encode query keys and values (default mode)."""

RAW_QUERY: Final[RawQueryFlag] = RawQueryFlag()
"""Emit query keys and values without any transformation.

Example:
    >>> FormatUrl("https://api.example.com/user"
    ...     ).with_query_params([("id", "alex+tes")]
    ...     ).with_encoding_mode(RAW_QUERY
    ...     ).format_url()
    'https://api.example.com/user?id=alex+tes'
"""
