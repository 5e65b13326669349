"""Query string serialization for ordered key/value pairs."""
from __future__ import annotations

from .encoding_flags import EncodingModeFlag, ENCODE_QUERY, RAW_QUERY
from .safe_chars import percent_encode
from .string_pairs import StrPairs


def format_query_string(
        query_params: StrPairs | None,
        encoding_mode: EncodingModeFlag = ENCODE_QUERY,
        ) -> str:
    """Serialize pairs into a query string including the leading ``?``.

    Pairs are emitted in input order, duplicates included, joined by ``&``.
    With ENCODE_QUERY both keys and values are percent-encoded. With
    RAW_QUERY they are emitted verbatim; a literal ``&`` or ``=`` inside
    a raw key or value is not escaped and will change the meaning of the
    query string.

    Args:
        query_params: Ordered (key, value) pairs, or None.
        encoding_mode: ENCODE_QUERY (default) or RAW_QUERY.

    Returns:
        str: ``"?" + body``, or an empty string if query_params is None
        or empty.

    Raises:
        TypeError: If encoding_mode is not one of the encoding mode flags.
    """
    if encoding_mode is ENCODE_QUERY:
        format_pair = _encoded_pair
    elif encoding_mode is RAW_QUERY:
        format_pair = _raw_pair
    else:
        raise TypeError(
            f"encoding_mode must be ENCODE_QUERY or RAW_QUERY, "
            f"got {encoding_mode!r}")

    if not query_params:
        return ""

    return "?" + "&".join(format_pair(k, v) for k, v in query_params)


def _encoded_pair(key: str, value: str) -> str:
    return percent_encode(key) + "=" + percent_encode(value)


def _raw_pair(key: str, value: str) -> str:
    return key + "=" + value
