"""Compose URLs from a base, a path template and query parameters.

This package turns caller data into URL strings without hand-written
percent-encoding. Values interpolated into the path and the query string
are escaped so that only ASCII letters and digits pass through unchanged.

Classes:
    FormatUrl: Single-use fluent builder. Accumulates a base, an optional
        path template with ``:key`` placeholders, ordered substitutions,
        ordered query parameters and an encoding mode, then assembles
        the URL in ``format_url()``.
    EncodeQueryFlag, RawQueryFlag: Singleton encoding mode flags.
    BuilderConsumedError: Raised when a finalized builder is reused.

Functions:
    percent_encode(): Escapes every byte outside ``[A-Za-z0-9]``.
    get_safe_chars(): Returns the set of characters never escaped.
    contains_unsafe_chars(): Checks whether a string needs escaping.
    format_path(): Replaces ``:key`` placeholders with encoded values.
    strip_double_slash(): Avoids ``//`` where base and path meet.
    find_placeholders(): Lists placeholder names found in a template.
    format_query_string(): Serializes ordered pairs into ``?k=v&...``.

Constants:
    ENCODE_QUERY, RAW_QUERY: Encoding modes for the query section.
"""
from .safe_chars import *
from .encoding_flags import EncodingModeFlag, EncodeQueryFlag, RawQueryFlag
from .encoding_flags import ENCODE_QUERY, RAW_QUERY
from .exceptions import BuilderConsumedError
from .path_template import format_path, strip_double_slash, find_placeholders
from .query_string import format_query_string
from .string_pairs import StrPairs
from .url_builder import FormatUrl
from ._version_info import __version__
