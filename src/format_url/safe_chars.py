"""Safe character handling and percent-encoding for URL components.

This module defines the set of characters that may appear unescaped in
substituted path segments and encoded query strings, and the encoder that
escapes everything else.

The set is deliberately narrower than RFC 3986 "unreserved": only ASCII
letters and digits pass through. Every other byte, including ``-._~``,
is escaped, so no reserved character (``/ ? & = + #``) can leak from
caller data into the URL structure.
"""
import string

# ASCII letters (a-z, A-Z) and digits (0-9). Not configurable by callers.
SAFE_CHARS_SET = frozenset(string.ascii_letters + string.digits)

_SAFE_BYTES = frozenset(c.encode("ascii")[0] for c in SAFE_CHARS_SET)

def get_safe_chars() -> set[str]:
    """Get the set of characters that are never percent-encoded.

    Returns:
        set[str]: A copy of the set of characters considered safe inside
            URL components. Includes ASCII letters and digits only.
    """
    return set(SAFE_CHARS_SET)

def percent_encode(a_str: str) -> str:
    """Percent-encode every byte outside the safe character set.

    The string is encoded to UTF-8 and each byte that is not an ASCII letter
    or digit is replaced with ``%HH`` (uppercase hexadecimal). Multibyte
    characters are therefore escaped byte by byte.

    Encoding is not idempotent: an already encoded string gets its ``%``
    signs escaped again (``"%20"`` becomes ``"%2520"``).

    Args:
        a_str (str): Input string.

    Returns:
        str: The encoded string, containing only ASCII letters, digits
        and ``%HH`` escapes.

    Raises:
        TypeError: If a_str is not a str.
    """
    if not isinstance(a_str, str):
        raise TypeError(f"a_str must be str, got {type(a_str)!r}")
    if not contains_unsafe_chars(a_str):
        return a_str
    result_list = [(chr(b) if b in _SAFE_BYTES else f"%{b:02X}")
                   for b in a_str.encode("utf-8")]
    return "".join(result_list)

def contains_unsafe_chars(a_str: str) -> bool:
    """Check if a string contains characters that need percent-encoding.

    Args:
        a_str (str): Input string to check.

    Returns:
        bool: True if the string contains any character not in the safe
            character set, False otherwise.
    """
    return any(c not in SAFE_CHARS_SET for c in a_str)
