"""Fluent builder that assembles a URL from a base, a path and a query.

FormatUrl accumulates optional pieces and, on ``format_url()``, produces
``base + path + query``:

- the path template gets its ``:key`` placeholders replaced with
  percent-encoded substitute values;
- one leading slash of the path is dropped when the base already ends
  with a slash;
- query parameters are serialized in input order, percent-encoded unless
  the builder is switched to RAW_QUERY.

Builders are single-use. ``format_url()`` consumes the builder; calling any
``with_*`` method or ``format_url()`` afterwards raises BuilderConsumedError.

Example:
    >>> FormatUrl("https://api.example.com/"
    ...     ).with_path_template("/user/:name"
    ...     ).with_substitutes([("name", "alex")]
    ...     ).with_query_params([("active", "true")]
    ...     ).format_url()
    'https://api.example.com/user/alex?active=true'
"""

from __future__ import annotations

import logging
from typing import Any

from parameterizable import (
    ParameterizableClass
    , register_parameterizable_class
    , sort_dict_by_keys)

from .encoding_flags import EncodingModeFlag, ENCODE_QUERY, RAW_QUERY
from .exceptions import BuilderConsumedError
from .path_template import format_path, strip_double_slash
from .query_string import format_query_string
from .string_pairs import StrPairs, to_str_pairs

logger = logging.getLogger(__name__)


class FormatUrl(ParameterizableClass):
    """Single-use builder for URLs with templated paths and query strings.

    Attributes (read-only, set through the constructor or ``with_*``):
        base (str): URL prefix, emitted verbatim at the start of the output.
        path_template (str | None): Path with ``:key`` placeholders.
        substitutes (tuple[tuple[str, str], ...] | None): Ordered values
            for the placeholders. Ignored if there is no path template.
        query_params (tuple[tuple[str, str], ...] | None): Ordered query
            pairs. None and an empty sequence both produce no query section.
        encoding_mode (EncodingModeFlag): ENCODE_QUERY or RAW_QUERY.
    """

    def __init__(self,
                 base: str,
                 *,
                 path_template: str | None = None,
                 substitutes: StrPairs | None = None,
                 query_params: StrPairs | None = None,
                 encoding_mode: EncodingModeFlag = ENCODE_QUERY):
        """Initialize the builder.

        Only ``base`` is required. The keyword arguments mirror the ``with_*``
        methods so that ``FormatUrl(**builder.get_params())`` creates an
        equivalent, unconsumed builder.

        Raises:
            TypeError: If base or path_template is not a str, if substitutes
                or query_params are not ordered sequences of string pairs,
                or if encoding_mode is not an encoding mode flag.
        """
        if not isinstance(base, str):
            raise TypeError(f"base must be str, got {type(base)!r}")
        self._base = base
        self._path_template = None
        self._substitutes = None
        self._query_params = None
        self._encoding_mode = ENCODE_QUERY
        self._consumed = False

        if path_template is not None:
            self.with_path_template(path_template)
        if substitutes is not None:
            self.with_substitutes(substitutes)
        if query_params is not None:
            self.with_query_params(query_params)
        self.with_encoding_mode(encoding_mode)

        ParameterizableClass.__init__(self)


    def get_params(self) -> dict[str, Any]:
        """Return constructor parameters needed to recreate this builder.

        Returns:
            dict[str, Any]: A dictionary of parameters (sorted by key).
        """
        params = dict(
            base=self._base,
            path_template=self._path_template,
            substitutes=self._substitutes,
            query_params=self._query_params,
            encoding_mode=self._encoding_mode,
        )
        sorted_params = sort_dict_by_keys(params)
        return sorted_params


    def __copy__(self) -> FormatUrl:
        """Return a fresh, unconsumed builder with the same parameters."""
        return self.__class__(**self.get_params())


    def __repr__(self) -> str:
        params = self.get_params()
        params_str = ', '.join(f'{k}={v!r}' for k, v in params.items())
        return f'{self.__class__.__name__}({params_str})'


    @property
    def base(self) -> str:
        return self._base

    @property
    def path_template(self) -> str | None:
        return self._path_template

    @property
    def substitutes(self) -> tuple[tuple[str, str], ...] | None:
        return self._substitutes

    @property
    def query_params(self) -> tuple[tuple[str, str], ...] | None:
        return self._query_params

    @property
    def encoding_mode(self) -> EncodingModeFlag:
        return self._encoding_mode

    @property
    def is_consumed(self) -> bool:
        """True once format_url() has been called on this builder."""
        return self._consumed


    def _ensure_not_consumed(self, operation: str) -> None:
        if self._consumed:
            raise BuilderConsumedError(operation)


    def with_path_template(self, path_template: str) -> FormatUrl:
        """Set the path template, replacing any previous one.

        Args:
            path_template: Path appended after the base. May contain
                ``:key`` placeholders.

        Returns:
            FormatUrl: This builder, for chaining.
        """
        self._ensure_not_consumed("with_path_template")
        if not isinstance(path_template, str):
            raise TypeError(
                f"path_template must be str, got {type(path_template)!r}")
        self._path_template = path_template
        return self


    def with_substitutes(self, substitutes: StrPairs) -> FormatUrl:
        """Set the ordered placeholder substitutions.

        Each ``(key, value)`` replaces every ``:key`` in the path template
        with the percent-encoded value. Pairs are applied in order, each
        to the result of the previous one.

        Args:
            substitutes: Ordered sequence of (key, value) string pairs.

        Returns:
            FormatUrl: This builder, for chaining.
        """
        self._ensure_not_consumed("with_substitutes")
        self._substitutes = to_str_pairs(substitutes, "substitutes")
        return self


    def with_query_params(self, query_params: StrPairs) -> FormatUrl:
        """Set the ordered query parameters.

        Args:
            query_params: Ordered sequence of (key, value) string pairs.
                Duplicate keys are kept.

        Returns:
            FormatUrl: This builder, for chaining.
        """
        self._ensure_not_consumed("with_query_params")
        self._query_params = to_str_pairs(query_params, "query_params")
        return self


    def with_encoding_mode(self, encoding_mode: EncodingModeFlag) -> FormatUrl:
        """Choose how the query section is emitted.

        Args:
            encoding_mode: ENCODE_QUERY or RAW_QUERY.

        Returns:
            FormatUrl: This builder, for chaining.
        """
        self._ensure_not_consumed("with_encoding_mode")
        if encoding_mode is not ENCODE_QUERY and encoding_mode is not RAW_QUERY:
            raise TypeError(
                f"encoding_mode must be ENCODE_QUERY or RAW_QUERY, "
                f"got {encoding_mode!r}")
        self._encoding_mode = encoding_mode
        return self


    def without_query_encoding(self) -> FormatUrl:
        """Shorthand for ``with_encoding_mode(RAW_QUERY)``."""
        self._ensure_not_consumed("without_query_encoding")
        return self.with_encoding_mode(RAW_QUERY)


    def format_url(self) -> str:
        """Assemble the URL and consume the builder.

        Returns:
            str: ``base + path + query``.

        Raises:
            BuilderConsumedError: If the builder was already finalized.
        """
        self._ensure_not_consumed("format_url")
        self._consumed = True

        if self._path_template is not None and self._substitutes is not None:
            formatted_path = format_path(self._path_template, self._substitutes)
        elif self._path_template is not None:
            formatted_path = self._path_template
        else:
            if self._substitutes:
                logger.debug("Ignoring %d substitute(s) for %r: "
                             "no path template set",
                             len(self._substitutes), self._base)
            formatted_path = ""

        safe_formatted_path = strip_double_slash(self._base, formatted_path)
        formatted_query = format_query_string(
            self._query_params, self._encoding_mode)

        logger.debug("Formatted URL for base %r: path=%s, query=%s, mode=%s",
                     self._base, bool(safe_formatted_path),
                     bool(formatted_query),
                     type(self._encoding_mode).__name__)

        return self._base + safe_formatted_path + formatted_query


register_parameterizable_class(FormatUrl)
