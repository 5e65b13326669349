"""Properties that must hold for any combination of builder inputs."""
import re

import pytest

from format_url import FormatUrl, ENCODE_QUERY, RAW_QUERY

BASES = [
    "https://api.example.com",
    "https://api.example.com/",
    "http://localhost:8080/v1/",
    "",
]

PATHS = [None, "", "/", "/user", "user/:id", "/user/:id/:tab", "//double"]

SUBSTITUTES = [None, [], [("id", "a b/c")], [("tab", "x"), ("id", "é")]]

QUERIES = [None, [], [("q", "a&b=c")], [("k", "1"), ("k", "2+3")]]


def _build(base, path, substitutes, query, mode):
    builder = FormatUrl(base).with_encoding_mode(mode)
    if path is not None:
        builder.with_path_template(path)
    if substitutes is not None:
        builder.with_substitutes(substitutes)
    if query is not None:
        builder.with_query_params(query)
    return builder.format_url()


@pytest.mark.parametrize("base", BASES)
@pytest.mark.parametrize("path", PATHS)
@pytest.mark.parametrize("substitutes", SUBSTITUTES)
@pytest.mark.parametrize("query", QUERIES)
def test_output_starts_with_base(base, path, substitutes, query):
    for mode in (ENCODE_QUERY, RAW_QUERY):
        assert _build(base, path, substitutes, query, mode).startswith(base)


@pytest.mark.parametrize("path", ["/", "/user", "/user/:id/:tab"])
def test_no_double_slash_at_seam(path):
    base = "https://api.example.com/"
    url = _build(base, path, None, None, ENCODE_QUERY)
    assert url[len(base) - 1:len(base) + 1] != "//"
    assert url == base + path[1:]


@pytest.mark.parametrize("path", [p for p in PATHS if p is not None])
def test_unmatched_substitutes_keep_template(path):
    base = "https://api.example.com"
    url = _build(base, path, [("nomatch", "v")], None, ENCODE_QUERY)
    assert url == base + path


@pytest.mark.parametrize("query", [q for q in QUERIES if q])
def test_encoded_query_body_alphabet(query):
    url = _build("https://api.example.com/", "/user/:id",
                 [("id", "a?b")], query, ENCODE_QUERY)
    assert url.count("?") == 1
    body = url.split("?", 1)[1]
    assert re.fullmatch(r"[A-Za-z0-9%=&]+", body)


@pytest.mark.parametrize("query", [None, []])
@pytest.mark.parametrize("mode", [ENCODE_QUERY, RAW_QUERY])
def test_absent_query_means_no_question_mark(query, mode):
    url = _build("https://api.example.com/", "/user/:id",
                 [("id", "what?")], query, mode)
    assert "?" not in url
