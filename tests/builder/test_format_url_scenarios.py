"""End-to-end scenarios for the FormatUrl builder."""
from format_url import FormatUrl, RAW_QUERY


def test_no_formatting():
    assert (FormatUrl("https://api.example.com").format_url()
            == "https://api.example.com")


def test_path():
    assert (FormatUrl("https://api.example.com")
            .with_path_template("/user")
            .format_url()
            == "https://api.example.com/user")


def test_strip_double_slash():
    assert (FormatUrl("https://api.example.com/")
            .with_path_template("/user")
            .format_url()
            == "https://api.example.com/user")


def test_path_substitutes():
    assert (FormatUrl("https://api.example.com/")
            .with_path_template("/user/:id")
            .with_substitutes([("id", "alextes")])
            .format_url()
            == "https://api.example.com/user/alextes")


def test_percent_encode_substitutes():
    assert (FormatUrl("https://api.example.com/")
            .with_path_template("/user/:id")
            .with_substitutes([("id", "alex tes")])
            .format_url()
            == "https://api.example.com/user/alex%20tes")


def test_querystring():
    assert (FormatUrl("https://api.example.com/user")
            .with_query_params([("id", "alextes")])
            .format_url()
            == "https://api.example.com/user?id=alextes")


def test_percent_encode_query_params():
    assert (FormatUrl("https://api.example.com/user")
            .with_query_params([("id", "alex+tes")])
            .format_url()
            == "https://api.example.com/user?id=alex%2Btes")


def test_raw_query_params():
    assert (FormatUrl("https://api.example.com/user")
            .with_query_params([("id", "alex+tes")])
            .with_encoding_mode(RAW_QUERY)
            .format_url()
            == "https://api.example.com/user?id=alex+tes")
    assert (FormatUrl("https://api.example.com/user")
            .with_query_params([("id", "alex+tes")])
            .without_query_encoding()
            .format_url()
            == "https://api.example.com/user?id=alex+tes")


def test_full_pipeline():
    assert (FormatUrl("https://api.example.com/")
            .with_path_template("/user/:name")
            .with_substitutes([("name", "alex")])
            .with_query_params([("active", "true")])
            .format_url()
            == "https://api.example.com/user/alex?active=true")


def test_raw_mode_does_not_affect_path():
    assert (FormatUrl("https://api.example.com")
            .with_path_template("/user/:name")
            .with_substitutes([("name", "a b")])
            .with_query_params([("q", "a b")])
            .without_query_encoding()
            .format_url()
            == "https://api.example.com/user/a%20b?q=a b")


def test_substitutes_without_path_template_are_ignored():
    assert (FormatUrl("https://api.example.com/")
            .with_substitutes([("id", "1")])
            .format_url()
            == "https://api.example.com/")


def test_empty_query_params_emit_no_question_mark():
    assert (FormatUrl("https://api.example.com")
            .with_path_template("/user")
            .with_query_params([])
            .format_url()
            == "https://api.example.com/user")


def test_constructor_keywords_match_fluent_methods():
    fluent = (FormatUrl("https://api.example.com/")
              .with_path_template("/user/:name")
              .with_substitutes([("name", "alex")])
              .with_query_params([("active", "true")])
              .without_query_encoding()
              .format_url())
    keyword = FormatUrl("https://api.example.com/",
                        path_template="/user/:name",
                        substitutes=[("name", "alex")],
                        query_params=[("active", "true")],
                        encoding_mode=RAW_QUERY).format_url()
    assert fluent == keyword


def test_setters_replace_previous_values():
    url = (FormatUrl("https://api.example.com")
           .with_path_template("/old")
           .with_path_template("/new")
           .with_query_params([("a", "1")])
           .with_query_params([("b", "2")])
           .format_url())
    assert url == "https://api.example.com/new?b=2"
