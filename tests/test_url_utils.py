# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for URL helpers."""

import pytest

from ultra_utils.url_utils import (
    ParsedUrl,
    add_query_params,
    build_query_string,
    build_url,
    decode_url,
    encode_url,
    extract_urls,
    get_domain,
    get_query_params,
    get_root_domain,
    get_subdomain,
    is_valid_url,
    join_paths,
    normalize_url,
    parse_url,
    remove_query_params,
)


class TestParseUrl:
    """Tests for parse_url and build_url."""

    def test_components(self):
        assert parse_url("https://example.com:8080/a?b=1#c") == ParsedUrl(
            protocol="https:",
            hostname="example.com",
            port="8080",
            pathname="/a",
            search="?b=1",
            hash="#c",
            origin="https://example.com:8080",
            host="example.com:8080",
        )

    def test_default_port_is_empty(self):
        parsed = parse_url("https://example.com:443")
        assert parsed.port == ""
        assert parsed.pathname == "/"
        assert parsed.origin == "https://example.com"

    @pytest.mark.parametrize("url", ["not-a-url", "", "http://", "https://host:99999"])
    def test_invalid_returns_none(self, url):
        assert parse_url(url) is None

    def test_build_url(self):
        assert build_url("example.com", pathname="/api", search="q=1") == (
            "https://example.com/api?q=1"
        )
        assert build_url("localhost", "http", 8080, "/", "?a=1", "top") == (
            "http://localhost:8080/?a=1#top"
        )


class TestQueryString:
    """Tests for query-string helpers."""

    def test_get_query_params(self):
        assert get_query_params("https://x.com/?a=1&b=hello%20world&c#frag") == {
            "a": "1",
            "b": "hello world",
            "c": "",
        }

    def test_get_query_params_without_query(self):
        assert get_query_params("https://x.com/") == {}

    def test_build_query_string(self):
        assert build_query_string({"q": "a b", "skip": None}) == "q=a%20b"
        assert build_query_string({"flag": True, "n": 3}) == "flag=true&n=3"

    def test_add_query_params(self):
        assert add_query_params("https://x.com/p#frag", {"a": 1}) == "https://x.com/p?a=1#frag"
        assert add_query_params("https://x.com/p?z=0", {"a": 1}) == "https://x.com/p?z=0&a=1"
        assert add_query_params("https://x.com/p", {}) == "https://x.com/p"

    def test_remove_query_params(self):
        url = "https://x.com/p?a=1&b=2#top"
        assert remove_query_params(url, ["a"]) == "https://x.com/p?b=2#top"
        assert remove_query_params(url, ["a", "b"]) == "https://x.com/p#top"
        assert remove_query_params(url) == "https://x.com/p#top"


class TestInspection:
    """Tests for validity and domain helpers."""

    def test_is_valid_url(self):
        assert is_valid_url("https://example.com")
        assert is_valid_url("ftp://files.example.com/pub")
        assert is_valid_url("mailto:someone@example.com")
        assert not is_valid_url("not a url")
        assert not is_valid_url("http://")

    def test_domains(self):
        url = "https://api.v2.example.com/path"
        assert get_domain(url) == "api.v2.example.com"
        assert get_subdomain(url) == "api.v2"
        assert get_root_domain(url) == "example.com"

    def test_domains_without_subdomain(self):
        assert get_subdomain("https://example.com") is None
        assert get_root_domain("http://localhost") == "localhost"
        assert get_domain("garbage") is None


class TestNormalization:
    """Tests for normalize_url and join_paths."""

    def test_normalize_url(self):
        assert normalize_url("HTTPS://Example.com/Path/?b=2&a=1") == (
            "https://example.com/path?a=1&b=2"
        )

    def test_normalize_keeps_root_slash(self):
        assert normalize_url("http://example.com:80/") == "http://example.com/"

    def test_normalize_invalid_unchanged(self):
        assert normalize_url("Not A URL") == "Not A URL"

    def test_join_paths(self):
        assert join_paths("https://api.example.com/", "/v1/", "users") == (
            "https://api.example.com/v1/users"
        )
        assert join_paths("a", "", "b/") == "a/b"


class TestEncoding:
    """Tests for encode_url, decode_url and extract_urls."""

    def test_encode_decode(self):
        assert encode_url("a b&c/d") == "a%20b%26c%2Fd"
        assert decode_url("a%20b%26c") == "a b&c"

    def test_decode_invalid_utf8_unchanged(self):
        assert decode_url("%E0%A4") == "%E0%A4"

    def test_extract_urls(self):
        text = "see https://example.com/a?x=1 and http://foo.org for more"
        assert extract_urls(text) == ["https://example.com/a?x=1", "http://foo.org"]
        assert extract_urls("nothing here") == []
