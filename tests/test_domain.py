"""Tests for domain normalisation and naked URL detection."""

from anchorlens.utils.domain import is_url_anchor, normalise_domain


def test_normalise_domain_strips_scheme_www_and_path():
    assert normalise_domain("https://www.example.com/page?x=1") == "example.com"
    assert normalise_domain("example.com") == "example.com"
    assert normalise_domain("//cdn.example.com/asset.js") == "example.com"
    assert normalise_domain("blog.example.com#top") == "example.com"


def test_normalise_domain_keeps_case():
    assert normalise_domain("HTTP://WWW.Example.COM/") == "Example.COM"


def test_normalise_domain_truncates_multi_label_suffixes():
    # Only the last two labels survive, public suffix or not.
    assert normalise_domain("https://www.example.co.uk/") == "co.uk"


def test_normalise_domain_keeps_ports():
    assert normalise_domain("https://acme.com:8080/") == "acme.com:8080"
    assert not is_url_anchor("acme.com", "acme.com:8080")
    assert is_url_anchor("acme.com:8080/contact", "acme.com:8080")


def test_normalise_domain_of_empty_string():
    assert normalise_domain("") == ""


def test_is_url_anchor_matches_domain_forms():
    assert is_url_anchor("acme.com/services", "acme.com")
    assert is_url_anchor("https://acme.com", "acme.com")
    assert is_url_anchor("www.acme.com", "acme.com")
    assert is_url_anchor("blog.acme.com", "acme.com")


def test_is_url_anchor_rejects_plain_text_and_empty_domain():
    assert not is_url_anchor("acme cranes", "acme.com")
    assert not is_url_anchor("acme.com", "")
