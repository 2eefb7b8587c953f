"""Tests for the spam and brand heuristics."""

from anchorlens.classification.heuristics import brand_initialism, is_branded_keyword, is_miscellaneous
from anchorlens.classification.similarity import similarity_percent
from anchorlens.core.config import ThresholdConfig


def branded(anchor: str, company: str, raw=None) -> bool:
    return is_branded_keyword(anchor, company, similarity_percent, raw_anchor=raw)


def test_non_ascii_anchor_is_miscellaneous():
    assert is_miscellaneous("日本語")
    assert is_miscellaneous("cranes 日本語")


def test_ascii_control_characters_are_not_miscellaneous():
    assert not is_miscellaneous("crane\x07hire")


def test_symbol_heavy_anchor_is_miscellaneous():
    assert is_miscellaneous("$$$!!!")
    assert is_miscellaneous("ab!")
    assert not is_miscellaneous("abc!")
    assert not is_miscellaneous("a_b_c")
    assert not is_miscellaneous("acme.com/services")


def test_long_anchor_is_miscellaneous():
    assert is_miscellaneous("a" * 101)
    assert not is_miscellaneous("a" * 100)
    assert not is_miscellaneous("a" * 101, ThresholdConfig(max_anchor_length=200))


def test_plain_anchor_is_not_miscellaneous():
    assert not is_miscellaneous("Acme Cranes")


def test_brand_substring_and_fuzzy_match():
    assert branded("acme cranes", "acme")
    assert branded("jenmon crane", "jenmon cranes")
    assert not branded("acne", "acme")


def test_brand_word_majority():
    company = "bespoke photography studio"
    assert branded("studio for bespoke work", company)
    assert not branded("photography tips", company)


def test_brand_initialism_is_case_sensitive():
    company = "acme crane services"
    assert brand_initialism(company) == "ACS"
    assert branded("call acs today", company, raw="Call ACS today")
    assert not branded("call acs today", company, raw="call acs today")
    assert not branded("call acs today", company)


def test_short_words_do_not_form_initialisms():
    assert brand_initialism("my co") == ""
    assert not branded("mc hammer", "my co")
