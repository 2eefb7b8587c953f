"""Tests for the priority-ordered anchor rule engine."""

from anchorlens.classification.rules import (
    BRANDED,
    EMPTY,
    EXACT_MATCH,
    GENERIC,
    MISCELLANEOUS,
    NAKED_URL,
    PARTIAL_MATCH,
    AnchorRuleEngine,
)
from anchorlens.classification.similarity import similarity_percent
from anchorlens.core.config import ThresholdConfig


def acme_engine() -> AnchorRuleEngine:
    return AnchorRuleEngine(company_name="Acme", website_url="https://www.acme.com/", keywords=["cranes", "rigging"])


def jenmon_engine(**kwargs) -> AnchorRuleEngine:
    kwargs.setdefault("keywords", ["crane rigging", "crane hire"])
    return AnchorRuleEngine(company_name="Jenmon", website_url="jenmon.sg", **kwargs)


def test_blank_anchor_is_empty():
    engine = acme_engine()
    assert engine.classify("") == EMPTY
    assert engine.classify("   ") == EMPTY
    assert engine.classify(None) == EMPTY


def test_branded_naked_url_and_miscellaneous():
    engine = acme_engine()
    assert engine.classify("Acme Cranes") == BRANDED
    assert engine.classify("acme.com/services") == NAKED_URL
    assert engine.classify("日本語 acme") == MISCELLANEOUS


def test_url_rule_runs_before_brand_rule():
    assert acme_engine().classify("www.acme.com") == NAKED_URL


def test_keyword_categories():
    engine = jenmon_engine()
    assert engine.classify("crane riggings") == EXACT_MATCH
    assert engine.classify("crane rig") == PARTIAL_MATCH
    assert engine.classify("best crane rigging") == PARTIAL_MATCH
    assert engine.classify("click here") == GENERIC


def test_no_keywords_means_generic():
    assert jenmon_engine(keywords=[]).classify("crane rigging") == GENERIC


def test_keyword_scan_stops_at_first_passing_keyword():
    calls = []

    def recording_similarity(anchor: str, other: str) -> int:
        calls.append(other)
        return similarity_percent(anchor, other)

    engine = jenmon_engine(keywords=["crane hire", "crane rigging"], similarity=recording_similarity)
    assert engine.classify("crane rig") == PARTIAL_MATCH
    # brand check, exact scan over both keywords, partial scan stops at the first
    assert calls == ["jenmon", "crane hire", "crane rigging", "crane hire"]


def test_thresholds_are_configurable():
    loose = jenmon_engine(keywords=["crane rigging"], thresholds=ThresholdConfig(exact_match=65))
    assert loose.classify("crane rig") == EXACT_MATCH

    strict = jenmon_engine(keywords=["crane rigging"], thresholds=ThresholdConfig(partial_match=70))
    assert strict.classify("crane rig") == GENERIC


def test_engine_normalises_inputs():
    engine = AnchorRuleEngine(company_name="  Acme   Cranes ", website_url="HTTPS://WWW.ACME.COM", keywords=[" Rigging ", ""])
    assert engine.company == "acme cranes"
    assert engine.site_domain == "acme.com"
    assert engine.keywords == ["rigging"]
