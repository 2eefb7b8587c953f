"""Anchor predicates for spam and brand detection."""

from __future__ import annotations

import math
import re
from typing import Callable, List, Optional

from anchorlens.core.config import ThresholdConfig

NON_ASCII_PATTERN = re.compile(r"[^\x00-\x7F]")
SPECIAL_CHAR_PATTERN = re.compile(r"[^\w\s]", flags=re.ASCII)

DEFAULT_THRESHOLDS = ThresholdConfig()


def special_char_ratio(anchor: str) -> float:
    """Share of ``anchor`` made of characters that are neither word nor space."""

    if not anchor:
        return 0.0
    return len(SPECIAL_CHAR_PATTERN.findall(anchor)) / len(anchor)


def is_miscellaneous(anchor: str, thresholds: ThresholdConfig = DEFAULT_THRESHOLDS) -> bool:
    """Flag non-ASCII, symbol-heavy or overly long anchors as spam."""

    if NON_ASCII_PATTERN.search(anchor):
        return True
    if special_char_ratio(anchor) > thresholds.special_char_ratio:
        return True
    return len(anchor) > thresholds.max_anchor_length


def brand_words(company_lower: str) -> List[str]:
    """Words of the company name long enough to identify it on their own."""

    return [word for word in company_lower.split() if len(word) > 2]


def brand_initialism(company_lower: str) -> str:
    """Upper-cased initials of the qualifying brand words (``acme crane co`` -> ``AC``)."""

    return "".join(word[0] for word in brand_words(company_lower)).upper()


def is_branded_keyword(
    anchor_lower: str,
    company_lower: str,
    similarity: Callable[[str, str], int],
    thresholds: ThresholdConfig = DEFAULT_THRESHOLDS,
    *,
    raw_anchor: Optional[str] = None,
) -> bool:
    """Return ``True`` when the anchor names the company.

    Matches, in order: the full name as a substring, a close fuzzy match to
    the full name, most of a multi-word name's words, or the name's
    initialism. The initialism is upper case and is looked up in
    ``raw_anchor`` (falling back to ``anchor_lower``), so ``ACS`` matches but
    ``acs`` does not.
    """

    if not company_lower:
        return False
    if company_lower in anchor_lower:
        return True
    if similarity(anchor_lower, company_lower) >= thresholds.branded_similarity:
        return True

    words = brand_words(company_lower)
    if len(words) > 1:
        required = math.ceil(thresholds.brand_word_ratio * len(words))
        found = sum(1 for word in words if word in anchor_lower)
        if found >= required:
            return True

    initialism = brand_initialism(company_lower)
    if len(initialism) >= 2:
        haystack = raw_anchor if raw_anchor is not None else anchor_lower
        if initialism in haystack:
            return True

    return False
