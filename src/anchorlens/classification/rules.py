"""Priority-ordered rule engine that assigns each anchor one category."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from anchorlens.classification.heuristics import is_branded_keyword, is_miscellaneous
from anchorlens.classification.similarity import SimilarityEngine
from anchorlens.core.config import ThresholdConfig
from anchorlens.utils.domain import is_url_anchor, normalise_domain
from anchorlens.utils.text import normalise_whitespace

EMPTY = "empty"
MISCELLANEOUS = "miscellaneous"
NAKED_URL = "naked_url"
BRANDED = "branded"
EXACT_MATCH = "exact_match"
PARTIAL_MATCH = "partial_match"
GENERIC = "generic"

# Rule evaluation order; GENERIC is the fallback.
CATEGORIES: Tuple[str, ...] = (
    EMPTY,
    MISCELLANEOUS,
    NAKED_URL,
    BRANDED,
    EXACT_MATCH,
    PARTIAL_MATCH,
    GENERIC,
)


@dataclass(slots=True)
class Anchor:
    """An anchor text in the two forms the rules inspect."""

    raw: str
    lowered: str

    @classmethod
    def from_field(cls, value: Optional[str]) -> "Anchor":
        raw = (value or "").strip()
        return cls(raw=raw, lowered=raw.lower())


Rule = Tuple[str, Callable[[Anchor], bool]]


class AnchorRuleEngine:
    """Classifies anchors against one brand, site and keyword list.

    Rules run in the order of :data:`CATEGORIES` and the first one that
    matches decides the category. Keyword rules stop at the first keyword
    that clears the threshold, not the best-scoring one.
    """

    def __init__(
        self,
        *,
        company_name: str,
        website_url: str,
        keywords: Sequence[str] = (),
        thresholds: Optional[ThresholdConfig] = None,
        similarity: Optional[Callable[[str, str], int]] = None,
    ) -> None:
        self.thresholds = thresholds or ThresholdConfig()
        self.similarity = similarity or SimilarityEngine()
        self.company = normalise_whitespace(company_name).lower()
        self.site_domain = normalise_domain(website_url).lower()
        self.keywords: List[str] = [
            keyword.strip().lower() for keyword in keywords if keyword and keyword.strip()
        ]
        self.rules: List[Rule] = [
            (EMPTY, self._is_empty),
            (MISCELLANEOUS, self._is_miscellaneous),
            (NAKED_URL, self._is_naked_url),
            (BRANDED, self._is_branded),
            (EXACT_MATCH, self._is_exact_match),
            (PARTIAL_MATCH, self._is_partial_match),
        ]

    def classify(self, value: Optional[str]) -> str:
        """Return the category of the anchor field ``value``."""

        anchor = Anchor.from_field(value)
        for category, predicate in self.rules:
            if predicate(anchor):
                return category
        return GENERIC

    def _is_empty(self, anchor: Anchor) -> bool:
        return not anchor.raw

    def _is_miscellaneous(self, anchor: Anchor) -> bool:
        return is_miscellaneous(anchor.raw, self.thresholds)

    def _is_naked_url(self, anchor: Anchor) -> bool:
        return is_url_anchor(anchor.lowered, self.site_domain)

    def _is_branded(self, anchor: Anchor) -> bool:
        return is_branded_keyword(
            anchor.lowered,
            self.company,
            self.similarity,
            self.thresholds,
            raw_anchor=anchor.raw,
        )

    def _first_keyword_at(self, anchor: Anchor, threshold: int) -> Optional[str]:
        for keyword in self.keywords:
            if self.similarity(anchor.lowered, keyword) >= threshold:
                return keyword
        return None

    def _is_exact_match(self, anchor: Anchor) -> bool:
        return self._first_keyword_at(anchor, self.thresholds.exact_match) is not None

    def _is_partial_match(self, anchor: Anchor) -> bool:
        return self._first_keyword_at(anchor, self.thresholds.partial_match) is not None
