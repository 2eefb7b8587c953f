"""Input, row and result models exchanged by the classification pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from jsonschema import ValidationError, validate

from anchorlens.core.errors import MissingInputError

INPUT_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "csvText": {"type": "string", "minLength": 1},
        "companyName": {"type": "string", "minLength": 1, "pattern": r"\S"},
        "websiteUrl": {"type": "string", "minLength": 1, "pattern": r"\S"},
        "keywords": {"type": ["array", "null"], "items": {"type": "string"}},
        "keywordList": {"type": ["array", "null"], "items": {"type": "string"}},
        "includeRows": {"type": "boolean"},
    },
    "required": ["csvText", "companyName", "websiteUrl"],
}

# Wire names of the result counters, in result-table order.
RESULT_FIELDS: Dict[str, str] = {
    "branded": "branded",
    "naked_url": "nakedUrl",
    "exact_match": "exactMatch",
    "partial_match": "partialMatch",
    "generic": "generic",
    "miscellaneous": "miscellaneous",
    "empty": "empty",
}


def _keyword_lists(message: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy ``message`` with keyword tuples (or other sequences) turned into lists."""

    normalised = dict(message)
    for key in ("keywords", "keywordList"):
        value = normalised.get(key)
        if isinstance(value, Sequence) and not isinstance(value, (str, list)):
            normalised[key] = list(value)
    return normalised


@dataclass(frozen=True, slots=True)
class ClassificationInput:
    """Everything needed for one classification run."""

    csv_text: str
    company_name: str
    website_url: str
    keywords: Tuple[str, ...] = ()

    @classmethod
    def from_message(cls, message: Mapping[str, Any]) -> "ClassificationInput":
        """Validate an input message and build the run input from it."""

        if not isinstance(message, Mapping):
            raise MissingInputError("Input message must be a mapping")
        message = _keyword_lists(message)
        try:
            validate(instance=message, schema=INPUT_SCHEMA)
        except ValidationError as exc:
            raise MissingInputError(
                f"Missing required data: CSV text, company name, or website URL ({exc.message})"
            ) from exc
        keywords = message.get("keywords")
        if keywords is None:
            keywords = message.get("keywordList") or []
        return cls(
            csv_text=message["csvText"],
            company_name=message["companyName"],
            website_url=message["websiteUrl"],
            keywords=tuple(keywords),
        )

    def to_message(self) -> Dict[str, Any]:
        return {
            "csvText": self.csv_text,
            "companyName": self.company_name,
            "websiteUrl": self.website_url,
            "keywords": list(self.keywords),
        }


@dataclass(slots=True)
class AnchorRow:
    """One parsed data row of the export."""

    line_number: int
    fields: List[str]
    anchor_index: int

    @property
    def anchor(self) -> str:
        if self.anchor_index < len(self.fields):
            return self.fields[self.anchor_index]
        return ""


@dataclass(frozen=True, slots=True)
class RowOutcome:
    """The category assigned to one counted row."""

    line_number: int
    anchor: str
    category: str

    def to_payload(self) -> Dict[str, Any]:
        return {"line": self.line_number, "anchor": self.anchor, "category": self.category}


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Per-category anchor counts for a completed run."""

    branded: int = 0
    naked_url: int = 0
    exact_match: int = 0
    partial_match: int = 0
    generic: int = 0
    miscellaneous: int = 0
    empty: int = 0
    total: int = 0

    @classmethod
    def from_counts(cls, counts: Mapping[str, int]) -> "ClassificationResult":
        values = {name: int(counts.get(name, 0)) for name in RESULT_FIELDS}
        return cls(**values, total=sum(values.values()))

    @classmethod
    def from_payload(cls, payload: Mapping[str, int]) -> "ClassificationResult":
        """Rebuild a result from its wire form (camelCase keys)."""

        return cls.from_counts({name: payload.get(wire, 0) for name, wire in RESULT_FIELDS.items()})

    def counts(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in RESULT_FIELDS}

    def to_payload(self) -> Dict[str, int]:
        payload = {wire: getattr(self, name) for name, wire in RESULT_FIELDS.items()}
        payload["total"] = self.total
        return payload
