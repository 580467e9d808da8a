"""
Data structures for interaction check results.

Every path through the resolver, including validation failures and provider
errors, ends in a ResolvedInteraction tagged with an Outcome. The wire labels
('curated', 'fda', 'fehler') are the ones the existing client expects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Outcome(Enum):
    """How an interaction check was answered."""
    CURATED = "curated"
    FALLBACK = "fallback"
    ERROR = "error"
    MISSING_INPUT = "missing-input"

    @property
    def source(self) -> str:
        """Label sent to the client in the 'source' field."""
        return _SOURCE_LABELS[self]


_SOURCE_LABELS = {
    Outcome.CURATED: "curated",
    Outcome.FALLBACK: "fda",
    Outcome.ERROR: "fehler",
    Outcome.MISSING_INPUT: "fehler",
}

SEVERITY_UNKNOWN = "unknown"


@dataclass(frozen=True)
class ResolvedInteraction:
    """
    Result of checking one food/drug pair.

    Attributes:
        outcome: Which path produced the result
        drug: Drug name as entered by the user
        food: Food name as entered by the user
        severity: Curated severity, or 'unknown' for non-curated outcomes
        effect: Curated effect, label snippet, or a fixed status message
        mechanism: Curated mechanism, empty otherwise
        recommendation: Curated or fixed advisory recommendation
        message: Validation message (missing-input only)
        canonical_drug: Resolved canonical key, if the drug was resolved
    """
    outcome: Outcome
    drug: Optional[str] = None
    food: Optional[str] = None
    severity: str = SEVERITY_UNKNOWN
    effect: str = ""
    mechanism: str = ""
    recommendation: str = ""
    message: Optional[str] = None
    canonical_drug: Optional[str] = None

    @property
    def source(self) -> str:
        return self.outcome.source

    @property
    def is_curated(self) -> bool:
        """Check if the answer came from the curated store."""
        return self.outcome is Outcome.CURATED

    @property
    def is_error(self) -> bool:
        """Check if the check failed (bad input or provider failure)."""
        return self.outcome in (Outcome.ERROR, Outcome.MISSING_INPUT)

    def to_dict(self) -> Dict[str, Any]:
        """Project to the client payload."""
        if self.outcome is Outcome.MISSING_INPUT:
            return {"source": self.source, "message": self.message}

        return {
            "source": self.source,
            "drug": self.drug,
            "food": self.food,
            "severity": self.severity,
            "effect": self.effect,
            "mechanism": self.mechanism,
            "recommendation": self.recommendation,
        }
