"""
Data structures for the curated interaction store.

InteractionRecord holds one curated food/drug finding; DrugEntry groups the
records for one canonical drug together with its aliases. Both are frozen so
the store cannot be mutated once loaded.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

# Field names a curated record must carry, in output order
RECORD_FIELDS = ("severity", "effect", "mechanism", "recommendation")

# Reserved key in the source document holding a drug's alternate names
ALIASES_KEY = "_aliases"


@dataclass(frozen=True)
class InteractionRecord:
    """
    A curated food/drug interaction.

    Attributes:
        severity: Severity label as written by the curator (e.g. 'high')
        effect: What happens when the food and drug are combined
        mechanism: Why it happens
        recommendation: What the patient should do
    """
    severity: str
    effect: str
    mechanism: str
    recommendation: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {name: getattr(self, name) for name in RECORD_FIELDS}


@dataclass(frozen=True)
class DrugEntry:
    """
    All curated data for one canonical drug.

    Attributes:
        key: Canonical drug key as written in the source document
        aliases: Alternate names, in document order
        interactions: Read-only mapping of lowercased food key -> record
    """
    key: str
    aliases: Tuple[str, ...] = ()
    interactions: Mapping[str, InteractionRecord] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @property
    def foods(self) -> Tuple[str, ...]:
        """Food keys in document order. Never includes the alias field."""
        return tuple(self.interactions.keys())

    def get(self, food_key: str):
        """Return the record for a food key, or None."""
        return self.interactions.get(food_key)
