"""
Curated interaction store.

Loads the curated knowledge base from a JSON document once at startup and
exposes it as a read-only structure:

    {
        "warfarin": {
            "_aliases": ["Coumadin", "Jantoven"],
            "grapefruit": {"severity": ..., "effect": ..., "mechanism": ..., "recommendation": ...}
        }
    }

Drug identity is case-insensitive. A reverse alias index is built at load
time; an alias claimed by two different drugs is a data-integrity error and
fails the load instead of picking a winner.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from interaction_checker.exceptions import AliasCollisionError, StoreLoadError
from interaction_checker.store.models import (
    ALIASES_KEY,
    RECORD_FIELDS,
    DrugEntry,
    InteractionRecord,
)

logger = logging.getLogger(__name__)


class InteractionStore:
    """
    Read-only mapping of canonical drug key -> DrugEntry.

    Built once from a source document and never mutated afterwards. Keys keep
    the casing of the source document for display; lookups are
    case-insensitive.
    """

    def __init__(self, entries: List[DrugEntry]):
        """
        Args:
            entries: Drug entries in document order

        Raises:
            StoreLoadError: If two drug keys differ only by case
            AliasCollisionError: If an alias maps to two different drugs
        """
        by_key: Dict[str, DrugEntry] = {}
        for entry in entries:
            folded = entry.key.lower()
            if folded in by_key:
                raise StoreLoadError(
                    f"Drug key '{entry.key}' duplicates '{by_key[folded].key}'"
                )
            by_key[folded] = entry

        self._entries = MappingProxyType(by_key)
        self._alias_index = MappingProxyType(self._build_alias_index(by_key))

    @staticmethod
    def _build_alias_index(by_key: Mapping[str, DrugEntry]) -> Dict[str, str]:
        """
        Build lowercased name -> canonical key for every drug key and alias.

        A drug's own key always resolves to itself. Any name that would point
        at two different drugs raises AliasCollisionError.
        """
        index: Dict[str, str] = {folded: entry.key for folded, entry in by_key.items()}

        for entry in by_key.values():
            for alias in entry.aliases:
                folded = alias.lower()
                owner = index.get(folded)
                if owner is not None and owner != entry.key:
                    raise AliasCollisionError(alias, owner, entry.key)
                index[folded] = entry.key

        return index

    # ── Construction ──────────────────────────────────────────────────

    @classmethod
    def from_document(cls, document: Any) -> "InteractionStore":
        """
        Build a store from a parsed JSON document.

        Raises:
            StoreLoadError: If the document does not match the store shape
        """
        if not isinstance(document, dict):
            raise StoreLoadError(
                f"Curated data must be an object of drugs, got {type(document).__name__}"
            )

        entries = [_parse_drug_entry(key, value) for key, value in document.items()]
        return cls(entries)

    # ── Queries ───────────────────────────────────────────────────────

    def lookup(self, canonical_key: str, food_key: str) -> Optional[InteractionRecord]:
        """
        Return the curated record for a drug/food pair, or None on a miss.

        Args:
            canonical_key: Canonical drug key (any casing)
            food_key: Lowercased food string, used verbatim
        """
        entry = self.entry(canonical_key)
        if entry is None:
            return None
        return entry.get(food_key)

    def entry(self, canonical_key: str) -> Optional[DrugEntry]:
        if not canonical_key:
            return None
        return self._entries.get(canonical_key.lower())

    def canonical_for(self, name: str) -> Optional[str]:
        """Reverse alias index lookup. Expects an already lowercased name."""
        return self._alias_index.get(name)

    def drug_keys(self) -> List[str]:
        """Canonical drug keys in document order."""
        return [entry.key for entry in self._entries.values()]

    def foods_for(self, canonical_key: str) -> List[str]:
        """Food keys for a drug in document order, or [] if the drug is absent."""
        entry = self.entry(canonical_key)
        return list(entry.foods) if entry else []

    @property
    def alias_count(self) -> int:
        return sum(len(entry.aliases) for entry in self._entries.values())

    @property
    def interaction_count(self) -> int:
        return sum(len(entry.interactions) for entry in self._entries.values())

    def __contains__(self, canonical_key: object) -> bool:
        return isinstance(canonical_key, str) and canonical_key.lower() in self._entries

    def __iter__(self) -> Iterator[DrugEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)


def _parse_drug_entry(key: Any, value: Any) -> DrugEntry:
    """Validate one drug object from the source document."""
    if not isinstance(key, str) or not key.strip():
        raise StoreLoadError(f"Invalid drug key: {key!r}")
    if not isinstance(value, dict):
        raise StoreLoadError(f"Drug '{key}' must map to an object, got {type(value).__name__}")

    aliases = value.get(ALIASES_KEY, [])
    if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
        raise StoreLoadError(f"Drug '{key}': {ALIASES_KEY} must be a list of strings")

    interactions: Dict[str, InteractionRecord] = {}
    for food, raw_record in value.items():
        if food == ALIASES_KEY:
            continue
        food_key = food.lower()
        if food_key in interactions:
            raise StoreLoadError(f"Drug '{key}': duplicate food key '{food}'")
        interactions[food_key] = _parse_record(key, food, raw_record)

    return DrugEntry(
        key=key,
        aliases=tuple(aliases),
        interactions=MappingProxyType(interactions),
    )


def _parse_record(drug: str, food: str, raw: Any) -> InteractionRecord:
    if not isinstance(raw, dict):
        raise StoreLoadError(f"Drug '{drug}', food '{food}': record must be an object")

    missing = [name for name in RECORD_FIELDS if name not in raw]
    if missing:
        raise StoreLoadError(
            f"Drug '{drug}', food '{food}': missing fields {', '.join(missing)}"
        )

    for name in RECORD_FIELDS:
        if not isinstance(raw[name], str):
            raise StoreLoadError(
                f"Drug '{drug}', food '{food}': field '{name}' must be a string"
            )

    return InteractionRecord(**{name: raw[name] for name in RECORD_FIELDS})


def load_store(path: Union[str, Path]) -> InteractionStore:
    """
    Load the curated store from a JSON file.

    Args:
        path: Path to the curated interactions document

    Returns:
        Loaded, validated InteractionStore

    Raises:
        StoreLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    if not path.exists():
        raise StoreLoadError(f"Curated interaction file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise StoreLoadError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise StoreLoadError(f"Failed to read {path}: {e}") from e

    store = InteractionStore.from_document(document)
    logger.info(
        "Loaded curated store from %s: %d drugs, %d interactions, %d aliases",
        path, len(store), store.interaction_count, store.alias_count,
    )
    return store
