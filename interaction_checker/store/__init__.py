"""Curated interaction store: data model and loader."""
from interaction_checker.store.interaction_store import InteractionStore, load_store
from interaction_checker.store.models import (
    ALIASES_KEY,
    RECORD_FIELDS,
    DrugEntry,
    InteractionRecord,
)

__all__ = [
    "InteractionStore",
    "load_store",
    "DrugEntry",
    "InteractionRecord",
    "ALIASES_KEY",
    "RECORD_FIELDS",
]
