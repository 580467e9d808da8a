"""
Pytest configuration and shared fixtures for the interaction checker tests.

Provides:
- A small curated store document and the loaded store
- A stub label provider that records calls
- A resolver wired to both
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from interaction_checker.matching import InteractionResolver
from interaction_checker.providers import LabelTextProvider
from interaction_checker.store import InteractionStore

PROJECT_ROOT = Path(__file__).parent.parent


# ============================================================================
# STUB PROVIDER
# ============================================================================

class StubLabelProvider(LabelTextProvider):
    """
    In-memory label provider.

    Returns the configured records, or raises the configured exception.
    Every call is recorded so tests can assert that no fetch happened.
    """

    def __init__(self, records: Optional[List[Dict[str, Any]]] = None,
                 error: Optional[Exception] = None):
        self.records = records or []
        self.error = error
        self.calls: List[str] = []

    def fetch_label_records(self, drug_name: str) -> List[Dict[str, Any]]:
        self.calls.append(drug_name)
        if self.error is not None:
            raise self.error
        return self.records


# ============================================================================
# STORE FIXTURES
# ============================================================================

@pytest.fixture
def store_document() -> Dict[str, Any]:
    """Curated document with aliases, mixed-case keys and several foods."""
    return {
        "warfarin": {
            "_aliases": ["Coumadin", "Jantoven"],
            "grapefruit": {
                "severity": "moderate",
                "effect": "Increased bleeding risk.",
                "mechanism": "CYP3A4 inhibition.",
                "recommendation": "Avoid large amounts of grapefruit.",
            },
            "Spinach": {
                "severity": "moderate",
                "effect": "Reduced anticoagulant effect.",
                "mechanism": "Vitamin K antagonism.",
                "recommendation": "Keep vitamin K intake steady.",
            },
        },
        "aspirin": {
            "_aliases": ["Acetylsalicylic acid", "ASA"],
            "alcohol": {
                "severity": "moderate",
                "effect": "Increased risk of stomach bleeding.",
                "mechanism": "Additive gastric irritation.",
                "recommendation": "Avoid alcohol.",
            },
        },
        "Simvastatin": {
            "grapefruit": {
                "severity": "high",
                "effect": "Risk of rhabdomyolysis.",
                "mechanism": "CYP3A4 inhibition.",
                "recommendation": "Avoid grapefruit.",
            },
        },
    }


@pytest.fixture
def store(store_document) -> InteractionStore:
    """Loaded store built from store_document."""
    return InteractionStore.from_document(store_document)


@pytest.fixture
def store_file(tmp_path, store_document) -> Path:
    """store_document written to a temporary JSON file."""
    path = tmp_path / "interactions.json"
    path.write_text(json.dumps(store_document), encoding="utf-8")
    return path


# ============================================================================
# RESOLVER FIXTURES
# ============================================================================

@pytest.fixture
def provider() -> StubLabelProvider:
    """Provider returning no records."""
    return StubLabelProvider()


@pytest.fixture
def resolver(store, provider) -> InteractionResolver:
    """Resolver over the sample store and the stub provider."""
    return InteractionResolver(store=store, provider=provider)


def label_record(**fields) -> Dict[str, Any]:
    """Build an openFDA-shaped label record."""
    record = {
        "set_id": "00000000-0000-0000-0000-000000000000",
        "version": "3",
        "openfda": {"brand_name": ["EXAMPLE"], "generic_name": ["EXAMPLE"]},
    }
    record.update(fields)
    return record
