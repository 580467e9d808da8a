"""
Invariant Test Suite: curated data shipped with the repository

These tests check the data file the service actually loads at startup,
not the fixtures:

  1. The shipped store loads (no malformed records, no alias collisions)
  2. Every drug alias and canonical key resolves, in any casing
  3. Every curated pair is answered from the store without a provider call
  4. build_resolver wires the shipped config, store and openFDA provider

Run:  pytest tests/test_invariants.py -v
"""

import pytest

from conftest import StubLabelProvider
from interaction_checker.matching import AliasResolver, InteractionResolver, build_resolver
from interaction_checker.providers import OpenFDALabelProvider
from interaction_checker.store import load_store
from interaction_checker.utils.config_manager import ConfigManager


@pytest.fixture(scope="module")
def shipped_store():
    return load_store(ConfigManager.from_default_path().store_path())


def test_shipped_store_loads(shipped_store):
    assert len(shipped_store) > 0
    assert shipped_store.interaction_count > 0


def test_every_name_resolves_any_casing(shipped_store):
    resolver = AliasResolver(shipped_store)

    for entry in shipped_store:
        for name in (entry.key, *entry.aliases):
            for variant in (name, name.lower(), name.upper(), name.swapcase()):
                assert resolver.resolve(variant) == entry.key


def test_every_curated_pair_answered_locally(shipped_store):
    provider = StubLabelProvider(error=AssertionError("provider must not be called"))
    resolver = InteractionResolver(shipped_store, provider)

    for entry in shipped_store:
        for name in (entry.key, *entry.aliases):
            for food_key, record in entry.interactions.items():
                result = resolver.check(food_key, name)
                assert result.is_curated, (name, food_key)
                assert result.severity == record.severity

    assert provider.calls == []


def test_warfarin_coumadin_grapefruit(shipped_store):
    resolver = InteractionResolver(shipped_store, StubLabelProvider())

    result = resolver.check("grapefruit", "Coumadin")

    assert result.is_curated
    assert result.canonical_drug == "warfarin"


def test_build_resolver_from_shipped_config():
    resolver = build_resolver()

    assert isinstance(resolver.provider, OpenFDALabelProvider)
    assert resolver.provider.limit == 20
    assert resolver.list_medications()[0] == "warfarin"
    resolver.provider.close()


def test_build_resolver_rejects_invalid_config():
    config = ConfigManager()
    config.config['openfda']['limit'] = 0

    with pytest.raises(ValueError, match="Invalid configuration"):
        build_resolver(config, provider=StubLabelProvider())
