"""
Tests for drug name alias resolution.
"""

import pytest

from interaction_checker.matching import AliasResolver


@pytest.fixture
def alias_resolver(store):
    return AliasResolver(store)


@pytest.mark.parametrize("name", ["ASPIRIN", "aspirin", "AsPiRiN"])
def test_canonical_key_any_casing(alias_resolver, name):
    """Test a canonical key resolves to itself regardless of casing."""
    assert alias_resolver.resolve(name) == "aspirin"


@pytest.mark.parametrize("name", ["Coumadin", "COUMADIN", "coumadin", "jantoven"])
def test_alias_resolves_to_canonical(alias_resolver, name):
    """Test brand names resolve to the canonical drug."""
    assert alias_resolver.resolve(name) == "warfarin"


def test_multi_word_alias(alias_resolver):
    assert alias_resolver.resolve("acetylsalicylic ACID") == "aspirin"


def test_canonical_key_keeps_document_casing(alias_resolver):
    """Test the returned key is the one written in the document."""
    assert alias_resolver.resolve("simvastatin") == "Simvastatin"


@pytest.mark.parametrize("name", ["Coumad", "coumadin 5mg", " coumadin", "ibuprofen"])
def test_no_partial_or_fuzzy_matching(alias_resolver, name):
    """Test only exact (case-folded) names resolve."""
    assert alias_resolver.resolve(name) is None


@pytest.mark.parametrize("name", [None, ""])
def test_empty_input(alias_resolver, name):
    assert alias_resolver.resolve(name) is None
