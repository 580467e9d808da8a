"""
Resolution engine for food/drug interaction checks.

Two-stage cascade:
  Step 0: Input validation (no store access, no network on failure)
  Step 1: Alias resolution of the drug name
  Step 2: Curated store lookup
  Step 3: Label text fallback (provider search + snippet extraction)

Every step ends in a ResolvedInteraction. Provider failures are logged and
converted to an 'error' outcome; they never propagate to the caller.
"""

import logging
from typing import List, Optional

from interaction_checker.exceptions import LabelProviderError
from interaction_checker.extraction.label_text import combine_label_text
from interaction_checker.extraction.snippet_extractor import SnippetExtractor
from interaction_checker.matching.alias_resolver import AliasResolver
from interaction_checker.matching.match_result import (
    SEVERITY_UNKNOWN,
    Outcome,
    ResolvedInteraction,
)
from interaction_checker.providers.base_api import LabelTextProvider
from interaction_checker.store.interaction_store import InteractionStore

logger = logging.getLogger(__name__)

MISSING_INPUT_MESSAGE = "Please enter both a food and a medication."

NO_LABEL_DATA_EFFECT = "No interaction data was found for this medication."
FALLBACK_ADVICE = "If in doubt, ask a doctor or pharmacist."
LABEL_SNIPPET_ADVICE = (
    "This information comes from the package insert; "
    "ask a medical professional if in doubt."
)

ERROR_EFFECT = "An error occurred while fetching the data."
ERROR_ADVICE = "Try again later or seek medical advice."


def _is_blank(value: Optional[str]) -> bool:
    return not value or not isinstance(value, str)


class InteractionResolver:
    """
    Answers "does food X interact with drug Y?".

    The store and the label provider are injected; the resolver holds no
    mutable state, so one instance can serve concurrent requests.
    """

    def __init__(self,
                 store: InteractionStore,
                 provider: LabelTextProvider,
                 alias_resolver: Optional[AliasResolver] = None,
                 snippet_extractor: Optional[SnippetExtractor] = None):
        """
        Args:
            store: Loaded curated store
            provider: Label text provider used on a curated miss
            alias_resolver: AliasResolver instance (creates new if None)
            snippet_extractor: SnippetExtractor instance (creates new if None)
        """
        self.store = store
        self.provider = provider
        self.alias_resolver = alias_resolver or AliasResolver(store)
        self.snippet_extractor = snippet_extractor or SnippetExtractor()

    def check(self, food: Optional[str], drug: Optional[str]) -> ResolvedInteraction:
        """
        Check one food/drug pair.

        Args:
            food: Food name as entered by the user
            drug: Drug name as entered by the user (any alias, any casing)

        Returns:
            ResolvedInteraction tagged curated, fallback, error or missing-input
        """
        # Step 0: validation
        if _is_blank(food) or _is_blank(drug):
            return ResolvedInteraction(
                outcome=Outcome.MISSING_INPUT,
                drug=drug,
                food=food,
                message=MISSING_INPUT_MESSAGE,
            )

        # Step 1 + 2: alias resolution and curated lookup
        drug_key = self.alias_resolver.resolve(drug)
        food_key = food.lower()
        logger.info("Check request: food=%r drug=%r (canonical=%r)", food_key, drug, drug_key)

        if drug_key is not None:
            record = self.store.lookup(drug_key, food_key)
            if record is not None:
                return ResolvedInteraction(
                    outcome=Outcome.CURATED,
                    drug=drug,
                    food=food,
                    severity=record.severity,
                    effect=record.effect,
                    mechanism=record.mechanism,
                    recommendation=record.recommendation,
                    canonical_drug=drug_key,
                )

        # Step 3: label text fallback, searched with the raw drug string
        return self._label_fallback(food, drug, drug_key)

    def _label_fallback(self, food: str, drug: str,
                        drug_key: Optional[str]) -> ResolvedInteraction:
        try:
            records = self.provider.fetch_label_records(drug)
        except LabelProviderError as e:
            logger.warning("Label provider failed for %r: %s", drug, e)
            return self._error_result(food, drug, drug_key)
        except Exception:
            # Any provider fault ends in an error result
            logger.exception("Unexpected label provider failure for %r", drug)
            return self._error_result(food, drug, drug_key)

        if not records:
            return ResolvedInteraction(
                outcome=Outcome.FALLBACK,
                drug=drug,
                food=food,
                severity=SEVERITY_UNKNOWN,
                effect=NO_LABEL_DATA_EFFECT,
                recommendation=FALLBACK_ADVICE,
                canonical_drug=drug_key,
            )

        combined_text = combine_label_text(records)
        snippet = self.snippet_extractor.extract(combined_text, food)

        return ResolvedInteraction(
            outcome=Outcome.FALLBACK,
            drug=drug,
            food=food,
            severity=SEVERITY_UNKNOWN,
            effect=snippet,
            recommendation=LABEL_SNIPPET_ADVICE,
            canonical_drug=drug_key,
        )

    @staticmethod
    def _error_result(food: str, drug: str,
                      drug_key: Optional[str]) -> ResolvedInteraction:
        return ResolvedInteraction(
            outcome=Outcome.ERROR,
            drug=drug,
            food=food,
            severity=SEVERITY_UNKNOWN,
            effect=ERROR_EFFECT,
            recommendation=ERROR_ADVICE,
            canonical_drug=drug_key,
        )

    def list_medications(self) -> List[str]:
        """Canonical drug keys in store order."""
        return self.store.drug_keys()

    def list_foods(self, drug: Optional[str]) -> List[str]:
        """
        Food keys curated for a drug.

        Args:
            drug: Drug name or alias

        Returns:
            Food keys, or [] if the drug does not resolve
        """
        drug_key = self.alias_resolver.resolve(drug)
        if drug_key is None:
            return []
        return self.store.foods_for(drug_key)
