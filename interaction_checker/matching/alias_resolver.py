"""
Alias resolution for drug names.

Maps a free-form drug name to its canonical store key using the reverse
alias index built when the store was loaded.
"""

import logging
from typing import Optional

from interaction_checker.store.interaction_store import InteractionStore

logger = logging.getLogger(__name__)


class AliasResolver:
    """
    Resolves drug names to canonical keys.

    Matching is case-insensitive and exact: no partial or fuzzy matching.
    A canonical key resolves to itself; an alias resolves to the drug that
    lists it. Alias uniqueness is enforced by the store at load time, so a
    name never resolves to more than one drug.
    """

    def __init__(self, store: InteractionStore):
        self.store = store

    def resolve(self, drug_name: Optional[str]) -> Optional[str]:
        """
        Resolve a drug name.

        Args:
            drug_name: Name as entered by the user (brand, generic, any casing)

        Returns:
            Canonical drug key, or None if the name is unknown
        """
        if not drug_name or not isinstance(drug_name, str):
            return None

        canonical = self.store.canonical_for(drug_name.lower())
        if canonical is None:
            logger.debug("No alias match for '%s'", drug_name)
        return canonical
