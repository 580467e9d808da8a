"""
Food/drug interaction resolution package.

Provides the two-stage cascade:
- Alias resolution (brand/generic names -> canonical drug key)
- Curated store lookup
- Label text fallback (openFDA search + snippet extraction)
"""

import logging
from typing import Optional

from interaction_checker.matching.alias_resolver import AliasResolver
from interaction_checker.matching.interaction_resolver import InteractionResolver
from interaction_checker.matching.match_result import Outcome, ResolvedInteraction
from interaction_checker.providers import LabelTextProvider, OpenFDALabelProvider
from interaction_checker.store import InteractionStore, load_store
from interaction_checker.utils.config_manager import ConfigManager

_logger = logging.getLogger(__name__)


def build_provider(config: ConfigManager) -> OpenFDALabelProvider:
    """Build the openFDA label provider from the 'openfda' config section."""
    settings = config.openfda_settings()
    return OpenFDALabelProvider(
        base_url=settings['base_url'],
        limit=settings['limit'],
        api_key=settings['api_key'],
        timeout=settings['timeout'],
        max_retries=settings['max_retries'],
        cache_expire_after=settings['cache_expire_after'],
        cache_max_entries=settings['cache_max_entries'],
        calls_per_minute=settings['calls_per_minute'],
        user_agent=settings['user_agent'],
    )


def build_resolver(
    config: Optional[ConfigManager] = None,
    store: Optional[InteractionStore] = None,
    provider: Optional[LabelTextProvider] = None,
) -> InteractionResolver:
    """
    Build an InteractionResolver with store and provider wired.

    Loads the curated store from the configured path unless one is given.
    A missing or malformed store raises StoreLoadError; callers at startup
    should let it propagate and refuse to serve.

    Args:
        config: ConfigManager (loaded from config/checker_config.yaml if None)
        store: Preloaded store (skips loading from disk)
        provider: Label provider (openFDA client from config if None)

    Returns:
        Fully-wired InteractionResolver instance.
    """
    if config is None:
        config = ConfigManager.from_default_path()

    errors = config.validate_config()
    if errors:
        raise ValueError("Invalid configuration: " + "; ".join(errors))

    if store is None:
        store = load_store(config.store_path())

    if provider is None:
        provider = build_provider(config)

    _logger.info(
        "Resolver ready: %d curated drugs, provider=%s",
        len(store), type(provider).__name__,
    )
    return InteractionResolver(store=store, provider=provider)


__all__ = [
    "AliasResolver",
    "InteractionResolver",
    "Outcome",
    "ResolvedInteraction",
    "build_provider",
    "build_resolver",
]
