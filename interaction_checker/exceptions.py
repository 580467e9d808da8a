"""
Exception hierarchy for the interaction checker.

Business-logic misses (unknown drug, unknown food, empty label search) are
normal results, not exceptions. Exceptions cover the two places where things
can genuinely break: loading the curated store at startup and talking to the
external label provider.
"""


class InteractionCheckerError(Exception):
    """Base exception for the interaction checker."""

    pass


class StoreLoadError(InteractionCheckerError):
    """Curated interaction data is missing or malformed. Fatal at startup."""

    pass


class AliasCollisionError(StoreLoadError):
    """An alias maps to more than one canonical drug key."""

    def __init__(self, alias: str, first_key: str, second_key: str):
        self.alias = alias
        self.first_key = first_key
        self.second_key = second_key
        super().__init__(
            f"Alias '{alias}' is claimed by both '{first_key}' and '{second_key}'"
        )


class LabelProviderError(InteractionCheckerError):
    """Network, HTTP or parse failure from the external label provider."""

    pass


class RateLimitExceeded(LabelProviderError):
    """Exception raised when the provider rejects a request with HTTP 429."""

    pass
