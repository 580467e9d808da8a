"""External drug label providers."""
from interaction_checker.exceptions import LabelProviderError, RateLimitExceeded

from .base_api import BaseLabelProvider, LabelTextProvider, exponential_backoff_retry
from .openfda import OpenFDALabelProvider

__all__ = [
    # Providers
    "LabelTextProvider",
    "BaseLabelProvider",
    "OpenFDALabelProvider",
    "exponential_backoff_retry",
    # Exceptions
    "LabelProviderError",
    "RateLimitExceeded",
]
