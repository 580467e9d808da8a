"""
Base label provider with retry logic, rate limiting, and caching.
"""
import threading
import time
from abc import ABC, abstractmethod
from functools import wraps
from typing import Any, Callable, Dict, List, Optional

import requests
import requests_cache
from loguru import logger
from ratelimit import RateLimitException, limits

from interaction_checker.exceptions import LabelProviderError, RateLimitExceeded


def exponential_backoff_retry(
    max_retries: int = 0, base_delay: float = 1.0, max_delay: float = 30.0
) -> Callable:
    """
    Decorator for exponential backoff retry logic.

    Args:
        max_retries: Maximum number of retry attempts (0 = single attempt)
        base_delay: Initial delay in seconds
        max_delay: Maximum delay between retries

    Returns:
        Decorated function with retry logic
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            for attempt in range(max_retries + 1):
                try:
                    return func(*args, **kwargs)
                except LabelProviderError as e:
                    if attempt == max_retries:
                        if max_retries:
                            logger.error(f"Max retries ({max_retries}) exceeded: {e}")
                        raise

                    delay = min(base_delay * (2**attempt), max_delay)
                    logger.warning(
                        f"Attempt {attempt + 1} failed: {e}. Retrying in {delay:.1f}s..."
                    )
                    time.sleep(delay)

        return wrapper

    return decorator


class LabelTextProvider(ABC):
    """
    Capability interface for anything that supplies raw label text.

    Implementations return zero or more records, each a mapping of field
    name to a string or a list of strings, and raise LabelProviderError on
    any network or parse failure.
    """

    @abstractmethod
    def fetch_label_records(self, drug_name: str) -> List[Dict[str, Any]]:
        """
        Search label text for a drug.

        Args:
            drug_name: Drug name as entered by the user

        Returns:
            List of label records (empty if nothing matched)

        Raises:
            LabelProviderError: On network, HTTP or parse failure
        """
        pass


class BaseLabelProvider(LabelTextProvider):
    """
    Abstract base class for HTTP label providers.

    Provides:
    - Session management with connection pooling
    - Bounded in-memory response caching
    - Client-side rate limiting (fails fast, never sleeps)
    - Bounded timeout and optional retries
    - Error handling and logging
    """

    def __init__(
        self,
        timeout: float = 5.0,
        max_retries: int = 0,
        cache_expire_after: int = 3600,
        cache_max_entries: int = 128,
        calls_per_minute: int = 240,
        user_agent: str = "FoodDrugChecker/1.0",
    ):
        """
        Initialize label provider.

        Args:
            timeout: Request timeout in seconds
            max_retries: Retry attempts after a failed request
            cache_expire_after: Cache expiration time in seconds
            cache_max_entries: Most responses kept in the cache
            calls_per_minute: Client-side request budget
            user_agent: User-Agent header sent with every request
        """
        self.timeout = timeout
        self.max_retries = max_retries
        self.cache_max_entries = cache_max_entries
        self.calls_per_minute = calls_per_minute
        self.source_name = self.__class__.__name__.replace("LabelProvider", "").lower()
        self._cache_lock = threading.Lock()

        # Memory backend: responses never touch disk
        self.session = requests_cache.CachedSession(
            cache_name=f"{self.source_name}_labels",
            backend="memory",
            expire_after=cache_expire_after,
            allowable_methods=["GET"],
            allowable_codes=[200],
        )

        self.session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json",
            }
        )

        # Budget is spent once per call, not once per retry attempt
        request = exponential_backoff_retry(max_retries=max_retries)(self._make_request)
        self._throttled_request = limits(calls=calls_per_minute, period=60)(request)

        logger.info(
            f"Initialized {self.source_name} label provider "
            f"(timeout={timeout}s, retries={max_retries})"
        )

    def _request(self, url: str, params: Optional[Dict] = None) -> requests.Response:
        """
        Make a rate-limited GET request and keep the cache within bounds.

        Raises:
            RateLimitExceeded: If the client-side budget for this minute is spent
            LabelProviderError: On request failure
        """
        try:
            response = self._throttled_request(url, params=params)
        except RateLimitException as e:
            raise RateLimitExceeded(
                f"Client-side rate limit of {self.calls_per_minute}/min reached, "
                f"window reopens in {e.period_remaining:.1f}s"
            ) from e

        if not getattr(response, "from_cache", False):
            self._prune_cache()
        return response

    def _prune_cache(self):
        """Drop expired responses, then the oldest ones beyond cache_max_entries."""
        with self._cache_lock:
            cache = self.session.cache
            cache.delete(expired=True)

            overflow = len(cache.responses) - self.cache_max_entries
            if overflow > 0:
                oldest = list(cache.responses.keys())[:overflow]
                cache.delete(*oldest)
                logger.debug(f"Evicted {overflow} cached {self.source_name} responses")

    def _make_request(self, url: str, params: Optional[Dict] = None) -> requests.Response:
        """
        Make a GET request with error handling.

        Args:
            url: Request URL
            params: URL parameters

        Returns:
            Response object (404 responses are returned for the caller to handle)

        Raises:
            LabelProviderError: On request failure
        """
        response = None
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)

            if getattr(response, "from_cache", False):
                logger.debug(f"Cache hit for {url}")

            response.raise_for_status()
            return response

        except requests.Timeout as e:
            raise LabelProviderError(f"Request timeout for {url}: {e}") from e
        except requests.HTTPError as e:
            if response.status_code == 429:
                raise RateLimitExceeded(f"Rate limit exceeded: {e}") from e
            elif response.status_code == 404:
                logger.debug(f"Resource not found: {url}")
                return response
            else:
                raise LabelProviderError(f"HTTP error {response.status_code}: {e}") from e
        except requests.RequestException as e:
            raise LabelProviderError(f"Request failed for {url}: {e}") from e

    def _parse_json_response(self, response: requests.Response) -> Optional[Dict[str, Any]]:
        """
        Parse JSON response with error handling.

        Args:
            response: Response object

        Returns:
            Parsed JSON object, or None for 404 responses

        Raises:
            LabelProviderError: If the body is not a JSON object
        """
        if response.status_code == 404:
            return None

        try:
            data = response.json()
        except ValueError as e:
            raise LabelProviderError(f"Failed to parse JSON response: {e}") from e

        if not isinstance(data, dict):
            raise LabelProviderError(
                f"Expected a JSON object, got {type(data).__name__}"
            )
        return data

    def close(self):
        """Close the session and cleanup resources."""
        self.session.close()
        logger.debug(f"Closed {self.source_name} label provider session")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
