"""
openFDA drug label provider.

Queries the openFDA drug label endpoint (full-text search over structured
product labeling) and returns the raw label records.

Rate limit without an API key: 240 requests/minute, 1000 requests/day.
"""
from typing import Any, Dict, List, Optional

from loguru import logger

from interaction_checker.exceptions import LabelProviderError

from .base_api import BaseLabelProvider


class OpenFDALabelProvider(BaseLabelProvider):
    """
    Label provider backed by https://api.fda.gov/drug/label.json.

    openFDA answers a search with no hits with HTTP 404; that is reported as
    an empty result, not as an error.
    """

    BASE_URL = "https://api.fda.gov"
    LABEL_ENDPOINT = "/drug/label.json"
    MAX_LIMIT = 1000

    def __init__(
        self,
        base_url: Optional[str] = None,
        limit: int = 20,
        api_key: Optional[str] = None,
        **kwargs,
    ):
        """
        Args:
            base_url: API root (defaults to the public openFDA endpoint)
            limit: Maximum label records per search
            api_key: Optional openFDA API key for a higher quota
            **kwargs: Forwarded to BaseLabelProvider
        """
        if not 1 <= limit <= self.MAX_LIMIT:
            raise ValueError(f"limit must be between 1 and {self.MAX_LIMIT}, got {limit}")

        super().__init__(**kwargs)
        self.base_url = (base_url or self.BASE_URL).rstrip("/")
        self.limit = limit
        self.api_key = api_key
        self.api_calls = 0

    @property
    def label_url(self) -> str:
        return f"{self.base_url}{self.LABEL_ENDPOINT}"

    def fetch_label_records(self, drug_name: str) -> List[Dict[str, Any]]:
        """
        Search drug labels for a drug name.

        Args:
            drug_name: Raw drug name, used as the search term

        Returns:
            Label records (empty if openFDA found nothing)

        Raises:
            LabelProviderError: On network, HTTP or parse failure
        """
        params: Dict[str, Any] = {"search": drug_name, "limit": self.limit}
        if self.api_key:
            params["api_key"] = self.api_key

        self.api_calls += 1
        response = self._request(self.label_url, params=params)
        data = self._parse_json_response(response)

        if data is None:
            logger.info(f"openFDA: no labels for '{drug_name}'")
            return []

        results = data.get("results") or []
        if not isinstance(results, list):
            raise LabelProviderError(
                f"Unexpected 'results' type from openFDA: {type(results).__name__}"
            )

        records = [record for record in results if isinstance(record, dict)]
        logger.info(f"openFDA: {len(records)} label records for '{drug_name}'")
        return records
