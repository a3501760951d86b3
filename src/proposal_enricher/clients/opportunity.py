"""Client for the Salesforce-dummy opportunity API."""

import logging
from typing import Optional
from urllib.parse import quote

import httpx

from proposal_enricher.config import EnrichmentConfig
from proposal_enricher.errors import OpportunityFetchError
from proposal_enricher.models.opportunity import OpportunityRecord, OpportunityResponse

logger = logging.getLogger(__name__)

DEFAULT_FAILURE_MESSAGE = "Failed to fetch opportunity data from Salesforce dummy API."


class OpportunityClient:
    """
    Fetches opportunity details by opportunity number.
    One GET per call, no retries. Every failure (transport, invalid JSON,
    schema mismatch, success=false, missing data, non-2xx) surfaces as
    OpportunityFetchError.
    """

    PATH_TEMPLATE = "/opportunity/{number}"

    DEFAULT_HEADERS = {
        "User-Agent": "proposal-enricher/0.1",
        "Accept": "application/json",
    }

    def __init__(self, config: EnrichmentConfig, client: Optional[httpx.Client] = None):
        self._base_url = config.opportunity_api_base.rstrip("/")
        self._client = client or httpx.Client(
            timeout=config.request_timeout,
            headers=self.DEFAULT_HEADERS,
        )

    def url_for(self, opportunity_number: str) -> str:
        return self._base_url + self.PATH_TEMPLATE.format(number=quote(opportunity_number, safe=""))

    def get_opportunity(self, opportunity_number: str) -> OpportunityRecord:
        """Fetch one opportunity. Raises OpportunityFetchError on any failure."""
        url = self.url_for(opportunity_number)
        try:
            response = self._client.get(url)
            payload = OpportunityResponse.model_validate(response.json())
        except httpx.HTTPError as e:
            raise OpportunityFetchError(
                f"Request to opportunity API failed: {e}",
                opportunity_number=opportunity_number,
            ) from e
        except ValueError as e:
            # invalid JSON or a body that does not match the response schema
            raise OpportunityFetchError(
                f"Malformed response from opportunity API: {e}",
                opportunity_number=opportunity_number,
            ) from e

        if response.is_success and payload.success and payload.data is not None:
            return payload.data

        message = payload.message or DEFAULT_FAILURE_MESSAGE
        logger.debug(
            "Opportunity %s rejected (HTTP %d, success=%s)",
            opportunity_number,
            response.status_code,
            payload.success,
        )
        raise OpportunityFetchError(
            f"Opportunity not found or API error: {message}",
            opportunity_number=opportunity_number,
        )
