"""Client for the Meilisearch employee index."""

from typing import Optional

import httpx

from proposal_enricher.config import EnrichmentConfig
from proposal_enricher.errors import EmployeeResolutionError
from proposal_enricher.models.employee import EmployeeSearchHit, SearchResponse


class EmployeeSearchClient:
    """Free-text employee search returning at most the top hit."""

    SEARCH_PATH_TEMPLATE = "/indexes/{index}/search"
    API_KEY_HEADER = "X-Meili-API-Key"

    DEFAULT_HEADERS = {
        "User-Agent": "proposal-enricher/0.1",
        "Accept": "application/json",
    }

    def __init__(self, config: EnrichmentConfig, client: Optional[httpx.Client] = None):
        self._url = config.search_api_base.rstrip("/") + self.SEARCH_PATH_TEMPLATE.format(
            index=config.search_index
        )
        self._api_key = config.search_api_key
        self._client = client or httpx.Client(
            timeout=config.request_timeout,
            headers=self.DEFAULT_HEADERS,
        )

    @property
    def url(self) -> str:
        return self._url

    def search(self, query: str, limit: int = 1) -> SearchResponse:
        """POST {q, limit} to the index. Raises EmployeeResolutionError on any failure."""
        try:
            response = self._client.post(
                self._url,
                headers={self.API_KEY_HEADER: self._api_key},
                json={"q": query, "limit": limit},
            )
            response.raise_for_status()
            return SearchResponse.model_validate(response.json())
        except httpx.HTTPStatusError as e:
            raise EmployeeResolutionError(
                f"Employee search returned HTTP {e.response.status_code}",
                proposed_by=query,
            ) from e
        except httpx.HTTPError as e:
            raise EmployeeResolutionError(
                f"Request to search API failed: {e}",
                proposed_by=query,
            ) from e
        except ValueError as e:
            raise EmployeeResolutionError(
                f"Malformed response from search API: {e}",
                proposed_by=query,
            ) from e

    def top_hit(self, query: str) -> Optional[EmployeeSearchHit]:
        """Best match for query, or None when the index has no hits."""
        return self.search(query, limit=1).first_hit()
