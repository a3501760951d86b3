"""Unit tests for OpportunityClient with mocked HTTP."""

import httpx
import pytest

from conftest import json_response, mock_client
from proposal_enricher.clients import OpportunityClient
from proposal_enricher.config import EnrichmentConfig
from proposal_enricher.errors import OpportunityFetchError


class TestOpportunityClientUrl:
    """Tests for URL building."""

    def test_appends_opportunity_path(self, config: EnrichmentConfig) -> None:
        """Number is appended under /opportunity."""
        client = OpportunityClient(config, client=mock_client(lambda r: json_response(200, {})))
        assert client.url_for("OPP-1") == "http://opps.test/api/salesforce/opportunity/OPP-1"

    def test_trailing_slash_on_base(self) -> None:
        """Trailing slash on the configured base is ignored."""
        config = EnrichmentConfig(opportunity_api_base="http://opps.test/api/")
        client = OpportunityClient(config, client=mock_client(lambda r: json_response(200, {})))
        assert client.url_for("A") == "http://opps.test/api/opportunity/A"

    def test_number_is_path_escaped(self, config: EnrichmentConfig) -> None:
        """Slashes and spaces in the number cannot change the path."""
        client = OpportunityClient(config, client=mock_client(lambda r: json_response(200, {})))
        assert client.url_for("A/B C").endswith("/opportunity/A%2FB%20C")


class TestOpportunityClientGet:
    """Tests for get_opportunity."""

    def test_success_returns_record(self, config: EnrichmentConfig, opportunity_body: dict) -> None:
        """2xx with success=true and data returns the record via one GET."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return json_response(200, opportunity_body)

        record = OpportunityClient(config, client=mock_client(handler)).get_opportunity("OPP-1")
        assert record.client_name == "Acme Corp"
        assert record.status == "Won"
        assert len(seen) == 1
        assert seen[0].method == "GET"
        assert seen[0].url.path == "/api/salesforce/opportunity/OPP-1"

    def test_success_false_uses_api_message(self, config: EnrichmentConfig) -> None:
        """success=false raises with the API's message."""
        handler = lambda r: json_response(200, {"success": False, "message": "Opportunity OPP-9 not found"})
        client = OpportunityClient(config, client=mock_client(handler))
        with pytest.raises(OpportunityFetchError, match="Opportunity OPP-9 not found") as exc_info:
            client.get_opportunity("OPP-9")
        assert exc_info.value.opportunity_number == "OPP-9"

    def test_success_false_without_message_uses_default(self, config: EnrichmentConfig) -> None:
        """Default message when the API gives none."""
        client = OpportunityClient(config, client=mock_client(lambda r: json_response(200, {"success": False})))
        with pytest.raises(OpportunityFetchError, match="Failed to fetch opportunity data"):
            client.get_opportunity("OPP-9")

    def test_missing_data_raises(self, config: EnrichmentConfig) -> None:
        """success=true without data is a failure."""
        client = OpportunityClient(config, client=mock_client(lambda r: json_response(200, {"success": True})))
        with pytest.raises(OpportunityFetchError):
            client.get_opportunity("OPP-1")

    def test_http_error_status_raises(self, config: EnrichmentConfig, opportunity_body: dict) -> None:
        """Non-2xx fails even if the body claims success."""
        client = OpportunityClient(config, client=mock_client(lambda r: json_response(500, opportunity_body)))
        with pytest.raises(OpportunityFetchError):
            client.get_opportunity("OPP-1")

    def test_404_with_message(self, config: EnrichmentConfig) -> None:
        """404 body message is surfaced."""
        handler = lambda r: json_response(404, {"success": False, "message": "not found"})
        client = OpportunityClient(config, client=mock_client(handler))
        with pytest.raises(OpportunityFetchError, match="not found"):
            client.get_opportunity("OPP-404")

    def test_invalid_json_raises(self, config: EnrichmentConfig) -> None:
        """Non-JSON body is wrapped."""
        handler = lambda r: httpx.Response(502, content=b"<html>Bad Gateway</html>")
        client = OpportunityClient(config, client=mock_client(handler))
        with pytest.raises(OpportunityFetchError, match="Malformed response") as exc_info:
            client.get_opportunity("OPP-1")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_schema_mismatch_raises(self, config: EnrichmentConfig) -> None:
        """Body that does not match the envelope is wrapped."""
        client = OpportunityClient(config, client=mock_client(lambda r: json_response(200, ["unexpected"])))
        with pytest.raises(OpportunityFetchError, match="Malformed response"):
            client.get_opportunity("OPP-1")

    def test_transport_error_raises(self, config: EnrichmentConfig) -> None:
        """Connection failures are wrapped with the cause chained."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = OpportunityClient(config, client=mock_client(handler))
        with pytest.raises(OpportunityFetchError, match="Request to opportunity API failed") as exc_info:
            client.get_opportunity("OPP-1")
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
