"""Pytest fixtures for proposal-enricher tests."""

import json
import tempfile
from pathlib import Path
from typing import Callable

import httpx
import pytest

from proposal_enricher.config import EnrichmentConfig
from proposal_enricher.store import EmployeeStore, ProposalStore

OPPORTUNITY_BASE = "http://opps.test/api/salesforce"
SEARCH_BASE = "http://search.test"


def json_response(status_code: int, body) -> httpx.Response:
    """httpx response with a JSON body."""
    return httpx.Response(status_code, content=json.dumps(body).encode(), headers={"Content-Type": "application/json"})


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    """httpx client whose requests are answered by handler."""
    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture
def config() -> EnrichmentConfig:
    """Config pointing at fake hosts."""
    return EnrichmentConfig(
        opportunity_api_base=OPPORTUNITY_BASE,
        search_api_base=SEARCH_BASE,
        search_api_key="test-key",
    )


@pytest.fixture
def temp_db() -> Path:
    """Temporary database path for isolated tests."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        path = Path(f.name)
    yield path
    path.unlink(missing_ok=True)


@pytest.fixture
def employee_store(temp_db: Path) -> EmployeeStore:
    return EmployeeStore(temp_db)


@pytest.fixture
def proposal_store(temp_db: Path) -> ProposalStore:
    return ProposalStore(temp_db)


@pytest.fixture
def opportunity_body() -> dict:
    """Successful Salesforce-dummy response for OPP-1."""
    return {
        "success": True,
        "data": {
            "opportunityNumber": "OPP-1",
            "proposalName": "Data Platform Modernisation",
            "clientName": "Acme Corp",
            "value": "250000",
            "status": "Won",
            "description": "Phase 1: discovery\nPhase 2: migration",
        },
    }


@pytest.fixture
def jane_hit() -> dict:
    """Search hit for Jane Doe."""
    return {
        "id": "emp-42",
        "name": "Jane Doe",
        "email": "jane.doe@example.com",
        "role": "Solutions Architect",
        "department": "Engineering",
    }


@pytest.fixture
def api_router(opportunity_body: dict, jane_hit: dict):
    """
    Request handler answering both APIs. Mutate .opportunity / .search
    (status, body) to change the responses; .requests records every call.
    """

    class Router:
        def __init__(self) -> None:
            self.opportunity = (200, opportunity_body)
            self.search = (200, {"hits": [jane_hit], "limit": 1, "offset": 0})
            self.requests: list[httpx.Request] = []

        def __call__(self, request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if request.url.host == "opps.test":
                return json_response(*self.opportunity)
            return json_response(*self.search)

        def hosts(self) -> list[str]:
            return [r.url.host for r in self.requests]

    return Router()
