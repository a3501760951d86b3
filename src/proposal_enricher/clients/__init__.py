"""HTTP clients for the external opportunity and search APIs."""

from proposal_enricher.clients.opportunity import OpportunityClient
from proposal_enricher.clients.search import EmployeeSearchClient

__all__ = ["EmployeeSearchClient", "OpportunityClient"]
