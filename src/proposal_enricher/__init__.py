"""Proposal enrichment hooks: opportunity details and employee linking."""

from proposal_enricher.config import EnrichmentConfig
from proposal_enricher.errors import EmployeeResolutionError, EnrichmentError, OpportunityFetchError
from proposal_enricher.lifecycles import ProposalLifecycle
from proposal_enricher.richtext import to_rich_text
from proposal_enricher.service import ProposalService

__all__ = [
    "EmployeeResolutionError",
    "EnrichmentConfig",
    "EnrichmentError",
    "OpportunityFetchError",
    "ProposalLifecycle",
    "ProposalService",
    "to_rich_text",
]
