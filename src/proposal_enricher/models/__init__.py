"""Data models for proposals, opportunities and employees."""

from proposal_enricher.models.employee import EmployeeEntity, EmployeeSearchHit, SearchResponse
from proposal_enricher.models.opportunity import OpportunityRecord, OpportunityResponse
from proposal_enricher.models.proposal import ProposalPayload, StoredProposal

__all__ = [
    "EmployeeEntity",
    "EmployeeSearchHit",
    "OpportunityRecord",
    "OpportunityResponse",
    "ProposalPayload",
    "SearchResponse",
    "StoredProposal",
]
