"""Enrichment steps run by the proposal lifecycle hooks."""

from proposal_enricher.enrichment.employee import EmployeeResolver
from proposal_enricher.enrichment.opportunity import EnrichedFields, OpportunityEnricher

__all__ = ["EmployeeResolver", "EnrichedFields", "OpportunityEnricher"]
