"""Exceptions raised by the enrichment steps."""

from typing import Optional


class EnrichmentError(Exception):
    """Base class for enrichment failures."""


class OpportunityFetchError(EnrichmentError):
    """Opportunity API returned a bad or missing response, or the request failed."""

    def __init__(self, message: str, opportunity_number: Optional[str] = None):
        super().__init__(message)
        self.opportunity_number = opportunity_number


class EmployeeResolutionError(EnrichmentError):
    """Employee search, lookup, or creation failed."""

    def __init__(self, message: str, proposed_by: Optional[str] = None):
        super().__init__(message)
        self.proposed_by = proposed_by
