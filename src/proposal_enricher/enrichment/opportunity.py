"""Populate proposal fields from the opportunity API."""

import logging
from typing import Optional

from pydantic import BaseModel, Field

from proposal_enricher.clients.opportunity import OpportunityClient
from proposal_enricher.models.opportunity import OpportunityRecord, OpportunityValue
from proposal_enricher.models.proposal import ProposalPayload
from proposal_enricher.richtext import ParagraphBlock, to_rich_text

logger = logging.getLogger(__name__)


class EnrichedFields(BaseModel):
    """The five proposal fields written from one opportunity."""

    proposal_name: Optional[str] = None
    client_name: Optional[str] = None
    value: Optional[OpportunityValue] = None
    pstatus: Optional[str] = None
    description: list[ParagraphBlock] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: OpportunityRecord) -> "EnrichedFields":
        return cls(
            proposal_name=record.proposal_name,
            client_name=record.client_name,
            value=record.value,
            pstatus=record.status,
            description=to_rich_text(record.description),
        )

    def apply_to(self, proposal: ProposalPayload) -> None:
        """Overwrite all five fields on proposal."""
        proposal.proposal_name = self.proposal_name
        proposal.client_name = self.client_name
        proposal.value = self.value
        proposal.pstatus = self.pstatus
        proposal.description = self.description


class OpportunityEnricher:
    """Fetches opportunity details and copies them onto a proposal."""

    def __init__(self, client: OpportunityClient):
        self._client = client

    def fetch(self, opportunity_number: str) -> EnrichedFields:
        """Fetch fields for opportunity_number. Raises OpportunityFetchError."""
        record = self._client.get_opportunity(opportunity_number)
        return EnrichedFields.from_record(record)

    def enrich(self, proposal: ProposalPayload, opportunity_number: str) -> EnrichedFields:
        """
        Fetch and apply. Fields are only written once the fetch has fully
        succeeded, so a failure leaves the proposal untouched.
        """
        fields = self.fetch(opportunity_number)
        fields.apply_to(proposal)
        logger.info("Populated proposal fields from opportunity %s", opportunity_number)
        return fields
