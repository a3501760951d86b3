"""Proposal payload and persisted proposal models."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from proposal_enricher.models.employee import EmployeeEntity
from proposal_enricher.models.opportunity import OpportunityValue
from proposal_enricher.richtext import ParagraphBlock


class ProposalPayload(BaseModel):
    """
    Proposal data handed to the lifecycle hooks before persistence.
    Mutated in place by the hooks. Only fields that were supplied or
    assigned are in model_fields_set, so an update payload carries just
    the fields it changes. Unknown fields are kept.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    opportunity_number: Optional[str] = Field(default=None, alias="opportunityNumber")
    proposed_by: Optional[str] = Field(default=None, alias="proposedBy")
    proposal_name: Optional[str] = Field(default=None, alias="proposalName")
    client_name: Optional[str] = Field(default=None, alias="clientName")
    value: Optional[OpportunityValue] = None
    pstatus: Optional[str] = None
    description: Optional[list[ParagraphBlock]] = None
    choose_employee: Optional[int] = Field(default=None, alias="chooseEmployee")

    def changes(self) -> dict[str, Any]:
        """Set fields only, keyed by wire alias, JSON-ready."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class StoredProposal(ProposalPayload):
    """Proposal as persisted in the local store."""

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    employee: Optional[EmployeeEntity] = None

    def payload_data(self) -> dict[str, Any]:
        """Stored payload fields only (no id, timestamps or populated relations), without filled-in defaults."""
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude_unset=True,
            exclude={"id", "created_at", "updated_at", "employee"},
        )
