"""Opportunity API response models."""

from typing import Optional, Union

from pydantic import BaseModel, Field

# The API sends value as a string, but numbers are passed through as-is
OpportunityValue = Union[str, int, float]


class OpportunityRecord(BaseModel):
    """Opportunity details as returned by the Salesforce-dummy API."""

    opportunity_number: Optional[str] = Field(default=None, alias="opportunityNumber")
    proposal_name: Optional[str] = Field(default=None, alias="proposalName")
    client_name: Optional[str] = Field(default=None, alias="clientName")
    value: Optional[OpportunityValue] = None
    status: Optional[str] = None
    description: Optional[str] = None


class OpportunityResponse(BaseModel):
    """Envelope: {success, data?, message?}."""

    success: bool
    data: Optional[OpportunityRecord] = None
    message: Optional[str] = None
