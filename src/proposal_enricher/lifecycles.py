"""Lifecycle hooks run before a proposal is created or updated."""

import logging
from pathlib import Path
from typing import Optional

import httpx

from proposal_enricher.clients import EmployeeSearchClient, OpportunityClient
from proposal_enricher.config import EnrichmentConfig
from proposal_enricher.enrichment import EmployeeResolver, OpportunityEnricher
from proposal_enricher.errors import EmployeeResolutionError, OpportunityFetchError
from proposal_enricher.models.proposal import ProposalPayload, StoredProposal
from proposal_enricher.store import EmployeeStore, ProposalStore

logger = logging.getLogger(__name__)


class ProposalLifecycle:
    """
    before_create / before_update hooks for proposals.

    Both hooks run the opportunity step and then the employee step on the
    pending payload. On create a failure in either step aborts the create.
    On update failures are logged and the update goes ahead with whatever
    fields are already on the payload.
    """

    def __init__(
        self,
        opportunity_enricher: OpportunityEnricher,
        employee_resolver: EmployeeResolver,
        proposal_store: ProposalStore,
    ):
        self._opportunities = opportunity_enricher
        self._employees = employee_resolver
        self._proposals = proposal_store

    @classmethod
    def from_config(
        cls,
        config: EnrichmentConfig,
        db_path: str | Path,
        *,
        http_client: Optional[httpx.Client] = None,
    ) -> "ProposalLifecycle":
        """Wire clients and stores from config. http_client is shared by both API clients when given."""
        return cls(
            OpportunityEnricher(OpportunityClient(config, client=http_client)),
            EmployeeResolver(
                EmployeeSearchClient(config, client=http_client),
                EmployeeStore(db_path),
            ),
            ProposalStore(db_path),
        )

    def before_create(self, data: ProposalPayload) -> None:
        """Enrich a new proposal. Raises OpportunityFetchError or EmployeeResolutionError."""
        if data.opportunity_number:
            try:
                self._opportunities.enrich(data, data.opportunity_number)
            except OpportunityFetchError as e:
                logger.error("Opportunity fetch failed for %s: %s", data.opportunity_number, e)
                raise OpportunityFetchError(
                    f"Error fetching Salesforce data: {e}. Cannot create proposal.",
                    opportunity_number=data.opportunity_number,
                ) from e
        else:
            logger.info("No opportunityNumber provided; skipping opportunity fetch")

        if data.proposed_by:
            logger.info("Processing proposedBy: %s", data.proposed_by)
            try:
                self._employees.apply(data, data.proposed_by)
            except EmployeeResolutionError as e:
                logger.error("Employee resolution failed for %r: %s", data.proposed_by, e)
                raise EmployeeResolutionError(
                    f"Error processing employee data: {e}. Cannot create proposal.",
                    proposed_by=data.proposed_by,
                ) from e
        else:
            logger.info("No proposedBy provided; skipping employee lookup")

    def before_update(self, data: ProposalPayload, proposal_id: int) -> None:
        """
        Enrich a partial update. Missing opportunityNumber / proposedBy are
        taken from the stored proposal. Enrichment failures never raise.
        """
        existing: Optional[StoredProposal] = None
        looked_up = False

        opportunity_number = data.opportunity_number
        if not opportunity_number:
            existing = self._proposals.get(proposal_id)
            looked_up = True
            opportunity_number = existing.opportunity_number if existing else None

        if opportunity_number:
            try:
                self._opportunities.enrich(data, opportunity_number)
            except OpportunityFetchError as e:
                logger.warning(
                    "Could not re-fetch opportunity %s for proposal %s, keeping existing fields: %s",
                    opportunity_number,
                    proposal_id,
                    e,
                )
        else:
            logger.info("No opportunityNumber available for proposal %s; skipping re-fetch", proposal_id)

        proposed_by = data.proposed_by
        if not proposed_by:
            if not looked_up:
                existing = self._proposals.get(proposal_id, populate_employee=True)
            proposed_by = existing.proposed_by if existing else None

        if proposed_by:
            logger.info("Re-processing proposedBy on update: %s", proposed_by)
            try:
                self._employees.apply(data, proposed_by)
            except EmployeeResolutionError as e:
                logger.warning(
                    "Could not resolve employee %r for proposal %s, keeping existing link: %s",
                    proposed_by,
                    proposal_id,
                    e,
                )
        else:
            logger.info("No proposedBy available for proposal %s; skipping employee lookup", proposal_id)
