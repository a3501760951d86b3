"""Proposal persistence around the lifecycle hooks: hook first, then write."""

from typing import Optional

from proposal_enricher.lifecycles import ProposalLifecycle
from proposal_enricher.models.proposal import ProposalPayload, StoredProposal
from proposal_enricher.store import ProposalStore


class ProposalService:
    """Creates and updates proposals the way the CMS does: run the hook, then persist."""

    def __init__(self, lifecycle: ProposalLifecycle, proposal_store: ProposalStore):
        self._lifecycle = lifecycle
        self._store = proposal_store

    def create(self, data: ProposalPayload) -> StoredProposal:
        """
        Run before_create, then insert. If the hook raises, nothing is
        written and the error propagates.
        """
        self._lifecycle.before_create(data)
        return self._store.create(data)

    def update(self, proposal_id: int, data: ProposalPayload) -> StoredProposal:
        """Run before_update, then merge the set fields into the stored proposal."""
        if self._store.get(proposal_id) is None:
            raise ValueError(f"Proposal not found: {proposal_id}")
        self._lifecycle.before_update(data, proposal_id)
        return self._store.update(proposal_id, data)

    def get(self, proposal_id: int, *, populate_employee: bool = False) -> Optional[StoredProposal]:
        return self._store.get(proposal_id, populate_employee=populate_employee)
