"""Resolve free-text 'proposed by' names to local employee records."""

import logging
import sqlite3
from typing import Optional

from proposal_enricher.clients.search import EmployeeSearchClient
from proposal_enricher.errors import EmployeeResolutionError
from proposal_enricher.models.proposal import ProposalPayload
from proposal_enricher.store.employee_store import EmployeeStore

logger = logging.getLogger(__name__)


class EmployeeResolver:
    """
    Searches the employee index for a name, upserts the top hit into the
    local store by email, and links the proposal to it.
    """

    def __init__(self, search_client: EmployeeSearchClient, employee_store: EmployeeStore):
        self._search = search_client
        self._store = employee_store

    def resolve(self, proposed_by: str) -> Optional[int]:
        """
        Return the local employee id for proposed_by, or None when the search
        has no hits. Raises EmployeeResolutionError on search or store failure.
        """
        hit = self._search.top_hit(proposed_by)
        if hit is None:
            logger.warning(
                "No employee found in search index for proposedBy %r; chooseEmployee not set",
                proposed_by,
            )
            return None

        try:
            employee, created = self._store.get_or_create(
                hit.email,
                employee_name=hit.name,
                job_title=hit.role,
                department=hit.department,
            )
        except sqlite3.Error as e:
            raise EmployeeResolutionError(
                f"Could not store employee {hit.email}: {e}",
                proposed_by=proposed_by,
            ) from e

        if created:
            logger.info("Created employee %d for %s", employee.id, employee.email)
        else:
            logger.info("Found existing employee %d for %s", employee.id, employee.email)
        return employee.id

    def apply(self, proposal: ProposalPayload, proposed_by: str) -> Optional[int]:
        """Resolve and set chooseEmployee. With no hit the relation is left as it was."""
        employee_id = self.resolve(proposed_by)
        if employee_id is not None:
            proposal.choose_employee = employee_id
            logger.info("Linked proposal to employee %d", employee_id)
        return employee_id
