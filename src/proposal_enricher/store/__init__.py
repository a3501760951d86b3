"""Local SQLite storage for employees and proposals."""

from proposal_enricher.store.employee_store import EmployeeStore
from proposal_enricher.store.proposal_store import ProposalStore

__all__ = ["EmployeeStore", "ProposalStore"]
