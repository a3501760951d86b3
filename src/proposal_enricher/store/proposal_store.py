"""SQLite-backed proposal store."""

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from proposal_enricher.models.employee import EmployeeEntity
from proposal_enricher.models.proposal import ProposalPayload, StoredProposal


class ProposalStore:
    """
    SQLite store for persisted proposals.
    Payload fields are kept as a JSON blob keyed by wire alias; the
    opportunity number and employee link are mirrored into columns for lookup.
    """

    def __init__(self, db_path: str | Path = "proposals.db"):
        self._db_path = Path(db_path)
        self._ensure_schema()

    def _connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        schema_path = Path(__file__).parent / "schema.sql"
        with self._connection() as conn:
            conn.executescript(schema_path.read_text())

    def _deserialize(
        self,
        row: sqlite3.Row,
        employee: Optional[EmployeeEntity] = None,
    ) -> StoredProposal:
        data = json.loads(row["data"])
        data.update(
            id=row["id"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
            employee=employee,
        )
        return StoredProposal.model_validate(data)

    def _employee(self, conn: sqlite3.Connection, employee_id: Optional[int]) -> Optional[EmployeeEntity]:
        if employee_id is None:
            return None
        row = conn.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
        return EmployeeEntity.model_validate(dict(row)) if row else None

    def get(self, proposal_id: int, *, populate_employee: bool = False) -> Optional[StoredProposal]:
        """Get single proposal by id. populate_employee also loads the linked employee."""
        with self._connection() as conn:
            row = conn.execute("SELECT * FROM proposals WHERE id = ?", (proposal_id,)).fetchone()
            if not row:
                return None
            employee = self._employee(conn, row["choose_employee"]) if populate_employee else None
        return self._deserialize(row, employee)

    def create(self, payload: ProposalPayload) -> StoredProposal:
        """Insert a new proposal and return it with its id."""
        now = datetime.now(timezone.utc).isoformat()
        data = payload.changes()
        with self._connection() as conn:
            cursor = conn.execute(
                """
                INSERT INTO proposals (opportunity_number, choose_employee, data, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (payload.opportunity_number, payload.choose_employee, json.dumps(data), now, now),
            )
            conn.commit()
            row = conn.execute("SELECT * FROM proposals WHERE id = ?", (cursor.lastrowid,)).fetchone()
        return self._deserialize(row)

    def update(self, proposal_id: int, payload: ProposalPayload) -> StoredProposal:
        """Merge the fields set on payload into the stored proposal."""
        existing = self.get(proposal_id)
        if existing is None:
            raise ValueError(f"Proposal not found: {proposal_id}")
        data = existing.payload_data()
        data.update(payload.changes())
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            conn.execute(
                """
                UPDATE proposals SET
                    opportunity_number = ?, choose_employee = ?, data = ?, updated_at = ?
                WHERE id = ?
                """,
                (data.get("opportunityNumber"), data.get("chooseEmployee"), json.dumps(data), now, proposal_id),
            )
            conn.commit()
            row = conn.execute("SELECT * FROM proposals WHERE id = ?", (proposal_id,)).fetchone()
        return self._deserialize(row)

    def list_all(self) -> list[StoredProposal]:
        """Return all proposals, newest first."""
        with self._connection() as conn:
            rows = conn.execute("SELECT * FROM proposals ORDER BY id DESC").fetchall()
        return [self._deserialize(r) for r in rows]
