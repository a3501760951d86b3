"""SQLite store for employees, unique by email."""

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from proposal_enricher.models.employee import EmployeeEntity


class EmployeeStore:
    """
    SQLite store for local employee records.
    email carries a UNIQUE constraint; get_or_create inserts with
    ON CONFLICT(email) DO NOTHING and then reads the row back, so concurrent
    callers resolving the same new email end up sharing one record.
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

    def _row_to_employee(self, row: sqlite3.Row) -> EmployeeEntity:
        return EmployeeEntity.model_validate(dict(row))

    def get(self, employee_id: int) -> Optional[EmployeeEntity]:
        """Get employee by id."""
        with self._connection() as conn:
            row = conn.execute("SELECT * FROM employees WHERE id = ?", (employee_id,)).fetchone()
        return self._row_to_employee(row) if row else None

    def find_by_email(self, email: str) -> Optional[EmployeeEntity]:
        """Get employee by exact email match."""
        with self._connection() as conn:
            row = conn.execute(
                "SELECT * FROM employees WHERE email = ? LIMIT 1", (email,)
            ).fetchone()
        return self._row_to_employee(row) if row else None

    def get_or_create(
        self,
        email: str,
        *,
        employee_name: Optional[str] = None,
        job_title: Optional[str] = None,
        department: Optional[str] = None,
    ) -> tuple[EmployeeEntity, bool]:
        """
        Return (employee, created). An existing row is returned unchanged,
        even when the given fields differ from what is stored.
        """
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            cursor = conn.execute(
                """
                INSERT INTO employees (employee_name, email, job_title, department, created_at)
                VALUES (?, ?, ?, ?, ?)
                ON CONFLICT(email) DO NOTHING
                """,
                (employee_name, email, job_title, department, now),
            )
            created = cursor.rowcount == 1
            row = conn.execute("SELECT * FROM employees WHERE email = ?", (email,)).fetchone()
            conn.commit()
        return self._row_to_employee(row), created

    def list_all(self) -> list[EmployeeEntity]:
        """Return all employees, oldest first."""
        with self._connection() as conn:
            rows = conn.execute("SELECT * FROM employees ORDER BY id").fetchall()
        return [self._row_to_employee(r) for r in rows]
