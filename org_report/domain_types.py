"""
Organizational Report — Core Domain Types v1.0

Pure data. No parsing, no resolution logic.
Every record is immutable once extracted.

────────────────────────────────────────────────
DOMAIN GLOSSARY
────────────────────────────────────────────────

Department head:
    The employee a Department record names as its leader.

Manager chain:
    Successive manager_id references from an employee up toward an
    employee with no manager.

Corporate:
    Synthetic fallback department for employees that no real
    department head can be reached from.

────────────────────────────────────────────────
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


# ── Core Domain Types ─────────────────────────────────────────

@dataclass(frozen=True)
class Department:
    """One organizational unit, led by the employee department_head_id."""

    id: int
    name: str
    department_head_id: int


@dataclass(frozen=True)
class Employee:
    """A single employee. manager_id is None for an organizational root."""

    id: int
    name: str
    manager_id: Optional[int] = None

    @property
    def has_manager(self) -> bool:
        return self.manager_id is not None


# ── Fallback Department ──────────────────────────────────────
CORPORATE: Department = Department(id=0, name="Corporate", department_head_id=0)


@dataclass(frozen=True)
class ReportRow:
    """
    One report line: an employee joined with its resolved department
    and the display name of its manager ("" when there is none).
    """

    id: int
    name: str
    department: Department
    manager_name: str = ""

    @property
    def is_department_head(self) -> bool:
        return self.id == self.department.department_head_id

    @property
    def has_no_manager(self) -> bool:
        return self.manager_name == ""

    def sort_key(self) -> Tuple[str, int, int, str]:
        """
        (department name, manager-less first, head first, name).

        The two flags are independent: the first floats the
        organizational root to the top of its group, the second floats
        each department's head, alphabetical order breaks the rest.
        """
        return (
            self.department.name,
            0 if self.has_no_manager else 1,
            0 if self.is_department_head else 1,
            self.name,
        )

    def to_fields(self) -> Tuple[str, str, str, str]:
        """Field values in header order, ready for CSV rendering."""
        return (str(self.id), self.name, self.department.name, self.manager_name)
