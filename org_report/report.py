"""
Organizational Report — Report Builder v1.0

Joins every employee with its resolved department and its manager's
name, orders the rows, and renders header + CSV lines.

Ordering (ascending, in priority order):
  1. department name
  2. rows without a manager name first
  3. department heads first
  4. employee name

Rendering uses standard CSV quoting: a field holding a comma, a quote
or a line break is quoted, embedded quotes doubled.
"""

from __future__ import annotations

import csv
import io
from typing import Dict, Iterable, List, Sequence

from .domain_types import Department, Employee, ReportRow
from .extractor import extract_records
from .hierarchy import HierarchyResolver, index_employees


REPORT_HEADER: str = "id,name,department,manager"


def generate_report(document: str) -> List[str]:
    """
    Full pipeline: JSON document -> [header, row, row, ...].

    Length is always employee count + 1. Any ReportError aborts the
    whole report.
    """
    departments_by_head, employees = extract_records(document)
    rows = build_report_rows(departments_by_head, employees)
    return [REPORT_HEADER] + render_rows(rows)


def build_report_rows(
    departments_by_head: Dict[int, Department],
    employees: Sequence[Employee],
) -> List[ReportRow]:
    """Build one ReportRow per employee, already sorted."""
    employees_by_id = index_employees(employees)
    resolver = HierarchyResolver(departments_by_head, employees_by_id)

    rows = [
        ReportRow(
            id=employee.id,
            name=employee.name,
            department=resolver.resolve_department(employee),
            manager_name=manager_name(employees_by_id, employee),
        )
        for employee in employees
    ]
    return sort_rows(rows)


def manager_name(employees_by_id: Dict[int, Employee], employee: Employee) -> str:
    """Display name of employee's manager, "" if none or unknown."""
    if not employee.has_manager:
        return ""
    manager = employees_by_id.get(employee.manager_id)
    return manager.name if manager is not None else ""


def sort_rows(rows: Iterable[ReportRow]) -> List[ReportRow]:
    return sorted(rows, key=lambda row: row.sort_key())


def render_rows(rows: Iterable[ReportRow]) -> List[str]:
    """Render rows as CSV lines (no line terminator)."""
    return [render_fields(row.to_fields()) for row in rows]


def render_fields(fields: Sequence[str]) -> str:
    # keep the "\r\n" terminator so embedded line breaks still get quoted
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\r\n").writerow(fields)
    return buf.getvalue()[:-2]
